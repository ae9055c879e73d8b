"""
Domain models and value objects.

Contains curve shapes, sampled points, time units and governance tracks.
"""

from referenda_curves.core.domain.curve import (
    Curve,
    LinearDecreasing,
    Reciprocal,
    SteppedDecreasing,
    ThresholdUnreachable,
    delay,
    make_linear,
    make_reciprocal,
    make_stepped,
    reciprocal_from_parts,
    threshold,
)
from referenda_curves.core.domain.points import ExtremumPair, Point, Points
from referenda_curves.core.domain.track import (
    CurveParams,
    LinearCurveParams,
    ReciprocalCurveParams,
    SteppedCurveParams,
    TrackInfo,
    TrackTable,
)
from referenda_curves.core.domain.units import (
    DAYS,
    HOURS,
    MILLISECS_PER_BLOCK,
    MINUTES,
    WEEKS,
    Time,
    TimeLength,
    decision_period,
)

__all__ = [
    # Curve
    "Curve",
    "LinearDecreasing",
    "SteppedDecreasing",
    "Reciprocal",
    "ThresholdUnreachable",
    "threshold",
    "delay",
    "make_linear",
    "make_reciprocal",
    "make_stepped",
    "reciprocal_from_parts",
    # Points
    "Point",
    "Points",
    "ExtremumPair",
    # Track models
    "CurveParams",
    "LinearCurveParams",
    "ReciprocalCurveParams",
    "SteppedCurveParams",
    "TrackInfo",
    "TrackTable",
    # Units module
    "MILLISECS_PER_BLOCK",
    "MINUTES",
    "HOURS",
    "DAYS",
    "WEEKS",
    "Time",
    "TimeLength",
    "decision_period",
]
