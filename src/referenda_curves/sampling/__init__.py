"""Sampling — дискретизация кривых и поиск точек пересечения порогов."""

from .curve_points import CurvePoints, CurveType
from .sampler import THRESHOLD_CATALOG, InverseLookup, locate_thresholds, sample

__all__ = [
    "THRESHOLD_CATALOG",
    "InverseLookup",
    "sample",
    "locate_thresholds",
    "CurvePoints",
    "CurveType",
]
