"""Chart rendering for sampled curves.

- plot_curve: one curve, y-range padded around its extrema
- plot_comparison: all curves of one type on a shared 0-100% axis

All matplotlib imports are lazy (inside functions) and use the Agg backend,
so charts render without a display.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from referenda_curves.core.domain.units import TimeLength
from referenda_curves.sampling.curve_points import CurvePoints, CurveType

if TYPE_CHECKING:
    from matplotlib.figure import Figure

logger = logging.getLogger(__name__)

# Padding around the extrema on single-curve charts, in percentage points
Y_PADDING_PERCENT = 10


def _new_figure(width_px: int, height_px: int) -> Figure:
    import matplotlib

    matplotlib.use("Agg")
    from matplotlib.figure import Figure

    dpi = 100
    return Figure(figsize=(width_px / dpi, height_px / dpi), dpi=dpi)


def x_axis_label(time: TimeLength) -> str:
    return f"{time.unit.plural} into {time.days}-Day Decision Period"


def y_range(curve: CurvePoints) -> tuple[int, int]:
    """Chart y-limits: extrema padded by Y_PADDING_PERCENT, kept within 0..100."""
    y_min = curve.extremum.min.y.to_percent_coordinate()
    y_max = curve.extremum.max.y.to_percent_coordinate()
    low = y_min - Y_PADDING_PERCENT if y_min > Y_PADDING_PERCENT else 0
    high = y_max + Y_PADDING_PERCENT if y_max < 100 - Y_PADDING_PERCENT else 100
    return low, high


def plot_path(plots_dir: Path, curve: CurvePoints) -> Path:
    return plots_dir / f"{curve.title}.png"


def comparison_path(plots_dir: Path, curve_type: CurveType) -> Path:
    return plots_dir / f"{curve_type.value}s.png"


def plot_curve(curve: CurvePoints, plots_dir: Path) -> Path:
    """Render a single curve to ``<plots_dir>/<name> <Type>.png``."""
    fig = _new_figure(600, 400)
    ax = fig.add_subplot()
    xs, ys = zip(*curve.rounded_points())
    ax.plot(xs, ys, color="red")
    ax.set_xlim(0, curve.time.length + 20)
    ax.set_ylim(*y_range(curve))
    ax.set_title(f"{curve.title}, TrackID #{curve.track_id}")
    ax.set_xlabel(x_axis_label(curve.time), fontsize=9)
    ax.set_ylabel(curve.curve_type.y_axis_label, fontsize=7)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()

    path = plot_path(plots_dir, curve)
    fig.savefig(path)
    logger.debug("Rendered %s", path)
    return path


def shared_time(curves: Sequence[CurvePoints]) -> TimeLength:
    """Decision period shared by all curves.

    Raises:
        ValueError: If the list is empty or curves differ in length or unit.
    """
    if not curves:
        raise ValueError("No curves to compare")
    time = curves[0].time
    for curve in curves[1:]:
        if curve.time.unit != time.unit:
            raise ValueError("All curves must have consistent x units")
        if curve.time.length != time.length:
            raise ValueError("Decision Period not constant for all curves")
    return time


def plot_comparison(
    curve_type: CurveType, curves: Sequence[CurvePoints], plots_dir: Path
) -> Path:
    """Render every curve of ``curve_type`` on one chart (``Approvals.png`` / ``Supports.png``).

    Raises:
        ValueError: If curves do not share one decision period.
    """
    time = shared_time(curves)
    fig = _new_figure(1024, 768)
    ax = fig.add_subplot()
    for curve in curves:
        xs, ys = zip(*curve.rounded_points())
        ax.plot(xs, ys, linewidth=2, alpha=0.9, label=f"{curve.name}, ID # {curve.track_id}")
    ax.set_xlim(0, time.length)
    ax.set_ylim(0, 100)
    ax.set_title(f"{curve_type.value} Requirements", fontsize=20)
    ax.set_xlabel(x_axis_label(time))
    ax.set_ylabel(curve_type.y_axis_label)
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right", edgecolor="black")
    fig.tight_layout()

    path = comparison_path(plots_dir, curve_type)
    fig.savefig(path)
    logger.debug("Rendered %s", path)
    return path
