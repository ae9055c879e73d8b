"""CSV export of sampled curve points."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from referenda_curves.sampling.curve_points import CurvePoints

logger = logging.getLogger(__name__)

CSV_FIELDNAMES = ("x", "y", "kind")


def csv_path(points_dir: Path, curve: CurvePoints) -> Path:
    return points_dir / f"{curve.title}.csv"


def write_points_csv(curve: CurvePoints, points_dir: Path) -> Path:
    """Write every coordinate, the two extrema and the located thresholds.

    Rows keep the order of ``CurvePoints.labelled_points``; ``y`` is the exact
    percentage string of the fixed-point value.

    Returns:
        Path of the written file.
    """
    path = csv_path(points_dir, curve)
    rows = curve.labelled_points()
    with path.open("w", encoding="utf-8", newline="") as fh:
        writer = csv.DictWriter(fh, fieldnames=CSV_FIELDNAMES)
        writer.writeheader()
        for kind, point in rows:
            writer.writerow({"x": point.x, "y": str(point.y), "kind": kind})
    logger.debug("Wrote %d rows to %s", len(rows), path)
    return path
