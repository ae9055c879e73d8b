"""Export of sampled curves: CSV points and PNG charts."""

from .csv_writer import CSV_FIELDNAMES, write_points_csv
from .plotting import plot_comparison, plot_curve

__all__ = [
    "CSV_FIELDNAMES",
    "write_points_csv",
    "plot_curve",
    "plot_comparison",
]
