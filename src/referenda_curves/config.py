"""Конфигурация запуска построения кривых."""

from dataclasses import dataclass
from pathlib import Path

from referenda_curves.core.domain.units import Time


@dataclass(frozen=True)
class PlotterConfig:
    """Конфигурация одного запуска.

    Выходные файлы:
    - <output_dir>/points/<track> <Approval|Support>.csv
    - <output_dir>/plots/<track> <Approval|Support>.png
    - <output_dir>/plots/Approvals.png, Supports.png (сравнение)
    """

    output_dir: Path = Path("data")
    unit: Time = Time.HOUR
    write_csv: bool = True
    plot: bool = True
    plot_comparison: bool = True
    overwrite_previous_data: bool = True

    @property
    def points_dir(self) -> Path:
        return self.output_dir / "points"

    @property
    def plots_dir(self) -> Path:
        return self.output_dir / "plots"
