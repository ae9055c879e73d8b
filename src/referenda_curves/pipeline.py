"""Pipeline — дискретизация кривых всех треков и экспорт результатов.

Порядок:
1. Подготовка выходных каталогов (очистка points/ и plots/ при overwrite_previous_data)
2. Для каждого трека: build кривых approval / support → CurvePoints
3. CSV и графики по каждой кривой
4. Сравнительные графики по типу кривой

DomainError при построении кривых трека прерывает только этот трек.
Кривые с разными окнами решения не сводятся в сравнительный график:
ошибка записывается в RunReport.failed_comparisons.
"""

import logging
import shutil
from dataclasses import dataclass, field

from referenda_curves.config import PlotterConfig
from referenda_curves.core.domain.track import TrackInfo, TrackTable
from referenda_curves.core.domain.units import decision_period
from referenda_curves.core.math.fixed_point import DomainError
from referenda_curves.export import plot_comparison, plot_curve, write_points_csv
from referenda_curves.sampling.curve_points import CurvePoints, CurveType

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    """Итог запуска: построенные кривые и треки, прерванные с ошибкой."""

    approval_curves: list[CurvePoints] = field(default_factory=list)
    support_curves: list[CurvePoints] = field(default_factory=list)
    failed_tracks: dict[str, str] = field(default_factory=dict)
    failed_comparisons: dict[CurveType, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed_tracks and not self.failed_comparisons


def prepare_output_dirs(config: PlotterConfig) -> None:
    """Создание points/ и plots/; прочие файлы в output_dir не трогаются."""
    for path in (config.points_dir, config.plots_dir):
        if config.overwrite_previous_data and path.exists():
            logger.info("Removing previous data in %s", path)
            shutil.rmtree(path)
        path.mkdir(parents=True, exist_ok=True)


def build_track_curves(
    track: TrackInfo, config: PlotterConfig
) -> tuple[CurvePoints, CurvePoints]:
    """
    Дискретизация кривых approval и support одного трека.

    Raises:
        DomainError: Если параметры трека нарушают инварианты кривой
    """
    time = decision_period(config.unit, track.decision_period)
    approval = CurvePoints.from_curve(
        CurveType.APPROVAL, track.id, track.name, time, track.min_approval.build()
    )
    support = CurvePoints.from_curve(
        CurveType.SUPPORT, track.id, track.name, time, track.min_support.build()
    )
    return approval, support


def export_curve(curve: CurvePoints, config: PlotterConfig) -> None:
    if config.write_csv:
        write_points_csv(curve, config.points_dir)
    if config.plot:
        plot_curve(curve, config.plots_dir)


def run(table: TrackTable, config: PlotterConfig) -> RunReport:
    """Построение и экспорт кривых всех треков таблицы."""
    prepare_output_dirs(config)
    report = RunReport()

    for track in table.tracks:
        try:
            approval, support = build_track_curves(track, config)
        except DomainError as e:
            logger.error("Track %s (#%d) aborted: %s", track.name, track.id, e)
            report.failed_tracks[track.name] = str(e)
            continue

        logger.info(
            "Track %s (#%d): %d points, %d/%d thresholds located",
            track.name,
            track.id,
            len(approval.coordinates),
            len(approval.thresholds),
            len(support.thresholds),
        )
        export_curve(approval, config)
        export_curve(support, config)
        report.approval_curves.append(approval)
        report.support_curves.append(support)

    if config.plot_comparison:
        for curve_type, curves in (
            (CurveType.APPROVAL, report.approval_curves),
            (CurveType.SUPPORT, report.support_curves),
        ):
            if not curves:
                continue
            try:
                plot_comparison(curve_type, curves, config.plots_dir)
            except ValueError as e:
                logger.error("%s comparison chart skipped: %s", curve_type.value, e)
                report.failed_comparisons[curve_type] = str(e)

    return report
