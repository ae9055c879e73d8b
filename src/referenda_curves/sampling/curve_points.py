"""CurvePoints — дискретизированная кривая одного трека, готовая к экспорту."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from referenda_curves.core.domain.curve import Curve
from referenda_curves.core.domain.points import ExtremumPair, Point, Points
from referenda_curves.core.domain.units import Time, TimeLength
from referenda_curves.core.math.fixed_point import FixedFraction
from referenda_curves.sampling.sampler import THRESHOLD_CATALOG, locate_thresholds, sample


class CurveType(str, Enum):
    """Назначение кривой трека.

    APPROVAL — доля голосов "за" (с учётом conviction) среди всех голосов.
    SUPPORT — доля голосов "за" (без conviction) от всего возможного turnout.
    """

    APPROVAL = "Approval"
    SUPPORT = "Support"

    @property
    def y_axis_label(self) -> str:
        if self is CurveType.APPROVAL:
            return "% of Votes in Favor / All Votes in This Referendum"
        return "% of Votes in This Referendum / Total Possible Turnout"


@dataclass(frozen=True)
class CurvePoints:
    """Результат дискретизации одной кривой одного трека."""

    curve_type: CurveType
    track_id: int
    name: str
    unit: Time
    coordinates: Points
    extremum: ExtremumPair
    thresholds: Points

    @classmethod
    def from_curve(
        cls,
        curve_type: CurveType,
        track_id: int,
        name: str,
        time: TimeLength,
        curve: Curve,
        catalog: Optional[Iterable[FixedFraction]] = None,
    ) -> "CurvePoints":
        """
        Дискретизация curve на time.length шагов и поиск порогов каталога.

        Raises:
            DomainError: Если time.length <= 0
        """
        coordinates, extremum = sample(curve, time.length)
        thresholds = locate_thresholds(
            curve,
            time.length,
            THRESHOLD_CATALOG if catalog is None else catalog,
            extremum.min.y,
            extremum.max.y,
        )
        return cls(
            curve_type=curve_type,
            track_id=track_id,
            name=name,
            unit=time.unit,
            coordinates=coordinates,
            extremum=extremum,
            thresholds=thresholds,
        )

    @property
    def title(self) -> str:
        return f"{self.name} {self.curve_type.value}"

    @property
    def time(self) -> TimeLength:
        """Длина окна решения (последний x)."""
        return TimeLength(unit=self.unit, length=self.coordinates[-1].x)

    def labelled_points(self) -> list[tuple[str, Point]]:
        """Все точки для CSV: выборка, min, max, затем пороги."""
        rows = [("sample", p) for p in self.coordinates]
        rows.append(("min", self.extremum.min))
        rows.append(("max", self.extremum.max))
        rows.extend(("threshold", p) for p in self.thresholds)
        return rows

    def rounded_points(self) -> list[tuple[int, int]]:
        """Точки в целых процентах для графиков."""
        return [(p.x, p.y.to_percent_coordinate()) for p in self.coordinates]
