"""
Тесты для CurvePoints — дискретизированная кривая трека

Покрывает:
- Построение из кривой и окна решения
- Порядок точек для CSV (выборка, min, max, пороги)
- Целые проценты для графиков
- Immutability (frozen=True)
"""

import dataclasses

import pytest

from referenda_curves.core.domain.curve import make_linear
from referenda_curves.core.domain.points import Point
from referenda_curves.core.domain.units import DAYS, Time, decision_period
from referenda_curves.core.math.fixed_point import DomainError, FixedFraction, SignedFixed
from referenda_curves.sampling.curve_points import CurvePoints, CurveType


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def root_support():
    """Support кривая трека root: 50% → 0% за 14 дней, по часам."""
    curve = make_linear(14, 14, SignedFixed.from_percent(0), SignedFixed.from_percent(50))
    return CurvePoints.from_curve(
        CurveType.SUPPORT, 0, "root", decision_period(Time.HOUR, 14 * DAYS), curve
    )


# =============================================================================
# ТЕСТЫ
# =============================================================================


class TestCurvePoints:
    """Тесты CurvePoints.from_curve"""

    def test_coordinates(self, root_support) -> None:
        assert len(root_support.coordinates) == 337
        assert root_support.coordinates[0] == Point(0, FixedFraction.from_percent(50))
        assert root_support.coordinates[-1] == Point(336, FixedFraction.zero())

    def test_extremum(self, root_support) -> None:
        assert root_support.extremum.min == Point(336, FixedFraction.zero())
        assert root_support.extremum.max == Point(0, FixedFraction.from_percent(50))

    def test_thresholds_inside_range(self, root_support) -> None:
        """Пороги 1%..49% и 0.1%, 0.01% между 0% и 50%"""
        assert root_support.thresholds
        ys = {p.y for p in root_support.thresholds}
        assert FixedFraction.from_percent(1) in ys
        assert FixedFraction.from_percent(49) in ys
        assert FixedFraction.from_percent(50) not in ys
        assert FixedFraction.zero() not in ys

    def test_threshold_location(self, root_support) -> None:
        """25% достигается ровно в середине окна"""
        by_y = {p.y: p.x for p in root_support.thresholds}
        assert by_y[FixedFraction.from_percent(25)] == 168

    def test_labelled_points_order(self, root_support) -> None:
        rows = root_support.labelled_points()
        assert len(rows) == 337 + 2 + len(root_support.thresholds)
        kinds = [kind for kind, _ in rows]
        assert kinds[:337] == ["sample"] * 337
        assert kinds[337:339] == ["min", "max"]
        assert set(kinds[339:]) <= {"threshold"}

    def test_rounded_points(self, root_support) -> None:
        rounded = root_support.rounded_points()
        assert rounded[0] == (0, 50)
        assert rounded[168] == (168, 25)
        assert rounded[-1] == (336, 0)

    def test_metadata(self, root_support) -> None:
        assert root_support.title == "root Support"
        assert root_support.unit is Time.HOUR
        assert root_support.time.length == 336
        assert root_support.time.days == 14

    def test_custom_catalog(self) -> None:
        curve = make_linear(14, 14, SignedFixed.from_percent(0), SignedFixed.from_percent(50))
        points = CurvePoints.from_curve(
            CurveType.SUPPORT, 0, "root", decision_period(Time.DAY, 14 * DAYS), curve,
            catalog=[FixedFraction.from_percent(25)],
        )
        assert points.thresholds == (Point(7, FixedFraction.from_percent(25)),)

    def test_frozen(self, root_support) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            root_support.name = "other"

    def test_y_axis_labels(self) -> None:
        assert "All Votes" in CurveType.APPROVAL.y_axis_label
        assert "Turnout" in CurveType.SUPPORT.y_axis_label


class TestPoint:
    """Тесты Point"""

    def test_negative_x_raises(self) -> None:
        with pytest.raises(DomainError):
            Point(-1, FixedFraction.zero())
