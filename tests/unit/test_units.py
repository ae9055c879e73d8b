"""
Sanity-тест для модуля Units

Проверяет:
1. Константы времени блока
2. Конверсию окна решения из блоков в шаги домена
3. Отклонение окна короче одного дня
"""

import pytest

from referenda_curves.core.domain.units import (
    DAYS,
    HOURS,
    MINUTES,
    WEEKS,
    Time,
    TimeLength,
    decision_period,
)
from referenda_curves.core.math.fixed_point import DomainError


class TestBlockTime:
    """Тесты констант времени блока (12 секунд)"""

    def test_constants(self) -> None:
        assert MINUTES == 5
        assert HOURS == 300
        assert DAYS == 7_200
        assert WEEKS == 50_400


class TestDecisionPeriod:
    """Тесты decision_period"""

    @pytest.mark.parametrize(
        "unit, expected",
        [
            (Time.DAY, 14),
            (Time.HOUR, 336),
            (Time.MINUTE, 20_160),
            (Time.SECOND, 1_209_600),
        ],
    )
    def test_fourteen_days(self, unit, expected) -> None:
        """14 дней в разных единицах"""
        time = decision_period(unit, 14 * DAYS)
        assert time == TimeLength(unit=unit, length=expected)
        assert time.days == 14

    def test_partial_day_rounded_down(self) -> None:
        """Неполный день отбрасывается"""
        assert decision_period(Time.HOUR, 14 * DAYS + 12 * HOURS).length == 336

    def test_shorter_than_day_raises(self) -> None:
        """Окно короче дня даёт пустой домен"""
        with pytest.raises(DomainError, match="shorter than one day"):
            decision_period(Time.HOUR, DAYS - 1)

    def test_labels(self) -> None:
        assert Time.HOUR.plural == "Hours"
        assert Time.DAY.steps_per_day == 1

    def test_steps_per_day_for_every_unit(self) -> None:
        """Каждая единица Time имеет целое число шагов в сутках"""
        steps = {unit: unit.steps_per_day for unit in Time}
        assert steps == {Time.DAY: 1, Time.HOUR: 24, Time.MINUTE: 1440, Time.SECOND: 86400}
        assert all(type(n) is int for n in steps.values())
