"""
Units — Единицы времени окна решения

Единственный допустимый способ преобразований между:
- блоками (длительности треков задаются в блоках)
- днями / часами / минутами / секундами (ось x графиков и CSV)

ЗАПРЕЩЕНО делить длительность в блоках на константы напрямую в других модулях.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from referenda_curves.core.math.fixed_point import DomainError


# =============================================================================
# ВРЕМЯ БЛОКА
# =============================================================================
# Целевое время производства блока (мс)
MILLISECS_PER_BLOCK: Final[int] = 12_000

MINUTES: Final[int] = 60_000 // MILLISECS_PER_BLOCK
HOURS: Final[int] = MINUTES * 60
DAYS: Final[int] = HOURS * 24
WEEKS: Final[int] = DAYS * 7


# =============================================================================
# ЕДИНИЦЫ ОСИ X
# =============================================================================


class Time(str, Enum):
    """Единица дискретизации окна решения."""

    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def steps_per_day(self) -> int:
        return _STEPS_PER_DAY[self]

    @property
    def plural(self) -> str:
        return f"{self.value.capitalize()}s"


_STEPS_PER_DAY: Final[dict[Time, int]] = {
    Time.DAY: 1,
    Time.HOUR: 24,
    Time.MINUTE: 24 * 60,
    Time.SECOND: 24 * 60 * 60,
}


@dataclass(frozen=True)
class TimeLength:
    """Длина окна решения в выбранных единицах (число шагов домена)."""

    unit: Time
    length: int

    @property
    def days(self) -> int:
        """Длина окна в целых днях."""
        return self.length // self.unit.steps_per_day


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def decision_period(unit: Time, blocks: int) -> TimeLength:
    """
    Конверсия: длительность окна в блоках → число шагов в unit.

    Длительность сначала округляется вниз до целых дней.

    Args:
        unit: Единица дискретизации
        blocks: Длительность окна решения в блоках

    Returns:
        TimeLength

    Raises:
        DomainError: Если окно короче одного дня (пустой домен)

    Examples:
        >>> decision_period(Time.HOUR, 14 * DAYS).length
        336
    """
    if blocks < 0:
        raise DomainError(f"decision_period must be non-negative, got {blocks}")
    days = blocks // DAYS
    if days == 0:
        raise DomainError(
            f"decision_period of {blocks} blocks is shorter than one day ({DAYS} blocks)"
        )
    return TimeLength(unit=unit, length=days * unit.steps_per_day)
