"""
Sampler — Дискретизация кривой порога

Операции:
- sample(curve, domain_length): значения кривой в каждом шаге 0..=domain_length
  и глобальные экстремумы
- locate_thresholds(...): индексы шагов, в которых кривая впервые опускается
  до порогов из фиксированного каталога

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sample возвращает ровно domain_length + 1 точек с x = 0..domain_length
2. При равенстве значений экстремум хранит первую точку (наименьший x)
3. locate_thresholds не возвращает двух точек с одинаковым x
4. Порог вне (y_min, y_max) не ищется; недостижимый порог пропускается молча
5. Все операции детерминированы (только целочисленная арифметика)
"""

import logging
from typing import Callable, Final, Iterable

from referenda_curves.core.domain.curve import Curve, ThresholdUnreachable, delay, threshold
from referenda_curves.core.domain.points import ExtremumPair, Point, Points
from referenda_curves.core.math.fixed_point import DomainError, FixedFraction, Rounding

logger = logging.getLogger(__name__)

InverseLookup = Callable[[Curve, FixedFraction], FixedFraction]


# =============================================================================
# КАТАЛОГ ПОРОГОВ
# =============================================================================

# Проценты 0..99, затем 99.9%, 0.1%, 0.01% (порядок значим для дедупликации)
THRESHOLD_CATALOG: Final[tuple[FixedFraction, ...]] = tuple(
    FixedFraction.from_percent(p) for p in range(100)
) + (
    FixedFraction.from_rational(999, 1_000),
    FixedFraction.from_rational(1, 1_000),
    FixedFraction.from_rational(1, 10_000),
)


# =============================================================================
# SAMPLE
# =============================================================================


def sample(curve: Curve, domain_length: int) -> tuple[Points, ExtremumPair]:
    """
    Значения кривой в каждом шаге домена.

    Кандидат минимума стартует с (0, 1), максимума с (0, 0); обновление только
    при строгом улучшении.

    Args:
        curve: Кривая
        domain_length: Число шагов окна решения (> 0)

    Returns:
        (points, extremum): domain_length + 1 точек и пара экстремумов

    Raises:
        DomainError: Если domain_length <= 0
    """
    if domain_length <= 0:
        raise DomainError(f"domain_length must be positive, got {domain_length}")

    y_min = Point(x=0, y=FixedFraction.one())
    y_max = Point(x=0, y=FixedFraction.zero())
    points = []

    for x in range(domain_length + 1):
        y = threshold(curve, FixedFraction.from_rational(x, domain_length))
        point = Point(x=x, y=y)
        if y > y_max.y:
            y_max = point
        if y < y_min.y:
            y_min = point
        points.append(point)

    return tuple(points), ExtremumPair(min=y_min, max=y_max)


# =============================================================================
# LOCATE THRESHOLDS
# =============================================================================


def locate_thresholds(
    curve: Curve,
    domain_length: int,
    catalog: Iterable[FixedFraction],
    y_min: FixedFraction,
    y_max: FixedFraction,
    inverse: InverseLookup = delay,
) -> Points:
    """
    Точки пересечения кривой с порогами каталога.

    Для каждого порога t (в порядке каталога) при y_min < t < y_max:
        x = round(inverse(curve, t) * domain_length)
    Первый порог, попавший в данный x, выигрывает.

    Args:
        curve: Кривая
        domain_length: Число шагов окна решения (> 0)
        catalog: Пороги в порядке приоритета
        y_min: Минимальное значение кривой на домене
        y_max: Максимальное значение кривой на домене
        inverse: Обратная функция кривой (default: delay)

    Returns:
        Точки (x, t) без повторов x

    Raises:
        DomainError: Если domain_length <= 0
    """
    if domain_length <= 0:
        raise DomainError(f"domain_length must be positive, got {domain_length}")

    seen: set[int] = set()
    located = []

    for target in catalog:
        if not (y_min < target < y_max):
            continue
        try:
            x = inverse(curve, target).mul_int(domain_length, Rounding.NEAREST_PREF_DOWN)
        except (ThresholdUnreachable, DomainError) as e:
            logger.debug("Threshold %s not locatable: %s", target, e)
            continue
        if x < 0 or x > domain_length:
            logger.debug("Threshold %s maps outside domain: x=%d", target, x)
            continue
        if x in seen:
            continue
        seen.add(x)
        located.append(Point(x=x, y=target))

    return tuple(located)
