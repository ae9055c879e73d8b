"""
Curve — Кривые порогов голосования (approval / support)

Замкнутый набор из трёх форм кривой:
- LinearDecreasing: линейное убывание от ceil до floor за length
- SteppedDecreasing: ступенчатое убывание от begin до end шагом step каждые period
- Reciprocal: гипербола factor / (x + x_offset) + y_offset, clamp в [0, 1]

Операции:
- threshold(curve, x): требуемый порог в момент x (доля окна решения)
- delay(curve, y): наименьшая доля окна, к которой кривая опускается до y
- make_linear / make_reciprocal / make_stepped: конструкторы из параметров трека

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. threshold монотонно не возрастает по x
2. threshold всегда в [0, 1]
3. Reciprocal при делении на неположительный знаменатель возвращает 1
4. Добавление новой формы требует правки threshold, delay и _CURVE_TYPES
"""

from dataclasses import dataclass
from typing import Union

from referenda_curves.core.math.fixed_point import (
    DIV,
    SIGNED_MAX,
    DomainError,
    FixedFraction,
    Rounding,
    SignedFixed,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ThresholdUnreachable(Exception):
    """
    Кривая никогда не опускается до запрошенного порога в пределах окна.

    Не является ошибкой конфигурации: sampler просто пропускает такой порог.
    """

    pass


# =============================================================================
# ФОРМЫ КРИВЫХ
# =============================================================================


@dataclass(frozen=True)
class LinearDecreasing:
    """
    Линейное убывание: ceil при x=0, floor при x >= length.

    Attributes:
        length: Доля окна, за которую кривая достигает floor (> 0)
        floor: Нижний порог
        ceil: Верхний порог (floor <= ceil)
    """

    length: FixedFraction
    floor: FixedFraction
    ceil: FixedFraction

    def __post_init__(self) -> None:
        if self.length.is_zero():
            raise DomainError("length must be positive for LinearDecreasing")
        if self.floor > self.ceil:
            raise DomainError(
                f"floor {self.floor} must not exceed ceil {self.ceil} "
                f"for LinearDecreasing"
            )


@dataclass(frozen=True)
class SteppedDecreasing:
    """
    Ступенчатое убывание: begin, затем минус step каждые period, не ниже end.

    Attributes:
        begin: Начальный порог
        end: Минимальный порог (end <= begin)
        step: Величина одной ступени
        period: Длина ступени как доля окна (> 0)
    """

    begin: FixedFraction
    end: FixedFraction
    step: FixedFraction
    period: FixedFraction

    def __post_init__(self) -> None:
        if self.end > self.begin:
            raise DomainError(
                f"end {self.end} must not exceed begin {self.begin} "
                f"for SteppedDecreasing"
            )
        if self.period.is_zero():
            raise DomainError("period must be positive for SteppedDecreasing")


@dataclass(frozen=True)
class Reciprocal:
    """Гипербола factor / (x + x_offset) + y_offset, результат clamp в [0, 1]."""

    factor: SignedFixed
    x_offset: SignedFixed
    y_offset: SignedFixed


Curve = Union[LinearDecreasing, SteppedDecreasing, Reciprocal]

_CURVE_TYPES = (LinearDecreasing, SteppedDecreasing, Reciprocal)


def _unknown_curve(curve: object) -> TypeError:
    return TypeError(
        f"Unsupported curve type {type(curve).__name__}; "
        f"expected one of {', '.join(t.__name__ for t in _CURVE_TYPES)}"
    )


# =============================================================================
# ВЫЧИСЛЕНИЕ ПОРОГА
# =============================================================================


def threshold(curve: Curve, x: FixedFraction) -> FixedFraction:
    """
    Требуемый порог в момент x.

    Формулы:
        Linear:     ceil - (min(x, length) / length, DOWN) * (ceil - floor)
        Stepped:    max(begin - min(step * floor(x / period), begin), end)
        Reciprocal: clamp((factor / (x + x_offset), LOW) + y_offset)

    Args:
        curve: Кривая одной из трёх форм
        x: Прошедшая доля окна решения (0 = начало, 1 = конец)

    Returns:
        Порог в [0, 1]

    Raises:
        TypeError: Если curve не является одной из поддерживаемых форм
    """
    if isinstance(curve, LinearDecreasing):
        progress = min(x, curve.length).saturating_div(curve.length, Rounding.DOWN)
        return curve.ceil - progress * (curve.ceil - curve.floor)

    if isinstance(curve, SteppedDecreasing):
        drop = curve.step.int_mul(x.int_div(curve.period))
        return max(curve.begin - min(drop, curve.begin), curve.end)

    if isinstance(curve, Reciprocal):
        denominator = SignedFixed.from_fraction(x) + curve.x_offset
        if not denominator.is_positive():
            return FixedFraction.one()
        term = curve.factor.checked_rounding_div(denominator, Rounding.LOW)
        if term is None:
            return FixedFraction.one()
        return (term + curve.y_offset).clamp_into_unit()

    raise _unknown_curve(curve)


# =============================================================================
# ОБРАТНАЯ ФУНКЦИЯ (DELAY)
# =============================================================================


def delay(curve: Curve, y: FixedFraction) -> FixedFraction:
    """
    Наименьшая доля окна, к которой кривая опускается до порога y.

    Округление выбрано в сторону позднего момента (UP), чтобы в найденной точке
    кривая гарантированно уже не превышала y.

    Args:
        curve: Кривая
        y: Целевой порог

    Returns:
        Доля окна решения

    Raises:
        ThresholdUnreachable: Если кривая не достигает y внутри окна
        TypeError: Если curve не является одной из поддерживаемых форм
    """
    if isinstance(curve, LinearDecreasing):
        if y < curve.floor:
            raise ThresholdUnreachable(f"{y} is below linear floor {curve.floor}")
        if y >= curve.ceil:
            return FixedFraction.zero()
        progress = (curve.ceil - y).saturating_div(curve.ceil - curve.floor, Rounding.UP)
        return progress * curve.length

    if isinstance(curve, SteppedDecreasing):
        if y < curve.end:
            raise ThresholdUnreachable(f"{y} is below stepped end {curve.end}")
        gap = (curve.begin - min(y, curve.begin)).parts
        if gap == 0:
            return FixedFraction.zero()
        if curve.step.is_zero():
            raise ThresholdUnreachable(f"{y} is below constant level {curve.begin}")
        steps = -(-gap // curve.step.parts)
        return curve.period.int_mul(steps)

    if isinstance(curve, Reciprocal):
        distance = SignedFixed.from_fraction(y) - curve.y_offset
        if not distance.is_positive():
            raise ThresholdUnreachable(
                f"{y} is at or below reciprocal asymptote {curve.y_offset.inner}/{DIV}"
            )
        term = curve.factor.checked_rounding_div(distance, Rounding.UP)
        if term is None:
            raise ThresholdUnreachable(f"reciprocal inverse overflow for {y}")
        elapsed = term - curve.x_offset
        if elapsed.inner < 0:
            return FixedFraction.zero()
        fraction = elapsed.try_into_fraction()
        if fraction is None:
            raise ThresholdUnreachable(f"{y} is reached only after the window ends")
        return fraction

    raise _unknown_curve(curve)


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def make_linear(
    length: int, period: int, floor: SignedFixed, ceil: SignedFixed
) -> LinearDecreasing:
    """
    Линейная кривая, достигающая floor через length из period единиц окна.

    Args:
        length: Длина спада (например, в днях)
        period: Длина окна решения в тех же единицах
        floor: Нижний порог (clamp в [0, 1])
        ceil: Верхний порог (clamp в [0, 1])

    Raises:
        DomainError: Если length > period, length == 0 или floor > ceil
    """
    if length <= 0:
        raise DomainError(f"length must be positive, got {length}")
    return LinearDecreasing(
        length=FixedFraction.from_rational(length, period),
        floor=floor.clamp_into_unit(),
        ceil=ceil.clamp_into_unit(),
    )


def make_stepped(
    period: int,
    decision: int,
    begin: FixedFraction,
    end: FixedFraction,
    step: FixedFraction,
) -> SteppedDecreasing:
    """
    Ступенчатая кривая: одна ступень на каждые period из decision единиц окна.

    Raises:
        DomainError: Если period > decision, period == 0 или end > begin
    """
    if period <= 0:
        raise DomainError(f"period must be positive, got {period}")
    return SteppedDecreasing(
        begin=begin,
        end=end,
        step=step,
        period=FixedFraction.from_rational(period, decision),
    )


def reciprocal_from_parts(
    factor: SignedFixed, floor: SignedFixed, ceil: SignedFixed
) -> Reciprocal:
    """
    Reciprocal кривая с заданным factor, равная ceil при x=0 и стремящаяся к floor.

    x_offset = factor / (ceil - floor), y_offset = floor.

    Raises:
        DomainError: Если ceil <= floor
    """
    delta = ceil - floor
    if not delta.is_positive():
        raise DomainError(
            f"ceil {ceil.inner}/{DIV} must exceed floor {floor.inner}/{DIV} for Reciprocal"
        )
    x_offset = factor.checked_rounding_div(delta, Rounding.DOWN)
    if x_offset is None:
        raise DomainError(f"factor {factor.inner}/{DIV} overflows x_offset")
    return Reciprocal(factor=factor, x_offset=x_offset, y_offset=floor)


def make_reciprocal(
    delay_units: int,
    period: int,
    level: SignedFixed,
    floor: SignedFixed,
    ceil: SignedFixed,
) -> Reciprocal:
    """
    Reciprocal кривая от ceil к floor, проходящая через level в момент delay_units.

    Бинарный поиск factor в [0, 1] (единицы inner), пока интервал шире одной
    единицы. Из двух граничных кандидатов выбирается тот, чьё значение в
    момент delay_units / period ближе к level.

    Args:
        delay_units: Момент прохождения level (например, в днях)
        period: Длина окна решения в тех же единицах
        level: Порог в момент delay_units
        floor: Асимптота снизу
        ceil: Значение при x=0

    Raises:
        DomainError: Если delay_units > period или ceil <= floor
    """
    at = FixedFraction.from_rational(delay_units, period)

    def candidate(factor: SignedFixed) -> tuple[SignedFixed, Reciprocal, int]:
        return factor, reciprocal_from_parts(factor, floor, ceil), SIGNED_MAX

    low = candidate(SignedFixed(0))
    high = candidate(SignedFixed(DIV))

    while high[0].inner - low[0].inner > 1:
        factor = SignedFixed((low[0].inner + high[0].inner) // 2)
        curve = reciprocal_from_parts(factor, floor, ceil)
        curve_level = SignedFixed.from_fraction(threshold(curve, at))
        if curve_level > level:
            high = (factor, curve, (curve_level - level).inner)
        else:
            low = (factor, curve, (level - curve_level).inner)

    if low[2] < high[2]:
        return low[1]
    return high[1]
