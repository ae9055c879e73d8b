"""
Fixed Point — Точная арифметика долей с фиксированной точкой

Модуль обеспечивает воспроизводимые вычисления порогов без float:
- FixedFraction: беззнаковая доля parts / 1_000_000_000 в диапазоне [0, 1]
- SignedFixed: знаковое число inner / 1_000_000_000 в диапазоне int64
- Rounding: явные режимы округления для каждой операции деления

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0 <= FixedFraction.parts <= ACCURACY всегда (выход за границы → saturation)
2. Все операции выполняются только над int (никакой конверсии во float)
3. Режим округления задаётся вызывающим кодом, не выбирается неявно
4. Все операции детерминированы и воспроизводимы
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

# =============================================================================
# КОНСТАНТЫ ФИКСИРОВАННОЙ ТОЧКИ
# =============================================================================

# Знаменатель FixedFraction (одна миллиардная часть)
ACCURACY: Final[int] = 1_000_000_000

# Знаменатель SignedFixed
DIV: Final[int] = 1_000_000_000

# Границы SignedFixed.inner (int64)
SIGNED_MIN: Final[int] = -(2**63)
SIGNED_MAX: Final[int] = 2**63 - 1

# Количество parts в одном проценте
PARTS_PER_PERCENT: Final[int] = ACCURACY // 100


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DomainError(ValueError):
    """
    Невалидные входные данные при конструировании.

    Возникает при:
    - numerator > denominator (доля больше 1)
    - нулевом знаменателе или нулевой длине домена
    - нарушении инвариантов параметров кривой (floor > ceil и т.п.)

    Сообщение всегда содержит имя параметра, нарушившего инвариант.
    """

    pass


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


class Rounding(str, Enum):
    """Режим округления целочисленного деления."""

    DOWN = "down"  # к нулю
    UP = "up"  # от нуля
    NEAREST_PREF_DOWN = "nearest_pref_down"  # к ближайшему, половина к нулю
    LOW = "low"  # к ближайшему, половина к -inf
    HIGH = "high"  # к ближайшему, половина к +inf


def rounding_div(numerator: int, denominator: int, rounding: Rounding) -> int:
    """
    Целочисленное деление с явным режимом округления.

    Args:
        numerator: Числитель (любой знак)
        denominator: Знаменатель (любой знак, не ноль)
        rounding: Режим округления

    Returns:
        Частное, округлённое согласно rounding

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> rounding_div(7, 2, Rounding.DOWN)
        3
        >>> rounding_div(-7, 2, Rounding.DOWN)
        -3
        >>> rounding_div(-7, 2, Rounding.LOW)
        -4
        >>> rounding_div(7, 2, Rounding.LOW)
        3
        >>> rounding_div(5, 3, Rounding.NEAREST_PREF_DOWN)
        2
    """
    if denominator == 0:
        raise ZeroDivisionError("rounding_div: denominator is zero")

    negative = (numerator < 0) != (denominator < 0)
    quotient, remainder = divmod(abs(numerator), abs(denominator))

    if remainder != 0:
        if rounding is Rounding.UP:
            quotient += 1
        elif rounding is not Rounding.DOWN:
            twice = 2 * remainder
            if twice > abs(denominator):
                quotient += 1
            elif twice == abs(denominator):
                # Ровно половина: направление зависит от знака результата
                if rounding is Rounding.LOW and negative:
                    quotient += 1
                elif rounding is Rounding.HIGH and not negative:
                    quotient += 1

    return -quotient if negative else quotient


def _ensure_int(value: object, name: str) -> int:
    # bool является подклассом int, но долей не является
    if not isinstance(value, int) or isinstance(value, bool):
        raise DomainError(f"{name} must be an integer, got {value!r}")
    return value


# =============================================================================
# FIXED FRACTION
# =============================================================================


@dataclass(frozen=True, order=True)
class FixedFraction:
    """
    Доля в диапазоне [0, 1] с фиксированным знаменателем ACCURACY.

    Immutable value object. Сравнение (==, <, <=, ...) выполняется по parts.
    Арифметика никогда не выходит за [0, 1]: результаты насыщаются (saturate)
    на границах вместо переполнения.

    Attributes:
        parts: Числитель доли, 0 <= parts <= ACCURACY
    """

    parts: int

    def __post_init__(self) -> None:
        _ensure_int(self.parts, "parts")
        if self.parts < 0 or self.parts > ACCURACY:
            raise DomainError(
                f"parts must be in [0, {ACCURACY}], got {self.parts}"
            )

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "FixedFraction":
        return cls(0)

    @classmethod
    def one(cls) -> "FixedFraction":
        return cls(ACCURACY)

    @classmethod
    def from_percent(cls, percent: int) -> "FixedFraction":
        """
        Доля из целого процента.

        Raises:
            DomainError: Если percent вне [0, 100]
        """
        _ensure_int(percent, "percent")
        if percent < 0 or percent > 100:
            raise DomainError(f"percent must be in [0, 100], got {percent}")
        return cls(percent * PARTS_PER_PERCENT)

    @classmethod
    def from_rational(
        cls,
        numerator: int,
        denominator: int,
        rounding: Rounding = Rounding.NEAREST_PREF_DOWN,
    ) -> "FixedFraction":
        """
        Доля numerator / denominator в базе ACCURACY.

        Args:
            numerator: Числитель (>= 0)
            denominator: Знаменатель (> 0)
            rounding: Режим округления (default: к ближайшему, половина вниз)

        Returns:
            FixedFraction

        Raises:
            DomainError: Если numerator > denominator, denominator == 0
                или значения отрицательные

        Examples:
            >>> FixedFraction.from_rational(1, 2).parts
            500000000
            >>> FixedFraction.from_rational(2, 3).parts
            666666667
        """
        _ensure_int(numerator, "numerator")
        _ensure_int(denominator, "denominator")
        if denominator <= 0:
            raise DomainError(f"denominator must be positive, got {denominator}")
        if numerator < 0:
            raise DomainError(f"numerator must be non-negative, got {numerator}")
        if numerator > denominator:
            raise DomainError(
                f"numerator {numerator} exceeds denominator {denominator} "
                f"(fraction would exceed 1)"
            )
        return cls(rounding_div(numerator * ACCURACY, denominator, rounding))

    # -------------------------------------------------------------------------
    # Арифметика (saturating)
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.parts == 0

    def saturating_add(self, other: "FixedFraction") -> "FixedFraction":
        """self + other, насыщение на 1."""
        return FixedFraction(min(self.parts + other.parts, ACCURACY))

    def saturating_sub(self, other: "FixedFraction") -> "FixedFraction":
        """max(self - other, 0)."""
        return FixedFraction(max(self.parts - other.parts, 0))

    def __sub__(self, other: "FixedFraction") -> "FixedFraction":
        if not isinstance(other, FixedFraction):
            return NotImplemented
        return self.saturating_sub(other)

    def __add__(self, other: "FixedFraction") -> "FixedFraction":
        if not isinstance(other, FixedFraction):
            return NotImplemented
        return self.saturating_add(other)

    def __mul__(self, other: "FixedFraction") -> "FixedFraction":
        """
        Произведение долей с округлением вниз.

        Для операндов в [0, 1] результат не превышает min(self, other).
        """
        if not isinstance(other, FixedFraction):
            return NotImplemented
        return FixedFraction(
            rounding_div(self.parts * other.parts, ACCURACY, Rounding.DOWN)
        )

    def checked_div(
        self, other: "FixedFraction", rounding: Rounding = Rounding.DOWN
    ) -> Optional["FixedFraction"]:
        """
        Отношение self / other как доля.

        Returns:
            FixedFraction или None, если other == 0 или результат > 1
        """
        if other.parts == 0:
            return None
        parts = rounding_div(self.parts * ACCURACY, other.parts, rounding)
        if parts > ACCURACY:
            return None
        return FixedFraction(parts)

    def saturating_div(
        self, other: "FixedFraction", rounding: Rounding = Rounding.DOWN
    ) -> "FixedFraction":
        """self / other с насыщением на 1 (включая деление на ноль)."""
        result = self.checked_div(other, rounding)
        if result is None:
            return FixedFraction.one()
        return result

    def div_int(self, divisor: int, rounding: Rounding = Rounding.DOWN) -> "FixedFraction":
        """
        Деление доли на целое.

        Raises:
            DomainError: Если divisor <= 0
        """
        _ensure_int(divisor, "divisor")
        if divisor <= 0:
            raise DomainError(f"divisor must be positive, got {divisor}")
        return FixedFraction(rounding_div(self.parts, divisor, rounding))

    def int_div(self, other: "FixedFraction") -> int:
        """
        Целое число раз, которое other помещается в self: floor(self / other).

        Raises:
            DomainError: Если other == 0
        """
        if other.parts == 0:
            raise DomainError("int_div: divisor fraction is zero")
        return self.parts // other.parts

    def int_mul(self, n: int) -> "FixedFraction":
        """self * n (n — целое >= 0), насыщение на 1."""
        _ensure_int(n, "n")
        if n < 0:
            raise DomainError(f"n must be non-negative, got {n}")
        return FixedFraction(min(self.parts * n, ACCURACY))

    def mul_int(self, n: int, rounding: Rounding = Rounding.NEAREST_PREF_DOWN) -> int:
        """
        Масштабирование целого на долю: round(self * n).

        Используется для перевода доли окна в индекс шага.

        Examples:
            >>> FixedFraction.from_percent(50).mul_int(15)
            7
        """
        _ensure_int(n, "n")
        return rounding_div(self.parts * n, ACCURACY, rounding)

    def less_epsilon(self) -> "FixedFraction":
        """self минус одна part (насыщение на 0)."""
        return FixedFraction(max(self.parts - 1, 0))

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def to_percent_coordinate(self) -> int:
        """Целый процент (округление вниз), 0..100."""
        return self.parts // PARTS_PER_PERCENT

    def __str__(self) -> str:
        """
        Процент без хвостовых нулей.

        Examples:
            >>> str(FixedFraction.from_percent(50))
            '50%'
            >>> str(FixedFraction.from_rational(1, 10_000))
            '0.01%'
        """
        units, rest = divmod(self.parts, PARTS_PER_PERCENT)
        if rest == 0:
            return f"{units}%"
        digits = f"{rest:07d}".rstrip("0")
        return f"{units}.{digits}%"


# =============================================================================
# SIGNED FIXED
# =============================================================================


def _saturate_signed(value: int) -> int:
    return max(SIGNED_MIN, min(value, SIGNED_MAX))


@dataclass(frozen=True, order=True)
class SignedFixed:
    """
    Знаковое число с фиксированной точкой: inner / DIV.

    Используется в параметрах Reciprocal кривой (factor, x_offset, y_offset),
    которые могут быть отрицательными или больше 1.
    Сложение и вычитание насыщаются на границах int64.
    """

    inner: int

    def __post_init__(self) -> None:
        _ensure_int(self.inner, "inner")
        if self.inner < SIGNED_MIN or self.inner > SIGNED_MAX:
            raise DomainError(f"inner out of int64 range: {self.inner}")

    @classmethod
    def from_int(cls, value: int) -> "SignedFixed":
        _ensure_int(value, "value")
        return cls(_saturate_signed(value * DIV))

    @classmethod
    def from_percent(cls, percent: int) -> "SignedFixed":
        """Процент как знаковое число (percent может быть вне [0, 100])."""
        _ensure_int(percent, "percent")
        return cls(_saturate_signed(percent * (DIV // 100)))

    @classmethod
    def from_rational(
        cls,
        numerator: int,
        denominator: int,
        rounding: Rounding = Rounding.NEAREST_PREF_DOWN,
    ) -> "SignedFixed":
        """
        Число numerator / denominator.

        Raises:
            DomainError: Если denominator == 0
        """
        _ensure_int(numerator, "numerator")
        _ensure_int(denominator, "denominator")
        if denominator == 0:
            raise DomainError("denominator must be non-zero")
        return cls(_saturate_signed(rounding_div(numerator * DIV, denominator, rounding)))

    @classmethod
    def from_fraction(cls, fraction: FixedFraction) -> "SignedFixed":
        # ACCURACY == DIV, поэтому конверсия точная
        return cls(fraction.parts * DIV // ACCURACY)

    def is_positive(self) -> bool:
        return self.inner > 0

    def __add__(self, other: "SignedFixed") -> "SignedFixed":
        if not isinstance(other, SignedFixed):
            return NotImplemented
        return SignedFixed(_saturate_signed(self.inner + other.inner))

    def __sub__(self, other: "SignedFixed") -> "SignedFixed":
        if not isinstance(other, SignedFixed):
            return NotImplemented
        return SignedFixed(_saturate_signed(self.inner - other.inner))

    def checked_rounding_div(
        self, other: "SignedFixed", rounding: Rounding
    ) -> Optional["SignedFixed"]:
        """
        Деление self / other с явным округлением.

        Returns:
            SignedFixed или None, если other == 0 или результат вне int64
        """
        if other.inner == 0:
            return None
        inner = rounding_div(self.inner * DIV, other.inner, rounding)
        if inner < SIGNED_MIN or inner > SIGNED_MAX:
            return None
        return SignedFixed(inner)

    def try_into_fraction(self) -> Optional[FixedFraction]:
        """FixedFraction, если значение в [0, 1], иначе None."""
        if self.inner < 0 or self.inner > DIV:
            return None
        return FixedFraction(self.inner * ACCURACY // DIV)

    def clamp_into_unit(self) -> FixedFraction:
        """
        Проекция в [0, 1] насыщением.

        Examples:
            >>> SignedFixed.from_int(-3).clamp_into_unit()
            FixedFraction(parts=0)
            >>> SignedFixed.from_int(7).clamp_into_unit()
            FixedFraction(parts=1000000000)
        """
        if self.inner <= 0:
            return FixedFraction.zero()
        if self.inner >= DIV:
            return FixedFraction.one()
        return FixedFraction(self.inner * ACCURACY // DIV)
