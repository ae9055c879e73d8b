"""
Тесты для модуля Fixed Point

Проверяет:
1. Целочисленное деление со всеми режимами округления
2. Конструирование FixedFraction и DomainError
3. Saturating арифметику (результат всегда в [0, 1])
4. SignedFixed: насыщение int64, checked деление, clamp в [0, 1]
5. Строковое представление процентов
"""

import pytest

from referenda_curves.core.math.fixed_point import (
    ACCURACY,
    DIV,
    SIGNED_MAX,
    DomainError,
    FixedFraction,
    Rounding,
    SignedFixed,
    rounding_div,
)


def pct(p: int) -> FixedFraction:
    return FixedFraction.from_percent(p)


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundingDiv:
    """Тесты для rounding_div"""

    @pytest.mark.parametrize(
        "numerator, denominator, rounding, expected",
        [
            (7, 2, Rounding.DOWN, 3),
            (-7, 2, Rounding.DOWN, -3),
            (7, 2, Rounding.UP, 4),
            (-7, 2, Rounding.UP, -4),
            (7, 2, Rounding.NEAREST_PREF_DOWN, 3),
            (-7, 2, Rounding.NEAREST_PREF_DOWN, -3),
            (7, 2, Rounding.LOW, 3),
            (-7, 2, Rounding.LOW, -4),
            (7, 2, Rounding.HIGH, 4),
            (-7, 2, Rounding.HIGH, -3),
            (8, 3, Rounding.LOW, 3),
            (-8, 3, Rounding.LOW, -3),
            (7, 3, Rounding.LOW, 2),
            (7, -2, Rounding.LOW, -4),
        ],
    )
    def test_modes(self, numerator, denominator, rounding, expected) -> None:
        """Каждый режим округления даёт ожидаемое частное"""
        assert rounding_div(numerator, denominator, rounding) == expected

    def test_exact_division_ignores_mode(self) -> None:
        """Точное деление не зависит от режима"""
        for rounding in Rounding:
            assert rounding_div(12, 4, rounding) == 3
            assert rounding_div(-12, 4, rounding) == -3

    def test_zero_denominator_raises(self) -> None:
        """Деление на ноль вызывает ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError):
            rounding_div(1, 0, Rounding.DOWN)


# =============================================================================
# ТЕСТЫ FIXED FRACTION
# =============================================================================


class TestFixedFractionConstruction:
    """Тесты конструирования FixedFraction"""

    def test_bounds(self) -> None:
        """Границы диапазона [0, ACCURACY]"""
        assert FixedFraction.zero().parts == 0
        assert FixedFraction.one().parts == ACCURACY

    def test_out_of_range_parts_raise(self) -> None:
        """parts вне [0, ACCURACY] вызывает DomainError"""
        with pytest.raises(DomainError):
            FixedFraction(ACCURACY + 1)
        with pytest.raises(DomainError):
            FixedFraction(-1)

    def test_non_integer_parts_raise(self) -> None:
        """Float недопустим"""
        with pytest.raises(DomainError, match="parts must be an integer"):
            FixedFraction(0.5)

    def test_from_percent(self) -> None:
        assert pct(50).parts == 500_000_000
        with pytest.raises(DomainError):
            FixedFraction.from_percent(101)

    def test_from_rational_rounding(self) -> None:
        """from_rational округляет к ближайшему по умолчанию"""
        assert FixedFraction.from_rational(1, 2).parts == 500_000_000
        assert FixedFraction.from_rational(2, 3).parts == 666_666_667
        assert FixedFraction.from_rational(2, 3, Rounding.DOWN).parts == 666_666_666
        assert FixedFraction.from_rational(0, 5) == FixedFraction.zero()
        assert FixedFraction.from_rational(5, 5) == FixedFraction.one()

    def test_from_rational_above_one_raises(self) -> None:
        """numerator > denominator вызывает DomainError"""
        with pytest.raises(DomainError, match="exceeds denominator"):
            FixedFraction.from_rational(3, 2)

    def test_from_rational_zero_denominator_raises(self) -> None:
        with pytest.raises(DomainError, match="denominator"):
            FixedFraction.from_rational(0, 0)


class TestFixedFractionArithmetic:
    """Тесты saturating арифметики"""

    def test_saturating_sub(self) -> None:
        """Вычитание насыщается на нуле"""
        assert pct(30) - pct(50) == FixedFraction.zero()
        assert pct(50) - pct(30) == pct(20)

    def test_saturating_add(self) -> None:
        """Сложение насыщается на единице"""
        assert pct(70) + pct(50) == FixedFraction.one()
        assert pct(20) + pct(30) == pct(50)

    def test_mixed_types_raise_type_error(self) -> None:
        """Сложение и вычитание с не-долей дают TypeError"""
        with pytest.raises(TypeError):
            pct(20) + 1
        with pytest.raises(TypeError):
            pct(20) - SignedFixed.from_percent(10)
        with pytest.raises(TypeError):
            SignedFixed.from_percent(10) + pct(20)

    def test_mul_rounds_down(self) -> None:
        """Произведение округляется вниз"""
        assert pct(50) * pct(50) == pct(25)
        third = FixedFraction.from_rational(1, 3)
        assert (third * third).parts == 111_111_110

    def test_mul_never_exceeds_one(self) -> None:
        assert FixedFraction.one() * FixedFraction.one() == FixedFraction.one()

    def test_checked_div(self) -> None:
        """checked_div: None при делении на ноль и результате > 1"""
        assert pct(25).checked_div(pct(50)) == pct(50)
        assert pct(50).checked_div(FixedFraction.zero()) is None
        assert pct(60).checked_div(pct(30)) is None

    def test_checked_div_rounding(self) -> None:
        assert pct(10).checked_div(pct(30), Rounding.DOWN).parts == 333_333_333
        assert pct(10).checked_div(pct(30), Rounding.UP).parts == 333_333_334

    def test_saturating_div(self) -> None:
        assert pct(60).saturating_div(pct(30)) == FixedFraction.one()
        assert pct(60).saturating_div(FixedFraction.zero()) == FixedFraction.one()

    def test_div_int(self) -> None:
        assert pct(50).div_int(4) == FixedFraction(125_000_000)
        with pytest.raises(DomainError):
            pct(50).div_int(0)

    def test_int_div_and_int_mul(self) -> None:
        """Целочисленное деление и умножение на целое"""
        assert pct(50).int_div(pct(20)) == 2
        assert pct(30).int_mul(2) == pct(60)
        assert pct(30).int_mul(4) == FixedFraction.one()
        with pytest.raises(DomainError):
            pct(50).int_div(FixedFraction.zero())

    def test_mul_int(self) -> None:
        """Масштабирование целого: половина округляется вниз"""
        assert pct(50).mul_int(15) == 7
        assert pct(50).mul_int(15, Rounding.UP) == 8
        assert FixedFraction.one().mul_int(336) == 336

    def test_ordering(self) -> None:
        assert pct(10) < pct(20)
        assert max(pct(10), pct(20)) == pct(20)
        assert min(pct(10), pct(20)) == pct(10)


class TestFixedFractionStr:
    """Тесты строкового представления"""

    @pytest.mark.parametrize(
        "fraction, expected",
        [
            (FixedFraction.zero(), "0%"),
            (FixedFraction.one(), "100%"),
            (FixedFraction.from_percent(50), "50%"),
            (FixedFraction.from_rational(999, 1_000), "99.9%"),
            (FixedFraction.from_rational(1, 10_000), "0.01%"),
            (FixedFraction.from_rational(4, 14), "28.5714286%"),
            (FixedFraction(1), "0.0000001%"),
        ],
    )
    def test_percent_string(self, fraction, expected) -> None:
        assert str(fraction) == expected

    def test_percent_coordinate(self) -> None:
        """Целые проценты для графиков"""
        for p in range(101):
            assert FixedFraction.from_percent(p).to_percent_coordinate() == p
        assert FixedFraction.from_rational(999, 1_000).to_percent_coordinate() == 99


# =============================================================================
# ТЕСТЫ SIGNED FIXED
# =============================================================================


class TestSignedFixed:
    """Тесты для SignedFixed"""

    def test_constructors(self) -> None:
        assert SignedFixed.from_int(2).inner == 2 * DIV
        assert SignedFixed.from_percent(-20).inner == -200_000_000
        assert SignedFixed.from_rational(1, 4).inner == 250_000_000
        assert SignedFixed.from_fraction(FixedFraction.from_percent(30)).inner == 300_000_000

    def test_add_sub_saturate(self) -> None:
        """Сложение и вычитание насыщаются на границах int64"""
        assert (SignedFixed(SIGNED_MAX) + SignedFixed(1)).inner == SIGNED_MAX
        assert (SignedFixed(-SIGNED_MAX) - SignedFixed(10)).inner == -SIGNED_MAX - 1

    def test_checked_rounding_div(self) -> None:
        """Деление: None при нуле и переполнении"""
        assert SignedFixed.from_int(1).checked_rounding_div(SignedFixed(0), Rounding.LOW) is None
        assert SignedFixed(SIGNED_MAX).checked_rounding_div(SignedFixed(1), Rounding.DOWN) is None
        half = SignedFixed.from_int(1).checked_rounding_div(SignedFixed.from_int(2), Rounding.LOW)
        assert half.inner == 500_000_000

    def test_low_rounding_ties_toward_negative_infinity(self) -> None:
        """LOW: ровно половина округляется к -inf"""
        num = SignedFixed(-1)
        den = SignedFixed(2 * DIV)
        assert num.checked_rounding_div(den, Rounding.LOW).inner == -1
        assert num.checked_rounding_div(den, Rounding.HIGH).inner == 0
        assert SignedFixed(1).checked_rounding_div(den, Rounding.LOW).inner == 0

    def test_clamp_into_unit(self) -> None:
        """Проекция в [0, 1]"""
        assert SignedFixed.from_int(-3).clamp_into_unit() == FixedFraction.zero()
        assert SignedFixed.from_int(7).clamp_into_unit() == FixedFraction.one()
        assert SignedFixed.from_percent(50).clamp_into_unit() == FixedFraction.from_percent(50)

    def test_try_into_fraction(self) -> None:
        assert SignedFixed(DIV + 1).try_into_fraction() is None
        assert SignedFixed(-1).try_into_fraction() is None
        assert SignedFixed(DIV).try_into_fraction() == FixedFraction.one()
