"""Tests for Approximint construction, normalization and arithmetic."""

import math

import pytest

from approximint import MAX, MIN, ONE, ZERO, Approximint
from approximint.constants import MAX_TEN_POWER
from approximint.core import _div_trunc, _match_powers, _normalize_overflow, _normalized

A = Approximint


def is_normalized(value: Approximint) -> bool:
    magnitude = abs(value.coefficient)
    if magnitude >= 1_000_000_000:
        return False
    if value.ten_power > 0:
        return magnitude >= 100_000_000
    return True


class TestConstruction:
    """Tests for Approximint construction."""

    def test_small_int(self):
        """Small ints are stored exactly."""
        assert A(123).parts == (123, 0)
        assert A(-123).parts == (-123, 0)

    def test_ten_digit_int_sheds_a_digit(self):
        """Ints past 9 digits keep their leading 9 digits."""
        assert A(1_234_567_890).parts == (123_456_789, 1)

    def test_negative_truncates_toward_zero(self):
        """Dropped digits of negative ints truncate toward zero."""
        assert A(-1_234_567_899).parts == (-123_456_789, 1)

    def test_wide_int(self):
        """Ints wider than 32 bits are approximated."""
        assert A(10**20).parts == (100_000_000, 12)

    def test_default_is_zero(self):
        """Approximint() is zero."""
        assert A() == ZERO

    def test_copy(self):
        """Approximint can be constructed from another Approximint."""
        original = A(1_234_567_890)
        assert A(original) == original

    def test_new_alias(self):
        """Approximint.new is the constructor."""
        assert A.new(1_000) == A(1_000)

    def test_invalid_type_raises(self):
        """Approximint rejects strings, floats and bools."""
        with pytest.raises(TypeError):
            A("42")  # type: ignore
        with pytest.raises(TypeError):
            A(3.14)  # type: ignore
        with pytest.raises(TypeError):
            A(True)  # type: ignore

    def test_constants(self):
        """Sentinels have their documented parts."""
        assert ZERO.parts == (0, 0)
        assert ONE.parts == (1, 0)
        assert MAX.parts == (999_999_999, MAX_TEN_POWER)
        assert MIN.parts == (-999_999_999, MAX_TEN_POWER)
        assert A.MAX is MAX
        assert A.ZERO is ZERO


class TestOneE:
    """Tests for Approximint.one_e."""

    def test_small_powers(self):
        """Small powers fit in the coefficient."""
        assert A.one_e(0) == ONE
        assert A.one_e(3).parts == (1_000, 0)
        assert A.one_e(8).parts == (100_000_000, 0)

    def test_large_powers_are_normalized(self):
        """The coefficient absorbs as much ten_power as it can."""
        assert A.one_e(9).parts == (100_000_000, 1)
        assert A.one_e(100).parts == (100_000_000, 92)
        assert A.one_e(MAX_TEN_POWER).parts == (100_000_000, MAX_TEN_POWER - 8)

    def test_out_of_range_raises(self):
        """Exponents outside the u32 range are rejected."""
        with pytest.raises(ValueError):
            A.one_e(-1)
        with pytest.raises(ValueError):
            A.one_e(MAX_TEN_POWER + 1)


class TestNormalization:
    """Tests for the normalization passes."""

    @pytest.mark.parametrize(
        "parts",
        [
            (0, 0),
            (0, 50),
            (1, 0),
            (1, 5),
            (-7, 12),
            (123_456_789, 3),
            (12_345_678_901, 0),
            (-99_999_999_999, 7),
        ],
    )
    def test_idempotent(self, parts):
        """Normalizing twice gives the same result as normalizing once."""
        once = _normalized(*parts)
        assert _normalized(*once) == once

    def test_underflow_pulls_power_into_coefficient(self):
        """Small coefficients absorb available ten_power."""
        assert _normalized(1, 5) == (100_000, 0)
        assert _normalized(-12, 10) == (-120_000_000, 3)

    def test_zero_is_canonical(self):
        """Zero always normalizes to (0, 0)."""
        assert _normalized(0, 92) == (0, 0)

    def test_overflow_saturates(self):
        """Overflow at the maximum ten_power saturates."""
        assert _normalize_overflow(10**10, MAX_TEN_POWER) == MAX.parts
        assert _normalize_overflow(-(10**10), MAX_TEN_POWER) == MIN.parts

    def test_ten_power_past_limit_saturates(self):
        """A ten_power past the u32 range saturates even with a small coefficient."""
        assert _normalized(150_000_000, MAX_TEN_POWER + 1) == MAX.parts

    def test_match_powers_drops_low_digits(self):
        """The smaller operand loses its low-order digits."""
        left, right = _match_powers((123_456_789, 0), (100_000_000, 3))
        assert left == (123_456, 3)
        assert right == (100_000_000, 3)

    def test_match_powers_clamps_vanished_operand(self):
        """An operand reduced to zero takes the larger ten_power."""
        left, right = _match_powers((100_000_000, 50), (5, 0))
        assert left == (100_000_000, 50)
        assert right == (0, 50)

    def test_div_trunc(self):
        """Division truncates toward zero."""
        assert _div_trunc(-7, 3) == -2
        assert _div_trunc(7, 3) == 2
        assert _div_trunc(-19, 10) == -1

    def test_operation_results_are_normalized(self, thousand, googol):
        """Results of every operator satisfy the normalization invariant."""
        values = [
            thousand * thousand * thousand,
            googol - googol,
            googol + thousand,
            thousand * 0.5,
            googol * 3.3,
            -googol * thousand,
            A(999_999_999) + ONE,
            A(1_000_000_000) - A(1),
            A(2).powi(1_000),
        ]
        for value in values:
            assert is_normalized(value), value.parts


class TestArithmetic:
    """Tests for +, -, * and negation."""

    def test_multiplication_scales(self, thousand, million, billion):
        """Products of normalized values are exact while they fit."""
        assert million.parts == (1_000_000, 0)
        assert billion == A(1_000_000_000)
        assert billion * thousand == A.approximate(1_000_000_000_000)

    def test_float_scale_round_trip(self, thousand, million, billion):
        """Multiplying by a fraction undoes multiplication."""
        assert million * 0.001 == thousand
        assert billion * 0.001 == million
        assert billion * 0.000_001 == thousand
        assert billion * 0.000_000_001 == ONE
        assert (thousand * thousand) * 0.000_001 == ONE

    def test_float_multiplication(self, billion):
        """Float multiplication keeps 9 significant digits."""
        assert billion * 3.12 == A.approximate(3_120_000_000)
        assert billion * 1_000.0 == A.approximate(1_000_000_000_000)

    def test_negative_float_multiplication(self, thousand):
        """Float multiplication works for negative values."""
        negative_million = -thousand * thousand
        negative_billion = thousand * negative_million
        assert negative_million * 0.001 == -thousand
        assert negative_billion * 0.001 == negative_million
        assert negative_billion * 0.000_001 == -thousand
        assert negative_billion * 0.000_000_001 == -ONE
        assert negative_billion * 3.12 == -A.approximate(3_120_000_000)

    def test_float_multiplication_rounds_half_away_from_zero(self):
        """Float products round to the nearest integer, ties away from zero."""
        assert A(5) * 0.5 == A(3)
        assert A(-5) * 0.5 == A(-3)
        assert A(3) * 0.4 == A(1)

    def test_tiny_float_multiplicand(self):
        """A shift past the float range is applied without overflowing."""
        assert A.one_e(1_000) * 1e-310 == A.one_e(690)
        assert -A.one_e(1_000) * 1e-310 == -A.one_e(690)

    def test_tiny_float_keeps_integer_part(self):
        """A product below the ten_power window keeps its integer part."""
        # 1e8 * 5e-324 * 1e320 is about 49_406.56
        assert A.one_e(328) * 5e-324 == A(49_407)

    def test_large_float_multiplicand(self):
        """Floats past the coefficient limit are approximated first."""
        assert A(2) * 1e20 == A.approximate(2e20)
        assert (A(2) * 1e20).parts == (200_000_000, 12)

    def test_float_multiplication_by_zero(self, googol):
        """Multiplying by zero gives zero."""
        assert googol * 0.0 == ZERO
        assert ZERO * 3.5 == ZERO

    def test_float_nan_raises(self):
        """Multiplying by NaN is rejected."""
        with pytest.raises(ValueError):
            A(5) * math.nan

    def test_float_infinity_saturates(self):
        """Multiplying by infinity saturates."""
        assert A(1) * math.inf == MAX
        assert A(-1) * math.inf == MIN

    def test_reflected_operators(self):
        """ints and floats work on either side."""
        assert 3 + A(5) == A(8)
        assert 10 - A(3) == A(7)
        assert 2 * A(3) == A(6)
        assert 0.5 * A(4) == A(2)

    def test_int_operands(self, googol):
        """Integer operands are approximated."""
        assert A.one_e(2) * 2 == A(200)
        assert A(5) + 3 == A(8)
        assert googol * 1_000 == A.one_e(103)

    def test_unsupported_operand(self):
        """Unsupported operand types raise TypeError."""
        with pytest.raises(TypeError):
            A(5) + "5"  # type: ignore
        with pytest.raises(TypeError):
            A(5) + 0.5  # type: ignore

    def test_subtraction(self, thousand):
        """Subtraction works across signs."""
        assert thousand - thousand == ZERO
        assert ZERO - thousand == -thousand
        assert A(-5) + A(3) == A(-2)
        assert A.one_e(9) - A.one_e(8) == A(900_000_000)

    def test_addition_carries_into_ten_power(self):
        """A sum past 9 digits sheds a digit."""
        assert (A(999_999_999) + ONE).parts == (100_000_000, 1)

    def test_addition_loses_small_operand(self):
        """Adding a value below the precision window has no effect."""
        assert A(1_000_000_000) + A(1) == A(1_000_000_000)
        assert A(1_000_000_000) - A(1) == A(1_000_000_000)

    def test_additive_identity(self, thousand, googol):
        """x + ZERO == x."""
        for value in (ONE, thousand, googol, -googol, MAX, MIN):
            assert value + ZERO == value
            assert ZERO + value == value

    def test_additive_inverse(self, thousand, googol):
        """x - x == ZERO."""
        for value in (ONE, thousand, googol, -googol, A(123_456_789) * googol):
            assert value - value == ZERO

    def test_in_place_operators_rebind(self, thousand):
        """+= and -= return new instances."""
        total = thousand
        total += thousand
        assert total == A(2_000)
        assert thousand == A(1_000)
        total -= A(500)
        assert total == A(1_500)

    def test_negation_is_exact(self, googol):
        """Negation only flips the sign."""
        assert (-googol).parts == (-100_000_000, 92)
        assert -(-googol) == googol
        assert -ZERO == ZERO

    def test_abs_and_pos(self, googol):
        """abs() and unary + behave like ints."""
        assert abs(-googol) == googol
        assert +googol is googol
        assert abs(MIN) == MAX


class TestSaturation:
    """Tests for saturating behavior at MAX/MIN."""

    def test_saturation_writes_no_output(self, capsys):
        """Saturating operations have no side effects."""
        assert MAX + MAX == MAX
        assert MIN * A(2) == MIN
        assert A.approximate(math.inf) == MAX
        assert MAX * 1.5 == MAX
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_multiplication_reaches_limits(self):
        """The largest coefficient at the largest power is MAX."""
        assert A(999_999_999) * A.one_e(MAX_TEN_POWER) == MAX
        assert A(-999_999_999) * A.one_e(MAX_TEN_POWER) == MIN

    def test_saturating_operations(self):
        """Operations past the range clamp to MAX/MIN."""
        assert MAX * A(2) == MAX
        assert MIN * A(2) == MIN
        assert MIN - MAX == MIN
        assert MIN + MIN == MIN
        assert MAX + MAX == MAX
        assert MAX - MIN == MAX

    def test_float_multiplication_saturates(self):
        """Float products past the range clamp to MAX/MIN."""
        assert MAX * 1.5 == MAX
        assert MIN * 1.5 == MIN

    def test_exponent_sum_overflow_saturates(self):
        """Products whose exponents sum past u32 saturate."""
        huge = A.one_e(MAX_TEN_POWER)
        assert huge * huge == MAX
        assert -huge * huge == MIN


class TestPowi:
    """Tests for integer powers."""

    def test_small_powers(self):
        """Small powers are exact."""
        assert A.one_e(3).powi(2) == A.one_e(6)
        assert A(2).powi(10) == A(1_024)
        assert A(-2).powi(3) == A(-8)
        assert A(7).powi(0) == ONE

    def test_pow_operator(self):
        """** delegates to powi."""
        assert A(10) ** 100 == A.one_e(100)

    def test_large_power_magnitude(self):
        """2^20000 is about 3.98e6020."""
        result = A(2).powi(20_000)
        assert result.ten_power + 8 == 6_020
        assert result.coefficient // 10_000_000 == 39

    def test_saturates(self):
        """Powers past the range saturate."""
        assert A(2).powi(2**40) == MAX
        assert A(-2).powi(2**40 + 1) == MIN

    def test_negative_exponent_raises(self):
        """Negative exponents are rejected."""
        with pytest.raises(ValueError):
            A(2).powi(-1)


class TestComparison:
    """Tests for ordering and equality."""

    def test_ordering_follows_magnitude(self):
        """Ordering follows the represented value across ten_powers."""
        ordered = [
            MIN,
            -A.one_e(100),
            A(-1_000_000_000),
            A(-5),
            ZERO,
            ONE,
            A(999_999_999),
            A(1_000_000_000),
            A.one_e(100),
            MAX,
        ]
        assert sorted(reversed(ordered)) == ordered
        for smaller, larger in zip(ordered, ordered[1:]):
            assert smaller < larger
            assert smaller <= larger
            assert larger > smaller
            assert larger >= smaller

    def test_equality(self):
        """Equal values compare equal and hash equal."""
        assert A(1_000) == A.one_e(3)
        assert hash(A(1_000)) == hash(A.one_e(3))
        assert len({A(1_000), A.one_e(3), A(1_001)}) == 2

    def test_not_equal_to_int(self):
        """Approximint does not compare equal to plain ints."""
        assert A(5) != 5

    def test_ordering_with_int_raises(self):
        """Ordering against non-Approximint values is unsupported."""
        with pytest.raises(TypeError):
            A(5) < 5  # type: ignore  # noqa: B015


class TestConversion:
    """Tests for conversion to Python numbers."""

    def test_bool(self):
        """Only zero is falsy."""
        assert not ZERO
        assert ONE
        assert MIN

    def test_float(self):
        """float() multiplies out the exponent."""
        assert float(A(1_234)) == 1_234.0
        assert float(A.one_e(100)) == pytest.approx(1e100)
        assert float(A.one_e(400)) == math.inf
        assert float(-A.one_e(400)) == -math.inf

    def test_int(self):
        """int() is exact for the stored digits."""
        assert int(A(1_234_567_890)) == 1_234_567_890
        assert int(A(1_234_567_899)) == 1_234_567_890
        assert int(A.one_e(100)) == 10**100

    def test_int_too_large_raises(self):
        """int() refuses astronomically large values."""
        with pytest.raises(OverflowError):
            int(MAX)
