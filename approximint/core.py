"""Approximate integer arithmetic.

This module provides Approximint, an integer type that stores its value as
``coefficient * 10**ten_power``:
- The coefficient keeps at most 9 significant digits
- ten_power is an unsigned 32-bit integer
- Every operation is total: results past the representable range saturate
  to MAX/MIN instead of raising or wrapping

Usage pattern:
    from approximint import Approximint

    gold = Approximint(1_000)
    gold = gold * gold * 1.5        # 1.5 million
    gold += Approximint.one_e(100)  # a googol, plus change
    print(gold.as_english())        # "1 googol"

All public instances are normalized: ``|coefficient| < 10**9`` and, whenever
``ten_power > 0``, ``|coefficient| >= 10**8``. Zero is always ``(0, 0)``.
"""

from __future__ import annotations

import math
import sys
from typing import ClassVar

from approximint.constants import (
    COEFFICIENT_LIMIT,
    FLOAT_SHIFT_STEP,
    LOG10_2,
    MAX_COEFFICIENT,
    MAX_EXACT_TEN_POWER,
    MAX_TEN_POWER,
    NORMALIZED_FLOOR,
    SIGNIFICANT_DIGITS,
)
from approximint.format.decimal import DecimalFormatter
from approximint.format.scientific import ScientificFormatter
from approximint.format.words import ENGLISH, WordFormatter

__all__ = [
    "Approximint",
    "ONE",
    "ZERO",
    "MAX",
    "MIN",
]

# (coefficient, ten_power) pair before it is wrapped in an Approximint
_Parts = tuple[int, int]


# =============================================================================
# Normalization helpers (operate on raw parts)
# =============================================================================


def _div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // operator rounds toward negative infinity. Dropping digits
    from a negative coefficient must truncate toward zero so that the
    magnitude is handled identically for both signs.

    Examples:
        Python: -7 // 3 = -3 (rounds toward -inf)
        _div_trunc(-7, 3) = -2 (truncates toward zero)
    """
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    The built-in round() uses banker's rounding, which would turn 2.5 into 2.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _saturate(value: float) -> _Parts:
    """Return the MAX or MIN parts matching the sign of value."""
    if value < 0:
        return -MAX_COEFFICIENT, MAX_TEN_POWER
    return MAX_COEFFICIENT, MAX_TEN_POWER


def _normalize_underflow(coefficient: int, ten_power: int) -> _Parts:
    """Pull unused ten_power into the coefficient to maximize precision."""
    if coefficient == 0:
        return 0, 0
    while ten_power > 0 and abs(coefficient) < NORMALIZED_FLOOR:
        coefficient *= 10
        ten_power -= 1
    return coefficient, ten_power


def _normalize_overflow(coefficient: int, ten_power: int) -> _Parts:
    """Shed low-order digits until the coefficient fits in 9 digits.

    Digits are truncated, not rounded. When ten_power cannot grow any
    further the result saturates to MAX/MIN.
    """
    while abs(coefficient) >= COEFFICIENT_LIMIT:
        if ten_power >= MAX_TEN_POWER:
            return _saturate(coefficient)
        ten_power += 1
        coefficient = _div_trunc(coefficient, 10)
    if ten_power > MAX_TEN_POWER:
        return _saturate(coefficient)
    return coefficient, ten_power


def _normalized(coefficient: int, ten_power: int) -> _Parts:
    return _normalize_overflow(*_normalize_underflow(coefficient, ten_power))


def _adjust_power(lower: _Parts, target_power: int) -> _Parts:
    """Raise lower's ten_power to target_power, dropping coefficient digits.

    Once every digit has been dropped the coefficient is zero and the
    exponent is clamped to target_power. At most 9 iterations run.
    """
    coefficient, ten_power = lower
    while ten_power < target_power:
        coefficient = _div_trunc(coefficient, 10)
        if coefficient == 0:
            return 0, target_power
        ten_power += 1
    return coefficient, ten_power


def _match_powers(left: _Parts, right: _Parts) -> tuple[_Parts, _Parts]:
    """Align two operands on the larger ten_power before add/subtract.

    The smaller-magnitude operand loses its low-order digits; storage is
    never widened.
    """
    left = _normalized(*left)
    right = _normalized(*right)
    if left[1] < right[1]:
        return _adjust_power(left, right[1]), right
    if right[1] < left[1]:
        return left, _adjust_power(right, left[1])
    return left, right


def _approximate_int(value: int) -> _Parts:
    """Truncate value to its leading 9 digits.

    The digit count is estimated from the bit length so that wide ints are
    divided once; the overflow pass drops the one or two digits the estimate
    leaves over.
    """
    # Lower bound on the decimal digit count, minus one for float error
    digits = math.floor((abs(value).bit_length() - 1) * LOG10_2)
    excess = digits - SIGNIFICANT_DIGITS
    if excess <= 0:
        return _normalize_overflow(value, 0)
    return _normalize_overflow(_div_trunc(value, 10**excess), excess)


def _shift_float(value: float, places: int) -> float:
    """Return ``value * 10**places`` without overflowing the power itself.

    ``10.0**places`` raises OverflowError past 1e308 even when the product
    is in range, so large shifts are applied in steps.
    """
    while places > FLOAT_SHIFT_STEP:
        value *= 10.0**FLOAT_SHIFT_STEP
        places -= FLOAT_SHIFT_STEP
    return value * 10.0**places


def _approximate_float(value: float) -> _Parts:
    """Approximate a float using a base-10 logarithm digit estimate.

    The estimate may be off by one around powers of ten; the overflow pass
    corrects a coefficient that rounded up to 10 digits.

    Raises:
        ValueError: If value is NaN
    """
    if math.isnan(value):
        raise ValueError("Cannot approximate NaN")
    if math.isinf(value):
        return _saturate(value)
    if value == 0:
        return 0, 0

    places_to_shift = math.floor(SIGNIFICANT_DIGITS - math.log10(abs(value)))
    if places_to_shift < 0:
        ten_power = -places_to_shift
    else:
        places_to_shift = 0
        ten_power = 0

    shifted = _shift_float(value, places_to_shift)
    return _normalized(_round_half_away(shifted), ten_power)


# =============================================================================
# Approximint class
# =============================================================================


class Approximint:
    """Integer approximated as ``coefficient * 10**ten_power``.

    The coefficient has a range of -999_999_999..=999_999_999 and ten_power
    a range of 0..=2**32-1, covering roughly +/-9.999_999_99e4_294_967_303
    with 9 digits of precision.

    Approximint is immutable. Arithmetic returns new instances, so ``+=``
    and ``-=`` rebind the name rather than mutating shared values.

    Ordering follows the represented value. Plain ``(ten_power, coefficient)``
    tuple order is only correct for non-negative values; negative values
    with a larger ten_power sort lower, so ``-one_e(100) < Approximint(-5)``.

    Attributes:
        coefficient: The significant digits (read-only)
        ten_power: The power of ten applied to the coefficient (read-only)
    """

    __slots__ = ("_coefficient", "_ten_power")
    _coefficient: int
    _ten_power: int

    MAX: ClassVar[Approximint]
    MIN: ClassVar[Approximint]
    ONE: ClassVar[Approximint]
    ZERO: ClassVar[Approximint]

    def __init__(self, value: int | Approximint = 0) -> None:
        """Create an Approximint from an integer or another Approximint.

        Integers with more than 9 significant digits are truncated to their
        leading 9 digits.

        Args:
            value: Integer value to approximate, or Approximint to copy

        Raises:
            TypeError: If value is not an int or Approximint
        """
        if isinstance(value, Approximint):
            self._coefficient = value._coefficient
            self._ten_power = value._ten_power
        elif isinstance(value, int) and not isinstance(value, bool):
            self._coefficient, self._ten_power = _approximate_int(value)
        else:
            raise TypeError(
                f"Approximint requires int, got {type(value).__name__}; "
                "use Approximint.approximate() for floats"
            )

    @classmethod
    def _from_parts(cls, parts: _Parts) -> Approximint:
        """Wrap already-normalized parts without re-validating them."""
        instance = object.__new__(cls)
        instance._coefficient, instance._ten_power = parts
        return instance

    @classmethod
    def new(cls, value: int) -> Approximint:
        """Return value as an Approximint (alias of the constructor)."""
        return cls(value)

    @classmethod
    def one_e(cls, exponent: int) -> Approximint:
        """Return a value representing 10 raised to the power of exponent.

        Raises:
            ValueError: If exponent is negative or exceeds 2**32-1
        """
        if not 0 <= exponent <= MAX_TEN_POWER:
            raise ValueError(f"Exponent must be in [0, {MAX_TEN_POWER}], got {exponent}")
        return cls._from_parts(_normalize_underflow(1, exponent))

    @classmethod
    def approximate(cls, value: int | float | Approximint) -> Approximint:
        """Return an approximation of an int or float.

        Ints of any size are truncated to 9 significant digits. Floats are
        rounded to 9 significant digits; infinities saturate to MAX/MIN.

        Raises:
            TypeError: If value is not an int, float or Approximint
            ValueError: If value is NaN
        """
        if isinstance(value, Approximint):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls._from_parts(_approximate_int(value))
        if isinstance(value, float):
            return cls._from_parts(_approximate_float(value))
        raise TypeError(f"Cannot approximate {type(value).__name__}")

    @property
    def coefficient(self) -> int:
        """The significant-digit component."""
        return self._coefficient

    @property
    def ten_power(self) -> int:
        """The power of ten the coefficient is scaled by."""
        return self._ten_power

    @property
    def parts(self) -> tuple[int, int]:
        """The ``(coefficient, ten_power)`` pair."""
        return self._coefficient, self._ten_power

    # --- Arithmetic operations ---

    def __neg__(self) -> Approximint:
        """Negate the value. Always exact."""
        return Approximint._from_parts((-self._coefficient, self._ten_power))

    def __pos__(self) -> Approximint:
        return self

    def __abs__(self) -> Approximint:
        return Approximint._from_parts((abs(self._coefficient), self._ten_power))

    def __add__(self, other: Approximint | int) -> Approximint:
        """Add two values, dropping digits of the smaller operand as needed."""
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        lhs_parts, rhs_parts = _match_powers(self.parts, rhs.parts)
        # Both coefficients are below 10^9, so the sum fits in 10 digits
        return Approximint._from_parts(
            _normalized(lhs_parts[0] + rhs_parts[0], lhs_parts[1])
        )

    def __radd__(self, other: int) -> Approximint:
        return self.__add__(other)

    def __sub__(self, other: Approximint | int) -> Approximint:
        """Subtract other from self. Saturates to MIN/MAX."""
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        lhs_parts, rhs_parts = _match_powers(self.parts, rhs.parts)
        return Approximint._from_parts(
            _normalized(lhs_parts[0] - rhs_parts[0], lhs_parts[1])
        )

    def __rsub__(self, other: int) -> Approximint:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Approximint | int | float) -> Approximint:
        """Multiply by another Approximint, an int or a float.

        Raises:
            ValueError: If other is a NaN float
        """
        if isinstance(other, float):
            return self._mul_float(other)
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        # The product is at most 18 digits; the overflow pass shifts it back
        # into the 9-digit window, saturating if ten_power runs out.
        return Approximint._from_parts(
            _normalized(
                self._coefficient * rhs._coefficient,
                self._ten_power + rhs._ten_power,
            )
        )

    def __rmul__(self, other: int | float) -> Approximint:
        return self.__mul__(other)

    def _mul_float(self, rhs: float) -> Approximint:
        """Multiply by a float scalar, rounding to 9 significant digits.

        Multiplicands whose magnitude reaches the coefficient limit are
        approximated first and multiplied as Approximints.
        """
        if math.isnan(rhs):
            raise ValueError("Cannot multiply Approximint by NaN")
        if abs(rhs) >= COEFFICIENT_LIMIT:
            return self * Approximint.approximate(rhs)

        product = self._coefficient * rhs
        if product == 0:
            return ZERO

        places_to_shift = math.floor(SIGNIFICANT_DIGITS - math.log10(abs(product)))
        ten_power = self._ten_power - places_to_shift
        if ten_power < 0:
            # Not enough ten_power to absorb the shift: keep the integer part
            places_to_shift = self._ten_power
            ten_power = 0

        shifted = _shift_float(product, places_to_shift)
        return Approximint._from_parts(_normalized(_round_half_away(shifted), ten_power))

    def powi(self, exponent: int) -> Approximint:
        """Raise to a non-negative integer power by repeated squaring.

        Each intermediate product is truncated to 9 significant digits, and
        the result saturates like any other multiplication.

        Raises:
            ValueError: If exponent is negative
        """
        if exponent < 0:
            raise ValueError(f"powi requires a non-negative exponent, got {exponent}")
        result = ONE
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            exponent >>= 1
            if exponent:
                base = base * base
        return result

    def __pow__(self, exponent: int) -> Approximint:
        if not isinstance(exponent, int):
            return NotImplemented
        return self.powi(exponent)

    # --- Comparison operations ---

    def _order_key(self) -> tuple[int, int, int]:
        # Normalized values have one representation, so magnitude follows
        # ten_power first. Negative values order by descending ten_power.
        if self._coefficient < 0:
            return -1, -self._ten_power, self._coefficient
        return (1 if self._coefficient else 0), self._ten_power, self._coefficient

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Approximint):
            return NotImplemented
        return self.parts == other.parts

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Approximint):
            return NotImplemented
        return self._order_key() < other._order_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Approximint):
            return NotImplemented
        return self._order_key() <= other._order_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Approximint):
            return NotImplemented
        return self._order_key() > other._order_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Approximint):
            return NotImplemented
        return self._order_key() >= other._order_key()

    def __hash__(self) -> int:
        return hash(self.parts)

    # --- Conversion ---

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._coefficient != 0

    def __float__(self) -> float:
        """Convert to float. Values past the float range become +/-inf."""
        if self._ten_power > sys.float_info.max_10_exp:
            return math.copysign(math.inf, self._coefficient)
        return self._coefficient * 10.0**self._ten_power

    def __int__(self) -> int:
        """Convert to the exact int ``coefficient * 10**ten_power``.

        Raises:
            OverflowError: If ten_power exceeds MAX_EXACT_TEN_POWER
        """
        if self._ten_power > MAX_EXACT_TEN_POWER:
            raise OverflowError(
                f"Approximint with ten_power {self._ten_power} is too large for int"
            )
        return self._coefficient * 10**self._ten_power

    # --- Formatting ---

    def as_english(self) -> WordFormatter:
        """Return a formatter that renders this number using English words."""
        return WordFormatter.english(self)

    def as_words(self, words: tuple[tuple[int, str], ...] = ENGLISH) -> WordFormatter:
        """Return a formatter that renders this number using a word table."""
        return WordFormatter(self, words)

    def as_scientific(self) -> ScientificFormatter:
        """Return a formatter that renders this number in scientific notation."""
        return ScientificFormatter(self)

    def as_decimal(self) -> DecimalFormatter:
        """Return a formatter that renders this number in decimal notation."""
        return DecimalFormatter(self)

    def debug_text(self) -> str:
        """Render with all 9 digits of precision.

        Scientific notation with trailing zeros removed once ten_power > 0,
        grouped decimal digits otherwise.
        """
        if self._ten_power > 0:
            return str(ScientificFormatter(self).significant_digits(9).truncate_zeroes())
        return str(DecimalFormatter(self))

    def __str__(self) -> str:
        # Display truncates rather than rounds: a displayed total never
        # looks larger than the value it represents.
        if self._ten_power > 0:
            return str(ScientificFormatter(self))
        return str(DecimalFormatter(self))

    def __repr__(self) -> str:
        return f"Approximint({self.debug_text()})"

    def __format__(self, format_spec: str) -> str:
        """Support ``format()``/f-strings.

        Format specs: ``""`` default text, ``"d"`` decimal, ``"e"``
        scientific, ``"w"`` English words, ``"?"`` debug text.

        Raises:
            ValueError: If format_spec is not one of the above
        """
        if not format_spec:
            return str(self)
        if format_spec == "?":
            return self.debug_text()
        renderers = {
            "d": self.as_decimal,
            "e": self.as_scientific,
            "w": self.as_english,
        }
        renderer = renderers.get(format_spec)
        if renderer is None:
            raise ValueError(f"Unknown format code {format_spec!r} for Approximint")
        return str(renderer())


def _coerce(x: Approximint | int) -> Approximint | None:
    """Return x as an Approximint, or None if it is not a supported operand."""
    if isinstance(x, Approximint):
        return x
    if isinstance(x, int) and not isinstance(x, bool):
        return Approximint(x)
    return None


# =============================================================================
# Module-level constants
# =============================================================================

MAX = Approximint._from_parts((MAX_COEFFICIENT, MAX_TEN_POWER))
MIN = Approximint._from_parts((-MAX_COEFFICIENT, MAX_TEN_POWER))
ONE = Approximint._from_parts((1, 0))
ZERO = Approximint._from_parts((0, 0))

Approximint.MAX = MAX
Approximint.MIN = MIN
Approximint.ONE = ONE
Approximint.ZERO = ZERO
