"""Digit extraction and rounding shared by all formatters.

ScientificInfo holds the decimal digits of an Approximint's coefficient and
the exponent of its leading digit, so that ``value ~= d.dddddddd * 10**exponent``.
It is built once per formatting call and discarded afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import TYPE_CHECKING

from approximint.constants import SIGNIFICANT_DIGITS
from approximint.format.digits import DigitRing

if TYPE_CHECKING:
    from approximint.core import Approximint
    from approximint.format.config import ScientificSettings
    from approximint.format.sink import TextSink

ROUND_UP_DIGITS = frozenset("56789")


@dataclass
class ScientificInfo:
    """Digits, leading-digit exponent and sign of a value.

    Attributes:
        digits: Coefficient digits, most significant first when iterated
        exponent: Decimal exponent of the leading digit
        negative: Whether the value is below zero
    """

    digits: DigitRing = field(default_factory=DigitRing)
    exponent: int = 0
    negative: bool = False

    @classmethod
    def from_approximint(cls, value: Approximint) -> ScientificInfo:
        """Extract the digits of value's coefficient.

        The exponent is ``digit_count - 1 + ten_power``. Zero has no digits
        and an exponent of -1; formatters render it before getting here.
        """
        digits = DigitRing()
        coefficient = abs(value.coefficient)
        digit_count = 0
        while coefficient > 0:
            coefficient, digit = divmod(coefficient, 10)
            digits.push_back(str(digit))
            digit_count += 1

        return cls(
            digits=digits,
            exponent=digit_count - 1 + value.ten_power,
            negative=value.coefficient < 0,
        )

    def round(self, significant_digits: int) -> None:
        """Round in place to significant_digits digits.

        Inspects the digit right after the kept window. A 5-9 carries into
        the kept digits, turning 9s into 0s; a carry out of the leading
        digit pushes a new leading 1 and bumps the exponent, so 9.999e5
        rounds to 1.000e6 at 4 digits.

        Rounding to 9 or more digits does nothing: there is no stored digit
        beyond the window to inspect.
        """
        if significant_digits >= SIGNIFICANT_DIGITS:
            return

        slots = islice(
            self.digits.iter_mut_rev(),
            SIGNIFICANT_DIGITS - 1 - significant_digits,
            None,
        )
        check_slot = next(slots)
        if check_slot.digit not in ROUND_UP_DIGITS:
            return

        for slot in slots:
            if slot.digit == "9":
                slot.digit = "0"
            else:
                slot.digit = str(int(slot.digit) + 1)
                return

        # Carried past the leading digit
        self.digits.push_back("1")
        self.exponent += 1

    def write_scientific(self, sink: TextSink, settings: ScientificSettings) -> None:
        """Emit ``[-]d[.ddd]e<exponent>`` according to settings."""
        if self.negative:
            sink.write("-")

        window = list(islice(self.digits, settings.significant_digits))
        for index, digit in enumerate(window):
            if (
                not settings.keep_trailing_zeroes
                and index > 0
                and all(remaining == "0" for remaining in window[index:])
            ):
                break
            if index == 1:
                sink.write(settings.decimal)
            sink.write(digit)

        sink.write(f"e{self.exponent}")
