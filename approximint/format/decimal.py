"""Grouped decimal notation formatter."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from itertools import islice
from typing import TYPE_CHECKING

from approximint.format.config import DEFAULT_DECIMAL_SETTINGS, DecimalSettings
from approximint.format.info import ScientificInfo
from approximint.format.scientific import ScientificFormatter
from approximint.format.sink import Formatter, TextSink

if TYPE_CHECKING:
    from approximint.core import Approximint

def separator_offset(exponent: int, digits_per_separator: int) -> int:
    """Return the offset that aligns digit groups to the units digit.

    With ``offset`` from this function, a separator goes before the digit at
    ``index`` whenever ``(index + offset) % digits_per_separator == 0``.
    """
    if digits_per_separator == 0:
        return 0
    return digits_per_separator - 1 - exponent % digits_per_separator


def write_grouped_digits(
    sink: TextSink,
    digits: Iterable[str],
    exponent: int,
    separator: str,
    digits_per_separator: int,
) -> None:
    """Write the ``exponent + 1`` integer digits of a value with separators.

    Stored digits are written first; the remaining places up to the units
    digit are padded with zeros, so no more than 9 digits are ever read.
    """
    offset = separator_offset(exponent, digits_per_separator)

    def write_separator(index: int) -> None:
        if (
            digits_per_separator > 0
            and index > 0
            and (index + offset) % digits_per_separator == 0
        ):
            sink.write(separator)

    index = 0
    for digit in islice(digits, exponent + 1):
        write_separator(index)
        sink.write(digit)
        index += 1

    for index in range(index, exponent + 1):
        write_separator(index)
        sink.write("0")


@dataclass(frozen=True)
class DecimalFormatter(Formatter):
    """Renders an Approximint as grouped decimal digits, e.g. "1,234,567,890".

    Values with ten_power at or above ``scientific_after`` (default 30) are
    rendered in default scientific notation instead, so a huge value never
    expands into thousands of characters. Zero renders as "0".
    """

    value: Approximint
    settings: DecimalSettings = DEFAULT_DECIMAL_SETTINGS

    def separator(self, separator: str) -> DecimalFormatter:
        """Set the character used between grouped integer digits."""
        return replace(self, settings=replace(self.settings, separator=separator))

    def digits_per_separator(self, digits: int) -> DecimalFormatter:
        """Set the number of digits between separators; 0 disables grouping."""
        return replace(self, settings=replace(self.settings, digits_per_separator=digits))

    def scientific_after(self, ten_power: int) -> DecimalFormatter:
        """Set the ten_power at which scientific notation takes over."""
        return replace(self, settings=replace(self.settings, scientific_after=ten_power))

    def write(self, sink: TextSink) -> None:
        if not self.value:
            sink.write("0")
            return
        if self.value.ten_power >= self.settings.scientific_after:
            ScientificFormatter(self.value).write(sink)
            return

        info = ScientificInfo.from_approximint(self.value)
        if info.negative:
            sink.write("-")
        write_grouped_digits(
            sink,
            info.digits,
            info.exponent,
            self.settings.separator,
            self.settings.digits_per_separator,
        )
