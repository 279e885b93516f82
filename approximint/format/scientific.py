"""Scientific notation formatter."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from approximint.format.config import DEFAULT_SCIENTIFIC_SETTINGS, ScientificSettings
from approximint.format.info import ScientificInfo
from approximint.format.sink import Formatter, TextSink

if TYPE_CHECKING:
    from approximint.core import Approximint


@dataclass(frozen=True)
class ScientificFormatter(Formatter):
    """Renders an Approximint as ``d[.ddd]e<exponent>``.

    By default 4 significant digits are shown and extra digits are
    truncated, not rounded: 1_234_567_890 renders as "1.234e9". Zero always
    renders as "0".

    Builder methods return a new formatter:
        str(ScientificFormatter(x).rounded().significant_digits(3))
    """

    value: Approximint
    settings: ScientificSettings = DEFAULT_SCIENTIFIC_SETTINGS

    def decimal(self, decimal: str) -> ScientificFormatter:
        """Set the character between the whole number and decimal digits."""
        return replace(self, settings=replace(self.settings, decimal=decimal))

    def rounded(self) -> ScientificFormatter:
        """Round the displayed value instead of truncating it.

        Raises:
            InvalidFormatConfig: If 9 significant digits are configured
        """
        return replace(self, settings=replace(self.settings, rounded=True))

    def significant_digits(self, digits: int) -> ScientificFormatter:
        """Set the number of significant digits to display.

        Raises:
            InvalidFormatConfig: If digits is outside 1-9, or 9 while rounding
        """
        return replace(self, settings=replace(self.settings, significant_digits=digits))

    def truncate_zeroes(self) -> ScientificFormatter:
        """Prevent displaying trailing zeroes."""
        return replace(self, settings=replace(self.settings, keep_trailing_zeroes=False))

    def write(self, sink: TextSink) -> None:
        if not self.value:
            sink.write("0")
            return

        info = ScientificInfo.from_approximint(self.value)
        if self.settings.rounded:
            info.round(self.settings.significant_digits)
        info.write_scientific(sink, self.settings)
