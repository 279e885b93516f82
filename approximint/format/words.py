"""Word notation formatter ("3.1 googol", "1 billion googol")."""

from __future__ import annotations

from dataclasses import dataclass, replace
from itertools import islice
from typing import TYPE_CHECKING

import structlog

from approximint.errors import InvalidFormatConfig, UnsupportedFormatOption
from approximint.format.config import (
    DEFAULT_DECIMAL_SETTINGS,
    DEFAULT_WORD_SETTINGS,
    ENGLISH_WORD_SETTINGS,
    DecimalSettings,
    WordSettings,
)
from approximint.format.decimal import write_grouped_digits
from approximint.format.info import ScientificInfo
from approximint.format.sink import Formatter, TextSink

if TYPE_CHECKING:
    from approximint.core import Approximint

logger = structlog.get_logger()

# Words per write() call when a word repeats, e.g. "1 centillion centillion ..."
_RUN_CHUNK = 1024

# (power of ten, word) pairs in ascending power order
WordTable = tuple[tuple[int, str], ...]

ENGLISH: WordTable = (
    (3, "thousand"),
    (6, "million"),
    (9, "billion"),
    (12, "trillion"),
    (15, "quadrillion"),
    (18, "quintillion"),
    (21, "sextillion"),
    (24, "septillion"),
    (27, "octillion"),
    (30, "nonillion"),
    (33, "decillion"),
    (36, "undecillion"),
    (39, "duodecillion"),
    (42, "tredecillion"),
    (45, "quattuordecillion"),
    (48, "quindecillion"),
    (51, "sexdecillion"),
    (54, "septendecillion"),
    (57, "octodecillion"),
    (60, "novemdecillion"),
    (63, "vigintillion"),
    (66, "unvigintillion"),
    (69, "duovigintillion"),
    (72, "trevigintillion"),
    (75, "quattuorvigintillion"),
    (78, "quinvigintillion"),
    (81, "sexvigintillion"),
    (84, "septenvigintillion"),
    (87, "octovigintillion"),
    (90, "novemvigintillion"),
    (93, "trigintillion"),
    (100, "googol"),
    (303, "centillion"),
)


def validate_word_table(words: WordTable) -> None:
    """Check that words is non-empty with strictly ascending positive powers.

    Raises:
        InvalidFormatConfig: If the table cannot be used for reduction
    """
    if not words:
        raise InvalidFormatConfig("word table must contain at least one word")
    previous = 0
    for power, word in words:
        if power <= previous:
            raise InvalidFormatConfig(
                f"word powers must be positive and strictly ascending, got {power} ({word!r})"
            )
        previous = power


def _write_run(sink: TextSink, piece: str, count: int) -> None:
    """Write piece count times in bounded chunks."""
    chunks, rest = divmod(count, _RUN_CHUNK)
    if chunks:
        chunk = piece * _RUN_CHUNK
        for _ in range(chunks):
            sink.write(chunk)
    if rest:
        sink.write(piece * rest)


@dataclass(frozen=True)
class WordFormatter(Formatter):
    """Renders an Approximint using a table of large-number words.

    The formatter reduces the value's exponent by the largest eligible word,
    and repeats the process until the remaining exponent falls below
    ``decimal_before``. The remainder is written as grouped digits followed
    by at most one fractional digit, then the words in increasing order:

        >>> str(WordFormatter.english(Approximint.one_e(100) * math.pi))
        '3.1 googol'
        >>> str(WordFormatter.english(Approximint.one_e(200)))
        '1 googol googol'

    Words with a power below ``decimal_before`` are never used. The English
    formatter sets it to 9, so values under a billion render as plain
    grouped digits.
    """

    value: Approximint
    words: WordTable = ENGLISH
    settings: WordSettings = DEFAULT_WORD_SETTINGS
    decimal_settings: DecimalSettings = DEFAULT_DECIMAL_SETTINGS

    def __post_init__(self) -> None:
        # Accept any sequence of pairs but store a hashable tuple
        words = tuple((int(power), str(word)) for power, word in self.words)
        validate_word_table(words)
        object.__setattr__(self, "words", words)

    @classmethod
    def english(cls, value: Approximint) -> WordFormatter:
        """Return a formatter using English words from "billion" upwards."""
        return cls(value, ENGLISH, ENGLISH_WORD_SETTINGS)

    def rounded(self) -> WordFormatter:
        """Request rounding before formatting.

        Rounding compound word output is not supported yet: rendering a
        value that needs a word raises UnsupportedFormatOption.
        """
        return replace(self, settings=replace(self.settings, rounded=True))

    def decimal_before_10_power(self, ten_power: int) -> WordFormatter:
        """Prevent using words for powers of ten below ten_power."""
        return replace(self, settings=replace(self.settings, decimal_before=ten_power))

    def decimal(self, decimal: str) -> WordFormatter:
        """Set the character before the fractional digit."""
        return replace(self, settings=replace(self.settings, decimal=decimal))

    def separator(self, separator: str) -> WordFormatter:
        """Set the character used between grouped integer digits."""
        return replace(
            self, decimal_settings=replace(self.decimal_settings, separator=separator)
        )

    def digits_per_separator(self, digits: int) -> WordFormatter:
        """Set the number of digits between separators; 0 disables grouping."""
        return replace(
            self, decimal_settings=replace(self.decimal_settings, digits_per_separator=digits)
        )

    def write(self, sink: TextSink) -> None:
        if not self.value:
            sink.write("0")
            return

        info = ScientificInfo.from_approximint(self.value)
        if info.negative:
            sink.write("-")
        self._write_words(sink, info, info.exponent)

    def _select_word(self, exponent: int) -> tuple[int, str] | None:
        """Return the largest eligible word whose power is <= exponent."""
        selected = None
        for power, word in self.words:
            if power > exponent:
                break
            if power >= self.settings.decimal_before:
                selected = (power, word)
        return selected

    def _reduce(self, exponent: int) -> tuple[int, list[tuple[str, int]]]:
        """Split exponent into word runs and the exponent left for digits.

        Greedy selection repeats a word while the remaining exponent is at
        least its power, so each word is taken ``exponent // power`` times
        at once. Runs are returned in selection order, largest word first.
        """
        runs = []
        while True:
            word = self._select_word(exponent)
            if word is None:
                return exponent, runs
            power, name = word
            count, exponent = divmod(exponent, power)
            runs.append((name, count))

    def _write_words(self, sink: TextSink, info: ScientificInfo, exponent: int) -> None:
        remainder, runs = self._reduce(exponent)
        if runs and self.settings.rounded:
            logger.debug("word_rounding_unsupported", exponent=exponent, word=runs[0][0])
            raise UnsupportedFormatOption("rounding is not supported by WordFormatter")

        self._write_number(sink, info, remainder)
        # The last word selected is the innermost one and is written first
        for name, count in reversed(runs):
            _write_run(sink, f" {name}", count)

    def _write_number(self, sink: TextSink, info: ScientificInfo, exponent: int) -> None:
        """Write the leading digits as a number of magnitude 10**exponent.

        One fractional digit follows when it is non-zero: "123.1 thousand".
        """
        write_grouped_digits(
            sink,
            info.digits,
            exponent,
            self.decimal_settings.separator,
            self.decimal_settings.digits_per_separator,
        )
        fraction = next(islice(info.digits, exponent + 1, None), "0")
        if fraction != "0":
            sink.write(self.settings.decimal)
            sink.write(fraction)
