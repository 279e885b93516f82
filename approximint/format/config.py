"""Formatter configuration.

Each formatter carries one of these frozen settings objects. Settings are
validated on construction, so a misconfigured formatter fails at the line
that configured it rather than when it is first rendered.
"""

from dataclasses import dataclass

from approximint.constants import (
    DEFAULT_DECIMAL_CHAR,
    DEFAULT_DIGITS_PER_SEPARATOR,
    DEFAULT_SCIENTIFIC_AFTER,
    DEFAULT_SEPARATOR,
    DEFAULT_SIGNIFICANT_DIGITS,
    ENGLISH_DECIMAL_BEFORE,
    SIGNIFICANT_DIGITS,
)
from approximint.errors import InvalidFormatConfig


def _validate_char(name: str, value: str) -> None:
    """Raise InvalidFormatConfig unless value is exactly one character."""
    if not isinstance(value, str) or len(value) != 1:
        raise InvalidFormatConfig(f"{name} must be a single character, got {value!r}")


def _validate_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise InvalidFormatConfig(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class ScientificSettings:
    """Settings for scientific notation.

    Attributes:
        decimal: Character between the leading digit and the rest (default: ".")
        significant_digits: Digits to display, 1-9 (default: 4)
        keep_trailing_zeroes: If False, stop once every remaining digit in
            the window is zero
        rounded: If True, round to significant_digits instead of truncating.
            Rounding needs a digit past the window, so at most 8 digits.
    """

    decimal: str = DEFAULT_DECIMAL_CHAR
    significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS
    keep_trailing_zeroes: bool = True
    rounded: bool = False

    def __post_init__(self) -> None:
        _validate_char("decimal", self.decimal)
        if self.rounded:
            if not 1 <= self.significant_digits < SIGNIFICANT_DIGITS:
                raise InvalidFormatConfig(
                    "significant digits must be between 1 and "
                    f"{SIGNIFICANT_DIGITS - 1} when rounding, got {self.significant_digits}"
                )
        elif not 1 <= self.significant_digits <= SIGNIFICANT_DIGITS:
            raise InvalidFormatConfig(
                f"significant digits must be between 1 and {SIGNIFICANT_DIGITS}, "
                f"got {self.significant_digits}"
            )


@dataclass(frozen=True)
class DecimalSettings:
    """Settings for grouped decimal notation.

    Attributes:
        separator: Character between digit groups (default: ",")
        digits_per_separator: Group size; 0 disables grouping (default: 3)
        scientific_after: ten_power at or above which scientific notation
            is used instead (default: 30)
    """

    separator: str = DEFAULT_SEPARATOR
    digits_per_separator: int = DEFAULT_DIGITS_PER_SEPARATOR
    scientific_after: int = DEFAULT_SCIENTIFIC_AFTER

    def __post_init__(self) -> None:
        _validate_char("separator", self.separator)
        _validate_non_negative("digits_per_separator", self.digits_per_separator)
        _validate_non_negative("scientific_after", self.scientific_after)


@dataclass(frozen=True)
class WordSettings:
    """Settings for word notation.

    Attributes:
        decimal_before: Words with a power of ten below this are never used;
            such magnitudes render as grouped digits (default: 0)
        decimal: Character before the single fractional digit (default: ".")
        rounded: Requests rounding. Not supported: rendering a word with
            this set raises UnsupportedFormatOption.
    """

    decimal_before: int = 0
    decimal: str = DEFAULT_DECIMAL_CHAR
    rounded: bool = False

    def __post_init__(self) -> None:
        _validate_non_negative("decimal_before", self.decimal_before)
        _validate_char("decimal", self.decimal)


# Default configuration instances
DEFAULT_SCIENTIFIC_SETTINGS = ScientificSettings()
DEFAULT_DECIMAL_SETTINGS = DecimalSettings()
DEFAULT_WORD_SETTINGS = WordSettings()
ENGLISH_WORD_SETTINGS = WordSettings(decimal_before=ENGLISH_DECIMAL_BEFORE)
