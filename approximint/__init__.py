"""Approximint - approximate big integers with human-readable formatting."""

from approximint.core import MAX, MIN, ONE, ZERO, Approximint
from approximint.errors import ApproximintError, InvalidFormatConfig, UnsupportedFormatOption
from approximint.format import (
    ENGLISH,
    DecimalFormatter,
    DecimalSettings,
    ScientificFormatter,
    ScientificSettings,
    WordFormatter,
    WordSettings,
)

__version__ = "0.1.0"
__all__ = [
    "Approximint",
    "MAX",
    "MIN",
    "ONE",
    "ZERO",
    "ApproximintError",
    "InvalidFormatConfig",
    "UnsupportedFormatOption",
    "DecimalFormatter",
    "ScientificFormatter",
    "WordFormatter",
    "DecimalSettings",
    "ScientificSettings",
    "WordSettings",
    "ENGLISH",
    "__version__",
]
