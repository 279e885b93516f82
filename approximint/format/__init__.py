"""Formatters for Approximint values.

This package provides three notations built on shared digit extraction:
- ScientificFormatter: "1.234e9"
- DecimalFormatter: "1,234,567,890"
- WordFormatter: "1.2 billion", "3.1 googol"
"""

from approximint.format.config import (
    DEFAULT_DECIMAL_SETTINGS,
    DEFAULT_SCIENTIFIC_SETTINGS,
    DEFAULT_WORD_SETTINGS,
    ENGLISH_WORD_SETTINGS,
    DecimalSettings,
    ScientificSettings,
    WordSettings,
)
from approximint.format.decimal import DecimalFormatter
from approximint.format.digits import DigitRing, DigitSlot
from approximint.format.info import ScientificInfo
from approximint.format.scientific import ScientificFormatter
from approximint.format.sink import Formatter, TextSink, render
from approximint.format.words import ENGLISH, WordFormatter, WordTable

__all__ = [
    # Formatters
    "Formatter",
    "ScientificFormatter",
    "DecimalFormatter",
    "WordFormatter",
    # Settings
    "ScientificSettings",
    "DecimalSettings",
    "WordSettings",
    "DEFAULT_SCIENTIFIC_SETTINGS",
    "DEFAULT_DECIMAL_SETTINGS",
    "DEFAULT_WORD_SETTINGS",
    "ENGLISH_WORD_SETTINGS",
    # Word tables
    "ENGLISH",
    "WordTable",
    # Internals
    "DigitRing",
    "DigitSlot",
    "ScientificInfo",
    "TextSink",
    "render",
]
