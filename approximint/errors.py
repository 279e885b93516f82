"""Approximint error classes.

Arithmetic on Approximint never raises for range reasons: results saturate
at MAX/MIN. These errors signal formatter misconfiguration, which is a
programming error at the call site.
"""


class ApproximintError(Exception):
    """Base error for Approximint operations."""

    pass


class InvalidFormatConfig(ApproximintError, ValueError):
    """Formatter settings are outside their valid range.

    Raised for significant digit counts outside 1-9, 9-digit rounding,
    negative group sizes or thresholds, and multi-character separators.
    """

    pass


class UnsupportedFormatOption(ApproximintError, NotImplementedError):
    """Formatter option is recognized but not implemented.

    Word formatting with rounding enabled raises this when a word
    substitution would need to be rounded.
    """

    pass
