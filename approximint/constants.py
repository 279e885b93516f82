"""Limits and default display parameters for Approximint.

Centralizes the representation bounds and formatter defaults so that the
arithmetic and formatting modules agree on them.
"""

import math

# Number of significant decimal digits held by the coefficient
SIGNIFICANT_DIGITS = 9

# Coefficient magnitude must stay strictly below 10^9
COEFFICIENT_LIMIT = 10**SIGNIFICANT_DIGITS

# Largest coefficient magnitude (used by the MAX/MIN sentinels)
MAX_COEFFICIENT = COEFFICIENT_LIMIT - 1  # 999_999_999

# Smallest coefficient magnitude allowed once ten_power > 0
NORMALIZED_FLOOR = 10 ** (SIGNIFICANT_DIGITS - 1)  # 100_000_000

# ten_power is an unsigned 32-bit integer
MAX_TEN_POWER = 2**32 - 1

# int() refuses to materialize values with more trailing zeros than this
MAX_EXACT_TEN_POWER = 100_000

# Scientific notation defaults (truncating, 4 digits, keep zeros)
DEFAULT_DECIMAL_CHAR = "."
DEFAULT_SIGNIFICANT_DIGITS = 4

# Decimal notation defaults
DEFAULT_SEPARATOR = ","
DEFAULT_DIGITS_PER_SEPARATOR = 3
# Values with ten_power at or above this render in scientific notation
DEFAULT_SCIENTIFIC_AFTER = 30

# English word formatting starts at "billion"
ENGLISH_DECIMAL_BEFORE = 9

# Used to estimate the decimal digit count of wide ints from their bit length
LOG10_2 = math.log10(2)

# Largest power of ten applied to a float in one step (10.0**309 overflows)
FLOAT_SHIFT_STEP = 300
