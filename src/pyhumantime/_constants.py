"""Numeric limits shared by the duration and timestamp codecs."""

U64_MAX = 2**64 - 1
"""Largest whole-second count an ElapsedTime can hold."""

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
"""Bounds of an Instant's seconds-since-epoch."""

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_MICRO = 1_000

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400

MIN_YEAR = 0
MAX_YEAR = 9999
"""Years that fit the four-digit RFC 3339 year field."""

MAX_FRACTION_DIGITS = 9
"""Fractional seconds carry at most nanosecond precision."""
