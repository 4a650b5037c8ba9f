"""pyhumantime - Human-friendly text for durations and RFC 3339 timestamps."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyhumantime")
except PackageNotFoundError:  # running from a source tree without install metadata
    __version__ = "0.0.0.dev0"

from pyhumantime._calendar import (
    civil_from_days,
    days_from_civil,
    days_in_month,
    is_leap_year,
)
from pyhumantime._duration import format_duration, parse_duration
from pyhumantime._errors import (
    DurationError,
    DurationErrorKind,
    FieldOutOfRangeError,
    HumanTimeError,
    InvalidDigitError,
    InvalidFormatError,
    NumberExpectedError,
    NumberOverflowError,
    TimestampError,
    TimestampErrorKind,
    TimestampOutOfRangeError,
    UnknownUnitError,
)
from pyhumantime._timestamp import (
    format_rfc3339,
    format_rfc3339_micros,
    format_rfc3339_millis,
    format_rfc3339_nanos,
    format_rfc3339_seconds,
    parse_rfc3339,
    parse_rfc3339_weak,
)
from pyhumantime._types import ElapsedTime, Instant
from pyhumantime._units import UNITS, TimeUnit

__all__ = [
    "parse_duration",
    "format_duration",
    "parse_rfc3339",
    "parse_rfc3339_weak",
    "format_rfc3339",
    "format_rfc3339_seconds",
    "format_rfc3339_millis",
    "format_rfc3339_micros",
    "format_rfc3339_nanos",
    "days_from_civil",
    "civil_from_days",
    "is_leap_year",
    "days_in_month",
    "ElapsedTime",
    "Instant",
    "TimeUnit",
    "UNITS",
    "HumanTimeError",
    "DurationError",
    "DurationErrorKind",
    "NumberExpectedError",
    "UnknownUnitError",
    "NumberOverflowError",
    "TimestampError",
    "TimestampErrorKind",
    "InvalidFormatError",
    "InvalidDigitError",
    "FieldOutOfRangeError",
    "TimestampOutOfRangeError",
]
