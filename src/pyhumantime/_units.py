"""Duration unit table.

Lengths are stored in nanoseconds so every unit, including the sub-second
ones, multiplies exactly. ``month`` (30 days) and ``year`` (365 days) are
calendar-naive approximations, not calendar-accurate arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from pyhumantime._constants import (
    NANOS_PER_MICRO,
    NANOS_PER_MILLI,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


@dataclass(frozen=True)
class TimeUnit:
    """A duration unit and the spellings the parser accepts for it."""

    name: str
    nanoseconds: int
    abbreviation: str
    spellings: tuple[str, ...]
    pluralize: bool = False

    @property
    def seconds(self) -> int:
        """Whole seconds per unit (0 for sub-second units)."""
        return self.nanoseconds // NANOS_PER_SECOND

    def render(self, count: int) -> str:
        """Render ``count`` of this unit in canonical form, e.g. ``3days``."""
        if self.pluralize and count != 1:
            return f"{count}{self.abbreviation}s"
        return f"{count}{self.abbreviation}"


NANOSECOND = TimeUnit(
    "nanosecond", 1, "ns",
    ("nanoseconds", "nanosecond", "nanos", "nsec", "ns"),
)
MICROSECOND = TimeUnit(
    "microsecond", NANOS_PER_MICRO, "us",
    ("microseconds", "microsecond", "micros", "usec", "us", "µs", "μs"),
)
MILLISECOND = TimeUnit(
    "millisecond", NANOS_PER_MILLI, "ms",
    ("milliseconds", "millisecond", "millis", "msec", "ms"),
)
SECOND = TimeUnit(
    "second", NANOS_PER_SECOND, "s",
    ("seconds", "second", "secs", "sec", "s"),
)
MINUTE = TimeUnit(
    "minute", SECONDS_PER_MINUTE * NANOS_PER_SECOND, "m",
    ("minutes", "minute", "mins", "min", "m"),
)
HOUR = TimeUnit(
    "hour", SECONDS_PER_HOUR * NANOS_PER_SECOND, "h",
    ("hours", "hour", "hrs", "hr", "h", "H"),
)
DAY = TimeUnit(
    "day", SECONDS_PER_DAY * NANOS_PER_SECOND, "day",
    ("days", "day", "dys", "dy", "d", "D"),
    pluralize=True,
)
WEEK = TimeUnit(
    "week", 7 * SECONDS_PER_DAY * NANOS_PER_SECOND, "week",
    ("weeks", "week", "wks", "wk", "w", "W"),
    pluralize=True,
)
MONTH = TimeUnit(
    "month", 30 * SECONDS_PER_DAY * NANOS_PER_SECOND, "month",
    ("months", "month", "mths", "mth", "M"),
    pluralize=True,
)
YEAR = TimeUnit(
    "year", 365 * SECONDS_PER_DAY * NANOS_PER_SECOND, "year",
    ("years", "year", "yrs", "yr", "y", "Y"),
    pluralize=True,
)

UNITS: tuple[TimeUnit, ...] = (
    NANOSECOND,
    MICROSECOND,
    MILLISECOND,
    SECOND,
    MINUTE,
    HOUR,
    DAY,
    WEEK,
    MONTH,
    YEAR,
)
"""All units, smallest first."""

WHOLE_SECOND_UNITS: tuple[TimeUnit, ...] = (YEAR, MONTH, WEEK, DAY, HOUR, MINUTE, SECOND)
SUBSECOND_UNITS: tuple[TimeUnit, ...] = (MILLISECOND, MICROSECOND, NANOSECOND)
"""Formatter walk order, largest first."""

# Spelling -> unit; case-sensitive so that "m" (minute) and "M" (month) differ.
_SPELLINGS: MappingProxyType[str, TimeUnit] = MappingProxyType(
    {spelling: unit for unit in UNITS for spelling in unit.spellings}
)


def lookup_unit(token: str) -> TimeUnit | None:
    """Return the unit spelled ``token``, or None if no unit matches."""
    return _SPELLINGS.get(token)

