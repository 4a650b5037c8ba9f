"""Nanosecond-precision time values.

``datetime.timedelta`` and ``datetime.datetime`` stop at microseconds, so
the codecs work on these two small value types instead and convert at the
edges.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import ClassVar

from pyhumantime._constants import (
    I64_MAX,
    I64_MIN,
    NANOS_PER_MICRO,
    NANOS_PER_SECOND,
    U64_MAX,
)

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _check_nanoseconds(nanoseconds: int) -> None:
    if not 0 <= nanoseconds < NANOS_PER_SECOND:
        raise ValueError(f"nanoseconds must be in [0, {NANOS_PER_SECOND}), got {nanoseconds}")


@dataclass(frozen=True, order=True)
class ElapsedTime:
    """A non-negative span of time: whole seconds plus a nanosecond remainder."""

    seconds: int
    nanoseconds: int = 0

    ZERO: ClassVar[ElapsedTime]

    def __post_init__(self) -> None:
        if not 0 <= self.seconds <= U64_MAX:
            raise ValueError(f"seconds must be in [0, {U64_MAX}], got {self.seconds}")
        _check_nanoseconds(self.nanoseconds)

    @classmethod
    def from_nanoseconds(cls, total: int) -> ElapsedTime:
        if total < 0:
            raise ValueError(f"elapsed time cannot be negative: {total}ns")
        seconds, nanoseconds = divmod(total, NANOS_PER_SECOND)
        if seconds > U64_MAX:
            raise OverflowError(f"elapsed time too large: {total}ns")
        return cls(seconds, nanoseconds)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> ElapsedTime:
        if delta < timedelta(0):
            raise ValueError(f"elapsed time cannot be negative: {delta}")
        return cls(delta.days * 86400 + delta.seconds, delta.microseconds * NANOS_PER_MICRO)

    @classmethod
    def parse(cls, text: str) -> ElapsedTime:
        """Parse a human-friendly duration such as ``"2h 37min"``."""
        from pyhumantime._duration import parse_duration

        return parse_duration(text)

    @property
    def total_nanoseconds(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanoseconds

    def to_timedelta(self) -> timedelta:
        """Convert to ``timedelta``, truncating to microseconds."""
        return timedelta(seconds=self.seconds, microseconds=self.nanoseconds // NANOS_PER_MICRO)

    def __add__(self, other: object) -> ElapsedTime:
        if not isinstance(other, ElapsedTime):
            return NotImplemented
        return ElapsedTime.from_nanoseconds(self.total_nanoseconds + other.total_nanoseconds)

    def __sub__(self, other: object) -> ElapsedTime:
        if not isinstance(other, ElapsedTime):
            return NotImplemented
        total = self.total_nanoseconds - other.total_nanoseconds
        if total < 0:
            raise OverflowError(f"{other} is longer than {self}")
        return ElapsedTime.from_nanoseconds(total)

    def __bool__(self) -> bool:
        return bool(self.seconds or self.nanoseconds)

    def __str__(self) -> str:
        from pyhumantime._duration import format_duration

        return format_duration(self)


ElapsedTime.ZERO = ElapsedTime(0, 0)


@dataclass(frozen=True, order=True)
class Instant:
    """A point in time: signed seconds since 1970-01-01T00:00:00Z plus nanoseconds."""

    seconds: int
    nanoseconds: int = 0

    EPOCH: ClassVar[Instant]

    def __post_init__(self) -> None:
        if not I64_MIN <= self.seconds <= I64_MAX:
            raise ValueError(f"seconds must be in [{I64_MIN}, {I64_MAX}], got {self.seconds}")
        _check_nanoseconds(self.nanoseconds)

    @classmethod
    def from_nanoseconds(cls, total: int) -> Instant:
        seconds, nanoseconds = divmod(total, NANOS_PER_SECOND)
        if not I64_MIN <= seconds <= I64_MAX:
            raise OverflowError(f"instant out of range: {total}ns since epoch")
        return cls(seconds, nanoseconds)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Instant:
        """Convert a ``datetime``; naive values are taken to be UTC."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        delta = dt - _UNIX_EPOCH
        return cls(delta.days * 86400 + delta.seconds, delta.microseconds * NANOS_PER_MICRO)

    @classmethod
    def parse(cls, text: str) -> Instant:
        """Parse a strict RFC 3339 UTC timestamp such as ``"2018-02-14T00:28:07Z"``."""
        from pyhumantime._timestamp import parse_rfc3339

        return parse_rfc3339(text)

    @property
    def total_nanoseconds(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanoseconds

    def to_datetime(self) -> datetime:
        """Convert to an aware UTC ``datetime``, truncating to microseconds."""
        return _UNIX_EPOCH + timedelta(
            seconds=self.seconds, microseconds=self.nanoseconds // NANOS_PER_MICRO
        )

    def __add__(self, other: object) -> Instant:
        if not isinstance(other, ElapsedTime):
            return NotImplemented
        return Instant.from_nanoseconds(self.total_nanoseconds + other.total_nanoseconds)

    def __sub__(self, other: object) -> Instant | ElapsedTime:
        if isinstance(other, ElapsedTime):
            return Instant.from_nanoseconds(self.total_nanoseconds - other.total_nanoseconds)
        if isinstance(other, Instant):
            total = self.total_nanoseconds - other.total_nanoseconds
            if total < 0:
                raise ValueError(f"{other} is later than {self}")
            return ElapsedTime.from_nanoseconds(total)
        return NotImplemented

    def __str__(self) -> str:
        from pyhumantime._timestamp import format_rfc3339

        return format_rfc3339(self)


Instant.EPOCH = Instant(0, 0)
