"""RFC 3339 timestamp parsing and formatting (UTC only).

Strict grammar: ``YYYY-MM-DDTHH:MM:SS[.fffffffff]Z``. The weak variant also
accepts a space instead of ``T`` and an absent ``Z``; it is meant for
interactively typed values and is not round-trip safe.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pyhumantime._calendar import civil_from_days, days_from_civil, days_in_month
from pyhumantime._constants import (
    MAX_FRACTION_DIGITS,
    MAX_YEAR,
    MIN_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from pyhumantime._errors import (
    FieldOutOfRangeError,
    InvalidDigitError,
    InvalidFormatError,
    TimestampError,
    TimestampOutOfRangeError,
)
from pyhumantime._types import Instant

logger = logging.getLogger(__name__)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


@dataclass(frozen=True)
class _CalendarFields:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    nanosecond: int = 0

    @classmethod
    def from_instant(cls, value: Instant) -> _CalendarFields:
        # divmod floors, so pre-epoch instants land on the earlier day
        days, seconds_of_day = divmod(value.seconds, SECONDS_PER_DAY)
        year, month, day = civil_from_days(days)
        hour, rest = divmod(seconds_of_day, SECONDS_PER_HOUR)
        minute, second = divmod(rest, SECONDS_PER_MINUTE)
        return cls(year, month, day, hour, minute, second, value.nanoseconds)

    def to_instant(self) -> Instant:
        days = days_from_civil(self.year, self.month, self.day)
        seconds = (
            days * SECONDS_PER_DAY
            + self.hour * SECONDS_PER_HOUR
            + self.minute * SECONDS_PER_MINUTE
            + self.second
        )
        return Instant(seconds, self.nanosecond)


class _Scanner:
    """Cursor over timestamp text; every method advances or raises."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _fail_details(self, what: str) -> str:
        return f"{what} at {self.pos} in {self.text!r}"

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def digits(self, width: int, field: str, terminators: str) -> int:
        """Read exactly ``width`` ASCII digits.

        A terminator arriving early, running out of input, or an extra
        digit is a format error; any other non-digit is a digit error.
        """
        start = self.pos
        end = start + width
        for i in range(start, min(end, len(self.text))):
            ch = self.text[i]
            if _is_digit(ch):
                continue
            if ch in terminators:
                raise InvalidFormatError(start, field, self._fail_details(f"short {field}"))
            raise InvalidDigitError(i, f"non-digit {ch!r} in {field} at {i} in {self.text!r}")
        if end > len(self.text):
            raise InvalidFormatError(start, field, self._fail_details(f"truncated {field}"))
        if end < len(self.text) and _is_digit(self.text[end]):
            raise InvalidFormatError(start, field, self._fail_details(f"too many digits in {field}"))
        self.pos = end
        return int(self.text[start:end])

    def literal(self, accepted: str, expected: str) -> None:
        ch = self.peek()
        if not ch or ch not in accepted:
            raise InvalidFormatError(self.pos, expected, self._fail_details(f"missing {expected}"))
        self.pos += 1

    def fraction(self) -> int:
        """Read 1-9 fraction digits, scaled to nanoseconds."""
        start = self.pos
        end = start
        while end < len(self.text) and _is_digit(self.text[end]):
            end += 1
        count = end - start
        if not 1 <= count <= MAX_FRACTION_DIGITS:
            raise InvalidFormatError(
                start, "fraction", self._fail_details(f"{count} fraction digits")
            )
        self.pos = end
        return int(self.text[start:end]) * 10 ** (MAX_FRACTION_DIGITS - count)

    def finish(self) -> None:
        rest = self.text[self.pos:]
        if rest.strip():
            self.pos += len(rest) - len(rest.lstrip())
            raise InvalidFormatError(
                self.pos, "end of input", self._fail_details("trailing characters")
            )


def _check_range(value: int, low: int, high: int, field: str, offset: int, text: str) -> None:
    if not low <= value <= high:
        raise FieldOutOfRangeError(
            field, offset, f"{field} {value} not in {low}..{high} at {offset} in {text!r}"
        )


def _parse(text: str, *, weak: bool) -> Instant:
    s = _Scanner(text)

    year = s.digits(4, "year", "-")
    s.literal("-", "'-'")

    at = s.pos
    month = s.digits(2, "month", "-")
    _check_range(month, 1, 12, "month", at, text)
    s.literal("-", "'-'")

    at = s.pos
    day = s.digits(2, "day", "T ")
    _check_range(day, 1, days_in_month(year, month), "day", at, text)
    if weak:
        s.literal("T ", "'T' or ' '")
    else:
        s.literal("T", "'T'")

    at = s.pos
    hour = s.digits(2, "hour", ":")
    _check_range(hour, 0, 23, "hour", at, text)
    s.literal(":", "':'")

    at = s.pos
    minute = s.digits(2, "minute", ":")
    _check_range(minute, 0, 59, "minute", at, text)
    s.literal(":", "':'")

    at = s.pos
    second = s.digits(2, "second", ".Z ")
    _check_range(second, 0, 59, "second", at, text)

    nanosecond = 0
    if s.peek() == ".":
        s.pos += 1
        nanosecond = s.fraction()

    if weak:
        if s.peek() == "Z":
            s.pos += 1
    else:
        s.literal("Z", "'Z'")
    s.finish()

    return _CalendarFields(year, month, day, hour, minute, second, nanosecond).to_instant()


def parse_rfc3339(text: str) -> Instant:
    """Parse a strict RFC 3339 UTC timestamp.

    Accepts exactly ``YYYY-MM-DDTHH:MM:SS[.f{1,9}]Z`` (trailing whitespace
    is ignored). Fewer fraction digits mean lower precision: ``.5`` is
    500000000 ns.

    Args:
        text: The timestamp text.

    Returns:
        The parsed Instant.

    Raises:
        InvalidFormatError: If a field has the wrong width or a literal is missing.
        InvalidDigitError: If a non-digit appears inside a numeric field.
        FieldOutOfRangeError: If month, day, hour, minute or second is out of range.
    """
    try:
        return _parse(text, weak=False)
    except TimestampError as e:
        logger.debug("rejected timestamp: %s", e.internal())
        raise


def parse_rfc3339_weak(text: str) -> Instant:
    """Parse a timestamp the way a person might type it.

    Same as :func:`parse_rfc3339`, but the date and time may be separated
    by a space and the trailing ``Z`` is optional (the value is UTC
    either way). Do not use for values that must round-trip exactly.
    """
    try:
        return _parse(text, weak=True)
    except TimestampError as e:
        logger.debug("rejected weak timestamp: %s", e.internal())
        raise


def format_rfc3339(value: Instant, precision: int | None = None) -> str:
    """Format an Instant as an RFC 3339 UTC timestamp.

    Args:
        value: The instant to format.
        precision: Number of fraction digits (0-9). If omitted, the
            nanosecond remainder is written with trailing zeros trimmed,
            and not at all when it is zero. Extra digits are truncated,
            not rounded.

    Returns:
        Text such as ``"2018-02-14T00:28:07Z"``.

    Raises:
        TimestampOutOfRangeError: If the year falls outside 0000..9999.
        ValueError: If precision is outside 0..9.
    """
    if precision is not None and not 0 <= precision <= MAX_FRACTION_DIGITS:
        raise ValueError(f"precision must be in 0..{MAX_FRACTION_DIGITS}, got {precision}")

    fields = _CalendarFields.from_instant(value)
    if not MIN_YEAR <= fields.year <= MAX_YEAR:
        raise TimestampOutOfRangeError(f"year {fields.year} of {value!r} has no 4-digit form")

    text = (
        f"{fields.year:04d}-{fields.month:02d}-{fields.day:02d}"
        f"T{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}"
    )
    fraction = f"{fields.nanosecond:09d}"
    if precision is None:
        fraction = fraction.rstrip("0")
    else:
        fraction = fraction[:precision]
    if fraction:
        text += "." + fraction
    return text + "Z"


def format_rfc3339_seconds(value: Instant) -> str:
    return format_rfc3339(value, 0)


def format_rfc3339_millis(value: Instant) -> str:
    return format_rfc3339(value, 3)


def format_rfc3339_micros(value: Instant) -> str:
    return format_rfc3339(value, 6)


def format_rfc3339_nanos(value: Instant) -> str:
    return format_rfc3339(value, 9)
