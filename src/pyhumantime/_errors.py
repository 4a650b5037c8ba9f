"""Exception hierarchy for duration and timestamp parsing."""

from __future__ import annotations

import enum


class HumanTimeError(ValueError):
    """Base exception for pyhumantime codec errors.

    Provides dual messaging: a short user-facing message and internal
    details (including the offending input) for logging.
    """

    def __init__(self, user_message: str, internal_details: str = "") -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message

    def internal(self) -> str:
        return self.internal_details


# ---- Duration errors ----


class DurationErrorKind(enum.StrEnum):
    NUMBER_EXPECTED = "number_expected"
    UNKNOWN_UNIT = "unknown_unit"
    NUMBER_OVERFLOW = "number_overflow"


class DurationError(HumanTimeError):
    """Raised when a duration string cannot be parsed."""

    kind: DurationErrorKind

    def __init__(self, offset: int, user_message: str, internal_details: str = "") -> None:
        super().__init__(user_message, internal_details)
        self.offset = offset


class NumberExpectedError(DurationError):
    """Raised when a number is missing where a duration span must start."""

    kind = DurationErrorKind.NUMBER_EXPECTED

    def __init__(self, offset: int, internal_details: str = "") -> None:
        super().__init__(offset, f"expected number at {offset}", internal_details)


class UnknownUnitError(DurationError):
    """Raised when a number is followed by a missing or unknown unit."""

    kind = DurationErrorKind.UNKNOWN_UNIT

    def __init__(self, offset: int, token: str, value: int, internal_details: str = "") -> None:
        if token:
            message = (
                f"unknown time unit {token!r} at {offset}, supported units: "
                "ns, us, ms, sec, min, hours, days, weeks, months, years "
                "(and few variations)"
            )
        else:
            message = f"time unit needed, for example {value}sec or {value}ms"
        super().__init__(offset, message, internal_details)
        self.token = token
        self.value = value


class NumberOverflowError(DurationError):
    """Raised when a number or the running total exceeds the duration range."""

    kind = DurationErrorKind.NUMBER_OVERFLOW

    def __init__(self, offset: int, internal_details: str = "") -> None:
        super().__init__(offset, f"{ERR_MSG_NUMBER_OVERFLOW} at {offset}", internal_details)


# ---- Timestamp errors ----


class TimestampErrorKind(enum.StrEnum):
    INVALID_FORMAT = "invalid_format"
    INVALID_DIGIT = "invalid_digit"
    FIELD_OUT_OF_RANGE = "field_out_of_range"
    OUT_OF_RANGE = "out_of_range"


class TimestampError(HumanTimeError):
    """Raised when a timestamp cannot be parsed or formatted."""

    kind: TimestampErrorKind

    def __init__(
        self, offset: int | None, user_message: str, internal_details: str = ""
    ) -> None:
        super().__init__(user_message, internal_details)
        self.offset = offset


class InvalidFormatError(TimestampError):
    """Raised when the text does not have the RFC 3339 shape."""

    kind = TimestampErrorKind.INVALID_FORMAT

    def __init__(self, offset: int, expected: str, internal_details: str = "") -> None:
        super().__init__(
            offset, f"{ERR_MSG_INVALID_FORMAT}: expected {expected} at {offset}", internal_details
        )
        self.expected = expected


class InvalidDigitError(TimestampError):
    """Raised when a non-digit appears inside a numeric field."""

    kind = TimestampErrorKind.INVALID_DIGIT

    def __init__(self, offset: int, internal_details: str = "") -> None:
        super().__init__(offset, f"{ERR_MSG_INVALID_DIGIT} at {offset}", internal_details)


class FieldOutOfRangeError(TimestampError):
    """Raised when a field parses but is outside its calendar range."""

    kind = TimestampErrorKind.FIELD_OUT_OF_RANGE

    def __init__(self, field: str, offset: int, internal_details: str = "") -> None:
        super().__init__(offset, f"{field} out of range at {offset}", internal_details)
        self.field = field


class TimestampOutOfRangeError(TimestampError):
    """Raised when an instant falls outside the years 0000..9999."""

    kind = TimestampErrorKind.OUT_OF_RANGE

    def __init__(self, internal_details: str = "") -> None:
        super().__init__(None, ERR_MSG_OUT_OF_RANGE, internal_details)


# Sanitized user-facing error message constants
ERR_MSG_NUMBER_OVERFLOW = "number is too large"
ERR_MSG_INVALID_FORMAT = "timestamp format is invalid"
ERR_MSG_INVALID_DIGIT = "bad character where digit is expected"
ERR_MSG_OUT_OF_RANGE = "timestamp is out of range"
