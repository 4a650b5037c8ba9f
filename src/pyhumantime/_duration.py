"""Human-friendly duration parsing and formatting.

Input is a sequence of ``<integer><unit>`` spans, e.g. ``"1hour 12min 5s"``,
summed into one ElapsedTime. Units may repeat and appear in any order.
Output is canonical: largest unit first, one space between spans.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from lark import Lark, Token
from lark.exceptions import UnexpectedCharacters

from pyhumantime._constants import NANOS_PER_SECOND, U64_MAX
from pyhumantime._errors import (
    DurationError,
    NumberExpectedError,
    NumberOverflowError,
    UnknownUnitError,
)
from pyhumantime._types import ElapsedTime
from pyhumantime._units import SUBSECOND_UNITS, WHOLE_SECOND_UNITS, lookup_unit

logger = logging.getLogger(__name__)

_U64_DIGITS = len(str(U64_MAX))

_GRAMMAR = r"""
start: span+
span: NUMBER UNIT

NUMBER: /[0-9]+/
UNIT: /[^\W\d_]+/
WS: /\s+/

%ignore WS
"""

# Only the lexer is used; spans are accumulated by hand so errors carry offsets.
_lark = Lark(_GRAMMAR, parser="lalr", lexer="basic")


def _next_token(tokens: Iterator[Token]) -> Token | int | None:
    """Next token, the offset of an unlexable character, or None at end of input."""
    try:
        return next(tokens)
    except StopIteration:
        return None
    except UnexpectedCharacters as e:
        return e.pos_in_stream


def _parse(text: str) -> ElapsedTime:
    tokens = _lark.lex(text)
    seconds = 0
    nanoseconds = 0
    spans = 0

    while True:
        number = _next_token(tokens)
        if number is None:
            if spans == 0:
                raise NumberExpectedError(0, f"empty duration: {text!r}")
            return ElapsedTime(seconds, nanoseconds)
        if not isinstance(number, Token) or number.type != "NUMBER":
            offset = number if isinstance(number, int) else number.start_pos
            raise NumberExpectedError(offset, f"expected number at {offset} in {text!r}")

        # Reject by length first; int() refuses very long digit strings.
        digits = number.lstrip("0")
        if len(digits) > _U64_DIGITS or int(digits or "0") > U64_MAX:
            raise NumberOverflowError(
                number.start_pos, f"number {number} does not fit in 64 bits in {text!r}"
            )
        value = int(digits or "0")

        unit_token = _next_token(tokens)
        if isinstance(unit_token, Token) and unit_token.type == "UNIT":
            unit = lookup_unit(str(unit_token))
            if unit is None:
                raise UnknownUnitError(
                    unit_token.start_pos,
                    str(unit_token),
                    value,
                    f"unknown unit {str(unit_token)!r} in {text!r}",
                )
        else:
            if unit_token is None:
                offset = number.start_pos + len(number)
            elif isinstance(unit_token, int):
                offset = unit_token
            else:
                offset = unit_token.start_pos
            raise UnknownUnitError(offset, "", value, f"missing unit at {offset} in {text!r}")

        span_seconds, span_nanos = divmod(value * unit.nanoseconds, NANOS_PER_SECOND)
        seconds += span_seconds
        nanoseconds += span_nanos
        if nanoseconds >= NANOS_PER_SECOND:
            seconds += 1
            nanoseconds -= NANOS_PER_SECOND
        if seconds > U64_MAX:
            raise NumberOverflowError(
                number.start_pos, f"duration exceeds {U64_MAX}s at {number.start_pos} in {text!r}"
            )
        spans += 1


def parse_duration(text: str) -> ElapsedTime:
    """Parse a duration string like ``"1hour 12min 5s"``.

    Each span is an integer followed by a unit; whitespace may separate
    spans and a number from its unit. Accepted units (case-sensitive):

    * ``nanoseconds``, ``nanosecond``, ``nanos``, ``nsec``, ``ns``
    * ``microseconds``, ``microsecond``, ``micros``, ``usec``, ``us``, ``µs``
    * ``milliseconds``, ``millisecond``, ``millis``, ``msec``, ``ms``
    * ``seconds``, ``second``, ``secs``, ``sec``, ``s``
    * ``minutes``, ``minute``, ``mins``, ``min``, ``m``
    * ``hours``, ``hour``, ``hrs``, ``hr``, ``h``, ``H``
    * ``days``, ``day``, ``dys``, ``dy``, ``d``, ``D``
    * ``weeks``, ``week``, ``wks``, ``wk``, ``w``, ``W``
    * ``months``, ``month``, ``mths``, ``mth``, ``M`` -- 30 days
    * ``years``, ``year``, ``yrs``, ``yr``, ``y``, ``Y`` -- 365 days

    Months and years are fixed-length approximations, not calendar months
    and years.

    Args:
        text: The duration text.

    Returns:
        The summed ElapsedTime.

    Raises:
        NumberExpectedError: If the input is empty or a span lacks its number.
        UnknownUnitError: If a unit is missing or not recognized.
        NumberOverflowError: If a number or the total exceeds 2**64-1 seconds.
    """
    try:
        return _parse(text)
    except DurationError as e:
        logger.debug("rejected duration: %s", e.internal())
        raise


def format_duration(value: ElapsedTime) -> str:
    """Format an ElapsedTime as canonical text, e.g. ``"4weeks 1day 2h"``.

    Zero is rendered as ``"0s"``. The output always parses back to ``value``.
    """
    parts: list[str] = []

    remaining = value.seconds
    for unit in WHOLE_SECOND_UNITS:
        count, remaining = divmod(remaining, unit.seconds)
        if count:
            parts.append(unit.render(count))

    remaining = value.nanoseconds
    for unit in SUBSECOND_UNITS:
        count, remaining = divmod(remaining, unit.nanoseconds)
        if count:
            parts.append(unit.render(count))

    if not parts:
        return "0s"
    return " ".join(parts)
