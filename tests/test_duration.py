"""Duration parser and formatter tests."""

import pytest

from pyhumantime import ElapsedTime, format_duration, parse_duration
from pyhumantime._constants import U64_MAX
from pyhumantime._errors import (
    DurationError,
    DurationErrorKind,
    NumberExpectedError,
    NumberOverflowError,
    UnknownUnitError,
)


def _secs(n, nanos=0):
    return ElapsedTime(n, nanos)


class TestUnitSpellings:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1nanoseconds", _secs(0, 1)),
            ("1nanosecond", _secs(0, 1)),
            ("1nanos", _secs(0, 1)),
            ("2nsec", _secs(0, 2)),
            ("3ns", _secs(0, 3)),
            ("1micros", _secs(0, 1000)),
            ("2usec", _secs(0, 2000)),
            ("3us", _secs(0, 3000)),
            ("4µs", _secs(0, 4000)),
            ("4μs", _secs(0, 4000)),
            ("5microseconds", _secs(0, 5000)),
            ("1millis", _secs(0, 1_000_000)),
            ("2msec", _secs(0, 2_000_000)),
            ("3ms", _secs(0, 3_000_000)),
            ("4milliseconds", _secs(0, 4_000_000)),
            ("1seconds", _secs(1)),
            ("2second", _secs(2)),
            ("3secs", _secs(3)),
            ("4sec", _secs(4)),
            ("5s", _secs(5)),
            ("1minutes", _secs(60)),
            ("2minute", _secs(120)),
            ("3mins", _secs(180)),
            ("4min", _secs(240)),
            ("5m", _secs(300)),
            ("1hours", _secs(3600)),
            ("2hour", _secs(7200)),
            ("3hrs", _secs(10800)),
            ("4hr", _secs(14400)),
            ("5h", _secs(18000)),
            ("5H", _secs(18000)),
            ("1days", _secs(86400)),
            ("2day", _secs(172800)),
            ("3dys", _secs(259200)),
            ("4dy", _secs(345600)),
            ("5d", _secs(432000)),
            ("5D", _secs(432000)),
            ("1weeks", _secs(604_800)),
            ("2week", _secs(1_209_600)),
            ("3wks", _secs(1_814_400)),
            ("4wk", _secs(2_419_200)),
            ("5w", _secs(3_024_000)),
            ("5W", _secs(3_024_000)),
            ("1months", _secs(2_592_000)),
            ("2month", _secs(5_184_000)),
            ("3mths", _secs(7_776_000)),
            ("4mth", _secs(10_368_000)),
            ("5M", _secs(12_960_000)),
            ("1years", _secs(31_536_000)),
            ("2year", _secs(63_072_000)),
            ("3yrs", _secs(94_608_000)),
            ("4yr", _secs(126_144_000)),
            ("5y", _secs(157_680_000)),
            ("5Y", _secs(157_680_000)),
        ],
    )
    def test_spelling(self, text, expected):
        assert parse_duration(text) == expected

    def test_minute_and_month_are_case_sensitive(self):
        assert parse_duration("1m") == _secs(60)
        assert parse_duration("1M") == _secs(2_592_000)

    def test_space_between_number_and_unit(self):
        assert parse_duration("5 s") == _secs(5)
        assert parse_duration("2 minutes") == _secs(120)


class TestParseDuration:
    def test_combined(self):
        assert parse_duration("2h 37min") == _secs(9420)

    def test_combined_without_spaces(self):
        assert parse_duration("2hrs2mins") == _secs(7320)
        assert parse_duration("20min17nsec") == _secs(1200, 17)

    def test_repeated_units_are_summed(self):
        assert parse_duration("1h 1h") == _secs(7200)
        assert parse_duration("1m 1m") == _secs(120)

    def test_ascending_order_accepted(self):
        assert parse_duration("1s 1m 1h") == _secs(3661)

    def test_surrounding_whitespace(self):
        assert parse_duration("  \t15m\n ") == _secs(900)

    def test_subsecond_carry(self):
        assert parse_duration("600ms 600ms") == _secs(1, 200_000_000)

    def test_large_subsecond_value(self):
        assert parse_duration("1500000000ns") == _secs(1, 500_000_000)

    def test_zero(self):
        assert parse_duration("0s") == ElapsedTime.ZERO

    def test_max_seconds(self):
        assert parse_duration(f"{U64_MAX}s") == _secs(U64_MAX)

    def test_classmethod(self):
        assert ElapsedTime.parse("32ms") == _secs(0, 32_000_000)


class TestParseDurationErrors:
    def test_empty(self):
        with pytest.raises(NumberExpectedError) as exc_info:
            parse_duration("")
        assert exc_info.value.offset == 0
        assert exc_info.value.kind is DurationErrorKind.NUMBER_EXPECTED

    def test_whitespace_only(self):
        with pytest.raises(NumberExpectedError) as exc_info:
            parse_duration("   ")
        assert exc_info.value.offset == 0

    def test_unknown_unit(self):
        with pytest.raises(UnknownUnitError) as exc_info:
            parse_duration("10x")
        assert exc_info.value.token == "x"
        assert exc_info.value.offset == 2
        assert exc_info.value.value == 10

    def test_unknown_unit_message(self):
        with pytest.raises(UnknownUnitError, match="unknown time unit 'nights'"):
            parse_duration("10nights")

    def test_unknown_unit_after_valid_span(self):
        with pytest.raises(UnknownUnitError) as exc_info:
            parse_duration("222nsec221nanosmsec7s")
        assert exc_info.value.token == "nanosmsec"
        assert exc_info.value.offset == 10

    def test_missing_unit(self):
        with pytest.raises(UnknownUnitError, match="time unit needed, for example 123sec") as exc_info:
            parse_duration("123")
        assert exc_info.value.token == ""
        assert exc_info.value.offset == 3

    def test_missing_unit_after_span(self):
        with pytest.raises(UnknownUnitError, match="for example 1sec"):
            parse_duration("10 months 1")

    def test_stray_character_after_number(self):
        with pytest.raises(UnknownUnitError) as exc_info:
            parse_duration("1~")
        assert exc_info.value.offset == 1
        assert exc_info.value.token == ""

    def test_number_expected_before_unit(self):
        with pytest.raises(NumberExpectedError) as exc_info:
            parse_duration("1h min")
        assert exc_info.value.offset == 3

    def test_number_expected_on_stray_character(self):
        with pytest.raises(NumberExpectedError) as exc_info:
            parse_duration("1h ~")
        assert exc_info.value.offset == 3

    def test_decimal_point_rejected(self):
        with pytest.raises(UnknownUnitError) as exc_info:
            parse_duration("1.5h")
        assert exc_info.value.offset == 1

    def test_negative_rejected(self):
        with pytest.raises(NumberExpectedError) as exc_info:
            parse_duration("-1h")
        assert exc_info.value.offset == 0

    @pytest.mark.parametrize("unit", ["ns", "us", "ms", "s", "m", "h", "d", "w", "M", "Y"])
    def test_literal_overflow(self, unit):
        with pytest.raises(NumberOverflowError) as exc_info:
            parse_duration(f"100000000000000000000{unit}")
        assert exc_info.value.offset == 0

    def test_literal_longer_than_int_conversion_limit(self):
        with pytest.raises(NumberOverflowError) as exc_info:
            parse_duration("9" * 5000 + "s")
        assert exc_info.value.offset == 0

    def test_long_literal_after_span(self):
        with pytest.raises(NumberOverflowError) as exc_info:
            parse_duration("1h " + "1" * 21 + "s")
        assert exc_info.value.offset == 3

    def test_leading_zeros_do_not_overflow(self):
        assert parse_duration("0" * 5000 + "5s") == _secs(5)

    def test_multiplication_overflow(self):
        with pytest.raises(NumberOverflowError):
            parse_duration(f"{U64_MAX}m")

    def test_sum_overflow(self):
        with pytest.raises(NumberOverflowError) as exc_info:
            parse_duration(f"{U64_MAX}s 1s")
        assert exc_info.value.offset == len(f"{U64_MAX}s ")

    def test_nanosecond_carry_overflow(self):
        with pytest.raises(NumberOverflowError):
            parse_duration(f"{U64_MAX}s 999999999ns 1ns")

    def test_and_connector_rejected(self):
        with pytest.raises(NumberExpectedError) as exc_info:
            parse_duration("2h and 15m")
        assert exc_info.value.offset == 3

    def test_bare_zero_needs_unit(self):
        with pytest.raises(UnknownUnitError, match="for example 0sec"):
            parse_duration("0")

    def test_fraction_without_integer_rejected(self):
        with pytest.raises(NumberExpectedError) as exc_info:
            parse_duration(".5m")
        assert exc_info.value.offset == 0

    def test_exponent_rejected(self):
        with pytest.raises(UnknownUnitError) as exc_info:
            parse_duration("11e-1 days")
        assert exc_info.value.token == "e"

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_duration("nope")

    def test_internal_details_include_input(self):
        with pytest.raises(DurationError) as exc_info:
            parse_duration("5 parsecs")
        assert "5 parsecs" in exc_info.value.internal()


class TestFormatDuration:
    def test_zero(self):
        assert format_duration(ElapsedTime(0, 0)) == "0s"

    def test_hours_minutes(self):
        assert format_duration(_secs(9420)) == "2h 37m"

    def test_weeks_and_days_plural(self):
        assert format_duration(_secs(2_505_600 + 2 * 3600)) == "4weeks 1day 2h"

    def test_thirty_five_days_roll_into_a_month(self):
        assert format_duration(_secs(3_315_833)) == "1month 1week 1day 9h 3m 53s"

    def test_singular(self):
        assert format_duration(_secs(31_536_000 + 2_592_000 + 604_800 + 86_400)) == (
            "1year 1month 1week 1day"
        )

    def test_subsecond(self):
        assert format_duration(_secs(1, 1_002_003)) == "1s 1ms 2us 3ns"

    def test_subsecond_only(self):
        assert format_duration(_secs(0, 32_000_000)) == "32ms"

    def test_skips_zero_units(self):
        assert format_duration(_secs(3601)) == "1h 1s"

    def test_str(self):
        assert str(_secs(150)) == "2m 30s"

    def test_max(self):
        text = format_duration(_secs(U64_MAX, 999_999_999))
        assert parse_duration(text) == _secs(U64_MAX, 999_999_999)


class TestRoundTrip:
    def test_every_second_of_a_day(self):
        for second in range(86400):
            value = _secs(second)
            assert parse_duration(format_duration(value)) == value

    def test_random_seconds(self, rng):
        for _ in range(2000):
            value = _secs(rng.randrange(253_370_764_800))
            assert parse_duration(format_duration(value)) == value

    def test_random_any(self, rng):
        for _ in range(2000):
            value = _secs(rng.randrange(U64_MAX + 1), rng.randrange(1_000_000_000))
            assert parse_duration(format_duration(value)) == value

    def test_reformat_is_stable(self):
        text = format_duration(parse_duration("90min 1500ms 3 days"))
        assert text == "3days 1h 30m 1s 500ms"
        assert format_duration(parse_duration(text)) == text


class TestOrdering:
    def test_larger_value_has_larger_leading_unit(self):
        assert format_duration(_secs(59)).endswith("s")
        assert format_duration(_secs(60)) == "1m"
        assert format_duration(_secs(3599)) == "59m 59s"
        assert format_duration(_secs(3600)) == "1h"
