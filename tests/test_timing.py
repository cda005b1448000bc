import pytest

from philo.timing import now_ms, parse_leading_int, precise_sleep


def test_now_ms_does_not_go_backwards():
    first = now_ms()
    second = now_ms()
    assert second >= first


def test_now_ms_is_in_milliseconds():
    # A plausible epoch-based millisecond count is far above seconds-based ones.
    assert now_ms() > 1_000_000_000_000


@pytest.mark.parametrize("duration", [0, 5, 20])
def test_precise_sleep_waits_at_least_duration(duration):
    start = now_ms()
    precise_sleep(duration)
    assert now_ms() - start >= duration


def test_precise_sleep_does_not_overshoot_much():
    start = now_ms()
    precise_sleep(10)
    assert now_ms() - start < 500


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("+8", 8),
        ("-17", -17),
        ("  -17abc", -17),
        ("\t\n\v\f\r 5", 5),
        ("12a34", 12),
        ("200", 200),
    ],
)
def test_parse_leading_int_values(text, expected):
    assert parse_leading_int(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "--5", "+-5", "- 5", "   "])
def test_parse_leading_int_without_digits_is_zero(text):
    assert parse_leading_int(text) == 0


def test_parse_leading_int_largest_int():
    assert parse_leading_int("2147483647") == 2147483647


def test_parse_leading_int_wraps_past_int_range():
    assert parse_leading_int("2147483648") == -2147483648


def test_parse_leading_int_wrap_matches_negated_input():
    assert parse_leading_int("-4294967297") == parse_leading_int("-1")