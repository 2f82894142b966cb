"""Tests for summing and formatting durations."""

import pytest

from durationcalc import (
    ErrorKind,
    ParseError,
    accumulate,
    argument_tokens,
    checked_add,
    format_duration,
    parse_duration,
    stdin_tokens,
)
from durationcalc.util import DAY, HOUR, MAX_SECONDS, MINUTE


def test_format_folds_days_into_hours():
    """Test that hours are not wrapped at 24."""
    assert format_duration(parse_duration("3d 20h 10m 15s")) == "92h 10m 15s"
    assert format_duration(2 * DAY + 5 * HOUR) == "53h 00m 00s"


def test_format_pads_minutes_and_seconds():
    assert format_duration(5) == "0h 00m 05s"
    assert format_duration(HOUR + 2 * MINUTE + 3) == "1h 02m 03s"


def test_format_zero():
    assert format_duration(0) == "0h 00m 00s"


def test_format_negative_prefixes_whole_string():
    """Test that the sign is printed once, in front of the hours."""
    assert format_duration(-(2 * HOUR + 5 * MINUTE + 20)) == "-2h 05m 20s"
    assert format_duration(-1) == "-0h 00m 01s"


def test_format_compact():
    assert format_duration(52 * HOUR + 40 * MINUTE, compact=True) == "52h40m00s"
    assert format_duration(-MINUTE, compact=True) == "-0h01m00s"


def test_format_then_parse_returns_same_seconds():
    """Test that formatted totals read back to the same value."""
    for seconds in (0, 1, 59, 3600, 86399, 331815, -320, -10 * DAY - 1):
        assert parse_duration(format_duration(seconds)) == seconds
        assert parse_duration(format_duration(seconds, compact=True)) == seconds


def test_accumulate_sums_in_order():
    total = accumulate(0, ["2d 5h", "-20m"])
    assert total == 2 * DAY + 5 * HOUR - 20 * MINUTE
    assert format_duration(total) == "52h 40m 00s"


def test_accumulate_starts_from_initial():
    """Test that argument totals continue from the stdin total."""
    intermediate = accumulate(0, ["2d 5h", "-20m"])
    final = accumulate(intermediate, argument_tokens(["23m", "-", "15s"]))
    assert format_duration(final) == "53h 02m 45s"


def test_accumulate_empty_returns_initial():
    assert accumulate(0, []) == 0
    assert accumulate(42, []) == 42


def test_accumulate_fails_on_first_bad_token():
    """Test that the error names the token that failed."""
    with pytest.raises(ParseError) as excinfo:
        accumulate(0, ["1h", "5x", "abc"])
    assert excinfo.value.token == "5x"
    assert excinfo.value.kind == ErrorKind.UNKNOWN_UNIT


def test_accumulate_overflow():
    """Test that totals outside the supported range raise OVERFLOW."""
    with pytest.raises(ParseError) as excinfo:
        accumulate(MAX_SECONDS, ["1s"])
    assert excinfo.value.kind == ErrorKind.OVERFLOW
    assert excinfo.value.token == "1s"

    with pytest.raises(ParseError):
        accumulate(-MAX_SECONDS, ["-1s"])


def test_checked_add_within_range():
    assert checked_add(MAX_SECONDS - 1, 1, "1s") == MAX_SECONDS
    assert checked_add(10, -20, "-20s") == -10


def test_stdin_tokens_skip_blank_lines():
    lines = ["2d 5h", "", "   ", "# lunch", "-20m"]
    assert list(stdin_tokens(lines)) == ["2d 5h", "-20m"]


def test_argument_tokens_join_standalone_sign():
    """Test that a lone sign negates only the following argument."""
    assert list(argument_tokens(["23m", "-", "15s"])) == ["23m", "- 15s"]
    assert list(argument_tokens(["+", "1h", "2m"])) == ["+ 1h", "2m"]
    assert accumulate(0, argument_tokens(["-", "15s", "20m"])) == 20 * MINUTE - 15


def test_argument_tokens_dangling_sign_fails():
    tokens = list(argument_tokens(["1h", "-"]))
    assert tokens == ["1h", "-"]
    with pytest.raises(ParseError) as excinfo:
        accumulate(0, tokens)
    assert excinfo.value.kind == ErrorKind.EMPTY_INPUT
