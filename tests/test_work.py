"""Tests for the command parser."""

import pytest

from actor_repl.errors import CommandParseError
from actor_repl.repl.work import (
    EMPTY_INTEGER,
    INTEGER_TOO_LARGE,
    INVALID_DIGIT,
    U32_MAX,
    Add,
    Help,
    Ping,
    parse_u32,
    parse_work,
    split_ascii_whitespace,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("add 2 3", Add(2, 3)),
        ("add 0 0", Add(0, 0)),
        (f"add {U32_MAX} 1", Add(U32_MAX, 1)),
        ("  add\t7   +8 ", Add(7, 8)),
        ("add 007 1", Add(7, 1)),
        ("ping", Ping()),
        ("\tping\r\n", Ping()),
        ("help", Help()),
        ("?", Help()),
    ],
)
def test_parse_valid_commands(raw, expected):
    assert parse_work(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "foo",
        "add 2",
        "add 1 2 3",
        "ping now",
        "help me",
        "? ?",
        "PING",
        "Add 1 2",
        "quit",
    ],
)
def test_parse_rejects_malformed_commands(raw):
    with pytest.raises(CommandParseError) as excinfo:
        parse_work(raw)
    assert f"'{raw}'" in str(excinfo.value)
    assert excinfo.value.raw == raw


@pytest.mark.parametrize(
    "raw, token, reason",
    [
        ("add x y", "x", INVALID_DIGIT),
        ("add 1 -2", "-2", INVALID_DIGIT),
        ("add 1.5 2", "1.5", INVALID_DIGIT),
        ("add + 2", "+", INVALID_DIGIT),
        ("add 1_000 2", "1_000", INVALID_DIGIT),
        ("add 4294967296 1", "4294967296", INTEGER_TOO_LARGE),
        ("add 1 99999999999x", "99999999999x", INTEGER_TOO_LARGE),
    ],
)
def test_parse_reports_numeric_errors(raw, token, reason):
    with pytest.raises(CommandParseError) as excinfo:
        parse_work(raw)
    message = str(excinfo.value)
    assert f"'{token}'" in message
    assert f"'{raw}'" in message
    assert message.endswith(reason)


def test_parse_is_deterministic():
    for raw in ["add 2 3", "ping", "?", "add x 1", "nope"]:
        try:
            first = parse_work(raw)
        except CommandParseError as e:
            with pytest.raises(CommandParseError) as again:
                parse_work(raw)
            assert str(again.value) == str(e)
        else:
            assert parse_work(raw) == first


def test_help_aliases_are_equal():
    assert parse_work("help") == parse_work("?")


def test_parse_u32_bounds():
    assert parse_u32("0") == 0
    assert parse_u32("+42") == 42
    assert parse_u32(str(U32_MAX)) == U32_MAX
    with pytest.raises(ValueError, match=EMPTY_INTEGER):
        parse_u32("")
    with pytest.raises(ValueError, match=INTEGER_TOO_LARGE):
        parse_u32(str(U32_MAX + 1))
    with pytest.raises(ValueError, match=INVALID_DIGIT):
        parse_u32("٣")  # non-ASCII digit


def test_split_ascii_whitespace():
    assert split_ascii_whitespace(" a\tb\n\x0cc\rd ") == ["a", "b", "c", "d"]
    assert split_ascii_whitespace("") == []
    # vertical tab and non-breaking space are not separators
    assert split_ascii_whitespace("a\x0bb") == ["a\x0bb"]
    assert split_ascii_whitespace("a\u00a0b") == ["a\u00a0b"]
