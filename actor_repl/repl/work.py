"""Work payloads and the command parser that produces them.

Grammar (tokens separated by ASCII whitespace, case-sensitive):

    add <uint32> <uint32>
    ping
    help | ?

parse_work() is pure: the same input always gives the same Work value or
the same CommandParseError message.
"""

import re
from dataclasses import dataclass
from typing import List, Union

from ..errors import CommandParseError

U32_MAX = 2**32 - 1

# Space, tab, LF, FF and CR. Vertical tab and non-ASCII spaces are not separators.
_ASCII_WHITESPACE = re.compile(r"[ \t\n\x0c\r]+")

EMPTY_INTEGER = "cannot parse integer from empty string"
INVALID_DIGIT = "invalid digit found in string"
INTEGER_TOO_LARGE = "number too large to fit in target type"


@dataclass(frozen=True)
class Add:
    """Add two unsigned 32-bit integers."""
    a: int
    b: int


@dataclass(frozen=True)
class Ping:
    """Bump the worker's ping counter."""


@dataclass(frozen=True)
class Help:
    """List the available commands."""


Work = Union[Add, Ping, Help]


def split_ascii_whitespace(text: str) -> List[str]:
    """Split on runs of ASCII whitespace, dropping empty tokens."""
    return [token for token in _ASCII_WHITESPACE.split(text) if token]


def parse_u32(token: str) -> int:
    """
    Parse a base-10 unsigned 32-bit integer.

    Accepts an optional leading '+' and ASCII digits only. Digits are read
    left to right, so an overflow is reported before a later bad digit.

    Raises:
        ValueError: With one of EMPTY_INTEGER, INVALID_DIGIT, INTEGER_TOO_LARGE
    """
    if not token:
        raise ValueError(EMPTY_INTEGER)
    digits = token[1:] if token.startswith("+") else token
    if not digits:
        raise ValueError(INVALID_DIGIT)

    value = 0
    for ch in digits:
        if not ("0" <= ch <= "9"):
            raise ValueError(INVALID_DIGIT)
        value = value * 10 + (ord(ch) - ord("0"))
        if value > U32_MAX:
            raise ValueError(INTEGER_TOO_LARGE)
    return value


def _parse_operand(token: str, raw: str) -> int:
    try:
        return parse_u32(token)
    except ValueError as e:
        raise CommandParseError(
            f"could not parse '{token}' as an unsigned 32-bit integer in '{raw}': {e}",
            raw,
        ) from e


def parse_work(raw: str) -> Work:
    """
    Parse a raw command string into a Work value.

    Args:
        raw: Command text, already stripped of its line terminator

    Returns:
        Add, Ping or Help

    Raises:
        CommandParseError: For an unknown verb, wrong arity, bad numbers or
            an empty string
    """
    words = split_ascii_whitespace(raw)

    if len(words) == 3 and words[0] == "add":
        a = _parse_operand(words[1], raw)
        b = _parse_operand(words[2], raw)
        return Add(a, b)
    if words == ["ping"]:
        return Ping()
    if words == ["help"] or words == ["?"]:
        return Help()

    raise CommandParseError(f"unsupported or malformed command string '{raw}'", raw)
