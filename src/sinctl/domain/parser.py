"""Byte-level SIN token parser.

Validation runs on the UTF-8 bytes of the input, never on decoded code
points. Lookalike letters from other scripts, full-width forms, combining
marks, zero-width characters and byte-order marks are all either longer
than one byte or fall outside the two ASCII letter ranges, so none of them
can be accepted.

Checks run in a fixed order and the first failure wins:

1. non-``str`` input   -> ``must_be_letter``
2. empty string        -> ``empty_input``
3. more than one byte  -> ``input_too_long``
4. byte not in A-Z/a-z -> ``must_be_letter``
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Literal

from sinctl.domain.constants import MAX_STRING_LENGTH, Side, Style
from sinctl.domain.errors import ParseError
from sinctl.domain.identifier import Identifier

_UPPER_FIRST, _UPPER_LAST = 0x41, 0x5A  # 'A'..'Z'
_LOWER_FIRST, _LOWER_LAST = 0x61, 0x7A  # 'a'..'z'
_CASE_OFFSET = _LOWER_FIRST - _UPPER_FIRST


class ParseErrorKind(StrEnum):
    """Stable classification of a rejected token."""

    EMPTY_INPUT = "empty_input"
    INPUT_TOO_LONG = "input_too_long"
    MUST_BE_LETTER = "must_be_letter"

    @property
    def message(self) -> str:
        return self.value.replace("_", " ")


@dataclass(frozen=True, slots=True)
class ParseSuccess:
    """A token that parsed into a valid identifier."""

    identifier: Identifier
    ok: Literal[True] = True

    @property
    def style(self) -> Style:
        return self.identifier.style

    @property
    def side(self) -> Side:
        return self.identifier.side


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """A rejected token and the reason it was rejected."""

    kind: ParseErrorKind
    ok: Literal[False] = False


ParseResult = ParseSuccess | ParseFailure


def _encode(text: str) -> bytes:
    # surrogatepass keeps lone surrogates multi-byte instead of raising.
    return text.encode("utf-8", "surrogatepass")


def _classify_byte(byte: int) -> ParseResult:
    if _UPPER_FIRST <= byte <= _UPPER_LAST:
        return ParseSuccess(Identifier(Style(chr(byte)), Side.FIRST))
    if _LOWER_FIRST <= byte <= _LOWER_LAST:
        return ParseSuccess(Identifier(Style(chr(byte - _CASE_OFFSET)), Side.SECOND))
    return ParseFailure(ParseErrorKind.MUST_BE_LETTER)


def parse(value: Any) -> ParseResult:
    """Parse *value* into a :class:`ParseSuccess` or :class:`ParseFailure`.

    Never raises. Any input type is accepted; only a one-letter ``str``
    can succeed.
    """
    if not isinstance(value, str):
        return ParseFailure(ParseErrorKind.MUST_BE_LETTER)
    if value == "":
        return ParseFailure(ParseErrorKind.EMPTY_INPUT)

    raw = _encode(value)
    if len(raw) > MAX_STRING_LENGTH:
        return ParseFailure(ParseErrorKind.INPUT_TOO_LONG)
    if len(raw) != 1:
        return ParseFailure(ParseErrorKind.MUST_BE_LETTER)

    return _classify_byte(raw[0])


def parse_strict(value: Any) -> Identifier:
    """Parse *value* into an :class:`Identifier`, raising on failure.

    Raises:
        ParseError: With ``kind`` set to the classified failure.
    """
    result = parse(value)
    if isinstance(result, ParseFailure):
        raise ParseError(result.kind, value)
    return result.identifier


def is_valid(value: Any) -> bool:
    """Check whether *value* is a valid SIN token."""
    return parse(value).ok
