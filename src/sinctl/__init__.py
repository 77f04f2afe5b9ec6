"""sinctl — Style Identifier Notation toolkit.

Public API::

    from sinctl import parse, parse_strict, is_valid, Identifier, Side, Style

    parse_strict("c")   # Identifier<c>
    is_valid("CC")      # False
"""

from __future__ import annotations

from sinctl.domain.constants import (
    Side,
    Style,
    is_valid_side,
    is_valid_style,
    max_string_length,
    valid_sides,
    valid_styles,
)
from sinctl.domain.errors import InvalidSideError, InvalidStyleError, ParseError, SinError
from sinctl.domain.identifier import Identifier
from sinctl.domain.parser import (
    ParseErrorKind,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    is_valid,
    parse,
    parse_strict,
)

__version__ = "1.0.0"

__all__ = [
    "Identifier",
    "InvalidSideError",
    "InvalidStyleError",
    "ParseError",
    "ParseErrorKind",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "Side",
    "SinError",
    "Style",
    "__version__",
    "is_valid",
    "is_valid_side",
    "is_valid_style",
    "max_string_length",
    "parse",
    "parse_strict",
    "valid_sides",
    "valid_styles",
]
