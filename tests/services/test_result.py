"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from sinctl.domain.errors import InvalidSideError, InvalidStyleError, ParseError
from sinctl.domain.parser import ParseErrorKind
from sinctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="parse", data={"token": "C"})
        assert result.ok is True
        assert result.op == "parse"
        assert result.data == {"token": "C"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="flip", data={"token": "c"}, meta={"n": 1})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "flip"
        assert parsed["data"]["token"] == "c"
        assert parsed["meta"]["n"] == 1

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]

    def test_failure_from_parse_error(self) -> None:
        result = ServiceResult.failure("parse", ParseError(ParseErrorKind.EMPTY_INPUT, ""))
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "EMPTY_INPUT"
        assert result.error.message == "empty input"
        assert result.error.detail == {"kind": "empty_input", "input": "''"}

    def test_failure_keeps_data(self) -> None:
        result = ServiceResult.failure(
            "parse", ParseError(ParseErrorKind.MUST_BE_LETTER, "1"), token="1"
        )
        assert result.data == {"token": "1"}


class TestServiceError:
    def test_default_detail(self) -> None:
        error = ServiceError(code="E001", message="bad")
        assert error.detail == {}

    def test_from_invalid_style(self) -> None:
        error = ServiceError.from_exception(InvalidStyleError("x"))
        assert error.code == "INVALID_STYLE"
        assert error.message == "invalid style: 'x'"
        assert error.detail == {"input": "'x'"}

    def test_from_invalid_side(self) -> None:
        error = ServiceError.from_exception(InvalidSideError("third"))
        assert error.code == "INVALID_SIDE"
        assert "third" in error.message
