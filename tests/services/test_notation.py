"""Tests for NotationService."""

from __future__ import annotations

import pytest

from sinctl.domain.constants import Side, Style
from sinctl.domain.errors import InvalidSideError, InvalidStyleError
from sinctl.output.formatters import OutputSettings, format_result
from sinctl.services.notation import NotationService, coerce_side, coerce_style, printable


@pytest.fixture
def svc() -> NotationService:
    return NotationService()


class TestParse:
    def test_first_player(self, svc: NotationService) -> None:
        result = svc.parse("C")
        assert result.ok
        assert result.op == "parse"
        assert result.data == {"token": "C", "style": "C", "side": "first"}

    def test_second_player(self, svc: NotationService) -> None:
        result = svc.parse("s")
        assert result.data == {"token": "s", "style": "S", "side": "second"}

    @pytest.mark.parametrize(
        "token,code",
        [("", "EMPTY_INPUT"), ("CC", "INPUT_TOO_LONG"), ("1", "MUST_BE_LETTER")],
    )
    def test_errors(self, svc: NotationService, token: str, code: str) -> None:
        result = svc.parse(token)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == code


class TestValidate:
    def test_all_valid(self, svc: NotationService) -> None:
        result = svc.validate(["C", "c", "Z"])
        assert result.ok
        assert result.data["count"] == 3
        assert result.data["valid_count"] == 3
        assert result.data["invalid_count"] == 0
        assert result.data["stopped_early"] is False

    def test_reports_each_failure(self, svc: NotationService) -> None:
        result = svc.validate(["C", "", "CC", "1"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_TOKENS"
        assert result.error.message == "3 of 4 tokens are invalid"
        kinds = [item["kind"] for item in result.data["items"]]
        assert kinds == [None, "empty_input", "input_too_long", "must_be_letter"]

    def test_items_are_json_safe(self, svc: NotationService) -> None:
        result = svc.validate(["\udcff", "C"])
        assert [item["token"] for item in result.data["items"]] == ["\\udcff", "C"]
        rendered = format_result(result, settings=OutputSettings(json_output=True))
        assert "input_too_long" in rendered

    def test_fail_fast_stops(self) -> None:
        result = NotationService(fail_fast=True).validate(["C", "1", "x", "2"])
        assert not result.ok
        assert result.data["count"] == 2
        assert result.data["stopped_early"] is True

    def test_fail_fast_on_last_token(self) -> None:
        result = NotationService(fail_fast=True).validate(["C", "1"])
        assert result.data["count"] == 2
        assert result.data["stopped_early"] is False


class TestFlip:
    def test_flip(self, svc: NotationService) -> None:
        result = svc.flip("C")
        assert result.ok
        assert result.data["token"] == "c"
        assert result.data["source"] == "C"

    def test_flip_invalid(self, svc: NotationService) -> None:
        result = svc.flip("+")
        assert not result.ok
        assert result.op == "flip"


class TestConvert:
    def test_side(self, svc: NotationService) -> None:
        result = svc.convert("C", side="second")
        assert result.ok
        assert result.data["token"] == "c"

    def test_style_and_side(self, svc: NotationService) -> None:
        result = svc.convert("c", style="X", side="first")
        assert result.data["token"] == "X"
        assert result.data["source"] == "c"

    def test_unchanged_warns(self, svc: NotationService) -> None:
        result = svc.convert("C", style="C")
        assert result.ok
        assert result.warnings == ["Token 'C' is unchanged"]

    def test_invalid_style(self, svc: NotationService) -> None:
        result = svc.convert("C", style="cc")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_STYLE"

    def test_style_error_before_side_error(self, svc: NotationService) -> None:
        result = svc.convert("C", style="?", side="third")
        assert result.error is not None
        assert result.error.code == "INVALID_STYLE"

    def test_invalid_side(self, svc: NotationService) -> None:
        result = svc.convert("C", side="third")
        assert result.error is not None
        assert result.error.code == "INVALID_SIDE"

    def test_invalid_token(self, svc: NotationService) -> None:
        result = svc.convert("", side="second")
        assert result.error is not None
        assert result.error.code == "EMPTY_INPUT"


class TestCompare:
    def test_same_style_different_side(self, svc: NotationService) -> None:
        result = svc.compare("C", "c")
        assert result.data["same_style"] is True
        assert result.data["same_side"] is False
        assert result.data["equal"] is False

    def test_equal(self, svc: NotationService) -> None:
        assert svc.compare("s", "s").data["equal"] is True

    def test_invalid_operand(self, svc: NotationService) -> None:
        result = svc.compare("C", "CC")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INPUT_TOO_LONG"


def test_list_styles(svc: NotationService) -> None:
    result = svc.list_styles()
    assert result.ok
    assert len(result.data["styles"]) == 26
    assert result.data["sides"] == ["first", "second"]
    assert result.data["max_length"] == 1


@pytest.mark.parametrize(
    "token,expected",
    [("C", "C"), ("\u00e9", "\u00e9"), ("\udcff", "\\udcff"), (b"C", "b'C'"), (None, "None")],
)
def test_printable(token: object, expected: str) -> None:
    assert printable(token) == expected


class TestCoercion:
    def test_style(self) -> None:
        assert coerce_style("S") is Style.S

    def test_lowercase_style_rejected(self) -> None:
        with pytest.raises(InvalidStyleError):
            coerce_style("s")

    def test_side(self) -> None:
        assert coerce_side("second") is Side.SECOND

    def test_bad_side(self) -> None:
        with pytest.raises(InvalidSideError):
            coerce_side("SECOND")
