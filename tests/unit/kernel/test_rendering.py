"""Unit tests for the text renderers."""

from __future__ import annotations

import pytest

from xerror.kernel.errors import ErrorCode, Rendering
from xerror.kernel.errors.rendering import (
    UNKNOWN_EXTERNAL,
    UNSPECIFIED_INTERNAL,
    cause_text,
    format_code,
    render_compact,
    render_verbose,
)


class TestRenderingParse:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("verbose", Rendering.VERBOSE),
            ("COMPACT_HEX", Rendering.COMPACT_HEX),
            (" compact_decimal ", Rendering.COMPACT_DECIMAL),
            (Rendering.VERBOSE, Rendering.VERBOSE),
        ],
    )
    def test_accepts_names_and_values(self, raw: str, expected: Rendering) -> None:
        assert Rendering.parse(raw) is expected

    def test_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="unknown rendering"):
            Rendering.parse("json")


class TestFormatCode:
    def test_verbose_marker(self) -> None:
        assert format_code(ErrorCode("0427"), Rendering.VERBOSE) == "e0427"

    def test_hex(self) -> None:
        assert format_code(ErrorCode(4096), Rendering.COMPACT_HEX) == "[0x1000]"

    def test_decimal(self) -> None:
        assert format_code(ErrorCode("0427"), Rendering.COMPACT_DECIMAL) == "[427]"

    def test_non_numeric_token_verbatim(self) -> None:
        assert format_code(ErrorCode("ab12"), Rendering.COMPACT_HEX) == "[ab12]"

    def test_negative(self) -> None:
        assert format_code(ErrorCode(-1), Rendering.COMPACT_HEX) == "[-0x1]"


class TestCauseText:
    def test_none(self) -> None:
        assert cause_text(None) == UNSPECIFIED_INTERNAL

    def test_empty_message_uses_type_name(self) -> None:
        assert cause_text(ValueError()) == "ValueError"

    def test_broken_str(self) -> None:
        class Broken(Exception):
            def __str__(self) -> str:
                raise RuntimeError("nope")

        assert cause_text(Broken()) == "Broken"


class TestRenderers:
    def test_compact_placeholder(self) -> None:
        assert render_compact(None, ErrorCode(1), Rendering.COMPACT_HEX) == (
            f"error: {UNKNOWN_EXTERNAL} [0x1]"
        )

    def test_compact_from_verbose_mode_is_hex(self) -> None:
        assert render_compact("x", ErrorCode(10), Rendering.VERBOSE) == "error: x [0xa]"

    def test_verbose_order(self) -> None:
        text = render_verbose("x", ErrorCode("0001"), ValueError("v"), "a.py:3")
        assert text == "error: x\n\te0001\n\tv\n\ta.py:3"
