"""Unit tests for lenient printf-style formatting."""

from __future__ import annotations

import pytest

from xerror.kernel.errors import lenient_format


class _Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no")


class TestLenientFormat:
    @pytest.mark.parametrize(
        ("fmt", "args", "expected"),
        [
            ("user %s", ("bob",), "user bob"),
            ("%d items, %.1f%%", (3, 2.25), "3 items, 2.2%"),
            ("%x", (255,), "ff"),
            ("no args %d", (), "no args %!d(MISSING)"),
            ("100%% done", (), "100% done"),
            ("100%", (), "100%"),
        ],
    )
    def test_matching_arguments(self, fmt: str, args: tuple, expected: str) -> None:
        assert lenient_format(fmt, args) == expected

    def test_mapping_argument(self) -> None:
        assert lenient_format("%(name)s is locked", ({"name": "acct"},)) == "acct is locked"

    def test_missing_argument(self) -> None:
        assert lenient_format("%s and %s", ("a",)) == "a and %!s(MISSING)"

    def test_wrong_type(self) -> None:
        assert lenient_format("id %d", ("x",)) == "id %!d(str=x)"

    def test_extra_arguments(self) -> None:
        assert lenient_format("id", (7, "x")) == "id%!(EXTRA int=7, str=x)"

    def test_literal_percent_in_best_effort(self) -> None:
        assert lenient_format("%d%% of %s", ("x",)) == "%!d(str=x)% of %!s(MISSING)"

    def test_unknown_verb(self) -> None:
        assert lenient_format("%z", (5,)) == "%!z(int=5)"

    def test_unprintable_argument(self) -> None:
        result = lenient_format("%s", (_Unprintable(),))
        assert result.startswith("%!s(_Unprintable=<")

    def test_mapping_key_without_mapping(self) -> None:
        assert lenient_format("%(name)s", (5,)) == "%!s(int=5)"
