"""Tests for text utilities."""

from __future__ import annotations

from noteserve.utils.text import normalize_whitespace


class TestNormalizeWhitespace:
    """Test normalize_whitespace function."""

    def test_strips_lines(self) -> None:
        assert normalize_whitespace(["  a  ", "b "]) == "a\nb"

    def test_drops_blank_lines(self) -> None:
        assert normalize_whitespace(["a", "", "   ", "b"]) == "a\nb"

    def test_collapses_inner_whitespace(self) -> None:
        assert normalize_whitespace(["milk   \t eggs"]) == "milk eggs"

    def test_empty_input(self) -> None:
        assert normalize_whitespace([]) == ""
