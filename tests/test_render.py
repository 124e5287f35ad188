"""Tests for seqkit/render.py"""

from seqkit.render import format_inline, format_sequence


class TestFormatSequence:
    def test_basic(self):
        assert format_sequence([1, 4]) == "[\n  1,\n  4,\n]"

    def test_empty(self):
        assert format_sequence([]) == "[\n]"

    def test_strings(self):
        assert format_sequence(["fig"]) == "[\n  fig,\n]"

    def test_one_line_per_element(self):
        lines = format_sequence([1, 4, 5, 8]).splitlines()
        assert lines[0] == "["
        assert lines[-1] == "]"
        assert lines[1:-1] == ["  1,", "  4,", "  5,", "  8,"]


class TestFormatInline:
    def test_basic(self):
        assert format_inline([15, 3, 12]) == "15, 3, 12, "

    def test_empty(self):
        assert format_inline([]) == ""
