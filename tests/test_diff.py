"""
Unit tests for the index-aligned bundle diff.
"""
from core.diff import diff_lines, format_diff, split_lines
from core.models import LineChange


class TestDiffLines:
    """Tests for diff_lines()."""

    def test_identical_texts(self):
        assert diff_lines("x\ny\nz", "x\ny\nz") == []

    def test_changed_middle_line(self):
        changes = diff_lines("x\ny\nz", "x\nw\nz")
        assert changes == [LineChange(index=1, removed="y", added="w")]

    def test_inserted_line_cascades(self):
        """Without alignment every line after an insertion counts as changed."""
        changes = diff_lines("a\nb\nc", "a\nx\nb\nc")
        assert [c.index for c in changes] == [1, 2, 3]
        assert changes[-1] == LineChange(index=3, removed=None, added="c")

    def test_shorter_new_text(self):
        changes = diff_lines("a\nb", "a")
        assert changes == [LineChange(index=1, removed="b", added=None)]

    def test_no_previous_output(self):
        changes = diff_lines("", "a\nb")
        assert changes == [
            LineChange(index=0, added="a"),
            LineChange(index=1, added="b"),
        ]

    def test_trailing_newline_is_a_line(self):
        assert split_lines("a\n") == ["a", ""]
        assert len(diff_lines("a", "a\n")) == 1


class TestFormatDiff:
    """Tests for format_diff()."""

    def test_removed_then_added(self):
        lines = format_diff(diff_lines("x\ny\nz", "x\nw\nz"), color=False)
        assert lines == ["   2 - y", "   2 + w"]

    def test_one_sided_changes(self):
        lines = format_diff([LineChange(index=0, added="new")], color=False)
        assert lines == ["   1 + new"]

    def test_colored_output(self):
        lines = format_diff([LineChange(index=0, removed="old", added="new")])
        assert lines[0].startswith("\033[91m")
        assert lines[1].startswith("\033[92m")
