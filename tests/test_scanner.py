"""Tests for the markdown line scanner."""

from __future__ import annotations

from ostbuilder.markdown.scanner import ScannedLine, match_heading, scan, split_lines


def test_match_heading_levels() -> None:
    """It should report the number of hashes as the level."""

    assert match_heading("## [Outcome] Goal") == (2, "[Outcome] Goal")
    assert match_heading("###### Deep") == (6, "Deep")


def test_match_heading_rejects_non_headings() -> None:
    """It should reject lines without a space after the hashes or with seven hashes."""

    assert match_heading("##NoSpace") is None
    assert match_heading("####### Too deep") is None
    assert match_heading("plain text") is None
    assert match_heading("- start: 0") is None


def test_split_lines_normalises_crlf() -> None:
    """It should treat CRLF as a single line break."""

    assert split_lines("a\r\nb\nc") == ["a", "b", "c"]


def test_scan_classifies_every_line() -> None:
    """It should yield headings and content lines in document order."""

    lines = list(scan("# Title\n\n## Goal\nsome text"))
    assert lines == [
        ScannedLine(text="Title", level=1),
        ScannedLine(text=""),
        ScannedLine(text="Goal", level=2),
        ScannedLine(text="some text"),
    ]
    assert lines[0].is_heading
    assert not lines[1].is_heading
