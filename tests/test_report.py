from __future__ import annotations

import logging
import re
from datetime import date
from pathlib import Path

import pytest

from textcompare import compare, render_report, report_filename, write_report

DAY = date(2024, 1, 2)


def test_render_report_layout():
    report = render_report(compare("a\nb", "a\nx"), generated_on=DAY)

    assert report == (
        "Advanced Text Compare Results - 2024-01-02\n"
        "\n"
        "STATISTICS:\n"
        "- Total lines: 2\n"
        "- Equal lines: 1\n"
        "- Changed lines: 1\n"
        "- Added lines: 0\n"
        "- Removed lines: 0\n"
        "- Word changes: 1\n"
        "\n"
        "LEFT TEXT:\n"
        + "=" * 50
        + "\n"
        "a\n"
        "b\n"
        "\n"
        "RIGHT TEXT:\n"
        + "=" * 50
        + "\n"
        "a\n"
        "x\n"
        "\n"
        "DIFFERENCES:\n"
        + "=" * 50
        + "\n"
        "  Line 1: a\n"
        "~ Line 2:\n"
        "  OLD: b\n"
        "  NEW: x"
    )


def test_render_report_added_and_removed_entries():
    added = render_report(compare("a\nb", "a\nb\nc"), generated_on=DAY)
    removed = render_report(compare("a\nb", "a"), generated_on=DAY)

    assert added.endswith("  Line 1: a\n  Line 2: b\n+ Line 3: c")
    assert "- Added lines: 1\n" in added
    assert removed.endswith("  Line 1: a\n- Line 2: b")
    assert "- Removed lines: 1\n" in removed


def test_render_report_defaults_to_today():
    report = render_report(compare("a", "b"))

    assert re.match(r"Advanced Text Compare Results - \d{4}-\d{2}-\d{2}\n", report)


def test_report_filename():
    assert report_filename(DAY) == "advanced-text-comparison-2024-01-02.txt"


def test_write_report_creates_file(tmp_path: Path, caplog) -> None:
    caplog.set_level(logging.INFO, logger="textcompare.report")
    comparison = compare("a\nb", "a\nx")

    path = write_report(comparison, tmp_path, generated_on=DAY)

    assert path == tmp_path / "advanced-text-comparison-2024-01-02.txt"
    assert path.read_text(encoding="utf-8") == render_report(comparison, generated_on=DAY)
    assert str(path) in caplog.text


def test_write_report_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        write_report(compare("a", "b"), tmp_path / "missing", generated_on=DAY)
