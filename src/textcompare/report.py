"""Plain-text report export for comparison results."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import List

from .models import ChangeType, Comparison, LineDiff

logger = logging.getLogger(__name__)

REPORT_TITLE = "Advanced Text Compare Results"
SEPARATOR = "=" * 50


def render_report(comparison: Comparison, *, generated_on: date | None = None) -> str:
    """Render a :class:`Comparison` as the downloadable text report.

    Parameters
    ----------
    comparison:
        Result produced by :func:`textcompare.compare`.
    generated_on:
        Date stamped into the header. Defaults to today in UTC.

    Returns
    -------
    str
        Header, statistics, both raw texts and one entry per line record.
    """

    stamp = _stamp(generated_on)
    stats = comparison.stats

    sections = [
        f"{REPORT_TITLE} - {stamp}\n\n",
        "STATISTICS:\n",
        f"- Total lines: {stats.total}\n",
        f"- Equal lines: {stats.equal}\n",
        f"- Changed lines: {stats.changed}\n",
        f"- Added lines: {stats.added}\n",
        f"- Removed lines: {stats.removed}\n",
        f"- Word changes: {stats.changed_words}\n\n",
        f"LEFT TEXT:\n{SEPARATOR}\n{comparison.original}\n\n",
        f"RIGHT TEXT:\n{SEPARATOR}\n{comparison.modified}\n\n",
        f"DIFFERENCES:\n{SEPARATOR}\n",
        "\n".join(_render_entries(comparison)),
    ]
    return "".join(sections)


def report_filename(generated_on: date | None = None) -> str:
    return f"advanced-text-comparison-{_stamp(generated_on)}.txt"


def write_report(
    comparison: Comparison,
    directory: str | Path,
    *,
    generated_on: date | None = None,
) -> Path:
    """Write the report into ``directory`` and return the file path."""

    path = Path(directory) / report_filename(generated_on)
    path.write_text(render_report(comparison, generated_on=generated_on), encoding="utf-8")
    logger.info("wrote comparison report to %s", path)
    return path


def _render_entries(comparison: Comparison) -> List[str]:
    return [_render_entry(line) for line in comparison.lines]


def _render_entry(line: LineDiff) -> str:
    if line.kind is ChangeType.ADDED:
        return f"+ Line {line.line_number}: {line.content}"
    if line.kind is ChangeType.REMOVED:
        return f"- Line {line.line_number}: {line.content}"
    if line.kind is ChangeType.CHANGED:
        return (
            f"~ Line {line.line_number}:\n"
            f"  OLD: {line.original_content}\n"
            f"  NEW: {line.modified_content}"
        )
    if line.kind is ChangeType.EQUAL:
        return f"  Line {line.line_number}: {line.content}"
    raise ValueError(f"Unsupported line kind: {line.kind}")


def _stamp(generated_on: date | None) -> str:
    day = generated_on or datetime.now(timezone.utc).date()
    return day.isoformat()
