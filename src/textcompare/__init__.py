"""textcompare package."""

from .lines import compare, diff_lines, split_lines
from .models import (
    LOOKAHEAD_WINDOW,
    ChangeType,
    CompareOptions,
    Comparison,
    ComparisonStats,
    LineDiff,
    TextSummary,
    WordDiff,
)
from .render_html import HtmlRenderOptions, default_html_styles, render_html
from .report import render_report, report_filename, write_report
from .stats import compute_stats, summarize_text
from .words import diff_words, tokenize

__all__ = [
    "compare",
    "diff_lines",
    "split_lines",
    "diff_words",
    "tokenize",
    "compute_stats",
    "summarize_text",
    "render_report",
    "report_filename",
    "write_report",
    "render_html",
    "HtmlRenderOptions",
    "default_html_styles",
    "LOOKAHEAD_WINDOW",
    "ChangeType",
    "CompareOptions",
    "Comparison",
    "ComparisonStats",
    "LineDiff",
    "TextSummary",
    "WordDiff",
]
