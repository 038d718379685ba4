"""Positional line-level diff engine."""

from __future__ import annotations

import logging
from typing import Iterable, List

from .models import ChangeType, CompareOptions, Comparison, LineDiff
from .words import diff_words

logger = logging.getLogger(__name__)


def compare(
    original: str,
    modified: str,
    *,
    options: CompareOptions | None = None,
) -> Comparison:
    """Diff two texts and keep both inputs alongside the result."""

    lines = diff_lines(original, modified, options=options)
    comparison = Comparison(original=original, modified=modified, lines=lines)
    if logger.isEnabledFor(logging.DEBUG):
        stats = comparison.stats
        logger.debug(
            "compared %d lines: %d equal, %d changed, %d added, %d removed",
            stats.total,
            stats.equal,
            stats.changed,
            stats.added,
            stats.removed,
        )
    return comparison


def diff_lines(
    original: str,
    modified: str,
    *,
    options: CompareOptions | None = None,
) -> tuple[LineDiff, ...]:
    """Pair the lines of both texts by index and classify each pair.

    Lines are not realigned after an insertion or deletion, so every later
    line shifts into a changed, added or removed record.
    """

    opts = options or CompareOptions()
    if opts.lookahead_window < 1:
        raise ValueError("lookahead_window must be at least 1")

    left = split_lines(original)
    right = split_lines(modified)
    return tuple(_build_lines(left, right, opts))


def split_lines(text: str) -> List[str]:
    """Split on ``\\n``; an empty text has no lines at all."""

    if not text:
        return []
    return text.split("\n")


def _build_lines(
    left: List[str],
    right: List[str],
    opts: CompareOptions,
) -> Iterable[LineDiff]:
    m, n = len(left), len(right)

    for index in range(max(m, n)):
        line_number = index + 1
        if index >= m:
            yield LineDiff(ChangeType.ADDED, line_number, content=right[index])
        elif index >= n:
            yield LineDiff(ChangeType.REMOVED, line_number, content=left[index])
        elif left[index] == right[index]:
            yield LineDiff(ChangeType.EQUAL, line_number, content=left[index])
        else:
            yield _build_changed_line(line_number, left[index], right[index], opts)


def _build_changed_line(
    line_number: int,
    original: str,
    modified: str,
    opts: CompareOptions,
) -> LineDiff:
    word_diff = None
    if opts.word_diff:
        word_diff = diff_words(original, modified, lookahead=opts.lookahead_window)
    return LineDiff(
        ChangeType.CHANGED,
        line_number,
        original_content=original,
        modified_content=modified,
        word_diff=word_diff,
    )
