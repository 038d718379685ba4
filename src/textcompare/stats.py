"""Aggregate counts over diff results and input texts."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from .models import ChangeType, ComparisonStats, LineDiff, TextSummary


def compute_stats(lines: Iterable[LineDiff]) -> ComparisonStats:
    """Count lines per kind and word tokens across changed lines.

    Word totals only include lines that carry a word diff.
    """

    line_counts: Counter[ChangeType] = Counter()
    word_counts: Counter[ChangeType] = Counter()
    total = 0

    for line in lines:
        total += 1
        line_counts[line.kind] += 1
        if line.word_diff:
            word_counts.update(word.kind for word in line.word_diff)

    return ComparisonStats(
        total=total,
        equal=line_counts[ChangeType.EQUAL],
        changed=line_counts[ChangeType.CHANGED],
        added=line_counts[ChangeType.ADDED],
        removed=line_counts[ChangeType.REMOVED],
        added_words=word_counts[ChangeType.ADDED],
        removed_words=word_counts[ChangeType.REMOVED],
    )


def summarize_text(text: str) -> TextSummary:
    """Line and word counts for a single input text."""

    return TextSummary(lines=len(text.split("\n")), words=len(text.split()))
