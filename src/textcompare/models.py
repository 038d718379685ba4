from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

LOOKAHEAD_WINDOW = 5


class ChangeType(str, Enum):
    """Kinds of changes tracked at both line and word granularity."""

    EQUAL = "equal"
    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"


@dataclass(frozen=True)
class WordDiff:
    """A single token inside a changed line."""

    kind: ChangeType
    value: str


@dataclass(frozen=True)
class LineDiff:
    """Classification of one positional line pair.

    ``content`` is set for equal, added and removed lines. Changed lines
    carry ``original_content`` and ``modified_content`` instead, plus the
    optional token-level ``word_diff``.
    """

    kind: ChangeType
    line_number: int
    content: str | None = None
    original_content: str | None = None
    modified_content: str | None = None
    word_diff: Tuple[WordDiff, ...] | None = None

    @property
    def is_changed(self) -> bool:
        return self.kind is ChangeType.CHANGED

    @property
    def original_text(self) -> str | None:
        """Text of this line in the original input, if it had one."""

        if self.kind is ChangeType.CHANGED:
            return self.original_content
        if self.kind is ChangeType.ADDED:
            return None
        return self.content

    @property
    def modified_text(self) -> str | None:
        """Text of this line in the modified input, if it had one."""

        if self.kind is ChangeType.CHANGED:
            return self.modified_content
        if self.kind is ChangeType.REMOVED:
            return None
        return self.content


@dataclass(frozen=True)
class ComparisonStats:
    """Aggregate counts for a full comparison."""

    total: int = 0
    equal: int = 0
    changed: int = 0
    added: int = 0
    removed: int = 0
    added_words: int = 0
    removed_words: int = 0

    @property
    def changed_words(self) -> int:
        return max(self.added_words, self.removed_words)


@dataclass(frozen=True)
class TextSummary:
    """Line and word counts shown alongside an input text."""

    lines: int
    words: int


@dataclass(frozen=True)
class Comparison:
    """Both inputs together with their line-level diff."""

    original: str
    modified: str
    lines: Tuple[LineDiff, ...]

    @property
    def has_changes(self) -> bool:
        """Return True when at least one line is not equal."""

        return any(line.kind is not ChangeType.EQUAL for line in self.lines)

    @property
    def stats(self) -> ComparisonStats:
        from .stats import compute_stats

        return compute_stats(self.lines)


@dataclass(frozen=True)
class CompareOptions:
    """Configuration for a comparison run."""

    word_diff: bool = True
    lookahead_window: int = LOOKAHEAD_WINDOW
