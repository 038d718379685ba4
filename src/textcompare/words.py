"""Word-level alignment for changed lines."""

from __future__ import annotations

import re
from typing import List, Sequence

from .models import LOOKAHEAD_WINDOW, ChangeType, WordDiff

_WHITESPACE_SPLIT_RE = re.compile(r"(\s+)")


def diff_words(
    line_a: str,
    line_b: str,
    *,
    lookahead: int = LOOKAHEAD_WINDOW,
) -> tuple[WordDiff, ...]:
    """Align the tokens of two lines using a bounded lookahead.

    Matching tokens are emitted as equal. On a mismatch the next
    ``lookahead`` tokens are scanned for a resynchronization point; the
    original side is checked before the modified side at each distance, and
    the first hit wins. When nothing matches, the pair is emitted as one
    removal followed by one addition.
    """

    if lookahead < 1:
        raise ValueError("lookahead must be at least 1")

    left = tokenize(line_a)
    right = tokenize(line_b)
    p, q = len(left), len(right)
    result: List[WordDiff] = []

    i = j = 0
    while i < p or j < q:
        if i >= p:
            result.extend(_words(ChangeType.ADDED, right[j:]))
            j = q
        elif j >= q:
            result.extend(_words(ChangeType.REMOVED, left[i:]))
            i = p
        elif left[i] == right[j]:
            result.append(WordDiff(ChangeType.EQUAL, left[i]))
            i += 1
            j += 1
        else:
            advance = _resync(left, right, i, j, lookahead, result)
            if advance is None:
                result.append(WordDiff(ChangeType.REMOVED, left[i]))
                result.append(WordDiff(ChangeType.ADDED, right[j]))
                i += 1
                j += 1
            else:
                i, j = advance

    return tuple(result)


def tokenize(line: str) -> List[str]:
    """Split a line into alternating non-whitespace and whitespace runs.

    A line that starts or ends with whitespace keeps an empty token at that
    end, and an empty line is a single empty token.
    """

    return _WHITESPACE_SPLIT_RE.split(line)


def _resync(
    left: Sequence[str],
    right: Sequence[str],
    i: int,
    j: int,
    lookahead: int,
    result: List[WordDiff],
) -> tuple[int, int] | None:
    p, q = len(left), len(right)
    window = min(lookahead, max(p - i, q - j))

    for k in range(1, window + 1):
        if i + k < p and left[i + k] == right[j]:
            result.extend(_words(ChangeType.REMOVED, left[i : i + k]))
            result.append(WordDiff(ChangeType.EQUAL, left[i + k]))
            return i + k + 1, j + 1
        if j + k < q and right[j + k] == left[i]:
            result.extend(_words(ChangeType.ADDED, right[j : j + k]))
            result.append(WordDiff(ChangeType.EQUAL, right[j + k]))
            return i + 1, j + k + 1
    return None


def _words(kind: ChangeType, tokens: Sequence[str]) -> List[WordDiff]:
    return [WordDiff(kind, token) for token in tokens]
