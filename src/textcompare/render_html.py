"""HTML rendering utilities for text comparisons."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Iterable, Sequence

from .models import ChangeType, Comparison, LineDiff, WordDiff

EMPTY_LINE_PLACEHOLDER = "(empty line)"

_MARKERS = {
    ChangeType.EQUAL: "=",
    ChangeType.ADDED: "+",
    ChangeType.REMOVED: "-",
    ChangeType.CHANGED: "~",
}


@dataclass(frozen=True)
class HtmlRenderOptions:
    """Tunable options for HTML diff rendering."""

    include_styles: bool = True
    class_prefix: str = "textcompare"
    show_line_numbers: bool = True
    show_word_diff: bool = True


def render_html(
    diff_result: Comparison | Sequence[LineDiff],
    options: HtmlRenderOptions | None = None,
) -> str:
    """Render line records as annotated HTML.

    Parameters
    ----------
    diff_result:
        A :class:`Comparison` or the bare records from
        :func:`textcompare.diff_lines`.
    options:
        Optional rendering tweaks. When omitted, sensible defaults are used.
    """

    opts = options or HtmlRenderOptions()
    classes = _ClassRegistry(opts.class_prefix)
    lines = diff_result.lines if isinstance(diff_result, Comparison) else tuple(diff_result)

    parts: list[str] = []
    if opts.include_styles:
        stylesheet = default_html_styles(classes.prefix)
        parts.append(f'<style type="text/css">{stylesheet}</style>')

    root_classes = [classes.root]
    if opts.show_word_diff:
        root_classes.append(classes.root_word_diff)
    parts.append(f'<div class="{" ".join(root_classes)}">')
    for line in lines:
        parts.append(_render_line_html(line, classes, opts))
    parts.append("</div>")
    return "".join(parts)


def default_html_styles(class_prefix: str = "textcompare") -> str:
    """Return the default CSS used by ``render_html``.

    Changing ``class_prefix`` lets callers embed several rendered
    comparisons on one page without collisions.
    """

    prefix = _normalize_prefix(class_prefix)
    return (
        f".{prefix}-diff {{\n"
        f"  font-family: var(--{prefix}-font, SFMono-Regular, Menlo, Monaco, Consolas, monospace);\n"
        f"  font-size: 13px;\n"
        f"  line-height: 1.45;\n"
        f"  color: var(--{prefix}-foreground, #374151);\n"
        f"  border: 1px solid var(--{prefix}-border, #e5e7eb);\n"
        f"  border-radius: 12px;\n"
        f"  overflow: auto;\n"
        f"}}\n"
        f".{prefix}-line {{\n"
        f"  display: grid;\n"
        f"  grid-template-columns: 2ch minmax(3ch, auto) 1fr;\n"
        f"  gap: 8px;\n"
        f"  padding: 4px 12px;\n"
        f"  border-left: 4px solid var(--{prefix}-equal-border, #d1d5db);\n"
        f"  white-space: pre-wrap;\n"
        f"  word-break: break-word;\n"
        f"}}\n"
        f".{prefix}-line--equal {{\n"
        f"  background: var(--{prefix}-equal-background, #f9fafb);\n"
        f"}}\n"
        f".{prefix}-line--added {{\n"
        f"  background: var(--{prefix}-added-background, #f0fdf4);\n"
        f"  border-left-color: var(--{prefix}-added-border, #22c55e);\n"
        f"}}\n"
        f".{prefix}-line--removed {{\n"
        f"  background: var(--{prefix}-removed-background, #fef2f2);\n"
        f"  border-left-color: var(--{prefix}-removed-border, #ef4444);\n"
        f"}}\n"
        f".{prefix}-line--changed {{\n"
        f"  background: var(--{prefix}-changed-background, #fefce8);\n"
        f"  border-left-color: var(--{prefix}-changed-border, #eab308);\n"
        f"}}\n"
        f".{prefix}-marker {{\n"
        f"  font-weight: 700;\n"
        f"  text-align: center;\n"
        f"}}\n"
        f".{prefix}-gutter {{\n"
        f"  font-variant-numeric: tabular-nums;\n"
        f"  text-align: right;\n"
        f"  color: var(--{prefix}-gutter-foreground, #6b7280);\n"
        f"}}\n"
        f".{prefix}-gutter--hidden {{\n"
        f"  visibility: hidden;\n"
        f"}}\n"
        f".{prefix}-content--empty {{\n"
        f"  color: var(--{prefix}-empty-foreground, #9ca3af);\n"
        f"  font-style: italic;\n"
        f"}}\n"
        f".{prefix}-row {{\n"
        f"  display: block;\n"
        f"}}\n"
        f".{prefix}-row--old {{\n"
        f"  color: var(--{prefix}-row-old-foreground, #b91c1c);\n"
        f"}}\n"
        f".{prefix}-row--new {{\n"
        f"  color: var(--{prefix}-row-new-foreground, #15803d);\n"
        f"}}\n"
        f".{prefix}-word {{\n"
        f"  border-radius: 4px;\n"
        f"}}\n"
        f".{prefix}-word--equal {{\n"
        f"  color: inherit;\n"
        f"}}\n"
        f".{prefix}-word--added {{\n"
        f"  background: var(--{prefix}-word-added, #bbf7d0);\n"
        f"  color: var(--{prefix}-word-added-foreground, #166534);\n"
        f"}}\n"
        f".{prefix}-word--removed {{\n"
        f"  background: var(--{prefix}-word-removed, #fecaca);\n"
        f"  color: var(--{prefix}-word-removed-foreground, #991b1b);\n"
        f"  text-decoration-line: line-through;\n"
        f"}}\n"
    )


def _render_line_html(line: LineDiff, classes: _ClassRegistry, opts: HtmlRenderOptions) -> str:
    if line.kind not in _MARKERS:
        raise ValueError(f"Unsupported line kind: {line.kind}")

    line_classes = [classes.line, classes.line_kind(line.kind)]
    attrs = [
        f'class="{" ".join(line_classes)}"',
        f'data-change-kind="{line.kind.value}"',
        f'data-lineno="{line.line_number}"',
    ]

    marker = f'<span class="{classes.marker}">{_MARKERS[line.kind]}</span>'
    gutter = _render_gutter(line.line_number, classes, hidden=not opts.show_line_numbers)

    if line.kind is ChangeType.CHANGED:
        if opts.show_word_diff and line.word_diff is not None:
            content = _render_word_diff(line.word_diff, classes)
        else:
            content = _render_changed_rows(line, classes)
        content_span = f'<span class="{classes.content}">{content}</span>'
    else:
        content_span = _render_plain_content(line.content or "", classes)

    return f'<div {" ".join(attrs)}>{marker}{gutter}{content_span}</div>'


def _render_plain_content(text: str, classes: _ClassRegistry) -> str:
    if not text:
        return (
            f'<span class="{classes.content} {classes.content_empty}">'
            f"{EMPTY_LINE_PLACEHOLDER}</span>"
        )
    return f'<span class="{classes.content}">{escape(text)}</span>'


def _render_changed_rows(line: LineDiff, classes: _ClassRegistry) -> str:
    return _render_row(line.original_content, "old", "-", classes) + _render_row(
        line.modified_content, "new", "+", classes
    )


def _render_row(text: str | None, side: str, sign: str, classes: _ClassRegistry) -> str:
    row_classes = [classes.row, classes.row_side(side)]
    if not text:
        row_classes.append(classes.content_empty)
        body = EMPTY_LINE_PLACEHOLDER
    else:
        body = escape(text)
    return f'<span class="{" ".join(row_classes)}">{sign} {body}</span>'


def _render_word_diff(words: Iterable[WordDiff], classes: _ClassRegistry) -> str:
    pieces: list[str] = []
    for word in words:
        word_classes = [classes.word, classes.word_kind(word.kind)]
        pieces.append(f'<span class="{" ".join(word_classes)}">{escape(word.value)}</span>')
    return "".join(pieces)


def _render_gutter(value: int, classes: _ClassRegistry, *, hidden: bool = False) -> str:
    gutter_classes = [classes.gutter]
    if hidden:
        gutter_classes.append(classes.gutter_hidden)
    return f'<span class="{" ".join(gutter_classes)}">{value}</span>'


class _ClassRegistry:
    """Helper for constructing namespaced CSS classes."""

    def __init__(self, prefix: str) -> None:
        self.prefix = _normalize_prefix(prefix)
        self.root = f"{self.prefix}-diff"
        self.root_word_diff = f"{self.prefix}-diff--word-diff"
        self.line = f"{self.prefix}-line"
        self.marker = f"{self.prefix}-marker"
        self.gutter = f"{self.prefix}-gutter"
        self.gutter_hidden = f"{self.prefix}-gutter--hidden"
        self.content = f"{self.prefix}-content"
        self.content_empty = f"{self.prefix}-content--empty"
        self.row = f"{self.prefix}-row"
        self.word = f"{self.prefix}-word"

    def line_kind(self, kind: ChangeType) -> str:
        return f"{self.prefix}-line--{kind.value}"

    def row_side(self, side: str) -> str:
        return f"{self.prefix}-row--{side}"

    def word_kind(self, kind: ChangeType) -> str:
        return f"{self.prefix}-word--{kind.value}"


def _normalize_prefix(prefix: str) -> str:
    cleaned = (prefix or "textcompare").strip()
    sanitized = "".join(ch for ch in cleaned if ch.isalnum() or ch in "-_")
    if not sanitized:
        return "textcompare"
    return sanitized
