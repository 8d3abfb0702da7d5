"""
Table-of-contents rendering.

Renders outline entries as an HTML navigation block (inline or sidebar
layout) or as a nested markdown list.
"""

from __future__ import annotations

from collections.abc import Sequence
from html import escape

from .models import OutlineEntry, TocVariant

# Short posts don't get a table of contents
DEFAULT_MIN_ENTRIES = 3

INLINE_INDENT_PX = 16
SIDEBAR_INDENT_PX = 12


def _indent(entry: OutlineEntry, step: int) -> int:
    return (int(entry.level) - 2) * step


def render_toc(
    entries: Sequence[OutlineEntry],
    variant: TocVariant = TocVariant.INLINE,
    min_entries: int = DEFAULT_MIN_ENTRIES,
) -> str:
    """Render a table of contents as an HTML <nav> element.

    The inline variant numbers its entries ("01", "02", ...) and is titled
    "Table of Contents". The sidebar variant is titled "On this page" and is
    not numbered. Subsections are indented by one step per level below 2.

    Args:
        entries: Outline entries in document order
        variant: Layout to render
        min_entries: Minimum number of entries for a TOC to be rendered

    Returns:
        HTML fragment, or an empty string when there are too few entries
    """
    if len(entries) < min_entries:
        return ""

    variant = TocVariant(variant)
    if variant is TocVariant.SIDEBAR:
        title = "On this page"
        step = SIDEBAR_INDENT_PX
    else:
        title = "Table of Contents"
        step = INLINE_INDENT_PX

    lines = [f'<nav class="toc toc-{variant.value}">', f"<h4>{title}</h4>", "<ul>"]
    for index, entry in enumerate(entries, start=1):
        label = escape(entry.text)
        if variant is TocVariant.INLINE:
            label = f'<span class="toc-index">{index:02d}</span> {label}'
        lines.append(
            f'<li style="padding-left: {_indent(entry, step)}px">'
            f'<a href="#{escape(entry.id)}">{label}</a></li>'
        )
    lines.extend(["</ul>", "</nav>"])
    return "\n".join(lines)


def toc_to_markdown(entries: Sequence[OutlineEntry]) -> str:
    """Render outline entries as a nested markdown link list."""
    lines = []
    for entry in entries:
        indent = "  " * (int(entry.level) - 2)
        lines.append(f"{indent}- [{entry.text}](#{entry.id})")
    return "\n".join(lines)
