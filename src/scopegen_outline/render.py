"""
HTML rendering of post blocks.

Headings get id attributes generated by the outline extractor so that
table-of-contents links resolve to them.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from html import escape

from .blocks import CODE_FENCE, LIST_MARKER, classify_block
from .models import BlockKind
from .outline import classify_heading, heading_id, heading_text

_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

# Links with any other scheme are left as plain text
SAFE_LINK_SCHEMES = ("http", "https", "mailto")


def is_safe_href(href: str) -> bool:
    """Allow http(s), mailto, fragment and relative links.

    Whitespace is ignored when reading the scheme, as browsers do.
    """
    compact = "".join(href.split())
    scheme, sep, _ = compact.partition(":")
    if not sep or any(c in scheme for c in "/?#"):
        return True
    return scheme.lower() in SAFE_LINK_SCHEMES


def _render_link(match: re.Match) -> str:
    label, href = match.group(1), match.group(2)
    if not is_safe_href(href):
        return match.group(0)
    return f'<a href="{href}">{label}</a>'


def render_inline(text: str) -> str:
    """Render **bold** and [label](href) markup inside a paragraph."""
    html = escape(text)
    html = _BOLD_RE.sub(r"<strong>\1</strong>", html)
    return _LINK_RE.sub(_render_link, html)


def _render_heading(block: str, tag: str) -> str:
    level = classify_heading(block)
    text = heading_text(block, level)
    return f'<{tag} id="{escape(heading_id(text))}">{escape(text)}</{tag}>'


def _render_list(block: str) -> str:
    items = []
    for line in block.split("\n"):
        if not line.startswith(LIST_MARKER):
            continue
        # List items drop bold markers instead of rendering them
        item = _BOLD_RE.sub(r"\1", line[len(LIST_MARKER):])
        items.append(f"<li>{escape(item)}</li>")
    return "<ul>" + "".join(items) + "</ul>"


def _render_code(block: str) -> str:
    lines = block.split("\n")[1:]
    if lines and lines[-1].startswith(CODE_FENCE):
        lines = lines[:-1]
    return "<pre><code>" + escape("\n".join(lines)) + "</code></pre>"


def render_block(block: str) -> str:
    """Render a single block to an HTML element."""
    kind = classify_block(block)
    if kind is BlockKind.HEADING2:
        return _render_heading(block, "h2")
    if kind is BlockKind.HEADING3:
        return _render_heading(block, "h3")
    if kind is BlockKind.LIST:
        return _render_list(block)
    if kind is BlockKind.RULE:
        return "<hr>"
    if kind is BlockKind.CODE:
        return _render_code(block)
    return f"<p>{render_inline(block)}</p>"


def render_blocks(blocks: Sequence[str]) -> str:
    """Render post blocks to HTML, one element per line.

    Args:
        blocks: Post blocks in document order

    Returns:
        HTML fragment for the post body
    """
    return "\n".join(render_block(block) for block in blocks)
