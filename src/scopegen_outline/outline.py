"""
Outline extractor for blog post blocks.

Turns an ordered list of post blocks into table-of-contents entries. Only
blocks beginning with "## " (section) or "### " (subsection) are headings;
everything else is dropped.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from .models import HeadingLevel, OutlineEntry

# Longest marker first so "### " is never classified as a level 2 heading
HEADING_MARKERS: tuple[tuple[str, HeadingLevel], ...] = (
    ("### ", HeadingLevel.LEVEL3),
    ("## ", HeadingLevel.LEVEL2),
)

_WHITESPACE_RE = re.compile(r"\s+")
_NON_ANCHOR_RE = re.compile(r"[^\w-]")


def classify_heading(block: str) -> HeadingLevel | None:
    """Return the heading level of a block, or None for non-headings.

    Args:
        block: A single post block

    Returns:
        HeadingLevel.LEVEL3 for "### ", HeadingLevel.LEVEL2 for "## ",
        None otherwise (including "# ", "#### " and "##NoSpace")
    """
    for marker, level in HEADING_MARKERS:
        if block.startswith(marker):
            return level
    return None


def heading_text(block: str, level: HeadingLevel) -> str:
    """Strip the level marker from a heading block.

    The remainder is returned as-is; surrounding whitespace is kept.
    """
    # marker is the hashes plus one space
    return block[int(level) + 1:]


def heading_id(text: str) -> str:
    """Generate an anchor id from heading text.

    Lowercases, replaces each whitespace run with a hyphen, then removes
    anything that is not a word character or a hyphen. Leading or trailing
    whitespace therefore becomes a leading or trailing hyphen.

    Args:
        text: Heading text (marker already stripped)

    Returns:
        Anchor id, e.g. "FAQ's" -> "faqs"
    """
    anchor = text.lower()
    anchor = _WHITESPACE_RE.sub("-", anchor)
    return _NON_ANCHOR_RE.sub("", anchor)


def extract_outline(blocks: Sequence[str]) -> list[OutlineEntry]:
    """Extract the table-of-contents entries from a list of post blocks.

    Args:
        blocks: Post blocks in document order

    Returns:
        One OutlineEntry per heading block, in input order
    """
    outline: list[OutlineEntry] = []
    for block in blocks:
        level = classify_heading(block)
        if level is None:
            continue
        text = heading_text(block, level)
        outline.append(OutlineEntry(id=heading_id(text), text=text, level=level))
    return outline
