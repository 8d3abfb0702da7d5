"""
Splitting markdown documents into post blocks.

A post is stored as a list of blocks. Blank lines separate blocks, every
"#" line is a block of its own, and a fenced code region stays together
as a single block even when it contains blank lines.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import BlockKind, HeadingLevel
from .outline import classify_heading

CODE_FENCE = "```"
LIST_MARKER = "- "
RULE_BLOCK = "---"


def split_blocks(text: str) -> list[str]:
    """Split a markdown document into blocks.

    Args:
        text: Markdown document body (front matter already removed)

    Returns:
        Blocks in document order. Lines are kept verbatim.
    """
    blocks: list[str] = []
    current: list[str] = []
    in_fence = False

    def flush() -> None:
        if current:
            blocks.append("\n".join(current))
            current.clear()

    for line in text.replace("\r\n", "\n").split("\n"):
        if line.startswith(CODE_FENCE):
            if not in_fence:
                flush()
            current.append(line)
            in_fence = not in_fence
            if not in_fence:
                flush()
            continue

        if in_fence:
            current.append(line)
        elif not line.strip():
            flush()
        elif line.startswith("#"):
            flush()
            blocks.append(line)
        else:
            current.append(line)

    # An unterminated fence keeps everything after it
    flush()
    return blocks


def classify_block(block: str) -> BlockKind:
    """Classify a block for rendering.

    Headings follow the outline extractor's rule so rendered anchors always
    match the table of contents.
    """
    level = classify_heading(block)
    if level is HeadingLevel.LEVEL3:
        return BlockKind.HEADING3
    if level is HeadingLevel.LEVEL2:
        return BlockKind.HEADING2
    if block.startswith(LIST_MARKER):
        return BlockKind.LIST
    if block == RULE_BLOCK:
        return BlockKind.RULE
    if block.startswith(CODE_FENCE):
        return BlockKind.CODE
    return BlockKind.PARAGRAPH


def count_words(blocks: Sequence[str]) -> int:
    """Count whitespace-delimited words across all blocks."""
    return sum(len(block.split()) for block in blocks)
