"""
Data models for the ScopeGen outline toolkit.

A post body is an ordered list of blocks (plain strings). Heading blocks
become OutlineEntry records used to render a table of contents with anchor
links.
"""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field

# A block is one atomic unit of post content: a heading, a paragraph,
# a list, a rule or a fenced code region.
Block = str


class HeadingLevel(IntEnum):
    """Nesting depth of an outline entry (section vs. subsection)."""
    LEVEL2 = 2
    LEVEL3 = 3


class BlockKind(str, Enum):
    """Rendering kind of a post block."""
    HEADING2 = "heading2"
    HEADING3 = "heading3"
    LIST = "list"
    RULE = "rule"
    CODE = "code"
    PARAGRAPH = "paragraph"


class TocVariant(str, Enum):
    """Layout of a rendered table of contents."""
    INLINE = "inline"
    SIDEBAR = "sidebar"


class OutlineEntry(BaseModel):
    """One heading extracted from a post.

    Two headings with the same text share the same id; callers that need
    unique anchors must disambiguate them.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="URL-fragment-safe anchor derived from text")
    text: str = Field(description="Heading text with the level marker removed")
    level: HeadingLevel = Field(description="Heading level (2 or 3)")


class PostMetadata(BaseModel):
    """Front matter of a blog post."""

    # YAML reads "title: 2024" or "readTime: 5" as numbers
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    title: str = Field(default="", description="Post title")
    excerpt: str = Field(default="", description="Short summary shown in listings")
    read_time: str | None = Field(
        default=None,
        alias="readTime",
        description="Reading time label, e.g. '8 min read'",
    )
    category: str | None = Field(default=None, description="Post category")
    tags: list[str] = Field(default_factory=list, description="Post tags")


class Post(BaseModel):
    """A markdown post loaded from the library."""

    id: str = Field(description="Post ID derived from the filename")
    filename: str = Field(description="Source filename")
    file_hash: str = Field(description="SHA-256 of the source file")
    metadata: PostMetadata = Field(default_factory=PostMetadata)
    blocks: list[Block] = Field(default_factory=list)
