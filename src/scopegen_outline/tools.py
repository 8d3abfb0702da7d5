"""
Outline tools for MCP integration.

Plain functions behind the server's tools. They format results as text
for the client; errors from the library and fetcher propagate to the
tool layer in main.py.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from enum import Enum
from html import escape

from .blocks import split_blocks
from .config import OutlineConfig
from .exceptions import FrontMatterError, PostEncodingError
from .fetcher import fetch_markdown
from .library import PostLibrary, parse_front_matter
from .models import OutlineEntry
from .outline import extract_outline
from .render import render_blocks
from .toc import render_toc, toc_to_markdown

logger = logging.getLogger("scopegen-outline")


class OutputFormat(str, Enum):
    """Output format of outline tools."""
    JSON = "json"
    MARKDOWN = "markdown"
    HTML = "html"


def format_outline(
    entries: Sequence[OutlineEntry],
    output_format: OutputFormat | str,
    config: OutlineConfig,
) -> str:
    """Format outline entries for a tool response.

    Args:
        entries: Extracted outline entries
        output_format: json, markdown or html
        config: Server config (TOC variant and threshold for html)

    Returns:
        Formatted outline. The html format is empty when the outline has
        fewer than config.toc_min_entries entries.
    """
    output_format = OutputFormat(output_format)
    if output_format is OutputFormat.MARKDOWN:
        return toc_to_markdown(entries)
    if output_format is OutputFormat.HTML:
        return render_toc(entries, config.toc_variant, config.toc_min_entries)
    return json.dumps(
        [entry.model_dump(mode="json") for entry in entries],
        ensure_ascii=False,
        indent=2,
    )


def outline_markdown_flow(
    text: str,
    output_format: OutputFormat | str,
    config: OutlineConfig,
) -> str:
    """Outline a markdown document given as text."""
    _, body = parse_front_matter(text)
    entries = extract_outline(split_blocks(body))
    return format_outline(entries, output_format, config)


def outline_post_flow(
    library: PostLibrary,
    post_id: str,
    output_format: OutputFormat | str,
    config: OutlineConfig,
) -> str:
    """Outline a post from the library."""
    entries = library.outline_post(post_id)
    logger.info(f"Outlined post '{post_id}': {len(entries)} headings")
    return format_outline(entries, output_format, config)


def render_post_flow(library: PostLibrary, post_id: str, config: OutlineConfig) -> str:
    """Render a library post to HTML: title, table of contents and body.

    Returns:
        HTML fragment. The table of contents is omitted for posts with
        fewer than config.toc_min_entries headings.
    """
    post = library.load_post(post_id)
    parts = []
    if post.metadata.title:
        parts.append(f"<h1>{escape(post.metadata.title)}</h1>")
    toc = render_toc(extract_outline(post.blocks), config.toc_variant, config.toc_min_entries)
    if toc:
        parts.append(toc)
    parts.append(render_blocks(post.blocks))
    return "\n".join(parts)


async def outline_url_flow(
    url: str,
    output_format: OutputFormat | str,
    config: OutlineConfig,
) -> str:
    """Fetch a remote markdown document and outline it."""
    text = await fetch_markdown(url, timeout=config.fetch_timeout)
    return outline_markdown_flow(text, output_format, config)


def format_post_list(library: PostLibrary) -> str:
    """List library posts with title and read time."""
    post_ids = library.list_posts()
    if not post_ids:
        return f"❌ No posts found in {library.posts_dir}!"

    lines = []
    for post_id in post_ids:
        try:
            post = library.load_post(post_id)
        except FrontMatterError as e:
            logger.warning(f"Skipping post '{post_id}': {e}")
            lines.append(f"• {post_id}: ⚠️ invalid front matter")
            continue
        except PostEncodingError as e:
            logger.warning(f"Skipping post '{post_id}': {e}")
            lines.append(f"• {post_id}: ⚠️ not valid UTF-8")
            continue
        title = post.metadata.title or post.filename
        lines.append(f"• {post_id}: {title} ({post.metadata.read_time})")
    return "**Available Posts:**\n" + "\n".join(lines)
