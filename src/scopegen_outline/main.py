"""
ScopeGen Outline MCP Server
Table-of-contents extraction and rendering for ScopeGen blog posts, built with FastMCP.
"""

import logging
from typing import Annotated

from dotenv import load_dotenv
from fastmcp import FastMCP
from pydantic import Field

from .config import OutlineConfig
from .exceptions import FetchError, FrontMatterError, PostEncodingError, PostNotFoundError
from .library import PostLibrary
from .outline import extract_outline as _extract_outline
from .tools import (
    OutputFormat,
    format_outline,
    format_post_list,
    outline_markdown_flow,
    outline_post_flow,
    outline_url_flow,
    render_post_flow,
)

logger = logging.getLogger("scopegen-outline")

if not load_dotenv():
    logger.debug(".env file not found, using environment variables only")

config = OutlineConfig.from_env()

logging.basicConfig(
    level=config.log_level,
    )

posts_dir = config.posts_dir.resolve()
logger.debug(f"📂 Posts path: {posts_dir}")

library = PostLibrary(posts_dir, words_per_minute=config.words_per_minute)
library.ensure_directories()
logger.debug(f"📚 Post library initialized ({len(library.list_posts())} posts)")

mcp = FastMCP(
    name="scopegen-outline"
)

logger.debug("✅ Server initialized, registering tools")


def _post_not_found_message(error: PostNotFoundError) -> str:
    if error.available:
        post_list = "\n".join(f"• {p}" for p in error.available)
        return f"❌ Post '{error.post_id}' not found.\n\n**Available posts:**\n{post_list}"
    return f"❌ Post '{error.post_id}' not found. No posts exist."


# ----------------------------------------------------------------------
# Tools
# ----------------------------------------------------------------------

@mcp.tool
def extract_outline(
    blocks: Annotated[list[str], Field(description="Post blocks in document order, e.g. ['## Intro', 'Body text', '### Details']")],
) -> str:
    """Extract table-of-contents entries from post blocks.

    Blocks starting with '## ' become level 2 entries and blocks starting with
    '### ' become level 3 entries. Every other block is ignored.
    Returns a JSON list of {id, text, level} objects in document order.
    """
    entries = _extract_outline(blocks)
    return format_outline(entries, OutputFormat.JSON, config)

@mcp.tool
def outline_markdown(
    text: Annotated[str, Field(description="Markdown document, optionally with YAML front matter")],
    output_format: Annotated[OutputFormat, Field(description="Output format: json, markdown or html")] = OutputFormat.JSON,
) -> str:
    """Split a markdown document into blocks and extract its outline."""
    try:
        return outline_markdown_flow(text, output_format, config)
    except FrontMatterError as e:
        return f"❌ {e}"

@mcp.tool
def list_posts() -> str:
    """List all posts in the post library."""
    return format_post_list(library)

@mcp.tool
def outline_post(
    post_id: Annotated[str, Field(description="Post ID, as listed by list_posts")],
    output_format: Annotated[OutputFormat, Field(description="Output format: json, markdown or html")] = OutputFormat.JSON,
) -> str:
    """Extract the outline of a post in the library."""
    try:
        return outline_post_flow(library, post_id, output_format, config)
    except PostNotFoundError as e:
        return _post_not_found_message(e)
    except (FrontMatterError, PostEncodingError) as e:
        return f"❌ {e}"

@mcp.tool
def render_post(
    post_id: Annotated[str, Field(description="Post ID, as listed by list_posts")],
) -> str:
    """Render a post to HTML with heading anchors and a table of contents."""
    try:
        return render_post_flow(library, post_id, config)
    except PostNotFoundError as e:
        return _post_not_found_message(e)
    except (FrontMatterError, PostEncodingError) as e:
        return f"❌ {e}"

@mcp.tool
async def outline_url(
    url: Annotated[str, Field(description="http(s) URL of a markdown document")],
    output_format: Annotated[OutputFormat, Field(description="Output format: json, markdown or html")] = OutputFormat.JSON,
) -> str:
    """Fetch a remote markdown document and extract its outline."""
    try:
        return await outline_url_flow(url, output_format, config)
    except (FetchError, FrontMatterError) as e:
        logger.warning(f"outline_url failed for {url}: {e}")
        return f"❌ {e}"


def main() -> None:
    """Main entry point for the ScopeGen outline server."""
    mcp.run()

if __name__ == "__main__":
    main()
