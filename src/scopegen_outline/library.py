"""
Markdown post library.

Posts are markdown files in a single directory, each optionally starting
with a YAML front matter block:

    ---
    title: Writing Better Scopes
    readTime: 6 min read
    ---
    ## Why scopes matter
    ...

Loaded posts are cached and re-read when the file hash changes.
"""

import logging
import math
from collections.abc import Sequence
from hashlib import sha256
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .blocks import count_words, split_blocks
from .exceptions import FrontMatterError, PostEncodingError, PostNotFoundError
from .models import OutlineEntry, Post, PostMetadata
from .outline import extract_outline

logger = logging.getLogger("scopegen-outline")

POST_EXTENSIONS = (".md", ".markdown")
FRONT_MATTER_DELIMITER = "---"


def generate_post_id(filename: str) -> str:
    """Generate a post ID from a filename.

    Args:
        filename: Original filename (e.g., "Writing_Better Scopes.md")

    Returns:
        Normalized post ID (e.g., "writing-better-scopes")
    """
    stem = Path(filename).stem
    normalized = stem.lower().replace(" ", "-").replace("_", "-")
    while "--" in normalized:
        normalized = normalized.replace("--", "-")
    return normalized.strip("-")


def compute_file_hash(file_path: Path) -> str:
    """Compute SHA-256 hash of a file for change detection.

    Args:
        file_path: Path to the file

    Returns:
        Hex string of SHA-256 hash
    """
    hasher = sha256()
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


def parse_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split YAML front matter from a markdown document.

    Args:
        text: Full document text

    Returns:
        (front matter mapping, remaining body). The mapping is empty when
        the document has no front matter.

    Raises:
        FrontMatterError: If the front matter is unterminated, is not valid
            YAML, or is not a mapping
    """
    lines = text.replace("\r\n", "\n").split("\n")
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return {}, text

    for end, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONT_MATTER_DELIMITER:
            break
    else:
        raise FrontMatterError("Front matter is not terminated by '---'")

    raw = "\n".join(lines[1:end])
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid YAML in front matter: {e}") from None

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"Front matter must be a mapping, got {type(data).__name__}"
        )
    return data, "\n".join(lines[end + 1:])


def estimate_read_time(blocks: Sequence[str], words_per_minute: int = 200) -> str:
    """Estimate a reading time label such as "4 min read"."""
    minutes = max(1, math.ceil(count_words(blocks) / words_per_minute))
    return f"{minutes} min read"


class PostLibrary:
    """Loads markdown posts from a directory.

    Attributes:
        posts_dir: Directory containing the post files
        words_per_minute: Reading speed for read time estimates
    """

    def __init__(self, posts_dir: Path, words_per_minute: int = 200):
        """Initialize the PostLibrary.

        Args:
            posts_dir: Directory containing markdown posts
            words_per_minute: Reading speed for read time estimates
        """
        self.posts_dir = Path(posts_dir)
        self.words_per_minute = words_per_minute

        # Cache of loaded posts, keyed by post ID
        self._post_cache: dict[str, Post] = {}

    def ensure_directories(self) -> None:
        """Create the posts directory if it doesn't exist."""
        self.posts_dir.mkdir(parents=True, exist_ok=True)

    def _scan(self) -> dict[str, Path]:
        """Map post IDs to their files."""
        if not self.posts_dir.is_dir():
            return {}

        files: dict[str, Path] = {}
        for path in sorted(self.posts_dir.iterdir()):
            if not path.is_file() or path.suffix.lower() not in POST_EXTENSIONS:
                continue
            post_id = generate_post_id(path.name)
            if post_id in files:
                logger.warning(
                    f"Duplicate post ID '{post_id}': {path.name} shadows {files[post_id].name}"
                )
            files[post_id] = path
        return files

    def list_posts(self) -> list[str]:
        """List the IDs of all posts in the library, sorted."""
        return sorted(self._scan())

    def load_post(self, post_id: str) -> Post:
        """Load a post by ID.

        Args:
            post_id: Post ID as returned by list_posts()

        Returns:
            The parsed post

        Raises:
            PostNotFoundError: If no file matches the ID
            FrontMatterError: If the post's front matter is invalid
            PostEncodingError: If the post file is not valid UTF-8
        """
        files = self._scan()
        path = files.get(post_id)
        if path is None:
            raise PostNotFoundError(post_id, available=sorted(files))

        file_hash = compute_file_hash(path)
        cached = self._post_cache.get(post_id)
        if cached is not None and cached.file_hash == file_hash:
            return cached

        logger.debug(f"📄 Loading post '{post_id}' from {path.name}")
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise PostEncodingError(
                f"{path.name} is not valid UTF-8: {e.reason} at byte {e.start}",
                details={"post_id": post_id},
            ) from None

        front_matter, body = parse_front_matter(text)
        try:
            metadata = PostMetadata.model_validate(front_matter)
        except ValidationError as e:
            raise FrontMatterError(
                f"Invalid front matter in {path.name}: {e}",
                details={"post_id": post_id},
            ) from None

        blocks = split_blocks(body)
        if metadata.read_time is None:
            metadata.read_time = estimate_read_time(blocks, self.words_per_minute)

        post = Post(
            id=post_id,
            filename=path.name,
            file_hash=file_hash,
            metadata=metadata,
            blocks=blocks,
        )
        self._post_cache[post_id] = post
        logger.debug(f"📄 Loaded post '{post_id}' ({len(blocks)} blocks)")
        return post

    def outline_post(self, post_id: str) -> list[OutlineEntry]:
        """Extract the outline of a post by ID."""
        return extract_outline(self.load_post(post_id).blocks)
