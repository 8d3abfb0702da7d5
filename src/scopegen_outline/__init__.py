"""
ScopeGen Outline - table-of-contents extraction for ScopeGen blog posts.
"""

from .models import Block, HeadingLevel, OutlineEntry
from .outline import extract_outline, heading_id

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("scopegen-outline")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable
__all__ = ["Block", "HeadingLevel", "OutlineEntry", "extract_outline", "heading_id"]
