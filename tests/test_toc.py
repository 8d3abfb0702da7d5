"""
Unit tests for table-of-contents rendering.
"""

from scopegen_outline.models import TocVariant
from scopegen_outline.outline import extract_outline
from scopegen_outline.toc import render_toc, toc_to_markdown

BLOCKS = [
    "## Getting Started",
    "Some body text.",
    "### Installation Steps",
    "## FAQ's",
]


class TestRenderToc:
    """Tests for render_toc."""

    def test_too_few_entries(self):
        assert render_toc(extract_outline(["## A", "## B"])) == ""

    def test_min_entries_override(self):
        assert render_toc(extract_outline(["## A"]), min_entries=1) != ""
        assert render_toc([], min_entries=0) != ""

    def test_inline_variant(self):
        html = render_toc(extract_outline(BLOCKS))
        assert html.startswith('<nav class="toc toc-inline">')
        assert "<h4>Table of Contents</h4>" in html
        assert (
            '<li style="padding-left: 0px"><a href="#getting-started">'
            '<span class="toc-index">01</span> Getting Started</a></li>'
        ) in html
        assert (
            '<li style="padding-left: 16px"><a href="#installation-steps">'
            '<span class="toc-index">02</span> Installation Steps</a></li>'
        ) in html
        assert '<a href="#faqs"><span class="toc-index">03</span> FAQ&#x27;s</a>' in html

    def test_sidebar_variant(self):
        html = render_toc(extract_outline(BLOCKS), variant=TocVariant.SIDEBAR)
        assert html.startswith('<nav class="toc toc-sidebar">')
        assert "<h4>On this page</h4>" in html
        assert "toc-index" not in html
        assert (
            '<li style="padding-left: 12px"><a href="#installation-steps">'
            "Installation Steps</a></li>"
        ) in html

    def test_variant_as_string(self):
        html = render_toc(extract_outline(BLOCKS), variant="sidebar")
        assert "On this page" in html


class TestTocToMarkdown:
    """Tests for toc_to_markdown."""

    def test_nested_list(self):
        assert toc_to_markdown(extract_outline(BLOCKS)) == (
            "- [Getting Started](#getting-started)\n"
            "  - [Installation Steps](#installation-steps)\n"
            "- [FAQ's](#faqs)"
        )

    def test_empty(self):
        assert toc_to_markdown([]) == ""
