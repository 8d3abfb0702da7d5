"""
Unit tests for the outline extractor.

Tests heading detection, heading text extraction, anchor id generation
and the ordering guarantees of extract_outline.
"""

import pytest

from scopegen_outline.models import HeadingLevel, OutlineEntry
from scopegen_outline.outline import (
    classify_heading,
    extract_outline,
    heading_id,
    heading_text,
)


def entry(id: str, text: str, level: int) -> OutlineEntry:
    return OutlineEntry(id=id, text=text, level=level)


class TestClassifyHeading:
    """Tests for heading detection."""

    def test_level_two(self):
        assert classify_heading("## A") is HeadingLevel.LEVEL2

    def test_level_three(self):
        """Three hashes must never be classified as level 2."""
        assert classify_heading("### A") is HeadingLevel.LEVEL3

    @pytest.mark.parametrize("block", [
        "",
        "plain text",
        "# Title",
        "#Heading",
        "##NoSpace",
        "###NoSpace",
        "#### Too deep",
        "####Too-deep",
        " ## Indented",
    ])
    def test_non_headings(self, block):
        assert classify_heading(block) is None


class TestHeadingText:
    """Tests for marker stripping."""

    def test_strips_marker_and_one_space(self):
        assert heading_text("## Getting Started", HeadingLevel.LEVEL2) == "Getting Started"
        assert heading_text("### Steps", HeadingLevel.LEVEL3) == "Steps"

    def test_keeps_extra_whitespace(self):
        """Only one space after the marker is removed."""
        assert heading_text("##  Spaced ", HeadingLevel.LEVEL2) == " Spaced "


class TestHeadingId:
    """Tests for anchor id generation."""

    def test_basic(self):
        assert heading_id("Getting Started") == "getting-started"

    def test_punctuation_removed(self):
        assert heading_id("FAQ's") == "faqs"
        assert heading_id("Step 1: Measure (twice), cut once.") == "step-1-measure-twice-cut-once"

    def test_whitespace_runs_collapse(self):
        assert heading_id("a  \t b") == "a-b"

    def test_trailing_whitespace_kept_as_hyphen(self):
        assert heading_id("Title ") == "title-"
        assert heading_id(" Title") == "-title"

    def test_hyphens_and_underscores_kept(self):
        assert heading_id("Pre-Bid snake_case") == "pre-bid-snake_case"

    def test_unicode_letters_lowercased(self):
        assert heading_id("Über Café") == "über-café"

    def test_non_ascii_punctuation_removed(self):
        assert heading_id("Costs — “Estimates”") == "costs--estimates"

    def test_empty(self):
        assert heading_id("") == ""


class TestExtractOutline:
    """Tests for extract_outline."""

    def test_mixed_document(self):
        blocks = [
            "## Getting Started",
            "Some body text.",
            "### Installation Steps",
            "More text",
            "## FAQ's",
        ]
        assert extract_outline(blocks) == [
            entry("getting-started", "Getting Started", 2),
            entry("installation-steps", "Installation Steps", 3),
            entry("faqs", "FAQ's", 2),
        ]

    def test_text_keeps_apostrophe(self):
        assert extract_outline(["## FAQ's"])[0].text == "FAQ's"

    def test_empty_input(self):
        assert extract_outline([]) == []

    def test_marker_only(self):
        assert extract_outline(["## "]) == [entry("", "", 2)]
        assert extract_outline(["### "]) == [entry("", "", 3)]

    def test_missing_space(self):
        assert extract_outline(["##NoSpace"]) == []

    def test_non_headings_excluded(self):
        assert extract_outline(["plain text", "#Heading", "####Too-deep"]) == []

    def test_trailing_whitespace_not_trimmed(self):
        assert extract_outline(["## Title "]) == [entry("title-", "Title ", 2)]

    def test_levels(self):
        assert extract_outline(["### A"])[0].level == 3
        assert extract_outline(["## A"])[0].level == 2
        assert extract_outline(["### A"])[0].level is HeadingLevel.LEVEL3

    def test_duplicate_ids_not_disambiguated(self):
        outline = extract_outline(["## Overview", "text", "## Overview"])
        assert [e.id for e in outline] == ["overview", "overview"]

    def test_order_preserved(self):
        blocks = ["## C", "x", "### B", "## A", "y", "### D"]
        assert [e.text for e in extract_outline(blocks)] == ["C", "B", "A", "D"]

    def test_length_bounds(self):
        blocks = ["## A", "text", "### B"]
        assert len(extract_outline(blocks)) == 2 < len(blocks)

        all_headings = ["## A", "### B", "## C"]
        assert len(extract_outline(all_headings)) == len(all_headings)

    def test_deterministic(self):
        assert extract_outline(["## Same Text"]) == extract_outline(["## Same Text"])

    def test_accepts_any_sequence(self):
        assert extract_outline(("## A", "b")) == [entry("a", "A", 2)]

    def test_serialization(self):
        outline = extract_outline(["### Installation Steps"])
        assert outline[0].model_dump(mode="json") == {
            "id": "installation-steps",
            "text": "Installation Steps",
            "level": 3,
        }

    def test_entries_are_immutable(self):
        outline_entry = extract_outline(["## A"])[0]
        with pytest.raises(Exception):
            outline_entry.text = "B"
