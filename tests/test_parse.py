from __future__ import annotations

import pytest

from markdown_toc.models import Heading, InlineConfig
from markdown_toc.parser import (
    collect_headings,
    parse_heading,
    parse_inline_config,
    split_lines,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("# Title", Heading(-1, 1, "Title")),
        ("###### Deepest", Heading(-1, 6, "Deepest")),
        ("##\tTabbed  ", Heading(-1, 2, "Tabbed")),
        ("#   Spaced out   ", Heading(-1, 1, "Spaced out")),
    ],
)
def test_parse_heading_matches_atx_headings(line: str, expected: Heading):
    assert parse_heading(line) == expected


@pytest.mark.parametrize(
    "line",
    ["####### Seven", "#NoSpace", " # indented", "plain text", ""],
)
def test_parse_heading_rejects_non_headings(line: str):
    assert parse_heading(line) is None


def test_parse_heading_records_line_index():
    assert parse_heading("## Usage", 7) == Heading(7, 2, "Usage")


def test_parse_inline_config_defaults():
    assert parse_inline_config(["# Title", "text"]) == InlineConfig()


def test_parse_inline_config_reads_both_keys():
    config = parse_inline_config(
        [
            "<!-- toc:insertAfterHeading=Introduction -->",
            "<!-- toc:insertAfterHeadingOffset=3 -->",
        ]
    )

    assert config == InlineConfig(insert_after_heading="Introduction", insert_after_heading_offset=3)


def test_parse_inline_config_is_case_and_whitespace_tolerant():
    config = parse_inline_config(
        [
            "<!--TOC:InsertAfterHeading = Getting Started   -->",
            "<!--   toc:insertafterheadingoffset =  2-->",
        ]
    )

    assert config.insert_after_heading == "Getting Started"
    assert config.insert_after_heading_offset == 2


def test_parse_inline_config_last_match_wins():
    config = parse_inline_config(
        [
            "<!-- toc:insertAfterHeading=First -->",
            "<!-- toc:insertAfterHeadingOffset=1 -->",
            "# Body",
            "<!-- toc:insertAfterHeading=Second -->",
            "<!-- toc:insertAfterHeadingOffset=4 -->",
        ]
    )

    assert config == InlineConfig(insert_after_heading="Second", insert_after_heading_offset=4)


def test_parse_inline_config_empty_heading_value():
    config = parse_inline_config(["<!-- toc:insertAfterHeading= -->"])

    assert config.insert_after_heading == ""


def test_parse_inline_config_bare_heading_comment_keeps_earlier_value():
    config = parse_inline_config(
        ["<!-- toc:insertAfterHeading=Intro -->", "<!-- toc:insertAfterHeading=-->"]
    )

    assert config.insert_after_heading == "Intro"


def test_parse_inline_config_ignores_non_numeric_offset():
    config = parse_inline_config(
        ["<!-- toc:insertAfterHeadingOffset=2 -->", "<!-- toc:insertAfterHeadingOffset=-1 -->"]
    )

    assert config.insert_after_heading_offset == 2


def test_offset_comment_does_not_set_heading():
    config = parse_inline_config(["<!-- toc:insertAfterHeadingOffset=5 -->"])

    assert config.insert_after_heading == ""
    assert config.insert_after_heading_offset == 5


def test_collect_headings_in_document_order():
    headings = collect_headings(["# Intro", "text", "## Usage", "### Details"])

    assert headings == [
        Heading(0, 1, "Intro"),
        Heading(2, 2, "Usage"),
        Heading(3, 3, "Details"),
    ]


def test_collect_headings_skips_fenced_code():
    lines = [
        "## Visible",
        "```bash",
        "# comment in code",
        "```",
        "~~~",
        "## Hidden",
        "~~~",
        "## Also Visible",
    ]

    assert [heading.title for heading in collect_headings(lines)] == ["Visible", "Also Visible"]


def test_collect_headings_unclosed_fence_hides_rest_of_document():
    lines = ["## Before", "```", "## After"]

    assert [heading.title for heading in collect_headings(lines)] == ["Before"]


def test_collect_headings_skips_configured_anchor_heading():
    config = InlineConfig(insert_after_heading="introduction")
    lines = ["# Introduction", "## Usage"]

    assert [heading.title for heading in collect_headings(lines, config)] == ["Usage"]


def test_collect_headings_skips_existing_toc_heading():
    lines = ["## TABLE OF CONTENTS", "## Table of Contents  ", "## Tables of Contents"]

    assert [heading.title for heading in collect_headings(lines)] == ["Tables of Contents"]


def test_collect_headings_keeps_duplicates():
    lines = ["## Usage", "## Usage"]

    assert len(collect_headings(lines)) == 2


def test_split_lines_handles_mixed_line_endings():
    assert split_lines("a\r\nb\nc") == ["a", "b", "c"]
    assert split_lines("a\n") == ["a", ""]
    assert split_lines("") == [""]
