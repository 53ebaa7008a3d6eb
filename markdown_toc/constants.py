"""Constants used across the markdown-toc package."""

from __future__ import annotations

import re

# Markdown patterns
HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.*)$")
CODE_FENCE_PATTERN = re.compile(r"^\s*(```|~~~)")
LEADING_COMMENT_PATTERN = re.compile(r"^\s*<!--")

# Inline config comments
INSERT_AFTER_HEADING_PATTERN = re.compile(
    r"<!--\s*toc:insertAfterHeading\s*=(.+?)\s*-->", re.IGNORECASE
)
INSERT_AFTER_HEADING_OFFSET_PATTERN = re.compile(
    r"<!--\s*toc:insertAfterHeadingOffset\s*=\s*(\d+)\s*-->", re.IGNORECASE
)
# Prefix shared by both config keys; marks a line as part of the config block.
CONFIG_COMMENT_PATTERN = re.compile(r"<!--\s*toc:insertAfterHeading", re.IGNORECASE)

DEFAULT_CONFIG_COMMENTS = (
    "<!-- toc:insertAfterHeading= -->\n"
    "<!-- toc:insertAfterHeadingOffset=0 -->\n"
)

# Generated TOC block
TOC_TITLE = "Table of Contents"
TOC_HEADING_PATTERN = re.compile(r"^#{1,6}\s+Table of Contents\s*$", re.IGNORECASE)
TOC_ENTRY_PATTERN = re.compile(r"^\s*1\.\s+\[.*\]\(#.*\)\s*$")
BLANK_LINE_PATTERN = re.compile(r"^\s*$")
INDENT = "    "
LIST_MARKER = "1."

# Host
LINE_BREAK_PATTERN = re.compile(r"\r?\n")
MARKDOWN_LANGUAGE_ID = "markdown"
MARKDOWN_EXTENSIONS = (".md", ".markdown")
