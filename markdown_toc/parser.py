"""Markdown scanning: fences, inline config comments, and headings."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import (
    CODE_FENCE_PATTERN,
    CONFIG_COMMENT_PATTERN,
    HEADING_PATTERN,
    INSERT_AFTER_HEADING_OFFSET_PATTERN,
    INSERT_AFTER_HEADING_PATTERN,
    LEADING_COMMENT_PATTERN,
    LINE_BREAK_PATTERN,
    TOC_TITLE,
)
from .models import ConfigBlockState, Heading, InlineConfig


class FenceTracker:
    """Classify lines as inside or outside fenced code blocks.

    Any line starting with optional whitespace followed by ```` ``` ```` or
    ``~~~`` toggles a single boolean, so the delimiter lines themselves count
    as inside. The two fence styles are not told apart. Create a new tracker
    for every scan.

    Examples:
        tracker = FenceTracker()
        [tracker(line) for line in ["a", "```", "# b", "```", "c"]]
        # [False, True, True, True, False]
    """

    def __init__(self) -> None:
        self.in_fence = False

    def is_inside_fence(self, line: str) -> bool:
        if CODE_FENCE_PATTERN.match(line):
            self.in_fence = not self.in_fence
            return True
        return self.in_fence

    __call__ = is_inside_fence


def parse_heading(line: str, line_index: int = -1) -> Heading | None:
    """Parse an ATX heading line.

    Args:
        line: Line to inspect, without its line ending.
        line_index: Zero-based index recorded on the result.

    Returns:
        Heading | None: The heading with its trimmed title, or None when the
            line is not a heading.

    Examples:
        parse_heading("## Usage ", 4)  # Heading(line_index=4, level=2, title="Usage")
        parse_heading("####### Too deep")  # None
    """
    match = HEADING_PATTERN.match(line)
    if not match:
        return None
    return Heading(line_index=line_index, level=len(match.group(1)), title=match.group(2).strip())


def parse_inline_config(lines: Sequence[str]) -> InlineConfig:
    """Read ``<!-- toc:... -->`` overrides from anywhere in the document.

    Every line is checked for both keys; a later comment overrides an earlier
    one for the same key. Missing keys keep their defaults (``""`` and ``0``).

    Args:
        lines: Document lines.

    Returns:
        InlineConfig: Resolved placement overrides.

    Examples:
        parse_inline_config(["<!-- toc:insertAfterHeading=Intro -->"])
        # InlineConfig(insert_after_heading="Intro", insert_after_heading_offset=0)
    """
    heading = ""
    offset = 0

    for line in lines:
        heading_match = INSERT_AFTER_HEADING_PATTERN.search(line)
        if heading_match:
            heading = heading_match.group(1).strip()

        offset_match = INSERT_AFTER_HEADING_OFFSET_PATTERN.search(line)
        if offset_match:
            offset = int(offset_match.group(1))

    return InlineConfig(insert_after_heading=heading, insert_after_heading_offset=offset)


def _is_config_comment(line: str) -> bool:
    return CONFIG_COMMENT_PATTERN.search(line) is not None


def _is_leading_comment(line: str) -> bool:
    return LEADING_COMMENT_PATTERN.match(line) is not None


def find_config_block_end(lines: Sequence[str]) -> int:
    """Locate the last line of the config comment block at the top of a document.

    Other HTML comments may precede the config comments. Once a config comment
    has been seen, the block ends at the first line that is not a config
    comment, even if that line is another HTML comment.

    Args:
        lines: Document lines.

    Returns:
        int: Zero-based index of the last config comment in the leading block,
            or -1 when the document does not start with one.

    Examples:
        find_config_block_end(["<!-- note -->", "<!-- toc:insertAfterHeading= -->", ""])  # 1
        find_config_block_end(["# Title", "<!-- toc:insertAfterHeading= -->"])  # -1
    """
    state = ConfigBlockState.LEADING_COMMENTS
    config_end_line = -1

    for index, line in enumerate(lines):
        if _is_config_comment(line):
            config_end_line = index
            state = ConfigBlockState.CONFIG_LINES
        elif state is ConfigBlockState.CONFIG_LINES or not _is_leading_comment(line):
            state = ConfigBlockState.DONE

        if state is ConfigBlockState.DONE:
            break

    return config_end_line


def is_toc_title(title: str) -> bool:
    return title.lower() == TOC_TITLE.lower()


def collect_headings(lines: Sequence[str], config: InlineConfig | None = None) -> list[Heading]:
    """Collect the headings that belong in the table of contents.

    Skips lines inside fenced code blocks (fence delimiters included), the
    heading named by `config.insert_after_heading`, and any existing
    ``Table of Contents`` heading.

    Args:
        lines: Document lines.
        config: Inline placement overrides; defaults to no overrides.

    Returns:
        list[Heading]: Eligible headings in document order.

    Examples:
        collect_headings(["# Intro", "```", "# not a heading", "```", "## Usage"])
    """
    config = config or InlineConfig()
    is_inside_fence = FenceTracker()
    headings: list[Heading] = []

    for line_index, line in enumerate(lines):
        if is_inside_fence(line):
            continue

        heading = parse_heading(line, line_index)
        if heading is None:
            continue

        if config.matches_heading(heading.title):
            continue

        if is_toc_title(heading.title):
            continue

        headings.append(heading)

    return headings


def split_lines(text: str) -> list[str]:
    """Split document text on ``\\n`` and ``\\r\\n`` alike.

    A trailing line break yields a final empty line, matching how editors count
    lines.

    Examples:
        split_lines("a\\r\\nb\\n")  # ["a", "b", ""]
    """
    return LINE_BREAK_PATTERN.split(text)
