"""Locating an existing TOC block and choosing where the new one goes."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .constants import BLANK_LINE_PATTERN, TOC_ENTRY_PATTERN, TOC_HEADING_PATTERN
from .models import InlineConfig, TocBlock, TocScanState
from .parser import parse_heading

logger = logging.getLogger(__name__)


def _is_blank(line: str) -> bool:
    return BLANK_LINE_PATTERN.match(line) is not None


def find_toc_start(lines: Sequence[str]) -> int:
    """Find the heading line of a previously generated TOC.

    Only a whole heading line reading ``Table of Contents`` (any level, any
    case) qualifies; prose that mentions the phrase does not.

    Returns:
        int: Zero-based index of the first TOC heading, or -1 when absent.

    Examples:
        find_toc_start(["# Intro", "## Table of Contents"])  # 1
        find_toc_start(["Table of Contents"])  # -1
    """
    for index, line in enumerate(lines):
        if TOC_HEADING_PATTERN.match(line):
            return index
    return -1


def _next_state(state: TocScanState, line: str | None) -> TocScanState:
    """Advance the TOC-end scanner by one line.

    `line` is None past the end of the document. Returns the state that
    consumes `line`, or DONE when `line` is not part of the block.
    """
    if line is None:
        return TocScanState.DONE

    if state in (TocScanState.FOUND_START, TocScanState.SKIPPING_BLANKS):
        if _is_blank(line):
            return TocScanState.SKIPPING_BLANKS
        state = TocScanState.CONSUMING_LIST

    if state is TocScanState.CONSUMING_LIST:
        if TOC_ENTRY_PATTERN.match(line):
            return TocScanState.CONSUMING_LIST
        return TocScanState.TRAILING_BLANK if _is_blank(line) else TocScanState.DONE

    return TocScanState.DONE


def find_toc_end(lines: Sequence[str], start: int) -> int:
    """Find the last line of the TOC block whose heading is at `start`.

    After the heading, consumes any blank lines, then the generated list items
    (``1. [title](#anchor)`` at any indentation), then at most one blank line.

    Args:
        lines: Document lines.
        start: Index returned by `find_toc_start`.

    Returns:
        int: Index of the last consumed line; equals `start` when nothing
            follows the heading.

    Examples:
        find_toc_end(["## Table of Contents", "", "1. [A](#a)", "", "## A"], 0)  # 3
        find_toc_end(["## Table of Contents", "## Next"], 0)  # 0
    """
    state = TocScanState.FOUND_START
    end = start

    while state is not TocScanState.DONE:
        index = end + 1
        line = lines[index] if index < len(lines) else None
        state = _next_state(state, line)
        if state is TocScanState.DONE:
            break
        end = index
        # A single trailing blank line closes the block.
        if state is TocScanState.TRAILING_BLANK:
            break

    return end


def find_toc_block(lines: Sequence[str]) -> TocBlock:
    """Locate the previously generated TOC block, if any.

    Returns:
        TocBlock: Inclusive line range, or `TocBlock.missing()`.
    """
    start = find_toc_start(lines)
    if start == -1:
        return TocBlock.missing()
    return TocBlock(start, find_toc_end(lines, start))


def find_heading_index(lines: Sequence[str], title: str) -> int:
    """Return the index of the first heading titled `title` (case-insensitive), or -1.

    Fenced code blocks are not taken into account here.
    """
    wanted = title.lower()
    for index, line in enumerate(lines):
        heading = parse_heading(line, index)
        if heading is not None and heading.title.lower() == wanted:
            return index
    return -1


def resolve_insertion_line(
    lines: Sequence[str], config: InlineConfig, config_end_line: int
) -> int:
    """Choose the line where the TOC is inserted.

    Defaults to the line after the config comment block, or the top of the
    document without one. When `config.insert_after_heading` names an existing
    heading, the TOC goes `insert_after_heading_offset` lines below that
    heading instead, never past the end of the document.

    Args:
        lines: Current document lines.
        config: Inline placement overrides.
        config_end_line: Result of `find_config_block_end` for the same lines.

    Returns:
        int: Zero-based target line, between 0 and ``len(lines)``.

    Examples:
        resolve_insertion_line(["<!-- toc:insertAfterHeading= -->", ""], InlineConfig(), 0)  # 1
    """
    target = config_end_line + 1 if config_end_line != -1 else 0

    if config.insert_after_heading:
        heading_index = find_heading_index(lines, config.insert_after_heading)
        if heading_index != -1:
            target = min(heading_index + 1 + config.insert_after_heading_offset, len(lines))
        else:
            logger.debug(
                "Heading %r not found; falling back to line %d",
                config.insert_after_heading,
                target,
            )

    return target
