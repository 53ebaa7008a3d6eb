"""Table of contents generation for markdown files."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import INDENT, LIST_MARKER, TOC_TITLE
from .models import Heading, TocEntry
from .slugify import generate_slug


def generate_toc_entries(
    headings: Sequence[Heading], preserve_unicode: bool = False
) -> list[TocEntry]:
    """Build TOC entries from collected headings.

    Duplicate titles map to the same anchor; no numbering suffix is added.

    Args:
        headings: Eligible headings in document order.
        preserve_unicode: Forwarded to `generate_slug`.

    Returns:
        list[TocEntry]: One entry per heading, in order.

    Examples:
        generate_toc_entries([Heading(0, 2, "Usage")])
        # [TocEntry(level=2, title="Usage", anchor="usage")]
    """
    return [
        TocEntry(
            level=heading.level,
            title=heading.title,
            anchor=generate_slug(heading.title, preserve_unicode=preserve_unicode),
        )
        for heading in headings
    ]


def min_level(entries: Sequence[Heading | TocEntry]) -> int:
    """Return the smallest level present, or 1 when there are no entries."""
    return min((entry.level for entry in entries), default=1)


def render_toc_entry(entry: TocEntry, base_level: int) -> str:
    """Render one list item, indented four spaces per level below `base_level`.

    Examples:
        render_toc_entry(TocEntry(3, "Details", "details"), 2)
        # "    1. [Details](#details)"
    """
    indent = INDENT * max(entry.level - base_level, 0)
    return f"{indent}{LIST_MARKER} [{entry.title}](#{entry.anchor})"


def render_toc_heading(base_level: int) -> str:
    return f"{'#' * base_level} {TOC_TITLE}"


def render_toc(headings: Sequence[Heading], preserve_unicode: bool = False) -> str | None:
    """Render the complete TOC block for insertion.

    The block is the TOC heading at the shallowest heading level, a blank line,
    the list items, and a trailing blank line.

    Args:
        headings: Eligible headings in document order.
        preserve_unicode: Forwarded to `generate_slug`.

    Returns:
        str | None: Text ending in ``"\\n\\n"``, or None when `headings` is
            empty and nothing should be inserted.

    Examples:
        render_toc([Heading(0, 1, "Intro"), Heading(1, 2, "Usage")])
        # "# Table of Contents\\n\\n1. [Intro](#intro)\\n    1. [Usage](#usage)\\n\\n"
    """
    entries = generate_toc_entries(headings, preserve_unicode=preserve_unicode)
    if not entries:
        return None

    base_level = min_level(entries)
    lines = [render_toc_entry(entry, base_level) for entry in entries]

    return f"{render_toc_heading(base_level)}\n\n" + "\n".join(lines) + "\n\n"
