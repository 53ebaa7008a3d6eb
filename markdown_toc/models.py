"""Data models for markdown-toc."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ConfigBlockState(Enum):
    """States of the leading config-block scanner.

    Attributes:
        LEADING_COMMENTS: No config comment seen yet; plain comments are skipped.
        CONFIG_LINES: At least one config comment recorded.
        DONE: Scan finished.
    """

    LEADING_COMMENTS = auto()
    CONFIG_LINES = auto()
    DONE = auto()


class TocScanState(Enum):
    """States used while locating a previously generated TOC block.

    Attributes:
        SEARCHING_START: Looking for the ``Table of Contents`` heading.
        FOUND_START: Heading found; nothing consumed after it yet.
        SKIPPING_BLANKS: Consuming blank lines between heading and list.
        CONSUMING_LIST: Consuming generated list items.
        TRAILING_BLANK: Consuming the single blank line after the list.
        DONE: Block boundaries resolved.
    """

    SEARCHING_START = auto()
    FOUND_START = auto()
    SKIPPING_BLANKS = auto()
    CONSUMING_LIST = auto()
    TRAILING_BLANK = auto()
    DONE = auto()


class UpdateOutcome(Enum):
    """Result of a TOC update request."""

    UPDATED = auto()
    SKIPPED_NO_CONFIG = auto()
    SKIPPED_NO_HEADINGS = auto()
    SKIPPED_BUSY = auto()


@dataclass(frozen=True)
class InlineConfig:
    """Placement overrides read from ``<!-- toc:... -->`` comments.

    Attributes:
        insert_after_heading: Title of the heading the TOC follows; empty when unset.
        insert_after_heading_offset: Lines to skip after that heading.
    """

    insert_after_heading: str = ""
    insert_after_heading_offset: int = 0

    def matches_heading(self, title: str) -> bool:
        """Return True when `title` names the configured anchor heading."""
        return bool(self.insert_after_heading) and (
            title.strip().lower() == self.insert_after_heading.lower()
        )


@dataclass(frozen=True)
class Heading:
    line_index: int
    level: int
    title: str


@dataclass(frozen=True)
class TocEntry:
    level: int
    title: str
    anchor: str


@dataclass(frozen=True)
class TocBlock:
    """Line range of a previously generated TOC, both ends inclusive.

    Attributes:
        start: Zero-based index of the TOC heading, or -1 when absent.
        end: Zero-based index of the last line of the block, or -1 when absent.
    """

    start: int
    end: int

    @classmethod
    def missing(cls) -> TocBlock:
        return cls(-1, -1)

    @property
    def found(self) -> bool:
        return self.start != -1 and self.end != -1


@dataclass(frozen=True)
class InsertEdit:
    """Insert `text` at (`line`, `column`)."""

    line: int
    column: int
    text: str


@dataclass(frozen=True)
class DeleteEdit:
    """Delete whole lines from `start_line` up to, but excluding, `end_line`."""

    start_line: int
    end_line: int
