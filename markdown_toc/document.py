"""Documents the TOC updater reads from and edits."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from .config import TocSettings
from .constants import LINE_BREAK_PATTERN, MARKDOWN_LANGUAGE_ID
from .exceptions import DocumentError
from .filesystem import (
    collect_file_stat,
    enforce_file_size,
    ensure_file_unchanged,
    get_max_file_size,
    is_markdown_path,
    read_text,
    write_text_atomic,
)
from .models import DeleteEdit, InsertEdit
from .parser import split_lines

logger = logging.getLogger(__name__)

Edit = InsertEdit | DeleteEdit


class Document(ABC):
    """Minimal editor document interface used by the TOC commands.

    Attributes:
        language_id: Language of the document; only ``"markdown"`` is eligible.
        is_untitled: Whether the document has never been saved.
    """

    language_id: str = MARKDOWN_LANGUAGE_ID
    is_untitled: bool = False

    @abstractmethod
    def get_text(self) -> str:
        """Return the full document text."""

    @abstractmethod
    def apply_edit(self, edit: Edit) -> None:
        """Apply one line-addressed edit; it is visible to the next read."""

    def read_lines(self) -> list[str]:
        return split_lines(self.get_text())

    @property
    def line_count(self) -> int:
        return len(self.read_lines())

    @property
    def is_markdown(self) -> bool:
        return self.language_id == MARKDOWN_LANGUAGE_ID


class TextDocument(Document):
    """In-memory document.

    Positions follow editor semantics: a line past the last line addresses the
    end of the text, and a column past the end of a line addresses the end of
    that line. Inserted ``\\n`` line breaks are converted to the document's line
    ending (``\\r\\n`` as soon as the text contains one).

    Examples:
        doc = TextDocument("# Title\\n")
        doc.apply_edit(InsertEdit(0, 0, "<!-- note -->\\n"))
        doc.get_text()  # "<!-- note -->\\n# Title\\n"
    """

    def __init__(
        self,
        text: str = "",
        language_id: str = MARKDOWN_LANGUAGE_ID,
        is_untitled: bool = True,
    ):
        self._text = text
        self.language_id = language_id
        self.is_untitled = is_untitled

    @property
    def eol(self) -> str:
        return "\r\n" if "\r\n" in self._text else "\n"

    def get_text(self) -> str:
        return self._text

    def _line_starts(self) -> list[int]:
        return [0, *(match.end() for match in LINE_BREAK_PATTERN.finditer(self._text))]

    def offset_at(self, line: int, column: int) -> int:
        """Convert a (line, column) position into a character offset."""
        starts = self._line_starts()
        if line < 0:
            return 0
        if line >= len(starts):
            return len(self._text)

        line_start = starts[line]
        if line + 1 < len(starts):
            line_end = LINE_BREAK_PATTERN.search(self._text, line_start).start()
        else:
            line_end = len(self._text)
        return min(line_start + max(column, 0), line_end)

    def apply_edit(self, edit: Edit) -> None:
        if isinstance(edit, InsertEdit):
            offset = self.offset_at(edit.line, edit.column)
            text = edit.text.replace("\r\n", "\n")
            if self.eol != "\n":
                text = text.replace("\n", self.eol)
            self._text = self._text[:offset] + text + self._text[offset:]
        elif isinstance(edit, DeleteEdit):
            start = self.offset_at(edit.start_line, 0)
            end = self.offset_at(edit.end_line, 0)
            self._text = self._text[:start] + self._text[max(start, end):]
        else:
            raise TypeError(f"Unsupported edit: {edit!r}")


class FileDocument(Document):
    """Markdown file loaded into an in-memory buffer.

    Edits only touch the buffer; `save` writes it back atomically, refusing
    when the file changed on disk since it was loaded.

    Args:
        path: Absolute path to the file.
        settings: Host settings; supplies the file size limit.

    Raises:
        DocumentError: If the file cannot be read or exceeds the size limit.

    Examples:
        document = FileDocument(Path("README.md"))
        insert_toc(document)
        document.save()
    """

    def __init__(self, path: Path, settings: TocSettings | None = None):
        settings = settings or TocSettings()
        self.path = path
        self.language_id = MARKDOWN_LANGUAGE_ID if is_markdown_path(path) else path.suffix
        self.is_untitled = False

        try:
            max_file_size = get_max_file_size(default=settings.max_file_size)
            self._stat = collect_file_stat(path)
            enforce_file_size(self._stat, max_file_size, path)
            text = read_text(path)
        except (IOError, ValueError) as error:
            raise DocumentError(str(error)) from error

        self._buffer = TextDocument(text, language_id=self.language_id, is_untitled=False)
        self._saved_text = text

    @property
    def is_dirty(self) -> bool:
        return self.get_text() != self._saved_text

    def get_text(self) -> str:
        return self._buffer.get_text()

    def apply_edit(self, edit: Edit) -> None:
        self._buffer.apply_edit(edit)

    def save(self) -> bool:
        """Write pending edits back to disk.

        Returns:
            bool: True when the file was written, False when nothing changed.

        Raises:
            DocumentError: If the file changed on disk or cannot be replaced.
        """
        if not self.is_dirty:
            logger.debug("%s has no pending edits", self.path)
            return False

        try:
            ensure_file_unchanged(self._stat, collect_file_stat(self.path), self.path)
            write_text_atomic(self.path, self.get_text())
            self._stat = collect_file_stat(self.path)
        except OSError as error:
            raise DocumentError(str(error)) from error

        self._saved_text = self.get_text()
        logger.info("Saved %s", self.path)
        return True
