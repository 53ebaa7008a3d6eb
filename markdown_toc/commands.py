"""Entry points a host wires to its commands and document events."""

from __future__ import annotations

import logging

from .config import TocSettings
from .constants import DEFAULT_CONFIG_COMMENTS
from .document import Document
from .exceptions import NoActiveDocumentError
from .models import InsertEdit, UpdateOutcome
from .updater import update_toc

logger = logging.getLogger(__name__)


def _require_markdown(document: Document | None) -> Document:
    if document is None or not document.is_markdown:
        raise NoActiveDocumentError()
    return document


def insert_toc(document: Document | None, settings: TocSettings | None = None) -> UpdateOutcome:
    """Insert or refresh the TOC on explicit request.

    Works even when the document has no config comments.

    Raises:
        NoActiveDocumentError: If `document` is missing or not Markdown.
    """
    document = _require_markdown(document)
    settings = settings or TocSettings()
    return update_toc(
        document, allow_without_config=True, preserve_unicode=settings.preserve_unicode
    )


def insert_toc_config(document: Document | None) -> None:
    """Prepend the default config comments and a blank line.

    Raises:
        NoActiveDocumentError: If `document` is missing or not Markdown.

    Examples:
        insert_toc_config(TextDocument("Original content\\n"))
        # "<!-- toc:insertAfterHeading= -->\\n<!-- toc:insertAfterHeadingOffset=0 -->\\n\\nOriginal content\\n"
    """
    document = _require_markdown(document)
    document.apply_edit(InsertEdit(0, 0, DEFAULT_CONFIG_COMMENTS + "\n"))


def on_will_save(document: Document, settings: TocSettings) -> UpdateOutcome | None:
    """Refresh the TOC before `document` is written.

    Returns:
        UpdateOutcome | None: Outcome of the update, or None when the document
            is not Markdown or ``autoUpdateOnSave`` is disabled.
    """
    if not document.is_markdown:
        return None
    if not settings.get_flag("autoUpdateOnSave"):
        logger.debug("autoUpdateOnSave disabled; skipping TOC update")
        return None
    return update_toc(
        document, allow_without_config=False, preserve_unicode=settings.preserve_unicode
    )


def _insert_config_if_blank(document: Document, settings: TocSettings) -> bool:
    if not settings.get_flag("insertConfigOnCreate"):
        return False
    if not document.is_markdown:
        return False
    if document.get_text().strip():
        return False

    insert_toc_config(document)
    return True


def on_did_create(document: Document, settings: TocSettings) -> bool:
    """Seed a newly created, empty Markdown file with the default config.

    Returns:
        bool: True when the config comments were inserted.
    """
    return _insert_config_if_blank(document, settings)


def on_did_open(document: Document, settings: TocSettings) -> bool:
    """Seed a brand-new untitled, empty Markdown buffer with the default config.

    Returns:
        bool: True when the config comments were inserted.
    """
    if not document.is_untitled:
        return False
    return _insert_config_if_blank(document, settings)
