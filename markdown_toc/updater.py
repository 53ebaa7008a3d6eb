"""Replace-or-insert update of the generated TOC block."""

from __future__ import annotations

import logging
import threading

from .document import Document
from .generator import render_toc
from .models import DeleteEdit, InsertEdit, UpdateOutcome
from .parser import collect_headings, find_config_block_end, parse_inline_config
from .placer import find_toc_block, resolve_insertion_line

logger = logging.getLogger(__name__)

# Held for the whole duration of an update; a second request is dropped.
_update_lock = threading.Lock()


def is_update_in_progress() -> bool:
    return _update_lock.locked()


def update_toc(
    document: Document, allow_without_config: bool = False, preserve_unicode: bool = False
) -> UpdateOutcome:
    """Regenerate the TOC of `document` in place.

    Removes the previously generated TOC block, if any, then inserts a fresh
    one at the resolved insertion line. The insertion line is recomputed from
    the document text after the removal, since the removal shifts every later
    line.

    Only one update runs at a time per process. A request made while another
    update holds the lock returns `UpdateOutcome.SKIPPED_BUSY` without
    touching the document.

    Args:
        document: Document to update.
        allow_without_config: True for manual invocations. When False, the
            update only runs if the document starts with a config comment block
            or sets ``toc:insertAfterHeading``.
        preserve_unicode: Keep Unicode word characters in anchors.

    Returns:
        UpdateOutcome: What the update did.

    Examples:
        document = TextDocument("# Intro\\n## Usage\\n")
        update_toc(document, allow_without_config=True)  # UpdateOutcome.UPDATED
    """
    if not _update_lock.acquire(blocking=False):
        logger.debug("TOC update already in progress; request dropped")
        return UpdateOutcome.SKIPPED_BUSY

    try:
        return _update_toc(document, allow_without_config, preserve_unicode)
    finally:
        _update_lock.release()


def _update_toc(
    document: Document, allow_without_config: bool, preserve_unicode: bool
) -> UpdateOutcome:
    lines = document.read_lines()
    config = parse_inline_config(lines)
    config_end_line = find_config_block_end(lines)

    if not allow_without_config and config_end_line == -1 and not config.insert_after_heading:
        logger.debug("No TOC config comments found; automatic update skipped")
        return UpdateOutcome.SKIPPED_NO_CONFIG

    headings = collect_headings(lines, config)
    toc_text = render_toc(headings, preserve_unicode=preserve_unicode)
    if toc_text is None:
        logger.debug("No headings eligible for the TOC; nothing to insert")
        return UpdateOutcome.SKIPPED_NO_HEADINGS

    old_block = find_toc_block(lines)
    if old_block.found:
        logger.debug("Removing previous TOC at lines %d-%d", old_block.start, old_block.end)
        document.apply_edit(DeleteEdit(old_block.start, old_block.end + 1))

    # Line numbers computed above are stale once the old block is gone.
    lines = document.read_lines()
    target_line = resolve_insertion_line(lines, config, find_config_block_end(lines))

    # Past the last line of a file without a final newline, the TOC would be
    # glued onto that line.
    if target_line >= document.line_count and lines[-1]:
        toc_text = "\n" + toc_text

    document.apply_edit(InsertEdit(target_line, 0, toc_text))
    logger.info("Inserted TOC with %d entries at line %d", len(headings), target_line)
    return UpdateOutcome.UPDATED
