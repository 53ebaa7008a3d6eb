"""
markdown-toc: keeps a generated Table of Contents in sync with a Markdown
document's headings.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    markdown-toc insert README.md

Library Usage:
    from markdown_toc import TextDocument, update_toc

    document = TextDocument("# Intro\\n## Usage\\n")
    update_toc(document, allow_without_config=True)
    print(document.get_text())
"""

from .commands import insert_toc, insert_toc_config, on_did_create, on_did_open, on_will_save
from .config import ConfigError, TocSettings
from .document import Document, FileDocument, TextDocument
from .exceptions import DocumentError, NoActiveDocumentError, TocError
from .generator import generate_toc_entries, render_toc
from .models import DeleteEdit, Heading, InlineConfig, InsertEdit, TocBlock, TocEntry, UpdateOutcome
from .parser import FenceTracker, collect_headings, find_config_block_end, parse_inline_config
from .placer import find_toc_block, find_toc_end, find_toc_start, resolve_insertion_line
from .slugify import generate_slug
from .updater import update_toc

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "update_toc",
    "collect_headings",
    "generate_toc_entries",
    "render_toc",
    "generate_slug",
    "parse_inline_config",
    "find_config_block_end",
    "find_toc_start",
    "find_toc_end",
    "find_toc_block",
    "resolve_insertion_line",
    "FenceTracker",
    # Host integration
    "Document",
    "TextDocument",
    "FileDocument",
    "TocSettings",
    "insert_toc",
    "insert_toc_config",
    "on_will_save",
    "on_did_create",
    "on_did_open",
    # Data models
    "Heading",
    "InlineConfig",
    "InsertEdit",
    "DeleteEdit",
    "TocBlock",
    "TocEntry",
    "UpdateOutcome",
    # Exceptions
    "ConfigError",
    "DocumentError",
    "NoActiveDocumentError",
    "TocError",
    # Version
    "__version__",
]
