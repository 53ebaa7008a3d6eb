import pytest
from click.testing import CliRunner

from markdown_toc.document import TextDocument


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def make_document():
    """Builds an in-memory Markdown document from a list of lines."""

    def _make(lines: list[str], trailing_newline: bool = True) -> TextDocument:
        text = "\n".join(lines)
        if trailing_newline:
            text += "\n"
        return TextDocument(text)

    return _make
