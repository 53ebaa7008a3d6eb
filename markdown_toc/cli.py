"""
Keeps the table of contents of a Markdown file in sync with its headings.

The subcommands mirror the editor integration: `insert` is the manual command,
`save` runs the pre-save hook, `init-config` inserts the default config
comments, and `new` creates a file the way the file-creation hook does.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from .commands import insert_toc, insert_toc_config, on_did_create, on_will_save
from .config import ConfigError, TocSettings, build_config
from .document import FileDocument
from .exceptions import NoActiveDocumentError, TocError
from .filesystem import normalize_filepath

__all__ = ["cli"]


def _build_settings(ctx: click.Context, filepath: Path, **overrides: object) -> TocSettings:
    try:
        return build_config(
            filepath.parent, preserve_unicode=ctx.obj["preserve_unicode"], **overrides
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error


def _resolve(raw_path: str, must_exist: bool = True) -> Path:
    base_dir = Path.cwd().resolve()
    try:
        return normalize_filepath(raw_path, base_dir, must_exist=must_exist)
    except ValueError as error:
        raise click.ClickException(str(NoActiveDocumentError(str(error)))) from error


def _open_document(filepath: Path, settings: TocSettings) -> FileDocument:
    try:
        return FileDocument(filepath, settings)
    except TocError as error:
        raise click.ClickException(str(error)) from error


def _finish(document: FileDocument, dry_run: bool) -> None:
    if dry_run:
        click.echo(document.get_text(), nl=False)
        return
    try:
        document.save()
    except TocError as error:
        raise click.ClickException(str(error)) from error


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, help="Log update decisions to stderr")
@click.option(
    "--preserve-unicode/--no-preserve-unicode",
    default=None,
    help="Keep Unicode characters in anchors",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, preserve_unicode: bool | None):
    """
    Generate and update the table of contents of Markdown files.

    Placement is controlled by comments inside the document:

    \b
        <!-- toc:insertAfterHeading=Introduction -->
        <!-- toc:insertAfterHeadingOffset=0 -->
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["preserve_unicode"] = preserve_unicode


@cli.command()
@click.option("--dry-run", is_flag=True, help="Print the result instead of writing the file")
@click.argument("filepath")
@click.pass_context
def insert(ctx: click.Context, filepath: str, dry_run: bool):
    """
    Insert or refresh the table of contents, with or without config comments.

    Examples:
        markdown-toc insert README.md
    """
    path = _resolve(filepath)
    settings = _build_settings(ctx, path)
    document = _open_document(path, settings)

    try:
        insert_toc(document, settings)
    except NoActiveDocumentError as error:
        raise click.ClickException(str(error)) from error

    _finish(document, dry_run)


@cli.command()
@click.option("--dry-run", is_flag=True, help="Print the result instead of writing the file")
@click.option(
    "--auto-update/--no-auto-update",
    default=None,
    help="Override the autoUpdateOnSave setting",
)
@click.argument("filepath")
@click.pass_context
def save(ctx: click.Context, filepath: str, dry_run: bool, auto_update: bool | None):
    """
    Run the pre-save hook, then write the file.

    The table of contents is only refreshed when autoUpdateOnSave is enabled
    and the document opts in through its config comments.
    """
    path = _resolve(filepath)
    settings = _build_settings(ctx, path, auto_update_on_save=auto_update)
    document = _open_document(path, settings)

    on_will_save(document, settings)
    _finish(document, dry_run)


@cli.command("init-config")
@click.option("--dry-run", is_flag=True, help="Print the result instead of writing the file")
@click.argument("filepath")
@click.pass_context
def init_config(ctx: click.Context, filepath: str, dry_run: bool):
    """
    Insert the default TOC config comments at the top of the file.
    """
    path = _resolve(filepath)
    settings = _build_settings(ctx, path)
    document = _open_document(path, settings)

    try:
        insert_toc_config(document)
    except NoActiveDocumentError as error:
        raise click.ClickException(str(error)) from error

    _finish(document, dry_run)


@cli.command()
@click.option(
    "--insert-config/--no-insert-config",
    default=None,
    help="Override the insertConfigOnCreate setting",
)
@click.argument("filepath")
@click.pass_context
def new(ctx: click.Context, filepath: str, insert_config: bool | None):
    """
    Create an empty Markdown file, seeded with config comments when enabled.
    """
    path = _resolve(filepath, must_exist=False)
    if path.exists():
        raise click.BadParameter(f"{path} already exists.")

    settings = _build_settings(ctx, path, insert_config_on_create=insert_config)
    try:
        path.touch()
    except OSError as error:
        raise click.ClickException(f"Error creating {path}: {error}") from error

    document = _open_document(path, settings)
    if on_did_create(document, settings):
        click.echo(f"Inserted TOC config into {path.name}", err=True)
    _finish(document, dry_run=False)


if __name__ == "__main__":
    cli()
