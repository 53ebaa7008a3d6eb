"""File access for the file-backed document host.

Paths handed to the CLI are validated before anything is read: they must
resolve to a regular Markdown file below the working directory, without
passing through a symlink. Writes go through a temporary file in the target
directory so a crash never leaves a half-written document behind.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

from .config import DEFAULT_MAX_FILE_SIZE
from .constants import MARKDOWN_EXTENSIONS

MAX_FILE_SIZE_ENV_VAR = "MARKDOWN_TOC_MAX_FILE_SIZE"


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Return the size limit in bytes, honoring `MARKDOWN_TOC_MAX_FILE_SIZE`.

    Raises:
        ValueError: If the environment variable holds anything but a positive
            integer.
    """
    raw_limit = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if raw_limit is None:
        return default

    try:
        limit = int(raw_limit)
    except ValueError as error:
        raise ValueError(
            f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {raw_limit!r}."
        ) from error

    if limit <= 0:
        raise ValueError(f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {limit}.")
    return limit


def contains_symlink(path: Path) -> bool:
    """True when `path` or one of its ancestors is a symlink.

    Components that cannot be inspected are skipped.
    """
    for component in (path, *path.parents):
        try:
            is_link = component.is_symlink()
        except OSError:
            continue
        if is_link:
            return True
    return False


def is_markdown_path(path: Path) -> bool:
    return path.suffix.lower() in MARKDOWN_EXTENSIONS


def normalize_filepath(raw_path: str, base_dir: Path, must_exist: bool = True) -> Path:
    """Resolve `raw_path` to an absolute Markdown path below `base_dir`.

    Args:
        raw_path: Path given on the command line, absolute or relative.
        base_dir: Directory the resolved path must stay within.
        must_exist: When False, only the parent directory has to exist. Used
            when creating a new document.

    Raises:
        ValueError: With a user-readable reason when the path is rejected.

    Examples:
        normalize_filepath("docs/README.md", Path.cwd())
        normalize_filepath("notes/new.md", Path.cwd(), must_exist=False)
    """
    path = Path(raw_path).expanduser()
    if contains_symlink(path):
        raise ValueError(f"Symlinks are not supported for security reasons: {path}")

    try:
        resolved = path.resolve(strict=must_exist)
    except FileNotFoundError as error:
        raise ValueError(f"{path} does not exist.") from error
    except OSError as error:
        raise ValueError(f"Error resolving {path}: {error}") from error

    if must_exist:
        if not resolved.is_file():
            raise ValueError(f"{resolved} is not a regular file.")
    elif not resolved.parent.is_dir():
        raise ValueError(f"{resolved.parent} does not exist.")

    if not resolved.is_relative_to(base_dir):
        raise ValueError(f"{resolved} is outside of the working directory {base_dir}.")

    if not is_markdown_path(resolved):
        extensions = ", ".join(MARKDOWN_EXTENSIONS)
        raise ValueError(f"{resolved} is not a Markdown file (expected one of: {extensions}).")

    return resolved


def collect_file_stat(filepath: Path) -> os.stat_result:
    """Stat `filepath` without following symlinks.

    Raises:
        IOError: If the path cannot be stat'ed or is not a regular file.
    """
    try:
        file_stat = os.lstat(filepath)
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error

    mode = file_stat.st_mode
    if stat.S_ISLNK(mode):
        raise IOError(f"Symlinks are not supported: {filepath}.")
    if not stat.S_ISREG(mode):
        raise IOError(f"{filepath} is not a regular file.")
    return file_stat


def enforce_file_size(file_stat: os.stat_result, max_size: int, filepath: Path):
    if file_stat.st_size > max_size:
        raise IOError(f"{filepath} is larger than the {max_size} byte limit.")


def _fingerprint(file_stat: os.stat_result) -> tuple:
    return (file_stat.st_ino, file_stat.st_dev, file_stat.st_size, file_stat.st_mtime_ns)


def ensure_file_unchanged(
    loaded_stat: os.stat_result, current_stat: os.stat_result, filepath: Path
):
    """Refuse to overwrite a file that was modified after it was loaded.

    Raises:
        IOError: If the two stat snapshots describe different file contents.
    """
    if _fingerprint(loaded_stat) != _fingerprint(current_stat):
        raise IOError(f"{filepath} changed since it was loaded; refusing to overwrite.")


def read_text(filepath: Path) -> str:
    """Read `filepath` as UTF-8, keeping its line endings as they are.

    Raises:
        IOError: If the file cannot be opened or is not valid UTF-8.
    """
    try:
        return filepath.read_bytes().decode("UTF-8")
    except UnicodeDecodeError as error:
        raise IOError(f"Invalid UTF-8 sequence in {filepath}: {error}") from error
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error


def write_text_atomic(filepath: Path, text: str, permissions: int | None = None):
    """Write `text` to `filepath` through a temporary sibling file.

    The existing file keeps its mode bits unless `permissions` is given.

    Raises:
        OSError: If the temporary file cannot be written or moved into place.
    """
    if permissions is None and filepath.exists():
        permissions = stat.S_IMODE(filepath.stat().st_mode)

    fd, temp_name = tempfile.mkstemp(
        prefix=f".{filepath.name}.", suffix=".tmp", dir=filepath.parent
    )
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(text.encode("UTF-8"))
            handle.flush()
            os.fsync(handle.fileno())
        if permissions is not None:
            os.chmod(temp_path, permissions)
        os.replace(temp_path, filepath)
    finally:
        temp_path.unlink(missing_ok=True)
