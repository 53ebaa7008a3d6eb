"""Host settings loading and management."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
import tomllib

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024


@dataclass
class TocSettings:
    """Host-level settings that decide when TOC updates run.

    These settings are distinct from the inline ``<!-- toc:... -->`` comments,
    which live inside each document and control placement.

    Attributes:
        auto_update_on_save: Whether the pre-save hook refreshes the TOC.
        insert_config_on_create: Whether newly created, empty Markdown files
            receive the default config comments.
        preserve_unicode: Whether anchors keep Unicode word characters.
        max_file_size: Maximum file size in bytes that will be loaded.

    Examples:
        TocSettings(auto_update_on_save=False, insert_config_on_create=True)
    """

    auto_update_on_save: bool = True
    insert_config_on_create: bool = False
    preserve_unicode: bool = False
    max_file_size: int = DEFAULT_MAX_FILE_SIZE

    def get_flag(self, name: str) -> bool:
        """Read a boolean flag by its host name.

        Accepts both the editor-style names (``autoUpdateOnSave``,
        ``insertConfigOnCreate``) and the attribute names.

        Raises:
            ConfigError: If `name` does not refer to a boolean flag.

        Examples:
            settings.get_flag("autoUpdateOnSave")
        """
        attribute = FLAG_NAMES.get(name, name)
        if attribute not in BOOLEAN_FIELDS:
            raise ConfigError(f"Unknown configuration flag `{name}`")
        return getattr(self, attribute)


FLAG_NAMES = {
    "autoUpdateOnSave": "auto_update_on_save",
    "insertConfigOnCreate": "insert_config_on_create",
    "preserveUnicode": "preserve_unicode",
}
BOOLEAN_FIELDS = ("auto_update_on_save", "insert_config_on_create", "preserve_unicode")


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`max_file_size` must be a positive integer")
    """


def load_config(search_path: Path) -> TocSettings:
    """Load settings from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.markdown-toc]`` table from `pyproject.toml` and the
    ``[markdown-toc]`` or ``[tool.markdown-toc]`` table from
    `.markdown-toc.toml` when present. Returns default values when no
    configuration is found. TOML files that cannot be read or decoded are
    skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        TocSettings: Loaded settings with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "markdown-toc")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".markdown-toc.toml",
            table_paths=[("markdown-toc",), ("tool", "markdown-toc")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return TocSettings()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> TocSettings | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> TocSettings:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    # Accept the editor-style camelCase names as well.
    settings = {FLAG_NAMES.get(key, key.replace("-", "_")): value for key, value in raw_config.items()}
    known = {field.name for field in fields(TocSettings)}
    unknown = sorted(set(settings) - known)
    if unknown:
        raise ConfigError(
            f"Invalid `[{table_display}]` settings in {config_file}: "
            f"unsupported keys {', '.join(unknown)}"
        )

    return TocSettings(**settings)


def validate_config(settings: TocSettings) -> None:
    """Validate a `TocSettings` instance.

    Raises:
        ConfigError: If a flag is not a boolean or the size limit is not a
            positive integer.
    """
    for name in BOOLEAN_FIELDS:
        if not isinstance(getattr(settings, name), bool):
            raise ConfigError(f"`{name}` must be a boolean")

    max_file_size = settings.max_file_size
    if isinstance(max_file_size, bool) or not isinstance(max_file_size, int):
        raise ConfigError("`max_file_size` must be an integer")
    if max_file_size <= 0:
        raise ConfigError("`max_file_size` must be a positive integer")


def apply_overrides(settings: TocSettings, **overrides: object) -> TocSettings:
    """Apply override values to a `TocSettings`.

    Args:
        settings: Base settings to update.
        overrides: Override values keyed by field name; values set to None are
            ignored.

    Returns:
        TocSettings: New settings with the overrides applied. The original
        settings are returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `TocSettings`.

    Examples:
        updated = apply_overrides(settings, auto_update_on_save=False)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return settings
    return replace(settings, **changes)


def build_config(search_path: Path, **overrides: object) -> TocSettings:
    """Load, override, and validate settings.

    Raises:
        ConfigError: If loading or validation fails.

    Examples:
        settings = build_config(Path.cwd(), preserve_unicode=True)
    """
    settings = load_config(search_path)
    settings = apply_overrides(settings, **overrides)
    validate_config(settings)
    return settings
