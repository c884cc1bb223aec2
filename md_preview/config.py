"""Preview settings read from TOML files."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, fields, replace
from pathlib import Path
import tomllib

from .constants import DEFAULT_EXPORT_TITLE, DEFAULT_MAX_FILE_SIZE
from .styles import Theme

logger = logging.getLogger(__name__)

# File name -> tables it may hold the settings in, most specific first
_CONFIG_SOURCES: tuple[tuple[str, tuple[tuple[str, ...], ...]], ...] = (
    ("pyproject.toml", (("tool", "md-preview"),)),
    (".md-preview.toml", (("md-preview",), ("tool", "md-preview"))),
)


@dataclass
class PreviewConfig:
    """Settings for rendering a Markdown file.

    Attributes:
        theme: Stylesheet theme name (``"dark"`` or ``"light"``).
        standalone: Emit a complete HTML document instead of a fragment.
        title: ``<title>`` of standalone documents.
        max_file_size: Largest source file, in bytes, that will be rendered.

    Examples:
        PreviewConfig(theme="light", standalone=True)
    """

    theme: str = Theme.DARK.value
    standalone: bool = False
    title: str = DEFAULT_EXPORT_TITLE
    max_file_size: int = DEFAULT_MAX_FILE_SIZE


class ConfigError(ValueError):
    """Raised for settings that cannot be used.

    Examples:
        raise ConfigError("`title` must not be empty")
    """


def load_config(search_path: Path) -> PreviewConfig:
    """Find and load the settings that apply to `search_path`.

    Each directory from `search_path` up to the filesystem root is checked for
    a ``[tool.md-preview]`` table in `pyproject.toml`, then for an
    ``[md-preview]`` or ``[tool.md-preview]`` table in `.md-preview.toml`. The
    first table found wins, even when it is empty. Files that are not valid
    TOML are ignored.

    Args:
        search_path: Directory to start the lookup from.

    Returns:
        PreviewConfig: Settings from the first table found, defaults otherwise.

    Raises:
        ConfigError: If the table found is not a table or has unknown keys.

    Examples:
        load_config(Path("docs"))
    """
    for directory in _candidate_directories(search_path):
        for filename, table_paths in _CONFIG_SOURCES:
            found = _read_table(directory / filename, table_paths)
            if found is not None:
                raw_table, source = found
                logger.debug("Using settings from %s", source)
                return _config_from_table(raw_table, source)

    logger.debug("No settings found above %s, using defaults", search_path)
    return PreviewConfig()


def _candidate_directories(search_path: Path) -> Iterator[Path]:
    start = search_path.resolve()
    yield start
    yield from start.parents


def _read_table(
    config_file: Path, table_paths: tuple[tuple[str, ...], ...]
) -> tuple[object, str] | None:
    """Return the first of `table_paths` present in `config_file`, with a label."""
    if not config_file.is_file():
        return None

    try:
        with open(config_file, "rb") as stream:
            document = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError) as error:
        logger.debug("Ignoring %s: %s", config_file, error)
        return None

    for table_path in table_paths:
        node: object = document
        for key in table_path:
            if not isinstance(node, dict) or key not in node:
                break
            node = node[key]
        else:
            return node, f"[{'.'.join(table_path)}] in {config_file}"

    return None


def _config_from_table(raw_table: object, source: str) -> PreviewConfig:
    if not isinstance(raw_table, dict):
        raise ConfigError(f"Expected a table for {source}")

    # TOML keys may be written with dashes
    settings = {key.replace("-", "_"): value for key, value in raw_table.items()}
    known = {field.name for field in fields(PreviewConfig)}
    unknown = sorted(set(settings) - known)
    if unknown:
        raise ConfigError(f"Unknown setting(s) {', '.join(unknown)} in {source}")

    return PreviewConfig(**settings)


def validate_config(config: PreviewConfig) -> None:
    """Check that every setting has a usable value.

    Raises:
        ConfigError: If the theme is unknown, `standalone` is not a boolean,
            the title is blank, or the size limit is not a positive integer.

    Examples:
        validate_config(PreviewConfig(theme="light"))
    """
    if not isinstance(config.theme, str):
        raise ConfigError("`theme` must be a string")
    try:
        Theme.from_name(config.theme)
    except ValueError as error:
        raise ConfigError(f"`theme`: {error}") from error

    if not isinstance(config.standalone, bool):
        raise ConfigError("`standalone` must be true or false")

    if not isinstance(config.title, str) or not config.title.strip():
        raise ConfigError("`title` must not be empty")

    limit = config.max_file_size
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise ConfigError("`max_file_size` must be a positive integer")


def apply_overrides(config: PreviewConfig, **overrides: object) -> PreviewConfig:
    """Return `config` with the given settings replaced.

    Overrides whose value is None are skipped, so unset command-line options
    leave file settings alone.

    Raises:
        TypeError: If an override does not name a `PreviewConfig` field.

    Examples:
        apply_overrides(config, theme="light", standalone=None)
    """
    changes = {name: value for name, value in overrides.items() if value is not None}
    return replace(config, **changes) if changes else config


def build_config(search_path: Path, **overrides: object) -> PreviewConfig:
    """Load settings for `search_path`, apply overrides, and validate the result.

    Raises:
        ConfigError: If a settings table is malformed or a value is invalid.

    Examples:
        build_config(Path.cwd(), theme="light", standalone=True)
    """
    config = apply_overrides(load_config(search_path), **overrides)
    validate_config(config)
    return config
