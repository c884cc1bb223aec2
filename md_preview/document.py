"""Rendering Markdown files to HTML."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import PreviewConfig
from .constants import DEFAULT_MAX_FILE_SIZE
from .exceptions import RenderFileError
from .filesystem import check_source_file, read_utf8
from .renderer import render
from .styles import Theme, export_html

logger = logging.getLogger(__name__)


def read_markdown(filepath: Path, max_file_size: int = DEFAULT_MAX_FILE_SIZE) -> str:
    """Read a Markdown file after checking its size.

    Args:
        filepath: Path to the Markdown file.
        max_file_size: Maximum allowed size in bytes.

    Returns:
        str: File content.

    Raises:
        FileTooLargeError: If the file exceeds `max_file_size`.
        RenderFileError: If the file cannot be accessed or is not valid UTF-8.

    Examples:
        text = read_markdown(Path("README.md"), 1_048_576)
    """
    try:
        stat_result = check_source_file(filepath, max_file_size)
    except IOError as error:
        raise RenderFileError(str(error)) from error

    try:
        content = read_utf8(filepath)
    except UnicodeDecodeError as error:
        error_message = f"Invalid UTF-8 sequence in {filepath}: {error}"
        raise RenderFileError(error_message) from error
    except IOError as error:
        raise RenderFileError(str(error)) from error

    logger.debug("Read %d bytes from %s", stat_result.st_size, filepath)
    return content


def render_document(text: str, config: PreviewConfig | None = None) -> str:
    """Render Markdown text as a fragment or a standalone document.

    Args:
        text: Markdown source.
        config: Rendering options; defaults to a new `PreviewConfig`.

    Returns:
        str: HTML fragment, or a full document when `config.standalone` is set.
    """
    config = config or PreviewConfig()
    if not config.standalone:
        return render(text)
    return export_html(text, Theme.from_name(config.theme), config.title)


def render_file(filepath: Path, config: PreviewConfig | None = None) -> str:
    """Read and render a Markdown file.

    Args:
        filepath: Path to the Markdown file.
        config: Rendering options and size limit; defaults to a new
            `PreviewConfig`.

    Returns:
        str: Rendered HTML.

    Raises:
        RenderFileError: If the file is too large, unreadable, or not UTF-8.

    Examples:
        html = render_file(Path("README.md"), PreviewConfig(standalone=True))
    """
    config = config or PreviewConfig()
    return render_document(read_markdown(filepath, config.max_file_size), config)
