"""Reading Markdown sources and writing rendered HTML."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE, MARKDOWN_EXTENSIONS
from .exceptions import FileTooLargeError

MAX_FILE_SIZE_ENV_VAR = "MD_PREVIEW_MAX_FILE_SIZE"
NEW_FILE_MODE = 0o644


def max_file_size_from_env(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Return the source size limit, honoring ``MD_PREVIEW_MAX_FILE_SIZE``.

    Args:
        default: Limit in bytes used when the variable is unset or blank.

    Returns:
        int: Size limit in bytes.

    Raises:
        ValueError: If the variable is set to anything but a positive integer.

    Examples:
        os.environ["MD_PREVIEW_MAX_FILE_SIZE"] = "204800"
        max_file_size_from_env(default=102400)  # 204800
    """
    raw_limit = os.environ.get(MAX_FILE_SIZE_ENV_VAR, "").strip()
    if not raw_limit:
        return default

    if not raw_limit.isdecimal() or int(raw_limit) == 0:
        error_message = (
            f"{MAX_FILE_SIZE_ENV_VAR} must be a positive number of bytes, got {raw_limit!r}"
        )
        raise ValueError(error_message)

    return int(raw_limit)


def find_symlink(path: Path) -> Path | None:
    """Return the first component of `path` that is a symlink, if any.

    Components that cannot be inspected are skipped.

    Examples:
        find_symlink(Path("docs/current/README.md"))  # Path("docs/current")
    """
    for candidate in (path, *path.parents):
        try:
            if candidate.is_symlink():
                return candidate
        except OSError:
            continue
    return None


def resolve_source(raw_path: str, base_dir: Path) -> Path:
    """Turn a user-supplied path into the absolute path of a Markdown source.

    The path must name an existing regular file below `base_dir`, carry one of
    the Markdown extensions, and not pass through a symlink.

    Args:
        raw_path: Path as given on the command line, absolute or relative.
        base_dir: Resolved working directory that sources must live under.

    Returns:
        Path: Resolved path to the source file.

    Raises:
        ValueError: If any of the conditions above does not hold.

    Examples:
        resolve_source("docs/guide.md", Path.cwd().resolve())
    """
    path = Path(raw_path).expanduser()

    link = find_symlink(path)
    if link is not None:
        raise ValueError(f"Refusing to read through symlink {link}")

    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        raise ValueError(f"No such file: {path}") from error
    except OSError as error:
        raise ValueError(f"Cannot resolve {path}: {error}") from error

    if not resolved.is_file():
        raise ValueError(f"{resolved} is not a regular file.")

    if not resolved.is_relative_to(base_dir):
        raise ValueError(f"{resolved} is outside of the working directory {base_dir}.")

    if resolved.suffix.lower() not in MARKDOWN_EXTENSIONS:
        supported = ", ".join(MARKDOWN_EXTENSIONS)
        error_message = f"{resolved} is not a Markdown file (supported extensions: {supported})."
        raise ValueError(error_message)

    return resolved


def check_source_file(filepath: Path, max_size: int) -> os.stat_result:
    """Stat a source without following symlinks and check its type and size.

    Raises:
        IOError: If the path cannot be accessed, is a symlink, or is not a
            regular file.
        FileTooLargeError: If the file is larger than `max_size` bytes.
    """
    try:
        stat_result = os.lstat(filepath)
    except OSError as error:
        raise IOError(f"Cannot access {filepath}: {error}") from error

    if stat.S_ISLNK(stat_result.st_mode):
        raise IOError(f"Refusing to read through symlink {filepath}")
    if not stat.S_ISREG(stat_result.st_mode):
        raise IOError(f"{filepath} is not a regular file.")
    if stat_result.st_size > max_size:
        raise FileTooLargeError(filepath, stat_result.st_size, max_size)

    return stat_result


def read_utf8(filepath: Path) -> str:
    """Read a whole file as UTF-8 text.

    Raises:
        IOError: If the file cannot be opened or read.
        UnicodeDecodeError: If the bytes are not valid UTF-8.
    """
    try:
        with open(filepath, encoding="utf-8") as handle:
            return handle.read()
    except OSError as error:
        raise IOError(f"Cannot read {filepath}: {error}") from error


def write_output(filepath: Path, content: str) -> None:
    """Write rendered output atomically.

    Content goes to a temporary file in the target directory, which then
    replaces `filepath`. When `filepath` already exists its permission bits are
    kept; new files get mode 0o644.

    Args:
        filepath: Destination path.
        content: Text to write in UTF-8.

    Raises:
        IOError: If the destination is a symlink or directory, its directory
            does not exist, or the write fails.

    Examples:
        write_output(Path("README.html"), html)
    """
    if filepath.is_symlink():
        raise IOError(f"Refusing to write through symlink {filepath}")
    if filepath.is_dir():
        raise IOError(f"{filepath} is a directory.")
    if not filepath.parent.is_dir():
        raise IOError(f"Directory {filepath.parent} does not exist.")

    mode = stat.S_IMODE(filepath.stat().st_mode) if filepath.exists() else NEW_FILE_MODE

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", encoding="utf-8", dir=filepath.parent, suffix=".tmp", delete=False
        ) as handle:
            temp_path = Path(handle.name)
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(temp_path, mode)
        os.replace(temp_path, filepath)
    except OSError as error:
        raise IOError(f"Error writing {filepath}: {error}") from error
    finally:
        # Gone after a successful replace
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
