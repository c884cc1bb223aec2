"""Package-specific exception types.

Rendering itself never fails; these errors come from reading, sizing, and
writing files around it.
"""

from __future__ import annotations

from pathlib import Path


class RenderFileError(Exception):
    """Raised when a Markdown file cannot be rendered."""


class FileTooLargeError(RenderFileError):
    """Raised when a file exceeds the configured maximum size.

    Args:
        filepath: Path to the offending file.
        size: Actual size in bytes.
        limit: Maximum allowed size in bytes.
    """

    def __init__(self, filepath: Path, size: int, limit: int):
        self.filepath = filepath
        self.size = size
        self.limit = limit
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"{self.filepath} is {self.size} bytes, "
            f"exceeding the maximum allowed size of {self.limit} bytes."
        )
