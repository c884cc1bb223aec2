"""Document statistics shown alongside a preview."""

from __future__ import annotations

from .lines import split_lines
from .models import DocumentStats


def document_stats(text: str) -> DocumentStats:
    """Count lines, words, and characters of a Markdown buffer.

    Lines follow the renderer's line splitting. Words are runs of
    non-whitespace. Characters are counted as UTF-8 bytes.

    Examples:
        document_stats("# Hi\\nthere")  # DocumentStats(lines=2, words=3, characters=10)
    """
    return DocumentStats(
        lines=len(split_lines(text)),
        words=len(text.split()),
        characters=len(text.encode("utf-8", "surrogatepass")),
    )
