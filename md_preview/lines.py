"""Line splitting and block-level line classification."""

from __future__ import annotations

from .constants import (
    CODE_FENCE,
    HEADING_PATTERN,
    HORIZONTAL_RULES,
    MAX_HEADING_LEVEL,
    ORDERED_ITEM_PATTERN,
    TABLE_SEPARATOR_CHARS,
    TASK_DONE_MARKER,
    TASK_OPEN_MARKER,
    UNORDERED_MARKERS,
)


def split_lines(text: str) -> list[str]:
    r"""Split a buffer into lines on ``\n``.

    A trailing ``\r`` is removed from each line and a final newline does not
    produce an extra empty line. Other characters that `str.splitlines` treats
    as boundaries (form feeds, Unicode line separators) stay inside the line.

    Examples:
        split_lines("a\r\nb\n")  # ["a", "b"]
        split_lines("")  # []
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def heading_level(line: str) -> int | None:
    """Return the heading level of a line, or None when it is not a heading.

    The left-trimmed line must start with a run of ``#`` followed by a space.
    Runs longer than six collapse to level 6.

    Examples:
        heading_level("## Usage")  # 2
        heading_level("######## Deep")  # 6
        heading_level("#hashtag")  # None
    """
    match = HEADING_PATTERN.match(line.lstrip())
    if not match:
        return None
    return min(len(match.group(1)), MAX_HEADING_LEVEL)


def heading_text(line: str) -> str:
    """Return the text of a heading line without its ``#`` run."""
    return line.lstrip().lstrip("#").strip()


def is_code_fence(line: str) -> bool:
    """Check whether a line opens or closes a fenced code block."""
    return line.lstrip().startswith(CODE_FENCE)


def fence_language(line: str) -> str:
    """Return the language tag that follows a fence, or an empty string."""
    return line.lstrip().lstrip("`").strip()


def is_table_row(stripped: str) -> bool:
    return stripped.startswith("|")


def is_table_separator(stripped: str) -> bool:
    """Check whether a table row only aligns columns (``|---|:-:|``)."""
    return "-" in stripped and all(character in TABLE_SEPARATOR_CHARS for character in stripped)


def split_table_cells(stripped: str) -> list[str]:
    """Split a table row into trimmed cells, ignoring the outer pipes.

    Examples:
        split_table_cells("| a | b |")  # ["a", "b"]
    """
    return [cell.strip() for cell in stripped.strip("|").split("|")]


def is_horizontal_rule(stripped: str) -> bool:
    return stripped in HORIZONTAL_RULES


def blockquote_content(stripped: str) -> str | None:
    """Return the quoted text of a blockquote line, or None for other lines.

    Examples:
        blockquote_content("> quoted")  # "quoted"
        blockquote_content(">")  # ""
        blockquote_content(">tight")  # None
    """
    if stripped == ">":
        return ""
    if stripped.startswith("> "):
        return stripped[2:].strip()
    return None


def task_item(stripped: str) -> tuple[bool, str] | None:
    """Return ``(checked, text)`` for a task list item, or None.

    Examples:
        task_item("- [x] Ship it")  # (True, "Ship it")
        task_item("- [ ] Later")  # (False, "Later")
    """
    for marker, checked in ((TASK_DONE_MARKER, True), (TASK_OPEN_MARKER, False)):
        if stripped.startswith(marker):
            return checked, stripped[len(marker) :].strip()
    return None


def unordered_item(stripped: str) -> str | None:
    """Return the text of a ``-``, ``*``, or ``+`` list item, or None."""
    if stripped.startswith(UNORDERED_MARKERS):
        return stripped[2:]
    return None


def ordered_item(stripped: str) -> str | None:
    """Return the text of a numbered list item, or None.

    Only ASCII digits count, and the dot must be followed by a space.

    Examples:
        ordered_item("12. Twelfth")  # "Twelfth"
        ordered_item("1.5 apples")  # None
    """
    match = ORDERED_ITEM_PATTERN.match(stripped)
    if not match:
        return None
    return stripped[match.end() :]
