"""Data models for md-preview."""

from dataclasses import dataclass
from enum import Enum, auto


class OpenBlock(Enum):
    """Block-level constructs that stay open across several lines.

    At most one block is open at a time; opening a new one closes the
    previous one first.

    Attributes:
        NONE: No block is open.
        CODE_BLOCK: Inside a fenced code block.
        TABLE: Inside a table body, after the header row.
        UNORDERED_LIST: Inside a bullet or task list.
        ORDERED_LIST: Inside a numbered list.
        BLOCKQUOTE: Inside a blockquote container.
    """

    NONE = auto()
    CODE_BLOCK = auto()
    TABLE = auto()
    UNORDERED_LIST = auto()
    ORDERED_LIST = auto()
    BLOCKQUOTE = auto()


@dataclass
class BlockContext:
    """Encapsulate renderer state while walking Markdown lines.

    Attributes:
        block: Currently open block.
        code_lang: Language tag of the open code block, empty when absent.
        table_columns: Number of header cells of the open table.
    """

    block: OpenBlock = OpenBlock.NONE
    code_lang: str = ""
    table_columns: int = 0


@dataclass(frozen=True)
class HeadingEntry:
    """A heading discovered in a document.

    Attributes:
        level: Heading level from 1 to 6.
        slug: Anchor id derived from the heading text. May be empty, and is not
            unique when several headings share the same text.
        text: Raw heading text without the leading ``#`` run.
    """

    level: int
    slug: str
    text: str


@dataclass(frozen=True)
class DocumentStats:
    """Line, word, and character counts for a Markdown buffer."""

    lines: int
    words: int
    characters: int
