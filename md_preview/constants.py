"""Constants used across the md-preview package."""

from __future__ import annotations

import re

# Markdown patterns
HEADING_PATTERN = re.compile(r"^(#+) ")
ORDERED_ITEM_PATTERN = re.compile(r"^[0-9]+\. ")
CODE_FENCE = "```"
MAX_HEADING_LEVEL = 6
HORIZONTAL_RULES = frozenset({"---", "***", "___"})
TABLE_SEPARATOR_CHARS = frozenset("|-: ")
UNORDERED_MARKERS = ("- ", "* ", "+ ")
TASK_DONE_MARKER = "- [x] "
TASK_OPEN_MARKER = "- [ ] "

# TOC
MIN_TOC_HEADINGS = 2
TOC_TITLE = "Table of Contents"

# Emitted CSS classes
CLASS_TOC = "md-toc"
CLASS_TOC_TITLE = "md-toc-title"
CLASS_CODE_BLOCK = "md-code-block"
CLASS_TABLE = "md-table"
CLASS_HR = "md-hr"
CLASS_BLOCKQUOTE = "md-blockquote"
CLASS_TASK_LIST = "md-task-list"
CLASS_TASK_ITEM = "md-task-item"
CLASS_LIST = "md-list"
CLASS_IMAGE = "md-image"
CLASS_INLINE_CODE = "md-inline-code"

CSS_CLASSES = frozenset(
    {
        CLASS_TOC,
        CLASS_TOC_TITLE,
        CLASS_CODE_BLOCK,
        CLASS_TABLE,
        CLASS_HR,
        CLASS_BLOCKQUOTE,
        CLASS_TASK_LIST,
        CLASS_TASK_ITEM,
        CLASS_LIST,
        CLASS_IMAGE,
        CLASS_INLINE_CODE,
    }
)

# Shortcode -> Unicode replacement, applied in this order
EMOJI_SHORTCODES = {
    ":smile:": "\U0001F604",
    ":laughing:": "\U0001F606",
    ":thumbsup:": "\U0001F44D",
    ":thumbsdown:": "\U0001F44E",
    ":heart:": "\u2764\uFE0F",
    ":star:": "\u2B50",
    ":fire:": "\U0001F525",
    ":rocket:": "\U0001F680",
    ":warning:": "\u26A0\uFE0F",
    ":check:": "\u2705",
    ":x:": "\u274C",
    ":info:": "\u2139\uFE0F",
    ":bulb:": "\U0001F4A1",
    ":memo:": "\U0001F4DD",
    ":tada:": "\U0001F389",
    ":eyes:": "\U0001F440",
    ":thinking:": "\U0001F914",
    ":wave:": "\U0001F44B",
    ":clap:": "\U0001F44F",
    ":100:": "\U0001F4AF",
}

# Export and file handling defaults
DEFAULT_EXPORT_TITLE = "Markdown Export"
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
MARKDOWN_EXTENSIONS = (".md", ".markdown", ".mdown", ".mkd", ".mkdn", ".txt")
