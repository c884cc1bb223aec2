"""Markdown to HTML rendering."""

from __future__ import annotations

import logging

from .constants import (
    CLASS_BLOCKQUOTE,
    CLASS_CODE_BLOCK,
    CLASS_HR,
    CLASS_LIST,
    CLASS_TABLE,
    CLASS_TASK_ITEM,
    CLASS_TASK_LIST,
)
from .headings import collect_headings, parse_heading, render_toc
from .inline import escape_html, format_inline
from .lines import (
    blockquote_content,
    fence_language,
    is_code_fence,
    is_horizontal_rule,
    is_table_row,
    is_table_separator,
    ordered_item,
    split_lines,
    split_table_cells,
    task_item,
    unordered_item,
)
from .models import BlockContext, OpenBlock

logger = logging.getLogger(__name__)

_CLOSING_TAGS = {
    OpenBlock.CODE_BLOCK: "</code></pre>",
    OpenBlock.TABLE: "</tbody></table>",
    OpenBlock.UNORDERED_LIST: "</ul>",
    OpenBlock.ORDERED_LIST: "</ol>",
    OpenBlock.BLOCKQUOTE: "</blockquote>",
}


def _close_block(ctx: BlockContext, html: list[str]) -> None:
    """Close whatever block is open and reset the context.

    Args:
        ctx: Renderer context to reset.
        html: Output fragments to append the closing markup to.

    Examples:
        _close_block(BlockContext(block=OpenBlock.ORDERED_LIST), html)  # appends "</ol>"
    """
    closing_tag = _CLOSING_TAGS.get(ctx.block)
    if closing_tag is not None:
        html.append(closing_tag)
    ctx.block = OpenBlock.NONE
    ctx.code_lang = ""
    ctx.table_columns = 0


def _open_block(ctx: BlockContext, html: list[str], block: OpenBlock, opening_tag: str) -> None:
    """Open `block` unless it is already the open block."""
    if ctx.block is block:
        return
    _close_block(ctx, html)
    html.append(opening_tag)
    ctx.block = block


def _try_code_fence(ctx: BlockContext, line: str, html: list[str]) -> bool:
    """Open or close a fenced code block.

    Args:
        ctx: Renderer context to update.
        line: Current line.
        html: Output fragments.

    Returns:
        bool: True when the line is a fence and has been consumed.

    Examples:
        _try_code_fence(BlockContext(), "```python", html)  # True
    """
    if not is_code_fence(line):
        return False

    if ctx.block is OpenBlock.CODE_BLOCK:
        _close_block(ctx, html)
        return True

    _close_block(ctx, html)
    language = fence_language(line)
    lang_class = f' class="language-{escape_html(language)}"' if language else ""
    html.append(f'<pre class="{CLASS_CODE_BLOCK}"><code{lang_class}>')
    ctx.block = OpenBlock.CODE_BLOCK
    ctx.code_lang = language
    logger.debug("Opened code block (language: %r)", language)
    return True


def _try_code_line(ctx: BlockContext, line: str, html: list[str]) -> bool:
    """Echo a line verbatim (escaped) while a code block is open."""
    if ctx.block is not OpenBlock.CODE_BLOCK:
        return False
    html.append(escape_html(line))
    html.append("\n")
    return True


def _try_table_row(ctx: BlockContext, stripped: str, html: list[str]) -> bool:
    """Render a table row.

    The first row of a table becomes the header; separator rows are consumed
    without output. The table stays open until a non-table line arrives.

    Args:
        ctx: Renderer context to update.
        stripped: Current line without surrounding whitespace.
        html: Output fragments.

    Returns:
        bool: True when the line is a table row.

    Examples:
        _try_table_row(BlockContext(), "| a | b |", html)  # opens the table
    """
    if not is_table_row(stripped):
        return False

    if ctx.block is not OpenBlock.TABLE:
        _close_block(ctx, html)

    if is_table_separator(stripped):
        return True

    cells = split_table_cells(stripped)

    if ctx.block is not OpenBlock.TABLE:
        html.append(f'<table class="{CLASS_TABLE}"><thead><tr>')
        html.extend(f"<th>{format_inline(cell)}</th>" for cell in cells)
        html.append("</tr></thead><tbody>")
        ctx.block = OpenBlock.TABLE
        ctx.table_columns = len(cells)
        return True

    if len(cells) != ctx.table_columns:
        logger.debug(
            "Table row has %d cells, header has %d", len(cells), ctx.table_columns
        )
    html.append("<tr>")
    html.extend(f"<td>{format_inline(cell)}</td>" for cell in cells)
    html.append("</tr>")
    return True


def _try_blank_line(ctx: BlockContext, stripped: str, html: list[str]) -> bool:
    if stripped:
        return False
    _close_block(ctx, html)
    return True


def _try_heading(ctx: BlockContext, line: str, html: list[str]) -> bool:
    heading = parse_heading(line)
    if heading is None:
        return False
    _close_block(ctx, html)
    level = heading.level
    html.append(
        f'<h{level} id="{escape_html(heading.slug)}">{format_inline(heading.text)}</h{level}>'
    )
    return True


def _try_horizontal_rule(ctx: BlockContext, stripped: str, html: list[str]) -> bool:
    if not is_horizontal_rule(stripped):
        return False
    _close_block(ctx, html)
    html.append(f'<hr class="{CLASS_HR}">')
    return True


def _try_blockquote(ctx: BlockContext, stripped: str, html: list[str]) -> bool:
    """Render a blockquote line as its own paragraph inside one container."""
    content = blockquote_content(stripped)
    if content is None:
        return False
    _open_block(ctx, html, OpenBlock.BLOCKQUOTE, f'<blockquote class="{CLASS_BLOCKQUOTE}">')
    html.append(f"<p>{format_inline(content)}</p>")
    return True


def _try_task_item(ctx: BlockContext, stripped: str, html: list[str]) -> bool:
    """Render a checklist item; it joins any open bullet list."""
    item = task_item(stripped)
    if item is None:
        return False
    checked, text = item
    _open_block(ctx, html, OpenBlock.UNORDERED_LIST, f'<ul class="{CLASS_TASK_LIST}">')
    checkbox = (
        '<input type="checkbox" checked disabled>' if checked else '<input type="checkbox" disabled>'
    )
    html.append(f'<li class="{CLASS_TASK_ITEM}">{checkbox} {format_inline(text)}</li>')
    return True


def _try_unordered_item(ctx: BlockContext, stripped: str, html: list[str]) -> bool:
    text = unordered_item(stripped)
    if text is None:
        return False
    _open_block(ctx, html, OpenBlock.UNORDERED_LIST, f'<ul class="{CLASS_LIST}">')
    html.append(f"<li>{format_inline(text)}</li>")
    return True


def _try_ordered_item(ctx: BlockContext, stripped: str, html: list[str]) -> bool:
    text = ordered_item(stripped)
    if text is None:
        return False
    _open_block(ctx, html, OpenBlock.ORDERED_LIST, f'<ol class="{CLASS_LIST}">')
    html.append(f"<li>{format_inline(text)}</li>")
    return True


def _render_paragraph(ctx: BlockContext, stripped: str, html: list[str]) -> None:
    _close_block(ctx, html)
    html.append(f"<p>{format_inline(stripped)}</p>")


def render_line(ctx: BlockContext, line: str, html: list[str]) -> None:
    """Render one line, updating the open block as needed.

    Line kinds are tried in priority order: code fence, code content, table
    row, blank line, heading, horizontal rule, blockquote, task item, bullet
    item, numbered item. Anything else becomes a paragraph.

    Args:
        ctx: Renderer context carried across lines.
        line: Current line without its line ending.
        html: Output fragments to append to.

    Examples:
        ctx, html = BlockContext(), []
        render_line(ctx, "- item", html)  # html == ['<ul class="md-list">', "<li>item</li>"]
    """
    if _try_code_fence(ctx, line, html):
        return
    if _try_code_line(ctx, line, html):
        return

    stripped = line.strip()
    if _try_table_row(ctx, stripped, html):
        return
    if _try_blank_line(ctx, stripped, html):
        return
    if _try_heading(ctx, line, html):
        return
    if _try_horizontal_rule(ctx, stripped, html):
        return
    if _try_blockquote(ctx, stripped, html):
        return
    if _try_task_item(ctx, stripped, html):
        return
    if _try_unordered_item(ctx, stripped, html):
        return
    if _try_ordered_item(ctx, stripped, html):
        return

    _render_paragraph(ctx, stripped, html)


def render(text: str) -> str:
    """Render Markdown text to an HTML fragment.

    Headings are collected first; with two or more headings a table of
    contents is prepended. Lines are then rendered one by one, and any block
    still open at the end of the input is closed.

    Args:
        text: Markdown source. Any string is accepted.

    Returns:
        str: HTML fragment. Empty for empty or whitespace-only input.

    Examples:
        render("# Title")  # '<h1 id="title">Title</h1>'
        render("**bold**")  # "<p><strong>bold</strong></p>"
    """
    lines = split_lines(text)
    headings = collect_headings(lines)
    html = [render_toc(headings)]

    ctx = BlockContext()
    for line in lines:
        render_line(ctx, line, html)

    if ctx.block is not OpenBlock.NONE:
        logger.debug("Closing %s left open at end of input", ctx.block.name)
    _close_block(ctx, html)

    return "".join(html)
