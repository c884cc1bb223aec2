"""Heading collection and table of contents rendering."""

from __future__ import annotations

from collections.abc import Iterable

from .constants import CLASS_TOC, CLASS_TOC_TITLE, MIN_TOC_HEADINGS, TOC_TITLE
from .inline import escape_html
from .lines import heading_level, heading_text, is_code_fence
from .models import HeadingEntry
from .slugify import generate_slug


def parse_heading(line: str) -> HeadingEntry | None:
    """Build a `HeadingEntry` from a heading line.

    Args:
        line: A single line of Markdown.

    Returns:
        HeadingEntry | None: The heading, or None when the line is not one.

    Examples:
        parse_heading("## Getting Started")
        # HeadingEntry(level=2, slug="getting-started", text="Getting Started")
    """
    level = heading_level(line)
    if level is None:
        return None
    text = heading_text(line)
    return HeadingEntry(level=level, slug=generate_slug(text), text=text)


def collect_headings(lines: Iterable[str]) -> list[HeadingEntry]:
    """Collect headings in document order.

    Lines inside fenced code blocks are skipped, matching what the renderer
    turns into ``<hN>`` elements. Repeated heading texts yield repeated slugs.

    Args:
        lines: Document lines without line endings.

    Returns:
        list[HeadingEntry]: Headings found outside code blocks.

    Examples:
        collect_headings(["# Title", "```", "# not a heading", "```", "## Part"])
    """
    headings: list[HeadingEntry] = []
    in_code_block = False

    for line in lines:
        if is_code_fence(line):
            in_code_block = not in_code_block
            continue
        if in_code_block:
            continue

        entry = parse_heading(line)
        if entry is not None:
            headings.append(entry)

    return headings


def render_toc(headings: list[HeadingEntry]) -> str:
    """Render a collapsible table of contents.

    Nothing is rendered for fewer than two headings. Each entry is indented
    by ``level - 1`` em.

    Args:
        headings: Headings in document order.

    Returns:
        str: A ``<nav class="md-toc">`` block, or an empty string.

    Examples:
        render_toc(collect_headings(["# A", "## B"]))
    """
    if len(headings) < MIN_TOC_HEADINGS:
        return ""

    toc = [
        f'<nav class="{CLASS_TOC}">',
        f'<details open><summary class="{CLASS_TOC_TITLE}">{TOC_TITLE}</summary>',
        "<ul>",
    ]
    for heading in headings:
        indent = f' style="margin-left: {heading.level - 1}em"' if heading.level > 1 else ""
        toc.append(
            f'<li{indent}><a href="#{escape_html(heading.slug)}">{escape_html(heading.text)}</a></li>'
        )
    toc.append("</ul></details></nav>")

    return "".join(toc)
