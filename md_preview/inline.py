"""Inline formatting for a single line of Markdown text.

Every step scans for its own literal delimiter and never backtracks. A
delimiter without a partner is written out unchanged, so formatting never
fails and never drops characters. Scans move an index through the line
instead of slicing off the rest, so each step stays linear in the line length.
"""

from __future__ import annotations

import html

from .constants import CLASS_IMAGE, CLASS_INLINE_CODE, EMOJI_SHORTCODES


def escape_html(text: str) -> str:
    """Escape the characters that are significant in HTML text and attributes.

    Single quotes are left alone.

    Args:
        text: Raw text.

    Returns:
        str: Text with ``&``, ``<``, ``>``, and ``"`` replaced by entities.

    Examples:
        escape_html('<a href="x">')  # "&lt;a href=&quot;x&quot;&gt;"
    """
    return html.escape(text, quote=False).replace('"', "&quot;")


def replace_pair(text: str, delimiter: str, html_open: str, html_close: str) -> str:
    """Wrap text found between two occurrences of `delimiter`.

    The first opener is paired with the next occurrence of the same delimiter.
    When no closer follows, the opener is kept literally and scanning resumes
    right after it.

    Args:
        text: Text to scan.
        delimiter: Marker that opens and closes the span, such as ``"**"``.
        html_open: Markup replacing the opener.
        html_close: Markup replacing the closer.

    Returns:
        str: Text with every matched pair replaced.

    Examples:
        replace_pair("a **b** c", "**", "<strong>", "</strong>")
        replace_pair("**open", "**", "<strong>", "</strong>")  # "**open"
    """
    result = []
    width = len(delimiter)
    position = 0

    while True:
        start = text.find(delimiter, position)
        if start == -1:
            break
        result.append(text[position:start])
        after_open = start + width
        end = text.find(delimiter, after_open)
        if end == -1:
            result.append(delimiter)
            position = after_open
            continue
        result.append(html_open)
        result.append(text[after_open:end])
        result.append(html_close)
        position = end + width

    result.append(text[position:])
    return "".join(result)


def replace_single(text: str, delimiter: str, html_open: str, html_close: str) -> str:
    """Toggle a span on each occurrence of a single-character delimiter.

    An opener only counts when the delimiter occurs again later in the
    remaining text; a lone delimiter stays literal.

    Args:
        text: Text to scan.
        delimiter: Marker such as ``"*"`` or ``"`"``.
        html_open: Markup replacing an opener.
        html_close: Markup replacing a closer.

    Returns:
        str: Text with matched spans replaced.

    Examples:
        replace_single("*a* and *b", "*", "<em>", "</em>")  # "<em>a</em> and *b"
    """
    result = []
    width = len(delimiter)
    position = 0
    is_open = False

    while True:
        found = text.find(delimiter, position)
        if found == -1:
            break
        result.append(text[position:found])
        position = found + width
        if is_open:
            result.append(html_close)
            is_open = False
        elif text.find(delimiter, position) != -1:
            result.append(html_open)
            is_open = True
        else:
            result.append(delimiter)

    result.append(text[position:])
    return "".join(result)


def _find_cached(text: str, char: str, start: int, cache: dict[str, int]) -> int:
    """Return ``text.find(char, start)``, reusing an earlier answer when it still holds.

    Callers must ask with non-decreasing `start` values for a given `char`.
    """
    found = cache.get(char, -2)
    if found != -1 and found < start:
        found = text.find(char, start)
        cache[char] = found
    return found


def _split_target(text: str, start: int, cache: dict[str, int]) -> tuple[str, str, int] | None:
    """Split ``label](target)`` beginning at offset `start` of `text`.

    Returns the label, the target, and the offset just past the closing
    parenthesis, or None when the closing bracket is missing or is not
    immediately followed by a parenthesized target.
    """
    bracket_end = _find_cached(text, "]", start, cache)
    if bracket_end == -1:
        return None
    if not text.startswith("(", bracket_end + 1):
        return None

    paren_end = _find_cached(text, ")", bracket_end + 2, cache)
    if paren_end == -1:
        return None

    return text[start:bracket_end], text[bracket_end + 2 : paren_end], paren_end + 1


def replace_links(text: str) -> str:
    """Render ``[text](url)`` links.

    A ``[`` directly preceded by ``!`` belongs to an image and is passed
    through for `replace_images`. Malformed links keep their ``[`` and scanning
    resumes right after it.

    Args:
        text: Escaped text to scan.

    Returns:
        str: Text with links rendered as anchors opening in a new tab.

    Examples:
        replace_links("[docs](https://example.com)")
    """
    result = []
    cache: dict[str, int] = {}
    position = 0

    while True:
        bracket_start = text.find("[", position)
        if bracket_start == -1:
            break
        if bracket_start > 0 and text[bracket_start - 1] == "!":
            result.append(text[position : bracket_start + 1])
            position = bracket_start + 1
            continue

        result.append(text[position:bracket_start])
        parts = _split_target(text, bracket_start + 1, cache)
        if parts is None:
            result.append("[")
            position = bracket_start + 1
            continue

        label, url, position = parts
        result.append(f'<a href="{url}" target="_blank" rel="noopener">{label}</a>')

    result.append(text[position:])
    return "".join(result)


def replace_images(text: str) -> str:
    """Render ``![alt](url)`` images.

    Malformed images keep their ``![`` prefix and scanning resumes after it.

    Args:
        text: Escaped text to scan.

    Returns:
        str: Text with images rendered as ``<img>`` tags.

    Examples:
        replace_images("![logo](logo.png)")
    """
    result = []
    cache: dict[str, int] = {}
    position = 0

    while True:
        start = text.find("![", position)
        if start == -1:
            break
        result.append(text[position:start])
        parts = _split_target(text, start + 2, cache)
        if parts is None:
            result.append("![")
            position = start + 2
            continue

        alt, url, position = parts
        result.append(f'<img src="{url}" alt="{alt}" class="{CLASS_IMAGE}">')

    result.append(text[position:])
    return "".join(result)


def replace_emojis(text: str) -> str:
    """Replace known ``:shortcode:`` markers with their emoji."""
    for shortcode, emoji in EMOJI_SHORTCODES.items():
        text = text.replace(shortcode, emoji)
    return text


def format_inline(text: str) -> str:
    """Convert one line of Markdown text into an HTML fragment.

    Escapes the raw text, then applies bold-italic, bold, italic,
    strikethrough, inline code, links, images, and emoji in that order. Each
    step works on the previous step's output.

    Args:
        text: Raw line content.

    Returns:
        str: HTML fragment. Never raises for any string input.

    Examples:
        format_inline("**bold** and `code`")
        format_inline("*lonely")  # "*lonely"
    """
    result = escape_html(text)

    result = replace_pair(result, "***", "<strong><em>", "</em></strong>")
    result = replace_pair(result, "___", "<strong><em>", "</em></strong>")

    result = replace_pair(result, "**", "<strong>", "</strong>")
    result = replace_pair(result, "__", "<strong>", "</strong>")

    result = replace_single(result, "*", "<em>", "</em>")
    result = replace_single(result, "_", "<em>", "</em>")

    result = replace_pair(result, "~~", "<del>", "</del>")

    result = replace_single(result, "`", f'<code class="{CLASS_INLINE_CODE}">', "</code>")

    result = replace_links(result)
    result = replace_images(result)

    return replace_emojis(result)
