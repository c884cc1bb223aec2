"""Preview themes, stylesheet generation, and standalone HTML export."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum

from .constants import DEFAULT_EXPORT_TITLE
from .inline import escape_html
from .renderer import render


class Theme(Enum):
    """Color themes for rendered previews."""

    DARK = "dark"
    LIGHT = "light"

    @classmethod
    def from_name(cls, name: str) -> Theme:
        """Look up a theme by case-insensitive name.

        Raises:
            ValueError: If no theme has that name.

        Examples:
            Theme.from_name("Light")  # Theme.LIGHT
        """
        try:
            return cls(name.strip().lower())
        except ValueError as error:
            choices = ", ".join(theme.value for theme in cls)
            raise ValueError(f"Unknown theme {name!r} (expected one of: {choices})") from error


@dataclass(frozen=True)
class ThemePalette:
    """Colors used by the preview stylesheet.

    Attributes:
        background: Page background.
        text: Body text.
        text_secondary: Muted text (blockquotes, small headings).
        border: Rules, table borders, heading underlines.
        code_background: Code, blockquote, and TOC backgrounds.
        link: Links and checkbox accents.
        blockquote_border: Left border of blockquotes.
        table_stripe: Background of even table rows.
    """

    background: str
    text: str
    text_secondary: str
    border: str
    code_background: str
    link: str
    blockquote_border: str
    table_stripe: str


PALETTES = {
    Theme.DARK: ThemePalette(
        background="#1a1a2e",
        text="#e0e0e0",
        text_secondary="#a0a0a0",
        border="#333355",
        code_background="#16213e",
        link="#00d4ff",
        blockquote_border="#00d4ff",
        table_stripe="rgba(255,255,255,0.03)",
    ),
    Theme.LIGHT: ThemePalette(
        background="#ffffff",
        text="#1a1a2e",
        text_secondary="#555555",
        border="#e0e0e0",
        code_background="#f5f5f5",
        link="#0066cc",
        blockquote_border="#0066cc",
        table_stripe="rgba(0,0,0,0.03)",
    ),
}

_STYLESHEET_TEMPLATE = """
.md-preview-content {{
    font-family: 'Geist', -apple-system, BlinkMacSystemFont, sans-serif;
    font-size: 15px;
    line-height: 1.8;
    color: {text};
    background: {background};
    padding: 24px;
    word-wrap: break-word;
    overflow-wrap: break-word;
}}
.md-preview-content h1 {{ font-size: 2em; font-weight: 700; margin: 1.2em 0 0.6em; padding-bottom: 0.3em; border-bottom: 2px solid {border}; }}
.md-preview-content h2 {{ font-size: 1.5em; font-weight: 700; margin: 1em 0 0.5em; padding-bottom: 0.2em; border-bottom: 1px solid {border}; }}
.md-preview-content h3 {{ font-size: 1.25em; font-weight: 600; margin: 0.8em 0 0.4em; }}
.md-preview-content h4 {{ font-size: 1.1em; font-weight: 600; margin: 0.6em 0 0.3em; }}
.md-preview-content h5, .md-preview-content h6 {{ font-size: 1em; font-weight: 600; margin: 0.5em 0 0.3em; color: {text_secondary}; }}
.md-preview-content p {{ margin: 0 0 1em; }}
.md-preview-content a {{ color: {link}; text-decoration: none; }}
.md-preview-content a:hover {{ text-decoration: underline; }}
.md-preview-content strong {{ font-weight: 700; }}
.md-preview-content em {{ font-style: italic; }}
.md-preview-content del {{ text-decoration: line-through; opacity: 0.7; }}
.md-preview-content .md-inline-code {{
    font-family: 'JetBrains Mono', 'SF Mono', monospace;
    background: {code_background};
    padding: 2px 6px;
    border-radius: 4px;
    font-size: 0.9em;
    border: 1px solid {border};
}}
.md-preview-content .md-code-block {{
    font-family: 'JetBrains Mono', 'SF Mono', monospace;
    background: {code_background};
    padding: 16px;
    border-radius: 8px;
    font-size: 0.9em;
    overflow-x: auto;
    margin: 1em 0;
    border: 1px solid {border};
    line-height: 1.6;
}}
.md-preview-content .md-code-block code {{ background: none; padding: 0; border: none; }}
.md-preview-content .md-blockquote {{
    border-left: 4px solid {blockquote_border};
    padding: 0.5em 1em;
    margin: 1em 0;
    color: {text_secondary};
    background: {code_background};
    border-radius: 0 8px 8px 0;
}}
.md-preview-content .md-blockquote p {{ margin: 0.3em 0; }}
.md-preview-content .md-list {{ padding-left: 2em; margin: 0.5em 0 1em; }}
.md-preview-content .md-list li {{ margin: 0.3em 0; }}
.md-preview-content .md-task-list {{ list-style: none; padding-left: 0.5em; }}
.md-preview-content .md-task-item {{ display: flex; align-items: center; gap: 8px; margin: 0.3em 0; }}
.md-preview-content .md-task-item input[type="checkbox"] {{ width: 16px; height: 16px; accent-color: {link}; }}
.md-preview-content .md-table {{ width: 100%; border-collapse: collapse; margin: 1em 0; font-size: 0.95em; }}
.md-preview-content .md-table th,
.md-preview-content .md-table td {{ border: 1px solid {border}; padding: 8px 12px; text-align: left; }}
.md-preview-content .md-table th {{ font-weight: 600; background: {code_background}; }}
.md-preview-content .md-table tr:nth-child(even) {{ background: {table_stripe}; }}
.md-preview-content .md-hr {{ border: none; border-top: 2px solid {border}; margin: 2em 0; }}
.md-preview-content .md-image {{ max-width: 100%; border-radius: 8px; margin: 1em 0; }}
.md-preview-content .md-toc {{
    background: {code_background};
    border: 1px solid {border};
    border-radius: 8px;
    padding: 16px;
    margin-bottom: 2em;
}}
.md-preview-content .md-toc-title {{ font-weight: 600; cursor: pointer; margin-bottom: 8px; }}
.md-preview-content .md-toc ul {{ list-style: none; padding-left: 0; margin: 0; }}
.md-preview-content .md-toc li {{ margin: 4px 0; }}
.md-preview-content .md-toc a {{ color: {link}; text-decoration: none; font-size: 0.9em; }}
.md-preview-content .md-toc a:hover {{ text-decoration: underline; }}
"""

_DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>{styles}</style>
</head>
<body>
<div class="md-preview-content">{body}</div>
</body>
</html>
"""


def generate_styles(theme: Theme = Theme.DARK) -> str:
    """Build the preview stylesheet for a theme.

    Every rule is scoped under ``.md-preview-content`` and covers all the
    classes the renderer emits.

    Args:
        theme: Color theme.

    Returns:
        str: CSS text.

    Examples:
        css = generate_styles(Theme.LIGHT)
    """
    return _STYLESHEET_TEMPLATE.format(**asdict(PALETTES[theme]))


def export_html(text: str, theme: Theme = Theme.DARK, title: str = DEFAULT_EXPORT_TITLE) -> str:
    """Render Markdown into a standalone, styled HTML document.

    Args:
        text: Markdown source.
        theme: Color theme for the embedded stylesheet.
        title: Document title; escaped before insertion.

    Returns:
        str: Complete HTML document.

    Examples:
        export_html("# Notes", Theme.LIGHT, title="Notes")
    """
    return _DOCUMENT_TEMPLATE.format(
        title=escape_html(title),
        styles=generate_styles(theme),
        body=render(text),
    )
