"""
md-preview: Markdown to HTML preview renderer.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    md-preview README.md --standalone --theme light -o README.html

Library Usage:
    from md_preview import render, export_html, Theme

    fragment = render("# Title\\n\\nSome **bold** text")
    document = export_html("# Title", Theme.LIGHT, title="Title")
"""

from .config import ConfigError, PreviewConfig
from .document import render_document, render_file
from .exceptions import FileTooLargeError, RenderFileError
from .headings import collect_headings, render_toc
from .inline import escape_html, format_inline
from .models import DocumentStats, HeadingEntry
from .renderer import render
from .slugify import generate_slug
from .stats import document_stats
from .styles import Theme, export_html, generate_styles

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "render",
    "format_inline",
    "collect_headings",
    "render_toc",
    "generate_slug",
    "escape_html",
    # Export and statistics
    "export_html",
    "generate_styles",
    "document_stats",
    "render_document",
    "render_file",
    "Theme",
    # Data models
    "DocumentStats",
    "HeadingEntry",
    "PreviewConfig",
    # Exceptions
    "ConfigError",
    "FileTooLargeError",
    "RenderFileError",
    # Version
    "__version__",
]
