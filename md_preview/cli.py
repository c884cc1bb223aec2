"""
Renders a Markdown file to HTML.
Prints the result to stdout, or writes it to a file with `--output`.
"""

from __future__ import annotations

from pathlib import Path

import click
from .config import ConfigError, apply_overrides, build_config
from .document import read_markdown, render_document
from .exceptions import RenderFileError
from .filesystem import max_file_size_from_env, resolve_source, write_output
from .stats import document_stats

__all__ = ["cli"]


@click.command()
@click.version_option(package_name="md-preview")
@click.option("--theme", type=click.Choice(["dark", "light"]), help="Stylesheet theme")
@click.option(
    "--standalone/--fragment",
    default=None,
    help="Emit a full HTML document with embedded styles, or only the body fragment",
)
@click.option("--title", help="Title of the standalone document")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    help="Write the HTML to this file instead of stdout",
)
@click.option("--stats", is_flag=True, help="Print line, word, and character counts to stderr")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    theme: str | None = None,
    standalone: bool | None = None,
    title: str | None = None,
    output: str | None = None,
    stats: bool = False,
):
    """
    Entry point for rendering a Markdown file to HTML.

    Args:
        filepath: Path to the Markdown file to render.
        theme: Override for the stylesheet theme.
        standalone: Override for emitting a full document.
        title: Override for the standalone document title.
        output: Destination file; stdout when omitted.
        stats: Whether to report document statistics.

    Returns:
        None.

    Raises:
        click.BadParameter: If the path is invalid or the configuration contains
            unsupported values.
        click.ClickException: If the file is too large, cannot be read or
            decoded, or the output cannot be written.

    Examples:
        md-preview README.md --standalone --theme light -o README.html
    """
    base_dir = Path.cwd().resolve()
    try:
        filepath = resolve_source(filepath, base_dir)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error
    try:
        config = build_config(filepath.parent, theme=theme, standalone=standalone, title=title)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = max_file_size_from_env(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error
    config = apply_overrides(config, max_file_size=max_file_size)

    try:
        text = read_markdown(filepath, config.max_file_size)
    except RenderFileError as error:
        raise click.ClickException(str(error)) from error

    html = render_document(text, config)

    if stats:
        counts = document_stats(text)
        click.echo(
            f"{counts.lines} lines, {counts.words} words, {counts.characters} characters",
            err=True,
        )

    if output is None:
        click.echo(html)
        return

    try:
        write_output(Path(output), html)
    except IOError as error:
        raise click.ClickException(str(error)) from error


if __name__ == "__main__":
    cli()
