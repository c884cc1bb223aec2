from __future__ import annotations

import textwrap
from pathlib import Path

import md_preview.cli as cli_module
from md_preview.cli import cli
from md_preview.styles import Theme, generate_styles


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_cli_prints_fragment(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(
        tmp_path,
        "doc.md",
        """
        # Introduction
        Some **bold** text.
        """,
    )

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert result.output == (
        '<h1 id="introduction">Introduction</h1><p>Some <strong>bold</strong> text.</p>\n'
    )
    assert target.read_text(encoding="utf-8").startswith("# Introduction")


def test_cli_prints_standalone_document(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.md", "text\n")

    result = cli_runner.invoke(cli, ["--standalone", "--theme", "light", "--title", "Doc", str(target)])

    assert result.exit_code == 0
    assert result.output.startswith("<!DOCTYPE html>")
    assert "<title>Doc</title>" in result.output
    assert generate_styles(Theme.LIGHT) in result.output


def test_cli_writes_output_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.md", "# Title\n")
    output = tmp_path / "doc.html"

    result = cli_runner.invoke(cli, ["-o", str(output), str(target)])

    assert result.exit_code == 0
    assert result.output == ""
    assert output.read_text(encoding="utf-8") == '<h1 id="title">Title</h1>'


def test_cli_reports_output_errors(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.md", "# Title\n")

    result = cli_runner.invoke(cli, ["-o", str(tmp_path / "missing" / "doc.html"), str(target)])

    assert result.exit_code != 0
    assert "does not exist" in result.output


def test_cli_prints_stats(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.md", "# Hi\nthere\n")
    output = tmp_path / "doc.html"

    result = cli_runner.invoke(cli, ["--stats", "-o", str(output), str(target)])

    assert result.exit_code == 0
    assert "2 lines, 3 words, 11 characters" in result.output


def test_cli_rejects_non_markdown_files(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "notes.rst", "Heading\n=======\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code != 0
    assert "not a Markdown file" in result.output


def test_cli_rejects_files_outside_working_directory(cli_runner, tmp_path, monkeypatch):
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    target = _write(tmp_path, "outside.md", "# Outside\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code != 0
    assert "outside of the working directory" in result.output


def test_cli_reads_config_from_pyproject(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.md-preview]
        standalone = true
        theme = "light"
        title = "Configured"
        """,
    )
    target = _write(tmp_path, "configured.md", "# Top\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert "<title>Configured</title>" in result.output
    assert generate_styles(Theme.LIGHT) in result.output


def test_cli_flags_override_config(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.md-preview]
        standalone = true
        """,
    )
    target = _write(tmp_path, "override.md", "# Top\n")

    result = cli_runner.invoke(cli, ["--fragment", str(target)])

    assert result.exit_code == 0
    assert result.output == '<h1 id="top">Top</h1>\n'


def test_cli_rejects_invalid_config(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.md-preview]
        theme = "sepia"
        """,
    )
    target = _write(tmp_path, "doc.md", "# Top\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code != 0
    assert "sepia" in result.output


def test_cli_rejects_unknown_theme_option(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.md", "# Top\n")

    result = cli_runner.invoke(cli, ["--theme", "sepia", str(target)])

    assert result.exit_code != 0


def test_cli_public_api():
    assert cli_module.__all__ == ["cli"]
