from __future__ import annotations

import os
import socket
import stat
from pathlib import Path

import pytest

from md_preview.exceptions import FileTooLargeError
from md_preview.filesystem import (
    NEW_FILE_MODE,
    check_source_file,
    find_symlink,
    max_file_size_from_env,
    read_utf8,
    resolve_source,
    write_output,
)


@pytest.fixture()
def source(tmp_path: Path) -> Path:
    path = tmp_path / "doc.md"
    path.write_text("# Heading\n", encoding="utf-8")
    return path


@pytest.mark.parametrize(("raw", "expected"), [(None, 123), ("", 123), ("  ", 123), ("2048", 2048)])
def test_max_file_size_from_env(monkeypatch, raw: str | None, expected: int):
    if raw is None:
        monkeypatch.delenv("MD_PREVIEW_MAX_FILE_SIZE", raising=False)
    else:
        monkeypatch.setenv("MD_PREVIEW_MAX_FILE_SIZE", raw)

    assert max_file_size_from_env(default=123) == expected


@pytest.mark.parametrize("raw", ["invalid", "0", "-5", "1.5", "10kb"])
def test_max_file_size_from_env_rejects_bad_values(monkeypatch, raw: str):
    monkeypatch.setenv("MD_PREVIEW_MAX_FILE_SIZE", raw)

    with pytest.raises(ValueError, match="positive number of bytes"):
        max_file_size_from_env()


def test_find_symlink_returns_linked_component(tmp_path: Path, source: Path):
    linked_dir = tmp_path / "current"
    os.symlink(tmp_path, linked_dir, target_is_directory=True)

    assert find_symlink(linked_dir / source.name) == linked_dir
    assert find_symlink(source) is None


def test_find_symlink_skips_uninspectable_components(monkeypatch, source: Path):
    original_is_symlink = Path.is_symlink

    def _flaky_is_symlink(self):
        if self == source:
            raise OSError("stat boom")
        return original_is_symlink(self)

    monkeypatch.setattr(Path, "is_symlink", _flaky_is_symlink)
    assert find_symlink(source) is None


def test_resolve_source_returns_resolved_path(tmp_path: Path, source: Path):
    assert resolve_source(str(source), tmp_path.resolve()) == source.resolve()


def test_resolve_source_missing_file(tmp_path: Path):
    with pytest.raises(ValueError, match="No such file"):
        resolve_source(str(tmp_path / "missing.md"), tmp_path)


def test_resolve_source_handles_oserror(monkeypatch, tmp_path: Path, source: Path):
    original_resolve = Path.resolve

    def _raise_oserror(self, strict=False):
        if self == source:
            raise OSError("resolve boom")
        return original_resolve(self, strict=strict)

    monkeypatch.setattr(Path, "resolve", _raise_oserror)
    with pytest.raises(ValueError, match="Cannot resolve"):
        resolve_source(str(source), tmp_path)


def test_resolve_source_rejects_directory(tmp_path: Path):
    folder = tmp_path / "folder.md"
    folder.mkdir()

    with pytest.raises(ValueError, match="not a regular file"):
        resolve_source(str(folder), tmp_path)


def test_resolve_source_rejects_symlink(tmp_path: Path, source: Path):
    link = tmp_path / "alias.md"
    os.symlink(source, link)

    with pytest.raises(ValueError, match="symlink"):
        resolve_source(str(link), tmp_path.resolve())


def test_resolve_source_rejects_other_extensions(tmp_path: Path):
    target = tmp_path / "page.html"
    target.write_text("<p>hi</p>", encoding="utf-8")

    with pytest.raises(ValueError, match="not a Markdown file"):
        resolve_source(str(target), tmp_path.resolve())


def test_resolve_source_accepts_uppercase_extension(tmp_path: Path):
    target = tmp_path / "NOTES.MD"
    target.write_text("# Notes\n", encoding="utf-8")

    assert resolve_source(str(target), tmp_path.resolve()).name == "NOTES.MD"


def test_check_source_file_returns_stat(source: Path):
    assert check_source_file(source, max_size=100).st_size == len("# Heading\n")


def test_check_source_file_handles_missing_file(tmp_path: Path):
    with pytest.raises(IOError, match="Cannot access"):
        check_source_file(tmp_path / "missing.md", max_size=100)


def test_check_source_file_rejects_symlink(tmp_path: Path, source: Path):
    link = tmp_path / "alias.md"
    os.symlink(source, link)

    with pytest.raises(IOError, match="symlink"):
        check_source_file(link, max_size=100)


def test_check_source_file_rejects_directory(tmp_path: Path):
    with pytest.raises(IOError, match="not a regular file"):
        check_source_file(tmp_path, max_size=100)


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="mkfifo not available")
def test_check_source_file_rejects_fifo(tmp_path: Path):
    fifo = tmp_path / "pipe.md"
    try:
        os.mkfifo(fifo)
    except OSError:  # pragma: no cover
        pytest.skip("Unable to create FIFO")

    with pytest.raises(IOError, match="not a regular file"):
        check_source_file(fifo, max_size=100)


@pytest.mark.skipif(not hasattr(socket, "AF_UNIX"), reason="Unix sockets not available")
def test_check_source_file_rejects_socket(tmp_path: Path):
    socket_path = tmp_path / "socket.md"
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.bind(str(socket_path))
    except OSError:  # pragma: no cover
        pytest.skip("Unable to create socket")
    finally:
        sock.close()

    with pytest.raises(IOError, match="not a regular file"):
        check_source_file(socket_path, max_size=100)


def test_check_source_file_enforces_size(source: Path):
    size = len("# Heading\n")
    check_source_file(source, max_size=size)

    with pytest.raises(FileTooLargeError) as exc_info:
        check_source_file(source, max_size=size - 1)

    assert exc_info.value.size == size
    assert exc_info.value.limit == size - 1
    assert f"exceeding the maximum allowed size of {size - 1} bytes" in str(exc_info.value)


def test_read_utf8(tmp_path: Path):
    target = tmp_path / "unicode.md"
    target.write_text("# Café \U0001F680\n", encoding="utf-8")

    assert read_utf8(target) == "# Café \U0001F680\n"


def test_read_utf8_raises_for_directory(tmp_path: Path):
    with pytest.raises(IOError, match="Cannot read"):
        read_utf8(tmp_path)


def test_read_utf8_propagates_decode_errors(tmp_path: Path):
    target = tmp_path / "binary.md"
    target.write_bytes(b"\xff\xfe")

    with pytest.raises(UnicodeDecodeError):
        read_utf8(target)


def test_write_output_creates_file(tmp_path: Path):
    target = tmp_path / "out.html"

    write_output(target, "<p>café</p>")

    assert target.read_text(encoding="utf-8") == "<p>café</p>"
    assert stat.S_IMODE(target.stat().st_mode) == NEW_FILE_MODE
    assert [path.name for path in tmp_path.iterdir()] == ["out.html"]


def test_write_output_preserves_permissions(tmp_path: Path):
    target = tmp_path / "out.html"
    target.write_text("old", encoding="utf-8")
    target.chmod(0o600)

    write_output(target, "new")

    assert target.read_text(encoding="utf-8") == "new"
    assert stat.S_IMODE(target.stat().st_mode) == 0o600


def test_write_output_rejects_symlink(tmp_path: Path):
    real = tmp_path / "real.html"
    real.write_text("keep", encoding="utf-8")
    link = tmp_path / "link.html"
    os.symlink(real, link)

    with pytest.raises(IOError, match="symlink"):
        write_output(link, "overwrite")
    assert real.read_text(encoding="utf-8") == "keep"


def test_write_output_rejects_directory(tmp_path: Path):
    with pytest.raises(IOError, match="is a directory"):
        write_output(tmp_path, "content")


def test_write_output_requires_existing_parent(tmp_path: Path):
    with pytest.raises(IOError, match="does not exist"):
        write_output(tmp_path / "missing" / "out.html", "content")


def test_write_output_cleans_up_on_failure(monkeypatch, tmp_path: Path):
    target = tmp_path / "out.html"

    def _fail_replace(src, dst):
        raise OSError("replace boom")

    monkeypatch.setattr(os, "replace", _fail_replace)

    with pytest.raises(IOError, match="Error writing"):
        write_output(target, "content")
    assert list(tmp_path.iterdir()) == []
