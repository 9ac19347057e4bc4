"""
Tests for the file_io module using pytest.

Tests cover:
- FilesystemFileReader: reading files, invalid UTF-8, missing files
- MockFileReader: mapping lookups, call tracking, missing entries
"""

import asyncio
from pathlib import Path
import pytest

from core.exceptions import LoadError
from core.file_io import FilesystemFileReader, MockFileReader


# ============================================================================
# Tests for FilesystemFileReader.read_file
# ============================================================================


@pytest.mark.unit
def test_read_file_success(tmp_path):
    """Should read a text file in full, keeping line terminators."""
    file_path = tmp_path / "config.scss"
    content = "$colorRed: #ff0000;\r\n$colorBlue: #0000ff;\n"
    file_path.write_bytes(content.encode("utf-8"))

    result = asyncio.run(FilesystemFileReader().read_file(file_path))

    assert result == content


@pytest.mark.unit
def test_read_file_invalid_utf8_ignored(tmp_path):
    """Should drop invalid UTF-8 bytes instead of failing."""
    file_path = tmp_path / "style.scss"
    file_path.write_bytes(b"\xff.body {}")

    result = asyncio.run(FilesystemFileReader().read_file(file_path))

    assert result == ".body {}"


@pytest.mark.unit
def test_read_file_nonexistent_raises_load_error(tmp_path):
    """A missing file should raise LoadError wrapping the OSError."""
    file_path = tmp_path / "missing.scss"

    with pytest.raises(LoadError) as exc_info:
        asyncio.run(FilesystemFileReader().read_file(file_path))

    assert exc_info.value.file_path == str(file_path)
    assert isinstance(exc_info.value.original_exception, FileNotFoundError)
    assert "Unable to open" in exc_info.value.message


@pytest.mark.unit
def test_read_file_directory_raises_load_error(tmp_path):
    """Reading a directory should raise LoadError."""
    directory = tmp_path / "layout.scss"
    directory.mkdir()

    with pytest.raises(LoadError):
        asyncio.run(FilesystemFileReader().read_file(directory))


# ============================================================================
# Tests for MockFileReader
# ============================================================================


@pytest.mark.unit
def test_mock_reader_serves_mapping():
    """MockFileReader should resolve paths relative to its root."""
    root = Path("/scss")
    reader = MockFileReader(root, {"module/pageheader.scss": ".pageheader {}"})

    result = asyncio.run(reader.read_file(root / "module" / "pageheader.scss"))

    assert result == ".pageheader {}"
    assert reader.read_file_calls == [root / "module" / "pageheader.scss"]


@pytest.mark.unit
def test_mock_reader_missing_entry_raises_load_error():
    """Paths missing from the mapping should behave like unreadable files."""
    reader = MockFileReader(Path("/scss"), {})

    with pytest.raises(LoadError):
        asyncio.run(reader.read_file(Path("/scss/config.scss")))


@pytest.mark.unit
def test_mock_reader_uses_read_file_fn():
    """read_file_fn should take precedence over the mapping."""
    reader = MockFileReader(Path("/scss"), read_file_fn=lambda path: path.name)

    assert asyncio.run(reader.read_file(Path("/scss/mixin.scss"))) == "mixin.scss"
