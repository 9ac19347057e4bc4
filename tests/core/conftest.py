"""
Shared fixtures for core module tests.

This module provides reusable pytest fixtures for testing core functionality,
including on-disk SCSS tree builders, in-memory readers and progress doubles.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from core.models import SourceFile
from models import FileRole
from ui.progress_display import NoOpProgressDisplay


@pytest.fixture
def scan_root(tmp_path):
    """Create an empty scan root for testing."""
    root = tmp_path / "scss"
    root.mkdir()
    return root


@pytest.fixture
def scss_tree_factory(scan_root):
    """Factory that writes a mapping of relative path -> content below scan_root."""

    def _factory(files: dict[str, str]) -> Path:
        for relative, content in files.items():
            target = scan_root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return scan_root

    return _factory


@pytest.fixture
def source_file_factory():
    """Factory for creating SourceFile instances from lines of content."""

    def _factory(path: str, role: FileRole, *lines: str) -> SourceFile:
        return SourceFile(path, role, "\n".join(lines))

    return _factory


@pytest.fixture
def mock_file_reader_factory():
    """Factory for creating MockFileReader instances with file content mappings."""

    def _factory(root: Path, file_contents: dict[str, str]):
        from core.file_io import MockFileReader

        return MockFileReader(root, file_contents)

    return _factory


@pytest.fixture
def progress_display():
    """Progress display for testing."""
    return NoOpProgressDisplay()


@pytest.fixture
def tracking_progress_display():
    """Progress display that records (method_name, *args) tuples in `calls`."""
    mock = MagicMock()
    mock.calls = []

    def make_tracker(method_name):
        def tracker(*args, **kwargs):
            mock.calls.append((method_name, *args, *kwargs.values()))

        return tracker

    mock.on_start = make_tracker("start")
    mock.on_advance = make_tracker("advance")
    mock.on_complete = make_tracker("complete")
    mock.__enter__ = MagicMock(return_value=mock)
    mock.__exit__ = MagicMock(return_value=None)

    return mock
