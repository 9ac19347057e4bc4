"""
Filesystem adapter for stylesheet discovery.

This module walks a scan root and lists every file carrying the recognized
extension. Entries within one directory are inspected concurrently and each
subdirectory is walked as its own task; a directory's listing only resolves
once all of its descendants have resolved, so the final list is complete
before it is sorted.
"""

import asyncio
import stat
from pathlib import Path
from typing import Protocol

import aiofiles.os

from constants import SCSS_EXTENSION
from core.exceptions import ConfigurationError, DiscoveryError


class FileEnumerator(Protocol):
    """Protocol for listing lintable files under a scan root."""

    async def enumerate(self, root: Path) -> list[str]:
        """
        List files under `root` with the recognized extension.

        Returns:
            Forward-slash paths relative to `root`, sorted lexicographically.

        Raises:
            ConfigurationError: If `root` is missing or not a directory.
            DiscoveryError: If a directory below `root` cannot be read.
        """


class FilesystemEnumerator:
    """
    Enumerates stylesheets by walking the filesystem.

    Attributes:
        extension: File extension (without the dot) to collect.
    """

    def __init__(self, extension: str = SCSS_EXTENSION):
        self.extension = extension
        self.suffix = f".{extension}"

    async def enumerate(self, root: Path) -> list[str]:
        try:
            root_stat = await aiofiles.os.stat(root)
        except OSError as e:
            raise ConfigurationError(
                message=f"Scan directory does not exist: {root}",
                root=str(root),
                original_exception=e,
            ) from e

        if not stat.S_ISDIR(root_stat.st_mode):
            raise ConfigurationError(
                message=f"Scan path is not a directory: {root}",
                root=str(root),
            )

        found = await self._walk(root, root)
        return sorted(found)

    async def _walk(self, directory: Path, root: Path) -> list[str]:
        try:
            names = await aiofiles.os.listdir(directory)
        except OSError as e:
            raise DiscoveryError(
                message=f"Unable to read directory: {directory}",
                path=str(directory),
                original_exception=e,
            ) from e

        nested = await asyncio.gather(
            *(self._visit(directory / name, root) for name in names)
        )
        return [path for paths in nested for path in paths]

    async def _visit(self, entry: Path, root: Path) -> list[str]:
        try:
            entry_stat = await aiofiles.os.stat(entry)
        except OSError as e:
            raise DiscoveryError(
                message=f"Unable to stat entry: {entry}",
                path=str(entry),
                original_exception=e,
            ) from e

        if stat.S_ISDIR(entry_stat.st_mode):
            return await self._walk(entry, root)

        if entry.name.endswith(self.suffix):
            return [entry.relative_to(root).as_posix()]
        return []


class MockFileEnumerator:
    """
    Mock implementation of FileEnumerator for testing.

    Returns a fixed list of relative paths (sorted, like the real walker) or
    raises a configured error.
    """

    def __init__(self, paths: list[str] | None = None, error: Exception | None = None):
        self.paths = paths or []
        self.error = error

        # Track calls for test inspection
        self.enumerate_calls: list[Path] = []

    async def enumerate(self, root: Path) -> list[str]:
        self.enumerate_calls.append(root)
        if self.error is not None:
            raise self.error
        return sorted(self.paths)
