from pathlib import Path
from typing import Callable, Protocol

import aiofiles

from constants import FILE_ENCODING
from core.exceptions import LoadError


class FileReader(Protocol):
    """
    Protocol defining the interface for loading stylesheet content.

    This protocol specifies how the lint run obtains file text, allowing
    different implementations for production (filesystem) and testing (mocks).
    """

    async def read_file(self, file_path: Path) -> str:
        """
        Read the full text content of a file.

        Args:
            file_path: The path to the file to read.

        Returns:
            The file content as a string.

        Raises:
            LoadError: If the file cannot be read.
        """


class FilesystemFileReader:

    async def read_file(self, file_path: Path) -> str:
        """
        Read the text content of a file as UTF-8 without blocking the event loop.

        Invalid UTF-8 sequences are silently dropped (errors="ignore"), so only
        genuine I/O failures (missing file, permissions, directories) raise.

        Args:
            file_path: The path to the file to read.

        Returns:
            The file content as a string.

        Raises:
            LoadError: If the file does not exist or an I/O error occurs.
        """
        try:
            async with aiofiles.open(
                file_path, "r", encoding=FILE_ENCODING, errors="ignore"
            ) as f:
                return await f.read()
        except OSError as e:
            raise LoadError(
                message=f"Unable to open {file_path} for reading",
                file_path=str(file_path),
                original_exception=e,
            ) from e


class MockFileReader:
    """
    Mock implementation of FileReader for testing.

    Serves file contents from an in-memory mapping keyed by path relative to
    a root, so tests can drive the lint run without touching the filesystem.
    Paths missing from the mapping raise `LoadError`, like unreadable files.
    """

    def __init__(
        self,
        root: Path,
        file_contents: dict[str, str] | None = None,
        read_file_fn: Callable[[Path], str] | None = None,
    ):
        """
        Initialize MockFileReader with configurable reading behavior.

        Args:
            root: Root that the keys of `file_contents` are relative to.
            file_contents: Mapping of forward-slash relative path to content.
            read_file_fn: Optional callable used instead of the mapping.

        Attributes (for test inspection):
            read_file_calls: List of file paths passed to read_file()
        """
        self.root = root
        self.file_contents = file_contents or {}
        self.read_file_fn = read_file_fn

        # Track calls for test inspection
        self.read_file_calls: list[Path] = []

    async def read_file(self, file_path: Path) -> str:
        self.read_file_calls.append(file_path)
        if self.read_file_fn is not None:
            return self.read_file_fn(file_path)

        relative = file_path.relative_to(self.root).as_posix()
        if relative not in self.file_contents:
            raise LoadError(
                message=f"Unable to open {file_path} for reading",
                file_path=str(file_path),
                original_exception=FileNotFoundError(relative),
            )
        return self.file_contents[relative]
