"""
Custom exception classes for the Sassline CLI.

This module defines the errors raised while locating the scan root, walking
the stylesheet tree and loading individual files. Naming violations are not
exceptions: they are collected as `LintError` records in the lint report.

Fatal errors (`ConfigurationError`, `DiscoveryError`, `EmptyScanError`) stop a
run before any report is produced. `LoadError` is recoverable: the affected
file is skipped and the run carries on with its siblings.
"""

import os
from typing import Optional


class SasslineError(Exception):
    """
    Base exception for all errors raised by the linter.

    Attributes:
        message: A human-readable error message describing what went wrong.
        original_exception: The underlying exception that caused this error, if any.
        diagnostic_info: A dictionary containing diagnostic information including
            exception type, details, and OS name.
    """

    default_message = "An error occurred while linting"

    def __init__(
        self,
        message: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.original_exception = original_exception
        self.diagnostic_info = {
            "type": (
                type(original_exception).__name__ if original_exception else "Unknown"
            ),
            "details": str(original_exception) if original_exception else "No details",
            "os_name": os.name,
        }


class ConfigurationError(SasslineError):
    """
    Raised when the scan root does not exist or is not a directory.

    Attributes:
        root: The scan root that was rejected, as given.
    """

    default_message = "Scan directory does not exist and/or is not a directory"

    def __init__(
        self,
        message: Optional[str] = None,
        root: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message=message, original_exception=original_exception)
        self.root = root


class DiscoveryError(SasslineError):
    """
    Raised when a directory or entry below the scan root cannot be read
    while enumerating files. Aborts the run; no partial report is produced.

    Attributes:
        path: The directory or entry that could not be read.
    """

    default_message = "Unable to read directory while discovering files"

    def __init__(
        self,
        message: Optional[str] = None,
        path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message=message, original_exception=original_exception)
        self.path = path


class LoadError(SasslineError):
    """
    Raised when a single stylesheet cannot be read.

    The lint run catches this at the file boundary, records the file as
    skipped and continues with the remaining files.

    Attributes:
        file_path: The path of the file that could not be read.
    """

    default_message = "Unable to open file for reading"

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message=message, original_exception=original_exception)
        self.file_path = file_path


class EmptyScanError(SasslineError):
    """Raised when the scan root holds no files with the recognized extension."""

    default_message = "Unable to locate any files to lint"
