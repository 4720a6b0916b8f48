"""
Custom exception classes for dataset scanning.

This module defines all custom exceptions used throughout the dataset scanner
package. Only an unusable root path is fatal for a scan; per-file failures are
raised here and turned into diagnostics by the per-file pipeline.
"""

from pathlib import Path
from typing import Optional, Union


class ScanError(Exception):
    """Base exception class for all dataset scanning errors.

    Attributes:
        message: Human-readable error message describing the error.
    """

    def __init__(self, message: str) -> None:
        """Initialize a ScanError with a message.

        Args:
            message: Error message describing what went wrong.
        """
        self.message = message
        super().__init__(self.message)


class PathNotFoundError(ScanError):
    """Exception raised when the root path of a scan does not exist.

    This error is fatal: the whole scan is aborted.

    Attributes:
        message: Error message.
        path: The path that could not be found.
    """

    def __init__(self, path: Union[str, Path], message: Optional[str] = None) -> None:
        """Initialize a PathNotFoundError.

        Args:
            path: The missing path.
            message: Optional custom message.
        """
        self.path = str(path)
        super().__init__(message or f"Path not found: {self.path}")


class FileUnreadableError(ScanError):
    """Exception raised when a candidate file exists but cannot be read.

    Attributes:
        message: Error message.
        path: The file that could not be read.
        reason: Underlying reason reported by the operating system.
    """

    def __init__(self, path: Union[str, Path], reason: str = "") -> None:
        """Initialize a FileUnreadableError.

        Args:
            path: The unreadable file.
            reason: Optional description of the underlying failure.
        """
        self.path = str(path)
        self.reason = reason
        message = f"Cannot read file: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
