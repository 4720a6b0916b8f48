"""
Diagnostic collection for dataset scanning.

This module defines warning and error collection functionality for the
scanner. Per-file conditions (unreadable files, unterminated blocks, blocks
without a qualified name) never abort a scan; they are collected here and
reported to the user alongside the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


@dataclass(frozen=True)
class ScanWarning:
    """Warning or error message produced during a scan.

    Attributes:
        level: Severity level ("INFO", "WARNING", "ERROR").
        message: Message text.
        source_file: Optional file the message is about.
        line_number: Optional line the message is about.

    Example:
        >>> warning = ScanWarning(level="WARNING", message="Cannot read file")
        >>> warning.level
        'WARNING'
    """

    level: str
    message: str
    source_file: Optional[str] = None
    line_number: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate warning level."""
        if self.level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid warning level: {self.level}. "
                f"Must be one of {list(_LOG_LEVELS)}"
            )

    def location(self) -> str:
        """Return "file:line", "file" or "" depending on what is known."""
        if self.source_file and self.line_number is not None:
            return f"{self.source_file}:{self.line_number}"
        return self.source_file or ""

    def __str__(self) -> str:
        where = self.location()
        return f"{where}: {self.message}" if where else self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "level": self.level,
            "message": self.message,
            "source_file": self.source_file,
            "line_number": self.line_number,
        }


class WarningCollector:
    """Collects warnings and errors during a scan.

    Every message added is also forwarded to the ``logging`` module.

    Example:
        >>> collector = WarningCollector()
        >>> collector.add("WARNING", "Unterminated DataStep block")
        >>> collector.has_errors()
        False
        >>> collector.add("ERROR", "Cannot read file")
        >>> collector.has_errors()
        True
    """

    def __init__(self) -> None:
        """Initialize a WarningCollector."""
        self.warnings: list[ScanWarning] = []

    def add(
        self,
        level: str,
        message: str,
        source_file: Optional[str] = None,
        line_number: Optional[int] = None,
    ) -> None:
        """Add a warning or error message.

        Args:
            level: Severity level ("INFO", "WARNING", "ERROR").
            message: Message text.
            source_file: Optional file the message is about.
            line_number: Optional line the message is about.
        """
        warning = ScanWarning(
            level=level,
            message=message,
            source_file=source_file,
            line_number=line_number,
        )
        self.warnings.append(warning)
        logger.log(_LOG_LEVELS[level], "%s", warning)

    def extend(self, warnings: Iterable[ScanWarning]) -> None:
        """Append already-built warnings (e.g. from another collector).

        Nothing is logged again.
        """
        self.warnings.extend(warnings)

    def has_errors(self) -> bool:
        """Check if any error-level warnings exist."""
        return any(warning.level == "ERROR" for warning in self.warnings)

    def get_all(self) -> list[ScanWarning]:
        """Get all collected warnings and errors, in the order added."""
        return self.warnings.copy()

    def get_by_level(self, level: str) -> list[ScanWarning]:
        """Get warnings and errors by severity level.

        Args:
            level: Severity level to filter by ("INFO", "WARNING", "ERROR").

        Returns:
            List of ScanWarning objects with the specified level.
        """
        return [warning for warning in self.warnings if warning.level == level]

    def clear(self) -> None:
        """Clear all collected warnings and errors."""
        self.warnings.clear()

    def add_unreadable_warning(self, source_file: str, reason: str) -> None:
        """Record a file that was skipped because it could not be read."""
        self.add("WARNING", f"Skipped unreadable file ({reason})", source_file)

    def add_unterminated_warning(
        self, source_file: str, block_type: str, start_line: int
    ) -> None:
        """Record a block flushed at end of file without a terminator."""
        message = (
            f"{block_type} block opened at line {start_line} is not terminated; "
            f"flushing partial block at end of file"
        )
        self.add("WARNING", message, source_file, start_line)

    def add_no_match_info(
        self, source_file: str, block_type: str, start_line: int
    ) -> None:
        """Record a block that yielded no qualified dataset name."""
        message = f"{block_type} block creates no permanent dataset"
        self.add("INFO", message, source_file, start_line)

    def add_unsupported_extension_warning(
        self, source_file: str, extensions: Iterable[str]
    ) -> None:
        """Record a root file whose extension is not recognized."""
        message = (
            f"File extension not recognized; expected one of "
            f"{', '.join(extensions)}"
        )
        self.add("WARNING", message, source_file)

    def get_summary(self) -> dict[str, int]:
        """Get a summary of warnings by level.

        Example:
            >>> collector = WarningCollector()
            >>> collector.add("INFO", "Info 1")
            >>> collector.add("WARNING", "Warning 1")
            >>> collector.get_summary() == {"INFO": 1, "WARNING": 1, "ERROR": 0}
            True
        """
        summary: dict[str, int] = {"INFO": 0, "WARNING": 0, "ERROR": 0}
        for warning in self.warnings:
            summary[warning.level] = summary.get(warning.level, 0) + 1
        return summary
