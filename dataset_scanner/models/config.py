"""
Configuration model for dataset scanning.

This module defines the ScanConfig class and ErrorMode enum, which control
the behavior of the scanner: which files are picked up, which dialect markers
delimit comments, macros and statements, and how per-file failures are handled.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ErrorMode(str, Enum):
    """Enumeration of error handling modes for per-file failures.

    Attributes:
        FAIL: Raise an exception immediately, aborting the scan.
        WARN: Record a diagnostic and continue with the next file.
        IGNORE: Silently skip the file.

    Example:
        >>> ErrorMode.values()
        ['fail', 'warn', 'ignore']
    """

    FAIL = "fail"
    WARN = "warn"
    IGNORE = "ignore"

    @classmethod
    def values(cls) -> list[str]:
        """Return a list of all possible error mode values.

        Returns:
            List of string values for all error modes in the enum.
        """
        return [member.value for member in cls]


DEFAULT_EXTENSIONS: Tuple[str, ...] = (".sas", ".sql", ".txt")


@dataclass
class ScanConfig:
    """Configuration settings for a dataset scan.

    All settings have defaults matching the SAS dialect, so a bare
    ``ScanConfig()`` is enough for most uses.

    Attributes:
        extensions: Recognized file extensions (case-insensitive, with dot).
        transient_library: Library whose datasets are temporary and never
            reported. Defaults to "work".
        null_dataset: Member name of the null dataset, never reported.
            Defaults to "_null_".
        macro_open: Keyword opening a macro definition.
        macro_close: Keyword closing a macro definition.
        terminator: Statement separator closing a logical block.
        line_comment_markers: Prefixes marking a whole line as a comment.
        macro_context_label: Context text for references inside a macro.
        encoding: Encoding used to read source files.
        max_workers: Number of files scanned concurrently (1 = sequential).
        on_unreadable: What to do with a file that cannot be read.

    Example:
        >>> config = ScanConfig(extensions=(".SAS",), max_workers=4)
        >>> config.extensions
        ('.sas',)
    """

    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    transient_library: str = "work"
    null_dataset: str = "_null_"
    macro_open: str = "%macro"
    macro_close: str = "%mend"
    terminator: str = ";"
    line_comment_markers: Tuple[str, ...] = ("*", "%*")
    macro_context_label: str = "Inside Macro"
    encoding: str = "utf-8"
    max_workers: int = 1
    on_unreadable: ErrorMode = ErrorMode.WARN

    def __post_init__(self) -> None:
        """Validate and normalize configuration settings."""
        if isinstance(self.extensions, str):
            self.extensions = (self.extensions,)
        if not self.extensions:
            raise ValueError("extensions must not be empty")
        self.extensions = tuple(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            for ext in self.extensions
        )
        if not self.terminator:
            raise ValueError("terminator must not be empty")
        if not self.macro_open or not self.macro_close:
            raise ValueError("macro_open and macro_close must not be empty")
        if not isinstance(self.max_workers, int) or self.max_workers < 1:
            raise ValueError("max_workers must be a positive integer")
        if not isinstance(self.on_unreadable, ErrorMode):
            raise TypeError("on_unreadable must be an ErrorMode instance")
        self.line_comment_markers = tuple(self.line_comment_markers)

    def is_recognized(self, suffix: str) -> bool:
        """Check whether a file suffix is one of the recognized extensions."""
        return suffix.lower() in self.extensions
