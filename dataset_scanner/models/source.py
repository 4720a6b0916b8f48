"""
Source line models.

This module defines SourceFile, CodeLine and CleanedLine: the line stream a
file is turned into before statements are reassembled.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class CodeLine:
    """A raw physical line.

    Attributes:
        line_number: 1-based physical line number.
        text: Raw text, without the trailing newline.
    """

    line_number: int
    text: str


@dataclass(frozen=True)
class CleanedLine:
    """A physical line with comments removed.

    Only non-empty lines are ever produced; ``line_number`` is the number of
    the physical line the text came from.
    """

    line_number: int
    text: str


@dataclass
class SourceFile:
    """A source file loaded for one scan pass.

    Attributes:
        path: Path of the file.
        lines: Ordered raw lines.

    Example:
        >>> source = SourceFile.from_text(Path("job.sas"), "data a.b;\\nrun;")
        >>> [line.line_number for line in source.lines]
        [1, 2]
    """

    path: Path
    lines: List[CodeLine] = field(default_factory=list)

    @property
    def extension(self) -> str:
        """Lowercased file extension, including the dot."""
        return self.path.suffix.lower()

    @property
    def name(self) -> str:
        """Base name of the file."""
        return self.path.name

    @classmethod
    def from_text(cls, path: Path, text: str) -> "SourceFile":
        """Build a SourceFile from the full text of a file.

        Args:
            path: Path the text was read from.
            text: File contents.

        Returns:
            SourceFile with one CodeLine per physical line.
        """
        lines = [
            CodeLine(line_number=i, text=raw)
            for i, raw in enumerate(text.splitlines(), 1)
        ]
        return cls(path=Path(path), lines=lines)
