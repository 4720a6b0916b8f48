"""
Comment stripper for program files.

This module defines the CommentStripper class, a small per-file state machine
that removes block comments (``/* ... */``) and whole-line comments (``* ...;``)
from a stream of raw lines.
"""

import re
from typing import Iterable, Iterator, Optional, Tuple

from dataset_scanner.models.config import ScanConfig
from dataset_scanner.models.source import CleanedLine, CodeLine

BLOCK_OPEN = "/*"
BLOCK_CLOSE = "*/"

# Leftmost, non-greedy: only the first span of a line is removed.
BLOCK_SPAN_PATTERN = re.compile(r"/\*.*?\*/")


class CommentStripper:
    """Removes comments from a line stream.

    The only state is whether a block comment is open, and it is reset on
    every call to ``strip`` so that one file can never leak an unclosed
    comment into the next.

    Known limitation: a second comment span on the same physical line is
    left in place.

    Usage:
        stripper = CommentStripper()
        cleaned = list(stripper.strip(source.lines))
    """

    def __init__(self, config: Optional[ScanConfig] = None) -> None:
        self.config = config or ScanConfig()
        self._line_comment_markers = tuple(self.config.line_comment_markers)

    def strip(self, lines: Iterable[CodeLine]) -> Iterator[CleanedLine]:
        """Yield the non-empty remainder of each line.

        Args:
            lines: Raw lines of one file, in order.

        Yields:
            CleanedLine for every line that still has text after comment
            removal; line numbers are preserved.
        """
        in_block_comment = False
        for line in lines:
            text, in_block_comment = self.strip_line(line.text, in_block_comment)
            text = text.strip()
            if text:
                yield CleanedLine(line_number=line.line_number, text=text)

    def strip_line(self, text: str, in_block_comment: bool) -> Tuple[str, bool]:
        """Remove comments from a single line.

        Args:
            text: Raw line text.
            in_block_comment: Whether a block comment is open on entry.

        Returns:
            Tuple of (remaining text, block comment open on exit).
        """
        if in_block_comment:
            close = text.find(BLOCK_CLOSE)
            if close == -1:
                return "", True
            text = text[close + len(BLOCK_CLOSE):]
            in_block_comment = False

        span = BLOCK_SPAN_PATTERN.search(text)
        if span:
            text = text[: span.start()] + text[span.end():]
        elif BLOCK_OPEN in text:
            text = text[: text.index(BLOCK_OPEN)]
            in_block_comment = True

        if self._is_comment_line(text):
            text = ""
        return text, in_block_comment

    def _is_comment_line(self, text: str) -> bool:
        stripped = text.lstrip()
        if stripped.startswith(BLOCK_CLOSE):
            return True
        return bool(self._line_comment_markers) and stripped.startswith(
            self._line_comment_markers
        )
