"""
Block merger for DATA steps and PROC SQL CREATE TABLE statements.

This module defines the BlockMerger class, which reassembles statements that
span several physical lines into LogicalBlock objects, and the MergeContext
that carries all per-file state (merge state, macro context, accumulator).

Precedence rule: DATA is tested before CREATE TABLE, and while a block is
open no other block can open. An opening keyword met inside an open block is
ordinary text of that block.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from dataset_scanner.models.block_type import BlockType
from dataset_scanner.models.config import ScanConfig
from dataset_scanner.models.logical_block import LogicalBlock
from dataset_scanner.models.source import CleanedLine
from dataset_scanner.utils.warnings import WarningCollector

DATA_OPEN_PATTERN = re.compile(r"^\s*data\b", re.IGNORECASE)
SQL_OPEN_PATTERN = re.compile(r"\bcreate\s+table\b", re.IGNORECASE)


class MergeState(Enum):
    """Which kind of block, if any, is currently open."""

    IDLE = "idle"
    IN_DATA = "in_data"
    IN_SQL = "in_sql"

    @property
    def block_type(self) -> Optional[BlockType]:
        """Block type being accumulated, or None when idle."""
        return _STATE_BLOCK_TYPES.get(self)


_STATE_BLOCK_TYPES = {
    MergeState.IN_DATA: BlockType.DATA_STEP,
    MergeState.IN_SQL: BlockType.SQL_CREATE_TABLE,
}


@dataclass
class MergeContext:
    """Per-file merge state.

    A fresh context is created for every file, so neither an open block nor
    the macro flag can cross a file boundary.

    Attributes:
        state: Current merge state.
        in_macro: Whether the current line is inside a macro definition.
        start_line: First line of the open block.
        block_in_macro: Macro flag captured when the open block started.
        parts: Cleaned lines accumulated for the open block.
    """

    state: MergeState = MergeState.IDLE
    in_macro: bool = False
    start_line: int = 0
    block_in_macro: bool = False
    parts: List[str] = field(default_factory=list)

    @property
    def is_open(self) -> bool:
        return self.state is not MergeState.IDLE

    def open(self, state: MergeState, line: CleanedLine) -> None:
        self.state = state
        self.start_line = line.line_number
        self.block_in_macro = self.in_macro
        self.parts = [line.text]

    def append(self, line: CleanedLine) -> None:
        self.parts.append(line.text)

    def close(self, terminated: bool = True) -> LogicalBlock:
        block = LogicalBlock(
            block_type=self.state.block_type,
            start_line=self.start_line,
            combined_text=" ".join(self.parts),
            in_macro=self.block_in_macro,
            terminated=terminated,
        )
        self.state = MergeState.IDLE
        self.parts = []
        return block


class BlockMerger:
    """Reassembles multi-line statements into logical blocks.

    Responsibilities:
    1. Track macro context on every line
    2. Open a block on ``data`` (line start) or ``create table``
    3. Accumulate lines until the statement terminator
    4. Flush a block left open at end of file

    A statement that opens and terminates on the same line is a one-line
    block. For CREATE TABLE only the text after the keyword is checked for
    the terminator, so ``proc sql; create table lib.`` keeps the block open.

    Usage:
        merger = BlockMerger(config, warnings)
        blocks = merger.merge(cleaned_lines, source_file="job.sas")
    """

    def __init__(
        self,
        config: Optional[ScanConfig] = None,
        warnings: Optional[WarningCollector] = None,
    ) -> None:
        self.config = config or ScanConfig()
        self.warnings = warnings if warnings is not None else WarningCollector()
        self._macro_open = self.config.macro_open.lower()
        self._macro_close = self.config.macro_close.lower()

    def merge(
        self, lines: Iterable[CleanedLine], source_file: str = ""
    ) -> List[LogicalBlock]:
        """Merge the cleaned lines of one file into logical blocks.

        Args:
            lines: Cleaned lines of a single file, in order.
            source_file: File name used in diagnostics.

        Returns:
            Logical blocks in the order they were opened.
        """
        context = MergeContext()
        blocks: List[LogicalBlock] = []

        for line in lines:
            self._track_macro(context, line.text)

            if not context.is_open:
                block = self._try_open(context, line)
            else:
                context.append(line)
                block = context.close() if self._terminates(line.text) else None

            if block is not None:
                blocks.append(block)

        if context.is_open:
            self.warnings.add_unterminated_warning(
                source_file, context.state.block_type.value, context.start_line
            )
            blocks.append(context.close(terminated=False))

        return blocks

    def _track_macro(self, context: MergeContext, text: str) -> None:
        lowered = text.lower()
        if self._macro_open in lowered:
            context.in_macro = True
        if self._macro_close in lowered:
            context.in_macro = False

    def _try_open(
        self, context: MergeContext, line: CleanedLine
    ) -> Optional[LogicalBlock]:
        match = DATA_OPEN_PATTERN.match(line.text)
        state = MergeState.IN_DATA
        if match is None:
            match = SQL_OPEN_PATTERN.search(line.text)
            state = MergeState.IN_SQL
        if match is None:
            return None

        context.open(state, line)
        if self._terminates(line.text[match.end():]):
            return context.close()
        return None

    def _terminates(self, text: str) -> bool:
        return self.config.terminator in text
