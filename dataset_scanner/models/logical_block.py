"""
Logical block model.

This module defines the LogicalBlock class: the merged text of one DATA step
or one CREATE TABLE statement, from its opening keyword to its terminator.
"""

from dataclasses import dataclass

from dataset_scanner.models.block_type import BlockType


@dataclass(frozen=True)
class LogicalBlock:
    """A reassembled multi-line statement.

    Attributes:
        block_type: DATA_STEP or SQL_CREATE_TABLE.
        start_line: First physical line of the block.
        combined_text: Cleaned lines of the block joined with single spaces.
        in_macro: Whether the block opened inside a macro definition.
        terminated: False when the block was flushed at end of file without
            a terminator.

    Example:
        LogicalBlock(
            block_type=BlockType.SQL_CREATE_TABLE,
            start_line=12,
            combined_text="create table mylib. report as select * from x;",
            in_macro=False,
        )
    """

    block_type: BlockType
    start_line: int
    combined_text: str
    in_macro: bool = False
    terminated: bool = True
