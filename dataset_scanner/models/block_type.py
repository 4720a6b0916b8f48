"""
Block type enumeration.

This module defines the BlockType enum, which names the kinds of statements
that can create a permanent dataset.
"""

from enum import Enum


class BlockType(Enum):
    """Kind of logical block a dataset was created in.

    - DATA_STEP: ``data lib.member ...;``
    - SQL_CREATE_TABLE: ``create table lib.member as ...;`` inside PROC SQL
    """

    DATA_STEP = "DataStep"
    SQL_CREATE_TABLE = "SqlCreateTable"

    def is_sql(self) -> bool:
        """Check if this block comes from a PROC SQL statement.

        Returns:
            True for SQL_CREATE_TABLE, False otherwise.
        """
        return self == BlockType.SQL_CREATE_TABLE
