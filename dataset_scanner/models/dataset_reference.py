"""
Dataset reference model.

This module defines the DatasetReference class, which records one place where
a permanent dataset is created.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from dataset_scanner.models.block_type import BlockType


@dataclass(frozen=True)
class DatasetReference:
    """A qualified dataset created by a logical block.

    Attributes:
        source_file: File the block was found in.
        line_number: First line of the block (not the line holding the name).
        block_type: Kind of block that creates the dataset.
        dataset_name: Qualified ``library.member`` name, as written.
        in_macro: Whether the block opened inside a macro definition.

    Example:
        >>> ref = DatasetReference(
        ...     source_file="jobs/load.sas",
        ...     line_number=3,
        ...     block_type=BlockType.DATA_STEP,
        ...     dataset_name="lib1.sales",
        ... )
        >>> ref.library, ref.member
        ('lib1', 'sales')

    The report context label ("Inside Macro" by default) is applied by the
    report builder from ``ScanConfig.macro_context_label``.
    """

    source_file: str
    line_number: int
    block_type: BlockType
    dataset_name: str
    in_macro: bool = False

    @property
    def library(self) -> str:
        """Library component of the dataset name."""
        return self.dataset_name.split(".", 1)[0]

    @property
    def member(self) -> str:
        """Member component of the dataset name."""
        return self.dataset_name.split(".", 1)[1]

    @property
    def code_file(self) -> str:
        """Base name of the source file."""
        return Path(self.source_file).name

    def is_transient(self, transient_library: str) -> bool:
        """Check if the dataset lives in the transient library.

        Args:
            transient_library: Name of the temporary library (e.g. "work").

        Returns:
            True if the library matches, ignoring case.
        """
        return self.library.lower() == transient_library.lower()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "source_file": self.source_file,
            "line_number": self.line_number,
            "block_type": self.block_type.value,
            "dataset_name": self.dataset_name,
            "in_macro": self.in_macro,
        }
