"""
Dataset extractor for logical blocks.

This module defines the DatasetExtractor class, which pulls qualified
``library.member`` names out of a LogicalBlock and turns them into
DatasetReference objects.

Extraction is regex-based. Quoted names, names inside string literals and
macro variable references are not recognized.
"""

import re
from typing import List, Optional, Tuple

from dataset_scanner.models.block_type import BlockType
from dataset_scanner.models.config import ScanConfig
from dataset_scanner.models.dataset_reference import DatasetReference
from dataset_scanner.models.logical_block import LogicalBlock
from dataset_scanner.utils.warnings import WarningCollector

QUALIFIED_NAME = r"\b([A-Za-z_]\w*)\.([A-Za-z_]\w*)"

# A CREATE TABLE target split across lines is joined back with a space, so
# whitespace is allowed around its dot and nowhere else.
SPLIT_QUALIFIED_NAME = r"\b([A-Za-z_]\w*)\s*\.\s*([A-Za-z_]\w*)"

QUALIFIED_NAME_PATTERN = re.compile(QUALIFIED_NAME)
SPLIT_QUALIFIED_NAME_PATTERN = re.compile(SPLIT_QUALIFIED_NAME)
CREATE_TABLE_TARGET_PATTERN = re.compile(
    r"\bcreate\s+table\s+" + SPLIT_QUALIFIED_NAME, re.IGNORECASE
)


class DatasetExtractor:
    """Extracts permanent dataset names from logical blocks.

    - SQL_CREATE_TABLE: the qualified name right after ``create table``,
      at most one per block.
    - DATA_STEP: every qualified name in the block, except names in the
      transient library and the null dataset.

    All references of a block carry the block's start line.

    Usage:
        extractor = DatasetExtractor(config)
        refs = extractor.extract(block, source_file="job.sas")
    """

    def __init__(
        self,
        config: Optional[ScanConfig] = None,
        warnings: Optional[WarningCollector] = None,
    ) -> None:
        self.config = config or ScanConfig()
        self.warnings = warnings if warnings is not None else WarningCollector()

    def extract(
        self, block: LogicalBlock, source_file: str = ""
    ) -> List[DatasetReference]:
        """Extract the dataset references of one block.

        Args:
            block: Logical block to inspect.
            source_file: File the block comes from.

        Returns:
            References in order of appearance; empty when the block names no
            permanent dataset.
        """
        if block.block_type == BlockType.SQL_CREATE_TABLE:
            names = self._extract_create_table_target(block.combined_text)
        else:
            names = self._extract_data_step_outputs(block.combined_text)

        if not names:
            self.warnings.add_no_match_info(
                source_file, block.block_type.value, block.start_line
            )

        return [
            DatasetReference(
                source_file=source_file,
                line_number=block.start_line,
                block_type=block.block_type,
                dataset_name=name,
                in_macro=block.in_macro,
            )
            for name in names
        ]

    def _extract_create_table_target(self, text: str) -> List[str]:
        match = CREATE_TABLE_TARGET_PATTERN.search(text)
        if match is None:
            return []
        return [self._normalize(match.group(1), match.group(2))]

    def _extract_data_step_outputs(self, text: str) -> List[str]:
        return [
            self._normalize(library, member)
            for library, member in QUALIFIED_NAME_PATTERN.findall(text)
            if not self._is_excluded(library, member)
        ]

    def _is_excluded(self, library: str, member: str) -> bool:
        return (
            library.lower() == self.config.transient_library.lower()
            or member.lower() == self.config.null_dataset.lower()
        )

    @staticmethod
    def _normalize(library: str, member: str) -> str:
        return f"{library}.{member}"

    @staticmethod
    def split_name(dataset_name: str) -> Tuple[str, str]:
        """Split a qualified name into (library, member).

        Whitespace around the name and around the dot is ignored.

        Raises:
            ValueError: If the name is not ``identifier.identifier``.
        """
        match = SPLIT_QUALIFIED_NAME_PATTERN.fullmatch(dataset_name.strip())
        if match is None:
            raise ValueError(f"Not a qualified dataset name: '{dataset_name}'")
        return match.group(1), match.group(2)

    @classmethod
    def normalize_name(cls, dataset_name: str) -> str:
        """Return ``library.member`` with all whitespace removed.

        Raises:
            ValueError: If the name is not ``identifier.identifier``.
        """
        return cls._normalize(*cls.split_name(dataset_name))
