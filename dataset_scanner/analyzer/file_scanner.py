"""
Per-file scanning pipeline.

This module defines the FileScanner class, which runs one file through
comment removal, block merging and dataset extraction, and the FileScanOutcome
holding what came out of it.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from dataset_scanner.analyzer.dataset_extractor import DatasetExtractor
from dataset_scanner.exceptions import FileUnreadableError
from dataset_scanner.models.config import ErrorMode, ScanConfig
from dataset_scanner.models.dataset_reference import DatasetReference
from dataset_scanner.models.logical_block import LogicalBlock
from dataset_scanner.models.source import SourceFile
from dataset_scanner.parser.block_merger import BlockMerger
from dataset_scanner.parser.comment_stripper import CommentStripper
from dataset_scanner.parser.file_enumerator import FileEnumerator
from dataset_scanner.utils.warnings import ScanWarning, WarningCollector


@dataclass
class FileScanOutcome:
    """What scanning one file produced.

    Attributes:
        path: The scanned file.
        references: Dataset references, in block order.
        blocks: Logical blocks found in the file.
        warnings: Diagnostics raised while scanning the file.
        skipped: True when the file could not be read.
    """

    path: Path
    references: List[DatasetReference] = field(default_factory=list)
    blocks: List[LogicalBlock] = field(default_factory=list)
    warnings: List[ScanWarning] = field(default_factory=list)
    skipped: bool = False


class FileScanner:
    """Runs the scanning pipeline over a single file.

    Each call to ``scan_file`` or ``scan_source`` uses fresh per-file state,
    so a FileScanner can be shared across threads.

    Usage:
        scanner = FileScanner(config)
        outcome = scanner.scan_file("programs/load.sas")
    """

    def __init__(self, config: Optional[ScanConfig] = None) -> None:
        self.config = config or ScanConfig()
        self.enumerator = FileEnumerator(self.config)
        self.stripper = CommentStripper(self.config)

    def scan_file(self, path: Union[str, Path]) -> FileScanOutcome:
        """Read and scan one file.

        Args:
            path: File to scan.

        Returns:
            FileScanOutcome; ``skipped`` is set when the file is unreadable
            and the configured mode is WARN or IGNORE.

        Raises:
            FileUnreadableError: If the file is unreadable and the configured
                mode is FAIL.
        """
        path = Path(path)
        try:
            source = self.enumerator.read(path)
        except FileUnreadableError as e:
            if self.config.on_unreadable == ErrorMode.FAIL:
                raise
            outcome = FileScanOutcome(path=path, skipped=True)
            if self.config.on_unreadable == ErrorMode.WARN:
                collector = WarningCollector()
                collector.add_unreadable_warning(str(path), e.reason or e.message)
                outcome.warnings = collector.get_all()
            return outcome

        return self.scan_source(source)

    def scan_source(self, source: SourceFile) -> FileScanOutcome:
        """Scan an already loaded file.

        Args:
            source: File contents.

        Returns:
            FileScanOutcome with blocks, references and diagnostics.
        """
        collector = WarningCollector()
        source_file = str(source.path)

        merger = BlockMerger(self.config, collector)
        extractor = DatasetExtractor(self.config, collector)

        cleaned = self.stripper.strip(source.lines)
        blocks = merger.merge(cleaned, source_file=source_file)

        references: List[DatasetReference] = []
        for block in blocks:
            references.extend(extractor.extract(block, source_file=source_file))

        return FileScanOutcome(
            path=source.path,
            references=references,
            blocks=blocks,
            warnings=collector.get_all(),
        )
