"""
Dataset scanner (main entry point).

This module defines the DatasetScanner class, which scans a file or a
directory of program files and builds the complete ScanResult.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Union

from dataset_scanner.analyzer.file_scanner import FileScanner, FileScanOutcome
from dataset_scanner.models.config import ScanConfig
from dataset_scanner.models.dataset_reference import DatasetReference
from dataset_scanner.models.scan_result import ScanResult
from dataset_scanner.parser.file_enumerator import FileEnumerator
from dataset_scanner.report.report_builder import ReportBuilder
from dataset_scanner.utils.warnings import WarningCollector


class DatasetScanner:
    """Permanent dataset scanner.

    Responsibilities:
    1. Enumerate the program files under a path
    2. Scan each file independently (optionally on a thread pool)
    3. Build one report over all files, in a single pass

    Usage:
        scanner = DatasetScanner(ScanConfig(max_workers=4))
        result = scanner.scan("programs/")
        for row in result.report:
            print(row.id, row.code_file, row.dataset)
    """

    def __init__(self, config: Optional[ScanConfig] = None) -> None:
        """Initialize a DatasetScanner.

        Args:
            config: ScanConfig for the scan.
        """
        self.config = config or ScanConfig()
        self.enumerator = FileEnumerator(self.config)
        self.file_scanner = FileScanner(self.config)
        self.report_builder = ReportBuilder(self.config)

    def scan(self, path: Union[str, Path]) -> ScanResult:
        """Scan a file or a directory.

        Args:
            path: Program file or directory of program files.

        Returns:
            ScanResult: report, scanned files and diagnostics.

        Raises:
            PathNotFoundError: If ``path`` does not exist.
            FileUnreadableError: If a file is unreadable and the configured
                mode is FAIL.
        """
        root = Path(path)
        collector = WarningCollector()

        files = self.enumerator.enumerate(root)
        if root.is_file() and not files:
            collector.add_unsupported_extension_warning(
                str(root), self.config.extensions
            )

        outcomes = self._scan_files(files)

        references: List[DatasetReference] = []
        for outcome in outcomes:
            references.extend(outcome.references)
            collector.extend(outcome.warnings)

        return ScanResult(
            root=root,
            report=self.report_builder.build(references),
            files=files,
            warnings=collector.get_all(),
        )

    def _scan_files(self, files: List[Path]) -> List[FileScanOutcome]:
        """Scan files, keeping outcomes in enumeration order."""
        if self.config.max_workers == 1 or len(files) < 2:
            return [self.file_scanner.scan_file(path) for path in files]

        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            return list(executor.map(self.file_scanner.scan_file, files))
