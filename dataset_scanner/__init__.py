"""
Permanent Dataset Scanner v1.0

Finds every place a SAS program creates a permanent dataset, in DATA steps
and PROC SQL CREATE TABLE statements, and reports file, line, block kind and
macro context.

Example:
    >>> from dataset_scanner import DatasetScanner
    >>> scanner = DatasetScanner()
    >>> result = scanner.scan("programs/")
    >>> rows = result.report.to_records()
"""

from dataset_scanner.version import __version__, __version_info__

__author__ = "Dataset Scanner Contributors"

from dataset_scanner.analyzer.dataset_extractor import DatasetExtractor
from dataset_scanner.analyzer.dataset_scanner import DatasetScanner
from dataset_scanner.analyzer.file_scanner import FileScanner, FileScanOutcome
from dataset_scanner.exceptions import (
    FileUnreadableError,
    PathNotFoundError,
    ScanError,
)
from dataset_scanner.graph.dataset_graph import DatasetGraph
from dataset_scanner.models.block_type import BlockType
from dataset_scanner.models.config import ErrorMode, ScanConfig
from dataset_scanner.models.dataset_reference import DatasetReference
from dataset_scanner.models.logical_block import LogicalBlock
from dataset_scanner.models.scan_report import ReportRow, ScanReport
from dataset_scanner.models.scan_result import ScanResult
from dataset_scanner.models.source import CleanedLine, CodeLine, SourceFile
from dataset_scanner.parser.block_merger import BlockMerger, MergeState
from dataset_scanner.parser.comment_stripper import CommentStripper
from dataset_scanner.parser.file_enumerator import FileEnumerator
from dataset_scanner.report.report_builder import ReportBuilder
from dataset_scanner.utils.warnings import ScanWarning, WarningCollector

__all__ = [
    # Version info
    "__version__",
    "__version_info__",
    # Entry point
    "DatasetScanner",
    "FileScanner",
    "FileScanOutcome",
    # Configuration
    "ScanConfig",
    "ErrorMode",
    # Results
    "ScanResult",
    "ScanReport",
    "ReportRow",
    "DatasetGraph",
    # Data models
    "SourceFile",
    "CodeLine",
    "CleanedLine",
    "LogicalBlock",
    "BlockType",
    "DatasetReference",
    # Pipeline stages
    "FileEnumerator",
    "CommentStripper",
    "BlockMerger",
    "MergeState",
    "DatasetExtractor",
    "ReportBuilder",
    # Diagnostics
    "ScanWarning",
    "WarningCollector",
    # Exceptions
    "ScanError",
    "PathNotFoundError",
    "FileUnreadableError",
]
