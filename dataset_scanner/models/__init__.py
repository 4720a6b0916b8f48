"""
Data models for dataset scanning.

This package contains the core data structures of the scanner: source lines,
logical blocks, dataset references, the report table and configuration.
"""

from dataset_scanner.models.block_type import BlockType
from dataset_scanner.models.config import ErrorMode, ScanConfig
from dataset_scanner.models.dataset_reference import DatasetReference
from dataset_scanner.models.logical_block import LogicalBlock
from dataset_scanner.models.scan_report import ReportRow, ScanReport
from dataset_scanner.models.source import CleanedLine, CodeLine, SourceFile

__all__ = [
    "BlockType",
    "CleanedLine",
    "CodeLine",
    "DatasetReference",
    "ErrorMode",
    "LogicalBlock",
    "ReportRow",
    "ScanConfig",
    "ScanReport",
    "SourceFile",
]
