"""
Dataset analysis.

This package contains the dataset extractor, the per-file pipeline and the
DatasetScanner entry point.
"""

from dataset_scanner.analyzer.dataset_extractor import DatasetExtractor
from dataset_scanner.analyzer.dataset_scanner import DatasetScanner
from dataset_scanner.analyzer.file_scanner import FileScanner, FileScanOutcome

__all__ = [
    "DatasetExtractor",
    "DatasetScanner",
    "FileScanner",
    "FileScanOutcome",
]
