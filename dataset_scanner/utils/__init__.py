"""Utility functions for dataset scanning."""

from dataset_scanner.utils.warnings import ScanWarning, WarningCollector

__all__ = [
    "ScanWarning",
    "WarningCollector",
]
