"""Report building."""

from dataset_scanner.report.report_builder import ReportBuilder

__all__ = [
    "ReportBuilder",
]
