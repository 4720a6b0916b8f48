"""
Scan result model.

This module defines the ScanResult class, which bundles the report of a scan
with the files that were scanned and the diagnostics collected on the way.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from dataset_scanner.models.scan_report import ScanReport
from dataset_scanner.utils.warnings import ScanWarning


@dataclass
class ScanResult:
    """Result of scanning a path.

    Attributes:
        root: Path the scan was started from.
        report: Deduplicated dataset report.
        files: Files that were enumerated, in scan order.
        warnings: Diagnostics collected while scanning.
    """

    root: Path
    report: ScanReport
    files: List[Path] = field(default_factory=list)
    warnings: List[ScanWarning] = field(default_factory=list)

    def has_errors(self) -> bool:
        """Check if any ERROR diagnostics were collected."""
        return any(warning.level == "ERROR" for warning in self.warnings)

    def get_warnings(self, level: str = "WARNING") -> List[ScanWarning]:
        """Get diagnostics of one level.

        Args:
            level: "INFO", "WARNING" or "ERROR".

        Returns:
            Diagnostics in collection order.
        """
        return [warning for warning in self.warnings if warning.level == level]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (for serialization)."""
        return {
            "root": str(self.root),
            "files_scanned": [str(path) for path in self.files],
            "report": self.report.to_dict(),
            "warnings": [warning.to_dict() for warning in self.warnings],
        }
