"""
Report builder for dataset references.

This module defines the ReportBuilder class, which turns the references
collected from all files into the final ScanReport.
"""

from typing import Iterable, List, Optional, Set

from dataset_scanner.models.config import ScanConfig
from dataset_scanner.models.dataset_reference import DatasetReference
from dataset_scanner.models.scan_report import ReportRow, ScanReport


class ReportBuilder:
    """Filters, sorts, deduplicates and numbers dataset references.

    Steps:
    1. Drop references in the transient library
    2. Reduce each source file to its base name
    3. Sort by (code_file, line_num, dataset), block type as tie-breaker
    4. Keep the first row of each (code_file, line_num, dataset) key
    5. Number rows 1..N

    The result depends only on the set of references, not on the order the
    files were scanned in.

    Usage:
        report = ReportBuilder(config).build(references)
    """

    def __init__(self, config: Optional[ScanConfig] = None) -> None:
        self.config = config or ScanConfig()

    def build(self, references: Iterable[DatasetReference]) -> ScanReport:
        """Build the report.

        Args:
            references: References from every scanned file.

        Returns:
            ScanReport with sequential ids.
        """
        kept = [
            ref
            for ref in references
            if not ref.is_transient(self.config.transient_library)
        ]
        kept.sort(
            key=lambda ref: (
                ref.code_file,
                ref.line_number,
                ref.dataset_name,
                ref.block_type.value,
                ref.in_macro,
            )
        )

        rows: List[ReportRow] = []
        seen: Set[tuple] = set()
        for ref in kept:
            key = (ref.code_file, ref.line_number, ref.dataset_name)
            if key in seen:
                continue
            seen.add(key)
            rows.append(
                ReportRow(
                    id=len(rows) + 1,
                    code_file=ref.code_file,
                    dataset=ref.dataset_name,
                    line_num=ref.line_number,
                    block_type=ref.block_type,
                    context=self.config.macro_context_label if ref.in_macro else "",
                )
            )

        return ScanReport(rows=rows)
