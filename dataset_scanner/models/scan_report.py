"""
Scan report model.

This module defines ReportRow and ScanReport, the sorted and deduplicated
output table of a scan.
"""

import csv
import io
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from dataset_scanner.models.block_type import BlockType

REPORT_COLUMNS = ["id", "code_file", "dataset", "line_num", "block_type", "context"]


@dataclass(frozen=True)
class ReportRow:
    """One row of the output table.

    Attributes:
        id: Sequential identifier (1..N) in sorted order.
        code_file: Base name of the program file.
        dataset: Qualified ``library.member`` name.
        line_num: First line of the creating block.
        block_type: Kind of block.
        context: "Inside Macro" or "".
    """

    id: int
    code_file: str
    dataset: str
    line_num: int
    block_type: BlockType
    context: str = ""

    def key(self) -> tuple:
        """Uniqueness key: (code_file, line_num, dataset)."""
        return (self.code_file, self.line_num, self.dataset)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary keyed by report column."""
        return {
            "id": self.id,
            "code_file": self.code_file,
            "dataset": self.dataset,
            "line_num": self.line_num,
            "block_type": self.block_type.value,
            "context": self.context,
        }


@dataclass
class ScanReport:
    """Deduplicated, sorted dataset report.

    Attributes:
        rows: Report rows, ordered by (code_file, line_num, dataset).

    Example:
        >>> report = ScanReport()
        >>> len(report)
        0
    """

    rows: List[ReportRow] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[ReportRow]:
        return iter(self.rows)

    def get_datasets(self) -> List[str]:
        """Get distinct dataset names, sorted."""
        return sorted({row.dataset for row in self.rows})

    def get_rows_for_file(self, code_file: str) -> List[ReportRow]:
        """Get all rows produced by one program file.

        Args:
            code_file: Base name of the program file.

        Returns:
            Rows in report order.
        """
        return [row for row in self.rows if row.code_file == code_file]

    def find(self, dataset: str) -> List[ReportRow]:
        """Find rows creating a dataset (case-insensitive).

        Args:
            dataset: Qualified dataset name.

        Returns:
            Matching rows in report order.
        """
        wanted = dataset.lower()
        return [row for row in self.rows if row.dataset.lower() == wanted]

    def to_records(self) -> List[Dict[str, Any]]:
        """Convert rows to a list of dictionaries."""
        return [row.to_dict() for row in self.rows]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (for serialization)."""
        return {
            "columns": list(REPORT_COLUMNS),
            "rows": self.to_records(),
            "total": len(self.rows),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Convert to JSON string.

        Args:
            indent: JSON indentation level.

        Returns:
            JSON string representation.
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def to_csv(self) -> str:
        """Convert to CSV text with a header row."""
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=REPORT_COLUMNS, lineterminator="\n")
        writer.writeheader()
        writer.writerows(self.to_records())
        return buffer.getvalue()

    def to_graph(self) -> "DatasetGraph":
        """Build the program/dataset graph of this report."""
        from dataset_scanner.graph.dataset_graph import DatasetGraph

        return DatasetGraph.from_report(self)
