"""
Tests for ReportBuilder and ScanReport.

This module contains tests for filtering, sorting, deduplication, id
assignment and serialization of the final report.
"""

import json

from dataset_scanner.models.block_type import BlockType
from dataset_scanner.models.config import ScanConfig
from dataset_scanner.models.dataset_reference import DatasetReference
from dataset_scanner.report.report_builder import ReportBuilder


def _ref(source, line, name, block_type=BlockType.DATA_STEP, in_macro=False):
    return DatasetReference(
        source_file=source,
        line_number=line,
        block_type=block_type,
        dataset_name=name,
        in_macro=in_macro,
    )


class TestReportBuilder:
    """Tests for ReportBuilder."""

    def setup_method(self):
        """Initialize before each test."""
        self.builder = ReportBuilder()
        self.refs = [
            _ref("/jobs/b.sas", 3, "lib.z"),
            _ref("/jobs/a.sas", 10, "lib.y", BlockType.SQL_CREATE_TABLE),
            _ref("/jobs/a.sas", 2, "lib.x", in_macro=True),
            _ref("/jobs/a.sas", 2, "lib.w"),
        ]

    def test_sorted_with_sequential_ids(self):
        """Test rows are sorted by file, line and dataset and numbered."""
        report = self.builder.build(self.refs)

        assert [(r.id, r.code_file, r.line_num, r.dataset) for r in report] == [
            (1, "a.sas", 2, "lib.w"),
            (2, "a.sas", 2, "lib.x"),
            (3, "a.sas", 10, "lib.y"),
            (4, "b.sas", 3, "lib.z"),
        ]

    def test_base_name_and_context(self):
        """Test file base names and macro context labels."""
        report = self.builder.build(self.refs)
        row = report.find("lib.x")[0]

        assert row.code_file == "a.sas"
        assert row.context == "Inside Macro"
        assert report.find("lib.w")[0].context == ""

    def test_duplicates_removed(self):
        """Test rows sharing (file, line, dataset) appear once."""
        report = self.builder.build(self.refs + [_ref("/other/a.sas", 2, "lib.x")])

        keys = [row.key() for row in report]
        assert len(keys) == len(set(keys)) == 4

    def test_transient_filtered(self):
        """Test transient references are dropped even if extracted."""
        report = self.builder.build([_ref("a.sas", 1, "WORK.tmp"), _ref("a.sas", 1, "p.t")])

        assert report.get_datasets() == ["p.t"]

    def test_order_independent(self):
        """Test the report does not depend on input order."""
        forward = self.builder.build(self.refs)
        backward = self.builder.build(list(reversed(self.refs)))

        assert forward.to_records() == backward.to_records()

    def test_custom_context_label(self):
        """Test the macro context label comes from the configuration."""
        builder = ReportBuilder(ScanConfig(macro_context_label="macro"))
        report = builder.build([_ref("a.sas", 1, "l.m", in_macro=True)])

        assert report.rows[0].context == "macro"

    def test_empty(self):
        """Test an empty input gives an empty report."""
        report = self.builder.build([])

        assert len(report) == 0
        assert report.to_dict()["total"] == 0


class TestScanReportSerialization:
    """Tests for ScanReport serialization."""

    def setup_method(self):
        """Build a small report."""
        self.report = ReportBuilder().build(
            [
                _ref("a.sas", 1, "lib.a"),
                _ref("a.sas", 4, "lib.b", BlockType.SQL_CREATE_TABLE, True),
            ]
        )

    def test_to_json(self):
        """Test JSON output."""
        data = json.loads(self.report.to_json())

        assert data["columns"] == [
            "id",
            "code_file",
            "dataset",
            "line_num",
            "block_type",
            "context",
        ]
        assert data["rows"][1] == {
            "id": 2,
            "code_file": "a.sas",
            "dataset": "lib.b",
            "line_num": 4,
            "block_type": "SqlCreateTable",
            "context": "Inside Macro",
        }

    def test_to_csv(self):
        """Test CSV output."""
        lines = self.report.to_csv().splitlines()

        assert lines[0] == "id,code_file,dataset,line_num,block_type,context"
        assert lines[1] == "1,a.sas,lib.a,1,DataStep,"
        assert lines[2] == "2,a.sas,lib.b,4,SqlCreateTable,Inside Macro"

    def test_rows_for_file(self):
        """Test filtering rows by program file."""
        assert len(self.report.get_rows_for_file("a.sas")) == 2
        assert self.report.get_rows_for_file("b.sas") == []
