"""
Tests for DatasetExtractor.

This module contains tests for qualified-name extraction from DATA step and
CREATE TABLE blocks.
"""

import pytest

from dataset_scanner.analyzer.dataset_extractor import DatasetExtractor
from dataset_scanner.models.block_type import BlockType
from dataset_scanner.models.config import ScanConfig
from dataset_scanner.models.logical_block import LogicalBlock
from dataset_scanner.utils.warnings import WarningCollector


def _data(text, start_line=1, in_macro=False):
    return LogicalBlock(BlockType.DATA_STEP, start_line, text, in_macro)


def _sql(text, start_line=1, in_macro=False):
    return LogicalBlock(BlockType.SQL_CREATE_TABLE, start_line, text, in_macro)


class TestDatasetExtractor:
    """Tests for DatasetExtractor."""

    def setup_method(self):
        """Initialize before each test."""
        self.warnings = WarningCollector()
        self.extractor = DatasetExtractor(warnings=self.warnings)

    def _names(self, block):
        return [ref.dataset_name for ref in self.extractor.extract(block, "job.sas")]

    def test_data_step_excludes_work(self):
        """Test the transient library is never reported."""
        assert self._names(_data("data lib1.sales; set work.temp; run;")) == [
            "lib1.sales"
        ]

    def test_data_step_all_outputs(self):
        """Test every qualified output of a DATA statement is reported."""
        refs = self.extractor.extract(
            _data("data lib.a lib.b(keep=x);", start_line=7), "job.sas"
        )

        assert [r.dataset_name for r in refs] == ["lib.a", "lib.b"]
        assert all(r.line_number == 7 for r in refs)
        assert all(r.block_type == BlockType.DATA_STEP for r in refs)

    def test_data_step_exclusions_ignore_case(self):
        """Test WORK and _NULL_ are excluded regardless of case."""
        assert self._names(_data("DATA WORK.tmp Perm.Out lib._NULL_;")) == ["Perm.Out"]

    def test_data_step_unqualified_only(self):
        """Test a DATA step with only unqualified names yields nothing."""
        assert self._names(_data("data temp _null_;")) == []
        assert self.warnings.get_by_level("INFO")

    def test_numbers_and_formats_ignored(self):
        """Test decimals and format names are not qualified names."""
        assert self._names(_data("data lib.a; x = 1.5; format d date9.; run;")) == [
            "lib.a"
        ]

    def test_formats_separated_by_space_not_joined(self):
        """Test a format followed by a variable is not a qualified name."""
        block = _data("data lib.a; format d date9. amt best12.; run;")

        assert self._names(block) == ["lib.a"]

    @pytest.mark.parametrize(
        "text", ["data lib .a;", "data lib. a;", "data lib . a;"]
    )
    def test_data_step_requires_adjacent_dot(self, text):
        """Test DATA step names must be written as identifier.identifier."""
        assert self._names(_data(text)) == []

    def test_create_table_first_name_only(self):
        """Test CREATE TABLE yields only its target."""
        assert self._names(_sql("create table a.b as select * from c.d;")) == ["a.b"]

    def test_create_table_split_name_normalized(self):
        """Test whitespace around the dot is removed."""
        refs = self.extractor.extract(
            _sql("proc sql; create table mylib. report as select * from x; quit;", 12),
            "job.sas",
        )

        assert len(refs) == 1
        assert refs[0].dataset_name == "mylib.report"
        assert refs[0].block_type == BlockType.SQL_CREATE_TABLE
        assert refs[0].line_number == 12

    def test_create_table_unqualified_target(self):
        """Test an unqualified target is not replaced by a source table."""
        assert self._names(_sql("create table report as select * from lib.src;")) == []

    def test_macro_flag_propagated(self):
        """Test references inherit the block's macro context."""
        refs = self.extractor.extract(_data("data lib.a;", in_macro=True), "job.sas")

        assert refs[0].in_macro is True

    def test_custom_transient_library(self):
        """Test the transient library comes from the configuration."""
        extractor = DatasetExtractor(ScanConfig(transient_library="scratch"))
        refs = extractor.extract(_data("data scratch.a work.b;"), "job.sas")

        assert [r.dataset_name for r in refs] == ["work.b"]

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("lib.member", ("lib", "member")),
            (" Lib1 . Out_2 ", ("Lib1", "Out_2")),
        ],
    )
    def test_split_name(self, name, expected):
        """Test splitting qualified names."""
        assert DatasetExtractor.split_name(name) == expected

    @pytest.mark.parametrize("name", ["member", "a.b.c", "1lib.x", ""])
    def test_split_name_invalid(self, name):
        """Test invalid qualified names."""
        with pytest.raises(ValueError):
            DatasetExtractor.split_name(name)

    def test_normalize_name(self):
        """Test whitespace is removed from a qualified name."""
        assert DatasetExtractor.normalize_name(" Lib1 . Out_2 ") == "Lib1.Out_2"

        with pytest.raises(ValueError):
            DatasetExtractor.normalize_name("lib")
