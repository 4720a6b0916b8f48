"""
Tests for configuration, models and diagnostics.

This module contains tests for ScanConfig validation, the DatasetReference
helpers and the WarningCollector.
"""

import logging

import pytest

from dataset_scanner.models.block_type import BlockType
from dataset_scanner.models.config import ErrorMode, ScanConfig
from dataset_scanner.models.dataset_reference import DatasetReference
from dataset_scanner.models.source import SourceFile
from dataset_scanner.utils.warnings import ScanWarning, WarningCollector


class TestScanConfig:
    """Tests for ScanConfig."""

    def test_defaults(self):
        """Test default settings."""
        config = ScanConfig()

        assert config.extensions == (".sas", ".sql", ".txt")
        assert config.transient_library == "work"
        assert config.null_dataset == "_null_"
        assert config.on_unreadable == ErrorMode.WARN
        assert config.max_workers == 1

    def test_extensions_normalized(self):
        """Test extensions are lowercased and dotted."""
        config = ScanConfig(extensions=("SAS", ".Sql"))

        assert config.extensions == (".sas", ".sql")
        assert config.is_recognized(".SQL")
        assert not config.is_recognized(".py")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"extensions": ()},
            {"terminator": ""},
            {"macro_open": ""},
            {"max_workers": 0},
        ],
    )
    def test_invalid_values(self, kwargs):
        """Test invalid settings are rejected."""
        with pytest.raises(ValueError):
            ScanConfig(**kwargs)

    def test_invalid_error_mode(self):
        """Test on_unreadable must be an ErrorMode."""
        with pytest.raises(TypeError):
            ScanConfig(on_unreadable="warn")

    def test_error_mode_values(self):
        """Test ErrorMode values."""
        assert ErrorMode.values() == ["fail", "warn", "ignore"]


class TestDatasetReference:
    """Tests for DatasetReference."""

    def test_components(self):
        """Test library, member and file helpers."""
        ref = DatasetReference(
            source_file="/jobs/load.sas",
            line_number=4,
            block_type=BlockType.SQL_CREATE_TABLE,
            dataset_name="Work.tmp",
            in_macro=True,
        )

        assert ref.library == "Work"
        assert ref.member == "tmp"
        assert ref.code_file == "load.sas"
        assert ref.is_transient("WORK")
        assert ref.to_dict()["block_type"] == "SqlCreateTable"
        assert ref.to_dict()["in_macro"] is True

    def test_no_context_label_on_reference(self):
        """Test the context label is left to the report builder."""
        ref = DatasetReference("a.sas", 1, BlockType.DATA_STEP, "l.m", in_macro=True)

        assert not hasattr(ref, "context")
        assert "context" not in ref.to_dict()

    def test_block_type_is_sql(self):
        """Test BlockType helpers."""
        assert BlockType.SQL_CREATE_TABLE.is_sql()
        assert not BlockType.DATA_STEP.is_sql()


class TestSourceFile:
    """Tests for SourceFile."""

    def test_from_text(self, tmp_path):
        """Test lines are numbered from 1."""
        source = SourceFile.from_text(tmp_path / "Job.SAS", "data a.b;\n\nrun;")

        assert source.extension == ".sas"
        assert [line.line_number for line in source.lines] == [1, 2, 3]
        assert source.lines[1].text == ""


class TestWarningCollector:
    """Tests for WarningCollector."""

    def setup_method(self):
        """Initialize before each test."""
        self.collector = WarningCollector()

    def test_levels(self):
        """Test collecting and filtering by level."""
        self.collector.add_unterminated_warning("a.sas", "DataStep", 3)
        self.collector.add_no_match_info("a.sas", "DataStep", 7)

        assert not self.collector.has_errors()
        assert self.collector.get_summary() == {"INFO": 1, "WARNING": 1, "ERROR": 0}
        assert str(self.collector.get_by_level("WARNING")[0]).startswith("a.sas:3: ")

        self.collector.add("ERROR", "boom")
        assert self.collector.has_errors()

    def test_invalid_level(self):
        """Test unknown levels are rejected."""
        with pytest.raises(ValueError):
            self.collector.add("DEBUG", "nope")

    def test_logged(self, caplog):
        """Test diagnostics are forwarded to logging."""
        with caplog.at_level(logging.WARNING, logger="dataset_scanner"):
            self.collector.add_unreadable_warning("b.sas", "Permission denied")

        assert "Permission denied" in caplog.text

    def test_extend_and_clear(self):
        """Test merging diagnostics from another collector."""
        other = [ScanWarning(level="INFO", message="x", source_file="c.sas")]
        self.collector.extend(other)

        assert self.collector.get_all() == other
        self.collector.clear()
        assert self.collector.get_all() == []

    def test_location(self):
        """Test location formatting."""
        assert ScanWarning("INFO", "m").location() == ""
        assert ScanWarning("INFO", "m", "a.sas").location() == "a.sas"
        assert ScanWarning("INFO", "m", "a.sas", 2).location() == "a.sas:2"
