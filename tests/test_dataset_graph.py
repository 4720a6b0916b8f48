"""
Tests for DatasetGraph.

This module contains tests for the program/dataset graph built from a
report.
"""

from dataset_scanner.graph.dataset_graph import DatasetGraph
from dataset_scanner.models.block_type import BlockType
from dataset_scanner.models.dataset_reference import DatasetReference
from dataset_scanner.report.report_builder import ReportBuilder


def _ref(source, line, name, block_type=BlockType.DATA_STEP):
    return DatasetReference(
        source_file=source,
        line_number=line,
        block_type=block_type,
        dataset_name=name,
    )


class TestDatasetGraph:
    """Tests for DatasetGraph."""

    def setup_method(self):
        """Build a graph from a small report."""
        self.report = ReportBuilder().build(
            [
                _ref("load.sas", 3, "stage.customers"),
                _ref("load.sas", 9, "stage.orders"),
                _ref("load.sas", 20, "stage.customers", BlockType.SQL_CREATE_TABLE),
                _ref("reload.sas", 1, "STAGE.Customers"),
                _ref("mart.sas", 4, "mart.dim", BlockType.SQL_CREATE_TABLE),
            ]
        )
        self.graph = DatasetGraph.from_report(self.report)

    def test_producers(self):
        """Test producers are found case-insensitively."""
        assert self.graph.get_producers("stage.customers") == ["load.sas", "reload.sas"]
        assert self.graph.get_producers("Mart.Dim") == ["mart.sas"]
        assert self.graph.get_producers("nowhere.x") == []

    def test_datasets_of_program(self):
        """Test datasets created by a program."""
        assert self.graph.get_datasets("load.sas") == ["stage.customers", "stage.orders"]
        assert self.graph.get_datasets("missing.sas") == []

    def test_shared_datasets(self):
        """Test datasets created by several programs."""
        shared = self.graph.get_shared_datasets()

        assert list(shared.values()) == [["load.sas", "reload.sas"]]

    def test_edge_attributes(self):
        """Test an edge collects lines and block types."""
        edge = self.graph.graph.edges["program:load.sas", "dataset:stage.customers"]

        assert edge["lines"] == [3, 20]
        assert edge["block_types"] == ["DataStep", "SqlCreateTable"]

    def test_statistics(self):
        """Test graph statistics."""
        assert self.graph.get_statistics() == {
            "programs": 3,
            "datasets": 3,
            "edges": 4,
            "shared_datasets": 1,
        }

    def test_to_dict(self):
        """Test dictionary export."""
        data = self.graph.to_dict()

        assert len(data["nodes"]) == 6
        assert len(data["edges"]) == 4
        assert {n["type"] for n in data["nodes"]} == {"program", "dataset"}

    def test_report_to_graph(self):
        """Test the report shortcut builds the same graph."""
        graph = self.report.to_graph()

        assert graph.get_statistics() == self.graph.get_statistics()
