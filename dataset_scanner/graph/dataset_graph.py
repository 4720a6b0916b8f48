"""
Program/dataset graph.

This module defines the DatasetGraph class, which uses networkx to relate
program files to the permanent datasets they create.
"""

from __future__ import annotations

from typing import Any

import networkx as nx

from dataset_scanner.models.scan_report import ReportRow, ScanReport

PROGRAM = "program"
DATASET = "dataset"


class DatasetGraph:
    """Directed graph of program files and the datasets they create.

    Nodes are ``program:<code_file>`` and ``dataset:<library.member>``;
    dataset names are matched case-insensitively. An edge goes from a
    program to each dataset it creates and records the lines and block
    types involved.

    Attributes:
        graph: networkx DiGraph object.

    Example:
        >>> graph = DatasetGraph.from_report(report)
        >>> graph.get_producers("lib1.sales")
        ['load_sales.sas']
    """

    def __init__(self) -> None:
        """Initialize an empty DatasetGraph."""
        self.graph = nx.DiGraph()

    @classmethod
    def from_report(cls, report: ScanReport) -> DatasetGraph:
        """Build a graph from every row of a report."""
        graph = cls()
        for row in report:
            graph.add_row(row)
        return graph

    @staticmethod
    def _program_id(code_file: str) -> str:
        return f"{PROGRAM}:{code_file}"

    @staticmethod
    def _dataset_id(dataset: str) -> str:
        return f"{DATASET}:{dataset.lower()}"

    def add_row(self, row: ReportRow) -> None:
        """Add one report row to the graph.

        Args:
            row: Report row to add.
        """
        program_id = self._program_id(row.code_file)
        dataset_id = self._dataset_id(row.dataset)

        self.graph.add_node(program_id, name=row.code_file, node_type=PROGRAM)
        if dataset_id not in self.graph:
            self.graph.add_node(dataset_id, name=row.dataset, node_type=DATASET)

        if self.graph.has_edge(program_id, dataset_id):
            edge = self.graph.edges[program_id, dataset_id]
            edge["lines"].append(row.line_num)
            if row.block_type.value not in edge["block_types"]:
                edge["block_types"].append(row.block_type.value)
        else:
            self.graph.add_edge(
                program_id,
                dataset_id,
                lines=[row.line_num],
                block_types=[row.block_type.value],
            )

    def get_producers(self, dataset: str) -> list[str]:
        """Get the program files that create a dataset.

        Args:
            dataset: Qualified dataset name (any case).

        Returns:
            Sorted list of program file names; empty if unknown.
        """
        dataset_id = self._dataset_id(dataset)
        if dataset_id not in self.graph:
            return []
        return sorted(
            self.graph.nodes[node]["name"]
            for node in self.graph.predecessors(dataset_id)
        )

    def get_datasets(self, code_file: str) -> list[str]:
        """Get the datasets a program file creates, sorted."""
        program_id = self._program_id(code_file)
        if program_id not in self.graph:
            return []
        return sorted(
            self.graph.nodes[node]["name"]
            for node in self.graph.successors(program_id)
        )

    def get_shared_datasets(self) -> dict[str, list[str]]:
        """Get datasets created by more than one program file.

        Returns:
            Mapping of dataset name to its sorted producers.
        """
        shared: dict[str, list[str]] = {}
        for node, data in self.graph.nodes(data=True):
            if data.get("node_type") != DATASET:
                continue
            if self.graph.in_degree(node) > 1:
                shared[data["name"]] = self.get_producers(data["name"])
        return dict(sorted(shared.items()))

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Export graph to dictionary format (for JSON serialization)."""
        return {
            "nodes": [
                {"id": node, "name": data.get("name"), "type": data.get("node_type")}
                for node, data in self.graph.nodes(data=True)
            ],
            "edges": [
                {
                    "source": u,
                    "target": v,
                    "lines": list(data.get("lines", [])),
                    "block_types": list(data.get("block_types", [])),
                }
                for u, v, data in self.graph.edges(data=True)
            ],
        }

    def get_statistics(self) -> dict[str, int]:
        """Get graph statistics."""
        programs = [
            n for n, d in self.graph.nodes(data=True) if d.get("node_type") == PROGRAM
        ]
        datasets = [
            n for n, d in self.graph.nodes(data=True) if d.get("node_type") == DATASET
        ]
        return {
            "programs": len(programs),
            "datasets": len(datasets),
            "edges": self.graph.number_of_edges(),
            "shared_datasets": len(self.get_shared_datasets()),
        }
