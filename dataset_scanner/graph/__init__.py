"""
Dataset graph module.

This package contains the graph of program files and the datasets they
create, used to find datasets written by more than one program.
"""

from dataset_scanner.graph.dataset_graph import DatasetGraph

__all__ = [
    "DatasetGraph",
]
