"""
Line-stream parsing.

This package turns program files into logical blocks: file enumeration,
comment removal and multi-line statement reassembly.
"""

from dataset_scanner.parser.block_merger import BlockMerger, MergeState
from dataset_scanner.parser.comment_stripper import CommentStripper
from dataset_scanner.parser.file_enumerator import FileEnumerator

__all__ = [
    "BlockMerger",
    "CommentStripper",
    "FileEnumerator",
    "MergeState",
]
