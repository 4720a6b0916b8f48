"""
File enumerator for program files.

This module defines the FileEnumerator class, which resolves a root path to
the ordered list of program files to scan and loads each of them as a
SourceFile.
"""

from pathlib import Path
from typing import List, Optional, Union

from dataset_scanner.exceptions import FileUnreadableError, PathNotFoundError
from dataset_scanner.models.config import ScanConfig
from dataset_scanner.models.source import SourceFile


class FileEnumerator:
    """Resolves a path to candidate program files.

    Responsibilities:
    1. Accept a single file with a recognized extension
    2. List a directory (non-recursively) for recognized files
    3. Read files into SourceFile objects

    Usage:
        enumerator = FileEnumerator(ScanConfig())
        for path in enumerator.enumerate("programs/"):
            source = enumerator.read(path)
    """

    def __init__(self, config: Optional[ScanConfig] = None) -> None:
        self.config = config or ScanConfig()

    def enumerate(self, root: Union[str, Path]) -> List[Path]:
        """List the files to scan under ``root``.

        A file is returned as a singleton list when its extension is
        recognized, and as an empty list otherwise. Directory entries are
        sorted by name so that repeated scans see the same order.

        Args:
            root: File or directory path.

        Returns:
            Ordered list of file paths.

        Raises:
            PathNotFoundError: If ``root`` does not exist.
        """
        root = Path(root)
        if not root.exists():
            raise PathNotFoundError(root)

        if root.is_file():
            return [root] if self.config.is_recognized(root.suffix) else []

        return sorted(
            (
                entry
                for entry in root.iterdir()
                if entry.is_file() and self.config.is_recognized(entry.suffix)
            ),
            key=lambda entry: entry.name,
        )

    def read(self, path: Union[str, Path]) -> SourceFile:
        """Load a file as a SourceFile.

        Undecodable bytes are replaced rather than rejected; only failures to
        open or read the file are errors.

        Args:
            path: File to read.

        Returns:
            SourceFile holding the file's lines.

        Raises:
            FileUnreadableError: If the file cannot be opened or read.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding=self.config.encoding, errors="replace")
        except OSError as e:
            raise FileUnreadableError(path, e.strerror or str(e)) from e
        return SourceFile.from_text(path, text)
