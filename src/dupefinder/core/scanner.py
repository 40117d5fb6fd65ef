"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements recursive traversal of a directory tree.
Features:
- Uses os.walk for fast traversal, pathlib.Path for path handling
- Yields only regular files (symlinks, FIFOs, sockets and devices are skipped)
- Per-entry errors are logged and skipped; only an unusable root is fatal
"""

import os
import stat
import logging
from pathlib import Path
from typing import Iterator, List

logger = logging.getLogger(__name__)

# Local imports
from dupefinder.core.models import FileRecord
from dupefinder.core.interfaces import FileScanner


class FileScannerImpl(FileScanner):
    """
    Scans a directory recursively and produces FileRecord objects.

    Attributes:
        root_dir: Root directory to scan
        walk_errors: Number of entries skipped because they could not be read
    """

    def __init__(self, root_dir: str):
        self.root_dir = root_dir
        self.walk_errors = 0

    def iter_files(self) -> Iterator[FileRecord]:
        """
        Lazily yield a FileRecord for every regular file below root_dir.
        A root that is itself a file yields at most that one file.
        Raises RuntimeError before yielding anything if the root is missing or cannot be opened.
        """
        root_path = Path(self.root_dir)
        self._validate_root(root_path)
        self.walk_errors = 0

        if not root_path.is_dir():
            # A file root is a one-entry tree
            record = self._process_file(root_path)
            if record is not None:
                yield record
            return

        logger.debug(f"Scanning directory: {self.root_dir}")

        # followlinks=False: symlinked directories are never entered
        for root, dirs, files in os.walk(str(root_path), onerror=self._on_walk_error):
            for filename in files:
                record = self._process_file(Path(root) / filename)
                if record is not None:
                    yield record

    def scan(self) -> List[FileRecord]:
        """Run traversal to completion and return every record found."""
        found_files = list(self.iter_files())
        logger.debug(f"Scan completed. Found {len(found_files)} regular files, "
                     f"{self.walk_errors} entries skipped.")
        return found_files

    @staticmethod
    def _validate_root(root_path: Path) -> None:
        if not root_path.exists():
            error_msg = f"Directory does not exist: {root_path}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)
        if not root_path.is_dir():
            return

        # os.walk reports an unreadable root through onerror, which would make it non-fatal
        try:
            with os.scandir(root_path):
                pass
        except OSError as e:
            error_msg = f"Cannot open directory {root_path}: {e}"
            logger.error(error_msg)
            raise RuntimeError(error_msg) from e

    def _on_walk_error(self, error: OSError) -> None:
        self.walk_errors += 1
        logger.warning(f"WalkDir Error: {error}")

    def _process_file(self, path: Path):
        """
        Return a FileRecord if path is a regular file, otherwise None.
        lstat is used so symlinks are reported as links, not as their targets.
        """
        try:
            stat_result = path.lstat()
        except OSError as e:
            self.walk_errors += 1
            logger.warning(f"WalkDir Error: {path}: {e}")
            return None

        if stat.S_ISLNK(stat_result.st_mode):
            logger.debug(f"Skipping symbolic link: {path}")
            return None

        if not stat.S_ISREG(stat_result.st_mode):
            logger.debug(f"Skipping special file: {path}")
            return None

        return FileRecord(size=stat_result.st_size, path=str(path))
