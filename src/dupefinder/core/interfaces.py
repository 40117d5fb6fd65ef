"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate scan.
These protocols enforce structural typing using Python's `typing.Protocol` so that
each pipeline piece can be swapped or faked in tests.

Key Components:
---------------
- FileScanner: Interface for recursive traversal yielding FileRecord objects.
- ContentSampler: Interface for reading the bounded head/tail sample of a file.
- HashAlgorithm: Standardized interface for digest functions (e.g., XXH128, MD5).
- Hasher: Interface for turning a FileRecord into a ContentKey.
- FileGrouper: Interface for bucketing by size or content key.
- Deduplicator: Interface for the engine coordinating both stages.
"""

from typing import Protocol, List, Dict, Tuple, Optional, Callable, Iterator, Iterable
from dupefinder.core.models import FileRecord, ContentKey, DuplicateGroup, ScanStats


# ===== Interfaces =====

class FileScanner(Protocol):
    """Interface for scanning a directory tree for regular files."""
    def iter_files(self) -> Iterator[FileRecord]:
        """Lazily yield every regular file below the configured root."""
        ...

    def scan(self) -> List[FileRecord]:
        """Materialise iter_files() into a list."""
        ...


class ContentSampler(Protocol):
    def sample(self, path: str) -> bytes:
        """Return the first and last sample windows of the file concatenated."""
        ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like MD5 or xxHash
    without affecting the rest of the pipeline.
    """

    @staticmethod
    def hash(data: bytes) -> bytes:
        """Computes the hash of the provided byte data."""
        ...


class Hasher(Protocol):
    """Interface for computing the content key of a file."""
    def compute_sample_hash(self, path: str) -> bytes: ...
    def compute_content_key(self, record: FileRecord) -> ContentKey: ...


class FileGrouper(Protocol):
    """
    Interface for bucketing files.
    Every method drops buckets with fewer than two members.
    """
    def group_by_size(self, records: Iterable[FileRecord]) -> Dict[int, List[FileRecord]]:
        ...

    def group_by_content_key(
        self,
        keyed_records: Iterable[Tuple[ContentKey, FileRecord]]
    ) -> Dict[ContentKey, List[str]]:
        ...


class Deduplicator(Protocol):
    """
    Interface for the main engine: size stage → sample hash stage → ordering.
    """
    def find_duplicates(
        self,
        records: List[FileRecord],
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
        stats: Optional[ScanStats] = None
    ) -> Tuple[List[DuplicateGroup], ScanStats]:
        """
        Run the pipeline on scanned records.

        Args:
            records: Every regular file found by the scanner.
            progress_callback: Optional callback for progress updates (stage, current, total).
            stats: Optional pre-built stats object (e.g. with listeners attached).

        Returns:
            A tuple containing:
                - Duplicate groups ordered by descending size
                - Statistics collected during processing
        """
        ...
