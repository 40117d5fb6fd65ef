"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models and configuration for size/sample-hash duplicate detection.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Union

logger = logging.getLogger(__name__)


# =============================
# Enums and Config
# =============================

class Stage(str, Enum):
    SIZE = "Size grouping"
    HASH = "Sample hash"


class SamplingConfig:
    """Sampling window and reporting constants shared by the pipeline."""
    CHUNK_SIZE = 1024               # bytes read from each end of a file
    OVERLAP_LIMIT = CHUNK_SIZE * 2  # files up to this size re-read the tail window from offset 0
    PROGRESS_INTERVAL = 100         # hashed files between progress notifications
    REPORT_FILENAME = "dupes.txt"

    @staticmethod
    def get_last_position(file_size: int, chunk_size: int = CHUNK_SIZE) -> int:
        """Offset of the trailing sample window for a file larger than chunk_size."""
        if file_size > chunk_size * 2:
            return file_size - chunk_size
        return 0


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileRecord:
    """
    A regular file discovered during traversal.
    Immutable: size is captured once from lstat and never refreshed.
    """
    size: int  # in bytes
    path: str

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size}>"


@dataclass(frozen=True)
class ContentKey:
    """
    Identity of a duplicate group.
    Size is part of the key because files of different sizes could share a sample digest.
    """
    digest: bytes
    size: int

    def __post_init__(self):
        if not isinstance(self.digest, bytes):
            raise ValueError("Field 'digest' must be bytes")
        if self.size < 0:
            raise ValueError("Size cannot be negative")


@dataclass
class DuplicateGroup:
    """
    Files sharing exact size and sampled-byte digest.
    Paths keep the order in which they were grouped.
    """
    key: ContentKey
    paths: List[str] = field(default_factory=list)

    @property
    def size(self) -> int:
        return self.key.size

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.paths)

    @property
    def wasted_bytes(self) -> int:
        return self.size * self.duplicate_count

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.duplicate_count >= 2

    def __repr__(self):
        return f"<DuplicateGroup size={self.size}, count={len(self.paths)}>"


class ScanStats:
    """
    Counters collected while scanning, bucketing and hashing.
    Listeners receive (stage_name, stage_data) whenever a stage reports.
    """
    def __init__(self):
        self.examined: int = 0
        self.candidates: int = 0
        self.hashed: int = 0
        self.hash_errors: int = 0
        self.walk_errors: int = 0
        self.groups: int = 0
        self.duplicates: int = 0
        self.total_time: float = 0.0
        self.stage_stats: Dict[str, Dict[str, Union[int, float]]] = {}
        self._listeners: List[Callable[[str, Dict], None]] = []

    def add_listener(self, listener: Callable[[str, Dict], None]):
        """Adds a listener to receive updates when stats are updated."""
        self._listeners.append(listener)

    def update_stage(
            self,
            stage_name: str,
            files_in: int,
            files_out: int,
            duration: float,
            errors: int = 0
    ) -> None:
        self.stage_stats[stage_name] = {
            "files_in": files_in,
            "files_out": files_out,
            "errors": errors,
            "time": duration,
        }

        if stage_name == Stage.SIZE:
            self.examined = files_in
            self.candidates = files_out
        elif stage_name == Stage.HASH:
            self.hashed = files_in - errors
            self.hash_errors = errors
            self.duplicates = files_out

        for listener in self._listeners:
            try:
                listener(stage_name, self.stage_stats[stage_name])
            except Exception as e:
                logger.warning(f"Error in stats event handler: {e}")

    def print_summary(self) -> str:
        lines = [
            "📊 Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            f"Files examined: {self.examined}",
            f"Size candidates: {self.candidates}",
            f"Files hashed: {self.hashed}",
            f"Duplicate groups: {self.groups} ({self.duplicates} files)",
        ]
        if self.walk_errors or self.hash_errors:
            lines.append(f"Skipped: {self.walk_errors} traversal / {self.hash_errors} read errors")

        for stage, data in self.stage_stats.items():
            label = stage.value if isinstance(stage, Stage) else str(stage)
            lines.append(f"{label}: {data['files_in']} → {data['files_out']} / {data['time']:.3f}s")

        return "\n".join(lines)


"""
DTO for scan parameters with built-in validation.
"""

@dataclass
class ScanParams:
    """Parameters for a duplicate scan with validation."""
    root_dir: str
    report_path: str = SamplingConfig.REPORT_FILENAME
    progress_interval: int = SamplingConfig.PROGRESS_INTERVAL

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if not self.report_path:
            raise ValueError("Report path cannot be empty")

        if self.progress_interval <= 0:
            raise ValueError("Progress interval must be positive")
