"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/stages.py
Pipeline stages for size/sample-hash duplicate detection.

STAGE CONTRACTS
---------------
SizeStageImpl        : records → flattened records sharing their size with another record
SampleHashStageImpl  : size candidates → DuplicateGroup per (digest, size) with 2+ paths

Both stages:
  • Run to completion before returning (no lazy output)
  • Report progress via callback (stage name, processed count, total count)
  • Never grow their input: output file count <= input file count
"""

import logging
from typing import List, Optional, Callable, Tuple
from dupefinder.core.models import FileRecord, ContentKey, DuplicateGroup, SamplingConfig, Stage
from dupefinder.core.grouper import FileGrouperImpl
from dupefinder.core.hasher import HasherImpl

logger = logging.getLogger(__name__)


class SizeStageImpl:
    def __init__(self, grouper: FileGrouperImpl):
        self.grouper = grouper

    def process(
            self,
            records: List[FileRecord],
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[FileRecord]:
        """
        Group by file size and drop sizes held by a single file.
        Returns the surviving records flattened in bucket order.
        """
        size_groups = self.grouper.group_by_size(records)
        candidates = self.grouper.flatten(size_groups)

        logger.debug(f"Size stage: {len(records)} files → {len(candidates)} candidates "
                     f"in {len(size_groups)} size classes")

        if progress_callback:
            total_files = len(records)
            progress_callback(Stage.SIZE, total_files, total_files)  # Fake instant progress

        return candidates


class SampleHashStageImpl:
    """
    Hashes the sample of every candidate and keeps (digest, size) classes with 2+ files.
    Unreadable files are logged, counted in `errors` and left out of every group.
    """

    def __init__(
            self,
            grouper: FileGrouperImpl,
            hasher: Optional[HasherImpl] = None,
            progress_interval: int = SamplingConfig.PROGRESS_INTERVAL
    ):
        self.grouper = grouper
        self.hasher = hasher or HasherImpl()
        self.progress_interval = progress_interval
        self.errors = 0

    def process(
            self,
            records: List[FileRecord],
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[DuplicateGroup]:
        self.errors = 0
        total_files = len(records)
        hashed_files = 0
        keyed_records: List[Tuple[ContentKey, FileRecord]] = []

        for record in records:
            try:
                key = self.hasher.compute_content_key(record)
            except OSError as e:
                self.errors += 1
                logger.warning(f"Hash file bytes error: {record.path}: {e}")
                continue

            keyed_records.append((key, record))
            hashed_files += 1
            if progress_callback and hashed_files % self.progress_interval == 0:
                progress_callback(Stage.HASH, hashed_files, total_files)

        hash_groups = self.grouper.group_by_content_key(keyed_records)
        return [DuplicateGroup(key=key, paths=paths) for key, paths in hash_groups.items()]
