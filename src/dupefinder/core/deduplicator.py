"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

deduplicator.py
Runs the duplicate detection pipeline over scanned FileRecord objects:
    size buckets → sample hash buckets → groups ordered by descending size
"""
import time
import logging
from typing import List, Tuple, Optional, Callable
from dupefinder.core.models import FileRecord, DuplicateGroup, ScanStats, SamplingConfig, Stage
from dupefinder.core.grouper import FileGrouperImpl
from dupefinder.core.hasher import HasherImpl
from dupefinder.core.interfaces import Deduplicator
from dupefinder.core.stages import SizeStageImpl, SampleHashStageImpl
from dupefinder.core.sorter import Sorter

logger = logging.getLogger(__name__)


# =============================
# Main Deduplicator Class
# =============================
class DeduplicatorImpl(Deduplicator):
    """
    Implements two-stage duplicate detection and collects statistics.
    """
    def __init__(
        self,
        grouper: Optional[FileGrouperImpl] = None,
        hasher: Optional[HasherImpl] = None,
        progress_interval: int = SamplingConfig.PROGRESS_INTERVAL
    ):
        self.grouper = grouper or FileGrouperImpl()
        self.hasher = hasher or HasherImpl()
        self.progress_interval = progress_interval

    def find_duplicates(
        self,
        records: List[FileRecord],
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
        stats: Optional[ScanStats] = None
    ) -> Tuple[List[DuplicateGroup], ScanStats]:
        """
        Main pipeline.
        Args:
            records: Scanned file records
            progress_callback (Optional[Callable[[str, int, int], None]]): Reports progress per stage.
            stats: Stats object to fill; a new one is created when omitted
        Returns:
            Tuple[List[DuplicateGroup], ScanStats]
        """
        stats = stats if stats is not None else ScanStats()
        total_start_time = time.time()

        # Stage 1: group by size
        size_stage = SizeStageImpl(self.grouper)
        start_time = time.time()
        candidates = size_stage.process(records, progress_callback=progress_callback)
        stats.update_stage(
            Stage.SIZE,
            files_in=len(records),
            files_out=len(candidates),
            duration=time.time() - start_time
        )

        # Stage 2: group by (sample digest, size)
        hash_stage = SampleHashStageImpl(self.grouper, self.hasher, self.progress_interval)
        start_time = time.time()
        groups = hash_stage.process(candidates, progress_callback=progress_callback)
        stats.groups = len(groups)
        stats.update_stage(
            Stage.HASH,
            files_in=len(candidates),
            files_out=sum(g.duplicate_count for g in groups),
            duration=time.time() - start_time,
            errors=hash_stage.errors
        )

        Sorter.sort_groups(groups)

        # Finalize stats
        stats.total_time = time.time() - total_start_time
        logger.debug(f"Found {len(groups)} duplicate groups in {stats.total_time:.3f}s")

        return groups, stats
