"""
Command orchestrator for a duplicate scan.
Single entry point for the business logic used by the CLI and by library callers.
"""
from typing import List, Optional, Callable, Tuple, Dict
from dupefinder.core.models import DuplicateGroup, ScanStats, ScanParams
from dupefinder.core.scanner import FileScannerImpl
from dupefinder.core.deduplicator import DeduplicatorImpl


class FindDuplicatesCommand:
    """
    Orchestrates the whole workflow:
    1. Traverse the root directory
    2. Run size and sample-hash stages
    3. Return ordered groups with statistics

    Usage:
        params = ScanParams(root_dir="~/Downloads")
        command = FindDuplicatesCommand()
        groups, stats = command.execute(
            params,
            progress_callback=cli_progress_printer,
            stats_listener=cli_stage_printer
        )
    """

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
            stats_listener: Optional[Callable[[str, Dict], None]] = None
    ) -> Tuple[List[DuplicateGroup], ScanStats]:
        """
        Execute a scan with given parameters.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None
            stats_listener: (stage: str, stage_data: dict) -> None, called after each stage

        Returns:
            Tuple of (duplicate_groups, statistics)

        Raises:
            RuntimeError: If the root directory cannot be scanned
        """
        stats = ScanStats()
        if stats_listener:
            stats.add_listener(stats_listener)

        # Step 1: Traverse (fully materialised before bucketing)
        scanner = FileScannerImpl(root_dir=params.root_dir)
        records = scanner.scan()
        stats.walk_errors = scanner.walk_errors

        # Step 2: Size → sample hash
        deduplicator = DeduplicatorImpl(progress_interval=params.progress_interval)
        groups, stats = deduplicator.find_duplicates(
            records,
            progress_callback=progress_callback,
            stats=stats
        )

        return groups, stats
