"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/report_service.py
Renders duplicate groups as plain text and writes them to the console and a report file.

Report layout:
    Dupes found totaling <N> bytes:
    Duplicates of size <S>
    \t<path>
    \t<path>
"""
import sys
import logging
from pathlib import Path
from typing import List, TextIO, Optional

from dupefinder.core.models import DuplicateGroup
from dupefinder.utils.convert_utils import ConvertUtils

logger = logging.getLogger(__name__)


class ReportService:
    @staticmethod
    def total_wasted_bytes(groups: List[DuplicateGroup]) -> int:
        """
        Sum of size × member count over all groups.
        Every member is counted, including the one a user would keep.
        """
        return sum(group.wasted_bytes for group in groups)

    @staticmethod
    def render_lines(groups: List[DuplicateGroup]) -> List[str]:
        """
        Build report lines in the order the groups are given.
        DeduplicatorImpl already returns them largest first.
        """
        total = ConvertUtils.format_number(ReportService.total_wasted_bytes(groups))

        lines = [f"Dupes found totaling {total} bytes:"]
        for group in groups:
            lines.append(f"Duplicates of size {ConvertUtils.format_number(group.size)}")
            for path in group.paths:
                lines.append(f"\t{path}")
        return lines

    @staticmethod
    def write_report(
            groups: List[DuplicateGroup],
            report_path: str,
            console: Optional[TextIO] = None
    ) -> Path:
        """
        Write the report to `report_path`, then echo it to `console` (stdout by default).

        The report file is truncated first. Errors opening or writing it are
        raised to the caller as OSError. Paths that are not valid UTF-8 are
        written back as their original bytes (surrogateescape).

        Returns:
            Path of the written report file
        """
        console = console or sys.stdout
        path = Path(report_path)
        lines = ReportService.render_lines(groups)

        with path.open("w", encoding="utf-8", errors="surrogateescape", newline="\n") as report:
            for line in lines:
                report.write(line + "\n")

        for line in lines:
            print(line, file=console)

        logger.debug(f"Report written to {path} ({len(groups)} groups)")
        return path
