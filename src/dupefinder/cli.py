#!/usr/bin/env python3
"""
dupefinder CLI — Command line interface for duplicate file detection.
Scans one directory tree, prints duplicate groups and writes them to a report file.
Reporting only: no file is ever modified or deleted.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import Dict, List, Optional, NoReturn
import logging

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from dupefinder import __version__
from dupefinder.core.models import DuplicateGroup, ScanParams, SamplingConfig, Stage
from dupefinder.commands import FindDuplicatesCommand
from dupefinder.services.report_service import ReportService
from dupefinder.utils.convert_utils import ConvertUtils

MISSING_PATH_MESSAGE = "You must include the folder path to scan."

EPILOG_TEXT = """
Examples:
  Find duplicates in Downloads, report to ./dupes.txt
  %(prog)s ~/Downloads

  Write the report somewhere else
  %(prog)s ~/Downloads -o ~/reports/downloads-dupes.txt

  Only the report, no progress lines
  %(prog)s ~/Downloads --quiet
"""


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles; undecodable file names go out as their original bytes
        sys.stdout.reconfigure(encoding='utf-8', errors='surrogateescape')
        sys.stderr.reconfigure(encoding='utf-8', errors='backslashreplace')

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="dupefinder",
            description="dupefinder — find duplicate files by size and sampled content",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Optional at parser level so a missing path prints usage instead of an argparse error
        parser.add_argument(
            "path",
            nargs="?",
            default=None,
            type=str,
            help="Directory to scan for duplicates"
        )

        parser.add_argument(
            "--output", "-o",
            default=SamplingConfig.REPORT_FILENAME,
            type=str,
            metavar='FILE',
            help=f"Report file, overwritten on each run. Default: {SamplingConfig.REPORT_FILENAME}"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress progress and count lines (the report is always printed)"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and detailed statistics"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )
        return parser

    @staticmethod
    def configure_logging(verbose: bool) -> None:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format=LOG_FORMAT
        )

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams(
                root_dir=args.path,
                report_path=args.output,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - one line per notification."""
        if self.quiet:
            return
        if stage == Stage.HASH:
            print(f"{ConvertUtils.format_number(current)} files hashed.")

    def stage_listener(self, stage: str, data: Dict) -> None:
        """Prints the counts each stage reports through ScanStats."""
        if self.quiet:
            return
        if stage == Stage.SIZE:
            print(f"Examined {ConvertUtils.format_number(data['files_in'])} files.")
            print(f"Duplicates by size: {ConvertUtils.format_number(data['files_out'])}")

    def run_scan(self, params: ScanParams) -> List[DuplicateGroup]:
        """Execute scan workflow."""
        command = FindDuplicatesCommand()
        try:
            groups, stats = command.execute(
                params,
                progress_callback=self.progress_callback,
                stats_listener=self.stage_listener
            )
        except RuntimeError as e:
            self.error_exit(f"Scan failed: {e}")

        if self.verbose:
            print("\nScan Statistics:")
            print(stats.print_summary())
            wasted = ReportService.total_wasted_bytes(groups)
            print(f"Duplicated data: {ConvertUtils.bytes_to_human(wasted)}\n")

        return groups

    def output_results(self, groups: List[DuplicateGroup], params: ScanParams) -> None:
        """Print the report and persist it to params.report_path."""
        try:
            ReportService.write_report(groups, params.report_path, console=sys.stdout)
        except OSError as e:
            self.error_exit(f"Cannot write report file {params.report_path}: {e}")

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point."""
        parser = self.build_parser()
        args = parser.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.configure_logging(self.verbose)

        if args.path is None:
            # Bad usage is reported, not treated as a failure
            print(f"⚠️  {MISSING_PATH_MESSAGE}", file=sys.stderr)
            parser.print_usage(sys.stderr)
            return

        params = self.create_params(args)

        if not self.quiet:
            print(f"Scanning directory: {params.root_dir}")

        groups = self.run_scan(params)
        self.output_results(groups, params)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main(argv=None) -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run(argv)
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
