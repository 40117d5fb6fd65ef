"""
dupefinder — duplicate file finder that reports, never deletes.

Core features:
- Three-stage pipeline: recursive traversal → size buckets → sampled-content hash buckets
- Bounded I/O: at most the first and last 1 KiB of each candidate file are read
- xxHash128 digests of the sample (via xxhash)
- Plain-text report on the console and in dupes.txt
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("dupefinder")
except Exception:
    import tomllib
    from pathlib import Path

    with open(Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API — only what users should import directly
from dupefinder.commands import FindDuplicatesCommand
from dupefinder.core import ScanParams, ScanStats, FileRecord, ContentKey, DuplicateGroup
from dupefinder.utils.convert_utils import ConvertUtils
from dupefinder.services import ReportService

__all__ = [
    "FindDuplicatesCommand",
    "ScanParams",
    "ScanStats",
    "FileRecord",
    "ContentKey",
    "DuplicateGroup",
    "ConvertUtils",
    "ReportService",
    "__version__",
]
