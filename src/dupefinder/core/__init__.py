"""
Core duplicate detection engine — scanner, sampler, hasher, grouper, and pipeline.

This package contains the whole detection logic of dupefinder:
- FileScannerImpl: recursive traversal yielding regular files as FileRecord
- ContentSamplerImpl: bounded head/tail sample of a file (at most 2 KiB)
- HasherImpl + XXHash128AlgorithmImpl: xxHash128 digest of the sample
- FileGrouperImpl: size and content-key bucketing with singleton filtering
- DeduplicatorImpl: size stage → sample hash stage → descending size order
- Models: FileRecord, ContentKey, DuplicateGroup, ScanStats, ScanParams

No I/O besides reading the scanned files — report writing lives in services.
"""

from .scanner import FileScannerImpl
from .sampler import ContentSamplerImpl
from .grouper import FileGrouperImpl
from .hasher import HasherImpl, XXHash128AlgorithmImpl
from .stages import SizeStageImpl, SampleHashStageImpl
from .deduplicator import DeduplicatorImpl
from .sorter import Sorter
from .models import (
    FileRecord, ContentKey, DuplicateGroup, ScanStats, ScanParams,
    SamplingConfig, Stage)

__all__ = [
    "FileScannerImpl",
    "ContentSamplerImpl",
    "FileGrouperImpl",
    "HasherImpl",
    "XXHash128AlgorithmImpl",
    "SizeStageImpl",
    "SampleHashStageImpl",
    "DeduplicatorImpl",
    "Sorter",
    "FileRecord",
    "ContentKey",
    "DuplicateGroup",
    "ScanStats",
    "ScanParams",
    "SamplingConfig",
    "Stage",
]
