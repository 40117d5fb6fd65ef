"""
Shared fixtures for duplicate scan tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate scenarios:
    - 3 identical 1KB files (one in a subdirectory)
    - 2 identical 3000-byte files
    - 1 file of 3000 bytes whose tail differs (same size, different sample)
    - 1 unique-size file
    """
    files = {}

    # Duplicate set #1 (1KB of 'A')
    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    # Duplicate pair #2 (3000 bytes, tail window differs from head)
    content_b = b"B" * 2000 + b"b" * 1000
    files["dup2_a"] = temp_dir / "dup2_a.bin"
    files["dup2_b"] = temp_dir / "dup2_b.bin"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    # Same size as pair #2, last byte differs → inside the tail window
    files["near_dup"] = temp_dir / "near_dup.bin"
    files["near_dup"].write_bytes(content_b[:-1] + b"X")

    # Unique size
    files["unique"] = temp_dir / "unique.txt"
    files["unique"].write_bytes(b"C" * 1500)

    # Subdirectory with duplicate of set #1
    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    return files
