"""
Integration tests for the detection pipeline.
Verifies end-to-end workflow: scan → size stage → sample hash stage → ordered groups.
"""
import os
from pathlib import Path
from dupefinder.core import FileScannerImpl, DeduplicatorImpl, HasherImpl, ScanStats, Stage


class TestDeduplicatorIntegration:
    """Test the pipeline with real file operations."""

    def test_finds_duplicate_groups(self, test_files, temp_dir):
        records = FileScannerImpl(root_dir=str(temp_dir)).scan()
        groups, stats = DeduplicatorImpl().find_duplicates(records)

        assert [g.size for g in groups] == [3000, 1024]

        group_3000, group_1kb = groups
        assert set(group_3000.paths) == {str(test_files["dup2_a"]), str(test_files["dup2_b"])}
        assert set(group_1kb.paths) == {
            str(test_files["dup1_a"]), str(test_files["dup1_b"]), str(test_files["sub_dup"])
        }
        assert all(str(test_files["near_dup"]) not in g.paths for g in groups)

    def test_stats_reflect_each_stage(self, test_files, temp_dir):
        records = FileScannerImpl(root_dir=str(temp_dir)).scan()
        _, stats = DeduplicatorImpl().find_duplicates(records)

        assert stats.examined == 7
        assert stats.candidates == 6   # unique.txt is the only size singleton
        assert stats.hashed == 6
        assert stats.hash_errors == 0
        assert stats.groups == 2
        assert stats.duplicates == 5
        assert Stage.SIZE in stats.stage_stats
        assert Stage.HASH in stats.stage_stats
        assert stats.total_time >= 0

    def test_group_validity(self, test_files, temp_dir):
        """Every group has 2+ distinct paths with identical size and sample digest."""
        records = FileScannerImpl(root_dir=str(temp_dir)).scan()
        groups, _ = DeduplicatorImpl().find_duplicates(records)
        hasher = HasherImpl()

        for group in groups:
            assert len(set(group.paths)) == len(group.paths) >= 2
            assert {os.path.getsize(p) for p in group.paths} == {group.size}
            assert {hasher.compute_sample_hash(p) for p in group.paths} == {group.key.digest}

    def test_end_to_end_last_byte_difference(self, temp_dir):
        """A and B are identical; C differs only in its last byte."""
        (temp_dir / "A").write_bytes(b"\x00" * 1000)
        (temp_dir / "B").write_bytes(b"\x00" * 1000)
        (temp_dir / "C").write_bytes(b"\x00" * 999 + b"\x01")

        records = FileScannerImpl(root_dir=str(temp_dir)).scan()
        groups, stats = DeduplicatorImpl().find_duplicates(records)

        assert len(groups) == 1
        assert groups[0].size == 1000
        assert sorted(Path(p).name for p in groups[0].paths) == ["A", "B"]
        assert stats.candidates == 3

    def test_no_duplicates_when_sizes_unique(self, temp_dir):
        for i in range(1, 5):
            (temp_dir / f"f{i}").write_bytes(b"x" * i)

        records = FileScannerImpl(root_dir=str(temp_dir)).scan()
        groups, stats = DeduplicatorImpl().find_duplicates(records)

        assert groups == []
        assert stats.examined == 4
        assert stats.candidates == 0
        assert stats.hashed == 0

    def test_uses_supplied_stats_and_listeners(self, test_files, temp_dir):
        events = []
        stats = ScanStats()
        stats.add_listener(lambda stage, data: events.append(stage))

        records = FileScannerImpl(root_dir=str(temp_dir)).scan()
        _, returned = DeduplicatorImpl().find_duplicates(records, stats=stats)

        assert returned is stats
        assert events == [Stage.SIZE, Stage.HASH]

    def test_progress_interval_is_forwarded(self, temp_dir):
        for i in range(4):
            (temp_dir / f"same{i}").write_bytes(b"z" * 64)
        progress = []

        records = FileScannerImpl(root_dir=str(temp_dir)).scan()
        DeduplicatorImpl(progress_interval=2).find_duplicates(
            records,
            progress_callback=lambda stage, current, total: progress.append((stage, current))
        )

        assert (Stage.HASH, 2) in progress
        assert (Stage.HASH, 4) in progress
