"""
Unit tests for FileGrouperImpl.
Verifies size and content-key bucketing with singleton filtering.
"""
from dupefinder.core import FileGrouperImpl
from dupefinder.core import FileRecord, ContentKey


class TestFileGrouperImpl:
    """Test file grouping by size and content key."""

    def test_groups_by_size_filters_single_files(self):
        """
        group_by_size returns ONLY groups with 2+ files of same size.
        Single files are filtered out (not considered duplicates).
        """
        records = [
            FileRecord(size=1024, path="/a.txt"),
            FileRecord(size=1024, path="/b.txt"),  # Same size → group
            FileRecord(size=2048, path="/c.txt"),  # Single file → filtered
        ]

        size_groups = FileGrouperImpl().group_by_size(records)

        assert list(size_groups.keys()) == [1024]
        assert [r.path for r in size_groups[1024]] == ["/a.txt", "/b.txt"]

    def test_group_order_follows_input(self):
        records = [
            FileRecord(size=5, path="/x1"),
            FileRecord(size=9, path="/y1"),
            FileRecord(size=5, path="/x2"),
            FileRecord(size=9, path="/y2"),
        ]

        grouper = FileGrouperImpl()
        flattened = grouper.flatten(grouper.group_by_size(records))

        assert [r.path for r in flattened] == ["/x1", "/x2", "/y1", "/y2"]

    def test_size_filter_is_idempotent(self):
        """Re-running the size filter on its own output changes nothing."""
        records = [
            FileRecord(size=1, path="/a"),
            FileRecord(size=1, path="/b"),
            FileRecord(size=2, path="/c"),
            FileRecord(size=3, path="/d"),
            FileRecord(size=3, path="/e"),
            FileRecord(size=3, path="/f"),
        ]

        grouper = FileGrouperImpl()
        once = grouper.flatten(grouper.group_by_size(records))
        twice = grouper.flatten(grouper.group_by_size(once))

        assert once == twice
        assert len(once) == 5

    def test_groups_by_content_key_stores_paths(self):
        key_dup = ContentKey(digest=b"h" * 16, size=100)
        key_unique = ContentKey(digest=b"u" * 16, size=100)
        keyed = [
            (key_dup, FileRecord(size=100, path="/dup1.txt")),
            (key_unique, FileRecord(size=100, path="/unique.txt")),
            (key_dup, FileRecord(size=100, path="/dup2.txt")),
        ]

        groups = FileGrouperImpl().group_by_content_key(keyed)

        assert groups == {key_dup: ["/dup1.txt", "/dup2.txt"]}

    def test_same_digest_different_size_not_grouped(self):
        digest = b"d" * 16
        keyed = [
            (ContentKey(digest, 100), FileRecord(size=100, path="/a")),
            (ContentKey(digest, 200), FileRecord(size=200, path="/b")),
        ]

        assert FileGrouperImpl().group_by_content_key(keyed) == {}

    def test_grouper_all_unique_files(self):
        records = [FileRecord(size=s, path=f"/file{s}.txt") for s in (100, 200, 300, 400)]
        assert FileGrouperImpl().group_by_size(records) == {}

    def test_group_by_empty_input(self):
        """Empty input should return empty dict."""
        grouper = FileGrouperImpl()
        assert grouper.group_by_size([]) == {}
        assert grouper.group_by_content_key([]) == {}
        assert grouper.flatten({}) == []
