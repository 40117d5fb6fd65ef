"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Implements the size and content-key bucketing used by the pipeline stages.
"""

from typing import List, Dict, Tuple, Any, Callable, Iterable, TypeVar
from collections import defaultdict
from dupefinder.core.interfaces import FileGrouper
from dupefinder.core.models import FileRecord, ContentKey

T = TypeVar("T")


class FileGrouperImpl(FileGrouper):
    """
    Buckets records by a computed key and drops singleton buckets.
    Bucket order and member order follow first appearance in the input.
    """

    def group_by_size(self, records: Iterable[FileRecord]) -> Dict[int, List[FileRecord]]:
        """Groups files by their size."""
        return self._group_by(records, lambda r: r.size)

    def group_by_content_key(
        self,
        keyed_records: Iterable[Tuple[ContentKey, FileRecord]]
    ) -> Dict[ContentKey, List[str]]:
        """Groups paths by (digest, size). Size is kept only in the key."""
        return self._group_by(
            keyed_records,
            key_func=lambda item: item[0],
            value_func=lambda item: item[1].path
        )

    @staticmethod
    def flatten(groups: Dict[Any, List[T]]) -> List[T]:
        """Concatenate bucket members in bucket order."""
        return [item for members in groups.values() for item in members]

    @staticmethod
    def _group_by(
        items: Iterable[Any],
        key_func: Callable[[Any], Any],
        value_func: Callable[[Any], Any] = lambda item: item
    ) -> Dict[Any, List[Any]]:
        """
        Helper method to group items by any computed key.
        Args:
            items: Items to group
            key_func: Function that computes a hashable key from an item
            value_func: Function that selects what is stored in the bucket
        Returns:
            Dict[key, List[value]] holding only buckets with 2+ members
        """
        groups = defaultdict(list)
        for item in items:
            groups[key_func(item)].append(value_func(item))

        # Avoid groups with less than 2 files
        return {key: group for key, group in groups.items() if len(group) >= 2}
