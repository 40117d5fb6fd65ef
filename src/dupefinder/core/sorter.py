"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sorter.py
Pure ordering logic for duplicate groups — zero dependencies outside core.
"""
from typing import List
from dupefinder.core.models import DuplicateGroup


class Sorter:
    """
    Orders groups largest first.
    list.sort is stable, so equal sizes keep their grouping order within a run.
    """

    @staticmethod
    def sort_groups(groups: List[DuplicateGroup]) -> None:
        if not groups:
            return
        groups.sort(key=lambda g: g.size, reverse=True)
