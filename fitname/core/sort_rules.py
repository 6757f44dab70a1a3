"""
sort_rules.py - Sorting Rules Module

Provides processing orders for entries
"""

from typing import List, Iterable
from .models_fs import PathEntry


def sort_by_path(entries: Iterable[PathEntry], reverse: bool = False) -> List[PathEntry]:
    """
    Sort by path (for ensuring stable processing order)

    Args:
        entries: Entry list
        reverse: Whether to sort in reverse

    Returns:
        Sorted entry list
    """
    return sorted(entries, key=lambda e: str(e.path), reverse=reverse)


def sort_deepest_first(entries: Iterable[PathEntry]) -> List[PathEntry]:
    """
    Sort so that contents come before their containing directory

    Renaming in this order never invalidates a path still waiting below it.

    Args:
        entries: Entry list

    Returns:
        Sorted entry list (deepest first, then by path)
    """
    return sorted(entries, key=lambda e: (-e.depth, str(e.path)))
