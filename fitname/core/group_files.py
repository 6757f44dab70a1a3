"""
group_files.py - Sibling Grouping

Responsibilities:
- Bucket files by (parent directory, raw stem)
- Compute the shared stem budget of a bucket
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple
from collections import defaultdict
import logging

from .models_fs import PathEntry, NameParts, DEFAULT_SECONDARY_EXT_LEN
from .split_ext import split_name

logger = logging.getLogger(__name__)

GroupKey = Tuple[Path, bytes]
Sibling = Tuple[PathEntry, NameParts]


def group_siblings(
    entries: Iterable[PathEntry],
    secondary_ext_len: int = DEFAULT_SECONDARY_EXT_LEN,
    errors: Optional[List[str]] = None
) -> Dict[GroupKey, List[Sibling]]:
    """
    Group files sharing a parent directory and raw stem

    Args:
        entries: Traversal entries (directories are ignored)
        secondary_ext_len: Secondary extension threshold for splitting
        errors: List collecting messages for unreadable entries

    Returns:
        Mapping (parent, raw_stem) -> siblings, in encounter order
    """
    groups: Dict[GroupKey, List[Sibling]] = defaultdict(list)

    for entry in entries:
        if entry.error is not None:
            if errors is not None:
                errors.append(f"Error getting entry {entry.path}: {entry.error}")
            continue
        if entry.is_dir:
            continue

        parts = split_name(entry.name_bytes, secondary_ext_len)
        groups[(entry.parent, parts.raw_stem)].append((entry, parts))

    return dict(groups)


def stem_budget(members: Iterable[Sibling], max_len: int) -> int:
    """
    Bytes the shared stem of a group may use

    The largest extension overhead in the group decides, so every
    member fits with the same stem.

    Args:
        members: Siblings of one group
        max_len: Maximum name length in bytes

    Returns:
        Stem budget, 0 when extensions alone fill max_len
    """
    overhead = max((parts.overhead for _, parts in members), default=0)
    budget = max(max_len - overhead, 0)
    logger.debug("Stem budget %d (max_len=%d, overhead=%d)", budget, max_len, overhead)
    return budget
