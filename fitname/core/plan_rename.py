"""
plan_rename.py - Truncation Plan Generation Module

Responsibilities:
- Truncate each sibling group to one shared stem
- Truncate directory names independently
- Decide unchanged / renamed / skipped for every entry
- Output RenamePlan
"""

from pathlib import Path
from typing import List, Dict, Iterable, Optional, Callable, Sequence, Tuple
from collections import defaultdict
import logging
import os

from .models_fs import PathEntry, PlanAction, RenamePlan, TruncateOptions, display_name
from .group_files import Sibling, group_siblings, stem_budget
from .text_trunc import truncate_stem, truncate_dir_name
from .sort_rules import sort_by_path, sort_deepest_first
from .scan_files import scan_entries

logger = logging.getLogger(__name__)


def _decide(plan: RenamePlan, entry: PathEntry, new_name: bytes) -> None:
    """Record the outcome of giving entry the name new_name"""
    max_len = plan.options.max_len
    src = entry.path

    if new_name == entry.name_bytes:
        plan.add_op(src, src, PlanAction.UNCHANGED, is_dir=entry.is_dir)
        return

    if not new_name:
        note = "no valid text prefix to keep"
    elif len(new_name) > max_len:
        note = f"{len(new_name)} bytes after truncation, limit is {max_len}"
    else:
        dst = entry.parent / os.fsdecode(new_name)
        plan.add_op(src, dst, PlanAction.RENAMED, is_dir=entry.is_dir)
        return

    plan.add_op(src, src, PlanAction.SKIPPED_OVERSIZED, is_dir=entry.is_dir, note=note)
    plan.add_warning(f"Skipping {src}: {note}")


def plan_group(members: Sequence[Sibling], plan: RenamePlan) -> None:
    """
    Plan one sibling group

    The stem is truncated once for the whole group; every member keeps
    its own extensions.

    Args:
        members: Siblings sharing parent directory and raw stem
        plan: Plan receiving the decisions
    """
    if not members:
        return

    options = plan.options
    budget = stem_budget(members, options.max_len)
    raw_stem = members[0][1].raw_stem
    stem = truncate_stem(raw_stem, budget, options.word_boundaries)

    if stem != raw_stem:
        logger.debug("Group %r in %s: stem truncated to %r",
                     display_name(raw_stem), members[0][0].parent, display_name(stem))

    for entry, parts in members:
        _decide(plan, entry, parts.join(stem))


def plan_files(entries: Iterable[PathEntry], options: Optional[TruncateOptions] = None) -> RenamePlan:
    """
    Generate truncation plan for files

    Args:
        entries: Traversal entries (directories are ignored)
        options: Truncation options

    Returns:
        Truncation plan
    """
    if options is None:
        options = TruncateOptions()

    plan = RenamePlan(options=options)
    groups = group_siblings(sort_by_path(entries), options.secondary_ext_len, errors=plan.errors)

    for members in groups.values():
        plan_group(members, plan)

    return plan


def plan_directories(entries: Iterable[PathEntry], options: Optional[TruncateOptions] = None) -> RenamePlan:
    """
    Generate truncation plan for directories, deepest first

    Args:
        entries: Traversal entries (non-directories are ignored)
        options: Truncation options

    Returns:
        Truncation plan
    """
    if options is None:
        options = TruncateOptions()

    plan = RenamePlan(options=options)

    for entry in sort_deepest_first(entries):
        if not entry.is_dir or entry.error is not None:
            continue
        new_name = truncate_dir_name(entry.name_bytes, options.max_len, options.word_boundaries)
        _decide(plan, entry, new_name)

    return plan


def _covering_root(root: Path, earlier: Sequence[Path], later: Sequence[Path]) -> Optional[Path]:
    """Return a root whose traversal already includes root, if any"""
    for other in earlier:
        if other == root or other in root.parents:
            return other
    for other in later:
        if other in root.parents:
            return other
    return None


def plan_truncation(
    roots: Iterable[Path],
    options: Optional[TruncateOptions] = None,
    progress_callback: Optional[Callable[[str], None]] = None
) -> Tuple[RenamePlan, RenamePlan]:
    """
    Traverse every root and plan files and directories

    A root that cannot be traversed is reported and skipped. A root that
    lies inside another root is only planned once, as part of the outer one.

    Args:
        roots: Paths to process (recursively, if directories)
        options: Truncation options
        progress_callback: Progress callback function

    Returns:
        (file plan, directory plan)
    """
    if options is None:
        options = TruncateOptions()

    file_plan = RenamePlan(options=options)
    dir_plan = RenamePlan(options=options)

    roots = [Path(root) for root in roots]
    absolute = [Path(os.path.abspath(root)) for root in roots]

    for i, root in enumerate(roots):
        covering = _covering_root(absolute[i], absolute[:i], absolute[i + 1:])
        if covering is not None:
            file_plan.add_warning(f"Skipping {root}: already covered by {covering}")
            continue

        try:
            files, dirs = scan_entries(root, progress_callback)
        except OSError as e:
            file_plan.add_error(f"Cannot traverse {root}: {e}")
            continue

        file_plan.extend(plan_files(files, options))
        dir_plan.extend(plan_directories(dirs, options))

    return file_plan, dir_plan


def validate_plan(plan: RenamePlan) -> List[str]:
    """
    Validate truncation plan

    Collisions are only reported, never resolved.

    Args:
        plan: Truncation plan

    Returns:
        Problem list
    """
    problems = []

    # Check if source files exist
    for op in plan.valid_ops:
        if not os.path.lexists(op.src):
            problems.append(f"Source file does not exist: {op.src}")

    # Check for duplicate destinations
    dst_set: Dict[Path, List[Path]] = defaultdict(list)
    for op in plan.ops:
        dst_set[op.dst].append(op.src)

    for dst, srcs in dst_set.items():
        if len(srcs) > 1:
            names = ", ".join(src.name for src in srcs)
            problems.append(f"Multiple entries have the same destination {dst}: {names}")

    # Check for destinations taken by entries outside the plan
    sources = {op.src for op in plan.ops}
    for op in plan.valid_ops:
        if op.dst not in sources and os.path.lexists(op.dst):
            problems.append(f"Destination already exists: {op.dst}")

    return problems
