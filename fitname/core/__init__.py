"""
core - Name Truncation Core Module

Provides core functionalities such as traversal, extension splitting,
sibling grouping, byte-safe truncation, plan generation and execution.
"""

from .models_fs import (
    PathEntry,
    NameParts,
    RenameOp,
    RenamePlan,
    TruncateOptions,
    PlanAction,
    DEFAULT_MAX_LEN,
    DEFAULT_SECONDARY_EXT_LEN,
)

from .scan_files import (
    walk_entries,
    scan_entries,
)

from .split_ext import (
    split_name,
    is_valid_text,
)

from .text_trunc import (
    truncate_stem,
    truncate_dir_name,
    longest_valid_prefix,
)

from .group_files import (
    group_siblings,
    stem_budget,
)

from .sort_rules import (
    sort_by_path,
    sort_deepest_first,
)

from .plan_rename import (
    plan_group,
    plan_files,
    plan_directories,
    plan_truncation,
    validate_plan,
)

from .exec_rename import (
    execute_rename,
    describe_op,
    RenameResult,
)

from .safety_checks import (
    check_writable,
    check_name_length,
    check_rename_op,
)

__all__ = [
    # Data models
    "PathEntry",
    "NameParts",
    "RenameOp",
    "RenamePlan",
    "TruncateOptions",
    "PlanAction",
    "RenameResult",
    "DEFAULT_MAX_LEN",
    "DEFAULT_SECONDARY_EXT_LEN",

    # Scanning
    "walk_entries",
    "scan_entries",

    # Name handling
    "split_name",
    "is_valid_text",
    "truncate_stem",
    "truncate_dir_name",
    "longest_valid_prefix",

    # Grouping
    "group_siblings",
    "stem_budget",

    # Sorting
    "sort_by_path",
    "sort_deepest_first",

    # Planning
    "plan_group",
    "plan_files",
    "plan_directories",
    "plan_truncation",
    "validate_plan",

    # Execution
    "execute_rename",
    "describe_op",

    # Safety checks
    "check_writable",
    "check_name_length",
    "check_rename_op",
]
