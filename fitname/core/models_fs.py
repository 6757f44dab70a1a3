"""
models_fs.py - Core Data Structure Definitions

Contains:
- PathEntry: Filesystem entry produced by traversal
- NameParts: Filename split into stem and extensions
- RenameOp: Single truncation decision for one entry
- RenamePlan: Batch truncation plan
- TruncateOptions: Truncation options configuration
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List
from enum import Enum
import os


DEFAULT_MAX_LEN = 140               # rclone name encryption limit
DEFAULT_SECONDARY_EXT_LEN = 6


class PlanAction(Enum):
    """Outcome of planning a single entry"""
    UNCHANGED = "unchanged"                  # Name already fits
    RENAMED = "renamed"                      # Name will be truncated
    SKIPPED_OVERSIZED = "skipped_oversized"  # Cannot be made to fit


@dataclass(frozen=True)
class TruncateOptions:
    """Truncation options configuration"""
    max_len: int = DEFAULT_MAX_LEN                      # Byte budget per final name
    secondary_ext_len: int = DEFAULT_SECONDARY_EXT_LEN  # 0 disables secondary extensions
    word_boundaries: bool = False                       # Prefer cutting at a space
    dry_run: bool = False                               # Preview only, do not actually execute
    log_dir: Optional[Path] = None                      # Where to save JSON execution logs

    def __post_init__(self):
        if self.max_len < 1:
            raise ValueError(f"max_len must be a positive integer, got {self.max_len}")
        if self.secondary_ext_len < 0:
            raise ValueError(f"secondary_ext_len must not be negative, got {self.secondary_ext_len}")


@dataclass(frozen=True)
class PathEntry:
    """Filesystem entry as yielded by traversal"""
    path: Path                          # Full path
    is_dir: bool = False                # Whether it denotes a directory
    error: Optional[OSError] = None     # Set when the entry could not be read

    @property
    def parent(self) -> Path:
        return self.path.parent

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def name_bytes(self) -> bytes:
        """Raw POSIX bytes of the name (undecodable bytes survive via surrogateescape)"""
        return os.fsencode(self.path.name)

    @property
    def depth(self) -> int:
        return len(self.path.parts)


@dataclass(frozen=True)
class NameParts:
    """Filename decomposed into raw stem, secondary and primary extension"""
    raw_stem: bytes
    secondary_ext: Optional[bytes] = None
    primary_ext: Optional[bytes] = None

    @property
    def overhead(self) -> int:
        """Bytes taken by the extensions, separating dots included"""
        total = 0
        if self.secondary_ext is not None:
            total += len(self.secondary_ext) + 1
        if self.primary_ext is not None:
            total += len(self.primary_ext) + 1
        return total

    def join(self, stem: Optional[bytes] = None) -> bytes:
        """Reassemble the name, optionally with a replacement stem"""
        result = self.raw_stem if stem is None else stem
        if self.secondary_ext is not None:
            result += b"." + self.secondary_ext
        if self.primary_ext is not None:
            result += b"." + self.primary_ext
        return result


@dataclass
class RenameOp:
    """Single truncation decision"""
    src: Path                                   # Source path
    dst: Path                                   # Destination path
    action: PlanAction = PlanAction.RENAMED
    is_dir: bool = False
    note: str = ""                              # Note (e.g., reason for skipping)

    @property
    def is_same(self) -> bool:
        """Whether source and destination are the same"""
        return self.src == self.dst


@dataclass
class RenamePlan:
    """Batch truncation plan"""
    ops: List[RenameOp] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    options: TruncateOptions = field(default_factory=TruncateOptions)

    @property
    def valid_ops(self) -> List[RenameOp]:
        """Get operations that actually rename something"""
        return [op for op in self.ops if op.action is PlanAction.RENAMED]

    @property
    def skipped_ops(self) -> List[RenameOp]:
        return [op for op in self.ops if op.action is PlanAction.SKIPPED_OVERSIZED]

    @property
    def unchanged_count(self) -> int:
        return sum(1 for op in self.ops if op.action is PlanAction.UNCHANGED)

    @property
    def total_count(self) -> int:
        """Total number of renames"""
        return len(self.valid_ops)

    def add_op(self, src: Path, dst: Path, action: PlanAction = PlanAction.RENAMED,
               is_dir: bool = False, note: str = "") -> RenameOp:
        """Add operation"""
        op = RenameOp(src=src, dst=dst, action=action, is_dir=is_dir, note=note)
        self.ops.append(op)
        return op

    def add_warning(self, msg: str) -> None:
        """Add warning"""
        self.warnings.append(msg)

    def add_error(self, msg: str) -> None:
        """Add error"""
        self.errors.append(msg)

    def extend(self, other: "RenamePlan") -> None:
        """Append another plan's operations and messages"""
        self.ops.extend(other.ops)
        self.warnings.extend(other.warnings)
        self.errors.extend(other.errors)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Truncation Plan Summary:",
            f"  - Renames: {self.total_count}",
            f"  - Unchanged: {self.unchanged_count}",
            f"  - Skipped (oversized): {len(self.skipped_ops)}",
            f"  - Warnings: {len(self.warnings)}",
            f"  - Errors: {len(self.errors)}",
        ]
        return "\n".join(lines)


def display_name(name: bytes) -> str:
    """Human-readable form of a raw name"""
    return os.fsdecode(name)
