"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Apply planned renames one by one, never overwriting
- Keep going when a single rename fails
- dry_run support and JSON execution logs
"""

from pathlib import Path
from typing import List, Tuple, Optional, Callable
from dataclasses import dataclass, field
from datetime import datetime
import json
import logging
import os

from .models_fs import RenamePlan, RenameOp, PlanAction
from .safety_checks import check_rename_op

logger = logging.getLogger(__name__)


@dataclass
class RenameResult:
    """Rename execution result"""
    success: List[RenameOp] = field(default_factory=list)
    failed: List[Tuple[RenameOp, str]] = field(default_factory=list)  # (op, error_msg)
    skipped: List[RenameOp] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.success)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def merge(self, other: "RenameResult") -> None:
        """Add another result's entries"""
        self.success.extend(other.success)
        self.failed.extend(other.failed)
        self.skipped.extend(other.skipped)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Execution Result:",
            f"  - Success: {self.success_count}",
            f"  - Failed: {self.failed_count}",
            f"  - Skipped: {self.skipped_count}",
        ]
        if self.failed:
            lines.append("Failure Details:")
            for op, error in self.failed[:10]:  # Show at most 10
                lines.append(f"  - {op.src.name} -> {op.dst.name}: {error}")
            if len(self.failed) > 10:
                lines.append(f"  ... and {len(self.failed) - 10} more failures")
        return "\n".join(lines)


def describe_op(op: RenameOp) -> str:
    """One human-readable line for a rename"""
    return f"Truncating name: {op.src.name!r} → {op.dst.name!r}"


def execute_rename(
    plan: RenamePlan,
    dry_run: bool = False,
    progress_callback: Optional[Callable[[int, int, str], None]] = None,
    log_dir: Optional[Path] = None
) -> RenameResult:
    """
    Execute truncation plan in plan order

    Args:
        plan: Truncation plan
        dry_run: Whether to preview only
        progress_callback: Progress callback (current, total, message)
        log_dir: Log directory (for saving execution logs)

    Returns:
        Execution result
    """
    result = RenameResult()
    result.skipped.extend(plan.skipped_ops)
    valid_ops = plan.valid_ops
    total = len(valid_ops)

    if total == 0:
        return result

    # Save execution plan log
    if log_dir and not dry_run:
        save_plan_log(plan, log_dir)

    for i, op in enumerate(valid_ops):
        message = describe_op(op)

        if dry_run:
            # Preview mode only
            if progress_callback:
                progress_callback(i + 1, total, f"[Preview] {message}")
            result.success.append(op)
            continue

        if progress_callback:
            progress_callback(i + 1, total, message)

        safe, error = check_rename_op(op.src, op.dst, plan.options.max_len)
        if not safe:
            result.failed.append((op, error))
            continue

        try:
            os.rename(op.src, op.dst)
        except OSError as e:
            result.failed.append((op, str(e)))
            continue

        logger.debug("Renamed %s -> %s", op.src, op.dst)
        result.success.append(op)

    # Save execution result log
    if log_dir and not dry_run:
        save_result_log(result, log_dir)

    return result


def _timestamp() -> str:
    return datetime.now().strftime("%Y%m%d_%H%M%S_%f")


def save_plan_log(plan: RenamePlan, log_dir: Path) -> Path:
    """Save execution plan log"""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = _timestamp()
    log_file = log_dir / f"rename_plan_{timestamp}.json"

    data = {
        "timestamp": timestamp,
        "max_len": plan.options.max_len,
        "total_ops": len(plan.valid_ops),
        "operations": [
            {
                "src": str(op.src),
                "dst": str(op.dst),
                "action": op.action.value,
                "is_dir": op.is_dir,
                "note": op.note
            }
            for op in plan.ops
            if op.action is not PlanAction.UNCHANGED
        ],
        "warnings": plan.warnings,
        "errors": plan.errors
    }

    with open(log_file, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=True, indent=2)

    return log_file


def save_result_log(result: RenameResult, log_dir: Path) -> Path:
    """Save execution result log"""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = _timestamp()
    log_file = log_dir / f"rename_result_{timestamp}.json"

    data = {
        "timestamp": timestamp,
        "success_count": result.success_count,
        "failed_count": result.failed_count,
        "skipped_count": result.skipped_count,
        "success": [
            {"src": str(op.src), "dst": str(op.dst)}
            for op in result.success
        ],
        "failed": [
            {"src": str(op.src), "dst": str(op.dst), "error": error}
            for op, error in result.failed
        ],
        "skipped": [
            {"src": str(op.src), "note": op.note}
            for op in result.skipped
        ]
    }

    with open(log_file, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=True, indent=2)

    return log_file
