"""
safety_checks.py - Safety Check Module

Provides checks run right before each rename
"""

from pathlib import Path
from typing import Tuple, Optional
import os


def check_writable(path: Path) -> Tuple[bool, Optional[str]]:
    """
    Check if the directory holding path is writable (renaming needs it)

    Args:
        path: Path to check

    Returns:
        (is_writable, error_reason)
    """
    parent = path.parent
    if not parent.exists():
        return False, f"Parent directory does not exist: {parent}"
    if not os.access(parent, os.W_OK):
        return False, f"Directory is not writable: {parent}"

    return True, None


def check_name_length(name: str, max_len: int) -> Tuple[bool, Optional[str]]:
    """
    Check if a name fits in max_len bytes

    Args:
        name: Filename
        max_len: Maximum length in bytes

    Returns:
        (is_valid, error_reason)
    """
    length = len(os.fsencode(name))
    if length > max_len:
        return False, f"Name length ({length} bytes) exceeds limit ({max_len}): {name}"
    return True, None


def check_rename_op(src: Path, dst: Path, max_len: Optional[int] = None) -> Tuple[bool, Optional[str]]:
    """
    Check if a single rename operation is safe

    Args:
        src: Source path
        dst: Destination path
        max_len: Maximum name length in bytes (None to skip the check)

    Returns:
        (is_safe, error_reason)
    """
    # Check if source exists (a dangling symlink still counts)
    if not os.path.lexists(src):
        return False, f"Source does not exist: {src}"

    if src.parent != dst.parent:
        return False, f"Destination is not in the same directory: {dst}"

    if not dst.name:
        return False, "Destination name cannot be empty"

    # Never overwrite
    if os.path.lexists(dst):
        return False, f"Destination already exists: {dst}"

    if max_len is not None:
        valid, error = check_name_length(dst.name, max_len)
        if not valid:
            return False, error

    # Check writability
    return check_writable(src)
