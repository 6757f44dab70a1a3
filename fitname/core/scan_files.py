"""
scan_files.py - File Scanning Module

Provides recursive traversal yielding every entry under a root
"""

from pathlib import Path
from typing import List, Optional, Callable, Generator, Tuple
import os
import stat

from .models_fs import PathEntry


def walk_entries(
    root: Path,
    progress_callback: Optional[Callable[[str], None]] = None
) -> Generator[PathEntry, None, None]:
    """
    Recursively walk root, yielding the root itself and everything below it

    Symbolic links are yielded as plain entries and never followed.
    Directories that cannot be listed are yielded as entries carrying the error.

    Args:
        root: Root path (file or directory)
        progress_callback: Progress callback function

    Raises:
        OSError: If the root itself cannot be accessed
    """
    root = Path(root)
    root_stat = os.lstat(root)
    root_is_dir = stat.S_ISDIR(root_stat.st_mode)

    yield PathEntry(root, is_dir=root_is_dir)
    if not root_is_dir:
        return

    pending: List[OSError] = []

    def drain() -> Generator[PathEntry, None, None]:
        while pending:
            e = pending.pop(0)
            yield PathEntry(Path(e.filename) if e.filename else root, is_dir=True, error=e)

    for dirpath, dirnames, filenames in os.walk(root, onerror=pending.append):
        yield from drain()
        current_dir = Path(dirpath)

        if progress_callback:
            progress_callback(str(current_dir))

        for dirname in dirnames:
            path = current_dir / dirname
            # os.walk lists links to directories here but does not descend into them
            yield PathEntry(path, is_dir=not path.is_symlink())

        for filename in filenames:
            yield PathEntry(current_dir / filename)

    yield from drain()


def scan_entries(
    root: Path,
    progress_callback: Optional[Callable[[str], None]] = None
) -> Tuple[List[PathEntry], List[PathEntry]]:
    """
    Walk root and split entries into files and directories

    Entries carrying a traversal error go to the file list, where
    grouping reports them.

    Args:
        root: Root path
        progress_callback: Progress callback function

    Returns:
        (files, directories)
    """
    files: List[PathEntry] = []
    dirs: List[PathEntry] = []
    for entry in walk_entries(root, progress_callback):
        if entry.is_dir and entry.error is None:
            dirs.append(entry)
        else:
            files.append(entry)
    return files, dirs
