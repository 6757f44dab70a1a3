"""
gui_workers.py - GUI Worker Threads

Provides background execution of long tasks to avoid blocking UI
"""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QThread, Signal, QObject

from ..core import (
    plan_truncation, execute_rename,
    TruncateOptions, RenamePlan, RenameResult
)


class PlanWorker(QThread):
    """Scan and truncation plan worker thread"""

    # Signals
    progress = Signal(str)              # Progress message
    finished = Signal(object, object)   # file RenamePlan, directory RenamePlan
    error = Signal(str)                 # Error message

    def __init__(
        self,
        directory: Path,
        options: TruncateOptions,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.directory = directory
        self.options = options

    def run(self):
        try:
            file_plan, dir_plan = plan_truncation(
                [self.directory],
                self.options,
                progress_callback=self.progress.emit,
            )
            self.finished.emit(file_plan, dir_plan)
        except Exception as e:
            self.error.emit(str(e))


class RenameWorker(QThread):
    """Rename execution worker thread"""

    # Signals
    progress = Signal(int, int, str)    # current, total, message
    finished = Signal(object)           # RenameResult
    error = Signal(str)                 # Error message

    def __init__(
        self,
        file_plan: RenamePlan,
        dir_plan: RenamePlan,
        dry_run: bool = False,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.file_plan = file_plan
        self.dir_plan = dir_plan
        self.dry_run = dry_run

    def run(self):
        try:
            file_total = self.file_plan.total_count
            grand_total = file_total + self.dir_plan.total_count

            def file_progress(current: int, total: int, msg: str):
                self.progress.emit(current, grand_total, msg)

            def dir_progress(current: int, total: int, msg: str):
                self.progress.emit(file_total + current, grand_total, msg)

            # Files first, then directories deepest first
            result = RenameResult()
            result.merge(execute_rename(
                self.file_plan,
                dry_run=self.dry_run,
                progress_callback=file_progress,
                log_dir=self.file_plan.options.log_dir,
            ))
            result.merge(execute_rename(
                self.dir_plan,
                dry_run=self.dry_run,
                progress_callback=dir_progress,
                log_dir=self.dir_plan.options.log_dir,
            ))

            self.finished.emit(result)
        except Exception as e:
            self.error.emit(str(e))
