"""
gui_mainwindow.py - GUI Main Window

Single view: choose a directory and limits, preview the truncation, execute it
"""

from pathlib import Path
from typing import Optional, List

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QCheckBox, QSpinBox,
    QTableWidget, QTableWidgetItem, QProgressBar,
    QFileDialog, QMessageBox, QHeaderView, QGroupBox
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from ..core import (
    RenameOp, RenamePlan, RenameResult, TruncateOptions, PlanAction,
    DEFAULT_MAX_LEN, DEFAULT_SECONDARY_EXT_LEN, validate_plan
)
from .gui_workers import PlanWorker, RenameWorker


STATUS_STYLE = {
    PlanAction.RENAMED: ("Will Rename", QColor(0, 150, 0)),
    PlanAction.SKIPPED_OVERSIZED: ("Skipped (too long)", QColor(200, 150, 0)),
    PlanAction.UNCHANGED: ("No Change", QColor(150, 150, 150)),
}


class TruncateTab(QWidget):
    """Truncate names view"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.file_plan: Optional[RenamePlan] = None
        self.dir_plan: Optional[RenamePlan] = None
        self.plan_worker: Optional[PlanWorker] = None
        self.rename_worker: Optional[RenameWorker] = None

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Settings group
        settings_group = QGroupBox("Settings")
        settings_layout = QGridLayout(settings_group)

        # Directory selection
        settings_layout.addWidget(QLabel("Directory:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select directory to process recursively...")
        settings_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        settings_layout.addWidget(self.browse_btn, 0, 2)

        settings_layout.addWidget(QLabel("Max Length (bytes):"), 1, 0)
        self.max_len_spin = QSpinBox()
        self.max_len_spin.setRange(1, 4096)
        self.max_len_spin.setValue(DEFAULT_MAX_LEN)
        settings_layout.addWidget(self.max_len_spin, 1, 1)

        settings_layout.addWidget(QLabel("Secondary Extension (bytes):"), 2, 0)
        self.sec_ext_spin = QSpinBox()
        self.sec_ext_spin.setRange(0, 64)
        self.sec_ext_spin.setValue(DEFAULT_SECONDARY_EXT_LEN)
        self.sec_ext_spin.setSpecialValueText("Disabled")
        settings_layout.addWidget(self.sec_ext_spin, 2, 1)

        self.word_check = QCheckBox("Cut at Word Boundaries")
        settings_layout.addWidget(self.word_check, 3, 0, 1, 3)

        # Preview button
        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        settings_layout.addWidget(self.preview_btn, 4, 0, 1, 3)

        layout.addWidget(settings_group)

        # Results table
        self.table = QTableWidget()
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Status", "Path"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(3, QHeaderView.ResizeMode.Stretch)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.execute_btn = QPushButton("Execute Rename")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        # Status label
        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.dir_edit.setText(directory)

    def _options(self) -> TruncateOptions:
        return TruncateOptions(
            max_len=self.max_len_spin.value(),
            secondary_ext_len=self.sec_ext_spin.value(),
            word_boundaries=self.word_check.isChecked(),
        )

    def _do_preview(self):
        """Scan and generate preview"""
        directory = self.dir_edit.text().strip()
        if not directory:
            QMessageBox.warning(self, "Warning", "Please select a directory first")
            return

        path = Path(directory)
        if not path.is_dir():
            QMessageBox.warning(self, "Warning", f"Directory does not exist: {directory}")
            return

        # Disable buttons
        self.preview_btn.setEnabled(False)
        self.preview_btn.setText("Scanning...")
        self.execute_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, 0)  # Indeterminate progress

        # Start plan thread
        self.plan_worker = PlanWorker(path, self._options())
        self.plan_worker.progress.connect(self._on_plan_progress)
        self.plan_worker.finished.connect(self._on_plan_finished)
        self.plan_worker.error.connect(self._on_plan_error)
        self.plan_worker.start()

    @Slot(str)
    def _on_plan_progress(self, msg: str):
        """Scan progress update"""
        self.status_label.setText(msg[-80:] if len(msg) > 80 else msg)

    @Slot(object, object)
    def _on_plan_finished(self, file_plan: RenamePlan, dir_plan: RenamePlan):
        """Plan generation complete"""
        self.file_plan = file_plan
        self.dir_plan = dir_plan
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Preview")
        self.progress_bar.setVisible(False)

        self._update_table_preview()

        combined = RenamePlan(options=file_plan.options)
        combined.extend(file_plan)
        combined.extend(dir_plan)
        messages = combined.errors + validate_plan(combined)
        if messages:
            QMessageBox.warning(self, "Warning", "\n".join(messages[:20]))

        total = file_plan.total_count + dir_plan.total_count
        skipped = len(combined.skipped_ops)
        if total:
            self.execute_btn.setEnabled(True)
            self.status_label.setText(f"Will perform {total} rename operations (skipped: {skipped})")
        else:
            self.status_label.setText(f"No names need truncating (skipped: {skipped})")

    @Slot(str)
    def _on_plan_error(self, error: str):
        """Plan generation error"""
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Preview")
        self.progress_bar.setVisible(False)
        QMessageBox.critical(self, "Error", f"Failed to generate preview: {error}")

    def _update_table_preview(self):
        """Update table to display entries that change or are skipped"""
        ops: List[RenameOp] = [
            op for plan in (self.file_plan, self.dir_plan) if plan
            for op in plan.ops if op.action is not PlanAction.UNCHANGED
        ]
        self.table.setRowCount(len(ops))

        base_dir = Path(self.dir_edit.text())
        for i, op in enumerate(ops):
            text, color = STATUS_STYLE[op.action]
            status_item = QTableWidgetItem(text)
            status_item.setForeground(color)

            new_name_item = QTableWidgetItem(op.dst.name)
            if op.action is PlanAction.SKIPPED_OVERSIZED:
                new_name_item.setBackground(QColor(255, 255, 200))
                new_name_item.setToolTip(op.note)

            try:
                rel_path = str(op.src.parent.relative_to(base_dir))
            except ValueError:
                rel_path = str(op.src.parent)

            self.table.setItem(i, 0, QTableWidgetItem(op.src.name))
            self.table.setItem(i, 1, new_name_item)
            self.table.setItem(i, 2, status_item)
            self.table.setItem(i, 3, QTableWidgetItem(rel_path))

    def _do_execute(self):
        """Execute rename"""
        if not self.file_plan or not self.dir_plan:
            return
        total = self.file_plan.total_count + self.dir_plan.total_count
        if total == 0:
            return

        # Confirm
        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to execute {total} rename operations?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self.execute_btn.setEnabled(False)
        self.execute_btn.setText("Executing...")
        self.preview_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, total)

        # Start execution thread
        self.rename_worker = RenameWorker(self.file_plan, self.dir_plan, dry_run=False)
        self.rename_worker.progress.connect(self._on_rename_progress)
        self.rename_worker.finished.connect(self._on_rename_finished)
        self.rename_worker.error.connect(self._on_rename_error)
        self.rename_worker.start()

    @Slot(int, int, str)
    def _on_rename_progress(self, current: int, total: int, msg: str):
        """Execution progress update"""
        self.progress_bar.setValue(current)
        self.status_label.setText(msg)

    @Slot(object)
    def _on_rename_finished(self, result: RenameResult):
        """Execution complete"""
        self.execute_btn.setEnabled(False)
        self.execute_btn.setText("Execute Rename")
        self.preview_btn.setEnabled(True)
        self.progress_bar.setVisible(False)

        # Display results
        msg = f"Rename complete!\n\nSuccess: {result.success_count}\nFailed: {result.failed_count}\nSkipped: {result.skipped_count}"
        if result.failed_count > 0:
            msg += "\n\nFailure Details:\n"
            for op, error in result.failed[:5]:
                msg += f"  {op.src.name}: {error}\n"
            if len(result.failed) > 5:
                msg += f"  ... and {len(result.failed) - 5} more failures"

        QMessageBox.information(self, "Complete", msg)

        # Clear state
        self.file_plan = None
        self.dir_plan = None
        self.table.setRowCount(0)
        self.status_label.setText("Complete")

    @Slot(str)
    def _on_rename_error(self, error: str):
        """Execution error"""
        self.execute_btn.setEnabled(True)
        self.execute_btn.setText("Execute Rename")
        self.preview_btn.setEnabled(True)
        self.progress_bar.setVisible(False)
        QMessageBox.critical(self, "Error", f"Execution failed: {error}")


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Name Truncation Tool")
        self.setMinimumSize(800, 600)

        self.truncate_tab = TruncateTab()
        self.setCentralWidget(self.truncate_tab)

        # Status bar
        self.statusBar().showMessage("Ready")
