"""
Main Window
The main application window that ties everything together
"""

import os
from pathlib import Path
from typing import List, Optional

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QFileDialog, QMessageBox,
    QSplitter, QListWidget
)
from PyQt6.QtCore import Qt

from core.errors import BaniError, NoDocumentLoaded
from utils.batch import LoadedDocument, load_sources, process_loaded
from utils.exporter import ARCHIVE_NAME, export_documents, output_filename
from utils.settings import SettingsManager
from .log_widget import LogWidget
from .offset_panel import OffsetPanel


class BaniMaskBuilderWindow(QMainWindow):
    """Main application window"""

    def __init__(self, settings_manager: Optional[SettingsManager] = None):
        super().__init__()
        self.settings_manager = settings_manager or SettingsManager()
        self.options = self.settings_manager.load_options()
        self.loaded: List[LoadedDocument] = []

        self.init_ui()
        self.offset_panel.apply_options(self.options)
        self.offset_panel.offsets_changed.connect(self._on_options_changed)
        self.offset_panel.export_without_masks_changed.connect(lambda _checked: self._on_options_changed())

    def init_ui(self):
        """Initialize the user interface"""
        self.setWindowTitle("BANI Mask Builder")
        self.setGeometry(100, 100, 900, 600)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)

        # Top toolbar
        toolbar_layout = QHBoxLayout()

        load_btn = QPushButton("Load BANI Files...")
        load_btn.clicked.connect(self.load_files)
        toolbar_layout.addWidget(load_btn)

        clear_btn = QPushButton("Clear")
        clear_btn.clicked.connect(self.clear_files)
        toolbar_layout.addWidget(clear_btn)

        toolbar_layout.addStretch()

        self.export_btn = QPushButton("Export...")
        self.export_btn.clicked.connect(self.export_files)
        toolbar_layout.addWidget(self.export_btn)

        main_layout.addLayout(toolbar_layout)

        splitter = QSplitter(Qt.Orientation.Horizontal)

        files_container = QWidget()
        files_layout = QVBoxLayout(files_container)
        files_layout.setContentsMargins(0, 0, 0, 0)
        self.files_label = QLabel("Loaded files: 0")
        files_layout.addWidget(self.files_label)
        self.file_list = QListWidget()
        files_layout.addWidget(self.file_list)
        splitter.addWidget(files_container)

        self.offset_panel = OffsetPanel()
        splitter.addWidget(self.offset_panel)
        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 0)

        self.log_widget = LogWidget()

        log_splitter = QSplitter(Qt.Orientation.Vertical)
        log_splitter.addWidget(splitter)
        log_splitter.addWidget(self.log_widget)
        log_splitter.setStretchFactor(0, 3)
        log_splitter.setStretchFactor(1, 1)
        main_layout.addWidget(log_splitter, stretch=1)

        self.log_widget.log("Application started", "INFO")

    def _on_options_changed(self):
        self.offset_panel.update_options(self.options)
        self.settings_manager.save_options(self.options)

    def _refresh_file_list(self):
        self.file_list.clear()
        for item in self.loaded:
            self.file_list.addItem(f"{item.filename}  ({len(item.document.frames)} frames)")
        self.files_label.setText(f"Loaded files: {len(self.loaded)}")

    def load_files(self):
        """Ask for BANI files and keep the valid ones"""
        paths, _ = QFileDialog.getOpenFileNames(
            self,
            "Load BANI Files",
            self.settings_manager.get_last_directory(),
            "BANI Files (*.bani);;All Files (*)"
        )
        if not paths:
            return
        self.settings_manager.set_last_directory(os.path.dirname(paths[0]))

        sources = []
        for path in paths:
            try:
                sources.append((os.path.basename(path), Path(path).read_text(encoding='utf-8-sig')))
            except (OSError, UnicodeDecodeError) as e:
                self.log_widget.log(f"Could not read {path}: {e}", "ERROR")
                QMessageBox.warning(self, "Read Failed", f"Could not read {os.path.basename(path)}: {e}")

        loaded, failures = load_sources(sources, self.log_widget.log)
        self.loaded.extend(loaded)
        self._refresh_file_list()

        if failures:
            details = "\n".join(f"{name}: {error}" for name, error in failures)
            QMessageBox.warning(self, "Invalid BANI File", f"Error parsing BANI file(s):\n{details}")

    def clear_files(self):
        self.loaded.clear()
        self._refresh_file_list()
        self.log_widget.log("Cleared loaded files", "INFO")

    def export_files(self):
        """Transform every loaded document and save the result"""
        if not self.loaded:
            error = NoDocumentLoaded()
            self.log_widget.log(str(error), "WARNING")
            QMessageBox.warning(self, "Nothing to Export", str(error))
            return

        self.offset_panel.update_options(self.options)
        processed = process_loaded(self.loaded, self.options, self.log_widget.log)
        exportable = [item for item in processed if item.exportable]
        if not exportable:
            self.log_widget.log("No document qualifies for export", "WARNING")
            QMessageBox.information(self, "Nothing to Export", "No HEAD sprites with bounds 48x48 found.")
            return

        start_dir = self.settings_manager.get_last_directory()
        if len(exportable) == 1:
            default_name = output_filename(exportable[0].source_name)
            file_filter = "BANI Files (*.bani);;All Files (*)"
        else:
            default_name = ARCHIVE_NAME
            file_filter = "Zip Archives (*.zip);;All Files (*)"

        target, _ = QFileDialog.getSaveFileName(
            self,
            "Export BANI Files",
            os.path.join(start_dir, default_name),
            file_filter
        )
        if not target:
            return

        try:
            export_documents(exportable, target, self.log_widget.log)
        except (BaniError, OSError) as e:
            self.log_widget.log(f"Export failed: {e}", "ERROR")
            QMessageBox.warning(self, "Export Failed", f"Export failed: {e}")

    def closeEvent(self, event):
        """Handle window close"""
        self.offset_panel.update_options(self.options)
        self.settings_manager.save_options(self.options)
        event.accept()
