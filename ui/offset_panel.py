"""
Offset Panel
Per-direction mask offset inputs and export options
"""

from typing import Dict, Tuple

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QSpinBox, QGroupBox, QFormLayout, QPushButton, QCheckBox
)
from PyQt6.QtCore import pyqtSignal

from core.data_structures import Direction
from core.pipeline import ProcessingOptions

OFFSET_LIMIT = 512

# Display order of the direction rows
PANEL_ORDER = (Direction.DOWN, Direction.UP, Direction.LEFT, Direction.RIGHT)


class OffsetPanel(QWidget):
    """Spin boxes for the extra (x, y) shift applied to each direction's mask"""

    offsets_changed = pyqtSignal()
    export_without_masks_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._spin_boxes: Dict[Direction, Tuple[QSpinBox, QSpinBox]] = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        group = QGroupBox("Mask Offsets (pixels)")
        form = QFormLayout(group)
        for direction in PANEL_ORDER:
            row = QHBoxLayout()
            x_spin = self._make_spin_box()
            y_spin = self._make_spin_box()
            row.addWidget(QLabel("X"))
            row.addWidget(x_spin)
            row.addWidget(QLabel("Y"))
            row.addWidget(y_spin)
            form.addRow(direction.value.capitalize(), row)
            self._spin_boxes[direction] = (x_spin, y_spin)

        reset_btn = QPushButton("Reset Offsets")
        reset_btn.clicked.connect(self.reset_offsets)
        form.addRow(reset_btn)
        layout.addWidget(group)

        self.export_without_masks_check = QCheckBox("Export documents without head masks")
        self.export_without_masks_check.setChecked(True)
        self.export_without_masks_check.toggled.connect(self.export_without_masks_changed.emit)
        layout.addWidget(self.export_without_masks_check)
        layout.addStretch()

    def _make_spin_box(self) -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(-OFFSET_LIMIT, OFFSET_LIMIT)
        spin.setValue(0)
        spin.valueChanged.connect(lambda _value: self.offsets_changed.emit())
        return spin

    def offsets(self) -> Dict[Direction, Tuple[int, int]]:
        return {
            direction: (x_spin.value(), y_spin.value())
            for direction, (x_spin, y_spin) in self._spin_boxes.items()
        }

    def set_offsets(self, offsets: Dict[Direction, Tuple[int, int]]):
        for direction, (x_spin, y_spin) in self._spin_boxes.items():
            x, y = offsets.get(direction, (0, 0))
            x_spin.blockSignals(True)
            y_spin.blockSignals(True)
            x_spin.setValue(int(x))
            y_spin.setValue(int(y))
            x_spin.blockSignals(False)
            y_spin.blockSignals(False)
        self.offsets_changed.emit()

    def reset_offsets(self):
        self.set_offsets({})

    def apply_options(self, options: ProcessingOptions):
        """Show the given options in the panel"""
        self.set_offsets(options.offsets)
        self.export_without_masks_check.setChecked(options.export_without_masks)

    def update_options(self, options: ProcessingOptions) -> ProcessingOptions:
        """Copy the panel's values into options and return it"""
        options.offsets = self.offsets()
        options.export_without_masks = self.export_without_masks_check.isChecked()
        return options
