"""
Log Widget
Displays processing messages with color-coded severity levels
"""

import html
from datetime import datetime

from PyQt6.QtWidgets import QTextEdit


class LogWidget(QTextEdit):
    """Widget for displaying logs; `log` can be passed wherever a log_fn is expected"""

    LEVEL_COLORS = {
        "DEBUG": "gray",
        "INFO": "black",
        "WARNING": "orange",
        "ERROR": "red",
        "SUCCESS": "green",
    }

    def __init__(self, parent=None, show_debug: bool = False):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setMinimumHeight(120)
        self.setUndoRedoEnabled(False)
        self.show_debug = show_debug

    def log(self, message: str, level: str = "INFO"):
        """
        Add a log message

        Args:
            message: Message to log
            level: Severity level (DEBUG, INFO, WARNING, ERROR, SUCCESS)
        """
        if level == "DEBUG" and not self.show_debug:
            return
        color = self.LEVEL_COLORS.get(level, "black")
        stamp = datetime.now().strftime('%H:%M:%S')
        self.append(
            f'<span style="color: {color};">{stamp} [{level}] {html.escape(message)}</span>'
        )
        self.verticalScrollBar().setValue(self.verticalScrollBar().maximum())
