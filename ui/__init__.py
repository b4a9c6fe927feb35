"""
UI module for BANI Mask Builder
Contains all Qt widgets and UI components
"""

from .log_widget import LogWidget
from .offset_panel import OffsetPanel
from .main_window import BaniMaskBuilderWindow

__all__ = [
    'LogWidget',
    'OffsetPanel',
    'BaniMaskBuilderWindow',
]
