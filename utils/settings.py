"""
Settings Manager
Handles persistence of mask offsets and export preferences
"""

from typing import Optional

from PyQt6.QtCore import QSettings

from core.data_structures import Direction
from core.pipeline import DEFAULT_MASK_FILENAME, DEFAULT_ONLINE_FLAG, ProcessingOptions


class SettingsManager:
    """Manages application settings"""

    def __init__(self, path: Optional[str] = None):
        if path:
            self.settings = QSettings(path, QSettings.Format.IniFormat)
        else:
            self.settings = QSettings('BaniMaskBuilder', 'Settings')

    def load_options(self) -> ProcessingOptions:
        """Read processing options, falling back to defaults"""
        offsets = {}
        for direction in Direction:
            x = self.settings.value(f'offsets/{direction.value}_x', 0, type=int)
            y = self.settings.value(f'offsets/{direction.value}_y', 0, type=int)
            offsets[direction] = (x, y)

        write_online = self.settings.value('export/write_online_flag', True, type=bool)
        online_flag = self.settings.value('export/online_flag', DEFAULT_ONLINE_FLAG, type=int)

        return ProcessingOptions(
            mask_filename=self.settings.value('export/mask_filename', DEFAULT_MASK_FILENAME, type=str)
            or DEFAULT_MASK_FILENAME,
            online_flag=online_flag if write_online else None,
            offsets=offsets,
            export_without_masks=self.settings.value('export/without_masks', True, type=bool),
        )

    def save_options(self, options: ProcessingOptions):
        """Write processing options"""
        for direction in Direction:
            x, y = options.offset_for(direction)
            self.settings.setValue(f'offsets/{direction.value}_x', int(x))
            self.settings.setValue(f'offsets/{direction.value}_y', int(y))

        self.settings.setValue('export/mask_filename', options.mask_filename)
        self.settings.setValue('export/write_online_flag', options.online_flag is not None)
        if options.online_flag is not None:
            self.settings.setValue('export/online_flag', int(options.online_flag))
        self.settings.setValue('export/without_masks', options.export_without_masks)
        self.settings.sync()

    def get_last_directory(self) -> str:
        """Get the folder BANI files were last loaded from"""
        return self.settings.value('files/last_directory', '', type=str)

    def set_last_directory(self, path: str):
        """Save the folder BANI files were last loaded from"""
        self.settings.setValue('files/last_directory', path)
