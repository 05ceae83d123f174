from PySide6.QtCore import QSettings, Signal

from masonrygrid.layout.layout_config import LayoutConfig, validate_config

# Defaults for settings that are accessed from multiple places.
DEFAULT_SETTINGS = {
    'masonry_align': 'center',
    'masonry_offset': 2,  # Gutter in pixels, horizontal and vertical
    'masonry_item_width': 0,  # 0 = take the width of the first item
    'masonry_flexible_width': 0,  # 0 = disabled, otherwise minimum column width
    'masonry_auto_resize': False,
    'masonry_resize_delay': 50,  # Milliseconds to wait for resizing to settle
    'masonry_trace_logs': False,  # Print DEBUG/INFO flow logs
}


class Settings(QSettings):
    # Signal that shows that the setting with the given string was changes
    change = Signal(str, object, name='settingsChanged')

    def __init__(self):
        super().__init__('masonrygrid', 'masonrygrid')

    def setValue(self, key, value):
        super().setValue(key, value)
        self.change.emit(key, value)

# Common shared instance to ensure the Signal is also shared
settings = Settings()


def layout_config_from_settings(store=None) -> LayoutConfig:
    """Build a validated layout config from persisted settings."""
    store = store if store is not None else settings

    def value(key, value_type):
        return store.value(key, defaultValue=DEFAULT_SETTINGS[key], type=value_type)

    return validate_config(LayoutConfig(
        align=value('masonry_align', str),
        offset=value('masonry_offset', int),
        item_width=value('masonry_item_width', int),
        flexible_width=value('masonry_flexible_width', int),
        auto_resize=value('masonry_auto_resize', bool),
        resize_delay=value('masonry_resize_delay', int),
    ))
