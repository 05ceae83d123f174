"""Qt widgets package for masonry rendering and resize handling."""

from .masonry_grid_widget import MasonryGridWidget
from .masonry_renderer import WidgetMasonryRenderer
from .resize_debouncer import ResizeDebouncer

__all__ = [
    'MasonryGridWidget',
    'WidgetMasonryRenderer',
    'ResizeDebouncer',
]
