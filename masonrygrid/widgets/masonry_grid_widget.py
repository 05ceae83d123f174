from PySide6.QtCore import Signal, Slot
from PySide6.QtWidgets import QWidget

from masonrygrid.layout.layout_config import LayoutConfig
from masonrygrid.layout.masonry_engine import MasonryEngine
from masonrygrid.utils.flow_log import log_flow
from masonrygrid.widgets.masonry_renderer import WidgetMasonryRenderer
from masonrygrid.widgets.resize_debouncer import ResizeDebouncer


class MasonryGridWidget(QWidget):
    """Container that arranges its child widgets in a masonry grid.

    Put it inside a QScrollArea with `widgetResizable` enabled; the minimum
    height follows the grid extent after every layout pass.
    """

    # Emitted with the content height after each layout pass that ran
    layout_finished = Signal(int)

    def __init__(self, config: LayoutConfig | None = None, parent=None):
        super().__init__(parent)
        self._items: list[QWidget] = []
        self._last_emitted = None
        self._renderer = WidgetMasonryRenderer(self)
        self._engine = MasonryEngine(self._renderer)
        self._engine.initialize([], config)
        self._debouncer = ResizeDebouncer(
            self.relayout, self._engine.config.resize_delay, parent=self
        )

    @property
    def engine(self) -> MasonryEngine:
        return self._engine

    @property
    def config(self) -> LayoutConfig:
        return self._engine.config

    def items(self) -> list[QWidget]:
        return list(self._items)

    def add_item(self, widget: QWidget):
        """Append a widget to the grid. Call `relayout()` or `refresh()` afterwards."""
        widget.setParent(self)
        widget.show()
        self._items.append(widget)
        self._engine.set_items(self._items)

    def set_items(self, widgets):
        widgets = list(widgets)
        for widget in self._items:
            if widget not in widgets:
                widget.setParent(None)
        self._items = []
        for widget in widgets:
            widget.setParent(self)
            widget.show()
            self._items.append(widget)
        self._engine.set_items(self._items)

    def update_config(self, **partial) -> LayoutConfig:
        config = self._engine.update_config(**partial)
        self._debouncer.set_delay(config.resize_delay)
        return config

    @Slot()
    def relayout(self):
        """Run a layout pass immediately."""
        result = self._engine.layout()
        if result is not None and result is not self._last_emitted:
            self._last_emitted = result
            self.layout_finished.emit(result.height)
        return result

    @Slot()
    def refresh(self):
        """Request a debounced layout pass, e.g. after item content changed."""
        self._debouncer.request()

    def resizeEvent(self, event):
        """Recalculate masonry layout on resize (debounced)."""
        super().resizeEvent(event)
        if self._engine.config.auto_resize and event.size().width() != event.oldSize().width():
            log_flow("MASONRY", f"Resize to width={event.size().width()}",
                     throttle_key="masonry_resize", every_s=0.5)
            self._debouncer.request()

    def dispose(self):
        """Stop pending resize work and release the engine state."""
        self._debouncer.cancel()
        self._engine.dispose()
        self._items = []
