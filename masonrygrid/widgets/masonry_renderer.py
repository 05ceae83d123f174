from PySide6.QtWidgets import QWidget


class WidgetMasonryRenderer:
    """Applies masonry placements to child widgets of a container widget."""

    def __init__(self, container: QWidget, content: QWidget | None = None):
        self._container = container
        # Widget whose minimum height tracks the grid extent (the container by default).
        self._content = content if content is not None else container

    def container_width(self) -> int:
        return self._container.width()

    def is_visible(self) -> bool:
        return self._container.isVisible()

    def measure(self, item: QWidget) -> tuple[int, int]:
        """Natural size of an item; fixed sizes win over size hints."""
        hint = item.sizeHint()
        if item.minimumWidth() == item.maximumWidth():
            width = item.minimumWidth()
        else:
            width = max(hint.width(), item.minimumWidth())

        if item.minimumHeight() == item.maximumHeight():
            height = item.minimumHeight()
        elif item.hasHeightForWidth():
            height = item.heightForWidth(width)
        else:
            height = max(hint.height(), item.minimumHeight())
        return width, max(0, height)

    def set_item_width(self, item: QWidget, width: int):
        item.setFixedWidth(width)

    def apply_placement(self, placement):
        item = placement.handle
        width, height = self.measure(item)
        if placement.width is not None:
            width = placement.width
        if placement.right is not None:
            x = self._container.width() - placement.right - width
        else:
            x = placement.left
        item.setGeometry(x, placement.top, width, height)

    def set_container_height(self, height: int):
        self._content.setMinimumHeight(height)
