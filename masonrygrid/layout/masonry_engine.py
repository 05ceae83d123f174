"""Stateful masonry engine: keeps the column model between layout passes."""

from masonrygrid.layout.layout_config import (
    LayoutConfig,
    merge_config,
    validate_config,
)
from masonrygrid.layout.masonry_layout import (
    ColumnModel,
    ItemMetrics,
    LayoutResult,
    compute_layout,
    resolve_flexible_width,
)
from masonrygrid.utils.flow_log import log_flow


class MasonryEngine:
    """Owns one grid's column model and drives a renderer with placements.

    The renderer is the collaborator that knows about real items and the
    container. It must provide:
        container_width() -> int
        is_visible() -> bool
        measure(item) -> (width, height)
        set_item_width(item, width)
        apply_placement(placement)
        set_container_height(height)
    """

    def __init__(self, renderer):
        self._renderer = renderer
        self._config = LayoutConfig()
        self._items = []
        self._model: ColumnModel | None = None
        self._last_result: LayoutResult | None = None
        self._disposed = False

    @property
    def config(self) -> LayoutConfig:
        return self._config

    @property
    def model(self) -> ColumnModel | None:
        return self._model

    @property
    def last_result(self) -> LayoutResult | None:
        return self._last_result

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def items(self) -> list:
        return list(self._items)

    def initialize(self, items, config: LayoutConfig | None = None):
        """Start over with a new item sequence and configuration."""
        self._config = validate_config(config or LayoutConfig())
        self._items = list(items)
        self._model = None
        self._last_result = None
        self._disposed = False

    def set_items(self, items):
        """Replace the item sequence; the next pass rebuilds the columns."""
        self._items = list(items)
        self._model = None

    def update_config(self, **partial) -> LayoutConfig:
        """Merge options into the config. Does not lay out.

        The column model is kept; the next pass rebuilds it only if the
        column count changes.
        """
        self._config = merge_config(self._config, **partial)
        return self._config

    def layout(self) -> LayoutResult | None:
        """
        Lay out all items and push the result to the renderer.

        Returns:
            The new LayoutResult, or the previous one when the pass is a
            no-op (disposed engine, hidden or zero-width container)
        """
        if self._disposed:
            return self._last_result

        if not self._renderer.is_visible():
            log_flow("MASONRY", "Skip layout: container hidden",
                     throttle_key="masonry_skip_hidden", every_s=1.0)
            return self._last_result

        container_width = self._renderer.container_width()
        if container_width <= 0:
            log_flow("MASONRY", f"Skip layout: container width={container_width}",
                     throttle_key="masonry_skip_width", every_s=1.0)
            return self._last_result

        params = self._config.to_params(container_width)

        if params.flexible_width > 0:
            item_width = resolve_flexible_width(
                params.container_width, params.offset, params.flexible_width
            )
            # Heights are only meaningful once the width is applied.
            for item in self._items:
                self._renderer.set_item_width(item, item_width)

        metrics = []
        for item in self._items:
            width, height = self._renderer.measure(item)
            metrics.append(ItemMetrics(handle=item, width=width, height=height))

        result = compute_layout(metrics, params, self._model)
        log_flow(
            "MASONRY",
            f"{'Full' if result.full else 'Incremental'} layout: items={len(metrics)} "
            f"columns={result.columns} column_width={result.column_width} height={result.height}",
        )

        for placement in result.placements:
            self._renderer.apply_placement(placement)
        self._renderer.set_container_height(result.height)

        self._model = result.model
        self._last_result = result
        return result

    def dispose(self):
        """Release the column model and items; later layout calls do nothing."""
        self._model = None
        self._items = []
        self._last_result = None
        self._disposed = True
