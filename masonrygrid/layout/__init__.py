"""Masonry layout engine.

- Column count derived from container width, item width and gutter
- Greedy shortest-column placement in input order
- Incremental refresh of vertical positions when the column count holds
"""

from .masonry_layout import (
    ALIGN_CENTER,
    ALIGN_LEFT,
    ALIGN_RIGHT,
    Column,
    ColumnModel,
    ItemMetrics,
    LayoutParams,
    LayoutResult,
    Placement,
    compute_column_count,
    compute_layout,
    compute_side_offset,
    layout_columns,
    layout_full,
    resolve_flexible_width,
    resolve_item_width,
)
from .layout_config import LayoutConfig, merge_config, validate_config
from .masonry_engine import MasonryEngine

__all__ = [
    'ALIGN_CENTER',
    'ALIGN_LEFT',
    'ALIGN_RIGHT',
    'Column',
    'ColumnModel',
    'ItemMetrics',
    'LayoutParams',
    'LayoutResult',
    'Placement',
    'compute_column_count',
    'compute_layout',
    'compute_side_offset',
    'layout_columns',
    'layout_full',
    'resolve_flexible_width',
    'resolve_item_width',
    'LayoutConfig',
    'merge_config',
    'validate_config',
    'MasonryEngine',
]
