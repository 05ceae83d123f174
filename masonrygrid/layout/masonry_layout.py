"""Masonry layout calculator: column derivation and shortest-column placement."""

import math
from dataclasses import dataclass, field, replace
from typing import Any, Sequence

ALIGN_LEFT = "left"
ALIGN_RIGHT = "right"
ALIGN_CENTER = "center"
ALIGNMENTS = (ALIGN_LEFT, ALIGN_RIGHT, ALIGN_CENTER)


@dataclass(frozen=True)
class ItemMetrics:
    """Measured size of one externally owned item."""
    handle: Any
    width: int
    height: int


@dataclass(frozen=True)
class LayoutParams:
    item_width: int = 0
    flexible_width: int = 0
    offset: int = 2
    align: str = ALIGN_CENTER
    container_width: int = 0

    def clamped(self) -> "LayoutParams":
        """Copy with negative sizes raised to 0."""
        sizes = ("item_width", "flexible_width", "offset", "container_width")
        changes = {name: 0 for name in sizes if getattr(self, name) < 0}
        return replace(self, **changes) if changes else self


@dataclass
class Column:
    """Items stacked in one column, top to bottom."""
    items: list = field(default_factory=list)
    height: int = 0


@dataclass
class ColumnModel:
    columns: list[Column] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def handles(self) -> list:
        """All member handles, column by column."""
        return [handle for column in self.columns for handle in column.items]

    def column_of(self, handle) -> int:
        """Return the column index holding `handle`, or -1."""
        for index, column in enumerate(self.columns):
            if any(member is handle for member in column.items):
                return index
        return -1


@dataclass(frozen=True)
class Placement:
    """Absolute position for one item. Exactly one of left/right is set."""
    handle: Any
    top: int
    left: int | None = None
    right: int | None = None
    width: int | None = None


@dataclass
class LayoutResult:
    model: ColumnModel
    placements: list[Placement]
    height: int
    columns: int
    column_width: int
    side_offset: int
    full: bool


def _js_round(value: float) -> int:
    # Halves round towards positive infinity.
    return math.floor(value + 0.5)


def resolve_flexible_width(container_width: int, offset: int, flexible_width: int) -> int:
    """
    Find the widest integral column width that stays above the minimum.

    Columns are added one at a time while the per-column width
    `(container_width - (columns - 1) * offset) / columns` remains greater
    than `flexible_width`. The last width that still qualified is floored.

    Args:
        container_width: Available width in pixels
        offset: Gutter between columns
        flexible_width: Minimum column width

    Returns:
        Resolved column width (the full container width if a single column
        is already not wider than the minimum)
    """
    container_width = max(0, container_width)
    offset = max(0, offset)
    if flexible_width <= 0:
        return container_width
    best = container_width
    columns = 1
    while True:
        width = (container_width - (columns - 1) * offset) / columns
        if width <= flexible_width:
            break
        best = width
        columns += 1
    return int(math.floor(best))


def resolve_item_width(params: LayoutParams, items: Sequence[ItemMetrics]) -> int:
    """Return the single width shared by all items for this pass."""
    if params.flexible_width > 0:
        return resolve_flexible_width(params.container_width, params.offset, params.flexible_width)
    if params.item_width:
        return params.item_width
    if items:
        return items[0].width
    return 0


def compute_column_count(container_width: int, offset: int, column_width: int) -> int:
    """Calculate how many columns fit, never less than one."""
    if column_width <= 0:
        return 1
    return max(1, (container_width + offset) // column_width)


def compute_side_offset(align: str, columns: int, column_width: int,
                        container_width: int, offset: int) -> int:
    """Horizontal offset of the first column for the given alignment."""
    if align in (ALIGN_LEFT, ALIGN_RIGHT):
        ratio = columns / column_width if column_width > 0 else 0
        return int(math.floor((ratio + offset) / 2))
    return _js_round((container_width - (columns * column_width - offset)) / 2)


def _side_position(column_index: int, column_width: int, side_offset: int, align: str) -> int:
    # Left alignment keeps the first column flush with the container edge.
    if column_index == 0 and align == ALIGN_LEFT:
        return 0
    return column_index * column_width + side_offset


def _make_placement(handle, top: int, side: int, align: str, width: int | None) -> Placement:
    if align == ALIGN_RIGHT:
        return Placement(handle=handle, top=top, right=side, width=width)
    return Placement(handle=handle, top=top, left=side, width=width)


def layout_full(items: Sequence[ItemMetrics], columns: int, column_width: int,
                side_offset: int, params: LayoutParams) -> tuple[ColumnModel, list[Placement], int]:
    """
    Assign every item to the currently shortest column.

    Items are walked in their given order; ties go to the leftmost column.

    Returns:
        (new column model, placements in item order, overall height)
    """
    columns = max(1, columns)
    model = ColumnModel(columns=[Column() for _ in range(columns)])
    placements = []
    width = column_width - params.offset if params.flexible_width > 0 else None
    bottom = 0

    for item in items:
        shortest_col = min(range(columns), key=lambda i: model.columns[i].height)
        column = model.columns[shortest_col]

        side = _side_position(shortest_col, column_width, side_offset, params.align)
        placements.append(_make_placement(item.handle, column.height, side, params.align, width))

        column.height += item.height + params.offset
        column.items.append(item.handle)
        bottom = max(bottom, column.height)

    return model, placements, bottom


def layout_columns(items: Sequence[ItemMetrics], model: ColumnModel, column_width: int,
                   side_offset: int, params: LayoutParams) -> tuple[ColumnModel, list[Placement], int]:
    """
    Refresh vertical positions while keeping column membership.

    Heights are re-read from `items`; every member of `model` must be present.
    The prior model is left untouched.

    Returns:
        (updated column model, placements in item order, overall height)
    """
    metrics_by_id = {id(item.handle): item for item in items}
    order = {id(item.handle): position for position, item in enumerate(items)}
    width = column_width - params.offset if params.flexible_width > 0 else None
    refreshed = ColumnModel(columns=[Column(items=list(column.items)) for column in model.columns])
    placements = []
    bottom = 0

    for index, column in enumerate(refreshed.columns):
        side = _side_position(index, column_width, side_offset, params.align)
        for handle in column.items:
            placements.append(_make_placement(handle, column.height, side, params.align, width))
            column.height += metrics_by_id[id(handle)].height + params.offset
            bottom = max(bottom, column.height)

    placements.sort(key=lambda placement: order[id(placement.handle)])
    return refreshed, placements, bottom


def _membership_matches(model: ColumnModel, items: Sequence[ItemMetrics]) -> bool:
    members = model.handles()
    if len(members) != len(items):
        return False
    return {id(handle) for handle in members} == {id(item.handle) for item in items}


def compute_layout(items: Sequence[ItemMetrics], params: LayoutParams,
                   prior: ColumnModel | None = None) -> LayoutResult:
    """
    Calculate placements for all items.

    Reuses `prior` column membership (incremental layout) when its column
    count matches the freshly computed one and it holds exactly these items;
    otherwise rebuilds the columns from scratch.

    Args:
        items: Measured items in display order
        params: Layout parameters for this pass
        prior: Column model returned by the previous pass, if any

    Returns:
        LayoutResult with the model to keep for the next pass
    """
    params = params.clamped()
    column_width = resolve_item_width(params, items) + params.offset
    columns = compute_column_count(params.container_width, params.offset, column_width)
    side_offset = compute_side_offset(
        params.align, columns, column_width, params.container_width, params.offset
    )

    full = not (
        prior is not None
        and prior.column_count == columns
        and _membership_matches(prior, items)
    )
    if full:
        model, placements, bottom = layout_full(items, columns, column_width, side_offset, params)
    else:
        model, placements, bottom = layout_columns(items, prior, column_width, side_offset, params)

    return LayoutResult(
        model=model,
        placements=placements,
        height=bottom,
        columns=columns,
        column_width=column_width,
        side_offset=side_offset,
        full=full,
    )
