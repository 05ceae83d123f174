import pytest

from masonrygrid.layout.masonry_layout import (
    ColumnModel,
    ItemMetrics,
    LayoutParams,
    compute_column_count,
    compute_layout,
    compute_side_offset,
    layout_full,
    resolve_flexible_width,
    resolve_item_width,
)


class Tile:
    """Stand-in for an externally owned item handle."""

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"Tile({self.name})"


def make_items(heights, width=100):
    return [ItemMetrics(handle=Tile(i), width=width, height=h) for i, h in enumerate(heights)]


def params(**overrides):
    values = dict(item_width=100, offset=10, align="center", container_width=330)
    values.update(overrides)
    return LayoutParams(**values)


def test_three_items_get_one_column_each():
    items = make_items([50, 80, 30])

    result = compute_layout(items, params())

    assert result.columns == 3
    assert result.column_width == 110
    assert [p.top for p in result.placements] == [0, 0, 0]
    assert [p.left for p in result.placements] == [5, 115, 225]
    assert result.height == 90
    assert result.full is True


def test_fourth_item_goes_to_shortest_column():
    items = make_items([50, 80, 30, 20])

    result = compute_layout(items, params())

    # Column heights before the fourth item: 60, 90, 40.
    fourth = result.placements[3]
    assert fourth.top == 40
    assert fourth.left == 225
    assert [c.height for c in result.model.columns] == [60, 90, 70]
    assert result.height == 90


def test_greedy_always_picks_current_minimum():
    heights = [120, 40, 90, 10, 70, 55, 30, 200, 15]
    items = make_items(heights)
    result = compute_layout(items, params())

    tracked = [0, 0, 0]
    for item, placement in zip(items, result.placements):
        expected_col = tracked.index(min(tracked))
        assert placement.top == tracked[expected_col]
        assert result.model.column_of(item.handle) == expected_col
        tracked[expected_col] += item.height + 10

    assert tracked == [c.height for c in result.model.columns]


def test_ties_go_to_leftmost_column():
    items = make_items([20, 20, 20, 20])

    result = compute_layout(items, params())

    assert [result.model.column_of(i.handle) for i in items] == [0, 1, 2, 0]


def test_column_height_is_sum_of_member_heights_plus_offset():
    items = make_items([33, 71, 12, 58, 90, 4, 27, 64])
    by_handle = {id(i.handle): i for i in items}

    result = compute_layout(items, params(container_width=560))

    for column in result.model.columns:
        assert column.height == sum(by_handle[id(h)].height + 10 for h in column.items)
    assert result.height == max(c.height for c in result.model.columns)


@pytest.mark.parametrize("container_width,item_width,offset", [
    (330, 100, 10),
    (1024, 128, 2),
    (99, 100, 10),
    (5000, 240, 0),
    (0, 50, 2),
])
def test_column_count_matches_formula(container_width, item_width, offset):
    items = make_items([10, 20, 30], width=item_width)

    result = compute_layout(items, params(container_width=container_width, item_width=item_width, offset=offset))

    assert result.columns == max(1, (container_width + offset) // (item_width + offset))
    assert result.model.column_count == result.columns


def test_narrow_container_falls_back_to_single_column():
    assert compute_column_count(50, 10, 110) == 1
    assert compute_column_count(50, 0, 0) == 1


def test_empty_items_produce_zero_height():
    result = compute_layout([], params())

    assert result.placements == []
    assert result.height == 0
    assert all(column.items == [] for column in result.model.columns)


def test_auto_item_width_uses_first_item():
    items = make_items([10, 10], width=150)

    assert resolve_item_width(params(item_width=0), items) == 150
    assert resolve_item_width(params(item_width=0), []) == 0
    assert resolve_item_width(params(item_width=90), items) == 90


def test_flexible_width_is_widest_above_minimum():
    width = resolve_flexible_width(970, 10, 200)
    columns = compute_column_count(970, 10, width + 10)

    assert width == 235
    assert columns == 4
    assert width >= 200
    # One more column would drop below the minimum.
    assert (970 - columns * 10) / (columns + 1) < 200


def test_flexible_width_uses_whole_container_when_minimum_too_large():
    assert resolve_flexible_width(150, 10, 200) == 150


def test_flexible_mode_reports_width_on_placements():
    items = make_items([40, 60, 80, 20, 10], width=10)
    p = params(item_width=0, flexible_width=200, container_width=970)

    result = compute_layout(items, p)

    assert result.columns == 4
    assert {pl.width for pl in result.placements} == {235}


def test_left_alignment_keeps_first_column_flush():
    items = make_items([50, 80, 30, 20])

    result = compute_layout(items, params(align="left"))

    assert compute_side_offset("left", 3, 110, 330, 10) == 5
    assert [p.left for p in result.placements] == [0, 115, 225, 225]
    assert all(p.right is None for p in result.placements)


def test_right_alignment_anchors_from_right_edge():
    items = make_items([50, 80, 30])

    result = compute_layout(items, params(align="right"))

    assert [p.right for p in result.placements] == [5, 115, 225]
    assert all(p.left is None for p in result.placements)


def test_center_offset_rounds_half_up():
    # (335 - 320) / 2 == 7.5
    assert compute_side_offset("center", 3, 110, 335, 10) == 8


def test_incremental_layout_matches_full_with_unchanged_heights():
    items = make_items([50, 80, 30, 20, 65, 45])
    first = compute_layout(items, params())

    second = compute_layout(items, params(), prior=first.model)

    assert second.full is False
    assert second.placements == first.placements
    assert second.height == first.height


def test_incremental_layout_keeps_membership_and_moves_tops():
    items = make_items([50, 80, 30, 20])
    first = compute_layout(items, params())
    grown = [ItemMetrics(i.handle, i.width, 100 if n == 2 else i.height) for n, i in enumerate(items)]

    second = compute_layout(grown, params(container_width=340), prior=first.model)

    assert second.full is False
    assert [c.items for c in second.model.columns] == [c.items for c in first.model.columns]
    # Item 3 stays below item 2 in column 2 even though column 0 is now shorter.
    assert second.placements[3].top == 110
    assert second.placements[3].left == 2 * 110 + 10


def test_incremental_layout_leaves_prior_model_untouched():
    items = make_items([50, 80, 30])
    first = compute_layout(items, params())
    taller = [ItemMetrics(i.handle, i.width, i.height * 2) for i in items]

    compute_layout(taller, params(), prior=first.model)

    assert [c.height for c in first.model.columns] == [60, 90, 40]


def test_column_count_change_forces_full_layout():
    items = make_items([50, 80, 30, 20])
    first = compute_layout(items, params())

    second = compute_layout(items, params(container_width=220), prior=first.model)

    assert second.full is True
    assert second.columns == 2


def test_added_item_forces_full_layout():
    items = make_items([50, 80, 30])
    first = compute_layout(items, params())
    extended = items + [ItemMetrics(Tile("new"), 100, 25)]

    second = compute_layout(extended, params(), prior=first.model)

    assert second.full is True
    assert second.model.column_of(extended[-1].handle) == 2


def test_layout_full_guards_zero_columns():
    items = make_items([10, 20])

    model, placements, bottom = layout_full(items, 0, 110, 0, params())

    assert model.column_count == 1
    assert [p.top for p in placements] == [0, 20]
    assert bottom == 50


def test_column_model_lookup():
    model = ColumnModel()
    assert model.column_count == 0
    assert model.column_of(Tile("x")) == -1
    assert model.handles() == []


def test_negative_offset_is_clamped_in_flexible_mode():
    items = make_items([10, 20])

    result = compute_layout(items, LayoutParams(flexible_width=5, offset=-10, container_width=100))

    # With the gutter at 0, 100 / 19 is the last width above 5.
    assert result.column_width == 5
    assert result.columns == 20
    assert all(p.width == 5 for p in result.placements)


def test_flexible_width_tolerates_bad_arguments():
    assert resolve_flexible_width(100, -10, 5) == 5
    assert resolve_flexible_width(100, 0, 0) == 100
    assert resolve_flexible_width(-50, 10, 200) == 0


def test_negative_container_width_is_clamped():
    items = make_items([50, 80])

    result = compute_layout(items, params(container_width=-100))

    assert result.placements[0].left == -50
    assert result.columns == 1
    assert result.placements == compute_layout(items, params(container_width=0)).placements
    assert [p.top for p in result.placements] == [0, 60]


def test_clamped_params_copy():
    raw = LayoutParams(item_width=-1, flexible_width=-2, offset=-3, container_width=-4)

    clamped = raw.clamped()

    assert (clamped.item_width, clamped.flexible_width, clamped.offset, clamped.container_width) == (0, 0, 0, 0)
    assert raw.offset == -3
    assert params().clamped() == params()
