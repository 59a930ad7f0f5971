from raster_map.src.traversal.neighbours import DIRECTIONS, neighbours, wrap_coordinate


def test_directions_are_axis_aligned_unit_steps():
    assert len(DIRECTIONS) == 4
    assert all(abs(dx) + abs(dy) == 1 for dx, dy in DIRECTIONS)


def test_wrap_coordinate_disabled_returns_value():
    assert wrap_coordinate(-1, 5, False) == -1
    assert wrap_coordinate(5, 5, False) == 5
    assert wrap_coordinate(3, 5, False) == 3


def test_wrap_coordinate_enabled():
    assert wrap_coordinate(-1, 5, True) == 4
    assert wrap_coordinate(5, 5, True) == 0
    assert wrap_coordinate(2, 5, True) == 2


def test_corner_neighbours_without_wrap():
    assert sorted(neighbours((0, 0), 3, 3, False)) == [(0, 1), (1, 0)]


def test_corner_neighbours_with_wrap():
    assert sorted(neighbours((0, 0), 3, 3, True)) == [(0, 1), (0, 2), (1, 0), (2, 0)]


def test_single_column_wraps_onto_itself():
    # Stepping sideways in a one-cell-wide grid lands back on the same cell.
    assert sorted(neighbours((0, 1), 1, 3, True)) == [(0, 0), (0, 1), (0, 1), (0, 2)]
