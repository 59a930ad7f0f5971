from raster_map.src.core.grid import Grid
from raster_map.src.traversal.engine import breadth_first


def test_start_yielded_first_without_parent():
    g = Grid.create(3, 3, 0)
    cell, parent = next(breadth_first(g, (1, 1), lambda v: True))
    assert cell == (1, 1)
    assert parent is None


def test_each_cell_visited_once_in_bfs_layers():
    g = Grid.create(4, 4, 0)
    order = [cell for cell, _ in breadth_first(g, (0, 0), lambda v: True)]
    assert len(order) == 16
    assert len(set(order)) == 16
    layers = [x + y for x, y in order]
    assert layers == sorted(layers)


def test_parent_is_adjacent():
    g = Grid.create(3, 3, 0)
    for (x, y), parent in breadth_first(g, (1, 1), lambda v: True):
        if parent is not None:
            px, py = parent
            assert abs(px - x) + abs(py - y) == 1


def test_rejected_values_are_never_yielded():
    g = Grid([[0, 1, 0], [0, 1, 0], [0, 0, 0]])
    cells = {cell for cell, _ in breadth_first(g, (0, 0), lambda v: v != 1)}
    assert (0, 1) not in cells
    assert (1, 1) not in cells
    assert len(cells) == 7


def test_wrap_connects_opposite_edges():
    g = Grid([[0], [1], [0]])
    no_wrap = {cell for cell, _ in breadth_first(g, (0, 0), lambda v: v == 0)}
    wrapped = {cell for cell, _ in breadth_first(g, (0, 0), lambda v: v == 0, wrap=True)}
    assert no_wrap == {(0, 0)}
    assert wrapped == {(0, 0), (2, 0)}


def test_stopping_early_does_not_expand_current_cell():
    g = Grid.create(5, 1, 0)
    search = breadth_first(g, (0, 0), lambda v: True)
    assert next(search)[0] == (0, 0)
    search.close()
