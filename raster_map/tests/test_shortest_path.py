from raster_map.src.core.grid import Grid
from raster_map.src.core.point import Point
from raster_map.src.traversal.operations import shortest_path


def _pts(*coords):
    return [Point(x, y) for x, y in coords]


def test_straight_strip():
    g = Grid.create(5, 1, 0)
    path = shortest_path(g, Point(0, 0), Point(4, 0), 1, False)
    assert path == _pts((0, 0), (1, 0), (2, 0), (3, 0), (4, 0))


def test_blocked_strip_returns_none():
    g = Grid.create(5, 1, 0)
    g.set(2, 0, 1)
    assert g.shortest_path(Point(0, 0), Point(4, 0), 1, False) is None


def test_blocked_strip_with_wrap_goes_around():
    g = Grid.create(5, 1, 0)
    g.set(2, 0, 1)
    assert g.shortest_path(Point(0, 0), Point(4, 0), 1, True) == _pts((0, 0), (4, 0))


def test_start_equals_goal():
    g = Grid.create(3, 3, 0)
    assert g.shortest_path(Point(1, 1), Point(1, 1), 1) == [Point(1, 1)]


def test_endpoints_on_obstacle_or_missing():
    g = Grid.create(3, 3, 0)
    g.set(2, 2, 1)
    assert g.shortest_path(Point(2, 2), Point(0, 0), 1) is None
    assert g.shortest_path(Point(0, 0), Point(2, 2), 1) is None
    assert g.shortest_path(None, Point(0, 0), 1) is None
    assert g.shortest_path(Point(0, 0), None, 1) is None
    assert g.shortest_path(Point(0, 0), Point(3, 0), 1) is None


def test_wall_across_grid_needs_wrap():
    g = Grid.create(5, 3, 0)
    for y in range(3):
        g.set(2, y, 1)
    assert g.shortest_path(Point(0, 1), Point(4, 1), 1, False) is None
    path = g.shortest_path(Point(0, 1), Point(4, 1), 1, True)
    assert path == _pts((0, 1), (4, 1))


def test_path_goes_around_obstacles_with_minimal_length():
    g = Grid([
        [0, 0, 0, 0],
        [1, 1, 1, 0],
        [0, 0, 0, 0],
    ])
    path = g.shortest_path(Point(0, 0), Point(2, 0), 1)
    assert path is not None
    assert path[0] == Point(0, 0)
    assert path[-1] == Point(2, 0)
    assert len(path) == 9
    for a, b in zip(path, path[1:]):
        assert a.distance(b) == 1.0
        assert g.get(b.x, b.y) != 1


def test_path_does_not_mutate_grid():
    g = Grid([[0, 1], [0, 0]])
    before = g.to_list()
    g.shortest_path(Point(0, 0), Point(1, 1), 1)
    assert g.to_list() == before
