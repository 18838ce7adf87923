import pytest

from mpattern.config import PatternConfig
from mpattern.palette import DEFAULT_PALETTE
from mpattern.spiral import EMPTY, SpiralGrid, build_spiral, spiral_lines, walk_spiral

from tests.helpers import strip_ansi


def test_walk_visits_each_position_once():
    size = 30
    steps = list(walk_spiral(size))
    assert len(steps) == size * size
    assert [step for step, _, _ in steps] == list(range(size * size))
    positions = {(x, y) for _, x, y in steps}
    assert len(positions) == size * size
    half = size // 2
    assert all(-half < x <= half and -half < y <= half for x, y in positions)


def test_walk_starts_at_centre_heading_into_first_turn():
    assert list(walk_spiral(2)) == [(0, 0, 0), (1, 1, 0), (2, 1, 1), (3, 0, 1)]


def test_small_spiral_layout():
    grid = build_spiral(2)
    assert grid.cells.tolist() == [[0, 1], [3, 2]]


def test_every_cell_stamped_exactly_once():
    grid = build_spiral(30)
    assert grid.is_full()
    assert sorted(grid.cells.ravel().tolist()) == list(range(900))
    assert grid.get_cell(14, 14) == 0


def test_out_of_bounds_stamp_is_skipped():
    grid = SpiralGrid(4)
    assert grid.stamp(-2, 0, 7) is False
    assert grid.stamp(3, 0, 7) is False
    assert not (grid.cells == 7).any()
    assert grid.stamp(2, 2, 7) is True
    assert grid.get_cell(3, 3) == 7
    assert grid.get_cell(0, 0) == EMPTY


def test_get_cell_out_of_grid_raises():
    grid = SpiralGrid(4)
    with pytest.raises(IndexError):
        grid.get_cell(4, 0)


@pytest.mark.parametrize("size", [0, 3, -2])
def test_invalid_sizes_rejected(size):
    with pytest.raises(ValueError):
        SpiralGrid(size)


def test_spiral_lines_are_padded_rows():
    config = PatternConfig(spiral_size=6)
    lines = list(spiral_lines(DEFAULT_PALETTE, config))
    assert lines[0] == ""
    assert "SPIRAL OF 1's" in lines[1]
    rows = lines[2:]
    assert len(rows) == 6
    for row in rows:
        visible = strip_ansi(row)
        assert visible.startswith(" " * config.margin)
        assert visible == " " * config.margin + "1 " * 6
