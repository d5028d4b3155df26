import pytest
from opensimplex import OpenSimplex

from src.genart2d.datastructures import Point2D
from src.genart2d.errors import InvalidArgumentError
from src.genart2d.noise_grid import create_noise_grid
from src.genart2d.prng import Prng


def test_grid_layout():
    g = create_noise_grid(width=200, height=100, resolution=4, seed=1)

    assert len(g.cells) == 16
    assert (g.cols, g.rows) == (4, 4)
    cell = g.cells[2 + 3 * 4]
    assert (cell.x, cell.y) == (100.0, 75.0)
    assert (cell.width, cell.height) == (50.0, 25.0)


def test_noise_values_come_from_simplex():
    g = create_noise_grid(resolution=3, x_inc=0.1, y_inc=0.2, seed=17)
    simplex = OpenSimplex(seed=17)

    assert g.cells[0].noise_value == pytest.approx(simplex.noise2(0.0, 0.0))
    assert g.cells[1].noise_value == pytest.approx(simplex.noise2(0.1, 0.0))
    # x offset restarts on each row
    assert g.cells[3].noise_value == pytest.approx(simplex.noise2(0.0, 0.2))
    assert all(-1.0 <= c.noise_value <= 1.0 for c in g.cells)


def test_seed_from_prng_is_reproducible():
    a = create_noise_grid(resolution=5, prng=Prng("noise"))
    b = create_noise_grid(resolution=5, prng=Prng("noise"))

    assert a.seed == b.seed
    assert 0 <= a.seed < 1000
    assert [c.noise_value for c in a.cells] == [c.noise_value for c in b.cells]


def test_lookup():
    g = create_noise_grid(width=400, height=400, resolution=20, seed=3)

    cell = g.lookup(Point2D(150, 210))
    assert cell.x <= 150 < cell.x + cell.width
    assert cell.y <= 210 < cell.y + cell.height


def test_lookup_clamps_outside_positions():
    g = create_noise_grid(width=100, height=100, resolution=4, seed=3)

    assert g.lookup(Point2D(-50, -50)) is g.cells[0]
    assert g.lookup(Point2D(500, 500)) is g.cells[-1]


@pytest.mark.parametrize("kwargs", [dict(resolution=0), dict(width=0), dict(height=-5)])
def test_invalid_arguments(kwargs):
    with pytest.raises(InvalidArgumentError):
        create_noise_grid(seed=1, **kwargs)
