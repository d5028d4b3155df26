import numpy as np
import pytest
from structlog.testing import capture_logs

from src.genart2d.datastructures import Point2D
from src.genart2d.errors import InvalidArgumentError
from src.genart2d.voronoi import (
    build_voronoi_diagram,
    build_voronoi_tessellation,
    iter_relaxation,
    site_to_centroid_distances,
)


def _random_points(n=20, size=400.0, margin=10.0, seed=7):
    rng = np.random.default_rng(seed)
    return [Point2D(float(x), float(y)) for x, y in rng.uniform(margin, size - margin, size=(n, 2))]


def test_three_well_separated_points_without_relaxation():
    d = build_voronoi_diagram(
        width=400,
        height=400,
        points=[Point2D(100, 100), Point2D(300, 100), Point2D(200, 300)],
        relax_iterations=0,
    )

    assert d.cell_count() == 3
    for cell in d.cells:
        assert len(cell.points) >= 3
        assert 0 <= cell.centroid.x <= 400
        assert 0 <= cell.centroid.y <= 400
        assert cell.inner_circle_radius > 0
        assert len(cell.neighbors) == 2


def test_point_count_is_preserved():
    pts = _random_points()
    for iterations in (0, 1, 8):
        d = build_voronoi_diagram(width=400, height=400, points=pts, relax_iterations=iterations)
        assert len(d.points) == len(pts)
        assert len(d.cells) <= len(d.points)


def test_zero_relaxation_keeps_input_positions():
    pts = _random_points()
    d = build_voronoi_diagram(width=400, height=400, points=pts, relax_iterations=0)
    assert d.points == pts


def test_input_array_is_not_mutated():
    arr = np.array([[p.x, p.y] for p in _random_points()])
    before = arr.copy()

    d = build_voronoi_diagram(width=400, height=400, points=arr, relax_iterations=4)

    np.testing.assert_array_equal(arr, before)
    assert d.points != [Point2D(float(x), float(y)) for x, y in before]


def test_neighbors_are_symmetric_and_live():
    d = build_voronoi_diagram(width=400, height=400, points=_random_points(), relax_iterations=2)

    ids = {id(c) for c in d.cells}
    for cell in d.cells:
        assert cell.neighbors
        for nb in cell.neighbors:
            assert id(nb) in ids
            assert nb is not cell
            assert any(back is cell for back in nb.neighbors)


def test_relaxation_converges_with_full_lloyd_steps():
    pts = _random_points(seed=11)
    steps = list(iter_relaxation(pts, width=400, height=400, iterations=30, factor=1.0))

    moves = [s.displacement for s in steps]
    assert [s.iteration for s in steps] == list(range(1, 31))
    assert moves[-1] < 0.5 * moves[0]
    assert np.mean(moves[-5:]) < np.mean(moves[:5])


def test_relaxation_moves_sites_toward_centroids():
    pts = _random_points(seed=3)

    raw = build_voronoi_diagram(width=400, height=400, points=pts, relax_iterations=0)
    relaxed = build_voronoi_diagram(
        width=400, height=400, points=pts, relax_iterations=8, relaxation_factor=0.5
    )

    assert raw.cell_count() == relaxed.cell_count() == len(pts)
    assert np.mean(site_to_centroid_distances(relaxed)) < np.mean(site_to_centroid_distances(raw))


def test_zero_factor_relaxation_is_a_no_op():
    pts = _random_points(seed=5)
    d = build_voronoi_diagram(width=400, height=400, points=pts, relax_iterations=3, relaxation_factor=0.0)
    assert d.points == pts


def test_single_centered_site_inner_radius():
    d = build_voronoi_diagram(width=100, height=100, points=[(50, 50)], relax_iterations=0)

    (cell,) = d.cells
    assert (cell.centroid.x, cell.centroid.y) == pytest.approx((50.0, 50.0))
    assert cell.inner_circle_radius == pytest.approx(50.0)
    assert cell.neighbors == []


def test_site_without_cell_is_kept_in_points_only():
    d = build_voronoi_diagram(
        width=100, height=100, points=[(30, 40), (-500, -500)], relax_iterations=3
    )

    assert len(d.points) == 2
    assert d.cell_count() == 1
    assert d.points[1] == Point2D(-500.0, -500.0)
    assert d.cells[0].neighbors == []
    # the only in-box site relaxes toward the box centre
    assert abs(d.points[0].x - 50.0) < 20.0


def test_empty_input():
    d = build_voronoi_diagram(width=100, height=100, points=[])
    assert d.cells == []
    assert d.points == []


def test_alias():
    assert build_voronoi_tessellation is build_voronoi_diagram


def test_cell_repr_does_not_recurse():
    d = build_voronoi_diagram(width=400, height=400, points=_random_points(n=5), relax_iterations=0)
    assert "VoronoiCell" in repr(d.cells[0])


@pytest.mark.parametrize("kwargs", [
    dict(width=0, height=100),
    dict(width=100, height=-1),
    dict(width=float("nan"), height=100),
    dict(width=100, height=100, relax_iterations=-1),
    dict(width=100, height=100, relax_iterations=1.5),
    dict(width=100, height=100, relaxation_factor=float("inf")),
    dict(width=100, height=100, relax_iterations=float("nan")),
    dict(width=100, height=100, relax_iterations="8"),
    dict(width="wide", height=100),
    dict(width=100, height=None),
    dict(width=100, height=100, relaxation_factor="half"),
])
def test_invalid_arguments(kwargs):
    with pytest.raises(InvalidArgumentError):
        build_voronoi_diagram(points=[(1, 1)], **kwargs)


def test_points_as_xy_mappings():
    d = build_voronoi_diagram(
        width=400, height=400, points=[{"x": 100, "y": 100}, {"x": 300, "y": 300}], relax_iterations=0
    )

    assert d.points == [Point2D(100.0, 100.0), Point2D(300.0, 300.0)]
    assert d.cell_count() == 2


def test_point_mapping_without_coordinates_is_rejected():
    with pytest.raises(InvalidArgumentError):
        build_voronoi_diagram(width=400, height=400, points=[{"x": 100}], relax_iterations=0)


def test_sites_far_outside_still_own_the_box():
    d = build_voronoi_diagram(width=100, height=100, points=[(5000, 40), (5000, 60)], relax_iterations=0)
    assert d.cell_count() == 2

    d = build_voronoi_diagram(width=100, height=100, points=[(5000, 50)], relax_iterations=0)
    assert d.cell_count() == 1


def test_site_to_centroid_distances_requires_alignment():
    d = build_voronoi_diagram(width=100, height=100, points=[(30, 40), (-500, -500)], relax_iterations=0)
    with pytest.raises(InvalidArgumentError):
        site_to_centroid_distances(d)


def test_relaxation_is_logged():
    with capture_logs() as logs:
        build_voronoi_diagram(width=400, height=400, points=_random_points(n=6), relax_iterations=2)

    steps = [e for e in logs if e["event"] == "voronoi_relax_step"]
    assert [e["iteration"] for e in steps] == [1, 2]
    assert all(e["log_level"] == "debug" for e in steps)
