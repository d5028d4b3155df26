import math

import numpy as np
import pytest
from scipy.spatial.distance import pdist
from structlog.testing import capture_logs

from src.genart2d.errors import InvalidArgumentError
from src.genart2d.poisson import poisson_disc
from src.genart2d.prng import Prng, seed_prng


def _as_array(points):
    return np.array([[p.x, p.y] for p in points], dtype=np.float64)


def test_min_distance_holds_pairwise():
    pts = poisson_disc(100, 100, 10, prng=Prng("poisson"))
    P = _as_array(pts)

    assert len(pts) >= 1
    assert pdist(P).min() >= 10.0 - 1e-9


def test_point_count_for_radius_10_in_100_square():
    counts = [len(poisson_disc(100, 100, 10, prng=Prng(seed))) for seed in range(3)]
    for n in counts:
        assert 50 <= n <= 110


def test_points_within_bounds():
    pts = poisson_disc(120, 60, 7, prng=Prng(1))
    P = _as_array(pts)

    assert np.all(P[:, 0] >= 0) and np.all(P[:, 0] < 120)
    assert np.all(P[:, 1] >= 0) and np.all(P[:, 1] < 60)
    assert pdist(P).min() >= 7.0 - 1e-9


def test_deterministic_for_seed():
    a = poisson_disc(100, 100, 10, prng=Prng("same"))
    b = poisson_disc(100, 100, 10, prng=Prng("same"))
    c = poisson_disc(100, 100, 10, prng=Prng("other"))

    assert a == b
    assert a != c


def test_first_point_is_the_random_seed_point():
    p = Prng(12)
    expected = (p.next() * 80, p.next() * 50)

    pts = poisson_disc(80, 50, 5, prng=Prng(12))

    assert (pts[0].x, pts[0].y) == pytest.approx(expected)


def test_uses_default_prng():
    seed_prng(99)
    a = poisson_disc(50, 50, 8)
    seed_prng(99)
    b = poisson_disc(50, 50, 8)
    assert a == b


def test_single_attempt_still_valid():
    pts = poisson_disc(100, 100, 10, max_attempts=1, prng=Prng(3))
    assert len(pts) >= 1
    if len(pts) > 1:
        assert pdist(_as_array(pts)).min() >= 10.0 - 1e-9


def test_area_smaller_than_radius():
    pts = poisson_disc(5, 5, 10, prng=Prng(4))
    # any two points in a 5x5 square are closer than 10
    assert len(pts) == 1


@pytest.mark.parametrize("kwargs", [
    dict(radius=0),
    dict(radius=-1),
    dict(radius=math.nan),
    dict(width=0),
    dict(height=-10),
    dict(width=math.inf),
    dict(max_attempts=0),
])
def test_invalid_arguments(kwargs):
    with pytest.raises(InvalidArgumentError):
        poisson_disc(prng=Prng(0), **kwargs)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        poisson_disc(100, 100, 0, prng=Prng(0))


def test_completion_is_logged():
    with capture_logs() as logs:
        pts = poisson_disc(40, 40, 10, prng=Prng(5))

    (event,) = [e for e in logs if e["event"] == "poisson_disc_done"]
    assert event["points"] == len(pts)
