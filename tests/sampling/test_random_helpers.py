import pytest

from src.genart2d.errors import InvalidArgumentError
from src.genart2d.prng import Prng
from src.genart2d.random import random_bias, random_choice, random_in_range, random_int, random_snap


def test_random_in_range():
    p = Prng(1)
    for _ in range(200):
        v = random_in_range(-5.0, 5.0, prng=p)
        assert -5.0 <= v < 5.0


def test_random_in_range_matches_stream():
    assert random_in_range(10, 20, prng=Prng(3)) == pytest.approx(Prng(3).next() * 10 + 10)


def test_random_int_is_inclusive():
    p = Prng(2)
    seen = {random_int(0, 3, prng=p) for _ in range(500)}
    assert seen == {0, 1, 2, 3}


def test_random_choice():
    p = Prng(4)
    items = ["a", "b", "c"]
    picks = {random_choice(items, prng=p) for _ in range(200)}
    assert picks == set(items)


def test_random_choice_empty():
    with pytest.raises(IndexError):
        random_choice([], prng=Prng(0))


def test_random_bias_without_influence_is_uniform_draw():
    v = random_bias(0, 100, 80, influence=0.0, prng=Prng(5))
    assert v == pytest.approx(Prng(5).next() * 100)


def test_random_bias_pulls_toward_bias():
    p = Prng(6)
    values = [random_bias(0, 100, 100, influence=1.0, prng=p) for _ in range(500)]
    assert all(0 <= v <= 100 for v in values)
    assert sum(values) / len(values) > 60


def test_random_snap():
    p = Prng(7)
    for _ in range(100):
        v = random_snap(0, 100, 10, prng=p)
        assert v % 10 == 0
        assert 0 <= v <= 100


def test_random_snap_rejects_bad_increment():
    with pytest.raises(InvalidArgumentError):
        random_snap(0, 10, 0, prng=Prng(0))
