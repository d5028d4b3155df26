from src.genart2d.scalar import clamp, lerp, map_range


def test_map_range():
    assert map_range(5, 0, 10, 0, 100) == 50
    assert map_range(0, -1, 1, 10, 20) == 15
    # outside the input range extrapolates
    assert map_range(20, 0, 10, 0, 1) == 2


def test_map_range_empty_input_range():
    assert map_range(3, 4, 4, 7, 9) == 7


def test_lerp():
    assert lerp(10, 20, 0) == 10
    assert lerp(10, 20, 1) == 20
    assert lerp(10, 20, 0.5) == 15


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-2, 0, 3) == 0
    assert clamp(1.5, 0, 3) == 1.5
