from __future__ import annotations

from typing import Optional, Sequence, TypeVar

from .errors import InvalidArgumentError
from .prng import Prng, resolve_prng

T = TypeVar("T")


def random_in_range(min_value: float, max_value: float, *, prng: Optional[Prng] = None) -> float:
    """Uniform float in [min_value, max_value)."""
    return resolve_prng(prng).next() * (max_value - min_value) + min_value


def random_int(min_value: int, max_value: int, *, prng: Optional[Prng] = None) -> int:
    """Integer in [min_value, max_value]; the end points get half the weight of inner values."""
    return int(round(random_in_range(min_value, max_value, prng=prng)))


def random_choice(seq: Sequence[T], *, prng: Optional[Prng] = None) -> T:
    if len(seq) == 0:
        raise IndexError("Cannot choose from an empty sequence")
    return seq[random_int(0, len(seq) - 1, prng=prng)]


def random_bias(
    min_value: float,
    max_value: float,
    bias: float,
    influence: float = 0.5,
    *,
    prng: Optional[Prng] = None,
) -> float:
    """
    Random number in range, pulled toward ``bias``. influence=0 is uniform,
    influence=1 lets the pull go all the way to the bias value.
    """
    base = random_in_range(min_value, max_value, prng=prng)
    mix = random_in_range(0.0, 1.0, prng=prng) * influence
    return base * (1.0 - mix) + bias * mix


def random_snap(min_value: float, max_value: float, snap_inc: float, *, prng: Optional[Prng] = None) -> float:
    """Random number in range snapped to the nearest multiple of snap_inc."""
    if not snap_inc > 0:
        raise InvalidArgumentError(f"snap_inc must be > 0, got {snap_inc!r}")
    return round(random_in_range(min_value, max_value, prng=prng) / snap_inc) * snap_inc
