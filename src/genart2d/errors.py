from __future__ import annotations


class Genart2dError(Exception):
    """Base error for the package."""


class InvalidArgumentError(Genart2dError, ValueError):
    """Argument outside the domain an operation accepts (raised before any work)."""


def require_positive(name: str, value) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}") from exc
    # NaN fails both comparisons, inf fails the second
    if not (v > 0) or v == float("inf"):
        raise InvalidArgumentError(f"{name} must be a finite number > 0, got {value!r}")
    return v
