"""Process-wide random number source for the game."""

from __future__ import annotations

import random
import secrets
from typing import overload

from .gmath import Vector2, Vector3

_generator = random.Random()


def init() -> None:
    """Seed the generator from the operating system's entropy source."""
    seed(secrets.randbits(32))


def seed(value: int) -> None:
    """Seed the generator with ``value``."""
    _generator.seed(value)


def get_float() -> float:
    """Return a float in ``[0.0, 1.0)``."""
    return get_float_range(0.0, 1.0)


def get_float_range(low: float, high: float) -> float:
    """Return a float in ``[low, high)``."""
    return low + (high - low) * _generator.random()


def get_int_range(low: int, high: int) -> int:
    """Return an int in ``[low, high]``, both ends included.

    Raises ValueError if ``low`` is greater than ``high``.
    """
    return _generator.randint(low, high)


@overload
def get_vector(low: Vector2, high: Vector2) -> Vector2: ...


@overload
def get_vector(low: Vector3, high: Vector3) -> Vector3: ...


def get_vector(low, high):
    """Return a random vector lying between the bounds ``low`` and ``high``."""
    if isinstance(low, Vector2) and isinstance(high, Vector2):
        r = Vector2(get_float(), get_float())
        return low + (high - low) * r
    if isinstance(low, Vector3) and isinstance(high, Vector3):
        r = Vector3(get_float(), get_float(), get_float())
        return low + (high - low) * r
    raise TypeError("bounds must both be Vector2 or both be Vector3")