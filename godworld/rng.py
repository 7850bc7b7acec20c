"""Shared random number helpers for world generation."""

from __future__ import annotations

import math
import random

__all__ = ["rand_radian", "randf", "randi", "seed"]

_generator = random.Random()


def seed(value=None) -> None:
    """Reseed the shared generator; ``None`` seeds from the system."""
    _generator.seed(value)


def randf(low: float = 0.0, high: float = 1.0) -> float:
    """Float in [low, high)."""
    return _generator.random() * (high - low) + low


def rand_radian() -> float:
    """Angle in [0, 2*pi)."""
    return randf(0.0, 2 * math.pi)


def randi(low: int, high: int | None = None) -> int:
    """Integer in [low, high], both inclusive; with one argument, in [0, low]."""
    if high is None:
        low, high = 0, low
    if high < low:
        raise ValueError(f"empty range: [{low}, {high}]")
    return _generator.randint(low, high)