"""Seeded random numbers with the engine's integer and float conventions."""

from __future__ import annotations

import random

RAND_MAX = 32767

_rng = random.Random()


def seed_random(seed: int) -> None:
    _rng.seed(seed)


def _rand() -> int:
    return _rng.randint(0, RAND_MAX)


def random_int(*args: int) -> int:
    """No args: [0, RAND_MAX]; (max): [0, max); (min, max): [min, max]."""
    if not args:
        return _rand()
    if len(args) == 1:
        return _rand() % args[0]
    if len(args) == 2:
        low, high = args
        return low + _rand() % ((high - low) + 1)
    raise TypeError(f"random_int takes at most 2 arguments ({len(args)} given)")


def random_float(*args: float) -> float:
    """No args: [0, 1]; (max): [0, max]; (min, max): [min, max]."""
    if not args:
        return _rand() / RAND_MAX
    if len(args) == 1:
        return random_float() * args[0]
    if len(args) == 2:
        low, high = args
        return low + random_float(high - low)
    raise TypeError(f"random_float takes at most 2 arguments ({len(args)} given)")