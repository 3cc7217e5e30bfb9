from __future__ import annotations

import logging
import random
from typing import Dict, Protocol, Type

from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class BitGenerator(Protocol):
    """Protocol shared by the seedable engines a :class:`~dice_roller.dice.Dice` can own."""

    seed: int
    min: int
    max: int

    def __call__(self) -> int:
        """Return the next raw output and advance the engine."""

    def uniform_int(self, low: int, high: int) -> int:
        """Return an integer N such that low <= N <= high."""


def _check_seed(seed: int) -> int:
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise InvalidArgumentError(f"seed must be an unsigned integer, got {seed!r}")
    if seed < 0:
        raise InvalidArgumentError(f"seed must be non-negative, got {seed}")
    return seed


def _check_range(low: int, high: int) -> None:
    if low > high:
        raise InvalidArgumentError(f"empty range [{low}, {high}]")


class MinStdRand:
    """Park-Miller "minimal standard" linear congruential engine.

    Produces the same stream as C++ ``std::minstd_rand``:
      x' = 48271 * x mod (2**31 - 1)

    Outputs lie in [1, 2**31 - 2]. A seed that reduces to 0 is replaced by 1,
    since 0 is a fixed point of the recurrence.
    """

    multiplier = 48271
    modulus = 2**31 - 1
    min = 1
    max = modulus - 1

    def __init__(self, seed: int) -> None:
        self.seed = _check_seed(seed)
        state = seed % self.modulus
        self._state = state or 1

    def __call__(self) -> int:
        self._state = (self._state * self.multiplier) % self.modulus
        return self._state

    def uniform_int(self, low: int, high: int) -> int:
        """Draw uniformly from [low, high] by scaling engine output.

        Mirrors the GNU C++ library's ``uniform_int_distribution``: narrower
        ranges are downscaled with rejection of the uneven tail, wider ranges
        are built by recursively combining draws.
        """
        _check_range(low, high)
        engine_range = self.max - self.min
        urange = high - low

        if engine_range > urange:
            buckets = urange + 1
            scaling = engine_range // buckets
            past = buckets * scaling
            ret = self() - self.min
            while ret >= past:
                ret = self() - self.min
            ret //= scaling
        elif engine_range < urange:
            span = engine_range + 1
            while True:
                tmp = span * self.uniform_int(0, urange // span)
                ret = tmp + (self() - self.min)
                if ret <= urange:
                    break
        else:
            ret = self() - self.min
        return ret + low


class MersenneTwister:
    """Engine backed by :class:`random.Random` (MT19937)."""

    min = 0
    max = 2**32 - 1

    def __init__(self, seed: int) -> None:
        self.seed = _check_seed(seed)
        self._rng = random.Random(seed)

    def __call__(self) -> int:
        return self._rng.getrandbits(32)

    def uniform_int(self, low: int, high: int) -> int:
        _check_range(low, high)
        return self._rng.randint(low, high)


DEFAULT_ALGORITHM = "minstd"

ALGORITHMS: Dict[str, Type[BitGenerator]] = {
    "minstd": MinStdRand,
    "mt19937": MersenneTwister,
}


def make_generator(name: str, seed: int) -> BitGenerator:
    """Build the engine registered under ``name`` seeded with ``seed``."""
    try:
        cls = ALGORITHMS[name]
    except KeyError:
        raise InvalidArgumentError(
            f"unknown generator algorithm {name!r}; expected one of {sorted(ALGORITHMS)}"
        ) from None
    logger.debug("Creating %s generator with seed=%d", name, seed)
    return cls(seed)


__all__ = [
    "ALGORITHMS",
    "BitGenerator",
    "DEFAULT_ALGORITHM",
    "MersenneTwister",
    "MinStdRand",
    "make_generator",
]
