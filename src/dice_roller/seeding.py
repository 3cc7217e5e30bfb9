from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Protocol

from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

# Seeds are unsigned 32-bit values, matching a C ``unsigned int``.
SEED_MASK = 0xFFFFFFFF


class SeedProvider(Protocol):
    def __call__(self) -> int:  # pragma: no cover - type contract
        ...


@dataclass
class TimeSeedProvider:
    """Seed from the wall clock.

    The clock returns ticks since the epoch (nanoseconds by default). The
    value is truncated to 32 bits. Two providers queried within the same tick
    return the same seed; callers needing distinct streams should pass seeds
    explicitly.
    """

    clock: Callable[[], int] = field(default=time.time_ns)

    def __call__(self) -> int:
        ticks = int(self.clock())
        seed = ticks & SEED_MASK
        logger.debug("Derived seed %d from clock ticks %d", seed, ticks)
        return seed


@dataclass(frozen=True)
class FixedSeedProvider:
    """Always return the same seed. Useful for tests and replays."""

    seed: int

    def __post_init__(self) -> None:
        if isinstance(self.seed, bool) or not isinstance(self.seed, int) or self.seed < 0:
            raise InvalidArgumentError(f"seed must be a non-negative integer, got {self.seed!r}")

    def __call__(self) -> int:
        return self.seed


__all__ = ["FixedSeedProvider", "SEED_MASK", "SeedProvider", "TimeSeedProvider"]
