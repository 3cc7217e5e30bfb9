from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from .exceptions import InvalidArgumentError
from .generators import DEFAULT_ALGORITHM, BitGenerator, make_generator
from .seeding import SeedProvider, TimeSeedProvider

if TYPE_CHECKING:  # pragma: no cover
    from .config import DiceSettings

logger = logging.getLogger(__name__)


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    return value


class Dice:
    """Sum simulated die rolls drawn from a private, seeded generator.

    Usage:
        dice = Dice(42)
        dice.roll()        # one six-sided die
        dice.roll(3, 8)    # 3d8

    With no seed the generator is seeded from ``seed_provider`` (the wall
    clock by default). The effective seed is kept on ``dice.seed`` so a run
    can be replayed. Instances are not thread-safe.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        *,
        algorithm: str = DEFAULT_ALGORITHM,
        seed_provider: Optional[SeedProvider] = None,
    ) -> None:
        if seed is None:
            provider = seed_provider or TimeSeedProvider()
            seed = provider()
            logger.info("No seed provided; using generated seed=%d (%s)", seed, algorithm)
        else:
            logger.debug("Initialized Dice with deterministic seed=%s (%s)", seed, algorithm)
        self._gen: BitGenerator = make_generator(algorithm, seed)
        self.algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Optional["DiceSettings"] = None) -> "Dice":
        """Build a Dice from settings, loading them from the usual sources if omitted."""
        if settings is None:
            from .config import load_settings

            settings = load_settings()
        return cls(settings.seed, algorithm=settings.algorithm)

    @property
    def seed(self) -> int:
        return self._gen.seed

    def roll(self, num: int = 1, size: int = 6) -> int:
        """Roll ``num`` dice with ``size`` faces and return the total.

        Args:
            num: Number of dice (>= 0). Zero dice total 0.
            size: Faces per die (>= 1).

        Returns:
            Sum in [num, num * size].

        Raises:
            InvalidArgumentError: if ``num`` is negative, ``size`` is below 1,
                or either is not an integer. No draws are consumed.
        """
        num = _require_int("num", num)
        size = _require_int("size", size)
        if num < 0:
            raise InvalidArgumentError(f"num must be >= 0, got {num}")
        if size < 1:
            raise InvalidArgumentError(f"size must be >= 1, got {size}")

        total = 0
        for _ in range(num):
            total += self._gen.uniform_int(1, size)
        logger.debug("Rolled %dd%d -> %d", num, size, total)
        return total

    def __repr__(self) -> str:
        return f"Dice(seed={self.seed}, algorithm={self.algorithm!r})"


__all__ = ["Dice"]
