"""
dice_roller package root.

A seeded dice roller: construct :class:`Dice` with or without a seed and call
``roll(num, size)`` to get the sum of ``num`` dice with ``size`` faces.
"""

from .dice import Dice
from .exceptions import ConfigError, DiceError, InvalidArgumentError
from .seeding import FixedSeedProvider, TimeSeedProvider

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Dice",
    "DiceError",
    "FixedSeedProvider",
    "InvalidArgumentError",
    "TimeSeedProvider",
]
