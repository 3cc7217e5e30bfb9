class DiceError(Exception):
    """Base exception for the dice_roller package."""


class InvalidArgumentError(DiceError, ValueError):
    """Raised when a roll, seed or generator receives an invalid argument."""


class ConfigError(DiceError):
    """Raised when settings cannot be read or fail validation."""
