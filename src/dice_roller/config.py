from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from platformdirs import user_config_dir

from .exceptions import ConfigError
from .generators import ALGORITHMS, DEFAULT_ALGORITHM

logger = logging.getLogger(__name__)

APP_NAME = "dice-roller"
SETTINGS_FILENAME = "settings.yaml"

ENV_SEED = "DICE_SEED"
ENV_ALGORITHM = "DICE_ALGORITHM"
ENV_SETTINGS_FILE = "DICE_SETTINGS_FILE"


def _as_seed(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigError(f"seed must be an integer, got {value!r}")
    try:
        return int(str(value).strip())
    except ValueError:
        raise ConfigError(f"seed must be an integer, got {value!r}") from None


@dataclass
class DiceSettings:
    """Settings used to build a :class:`~dice_roller.dice.Dice`.

    Sources, lowest to highest precedence:
    - defaults (time-derived seed, ``minstd`` generator)
    - a YAML file (env DICE_SETTINGS_FILE, else settings.yaml in the user config dir)
    - environment variables (DICE_SEED, DICE_ALGORITHM)
    """

    seed: Optional[int] = None
    algorithm: str = DEFAULT_ALGORITHM

    def validate(self) -> None:
        if self.seed is not None and self.seed < 0:
            raise ConfigError(f"seed must be non-negative, got {self.seed}")
        if self.algorithm not in ALGORITHMS:
            raise ConfigError(
                f"unknown algorithm {self.algorithm!r}; expected one of {sorted(ALGORITHMS)}"
            )

    def as_dict(self) -> Dict[str, Any]:
        return {"seed": self.seed, "algorithm": self.algorithm}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DiceSettings":
        allowed = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - allowed)
        if unknown:
            logger.warning("Ignoring unknown settings keys: %s", ", ".join(unknown))
        obj = cls(
            seed=_as_seed(data.get("seed")),
            algorithm=str(data.get("algorithm", DEFAULT_ALGORITHM)).strip().lower(),
        )
        obj.validate()
        return obj

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        env = os.environ if env is None else env
        out: Dict[str, Any] = {}
        if env.get(ENV_SEED, "") != "":
            out["seed"] = _as_seed(env[ENV_SEED])
        if env.get(ENV_ALGORITHM, "") != "":
            out["algorithm"] = env[ENV_ALGORITHM]
        return out

    @classmethod
    def from_yaml_file(cls, path: Path) -> Dict[str, Any]:
        if not path.exists():
            logger.debug("Settings file not found: %s", path)
            return {}
        with path.open("r", encoding="utf-8") as f:
            try:
                doc = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ConfigError(f"Failed to parse settings file {path}: {exc}") from exc
        if doc is None:
            return {}
        if not isinstance(doc, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping, got {type(doc).__name__}")
        logger.info("Loaded settings from %s", path)
        return dict(doc)

    @classmethod
    def discover_config_path(cls, env: Optional[Mapping[str, str]] = None) -> Path:
        env = os.environ if env is None else env
        env_path = env.get(ENV_SETTINGS_FILE)
        if env_path:
            return Path(env_path).expanduser().resolve()
        return Path(user_config_dir(appname=APP_NAME)) / SETTINGS_FILENAME

    @classmethod
    def from_sources(
        cls,
        *,
        env: Optional[Mapping[str, str]] = None,
        file_path: Optional[Path | str] = None,
    ) -> "DiceSettings":
        if file_path is not None:
            chosen_path = Path(file_path).expanduser().resolve()
        else:
            chosen_path = cls.discover_config_path(env)
        data: Dict[str, Any] = {}
        data.update(cls.from_yaml_file(chosen_path))
        data.update(cls.from_env(env))
        return cls.from_dict(data)


def load_settings(
    *,
    env: Optional[Mapping[str, str]] = None,
    file_path: Optional[Path | str] = None,
) -> DiceSettings:
    return DiceSettings.from_sources(env=env, file_path=file_path)


__all__ = [
    "APP_NAME",
    "DiceSettings",
    "ENV_ALGORITHM",
    "ENV_SEED",
    "ENV_SETTINGS_FILE",
    "load_settings",
]
