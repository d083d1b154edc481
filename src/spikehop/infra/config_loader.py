"""
Loads a `GameConfig` from YAML.

Every section and key is optional; anything missing keeps its default.

    arena:     {width: 800, height: 400}
    physics:   {gravity: 0.2, jump_force: -7}
    player:    {size: 40}
    obstacles: {size: 40, speed: 3, spike_group_probability: 0.3}
    timing:    {tick_ms: 10, spawn_interval_ms: 2000}
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from spikehop.domain.config import GameConfig
from spikehop.infra.exceptions import ConfigError

logger = logging.getLogger(__name__)


# section -> yaml key -> (GameConfig field, type)
_SCHEMA: dict[str, dict[str, tuple[str, type]]] = {
    "arena": {
        "width": ("width", int),
        "height": ("height", int),
    },
    "physics": {
        "gravity": ("gravity", float),
        "jump_force": ("jump_force", float),
    },
    "player": {
        "size": ("player_size", float),
    },
    "obstacles": {
        "size": ("obstacle_size", float),
        "speed": ("obstacle_speed", float),
        "spike_group_probability": ("spike_group_probability", float),
    },
    "timing": {
        "tick_ms": ("tick_ms", int),
        "spawn_interval_ms": ("spawn_interval_ms", int),
    },
}


def _coerce(value: Any, kind: type, where: str) -> Any:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool):
        raise ConfigError(f"{where} must be a number, got {value!r}.")
    if kind is int:
        if not isinstance(value, int):
            raise ConfigError(f"{where} must be an integer, got {value!r}.")
        return value
    if not isinstance(value, (int, float)):
        raise ConfigError(f"{where} must be a number, got {value!r}.")
    return float(value)


def parse_config(raw: Any) -> GameConfig:
    if raw is None:
        return GameConfig()
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping.")

    overrides: dict[str, Any] = {}
    for section, body in raw.items():
        if section not in _SCHEMA:
            raise ConfigError(f"Unknown config section: {section!r}.")
        if body is None:
            continue
        if not isinstance(body, dict):
            raise ConfigError(f"Section {section!r} must be a mapping.")

        fields = _SCHEMA[section]
        for key, value in body.items():
            if key not in fields:
                raise ConfigError(f"Unknown key {section}.{key}.")
            name, kind = fields[key]
            overrides[name] = _coerce(value, kind, f"{section}.{key}")

    config = replace(GameConfig(), **overrides)
    validate_config(config)
    return config


def validate_config(config: GameConfig) -> None:
    if config.width <= 0 or config.height <= 0:
        raise ConfigError("arena width/height must be > 0.")
    if config.player_size <= 0 or config.obstacle_size <= 0:
        raise ConfigError("player and obstacle size must be > 0.")
    if config.player_size > config.height or config.player_size > config.width:
        raise ConfigError("player does not fit in the arena.")
    if config.obstacle_size > config.height or config.obstacle_size > config.width:
        raise ConfigError("obstacles do not fit in the arena.")
    if config.gravity <= 0:
        raise ConfigError("physics.gravity must be > 0.")
    if config.jump_force >= 0:
        raise ConfigError("physics.jump_force must be negative (up is -y).")
    if config.obstacle_speed <= 0:
        raise ConfigError("obstacles.speed must be > 0.")
    if not 0.0 <= config.spike_group_probability <= 1.0:
        raise ConfigError("obstacles.spike_group_probability must be within [0, 1].")
    if config.tick_ms <= 0 or config.spawn_interval_ms <= 0:
        raise ConfigError("timing intervals must be > 0.")


def load_config(path: Path | None = None) -> GameConfig:
    """
    Returns the built-in defaults when `path` is None.

    Raises ConfigError for unreadable files, malformed YAML and invalid values.
    """
    if path is None:
        return GameConfig()

    try:
        text = path.read_text(encoding="utf-8")
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config from {path}: {e}") from e

    config = parse_config(raw)
    logger.info("Loaded config from %s", path)
    return config
