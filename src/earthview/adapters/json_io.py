# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON configuration file adapter.

Reads a SceneConfig from JSON. Missing keys keep their defaults; unknown
keys are reported and ignored.

Example:
    {
        "n_lon": 180,
        "day_texture": "day.jpg",
        "tracked_state": {
            "r": [6778.137, 0.0, 0.0],
            "v": [0.0, 4.7608, 6.0113],
            "epoch": "2026-01-01T00:00:00Z"
        }
    }
"""
import json
import logging
import math
from dataclasses import fields, replace
from datetime import datetime, timezone
from typing import Any

from earthview.domain.orbital_mechanics import StateVector
from earthview.domain.scene_config import SceneConfig

logger = logging.getLogger(__name__)

_SCALAR_FIELDS = {f.name for f in fields(SceneConfig)} - {"tracked_state"}


def _normalize_epoch(epoch_str: str) -> str:
    """Normalize ISO epoch string: replace trailing 'Z' with '+00:00'."""
    if epoch_str.endswith("Z"):
        return epoch_str[:-1] + "+00:00"
    return epoch_str


def _as_utc(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (treat naive as UTC)."""
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def _parse_vector(value: Any, name: str) -> tuple[float, float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"'{name}' must be a list of 3 numbers, got {value!r}")
    try:
        return (float(value[0]), float(value[1]), float(value[2]))
    except (TypeError, ValueError):
        raise ValueError(f"'{name}' must be a list of 3 numbers, got {value!r}") from None


def parse_state_vector(data: dict[str, Any]) -> StateVector:
    """Build a StateVector from {"r": [...], "v": [...], "epoch": ISO8601}."""
    try:
        epoch = _as_utc(datetime.fromisoformat(_normalize_epoch(str(data["epoch"]))))
        return StateVector(
            r=_parse_vector(data["r"], "r"),
            v=_parse_vector(data["v"], "v"),
            epoch=epoch,
        )
    except KeyError as e:
        raise ValueError(f"tracked_state is missing key {e}") from None


_POSITIVE_FIELDS = ("n_lon", "n_lat", "ellipsoid_a", "ellipsoid_b", "trajectory_step_s")
_NON_NEGATIVE_FIELDS = ("trajectory_duration_s",)


def _coerce_scalar(key: str, value: Any, default: Any) -> Any:
    """Check a JSON value against the type of the field's default."""
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ValueError(f"'{key}' must be true or false, got {value!r}")
        return value
    if isinstance(default, int):
        integral = isinstance(value, int) or (isinstance(value, float) and value.is_integer())
        if isinstance(value, bool) or not integral:
            raise ValueError(f"'{key}' must be an integer, got {value!r}")
        return int(value)
    if isinstance(default, float):
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            raise ValueError(f"'{key}' must be a finite number, got {value!r}")
        return float(value)
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got {value!r}")
    return value


def config_from_dict(data: dict[str, Any]) -> SceneConfig:
    """
    Build a SceneConfig from a decoded JSON object.

    Raises:
        ValueError: If a value has the wrong type, a subdivision count or
            the trajectory step is not positive, or the trajectory
            duration is negative.
    """
    config = SceneConfig()
    updates: dict[str, Any] = {}

    for key, value in data.items():
        if key == "tracked_state":
            if not isinstance(value, dict):
                raise ValueError(f"'tracked_state' must be an object, got {value!r}")
            updates[key] = parse_state_vector(value)
        elif key in _SCALAR_FIELDS:
            updates[key] = _coerce_scalar(key, value, getattr(config, key))
        else:
            logger.warning("Ignoring unknown configuration key '%s'", key)

    config = replace(config, **updates)
    for name in _POSITIVE_FIELDS:
        if not getattr(config, name) > 0:
            raise ValueError(f"'{name}' must be positive, got {getattr(config, name)}")
    for name in _NON_NEGATIVE_FIELDS:
        if getattr(config, name) < 0:
            raise ValueError(f"'{name}' must not be negative, got {getattr(config, name)}")
    return config


class JsonConfigReader:
    """Reads scene configuration from JSON files."""

    def read_config(self, path: str) -> SceneConfig:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Configuration root must be an object, got {type(data).__name__}")
        config = config_from_dict(data)
        logger.info("Loaded configuration from %s", path)
        return config
