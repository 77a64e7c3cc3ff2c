"""Clock wheel configuration with YAML overrides and fallback defaults."""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from clock_wheel.models.data_types import FeedbackMode
from clock_wheel.models.ring_config import ConfigError, RingConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "ring_config.yaml"


def _coerce(name: str, value: Any) -> Any:
    """Convert a raw YAML value to the type of the ``RingConfig`` field."""
    try:
        if name == "feedback_mode":
            # YAML reads a bare `off` as False
            if value is False:
                return FeedbackMode.OFF
            return FeedbackMode(value)
        if name == "minutes_per_turn":
            if isinstance(value, float) and not value.is_integer():
                raise ValueError("not a whole number")
            return int(value)
        if name.startswith("caption_"):
            return str(value)
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid value for {name}: {value!r}") from exc


def config_from_mapping(data: dict, base: Optional[RingConfig] = None) -> RingConfig:
    """Overlay a mapping of settings on ``base`` (or the defaults)."""
    base = base or RingConfig()
    known = {f.name for f in fields(RingConfig)}
    overrides = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown clock wheel setting %r", key)
            continue
        overrides[key] = _coerce(key, value)
    return replace(base, **overrides)


def load_ring_config(yaml_path: Optional[str | Path] = None) -> RingConfig:
    """Load a ``RingConfig`` from YAML.

    A missing file falls back to the defaults. Settings live under a
    top-level ``clock_wheel`` key; a flat mapping is accepted too.

    Raises:
        ConfigError: If the file is not valid YAML or holds invalid values
    """
    path = Path(yaml_path) if yaml_path is not None else DEFAULT_CONFIG_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return RingConfig()
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc

    if not isinstance(cfg, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(cfg).__name__}")

    section = cfg.get("clock_wheel", cfg)
    if not isinstance(section, dict):
        raise ConfigError(f"Expected 'clock_wheel' to be a mapping in {path}")
    return config_from_mapping(section)
