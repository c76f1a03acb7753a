from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from ..config import CONFIG_SCHEMA_VERSION, SandboxConfig
from ..errors import ConfigError


def config_to_dict(config: SandboxConfig) -> Dict[str, Any]:
    return {
        "schema_version": config.schema_version,
        "interval": config.interval,
        "gravity": config.gravity,
        "initial_position": [config.x0, config.y0],
        "initial_velocity": [config.u0, config.v0],
    }


def _pair(payload: Dict[str, Any], key: str, default: tuple[float, float]) -> tuple[float, float]:
    values = payload.get(key, list(default))
    if not isinstance(values, (list, tuple)) or len(values) != 2:
        raise ConfigError(f"{key} must be a list of two numbers")
    return values[0], values[1]


def config_from_dict(payload: Dict[str, Any]) -> SandboxConfig:
    if not isinstance(payload, dict):
        raise ConfigError("Config payload must be a JSON object")
    version = payload.get("schema_version", CONFIG_SCHEMA_VERSION)
    if not isinstance(version, int) or isinstance(version, bool):
        raise ConfigError(f"schema_version must be an integer, got {version!r}")
    if version != CONFIG_SCHEMA_VERSION:
        raise ConfigError(f"Unsupported config schema version: {version}")
    defaults = SandboxConfig()
    x0, y0 = _pair(payload, "initial_position", (defaults.x0, defaults.y0))
    u0, v0 = _pair(payload, "initial_velocity", (defaults.u0, defaults.v0))
    return SandboxConfig(
        interval=payload.get("interval", defaults.interval),
        gravity=payload.get("gravity", defaults.gravity),
        x0=x0,
        y0=y0,
        u0=u0,
        v0=v0,
    )


def serialize_config(config: SandboxConfig) -> str:
    return json.dumps(config_to_dict(config), indent=2)


def deserialize_config(payload: str) -> SandboxConfig:
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config is not valid JSON: {exc}") from exc
    return config_from_dict(data)


def load_config(path: Path) -> SandboxConfig:
    try:
        payload = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid UTF-8") from exc
    return deserialize_config(payload)


def save_config(config: SandboxConfig, path: Path) -> Path:
    path.write_text(serialize_config(config), encoding="utf-8")
    return path
