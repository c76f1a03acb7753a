from __future__ import annotations

import math
from dataclasses import dataclass, field

from .errors import ConfigError

CONFIG_SCHEMA_VERSION = 1

DEFAULT_INTERVAL = 0.1
DEFAULT_GRAVITY = 50.0


@dataclass(frozen=True)
class SandboxConfig:
    """Startup constants. They stay fixed for the lifetime of an integrator."""

    interval: float = DEFAULT_INTERVAL
    gravity: float = DEFAULT_GRAVITY
    x0: float = 100.0
    y0: float = 200.0
    u0: float = 0.0
    v0: float = 0.0
    schema_version: int = field(default=CONFIG_SCHEMA_VERSION, init=False)

    def __post_init__(self) -> None:
        for name in ("interval", "gravity", "x0", "y0", "u0", "v0"):
            value = getattr(self, name)
            try:
                value = float(value)
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"{name} must be a real number, got {value!r}") from exc
            if not math.isfinite(value):
                raise ConfigError(f"{name} must be finite")
            object.__setattr__(self, name, value)
        if self.interval <= 0:
            raise ConfigError("interval must be positive")

    @property
    def interval_ms(self) -> int:
        return max(int(round(self.interval * 1000)), 1)
