from __future__ import annotations


class ImpulseSandboxError(Exception):
    """Base class for sandbox errors."""


class ConfigError(ImpulseSandboxError, ValueError):
    pass


class TickOverrunError(ImpulseSandboxError):
    def __init__(self, tick: int, duration: float, interval: float) -> None:
        super().__init__(f"Tick {tick} took {duration:.6f}s, longer than the {interval:.6f}s interval")
        self.tick = tick
        self.duration = duration
        self.interval = interval


class ClockFault(ImpulseSandboxError, RuntimeError):
    def __init__(self, tick: int) -> None:
        super().__init__(f"Tick handler failed on tick {tick}")
        self.tick = tick
