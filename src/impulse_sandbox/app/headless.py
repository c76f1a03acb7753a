from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

import numpy as np

from ..core.config import SandboxConfig
from ..core.errors import ConfigError
from ..core.model import KinematicSnapshot
from ..core.sim import FixedRateClock, KickIntegrator, TapInput, TrajectoryRecorder

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScriptedTap:
    tick: int
    x: float
    y: float


@dataclass
class HeadlessResult:
    snapshots: List[KinematicSnapshot] = field(default_factory=list)
    trajectory: np.ndarray = field(default_factory=lambda: np.zeros((0, 2), dtype=float))
    overruns: int = 0

    @property
    def final(self) -> KinematicSnapshot | None:
        return self.snapshots[-1] if self.snapshots else None


def parse_tap(text: str) -> ScriptedTap:
    """Parse ``TICK:X,Y``; the tap lands just before tick ``TICK`` fires."""
    try:
        tick_part, point_part = text.split(":", 1)
        x_part, y_part = point_part.split(",", 1)
        tap = ScriptedTap(tick=int(tick_part), x=float(x_part), y=float(y_part))
    except ValueError as exc:
        raise ConfigError(f"Tap must look like TICK:X,Y, got {text!r}") from exc
    if tap.tick < 1:
        raise ConfigError("Tap tick must be at least 1")
    return tap


def _group_taps(taps: Iterable[ScriptedTap]) -> Dict[int, List[ScriptedTap]]:
    grouped: Dict[int, List[ScriptedTap]] = {}
    for tap in taps:
        grouped.setdefault(tap.tick, []).append(tap)
    return grouped


def run_headless(
    config: SandboxConfig,
    ticks: int,
    taps: Sequence[ScriptedTap] = (),
    *,
    realtime: bool = False,
    overrun_policy: str = "log",
) -> HeadlessResult:
    integrator = KickIntegrator(config)
    recorder = TrajectoryRecorder()
    integrator.add_sink(recorder)
    tap_input = TapInput(integrator)
    pending = _group_taps(taps)
    result = HeadlessResult()

    def _tick() -> None:
        upcoming = integrator.tick_count + 1
        for tap in pending.pop(upcoming, []):
            tap_input.tap(tap.x, tap.y)
        result.snapshots.append(integrator.on_tick())

    clock_kwargs: Dict[str, object] = {"overrun_policy": overrun_policy}
    if not realtime:
        clock_kwargs["sleep_fn"] = lambda _delay: None
    clock = FixedRateClock(config.interval, _tick, **clock_kwargs)
    clock.run(ticks)
    if pending:
        _LOG.warning("%d tap(s) scheduled after the last tick were not applied", sum(map(len, pending.values())))
    result.trajectory = recorder.as_array()
    result.overruns = clock.overruns
    return result


def format_rows(snapshots: Iterable[KinematicSnapshot]) -> List[str]:
    rows = [f"{'tick':>6} {'x':>12} {'y':>12} {'u':>12} {'v':>12}"]
    for snap in snapshots:
        rows.append(f"{snap.tick:>6d} {snap.x:>12.4f} {snap.y:>12.4f} {snap.u:>12.4f} {snap.v:>12.4f}")
    return rows
