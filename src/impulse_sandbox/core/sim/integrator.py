from __future__ import annotations

import logging
import threading
from typing import List, Protocol, Tuple

import numpy as np

from ..config import SandboxConfig
from ..model import ImpulseAccumulator, KinematicSnapshot, KinematicState, snapshot_of

_LOG = logging.getLogger(__name__)


class PositionSink(Protocol):
    def on_position_update(self, x: float, y: float) -> None:
        ...


class KickIntegrator:
    """Tick-driven semi-implicit Euler integrator with additive velocity kicks.

    Each tick, the base velocity picks up gravity on the vertical axis, the
    accumulated kicks are added on top, and the position advances with the
    velocity computed in that same tick. Kicks persist for the whole session.

    The horizontal base velocity keeps its initial value forever. Only kicks
    ever change ``u``.

    ``on_tick`` and ``on_impulse`` share one re-entrant lock, so the clock and
    the tap input may live on different threads. Sinks are notified while the
    lock is held and may call back into ``snapshot``.

    The state advances before sinks are notified. A sink that raises aborts
    the rest of that tick's emission and the exception propagates out of
    ``on_tick``; the integrator has already counted the tick and should be
    treated as faulted.
    """

    def __init__(self, config: SandboxConfig | None = None) -> None:
        self._config = config if config is not None else SandboxConfig()
        self._lock = threading.RLock()
        self._sinks: List[PositionSink] = []
        self._tick = 0
        self._base_velocity = np.array([self._config.u0, self._config.v0], dtype=float)
        self._impulses = ImpulseAccumulator()
        self._state = KinematicState(
            position=np.array([self._config.x0, self._config.y0], dtype=float),
            velocity=np.array(self._base_velocity, dtype=float),
        )

    @property
    def config(self) -> SandboxConfig:
        return self._config

    @property
    def interval(self) -> float:
        return self._config.interval

    @property
    def gravity(self) -> float:
        return self._config.gravity

    @property
    def tick_count(self) -> int:
        with self._lock:
            return self._tick

    @property
    def last_position(self) -> Tuple[float, float]:
        with self._lock:
            return self._state.x, self._state.y

    @property
    def base_velocity(self) -> Tuple[float, float]:
        with self._lock:
            return float(self._base_velocity[0]), float(self._base_velocity[1])

    def add_sink(self, sink: PositionSink) -> None:
        with self._lock:
            self._sinks.append(sink)

    def remove_sink(self, sink: PositionSink) -> None:
        with self._lock:
            try:
                self._sinks.remove(sink)
            except ValueError:
                pass

    def snapshot(self) -> KinematicSnapshot:
        with self._lock:
            return snapshot_of(self._tick, self._state, self._impulses)

    def on_tick(self) -> KinematicSnapshot:
        interval = self._config.interval
        with self._lock:
            # u_base is carried over unchanged; gravity acts on v only.
            self._base_velocity[1] += self._config.gravity * interval
            self._state.velocity = self._base_velocity + self._impulses.kick
            self._state.position = self._state.position + self._state.velocity * interval
            self._tick += 1
            x, y = self._state.x, self._state.y
            _LOG.debug("tick %d: x=%.6f y=%.6f u=%.6f v=%.6f", self._tick, x, y, self._state.u, self._state.v)
            for sink in list(self._sinks):
                sink.on_position_update(x, y)
            return snapshot_of(self._tick, self._state, self._impulses)

    def on_impulse(self, dx: float, dy: float) -> None:
        with self._lock:
            self._impulses.add(dx, dy)
            _LOG.debug(
                "impulse (%.6f, %.6f): kick now (%.6f, %.6f)",
                dx,
                dy,
                self._impulses.u_kick,
                self._impulses.v_kick,
            )
