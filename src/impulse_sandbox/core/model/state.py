from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

import numpy as np

Vector = np.ndarray


def _to_vector(values: Iterable[float], *, length: int = 2) -> Vector:
    arr = np.asarray(list(values), dtype=float)
    if arr.ndim != 1:
        raise ValueError("Vector must be 1D")
    if arr.size != length:
        raise ValueError(f"Vector must have length {length}")
    return arr


@dataclass
class KinematicState:
    """Sprite position ``[x, y]`` in pixels and velocity ``[u, v]`` in pixels/second."""

    position: Vector = field(default_factory=lambda: np.array([100.0, 200.0], dtype=float))
    velocity: Vector = field(default_factory=lambda: np.zeros(2, dtype=float))

    def __post_init__(self) -> None:
        self.position = _to_vector(self.position)
        self.velocity = _to_vector(self.velocity)

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    @property
    def u(self) -> float:
        return float(self.velocity[0])

    @property
    def v(self) -> float:
        return float(self.velocity[1])


@dataclass
class ImpulseAccumulator:
    """Velocity offsets injected by taps. They never decay and are never reset by a tick."""

    kick: Vector = field(default_factory=lambda: np.zeros(2, dtype=float))

    def __post_init__(self) -> None:
        self.kick = _to_vector(self.kick)

    def add(self, dx: float, dy: float) -> None:
        self.kick = self.kick + np.array([dx, dy], dtype=float)

    @property
    def u_kick(self) -> float:
        return float(self.kick[0])

    @property
    def v_kick(self) -> float:
        return float(self.kick[1])


@dataclass(frozen=True)
class KinematicSnapshot:
    tick: int
    x: float
    y: float
    u: float
    v: float
    u_kick: float
    v_kick: float

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    @property
    def velocity(self) -> Tuple[float, float]:
        return self.u, self.v


def snapshot_of(tick: int, state: KinematicState, impulses: ImpulseAccumulator) -> KinematicSnapshot:
    return KinematicSnapshot(
        tick=tick,
        x=state.x,
        y=state.y,
        u=state.u,
        v=state.v,
        u_kick=impulses.u_kick,
        v_kick=impulses.v_kick,
    )
