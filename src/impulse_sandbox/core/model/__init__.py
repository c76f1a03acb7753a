from .state import (
    ImpulseAccumulator,
    KinematicSnapshot,
    KinematicState,
    Vector,
    snapshot_of,
)

__all__ = [
    "ImpulseAccumulator",
    "KinematicSnapshot",
    "KinematicState",
    "Vector",
    "snapshot_of",
]
