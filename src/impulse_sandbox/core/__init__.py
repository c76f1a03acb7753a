from .config import SandboxConfig
from .errors import ClockFault, ConfigError, ImpulseSandboxError, TickOverrunError
from .model import ImpulseAccumulator, KinematicSnapshot, KinematicState, Vector
from .sim import FixedRateClock, KickIntegrator, PositionSink, TapInput, TrajectoryRecorder

__all__ = [
    "SandboxConfig",
    "ClockFault",
    "ConfigError",
    "ImpulseSandboxError",
    "TickOverrunError",
    "ImpulseAccumulator",
    "KinematicSnapshot",
    "KinematicState",
    "Vector",
    "FixedRateClock",
    "KickIntegrator",
    "PositionSink",
    "TapInput",
    "TrajectoryRecorder",
]
