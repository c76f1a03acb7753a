from .clock import OVERRUN_POLICIES, FixedRateClock
from .integrator import KickIntegrator, PositionSink
from .recorder import TrajectoryRecorder
from .tap_input import TapInput

__all__ = [
    "FixedRateClock",
    "KickIntegrator",
    "OVERRUN_POLICIES",
    "PositionSink",
    "TapInput",
    "TrajectoryRecorder",
]
