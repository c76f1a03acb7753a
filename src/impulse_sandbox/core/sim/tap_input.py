from __future__ import annotations

import logging
from typing import Tuple

from .integrator import KickIntegrator

_LOG = logging.getLogger(__name__)


class TapInput:
    """Turns a tap at a screen point into a kick toward that point.

    The kick is the offset from the integrator's last published position, so a
    tap far from the sprite kicks harder than one close to it.
    """

    def __init__(self, integrator: KickIntegrator) -> None:
        self._integrator = integrator

    def tap(self, px: float, py: float) -> Tuple[float, float]:
        x, y = self._integrator.last_position
        dx = float(px) - x
        dy = float(py) - y
        _LOG.debug("tap at (%.3f, %.3f), sprite at (%.3f, %.3f)", px, py, x, y)
        self._integrator.on_impulse(dx, dy)
        return dx, dy
