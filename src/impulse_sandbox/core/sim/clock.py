from __future__ import annotations

import logging
import time
from typing import Callable

from ..errors import ClockFault, TickOverrunError

_LOG = logging.getLogger(__name__)

OVERRUN_POLICIES = ("log", "raise")


class FixedRateClock:
    """Headless fixed-period tick source.

    Ticks are never skipped or coalesced. When the handler falls behind, the
    next tick fires as soon as the previous one returns and the schedule stays
    anchored to the start time. A handler that takes longer than ``interval``
    is an overrun: logged and tolerated under the ``"log"`` policy, raised as
    :class:`TickOverrunError` under ``"raise"``.
    """

    def __init__(
        self,
        interval: float,
        on_tick: Callable[[], object],
        *,
        time_fn: Callable[[], float] = time.monotonic,
        sleep_fn: Callable[[float], None] = time.sleep,
        overrun_policy: str = "log",
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        if overrun_policy not in OVERRUN_POLICIES:
            raise ValueError(f"Unknown overrun policy: {overrun_policy}")
        self._interval = float(interval)
        self._on_tick = on_tick
        self._time_fn = time_fn
        self._sleep_fn = sleep_fn
        self._overrun_policy = overrun_policy
        self._running = False
        self._ticks = 0
        self._overruns = 0

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def overruns(self) -> int:
        return self._overruns

    @property
    def running(self) -> bool:
        return self._running

    def stop(self) -> None:
        self._running = False

    def run(self, ticks: int | None = None) -> int:
        """Fire ``ticks`` ticks (forever when ``None``) and return how many fired."""
        if ticks is not None and ticks < 0:
            raise ValueError("ticks must be non-negative")
        self._running = True
        fired = 0
        deadline = self._time_fn() + self._interval
        try:
            while self._running and (ticks is None or fired < ticks):
                delay = deadline - self._time_fn()
                if delay > 0:
                    self._sleep_fn(delay)
                self._fire()
                fired += 1
                deadline += self._interval
        finally:
            self._running = False
        return fired

    def _fire(self) -> None:
        tick = self._ticks + 1
        started = self._time_fn()
        try:
            self._on_tick()
        except Exception as exc:
            raise ClockFault(tick) from exc
        self._ticks = tick
        duration = self._time_fn() - started
        if duration > self._interval:
            self._overruns += 1
            if self._overrun_policy == "raise":
                raise TickOverrunError(tick, duration, self._interval)
            _LOG.warning(
                "tick %d overran: %.6fs spent, interval is %.6fs", tick, duration, self._interval
            )
