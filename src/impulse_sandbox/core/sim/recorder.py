from __future__ import annotations

from typing import List

import numpy as np


class TrajectoryRecorder:
    """Position sink that keeps every published point."""

    def __init__(self) -> None:
        self._points: List[tuple[float, float]] = []

    def on_position_update(self, x: float, y: float) -> None:
        self._points.append((float(x), float(y)))

    def __len__(self) -> int:
        return len(self._points)

    def clear(self) -> None:
        self._points.clear()

    def as_array(self) -> np.ndarray:
        if not self._points:
            return np.zeros((0, 2), dtype=float)
        return np.asarray(self._points, dtype=float)

    def displacement(self) -> np.ndarray:
        points = self.as_array()
        if points.shape[0] < 2:
            return np.zeros(2, dtype=float)
        return points[-1] - points[0]
