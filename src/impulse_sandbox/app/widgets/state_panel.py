from __future__ import annotations

from PySide6 import QtWidgets

from ...core.config import SandboxConfig
from ...core.model import KinematicSnapshot


class StatePanel(QtWidgets.QGroupBox):
    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__("Kinematic State", parent)
        layout = QtWidgets.QFormLayout(self)

        self._interval = QtWidgets.QLabel("-")
        self._gravity = QtWidgets.QLabel("-")
        self._tick = QtWidgets.QLabel("-")
        self._position = QtWidgets.QLabel("-")
        self._velocity = QtWidgets.QLabel("-")
        self._kick = QtWidgets.QLabel("-")

        layout.addRow("Interval (s)", self._interval)
        layout.addRow("Gravity", self._gravity)
        layout.addRow("Tick", self._tick)
        layout.addRow("[x, y]", self._position)
        layout.addRow("[u, v]", self._velocity)
        layout.addRow("Kick", self._kick)

    def set_config(self, config: SandboxConfig) -> None:
        self._interval.setText(f"{config.interval:.3f}")
        self._gravity.setText(f"{config.gravity:.3f}")

    def update_values(self, snapshot: KinematicSnapshot) -> None:
        self._tick.setText(str(snapshot.tick))
        self._position.setText(self._format_pair(snapshot.x, snapshot.y))
        self._velocity.setText(self._format_pair(snapshot.u, snapshot.v))
        self._kick.setText(self._format_pair(snapshot.u_kick, snapshot.v_kick))

    @staticmethod
    def _format_pair(a: float, b: float) -> str:
        return f"[{a:.3f}, {b:.3f}]"
