from __future__ import annotations

import logging
import time

from PySide6 import QtCore, QtGui, QtWidgets

from ..core.config import SandboxConfig
from ..core.sim import KickIntegrator, TapInput
from .widgets import SpriteView, StatePanel

_LOG = logging.getLogger(__name__)

DEFAULT_VIEW_RANGE = (0.0, 400.0, 0.0, 700.0)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, config: SandboxConfig | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Impulse Sandbox")
        self.resize(900, 700)

        self._config = config if config is not None else SandboxConfig()

        self._sprite_view = SpriteView()
        self._sprite_view.set_view_range(DEFAULT_VIEW_RANGE)
        self._sprite_view.set_animation_interval(self._config.interval)
        self._sprite_view.tapped.connect(self._on_tapped)
        self.setCentralWidget(self._sprite_view)

        self._state_panel = StatePanel()
        self._state_panel.set_config(self._config)
        self._state_dock = QtWidgets.QDockWidget("State", self)
        self._state_dock.setWidget(self._state_panel)
        self._state_dock.setAllowedAreas(
            QtCore.Qt.LeftDockWidgetArea | QtCore.Qt.RightDockWidgetArea
        )
        self.addDockWidget(QtCore.Qt.RightDockWidgetArea, self._state_dock)

        # Ticks and taps both arrive on the GUI thread's event loop, so they never interleave.
        self._timer = QtCore.QTimer(self)
        self._timer.setTimerType(QtCore.Qt.PreciseTimer)
        self._timer.timeout.connect(self._on_tick)

        self._play_action = QtGui.QAction("Pause", self)
        self._play_action.setCheckable(True)
        self._play_action.setChecked(True)
        self._play_action.triggered.connect(self._toggle_play)

        self._step_action = QtGui.QAction("Step", self)
        self._step_action.triggered.connect(self._single_step)

        self._reset_action = QtGui.QAction("Reset", self)
        self._reset_action.triggered.connect(self._reset)

        toolbar = self.addToolBar("Simulation")
        toolbar.addAction(self._play_action)
        toolbar.addAction(self._step_action)
        toolbar.addAction(self._reset_action)

        self._integrator: KickIntegrator
        self._tap_input: TapInput
        self._reset()
        self._timer.start(self._config.interval_ms)

    def _reset(self) -> None:
        integrator = KickIntegrator(self._config)
        integrator.add_sink(self._sprite_view)
        self._integrator = integrator
        self._tap_input = TapInput(integrator)
        x, y = integrator.last_position
        self._sprite_view.place(x, y)
        self._state_panel.update_values(integrator.snapshot())

    def _toggle_play(self, checked: bool) -> None:
        if checked:
            self._play_action.setText("Pause")
            self._timer.start(self._config.interval_ms)
        else:
            self._play_action.setText("Play")
            self._timer.stop()

    def _single_step(self) -> None:
        if self._timer.isActive():
            return
        self._on_tick()

    def _on_tick(self) -> None:
        started = time.perf_counter()
        snapshot = self._integrator.on_tick()
        self._state_panel.update_values(snapshot)
        duration = time.perf_counter() - started
        if duration > self._config.interval:
            _LOG.warning(
                "tick %d overran: %.6fs spent, interval is %.6fs",
                snapshot.tick,
                duration,
                self._config.interval,
            )

    def _on_tapped(self, x: float, y: float) -> None:
        self._tap_input.tap(x, y)
        self._state_panel.update_values(self._integrator.snapshot())
