from __future__ import annotations

import numpy as np
import pyqtgraph as pg
from PySide6 import QtCore, QtWidgets


class SpriteView(QtWidgets.QWidget):
    """Draws the sprite and reports taps in scene coordinates.

    Scene coordinates follow screen convention: ``y`` grows downward, so gravity
    pulls the sprite toward the bottom of the view.
    """

    tapped = QtCore.Signal(float, float)

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self._plot = pg.PlotWidget(background="w")
        self._plot.setAspectLocked(True)
        self._plot.invertY(True)
        self._plot.setMouseEnabled(x=False, y=False)
        self._plot.hideButtons()
        self._plot.showGrid(x=True, y=True, alpha=0.2)
        self._plot.setLabel("bottom", "x (px)")
        self._plot.setLabel("left", "y (px)")
        self._sprite = pg.ScatterPlotItem(
            size=24,
            brush=pg.mkBrush("#1976d2"),
            pen=pg.mkPen("#0d47a1", width=2.0),
        )
        self._tap_marker = pg.ScatterPlotItem(symbol="x", size=12, pen=pg.mkPen("#d32f2f", width=2))
        self._plot.addItem(self._sprite)
        self._plot.addItem(self._tap_marker)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._plot)

        self._center = QtCore.QPointF(0.0, 0.0)
        self._animation = QtCore.QVariantAnimation(self)
        self._animation.valueChanged.connect(self._on_animation_value)
        self._animation_ms = 100

        self._plot.viewport().installEventFilter(self)

    def set_view_range(self, view_range: tuple[float, float, float, float]) -> None:
        x_min, x_max, y_min, y_max = view_range
        self._plot.setXRange(x_min, x_max, padding=0.0)
        self._plot.setYRange(y_min, y_max, padding=0.0)

    def set_animation_interval(self, seconds: float) -> None:
        self._animation_ms = max(int(seconds * 1000), 1)

    def place(self, x: float, y: float) -> None:
        self._animation.stop()
        self._set_center(QtCore.QPointF(x, y))
        self._tap_marker.setData(pos=np.empty((0, 2), dtype=float))

    def on_position_update(self, x: float, y: float) -> None:
        self._animation.stop()
        self._animation.setDuration(self._animation_ms)
        self._animation.setStartValue(QtCore.QPointF(self._center))
        self._animation.setEndValue(QtCore.QPointF(x, y))
        self._animation.start()

    def eventFilter(self, obj: QtCore.QObject, event: QtCore.QEvent) -> bool:
        if (
            obj is self._plot.viewport()
            and event.type() == QtCore.QEvent.MouseButtonPress
            and event.button() == QtCore.Qt.LeftButton
        ):
            view_pos = self._view_pos_from_event(event)
            self._tap_marker.setData(pos=np.array([[view_pos.x(), view_pos.y()]], dtype=float))
            self.tapped.emit(float(view_pos.x()), float(view_pos.y()))
            return True
        return super().eventFilter(obj, event)

    def _on_animation_value(self, value: object) -> None:
        if isinstance(value, QtCore.QPointF):
            self._set_center(value)

    def _set_center(self, center: QtCore.QPointF) -> None:
        self._center = QtCore.QPointF(center)
        self._sprite.setData(pos=np.array([[center.x(), center.y()]], dtype=float))

    def _view_pos_from_event(self, event: QtCore.QEvent) -> QtCore.QPointF:
        scene_pos = self._plot.mapToScene(event.pos())
        return self._plot.getViewBox().mapSceneToView(scene_pos)
