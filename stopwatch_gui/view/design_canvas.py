"""Design canvas with component overlay."""

from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from stopwatch_gui.config import ComponentConfig, GuiDesignConfig, Rect
from stopwatch_gui.registry import ComponentInstance


def row_layout(
    components: list[ComponentConfig],
    bounds: Rect,
    item_size: tuple[int, int],
    spacing: int,
) -> dict[str, Rect]:
    """Left-to-right placement for components without explicit positions."""
    positions: dict[str, Rect] = {}
    x = bounds.x
    y = bounds.y
    item_w, item_h = item_size
    for comp in components:
        if x + item_w > bounds.x + bounds.width and x != bounds.x:
            x = bounds.x
            y += item_h + spacing
        positions[comp.id] = Rect(x, y, item_w, item_h)
        x += item_w + spacing
    return positions


class DesignCanvas(QtWidgets.QGraphicsView):
    def __init__(self, config: GuiDesignConfig, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)
        self._config = config
        self._scene = QtWidgets.QGraphicsScene(self)
        self.setScene(self._scene)
        self.setRenderHints(QtGui.QPainter.Antialiasing)
        self._components: list[ComponentInstance] = []

        canvas = config.canvas
        self._scene.setSceneRect(QtCore.QRectF(0, 0, canvas.width, canvas.height))
        self.setBackgroundBrush(QtGui.QBrush(QtGui.QColor(canvas.background)))

    def set_components(self, components: list[ComponentInstance]) -> None:
        self._components = components
        for comp in components:
            self._scene.addItem(comp.view)

        self._apply_layout()

    def _apply_layout(self) -> None:
        missing = []
        for comp in self._components:
            if comp.config.position is not None:
                comp.view.set_rect(comp.config.position)
            else:
                missing.append(comp)

        if not missing:
            return

        scene_rect = self._scene.sceneRect()
        area = Rect(
            x=scene_rect.width() * 0.05,
            y=scene_rect.height() * 0.75,
            width=scene_rect.width() * 0.9,
            height=scene_rect.height() * 0.2,
        )
        first = missing[0].view.boundingRect()
        positions = row_layout(
            [comp.config for comp in missing],
            bounds=area,
            item_size=(int(first.width()), int(first.height())),
            spacing=self._config.spacing,
        )
        for comp in missing:
            comp.view.set_rect(positions[comp.config.id])

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        if self._config.canvas.scale_mode == "fit":
            self.fitInView(self._scene.sceneRect(), QtCore.Qt.KeepAspectRatio)
        elif self._config.canvas.scale_mode == "stretch":
            self.fitInView(self._scene.sceneRect(), QtCore.Qt.IgnoreAspectRatio)
