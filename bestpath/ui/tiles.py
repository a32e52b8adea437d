"""Grid tile graphics items for path visualization."""

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor, QPen
from PySide6.QtWidgets import QGraphicsRectItem

from ..domain.types import GOAL_MARKER, PASSABLE, PATH_MARKER, START_MARKER


def tile_kind(marker: str) -> str:
    """Classify a cell marker for coloring."""
    if marker == PASSABLE:
        return "empty"
    if marker == START_MARKER:
        return "start"
    if marker == GOAL_MARKER:
        return "target"
    if marker == PATH_MARKER:
        return "path"
    return "wall"


class GridTile(QGraphicsRectItem):
    """Graphics item representing a single grid cell."""

    # Color scheme for different cell kinds
    COLORS = {
        "empty": QColor(240, 240, 240),      # Light gray
        "wall": QColor(64, 64, 64),          # Dark gray
        "start": QColor(0, 255, 0),          # Green
        "target": QColor(255, 215, 0),       # Gold
        "path": QColor(255, 255, 0),         # Yellow
    }

    def __init__(self, x: int, y: int, size: float, marker: str):
        super().__init__(0, 0, size, size)
        self.grid_x = x
        self.grid_y = y
        self.size = size
        self.marker = marker
        self.kind = tile_kind(marker)

        self.setPos(x * size, y * size)
        self.setAcceptHoverEvents(True)
        self.update_appearance()

    def update_appearance(self):
        """Update the tile appearance based on its cell kind."""
        self.setBrush(QBrush(self.COLORS[self.kind]))

        if self.kind == "wall":
            self.setPen(QPen(Qt.black, 1))
        else:
            self.setPen(QPen(Qt.gray, 0.5))

    def hoverEnterEvent(self, event):
        if self.kind != "wall":
            highlight_color = self.brush().color().lighter(120)
            self.setBrush(QBrush(highlight_color))
        super().hoverEnterEvent(event)

    def hoverLeaveEvent(self, event):
        self.update_appearance()
        super().hoverLeaveEvent(event)
