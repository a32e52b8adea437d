"""Grid view for displaying an annotated path map."""

import sys
from typing import Dict, Sequence, Tuple

from PySide6.QtCore import Qt
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QApplication, QGraphicsScene, QGraphicsView

from ..domain.types import Grid
from .tiles import GridTile


class GridView(QGraphicsView):
    """Graphics view with one tile per grid cell."""

    def __init__(self, grid: Sequence[Sequence[str]], tile_size: float = 25.0):
        super().__init__()

        self.scene = QGraphicsScene()
        self.setScene(self.scene)
        self.tiles: Dict[Tuple[int, int], GridTile] = {}
        self.tile_size = tile_size

        self.setRenderHint(QPainter.Antialiasing)
        self.set_grid(grid)

    def set_grid(self, grid: Sequence[Sequence[str]]):
        """Rebuild the tiles from a grid or annotated path map."""
        rows = grid.rows if isinstance(grid, Grid) else grid

        self.scene.clear()
        self.tiles.clear()

        width = max((len(row) for row in rows), default=0)
        self.scene.setSceneRect(0, 0, width * self.tile_size, len(rows) * self.tile_size)

        for y, row in enumerate(rows):
            for x, marker in enumerate(row):
                tile = GridTile(x, y, self.tile_size, marker)
                self.scene.addItem(tile)
                self.tiles[(x, y)] = tile

    def wheelEvent(self, event):
        """Handle mouse wheel for zooming."""
        zoom_factor = 1.15
        if event.angleDelta().y() > 0:
            self.scale(zoom_factor, zoom_factor)
        else:
            self.scale(1 / zoom_factor, 1 / zoom_factor)

    def fit_in_view(self):
        """Fit the entire grid in the view."""
        if self.scene.items():
            self.fitInView(self.scene.itemsBoundingRect(), Qt.KeepAspectRatio)

    def reset_zoom(self):
        self.resetTransform()


def show_grid(grid: Sequence[Sequence[str]], title: str = "bestpath") -> int:
    """Show a grid in a window and run the Qt event loop until it closes."""
    app = QApplication.instance() or QApplication(sys.argv)
    view = GridView(grid)
    view.setWindowTitle(title)
    view.resize(800, 600)
    view.show()
    view.fit_in_view()
    return app.exec()
