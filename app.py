import sys
import logging
from typing import List, Optional
from PyQt5.QtWidgets import (QApplication, QMainWindow, QGraphicsView, QGraphicsScene,
                            QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
                            QCheckBox, QSlider, QSplitter, QGroupBox, QTextEdit)
from PyQt5.QtGui import (QPen, QBrush, QColor, QPainter, QFont, QLinearGradient,
                         QPolygonF, QPalette)
from PyQt5.QtCore import Qt, QPointF, QRectF

import config
from geometry import GeoPoint, boundary_edges
from graham_scan import prune_interior
from search_points import SearchPoint, SearchPointVector

logger = logging.getLogger(__name__)


def to_scene(p: GeoPoint) -> QPointF:
    # latitude grows upwards, scene y grows downwards
    return QPointF(p.longitude, -p.latitude)


def to_geo(pos: QPointF) -> GeoPoint:
    return GeoPoint(pos.x(), -pos.y())


class BoundaryGraphicsScene(QGraphicsScene):
    """Scene with a themed grid background"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.grid_visible = True
        self.grid_size = config.GRID_SIZE
        self.setDarkMode(True)

    def setDarkMode(self, dark_mode: bool):
        """Update scene colors based on theme"""
        if dark_mode:
            self.setBackgroundBrush(QColor(25, 25, 35))
            self.grid_color = QColor(45, 45, 55)
            self.grid_major_color = QColor(60, 60, 70)
            self.point_brush = QBrush(QColor(*config.COLORS['point_light']).lighter(180))
        else:
            self.setBackgroundBrush(QColor(240, 240, 245))
            self.grid_color = QColor(220, 220, 220)
            self.grid_major_color = QColor(200, 200, 200)
            self.point_brush = QBrush(QColor(*config.COLORS['point']))

        self.ring_brush = QBrush(QColor(*config.COLORS['ring_fill']))
        self.ring_pen = QPen(QColor(*config.COLORS['ring']), 2)
        self.ring_pen.setCosmetic(True)
        self.pruned_pen = QPen(QColor(*config.COLORS['pruned']), 1.5, Qt.DashLine)
        self.pruned_pen.setCosmetic(True)

    def drawBackground(self, painter: QPainter, rect: QRectF):
        """Draw the grid background"""
        super().drawBackground(painter, rect)

        if not self.grid_visible:
            return

        gradient = QLinearGradient(0, 0, 0, rect.height())
        background_color = self.backgroundBrush().color()
        gradient.setColorAt(0, background_color)
        gradient.setColorAt(1, background_color.darker(105))
        painter.fillRect(rect, gradient)

        left = int(rect.left()) - (int(rect.left()) % self.grid_size)
        top = int(rect.top()) - (int(rect.top()) % self.grid_size)

        painter.setPen(QPen(self.grid_color, 1))
        for x in range(left, int(rect.right()), self.grid_size):
            painter.drawLine(x, int(rect.top()), x, int(rect.bottom()))
        for y in range(top, int(rect.bottom()), self.grid_size):
            painter.drawLine(int(rect.left()), y, int(rect.right()), y)

        painter.setPen(QPen(self.grid_major_color, 1))
        for x in range(left, int(rect.right()), self.grid_size * 5):
            painter.drawLine(x, int(rect.top()), x, int(rect.bottom()))
        for y in range(top, int(rect.bottom()), self.grid_size * 5):
            painter.drawLine(int(rect.left()), y, int(rect.right()), y)


class BoundaryPrunerApp(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Boundary Pruner")
        self.resize(1200, 700)

        # Data structures
        self.points = SearchPointVector()
        self.pruned: List[SearchPoint] = []
        self.last_result: Optional[bool] = None
        self.next_id = 0

        self.dark_mode = True

        self._init_ui()
        self._connect_signals()
        self._apply_theme()

    def _init_ui(self):
        """Initialize the UI layout"""
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        main_layout = QHBoxLayout(self.central_widget)

        self.splitter = QSplitter(Qt.Horizontal)
        main_layout.addWidget(self.splitter)

        # Left side: Graphics view
        self.scene = BoundaryGraphicsScene()
        self.view = QGraphicsView(self.scene)
        self.view.setRenderHint(QPainter.Antialiasing)
        self.view.setDragMode(QGraphicsView.NoDrag)
        self.view.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)
        self.splitter.addWidget(self.view)

        # Right side: Controls panel
        self.panel = QWidget()
        self.panel.setMinimumWidth(300)
        self.panel.setMaximumWidth(450)
        panel_layout = QVBoxLayout(self.panel)

        title_label = QLabel("Boundary Pruner")
        title_label.setFont(QFont("Arial", 16, QFont.Bold))
        title_label.setAlignment(Qt.AlignCenter)
        panel_layout.addWidget(title_label)

        buttons_layout = QHBoxLayout()
        self.prune_btn = QPushButton("Prune interior")
        self.clear_all_btn = QPushButton("Clear All")
        buttons_layout.addWidget(self.prune_btn)
        buttons_layout.addWidget(self.clear_all_btn)
        panel_layout.addLayout(buttons_layout)

        # Tolerance
        tol_group = QGroupBox("Tolerance")
        tol_layout = QVBoxLayout(tol_group)

        self.auto_tolerance = QCheckBox("Auto tolerance")
        tol_layout.addWidget(self.auto_tolerance)

        slider_layout = QHBoxLayout()
        slider_layout.addWidget(QLabel("Fixed:"))
        self.tolerance_slider = QSlider(Qt.Horizontal)
        self.tolerance_slider.setMinimum(config.TOLERANCE_EXPONENT_MIN)
        self.tolerance_slider.setMaximum(config.TOLERANCE_EXPONENT_MAX)
        self.tolerance_slider.setValue(config.TOLERANCE_EXPONENT_DEFAULT)
        slider_layout.addWidget(self.tolerance_slider)
        self.tolerance_value = QLabel()
        slider_layout.addWidget(self.tolerance_value)
        tol_layout.addLayout(slider_layout)

        self.show_grid = QCheckBox("Show grid")
        self.show_grid.setChecked(True)
        tol_layout.addWidget(self.show_grid)

        hotkeys_label = QLabel("Hotkeys: P=Prune, C=Clear")
        hotkeys_label.setStyleSheet("color: gray;")
        tol_layout.addWidget(hotkeys_label)

        panel_layout.addWidget(tol_group)

        # Info panel
        info_group = QGroupBox("Information")
        info_layout = QVBoxLayout(info_group)
        self.info_text = QTextEdit()
        self.info_text.setReadOnly(True)
        self.info_text.setMinimumHeight(200)
        info_layout.addWidget(self.info_text)
        panel_layout.addWidget(info_group)

        self.convex_status = QLabel()
        panel_layout.addWidget(self.convex_status)

        theme_layout = QHBoxLayout()
        self.dark_mode_checkbox = QCheckBox("Dark mode")
        self.dark_mode_checkbox.setChecked(True)
        theme_layout.addWidget(self.dark_mode_checkbox)
        panel_layout.addLayout(theme_layout)

        self.splitter.addWidget(self.panel)
        self.splitter.setSizes([800, 400])

        self.scene.setSceneRect(0, -config.SCENE_HEIGHT, config.SCENE_WIDTH, config.SCENE_HEIGHT)
        self._update_tolerance(self.tolerance_slider.value())

    def _connect_signals(self):
        """Connect UI signals to slots"""
        self.prune_btn.clicked.connect(self._prune)
        self.clear_all_btn.clicked.connect(self._clear_all)

        self.tolerance_slider.valueChanged.connect(self._update_tolerance)
        self.auto_tolerance.stateChanged.connect(self._toggle_auto_tolerance)

        self.show_grid.stateChanged.connect(self._toggle_grid)
        self.dark_mode_checkbox.stateChanged.connect(self._toggle_theme)

        self.view.mousePressEvent = self._handle_view_click

    @property
    def tolerance(self) -> float:
        if self.auto_tolerance.isChecked():
            return config.AUTO_TOLERANCE
        return 10.0 ** -self.tolerance_slider.value()

    def _update_tolerance(self, value):
        """Update fixed tolerance label"""
        self.tolerance_value.setText(f"1e-{value}")
        self._refresh_info()

    def _toggle_auto_tolerance(self, state):
        self.tolerance_slider.setEnabled(state != Qt.Checked)
        self._refresh_info()

    def _toggle_grid(self, state):
        """Toggle grid visibility"""
        self.scene.grid_visible = (state == Qt.Checked)
        self.view.viewport().update()

    def _toggle_theme(self, state):
        """Toggle between light and dark themes"""
        self.dark_mode = (state == Qt.Checked)
        self._apply_theme()

    def _apply_theme(self):
        """Apply the current theme to all UI elements"""
        app = QApplication.instance()
        palette = app.palette()

        if self.dark_mode:
            palette.setColor(QPalette.Window, QColor(53, 53, 53))
            palette.setColor(QPalette.WindowText, Qt.white)
            palette.setColor(QPalette.Base, QColor(25, 25, 25))
            palette.setColor(QPalette.Text, Qt.white)
            palette.setColor(QPalette.Button, QColor(53, 53, 53))
            palette.setColor(QPalette.ButtonText, Qt.white)
            palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
            palette.setColor(QPalette.HighlightedText, Qt.black)
        else:
            palette.setColor(QPalette.Window, QColor(240, 240, 245))
            palette.setColor(QPalette.WindowText, QColor(0, 0, 0))
            palette.setColor(QPalette.Base, QColor(255, 255, 255))
            palette.setColor(QPalette.Text, QColor(0, 0, 0))
            palette.setColor(QPalette.Button, QColor(240, 240, 240))
            palette.setColor(QPalette.ButtonText, QColor(0, 0, 0))
            palette.setColor(QPalette.Highlight, QColor(61, 174, 233))
            palette.setColor(QPalette.HighlightedText, QColor(255, 255, 255))

        app.setPalette(palette)

        self.scene.setDarkMode(self.dark_mode)
        self.view.viewport().update()
        self._redraw()
        self._refresh_info()

    def _handle_view_click(self, event):
        """Append a boundary point at the clicked position"""
        location = to_geo(self.view.mapToScene(event.pos()))
        self.points.append(SearchPoint(location, f"P{self.next_id}"))
        self.next_id += 1

        self.pruned.clear()
        self.last_result = None

        self._redraw()
        self._refresh_info()

        super(QGraphicsView, self.view).mousePressEvent(event)

    def _prune(self):
        """Run interior pruning over the current boundary"""
        before = list(self.points)
        self.last_result = prune_interior(self.points, self.tolerance)
        kept = set(id(sp) for sp in self.points)
        self.pruned = [sp for sp in before if id(sp) not in kept]
        logger.info("prune: %d -> %d points (tolerance %g)", len(before), len(self.points), self.tolerance)

        self._redraw()
        self._refresh_info()

    def _clear_all(self):
        """Clear everything"""
        self.points.clear()
        self.pruned.clear()
        self.last_result = None
        self.next_id = 0
        self._redraw()
        self._refresh_info()

    def _redraw(self):
        """Redraw the entire scene"""
        self.scene.clear()
        locations = self.points.locations()

        if len(locations) >= 3:
            ring = QPolygonF([to_scene(p) for p in locations])
            ring_item = self.scene.addPolygon(ring, self.scene.ring_pen, self.scene.ring_brush)
            ring_item.setZValue(10)
        else:
            for a, b in boundary_edges(locations):
                pa, pb = to_scene(a), to_scene(b)
                self.scene.addLine(pa.x(), pa.y(), pb.x(), pb.y(), self.scene.ring_pen).setZValue(10)

        r = config.POINT_RADIUS
        for sp in self.points:
            pos = to_scene(sp.location)
            point_item = self.scene.addEllipse(pos.x() - r, pos.y() - r, 2 * r, 2 * r,
                                               QPen(Qt.NoPen), self.scene.point_brush)
            point_item.setZValue(20)
            label = self.scene.addSimpleText(str(sp.payload))
            label.setBrush(QBrush(QColor(*config.COLORS['label'])))
            label.setPos(pos.x() + r, pos.y() + r)
            label.setZValue(21)

        # Ghost markers for what the last prune removed
        for sp in self.pruned:
            pos = to_scene(sp.location)
            ghost = self.scene.addEllipse(pos.x() - r - 2, pos.y() - r - 2, 2 * r + 4, 2 * r + 4,
                                          self.scene.pruned_pen, QBrush(Qt.NoBrush))
            ghost.setZValue(30)

    def _refresh_info(self):
        """Update info panel with current state"""
        if self.last_result is None:
            result = "—"
        else:
            result = "changed" if self.last_result else "unchanged"

        tolerance = "auto" if self.auto_tolerance.isChecked() else f"{self.tolerance:g}"
        lines = [
            f"<b>Points:</b> {len(self.points)}",
            f"<b>Tolerance:</b> {tolerance}",
            f"<b>Last prune:</b> {result}",
            f"<b>Pruned points:</b> {len(self.pruned)}",
            "",
            "<b>Boundary:</b>"
        ]
        if self.points:
            lines.extend(f"• {sp.payload} {self._fmt(sp.location)}" for sp in self.points)
        else:
            lines.append("• None")
        self.info_text.setHtml("<p>" + "<br>".join(lines) + "</p>")

        if self.points.is_convex(self.tolerance):
            self.convex_status.setText("Convex")
            self.convex_status.setStyleSheet("color: green; font-weight: bold;")
        else:
            self.convex_status.setText("Not convex")
            self.convex_status.setStyleSheet("color: red; font-weight: bold;")

    def keyPressEvent(self, event):
        """Handle key press events"""
        if event.key() == Qt.Key_P:
            self._prune()
        elif event.key() == Qt.Key_C:
            self._clear_all()
        else:
            super().keyPressEvent(event)

    @staticmethod
    def _fmt(p: GeoPoint) -> str:
        """Format point coordinates"""
        return f"({p.longitude:.1f}, {p.latitude:.1f})"


def main():
    logging.basicConfig(level=logging.DEBUG if config.DEBUG else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    window = BoundaryPrunerApp()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
