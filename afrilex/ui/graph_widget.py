from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import QEvent, QTimer, Qt, QPointF, QRectF, pyqtSignal
from PyQt6.QtGui import QPainter, QColor, QPen, QBrush, QFont, QTransform

import math

from afrilex.graph_builder import Category
from afrilex.interaction import Gesture, InteractionHandler
from afrilex.viewport import Viewport

FRAME_MS = 16

TABLEAU10 = [
    "#4e79a7", "#f28e2c", "#e15759", "#76b7b2", "#59a14f",
    "#edc949", "#af7aa1", "#ff9da7", "#9c755f", "#bab0ab",
]

PALETTES = {
    False: {
        "bg": "#fbf8f1",
        "edge": "#d0b380",
        "root": "#5a412c",
        "anchor_a": "#1e4d68",
        "anchor_b": "#9c4332",
        "stroke": "#ffffff",
        "gold": "#c59a5b",
        "word": "#5a412c",
        "anchor_word": "#1e4d68",
        "language": "#c59a5b",
    },
    True: {
        "bg": "#0d1d26",
        "edge": "#719cb9",
        "root": "#163040",
        "anchor_a": "#2a7f87",
        "anchor_b": "#9c4332",
        "stroke": "#0d1d26",
        "gold": "#c59a5b",
        "word": "#cddce6",
        "anchor_word": "#c59a5b",
        "language": "#719cb9",
    },
}


class GraphWidget(QWidget):
    nodeClicked = pyqtSignal(str)
    zoomChanged = pyqtSignal(float)

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine
        self.viewport = Viewport(self.width(), self.height())
        self.interaction = InteractionHandler(engine, self.viewport)
        self.dark_mode = False
        self._last_scale = self.viewport.scale
        self._centered = False

        # Physics Timer, only runs while visible
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.physics_loop)

        self.setMouseTracking(True)
        self.setMinimumHeight(400)

    def set_graph(self, nx_graph):
        """Rebuilds the simulation. The camera is kept as is."""
        self.interaction.cancel()
        self.engine.load_from_networkx(nx_graph)
        if self.isVisible() and not self.timer.isActive():
            self.timer.start(FRAME_MS)
        self.update()

    def set_dark_mode(self, dark):
        self.dark_mode = dark
        self.update()

    # Camera controls

    def reset_view(self):
        self.viewport.reset()

    def zoom_in(self):
        self.viewport.zoom_in()

    def zoom_out(self):
        self.viewport.zoom_out()

    def physics_loop(self):
        self.engine.tick()
        self.viewport.advance(FRAME_MS)
        self._emit_zoom()
        self.update()

    def _emit_zoom(self):
        if self.viewport.scale != self._last_scale:
            self._last_scale = self.viewport.scale
            self.zoomChanged.emit(self._last_scale)

    # Lifecycle

    def showEvent(self, event):
        super().showEvent(event)
        self.engine.start()
        self.timer.start(FRAME_MS)

    def hideEvent(self, event):
        self.timer.stop()
        self.engine.stop()
        # No mouse release follows a hide, so unpin the dragged node here
        self.interaction.release()
        self.setCursor(Qt.CursorShape.ArrowCursor)
        super().hideEvent(event)

    def closeEvent(self, event):
        self.timer.stop()
        self.engine.stop()
        super().closeEvent(event)

    def resizeEvent(self, event):
        self.viewport.resize(self.width(), self.height())
        if not self._centered:
            # First real size: snap to the default framing
            self.viewport.reset()
            self.viewport.finish()
            self._centered = True
        super().resizeEvent(event)

    # Rendering

    def _fill_color(self, node, colors):
        category = node.data.get("category")
        if category is Category.ROOT:
            return QColor(colors["root"])
        if category is Category.ANCHOR_A:
            return QColor(colors["anchor_a"])
        if category is Category.ANCHOR_B:
            return QColor(colors["anchor_b"])
        group = node.data.get("group")
        if group is None:
            return QColor(TABLEAU10[-1])
        return QColor(TABLEAU10[group % len(TABLEAU10)])

    def paintEvent(self, event):
        colors = PALETTES[self.dark_mode]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        # Fill Background
        painter.fillRect(self.rect(), QColor(colors["bg"]))

        # Apply Camera Transform
        transform = QTransform()
        transform.translate(self.viewport.tx, self.viewport.ty)
        transform.scale(self.viewport.scale, self.viewport.scale)
        painter.setTransform(transform)

        # Draw Edges
        edge_color = QColor(colors["edge"])
        edge_color.setAlphaF(0.4)
        for u, v, weight in self.engine.edges:
            n1 = self.engine.nodes.get(u)
            n2 = self.engine.nodes.get(v)
            if n1 and n2:
                painter.setPen(QPen(edge_color, math.sqrt(weight)))
                painter.drawLine(QPointF(n1.x, n1.y), QPointF(n2.x, n2.y))

        word_font = QFont("Segoe UI", 8, QFont.Weight.Bold)
        anchor_font = QFont("Segoe UI", 10, QFont.Weight.Bold)
        root_font = QFont("Segoe UI", 13, QFont.Weight.Bold)
        language_font = QFont("Georgia", 6)

        # Draw Nodes
        for node in self.engine.nodes.values():
            category = node.data.get("category")
            r = node.radius

            if category is Category.ANCHOR_A:
                painter.setPen(QPen(QColor(colors["gold"]), 4))
            else:
                painter.setPen(QPen(QColor(colors["stroke"]), 2))
            painter.setBrush(QBrush(self._fill_color(node, colors)))
            painter.drawEllipse(QRectF(node.x - r, node.y - r, r * 2, r * 2))

            # Word under the node
            if category is Category.ROOT:
                painter.setFont(root_font)
                text = node.label.upper()
            elif category is Category.ANCHOR_A:
                painter.setFont(anchor_font)
                text = node.label.upper()
            else:
                painter.setFont(word_font)
                text = node.label
            word_color = colors["anchor_word"] if category is Category.ANCHOR_A else colors["word"]
            painter.setPen(QColor(word_color))
            painter.drawText(QRectF(node.x - 80, node.y + r + 2, 160, 18),
                             Qt.AlignmentFlag.AlignCenter, text)

            # Language label below the word
            if category is not Category.ROOT:
                painter.setFont(language_font)
                painter.setPen(QColor(colors["language"]))
                painter.drawText(QRectF(node.x - 80, node.y + r + 18, 160, 14),
                                 Qt.AlignmentFlag.AlignCenter, node.data.get("language", "").upper())

    # Pointer events

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            return
        pos = event.position()
        node = self.interaction.press(pos.x(), pos.y())
        if node is None:
            self.setCursor(Qt.CursorShape.ClosedHandCursor)
        else:
            self.setCursor(Qt.CursorShape.PointingHandCursor)
            self.nodeClicked.emit(node.uid)

    def mouseMoveEvent(self, event):
        if self.interaction.state is Gesture.IDLE:
            return
        pos = event.position()
        self.interaction.move(pos.x(), pos.y())
        self.update()

    def mouseReleaseEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            return
        self.interaction.release()
        self.setCursor(Qt.CursorShape.ArrowCursor)

    def wheelEvent(self, event):
        pos = event.position()
        self.interaction.wheel(event.angleDelta().y(), pos.x(), pos.y())
        self._emit_zoom()
        self.update()

    def event(self, event):
        # Trackpad pinch arrives as a native gesture, not a wheel event
        if (event.type() == QEvent.Type.NativeGesture
                and event.gestureType() == Qt.NativeGestureType.ZoomNativeGesture):
            pos = event.position()
            self.viewport.zoom_at(1 + event.value(), pos.x(), pos.y())
            self._emit_zoom()
            self.update()
            return True
        return super().event(event)
