# droste/presentation/components/scene_canvas.py
"""
Canvas widget for drawing screens and patterns.

Translates mouse and keyboard input into scene service calls and repaints the
scene preview on every frame tick.
"""
from typing import Optional

from PySide6.QtCore import Qt, QPointF, QTimer, Signal
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QWidget, QSizePolicy

from droste.domain.common.errors import GeometryInvariantError
from droste.domain.geometry.drafts import draft_rect
from droste.domain.geometry.hit_testing import resolve_path_rects
from droste.domain.models.geometry import Point
from droste.domain.models.scene import ClickedPath, EditorSettings
from droste.domain.services.i_logger_service import ILoggerService
from droste.domain.services.i_scene_service import ISceneService
from droste.presentation.rendering.frame_painter import FramePainter


class SceneCanvas(QWidget):
    """
    Widget that lets the user click and drag to add screens and patterns.

    Left drag draws a region, right click abandons the current drag and
    Escape clears the whole scene.
    """
    hover_changed = Signal(object)  # Optional[ClickedPath]
    scene_changed = Signal(object)  # Scene

    def __init__(self, scene_service: ISceneService, settings: EditorSettings,
                 logger: ILoggerService, parent=None):
        """
        Initialize the canvas.

        Args:
            scene_service: Service holding the edited scene
            settings: Editor settings
            logger: Logger service
            parent: Parent widget
        """
        super().__init__(parent)
        self.scene_service = scene_service
        self.logger = logger
        self.painter = FramePainter(settings)
        self._hovered: Optional[ClickedPath] = None
        self._last_point: Optional[Point] = None

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setCursor(Qt.CrossCursor)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(320, 240)

        self.scene_service.subscribe(self._on_scene_changed)

        # Frame tick, the equivalent of an animation frame callback
        self.frame_timer = QTimer(self)
        self.frame_timer.setInterval(settings.frame_interval_ms)
        self.frame_timer.timeout.connect(self._on_frame)
        self.frame_timer.start()

    def apply_settings(self, settings: EditorSettings) -> None:
        """Rebuild the painter and frame tick from new settings."""
        self.painter = FramePainter(settings)
        self.frame_timer.setInterval(settings.frame_interval_ms)
        self.update()

    def to_viewport_point(self, pos: QPointF) -> Point:
        """Convert a widget pixel position to normalized viewport coordinates."""
        width = max(1, self.width())
        height = max(1, self.height())
        return Point(pos.x() / width, pos.y() / height)

    def paintEvent(self, event):
        """Paint the scene preview, the draft outline and the hovered region."""
        painter = QPainter(self)
        try:
            draft = None
            draft_click = self.scene_service.draft_click
            if draft_click is not None:
                draft = draft_rect(draft_click.anchor, draft_click.cursor)

            highlight = []
            if self._hovered is not None and draft_click is None:
                highlight = resolve_path_rects(self.scene_service.scene, self._hovered)

            self.painter.paint(painter, self.width(), self.height(),
                               self.scene_service.preview(), draft=draft, highlight=highlight)
        except GeometryInvariantError as e:
            self.logger.critical(str(e.to_domain_error()), **e.details)
            raise
        finally:
            painter.end()

    def mousePressEvent(self, event):
        """Left button starts a drag, right button abandons it."""
        if event.button() == Qt.LeftButton:
            self.scene_service.begin_drag(self.to_viewport_point(event.position()))
            self.update()
        elif event.button() == Qt.RightButton:
            self.scene_service.cancel_drag()
            self.update()

    def mouseMoveEvent(self, event):
        """Track the cursor for the drag preview and hover highlight."""
        point = self.to_viewport_point(event.position())
        self._last_point = point
        if self.scene_service.draft_click is not None:
            self.scene_service.move_cursor(point)
        else:
            self._refresh_hover()

    def _refresh_hover(self) -> None:
        """Hit-test the last cursor position against the committed scene."""
        hovered = None
        if self._last_point is not None:
            hovered = self.scene_service.hovered_path(self._last_point)
        if hovered != self._hovered:
            self._hovered = hovered
            self.hover_changed.emit(hovered)
            self.update()

    def mouseReleaseEvent(self, event):
        """Finish the drag and commit it if it is large enough."""
        if event.button() != Qt.LeftButton or self.scene_service.draft_click is None:
            return
        self._last_point = self.to_viewport_point(event.position())
        result = self.scene_service.end_drag(self._last_point)
        if result.is_failure:
            self.logger.debug(f"Drag not committed: {result.error}")
        self.update()

    def keyPressEvent(self, event):
        """Escape clears the scene."""
        if event.key() == Qt.Key_Escape:
            self.reset_scene()
        else:
            super().keyPressEvent(event)

    def reset_scene(self) -> None:
        self.scene_service.reset()
        self.update()

    def resizeEvent(self, event):
        # Stored coordinates are normalized, so a resize only needs a repaint
        super().resizeEvent(event)
        self.update()

    def closeEvent(self, event):
        self.frame_timer.stop()
        self.scene_service.unsubscribe(self._on_scene_changed)
        super().closeEvent(event)

    def _on_frame(self) -> None:
        if self.scene_service.draft_click is not None:
            self.update()

    def _on_scene_changed(self, scene) -> None:
        # Paths found before a commit or reset may no longer exist
        self._refresh_hover()
        self.scene_changed.emit(scene)
