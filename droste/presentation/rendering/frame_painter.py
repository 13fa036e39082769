# droste/presentation/rendering/frame_painter.py
"""
Paints a scene onto a QPainter surface, including every self-similar copy of
the patterns inside each screen.
"""
from typing import Optional, Sequence

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPen

from droste.domain.geometry.layout import iter_frame_regions
from droste.domain.models.geometry import Rect
from droste.domain.models.scene import EditorSettings, Scene


def to_pixel_rect(rect: Rect, width: float, height: float) -> QRectF:
    """Map a viewport rectangle to widget pixels."""
    return QRectF(rect.min_x * width, rect.min_y * height,
                  rect.width * width, rect.height * height)


class FramePainter:
    """Paints screens and their nested pattern copies, coloured by depth."""

    def __init__(self, settings: EditorSettings):
        self.settings = settings
        self._screen_color = QColor(settings.screen_color)
        self._pattern_colors = [QColor(c) for c in settings.pattern_colors] or [self._screen_color]
        self._draft_color = QColor(settings.draft_color)

    def color_for_depth(self, depth: int) -> QColor:
        if depth == 0:
            return self._screen_color
        return self._pattern_colors[(depth - 1) % len(self._pattern_colors)]

    def paint(self, painter: QPainter, width: int, height: int, scene: Scene,
              draft: Optional[Rect] = None, highlight: Sequence[Rect] = ()) -> int:
        """
        Paint one frame.

        Args:
            painter: Active painter on the target surface
            width, height: Surface size in pixels
            scene: Scene to paint, usually the preview including the draft
            draft: Drag rectangle in viewport coordinates, outlined on top
            highlight: Viewport rectangles of the hovered region chain

        Returns:
            Number of regions painted
        """
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(0, 0, width, height, QColor(24, 24, 28))

        # Regions smaller than a pixel are not worth visiting
        min_extent = max(self.settings.min_render_extent, 1.0 / max(1, min(width, height)))

        painted = 0
        for region in iter_frame_regions(scene,
                                         max_depth=self.settings.max_render_depth,
                                         min_extent=min_extent,
                                         max_regions=self.settings.max_render_regions):
            color = self.color_for_depth(region.depth)
            fill = QColor(color)
            fill.setAlpha(60 if region.depth else 40)
            painter.setPen(QPen(color, 1.5 if region.depth == 0 else 1.0))
            painter.setBrush(QBrush(fill))
            painter.drawRect(to_pixel_rect(region.rect, width, height))
            painted += 1

        if highlight:
            painter.setBrush(Qt.NoBrush)
            painter.setPen(QPen(QColor(255, 255, 255, 180), 1.0, Qt.DashLine))
            for rect in highlight:
                painter.drawRect(to_pixel_rect(rect, width, height))

        if draft is not None:
            painter.setBrush(Qt.NoBrush)
            painter.setPen(QPen(self._draft_color, 2.0))
            painter.drawRect(to_pixel_rect(draft, width, height))

        return painted
