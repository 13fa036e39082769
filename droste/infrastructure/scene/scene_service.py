# droste/infrastructure/scene/scene_service.py
"""
In-memory scene service.

Holds the committed scene and the drag in progress, and turns completed drags
into new screens or patterns.
"""
from typing import Callable, List, Optional

from droste.domain.common.errors import ValidationError
from droste.domain.common.result import Result
from droste.domain.geometry.drafts import draft_rect, is_large_enough, resolve_draft
from droste.domain.geometry.hit_testing import find_clicked_region
from droste.domain.models.geometry import Point
from droste.domain.models.scene import ClickedPath, DraftClick, EditorSettings, Scene
from droste.domain.services.i_logger_service import ILoggerService
from droste.domain.services.i_scene_service import ISceneService


class SceneService(ISceneService):
    """Scene service keeping state in memory for the lifetime of the session."""

    def __init__(self, logger: ILoggerService, settings: Optional[EditorSettings] = None):
        """
        Initialize the scene service with an empty scene.

        Args:
            logger: Logger service
            settings: Editor settings; defaults are used when omitted
        """
        self.logger = logger
        self.settings = settings or EditorSettings()
        self._scene = Scene()
        self._draft_click: Optional[DraftClick] = None
        self._listeners: List[Callable[[Scene], None]] = []

    @property
    def scene(self) -> Scene:
        return self._scene

    @property
    def draft_click(self) -> Optional[DraftClick]:
        return self._draft_click

    def update_settings(self, settings: EditorSettings) -> None:
        """Swap in new settings; applies to the next hit-test and drag."""
        self.settings = settings
        self.logger.debug("Scene settings updated",
                          min_drag_size=settings.min_drag_size,
                          max_hit_depth=settings.max_hit_depth)

    def begin_drag(self, point: Point) -> DraftClick:
        clicked_path = self.hovered_path(point)
        self._draft_click = DraftClick(anchor=point, clicked_path=clicked_path)
        self.logger.debug("Drag started", anchor=point.as_tuple(), path=clicked_path)
        return self._draft_click

    def move_cursor(self, point: Point) -> None:
        if self._draft_click is not None:
            self._draft_click.cursor = point

    def end_drag(self, point: Point) -> Result[Scene]:
        draft_click = self._draft_click
        if draft_click is None:
            return Result.fail(ValidationError("No drag in progress", code="no_drag"))

        self._draft_click = None
        draft_click.cursor = point

        if not is_large_enough(draft_click.anchor, point, self.settings.min_drag_size):
            self.logger.debug("Drag discarded, below minimum size",
                              anchor=draft_click.anchor.as_tuple(), release=point.as_tuple())
            return Result.fail(ValidationError(
                "Drag is smaller than the minimum size",
                code="too_small",
                details={"anchor": draft_click.anchor.as_tuple(),
                         "release": point.as_tuple(),
                         "min_size": self.settings.min_drag_size}
            ))

        rect = draft_rect(draft_click.anchor, point)
        self._scene = resolve_draft(self._scene, draft_click.clicked_path, rect)

        if draft_click.clicked_path is None:
            self.logger.info("Screen created", rect=rect.as_tuple(), screens=len(self._scene.screens))
        else:
            self.logger.info("Pattern created", path=draft_click.clicked_path,
                             pattern=self._scene.patterns[-1].as_tuple(),
                             patterns=len(self._scene.patterns))

        self._notify_listeners()
        return Result.ok(self._scene)

    def cancel_drag(self) -> None:
        if self._draft_click is not None:
            self.logger.debug("Drag cancelled")
        self._draft_click = None

    def reset(self) -> None:
        self._draft_click = None
        self._scene = Scene()
        self.logger.info("Scene reset")
        self._notify_listeners()

    def preview(self) -> Scene:
        draft_click = self._draft_click
        if draft_click is None:
            return self._scene
        rect = draft_rect(draft_click.anchor, draft_click.cursor)
        return resolve_draft(self._scene, draft_click.clicked_path, rect)

    def hovered_path(self, point: Point) -> Optional[ClickedPath]:
        path = find_clicked_region(self._scene, point, self.settings.max_hit_depth)
        if path is not None and path.depth >= self.settings.max_hit_depth:
            self.logger.debug("Hit-test reached maximum depth", depth=path.depth, point=point.as_tuple())
        return path

    def subscribe(self, listener: Callable[[Scene], None]) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[Scene], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_listeners(self) -> None:
        for listener in self._listeners.copy():
            try:
                listener(self._scene)
            except Exception as e:
                self.logger.error(f"Error notifying scene listener: {e}")
