# droste/domain/services/i_scene_service.py
"""
Scene service interface.

The scene service owns the committed screens and patterns together with the
drag in progress. Every call happens on the UI thread, so there is exactly one
writer.
"""
from abc import ABC, abstractmethod
from typing import Callable, Optional

from droste.domain.common.result import Result
from droste.domain.models.geometry import Point
from droste.domain.models.scene import ClickedPath, DraftClick, EditorSettings, Scene


class ISceneService(ABC):
    """Service holding the edited scene and turning drags into regions."""

    @property
    @abstractmethod
    def scene(self) -> Scene:
        """The committed scene."""
        pass

    @property
    @abstractmethod
    def draft_click(self) -> Optional[DraftClick]:
        """The drag in progress, or None."""
        pass

    @abstractmethod
    def update_settings(self, settings: EditorSettings) -> None:
        """Use new settings for subsequent hit-tests and drags."""
        pass

    @abstractmethod
    def begin_drag(self, point: Point) -> DraftClick:
        """
        Start a drag at ``point`` and capture the region it started in.

        Args:
            point: Press point in viewport coordinates

        Returns:
            The captured drag state
        """
        pass

    @abstractmethod
    def move_cursor(self, point: Point) -> None:
        """Record the latest cursor point for the drag in progress."""
        pass

    @abstractmethod
    def end_drag(self, point: Point) -> Result[Scene]:
        """
        Finish the drag at ``point`` and commit the new screen or pattern.

        Args:
            point: Release point in viewport coordinates

        Returns:
            Result containing the updated scene, or a ValidationError when
            there was no drag or the drag was too small
        """
        pass

    @abstractmethod
    def cancel_drag(self) -> None:
        """Abandon the drag in progress without committing anything."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Clear all screens and patterns, and abandon any drag."""
        pass

    @abstractmethod
    def preview(self) -> Scene:
        """The scene as it would look if the current drag were committed."""
        pass

    @abstractmethod
    def hovered_path(self, point: Point) -> Optional[ClickedPath]:
        """Hit-test ``point`` against the committed scene."""
        pass

    @abstractmethod
    def subscribe(self, listener: Callable[[Scene], None]) -> None:
        """Register a listener called with the scene after each commit or reset."""
        pass

    @abstractmethod
    def unsubscribe(self, listener: Callable[[Scene], None]) -> None:
        """Remove a previously registered listener."""
        pass
