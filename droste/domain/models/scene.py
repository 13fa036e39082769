#droste/domain/models/scene.py
"""
Scene model: the screens and patterns being edited, plus drag state.

Screens are rectangles in viewport coordinates. Patterns are rectangles in the
local 0..1 frame of whatever region contains them. Which region that is gets
worked out from geometry at hit-test time, so no parent links are stored.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from droste.domain.models.geometry import Point, Rect


@dataclass(frozen=True)
class Scene:
    """
    The whole edited structure.

    Attributes:
        screens: Top-level regions in viewport coordinates
        patterns: Regions in the local frame of their container, in creation order
    """
    screens: Tuple[Rect, ...] = ()
    patterns: Tuple[Rect, ...] = ()

    def with_screen(self, screen: Rect) -> 'Scene':
        return Scene(screens=self.screens + (screen,), patterns=self.patterns)

    def with_pattern(self, pattern: Rect) -> 'Scene':
        return Scene(screens=self.screens, patterns=self.patterns + (pattern,))

    @property
    def is_empty(self) -> bool:
        return not self.screens and not self.patterns


@dataclass(frozen=True)
class ClickedPath:
    """
    Location of a point inside the recursive structure.

    Attributes:
        screen_index: Index of the screen containing the point
        nested_path: Pattern indices, one per level of self-similar recursion
    """
    screen_index: int
    nested_path: Tuple[int, ...] = ()

    @property
    def depth(self) -> int:
        return len(self.nested_path)

    def __str__(self) -> str:
        if not self.nested_path:
            return f"screen {self.screen_index}"
        chain = " > ".join(str(k) for k in self.nested_path)
        return f"screen {self.screen_index} > {chain}"


@dataclass
class DraftClick:
    """
    Drag in progress.

    The anchor and clicked path are captured on press and stay fixed. The
    cursor is overwritten on every move and read by each frame tick.
    """
    anchor: Point
    clicked_path: Optional[ClickedPath]
    cursor: Optional[Point] = None

    def __post_init__(self):
        if self.cursor is None:
            self.cursor = self.anchor


@dataclass
class EditorSettings:
    """Typed view of the editor configuration."""
    min_drag_size: float = 0.01
    max_hit_depth: int = 64
    max_render_depth: int = 12
    min_render_extent: float = 0.002
    max_render_regions: int = 2000
    frame_interval_ms: int = 16
    screen_color: str = "#3a7ca5"
    pattern_colors: List[str] = field(default_factory=lambda: ["#81c3d7", "#d9dcd6", "#f4a259", "#bc4b51"])
    draft_color: str = "#ff3b30"

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'EditorSettings':
        """Build settings from a configuration dictionary, ignoring unknown keys."""
        known = {name: config[name] for name in cls.__dataclass_fields__ if name in config}
        return cls(**known)
