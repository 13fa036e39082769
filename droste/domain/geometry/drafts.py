# droste/domain/geometry/drafts.py
"""
Decide where a freshly drawn rectangle belongs.

A drag that started outside every screen makes a new screen. A drag that
started inside a region makes a new pattern, expressed in that region's frame.
"""
from typing import Optional

from droste.domain.geometry.frames import to_local_chain
from droste.domain.geometry.hit_testing import path_frames
from droste.domain.models.geometry import Point, Rect, normalize_rect
from droste.domain.models.scene import ClickedPath, Scene

DEFAULT_MIN_DRAG_SIZE = 0.01


def draft_rect(anchor: Point, cursor: Point) -> Rect:
    """Rectangle spanned by the drag anchor and the current cursor."""
    return normalize_rect(anchor, cursor)


def is_large_enough(anchor: Point, release: Point,
                    min_size: float = DEFAULT_MIN_DRAG_SIZE) -> bool:
    """False when the drag is narrower or shorter than ``min_size``."""
    if abs(release.x - anchor.x) < min_size:
        return False
    if abs(release.y - anchor.y) < min_size:
        return False
    return True


def resolve_draft(scene: Scene, clicked_path: Optional[ClickedPath],
                  draft: Optional[Rect]) -> Scene:
    """
    Return the scene as it would look with ``draft`` added.

    The input scene is never modified, so this is safe to call every frame for
    a preview as well as once on release to commit.

    Args:
        scene: Current screens and patterns
        clicked_path: Hit-test result captured when the drag started
        draft: Drag rectangle in viewport coordinates, or None without a drag

    Raises:
        GeometryInvariantError: If ``clicked_path`` does not fit ``scene``
    """
    if draft is None:
        return scene

    if clicked_path is None:
        return scene.with_screen(draft)

    local_draft = to_local_chain(draft, path_frames(scene, clicked_path))
    return scene.with_pattern(local_draft)
