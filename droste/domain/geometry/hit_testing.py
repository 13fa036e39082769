# droste/domain/geometry/hit_testing.py
"""
Locate a viewport point inside the self-similar structure.

Every pattern is visible inside every region, so each recursion level scans
the full pattern list again, one frame smaller each time.
"""
from typing import List, Optional, Sequence

from droste.domain.common.errors import GeometryInvariantError
from droste.domain.geometry.frames import to_local_frame, to_outer_chain
from droste.domain.models.geometry import Point, Rect, boundaries_of
from droste.domain.models.scene import ClickedPath, Scene

DEFAULT_MAX_DEPTH = 64


def _first_containing(rects: Sequence[Rect], point: Point) -> Optional[int]:
    for index, rect in enumerate(rects):
        if boundaries_of(rect).contains(point, strict=True):
            return index
    return None


def find_clicked_region(scene: Scene, point: Point,
                        max_depth: int = DEFAULT_MAX_DEPTH) -> Optional[ClickedPath]:
    """
    Find the deepest region of the recursive structure containing ``point``.

    Containment is strict and ties go to the lowest index, both for screens
    and for patterns at each level. The pattern chain stops after
    ``max_depth`` levels, since points sitting on a fixed point of a pattern's
    self-similar mapping would otherwise recurse forever.

    Args:
        scene: Screens and patterns to search
        point: Point in viewport coordinates
        max_depth: Maximum length of the returned nested path

    Returns:
        The located path, or None when no screen contains the point
    """
    screen_index = _first_containing(scene.screens, point)
    if screen_index is None:
        return None

    local = to_local_frame(point, boundaries_of(scene.screens[screen_index]))
    nested: List[int] = []
    while len(nested) < max_depth:
        pattern_index = _first_containing(scene.patterns, local)
        if pattern_index is None:
            break
        nested.append(pattern_index)
        local = to_local_frame(local, boundaries_of(scene.patterns[pattern_index]))

    return ClickedPath(screen_index=screen_index, nested_path=tuple(nested))


def path_frames(scene: Scene, path: ClickedPath) -> List[Rect]:
    """
    Return the chain of frames named by ``path``, outer to inner.

    The first entry is the screen in viewport coordinates. Each following
    entry is a pattern in the frame of the entry before it.

    Raises:
        GeometryInvariantError: If an index in the path is out of range
    """
    if not 0 <= path.screen_index < len(scene.screens):
        raise GeometryInvariantError(
            "Clicked path names a screen that does not exist",
            details={"screen_index": path.screen_index, "screens": len(scene.screens)}
        )
    frames = [boundaries_of(scene.screens[path.screen_index])]
    for k in path.nested_path:
        if not 0 <= k < len(scene.patterns):
            raise GeometryInvariantError(
                "Clicked path names a pattern that does not exist",
                details={"pattern_index": k, "patterns": len(scene.patterns)}
            )
        frames.append(boundaries_of(scene.patterns[k]))
    return frames


def resolve_path_rects(scene: Scene, path: ClickedPath) -> List[Rect]:
    """
    Return every region along ``path`` in viewport coordinates, outer to inner.

    Used to highlight the hovered region and to check that each level of a
    hit-test result really contains the point.
    """
    frames = path_frames(scene, path)
    return [to_outer_chain(frames[i], frames[:i]) for i in range(len(frames))]
