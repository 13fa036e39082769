# droste/domain/geometry/layout.py
"""
Flatten the self-similar structure into viewport rectangles for painting.

The structure is infinite in principle, so the walk stops at a maximum depth,
at rectangles too small to see, and after a fixed number of regions.
"""
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from droste.domain.geometry.frames import to_outer_rect
from droste.domain.models.geometry import Rect, boundaries_of
from droste.domain.models.scene import Scene


@dataclass(frozen=True)
class FrameRegion:
    """
    One rectangle to paint.

    Attributes:
        depth: 0 for a screen, n for a pattern copy nested n levels deep
        rect: Rectangle in viewport coordinates
        screen_index: Screen this copy is drawn inside
        path: Pattern indices leading to this copy
    """
    depth: int
    rect: Rect
    screen_index: int
    path: Tuple[int, ...] = ()


def _is_visible(rect: Rect, min_extent: float) -> bool:
    return rect.width >= min_extent and rect.height >= min_extent and not rect.is_degenerate()


def iter_frame_regions(scene: Scene, max_depth: int = 12, min_extent: float = 0.002,
                       max_regions: int = 2000) -> Iterator[FrameRegion]:
    """
    Yield every visible screen and pattern copy, outer regions first.

    Regions come out depth first in index order, so painting them in sequence
    puts every nested copy on top of its container. A region whose largest
    pattern copy would already be smaller than ``min_extent`` has no children
    worth converting, so its subtree is skipped without touching the patterns.

    Args:
        scene: Screens and patterns to lay out
        max_depth: Deepest pattern nesting level to emit
        min_extent: Smallest width or height, in viewport units, worth emitting
        max_regions: Upper bound on the number of regions emitted
    """
    patterns = [boundaries_of(pattern) for pattern in scene.patterns]
    max_scale_x = max((p.width for p in patterns), default=0.0)
    max_scale_y = max((p.height for p in patterns), default=0.0)

    emitted = 0
    for screen_index, screen in enumerate(scene.screens):
        stack: List[FrameRegion] = [
            FrameRegion(depth=0, rect=boundaries_of(screen), screen_index=screen_index)
        ]
        while stack:
            if emitted >= max_regions:
                return
            region = stack.pop()
            yield region
            emitted += 1

            depth = region.depth + 1
            # A screen still being dragged out may have no area yet
            if depth > max_depth or region.rect.is_degenerate():
                continue
            if region.rect.width * max_scale_x < min_extent or region.rect.height * max_scale_y < min_extent:
                continue
            children = []
            for k, pattern in enumerate(patterns):
                rect = to_outer_rect(pattern, region.rect)
                if _is_visible(rect, min_extent):
                    children.append(FrameRegion(depth, rect, screen_index, region.path + (k,)))
            # Reversed so the lowest pattern index is popped first
            stack.extend(reversed(children))
