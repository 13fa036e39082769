# droste/domain/geometry/frames.py
"""
Conversions between an outer coordinate frame and the local 0..1 frame of a
rectangle nested inside it.
"""
from typing import Iterable, TypeVar, Union

from droste.domain.common.errors import GeometryInvariantError
from droste.domain.models.geometry import Point, Rect

Shape = TypeVar('Shape', Point, Rect)


def _check_container(container: Rect) -> None:
    if container.is_degenerate():
        raise GeometryInvariantError(
            "Degenerate rectangle used as a coordinate frame",
            details={"container": container.as_tuple()}
        )


def to_local_frame(point: Point, container: Rect) -> Point:
    """
    Project a point from the container's enclosing frame into its 0..1 frame.

    Raises:
        GeometryInvariantError: If the container has zero width or height
    """
    _check_container(container)
    return Point(
        (point.x - container.min_x) / container.width,
        (point.y - container.min_y) / container.height,
    )


def to_local_rect(rect: Rect, container: Rect) -> Rect:
    """Apply to_local_frame to both corners of ``rect``."""
    top_left, bottom_right = rect.corners()
    local_tl = to_local_frame(top_left, container)
    local_br = to_local_frame(bottom_right, container)
    return Rect(local_tl.x, local_tl.y, local_br.x, local_br.y)


def to_outer_frame(point: Point, container: Rect) -> Point:
    """Inverse of to_local_frame."""
    _check_container(container)
    return Point(
        container.min_x + point.x * container.width,
        container.min_y + point.y * container.height,
    )


def to_outer_rect(rect: Rect, container: Rect) -> Rect:
    """Inverse of to_local_rect."""
    top_left, bottom_right = rect.corners()
    outer_tl = to_outer_frame(top_left, container)
    outer_br = to_outer_frame(bottom_right, container)
    return Rect(outer_tl.x, outer_tl.y, outer_br.x, outer_br.y)


def to_local_chain(shape: Shape, containers: Iterable[Rect]) -> Shape:
    """
    Convert a point or rectangle through a chain of nested containers.

    ``containers`` runs outer to inner. Each container is expressed in the
    frame established by the one before it.
    """
    convert = to_local_rect if isinstance(shape, Rect) else to_local_frame
    for container in containers:
        shape = convert(shape, container)
    return shape


def to_outer_chain(shape: Union[Point, Rect], containers: Iterable[Rect]) -> Union[Point, Rect]:
    """Inverse of to_local_chain; ``containers`` still runs outer to inner."""
    convert = to_outer_rect if isinstance(shape, Rect) else to_outer_frame
    for container in reversed(list(containers)):
        shape = convert(shape, container)
    return shape
