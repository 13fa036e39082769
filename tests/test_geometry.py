from __future__ import annotations

import pytest

from droste.domain.common.errors import GeometryInvariantError
from droste.domain.geometry.frames import (
    to_local_chain,
    to_local_frame,
    to_local_rect,
    to_outer_chain,
    to_outer_frame,
    to_outer_rect,
)
from droste.domain.models.geometry import Point, Rect, boundaries_of, normalize_rect


def test_normalize_rect_any_drag_direction() -> None:
    expected = Rect(0.1, 0.2, 0.5, 0.6)
    assert normalize_rect(Point(0.1, 0.2), Point(0.5, 0.6)) == expected
    assert normalize_rect(Point(0.5, 0.6), Point(0.1, 0.2)) == expected
    assert normalize_rect(Point(0.1, 0.6), Point(0.5, 0.2)) == expected
    assert normalize_rect(Point(0.5, 0.2), Point(0.1, 0.6)) == expected


def test_normalize_rect_same_point_is_degenerate() -> None:
    rect = normalize_rect(Point(0.3, 0.3), Point(0.3, 0.3))
    assert rect == Rect(0.3, 0.3, 0.3, 0.3)
    assert rect.is_degenerate()
    assert rect.width == 0.0


def test_rect_contains_strict_and_inclusive() -> None:
    rect = Rect(0.1, 0.1, 0.5, 0.5)
    assert rect.contains(Point(0.3, 0.3))
    assert not rect.contains(Point(0.1, 0.3))
    assert not rect.contains(Point(0.5, 0.5))
    assert rect.contains(Point(0.1, 0.3), strict=False)
    assert not rect.contains(Point(0.6, 0.3), strict=False)


def test_boundaries_of_is_identity() -> None:
    rect = Rect(0.1, 0.2, 0.3, 0.4)
    assert boundaries_of(rect) is rect


def test_to_local_frame_matches_formula() -> None:
    container = Rect(0.1, 0.1, 0.5, 0.5)
    local = to_local_frame(Point(0.2, 0.3), container)
    assert local.x == pytest.approx(0.25)
    assert local.y == pytest.approx(0.5)


def test_to_local_rect_converts_both_corners() -> None:
    local = to_local_rect(Rect(0.2, 0.2, 0.3, 0.3), Rect(0.1, 0.1, 0.5, 0.5))
    assert local.as_tuple() == pytest.approx((0.25, 0.25, 0.5, 0.5))


@pytest.mark.parametrize(
    "container",
    [Rect(0.1, 0.1, 0.5, 0.5), Rect(-2.0, 3.0, 7.5, 3.25), Rect(0.333, 0.001, 0.334, 0.9)],
)
@pytest.mark.parametrize("point", [Point(0.0, 0.0), Point(0.42, 0.77), Point(-1.5, 12.0)])
def test_local_outer_round_trip(container: Rect, point: Point) -> None:
    back = to_outer_frame(to_local_frame(point, container), container)
    assert back.x == pytest.approx(point.x)
    assert back.y == pytest.approx(point.y)


def test_rect_round_trip() -> None:
    container = Rect(0.2, 0.4, 0.6, 0.9)
    rect = Rect(0.25, 0.5, 0.3, 0.7)
    back = to_outer_rect(to_local_rect(rect, container), container)
    assert back.as_tuple() == pytest.approx(rect.as_tuple())


def test_degenerate_container_fails_loudly() -> None:
    flat = Rect(0.1, 0.1, 0.1, 0.5)
    with pytest.raises(GeometryInvariantError) as excinfo:
        to_local_frame(Point(0.2, 0.2), flat)
    assert excinfo.value.details["container"] == flat.as_tuple()
    assert isinstance(excinfo.value, AssertionError)

    with pytest.raises(GeometryInvariantError):
        to_outer_frame(Point(0.2, 0.2), Rect(0.1, 0.1, 0.5, 0.1))


def test_chain_applies_containers_outer_to_inner() -> None:
    screen = Rect(0.1, 0.1, 0.5, 0.5)
    pattern = Rect(0.25, 0.25, 0.5, 0.5)
    point = Point(0.22, 0.22)

    step = to_local_frame(to_local_frame(point, screen), pattern)
    chained = to_local_chain(point, [screen, pattern])
    assert chained.x == pytest.approx(step.x)
    assert chained.y == pytest.approx(step.y)

    back = to_outer_chain(chained, [screen, pattern])
    assert back.x == pytest.approx(point.x)
    assert back.y == pytest.approx(point.y)


def test_chain_with_no_containers_is_identity() -> None:
    rect = Rect(0.1, 0.2, 0.3, 0.4)
    assert to_local_chain(rect, []) == rect
    assert to_outer_chain(rect, []) == rect
