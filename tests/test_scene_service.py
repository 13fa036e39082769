from __future__ import annotations

import pytest

from droste.domain.models.geometry import Point, Rect
from droste.domain.models.scene import ClickedPath, DraftClick, EditorSettings, Scene
from droste.infrastructure.scene.scene_service import SceneService


@pytest.fixture
def service(logger) -> SceneService:
    return SceneService(logger=logger)


def drag(service: SceneService, start: tuple[float, float], end: tuple[float, float]):
    service.begin_drag(Point(*start))
    service.move_cursor(Point(*end))
    return service.end_drag(Point(*end))


def test_first_drag_creates_screen(service: SceneService) -> None:
    result = drag(service, (0.1, 0.1), (0.5, 0.5))
    assert result.is_success
    assert service.scene.screens == (Rect(0.1, 0.1, 0.5, 0.5),)
    assert service.scene.patterns == ()
    assert service.draft_click is None


def test_drag_inside_screen_creates_pattern(service: SceneService) -> None:
    drag(service, (0.1, 0.1), (0.5, 0.5))
    click = service.begin_drag(Point(0.2, 0.2))
    assert click.clicked_path == ClickedPath(0, ())

    result = service.end_drag(Point(0.3, 0.3))
    assert result.is_success
    assert len(service.scene.screens) == 1
    assert service.scene.patterns[0].as_tuple() == pytest.approx((0.25, 0.25, 0.5, 0.5))


def test_reset_clears_everything(service: SceneService) -> None:
    drag(service, (0.1, 0.1), (0.5, 0.5))
    drag(service, (0.2, 0.2), (0.3, 0.3))
    service.begin_drag(Point(0.6, 0.6))

    service.reset()
    assert service.scene == Scene()
    assert service.draft_click is None


def test_path_is_captured_at_press_time(service: SceneService) -> None:
    drag(service, (0.5, 0.5), (0.9, 0.9))
    # Press outside, release inside the existing screen
    result = drag(service, (0.1, 0.1), (0.7, 0.7))
    assert result.is_success
    assert service.scene.screens[1] == Rect(0.1, 0.1, 0.7, 0.7)
    assert service.scene.patterns == ()


@pytest.mark.parametrize("end", [(0.105, 0.5), (0.5, 0.105), (0.1, 0.1)])
def test_small_drags_are_discarded(service: SceneService, logger, end) -> None:
    drag(service, (0.1, 0.1), (0.5, 0.5))
    before = service.scene

    result = drag(service, (0.1, 0.1), end)
    assert result.is_failure
    assert result.error.code == "too_small"
    assert service.scene is before
    assert service.draft_click is None
    assert "Drag discarded, below minimum size" in logger.messages("debug")


def test_min_drag_size_comes_from_settings(logger) -> None:
    service = SceneService(logger=logger, settings=EditorSettings(min_drag_size=0.3))
    assert drag(service, (0.1, 0.1), (0.3, 0.3)).is_failure
    assert drag(service, (0.1, 0.1), (0.5, 0.5)).is_success


def test_end_without_drag_fails(service: SceneService) -> None:
    result = service.end_drag(Point(0.5, 0.5))
    assert result.is_failure
    assert result.error.code == "no_drag"


def test_cancel_drag_commits_nothing(service: SceneService) -> None:
    service.begin_drag(Point(0.1, 0.1))
    service.move_cursor(Point(0.6, 0.6))
    service.cancel_drag()
    assert service.draft_click is None
    assert service.end_drag(Point(0.6, 0.6)).is_failure
    assert service.scene == Scene()


def test_preview_follows_cursor_without_committing(service: SceneService) -> None:
    drag(service, (0.1, 0.1), (0.5, 0.5))
    committed = service.scene

    assert service.preview() is committed

    service.begin_drag(Point(0.2, 0.2))
    service.move_cursor(Point(0.3, 0.3))
    first = service.preview()
    second = service.preview()
    assert first == second
    assert first.patterns[0].as_tuple() == pytest.approx((0.25, 0.25, 0.5, 0.5))
    assert service.scene is committed

    service.move_cursor(Point(0.4, 0.4))
    assert service.preview().patterns[0].as_tuple() == pytest.approx((0.25, 0.25, 0.75, 0.75))


def test_preview_right_after_press_is_safe(service: SceneService) -> None:
    service.begin_drag(Point(0.3, 0.3))
    preview = service.preview()
    assert preview.screens == (Rect(0.3, 0.3, 0.3, 0.3),)


def test_move_without_drag_is_ignored(service: SceneService) -> None:
    service.move_cursor(Point(0.4, 0.4))
    assert service.draft_click is None


def test_listeners_are_notified(service: SceneService) -> None:
    seen: list[Scene] = []
    service.subscribe(seen.append)

    drag(service, (0.1, 0.1), (0.5, 0.5))
    service.reset()
    assert len(seen) == 2
    assert len(seen[0].screens) == 1
    assert seen[1] == Scene()

    service.unsubscribe(seen.append)
    drag(service, (0.1, 0.1), (0.5, 0.5))
    assert len(seen) == 2


def test_failing_listener_does_not_block_others(service: SceneService, logger) -> None:
    seen: list[Scene] = []

    def broken(scene: Scene) -> None:
        raise RuntimeError("boom")

    service.subscribe(broken)
    service.subscribe(seen.append)
    drag(service, (0.1, 0.1), (0.5, 0.5))

    assert len(seen) == 1
    assert any("boom" in m for m in logger.messages("error"))


def test_hovered_path_logs_depth_cutoff(logger) -> None:
    service = SceneService(logger=logger, settings=EditorSettings(max_hit_depth=4))
    drag(service, (0.0, 0.0), (1.0, 1.0))
    drag(service, (0.25, 0.25), (0.75, 0.75))

    path = service.hovered_path(Point(0.5, 0.5))
    assert path.depth == 4
    assert "Hit-test reached maximum depth" in logger.messages("debug")


def test_update_settings_applies_to_next_drag(service: SceneService) -> None:
    service.update_settings(EditorSettings(min_drag_size=0.5))
    assert drag(service, (0.1, 0.1), (0.5, 0.5)).is_failure


def test_draft_cursor_starts_at_anchor() -> None:
    draft = DraftClick(anchor=Point(0.2, 0.3), clicked_path=None)
    assert draft.cursor == Point(0.2, 0.3)
    assert DraftClick(Point(0.2, 0.3), None, Point(0.5, 0.5)).cursor == Point(0.5, 0.5)
