from __future__ import annotations

from pathlib import Path

from droste.application import app
from droste.domain.models.geometry import Point
from droste.domain.services.i_config_repository_service import IConfigRepository
from droste.domain.services.i_logger_service import ILoggerService
from droste.domain.services.i_scene_service import ISceneService


def test_initialize_app_wires_services(tmp_path: Path) -> None:
    config_file = tmp_path / "droste_config.json"
    container = app.initialize_app(config_file=str(config_file))

    logger = container.resolve(ILoggerService)
    config = container.resolve(IConfigRepository)
    scene_service = container.resolve(ISceneService)

    assert scene_service is container.resolve(ISceneService)
    assert scene_service.logger is logger
    assert scene_service.settings == config.get_editor_settings()
    assert config_file.exists()

    scene_service.begin_drag(Point(0.1, 0.1))
    assert scene_service.end_drag(Point(0.5, 0.5)).is_success


def test_settings_from_file_reach_scene_service(tmp_path: Path) -> None:
    config_file = tmp_path / "droste_config.json"
    config_file.write_text('{"min_drag_size": 0.25}')

    container = app.initialize_app(config_file=str(config_file))
    assert container.resolve(ISceneService).settings.min_drag_size == 0.25


def test_set_container_replaces_shared_container(tmp_path: Path) -> None:
    container = app.initialize_app(config_file=str(tmp_path / "c.json"))
    app.set_container(container)
    try:
        assert app.get_container() is container
    finally:
        app.set_container(None)
