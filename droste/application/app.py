#droste/application/app.py

import os
import logging
from typing import Optional

from droste.domain.common.di_container import DIContainer
from droste.domain.services.i_logger_service import ILoggerService
from droste.domain.services.i_config_repository_service import IConfigRepository
from droste.domain.services.i_scene_service import ISceneService

from droste.infrastructure.logging.logger_service import ConsoleLoggerService
from droste.infrastructure.config.json_config_repository import JsonConfigRepository
from droste.infrastructure.scene.scene_service import SceneService

DEFAULT_CONFIG_FILE = "droste_config.json"


def initialize_app(config_file: Optional[str] = None,
                   log_level: int = logging.INFO) -> DIContainer:
    """
    Build the container with every editor service registered.

    Args:
        config_file: Settings file; defaults to droste_config.json in the working directory
        log_level: Level for the application logger

    Returns:
        The populated container
    """
    container = DIContainer()

    # Core services
    logger = ConsoleLoggerService(level=log_level)
    container.register_instance(ILoggerService, logger)

    if config_file is None:
        config_file = os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)
    config_repo = JsonConfigRepository(config_file, logger)
    container.register_instance(IConfigRepository, config_repo)

    # Scene state
    container.register_factory(
        ISceneService,
        lambda: SceneService(
            logger=container.resolve(ILoggerService),
            settings=container.resolve(IConfigRepository).get_editor_settings()
        )
    )

    logger.info("Application dependencies initialized", config=config_file)

    return container


_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    global _container
    if _container is None:
        _container = initialize_app()
    return _container


def set_container(container: Optional[DIContainer]) -> None:
    """Replace the shared container, e.g. after parsing command line options."""
    global _container
    _container = container
