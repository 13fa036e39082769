#!/usr/bin/env python3
"""
Entry point for the Droste editor.

Sets up logging and services, then runs the Qt event loop.
"""
import argparse
import logging
import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication

from droste.application import app
from droste.domain.services.i_config_repository_service import IConfigRepository
from droste.domain.services.i_logger_service import ILoggerService
from droste.domain.services.i_scene_service import ISceneService
from droste.presentation.main_window import MainWindow
from droste.utils.logging_config import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="droste-editor",
        description="Draw nested, self-similar rectangles."
    )
    parser.add_argument("--config", default=None,
                        help="Settings file (default: droste_config.json in the working directory)")
    parser.add_argument("--debug", action="store_true", help="Log debug messages to the console")
    parser.add_argument("--log-dir", default=None, help="Directory for log files")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    log_level = logging.DEBUG if args.debug else logging.INFO
    setup_logging(log_level=log_level, log_dir=args.log_dir)

    container = app.initialize_app(config_file=args.config, log_level=log_level)
    app.set_container(container)

    qt_app = QApplication(sys.argv[:1])
    qt_app.setApplicationName("Droste Editor")

    window = MainWindow(
        scene_service=container.resolve(ISceneService),
        config_repository=container.resolve(IConfigRepository),
        logger=container.resolve(ILoggerService)
    )
    window.show()

    return qt_app.exec()


if __name__ == "__main__":
    sys.exit(main())
