# droste/presentation/main_window.py
"""
Main editor window: toolbar, canvas and status bar.
"""
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QLabel

from droste.domain.common.errors import DomainError
from droste.domain.models.scene import ClickedPath, EditorSettings, Scene
from droste.domain.services.i_config_repository_service import IConfigRepository
from droste.domain.services.i_logger_service import ILoggerService
from droste.domain.services.i_scene_service import ISceneService
from droste.presentation.components.scene_canvas import SceneCanvas
from droste.presentation.components.ui_components import SceneToolbar


class MainWindow(QMainWindow):
    """Top-level window hosting the scene canvas."""

    def __init__(self, scene_service: ISceneService, config_repository: IConfigRepository,
                 logger: ILoggerService, parent=None):
        super().__init__(parent)
        self.scene_service = scene_service
        self.config_repository = config_repository
        self.logger = logger

        self.setWindowTitle("Droste Editor")
        self.resize(1024, 768)

        settings = config_repository.get_editor_settings()

        self.toolbar = SceneToolbar(self)
        self.toolbar.show_settings(settings)
        self.addToolBar(self.toolbar)

        self.canvas = SceneCanvas(scene_service, settings, logger, self)
        self.setCentralWidget(self.canvas)

        self.hover_label = QLabel()
        self.statusBar().addPermanentWidget(self.hover_label)
        self.statusBar().showMessage("Drag to draw a screen, drag inside a region to add a pattern")

        self.toolbar.reset_requested.connect(self.canvas.reset_scene)
        self.toolbar.min_drag_size_changed.connect(self._on_min_drag_size_changed)
        self.toolbar.max_hit_depth_changed.connect(self._on_max_hit_depth_changed)
        self.canvas.scene_changed.connect(self._on_scene_changed)
        self.canvas.hover_changed.connect(self._on_hover_changed)
        self.config_repository.register_observer(self._on_config_changed)

        self.canvas.setFocus()

    def _on_scene_changed(self, scene: Scene) -> None:
        self.toolbar.set_counts(len(scene.screens), len(scene.patterns))

    def _on_hover_changed(self, path: Optional[ClickedPath]) -> None:
        self.hover_label.setText(str(path) if path is not None else "")

    def _on_min_drag_size_changed(self, value: float) -> None:
        self.config_repository.set_min_drag_size(value).on_failure(self._on_settings_error)

    def _on_max_hit_depth_changed(self, depth: int) -> None:
        self.config_repository.set_max_hit_depth(depth).on_failure(self._on_settings_error)

    def _on_settings_error(self, error: DomainError) -> None:
        self.logger.warning(f"Setting not saved: {error}")
        self.statusBar().showMessage(str(error), 5000)

    def _on_config_changed(self) -> None:
        settings: EditorSettings = self.config_repository.get_editor_settings()
        self.scene_service.update_settings(settings)
        self.canvas.apply_settings(settings)
        self.toolbar.show_settings(settings)
        self.logger.info("Editor settings reloaded")

    def closeEvent(self, event):
        self.config_repository.unregister_observer(self._on_config_changed)
        super().closeEvent(event)
