#droste/infrastructure/config/json_config_repository.py

"""
JSON-based implementation of the configuration repository.

Stores editor settings in a JSON file on disk.
"""
import os
import json
import threading
from typing import Dict, Any, Callable, List

from droste.domain.services.i_config_repository_service import IConfigRepository
from droste.domain.services.i_logger_service import ILoggerService
from droste.domain.common.result import Result
from droste.domain.common.errors import ConfigurationError, ValidationError
from droste.domain.models.scene import EditorSettings

DEFAULT_CONFIG: Dict[str, Any] = {
    "min_drag_size": 0.01,
    "max_hit_depth": 64,
    "max_render_depth": 12,
    "min_render_extent": 0.002,
    "max_render_regions": 2000,
    "frame_interval_ms": 16,
    "screen_color": "#3a7ca5",
    "pattern_colors": ["#81c3d7", "#d9dcd6", "#f4a259", "#bc4b51"],
    "draft_color": "#ff3b30",
    "app_version": "1.0.0",
}

_FLOAT_KEYS = ("min_drag_size", "min_render_extent")
_INT_KEYS = ("max_hit_depth", "max_render_depth", "max_render_regions", "frame_interval_ms")

# Inclusive bounds; out-of-range values are clamped
_INT_RANGES = {
    "max_hit_depth": (1, 1024),
    "max_render_depth": (0, 64),
    "max_render_regions": (1, 100000),
    "frame_interval_ms": (1, 1000),
}


class JsonConfigRepository(IConfigRepository):
    """
    JSON-based implementation of the configuration repository.

    Stores configuration in a JSON file and provides thread-safe access.
    """

    def __init__(self, config_file: str, logger: ILoggerService):
        """
        Initialize the repository.

        Args:
            config_file: Path to the JSON configuration file
            logger: Logger service
        """
        self.config_file = config_file
        self.logger = logger
        self._config_cache = None
        self._last_modified = 0.0
        self._lock = threading.RLock()
        self._observers: List[Callable[[], None]] = []

    def load_config(self, force_reload: bool = False) -> Result[Dict[str, Any]]:
        """
        Load configuration from storage.

        A missing file is created with the default settings. Missing keys are
        filled in from the defaults and numeric values are coerced to the
        expected type; either change is written back.

        Args:
            force_reload: Whether to force a reload from storage

        Returns:
            Result containing the configuration dictionary
        """
        with self._lock:
            # Reload if the file changed behind our back
            if os.path.exists(self.config_file):
                mtime = os.path.getmtime(self.config_file)
                if mtime > self._last_modified:
                    force_reload = True

            if self._config_cache is not None and not force_reload:
                return Result.ok(self._config_cache)

            if not os.path.exists(self.config_file):
                self.logger.warning("Config file not found. Creating new configuration with default settings.",
                                    path=self.config_file)
                config = json.loads(json.dumps(DEFAULT_CONFIG))
                save_result = self.save_config(config)
                if save_result.is_failure:
                    return Result.fail(save_result.error)
                return Result.ok(config)

            try:
                with open(self.config_file, "r") as f:
                    config = json.load(f)
            except (OSError, ValueError) as e:
                error = ConfigurationError(
                    message=f"Error loading config: {e}",
                    details={"path": self.config_file},
                    inner_error=e
                )
                self.logger.error(str(error))
                return Result.fail(error)

            if not isinstance(config, dict):
                return Result.fail(ConfigurationError(
                    message="Config file does not contain a JSON object",
                    details={"path": self.config_file}
                ))

            self.logger.info(f"Config loaded successfully from {self.config_file}")
            self._last_modified = os.path.getmtime(self.config_file)

            if self._normalize(config):
                save_result = self.save_config(config)
                if save_result.is_failure:
                    return Result.fail(save_result.error)

            self._config_cache = config
            return Result.ok(config)

    def _normalize(self, config: Dict[str, Any]) -> bool:
        """
        Merge missing defaults, coerce numeric types and enforce ranges.

        Sizes must be positive and depth or count settings are clamped to
        ``_INT_RANGES``. Returns True if anything changed.
        """
        updated = False
        for key, default_value in DEFAULT_CONFIG.items():
            if key not in config:
                config[key] = json.loads(json.dumps(default_value))
                updated = True

        for keys, kind in ((_FLOAT_KEYS, float), (_INT_KEYS, int)):
            for key in keys:
                value = config[key]
                if isinstance(value, kind) and not isinstance(value, bool):
                    continue
                try:
                    config[key] = kind(value)
                except (ValueError, TypeError):
                    self.logger.warning(f"Invalid value for {key}, using default", value=value)
                    config[key] = DEFAULT_CONFIG[key]
                updated = True

        for key in _FLOAT_KEYS:
            if not config[key] > 0.0:
                self.logger.warning(f"{key} must be positive, using default", value=config[key])
                config[key] = DEFAULT_CONFIG[key]
                updated = True

        for key, (low, high) in _INT_RANGES.items():
            clamped = max(low, min(config[key], high))
            if clamped != config[key]:
                self.logger.warning(f"{key} out of range, clamped", value=config[key], clamped=clamped)
                config[key] = clamped
                updated = True
        return updated

    def save_config(self, config: Dict[str, Any]) -> Result[bool]:
        """
        Save configuration to storage.

        Args:
            config: Configuration dictionary

        Returns:
            Result indicating success or failure
        """
        with self._lock:
            try:
                config_dir = os.path.dirname(self.config_file)
                if config_dir:
                    os.makedirs(config_dir, exist_ok=True)

                # Write to temporary file first, then swap it in
                temp_path = f"{self.config_file}.tmp"
                with open(temp_path, "w") as f:
                    json.dump(config, f, indent=4)
                os.replace(temp_path, self.config_file)

                self.logger.info(f"Config saved successfully to {self.config_file}")
                self._config_cache = config
                self._last_modified = os.path.getmtime(self.config_file)
            except (OSError, TypeError, ValueError) as e:
                error = ConfigurationError(
                    message=f"Failed to save config: {e}",
                    details={"path": self.config_file},
                    inner_error=e
                )
                self.logger.error(str(error))
                return Result.fail(error)

        self._notify_observers()
        return Result.ok(True)

    def set_global_setting(self, key: str, value: Any) -> Result[bool]:
        """
        Set a single setting and save.

        Args:
            key: Setting key
            value: Setting value

        Returns:
            Result indicating success or failure
        """
        with self._lock:
            config_result = self.load_config()
            if config_result.is_failure:
                return Result.fail(config_result.error)

            config = config_result.value
            config[key] = value
            return self.save_config(config)

    def get_editor_settings(self) -> EditorSettings:
        """
        Get the typed editor settings.

        Returns:
            Current editor settings, or the defaults if the file is unreadable
        """
        with self._lock:
            config_result = self.load_config()
            if config_result.is_failure:
                self.logger.error(f"Using default settings: {config_result.error}")
                return EditorSettings()
            return EditorSettings.from_config(config_result.value)

    def set_min_drag_size(self, value: float) -> Result[bool]:
        """
        Set the smallest drag extent that creates a region.

        Args:
            value: New minimum size, a positive number in normalized units

        Returns:
            Result indicating success or failure
        """
        try:
            value = float(value)
        except (ValueError, TypeError):
            return Result.fail(ValidationError("Invalid minimum drag size, must be a number"))
        if value <= 0.0:
            return Result.fail(ValidationError(
                "Minimum drag size must be positive",
                details={"value": value}
            ))
        return self.set_global_setting("min_drag_size", value)

    def set_max_hit_depth(self, depth: int) -> Result[bool]:
        """
        Set how many nesting levels the hit-tester follows.

        Args:
            depth: New maximum depth, clamped to 1..1024

        Returns:
            Result indicating success or failure
        """
        try:
            depth = int(depth)
        except (ValueError, TypeError):
            return Result.fail(ValidationError("Invalid depth value, must be an integer"))
        low, high = _INT_RANGES["max_hit_depth"]
        depth = max(low, min(depth, high))
        return self.set_global_setting("max_hit_depth", depth)

    def register_observer(self, callback: Callable[[], None]) -> None:
        """
        Register a callback function to be notified of config changes.

        Args:
            callback: Function to call when config changes
        """
        with self._lock:
            if callback not in self._observers:
                self._observers.append(callback)
                self.logger.debug(f"Observer registered: {callback.__qualname__}")

    def unregister_observer(self, callback: Callable[[], None]) -> None:
        """
        Unregister a previously registered observer callback.

        Args:
            callback: Previously registered callback function
        """
        with self._lock:
            if callback in self._observers:
                self._observers.remove(callback)
                self.logger.debug(f"Observer unregistered: {callback.__qualname__}")

    def _notify_observers(self) -> None:
        """Call all registered observer functions."""
        with self._lock:
            observers = self._observers.copy()

        for callback in observers:
            try:
                callback()
            except Exception as e:
                self.logger.error(f"Error in config observer {callback.__qualname__}: {e}")
