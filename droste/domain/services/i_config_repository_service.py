# droste/domain/services/i_config_repository_service.py
"""
Configuration repository interface for editor settings.

Defines the contract for storing and retrieving editor configuration. Only
settings live here; the edited scene itself is never persisted.
"""
from abc import ABC, abstractmethod
from typing import Dict, Any, Callable

from droste.domain.common.result import Result
from droste.domain.models.scene import EditorSettings


class IConfigRepository(ABC):
    """
    Interface for configuration repository.

    Defines methods for loading, saving, and accessing configuration settings.
    """

    @abstractmethod
    def load_config(self, force_reload: bool = False) -> Result[Dict[str, Any]]:
        """
        Load configuration from storage.

        Args:
            force_reload: Whether to force a reload from storage

        Returns:
            Result containing the configuration dictionary
        """
        pass

    @abstractmethod
    def save_config(self, config: Dict[str, Any]) -> Result[bool]:
        """
        Save configuration to storage.

        Args:
            config: Configuration dictionary

        Returns:
            Result indicating success or failure
        """
        pass

    @abstractmethod
    def set_global_setting(self, key: str, value: Any) -> Result[bool]:
        """
        Set a single setting and save.

        Args:
            key: Setting key
            value: Setting value

        Returns:
            Result indicating success or failure
        """
        pass

    @abstractmethod
    def get_editor_settings(self) -> EditorSettings:
        """
        Get the typed editor settings, falling back to defaults on error.

        Returns:
            Current editor settings
        """
        pass

    @abstractmethod
    def set_min_drag_size(self, value: float) -> Result[bool]:
        """
        Set the smallest drag extent, in normalized units, that creates a region.

        Args:
            value: New minimum size

        Returns:
            Result indicating success or failure
        """
        pass

    @abstractmethod
    def set_max_hit_depth(self, depth: int) -> Result[bool]:
        """
        Set how many levels of nesting the hit-tester follows.

        Args:
            depth: New maximum depth

        Returns:
            Result indicating success or failure
        """
        pass

    @abstractmethod
    def register_observer(self, callback: Callable[[], None]) -> None:
        """Register a callback to be notified of config changes."""
        pass

    @abstractmethod
    def unregister_observer(self, callback: Callable[[], None]) -> None:
        """Unregister a previously registered observer callback."""
        pass
