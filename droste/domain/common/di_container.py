#droste/domain/common/di_container.py

"""
Simple dependency injection container for the editor.

Services are registered against their interface type, either as a shared
instance or as a factory invoked on first resolution.
"""
from typing import Dict, Any, Type, TypeVar, Callable, Set


T = TypeVar('T')
TBase = TypeVar('TBase')


class DIContainer:
    """
    Simple dependency injection container.

    Manages service registrations and handles dependency resolution.
    Factory registrations are singletons: the first resolved instance is cached.
    """

    def __init__(self):
        """Initialize the container with empty registrations."""
        self._instance_registrations: Dict[type, Any] = {}
        self._factory_registrations: Dict[type, Callable[[], Any]] = {}
        self._resolving: Set[type] = set()  # Types currently being resolved

    def register_instance(self, base_type: Type[TBase], instance: TBase) -> None:
        """
        Register an instance to be returned whenever the base_type is requested.

        Args:
            base_type: The type to register (typically an interface)
            instance: The instance to return
        """
        self._factory_registrations.pop(base_type, None)
        self._instance_registrations[base_type] = instance

    def register_factory(self, base_type: Type[TBase], factory: Callable[[], TBase]) -> None:
        """
        Register a factory function that will be called to create the instance.

        Args:
            base_type: The type to register (typically an interface)
            factory: A function that creates and returns an instance
        """
        self._instance_registrations.pop(base_type, None)
        self._factory_registrations[base_type] = factory

    def is_registered(self, base_type: type) -> bool:
        """Check whether a type has an instance or factory registration."""
        return base_type in self._instance_registrations or base_type in self._factory_registrations

    def resolve(self, base_type: Type[T]) -> T:
        """
        Resolve a type to its registered instance, creating it on first use.

        Args:
            base_type: The type to resolve

        Returns:
            An instance of the requested type

        Raises:
            ValueError: If the type is not registered or there's a circular dependency
        """
        if base_type in self._resolving:
            raise ValueError(f"Circular dependency detected while resolving {base_type.__name__}")

        if base_type in self._instance_registrations:
            return self._instance_registrations[base_type]

        if base_type in self._factory_registrations:
            self._resolving.add(base_type)
            try:
                instance = self._factory_registrations[base_type]()
            finally:
                self._resolving.remove(base_type)
            self._instance_registrations[base_type] = instance
            return instance

        raise ValueError(f"No registration found for {base_type.__name__}")
