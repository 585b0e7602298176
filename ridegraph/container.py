"""Dependency injection container.

This module provides a small DI container without external frameworks.
Ports are bound to factories, resolved lazily, and can be swapped in
tests (e.g. an InMemoryRecordSource instead of the CSV file).
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(RideAnalyticsService)

        # Testing
        container = Container.create_default()
        container.register(RecordSourcePort, InMemoryRecordSource.cycle)
        service = container.resolve(RideAnalyticsService)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Re-registering a type drops any singleton already built for it.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_all(self) -> None:
        """Clear all registrations and singletons."""
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        The service is registered as a non-singleton so that it always
        picks up the current record source and presenter bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.presenter import TextReportPresenter
        from .adapters.records import CSVRecordSource
        from .ports.presenter import ReportPresenterPort
        from .ports.records import RecordSourcePort
        from .services import RideAnalyticsService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            RecordSourcePort,
            lambda: CSVRecordSource(config.dataset),
        )
        container.register(ReportPresenterPort, TextReportPresenter)

        def create_ride_analytics() -> RideAnalyticsService:
            return RideAnalyticsService(
                record_source=container.resolve(RecordSourcePort),
                presenter=container.resolve(ReportPresenterPort),
                top_k=config.analytics.top_k,
                workers=config.analytics.workers,
            )

        container.register(
            RideAnalyticsService, create_ride_analytics, singleton=False
        )

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container (creates one if needed)."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
