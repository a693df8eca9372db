"""Dependency injection container.

Registers factories for port types and resolves them lazily, so that
callers get a wired provider and tests can swap the transport.
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
        provider = container.resolve(GeocodingProviderPort)

        # Testing
        container = Container.create_default(config)
        container.register(HttpTransportPort, lambda: StaticHttpTransport(body))
        provider = container.resolve(GeocodingProviderPort)

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
        """Bind ``port_type`` (e.g. HttpTransportPort) to ``factory``.

        Binding a port again replaces the factory and forgets the instance
        built from the previous one, which is how tests swap the transport
        after create_default().
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the transport or provider bound to ``port_type``.

        Singleton bindings are built on first use, so resolving
        GeocodingProviderPort also builds the HttpTransportPort it needs.

        Raises:
            KeyError: If nothing is bound to ``port_type``.
        """
        with self._lock:
            factory = self._factories.get(port_type)
            if factory is None:
                raise KeyError(f"No binding for {port_type.__name__}")

            if port_type not in self._singleton_types:
                return factory()
            if port_type not in self._singletons:
                self._singletons[port_type] = factory()
            return self._singletons[port_type]

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Forget built instances; bindings are kept."""
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        The provider is built on first resolve, so a missing token only
        fails when the provider is actually requested.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.geocoding import ArcGISListGeocoderAdapter
        from .adapters.http import GeopyHttpTransport
        from .ports.geocoding import GeocodingProviderPort
        from .ports.http import HttpTransportPort

        config = config or get_config()
        container = cls(config=config)

        container.register(
            HttpTransportPort,
            lambda: GeopyHttpTransport(config.http),
        )
        container.register(
            GeocodingProviderPort,
            lambda: ArcGISListGeocoderAdapter(
                transport=container.resolve(HttpTransportPort),
                config=config.arcgis,
            ),
        )

        return container
