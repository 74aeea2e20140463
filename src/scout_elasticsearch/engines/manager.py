"""Engine Manager — Registration and resolution of search drivers.

Drivers are registered by name with a factory that receives the settings and
returns a ready engine. Providers call ``extend()`` once at startup; the
application asks for an engine whenever it needs one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from scout_elasticsearch.config.settings import Settings
from scout_elasticsearch.engines.base import SearchEngine
from scout_elasticsearch.engines.exceptions import DriverNotFoundError
from scout_elasticsearch.engines.null import NullEngine

logger = logging.getLogger(__name__)

EngineFactory = Callable[[Settings], SearchEngine]


class EngineManager:
    """Registry of search driver factories.

    The ``null`` driver is always available. Each call to ``engine()``
    invokes the driver's factory, so callers get a fresh engine bound to
    the current settings.

    Example:
        >>> manager = EngineManager(settings)
        >>> manager.extend("elasticsearch", lambda s: ElasticsearchEngine(client, s.elasticsearch.index))
        >>> engine = manager.engine()

    Args:
        settings: Settings passed to every factory. Loaded from the
            environment if None.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()
        self._factories: dict[str, EngineFactory] = {
            "null": lambda settings: NullEngine(),
        }

    @property
    def settings(self) -> Settings:
        return self._settings

    def extend(self, name: str, factory: EngineFactory) -> None:
        """Register a driver factory.

        Args:
            name: Unique driver name.
            factory: Callable building an engine from the settings.
        """
        if name in self._factories:
            logger.warning("Overwriting existing search driver: %s", name)
        self._factories[name] = factory
        logger.info("Registered search driver: %s", name)

    def engine(self, name: str | None = None) -> SearchEngine:
        """Build an engine for the named driver.

        Args:
            name: The driver name. Defaults to ``settings.driver``.

        Returns:
            A new engine instance.

        Raises:
            DriverNotFoundError: If no driver is registered under this name.
        """
        name = name or self._settings.driver
        if name not in self._factories:
            raise DriverNotFoundError(
                f"No search driver registered with name '{name}'. "
                f"Available drivers: {list(self._factories.keys())}"
            )
        return self._factories[name](self._settings)

    @property
    def registered_drivers(self) -> list[str]:
        """List all registered driver names."""
        return list(self._factories.keys())
