"""Elasticsearch provider — Builds the search client and registers the driver.

Run once at startup::

    manager = bootstrap(Settings.from_yaml("scout.yaml"))
    engine = manager.engine()

The client is constructed a single time; every engine handed out by the
manager shares it. Install the client library for the driver in use::

    pip install scout-elasticsearch             # elasticsearch-py
    pip install scout-elasticsearch[opensearch] # opensearch-py
"""

from __future__ import annotations

import logging
from typing import Any

from scout_elasticsearch.config.settings import ClientSettings, Settings
from scout_elasticsearch.engines.elasticsearch import ElasticsearchEngine
from scout_elasticsearch.engines.exceptions import ConfigurationError
from scout_elasticsearch.engines.manager import EngineManager
from scout_elasticsearch.observability.logging import bind_search_context, setup_logging

logger = logging.getLogger(__name__)

SUPPORTED_DRIVERS = ("elasticsearch", "opensearch")


def build_client(config: ClientSettings, driver: str = "elasticsearch") -> Any:
    """Create a search client from connection settings.

    TLS verification options are passed only when ``config.ssl.enabled`` is
    set; otherwise the client is built from the host list alone.

    Args:
        config: Host list and TLS settings.
        driver: ``"elasticsearch"`` or ``"opensearch"``.

    Returns:
        An ``Elasticsearch`` or ``OpenSearch`` client.

    Raises:
        ConfigurationError: If the driver is unknown or its package is missing.
    """
    if driver == "elasticsearch":
        try:
            from elasticsearch import Elasticsearch
        except ImportError as e:
            raise ConfigurationError(
                "elasticsearch package is required.  Install with: pip install elasticsearch"
            ) from e
        client_class: Any = Elasticsearch
    elif driver == "opensearch":
        try:
            from opensearchpy import OpenSearch
        except ImportError as e:
            raise ConfigurationError(
                "opensearch-py package is required.  Install with: pip install scout-elasticsearch[opensearch]"
            ) from e
        client_class = OpenSearch
    else:
        raise ConfigurationError(
            f"Unsupported search driver '{driver}'. Supported drivers: {list(SUPPORTED_DRIVERS)}"
        )

    client_kwargs: dict[str, Any] = {"hosts": config.hosts}
    if config.ssl.enabled:
        client_kwargs["verify_certs"] = True
        if config.ssl.certificate:
            client_kwargs["ca_certs"] = config.ssl.certificate

    client = client_class(**client_kwargs)
    logger.info(
        "Built %s client for %s (ssl verification: %s)",
        driver,
        ", ".join(config.hosts),
        "on" if config.ssl.enabled else "default",
    )
    return client


class ElasticsearchProvider:
    """Registers the Elasticsearch driver with an engine manager.

    Args:
        settings: Settings holding the client configuration and index name.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def boot(self, manager: EngineManager) -> Any:
        """Build the client once and register the driver factory.

        The driver is registered under ``settings.driver`` when that names a
        supported client, and under ``"elasticsearch"`` otherwise.

        Returns:
            The shared client instance.
        """
        driver = self._settings.driver if self._settings.driver in SUPPORTED_DRIVERS else "elasticsearch"
        client = build_client(self._settings.elasticsearch.config, driver=driver)

        def factory(settings: Settings) -> ElasticsearchEngine:
            return ElasticsearchEngine(
                client,
                settings.elasticsearch.index,
                include_type=settings.elasticsearch.include_type,
            )

        manager.extend(driver, factory)
        logger.info(
            "Search driver '%s' ready (index: %s)",
            driver,
            self._settings.elasticsearch.index,
        )
        return client


def bootstrap(settings: Settings | None = None) -> EngineManager:
    """Configure logging and create an engine manager with the Elasticsearch driver registered.

    Args:
        settings: Settings to use. Loaded from the environment if None.

    Returns:
        The engine manager.
    """
    settings = settings or Settings()
    setup_logging(settings.observability)
    bind_search_context(settings.driver, settings.elasticsearch.index)

    manager = EngineManager(settings)
    ElasticsearchProvider(settings).boot(manager)
    return manager
