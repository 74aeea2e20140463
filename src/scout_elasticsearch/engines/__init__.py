"""Search engines — Pluggable drivers behind searchable models.

Built-in drivers:
  - elasticsearch: Elasticsearch (or OpenSearch) via bulk and query DSL requests
  - null: No-op driver for disabling search

Subclass ``SearchEngine`` and register it with ``EngineManager.extend()`` to
add your own driver.
"""

from scout_elasticsearch.engines.base import SearchEngine
from scout_elasticsearch.engines.elasticsearch import ElasticsearchEngine
from scout_elasticsearch.engines.manager import EngineManager
from scout_elasticsearch.engines.null import NullEngine

__all__ = ["ElasticsearchEngine", "EngineManager", "NullEngine", "SearchEngine"]
