"""Elasticsearch driver for searchable models."""

from scout_elasticsearch.engines import ElasticsearchEngine, EngineManager, NullEngine, SearchEngine
from scout_elasticsearch.models import ModelDescriptor, Searchable, SearchBuilder
from scout_elasticsearch.provider import ElasticsearchProvider, bootstrap, build_client

__version__ = "0.1.0"

__all__ = [
    "ElasticsearchEngine",
    "ElasticsearchProvider",
    "EngineManager",
    "ModelDescriptor",
    "NullEngine",
    "SearchBuilder",
    "SearchEngine",
    "Searchable",
    "bootstrap",
    "build_client",
]
