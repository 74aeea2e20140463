"""Shared test fixtures and configuration."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from scout_elasticsearch.config.settings import Settings
from scout_elasticsearch.engines.elasticsearch import ElasticsearchEngine
from scout_elasticsearch.models.builder import SearchBuilder
from tests.fakes import Post, PostTable, make_response


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        elasticsearch={"index": "test-index"},
    )


@pytest.fixture
def client() -> MagicMock:
    """Stand-in for an Elasticsearch client."""
    mock = MagicMock()
    mock.search.return_value = make_response([])
    return mock


@pytest.fixture
def engine(client: MagicMock) -> ElasticsearchEngine:
    return ElasticsearchEngine(client, "test-index")


@pytest.fixture
def posts() -> list[Post]:
    return [
        Post(1, {"id": 1, "title": "First bug report"}),
        Post(2, {"id": 2, "title": "Second bug report"}),
        Post(3, {"id": 3, "title": "Feature request"}),
    ]


@pytest.fixture
def table(posts: list[Post]) -> PostTable:
    return PostTable(posts)


@pytest.fixture
def builder(table: PostTable, engine: ElasticsearchEngine) -> SearchBuilder:
    return SearchBuilder(table, "bug", engine=engine)
