"""Tests for the engine manager and the null driver."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from scout_elasticsearch.config.settings import Settings
from scout_elasticsearch.engines.elasticsearch import ElasticsearchEngine
from scout_elasticsearch.engines.exceptions import DriverNotFoundError
from scout_elasticsearch.engines.manager import EngineManager
from scout_elasticsearch.engines.null import NullEngine
from scout_elasticsearch.models.builder import SearchBuilder
from tests.fakes import Post, PostTable

# ── Manager ──────────────────────────────────────────────────────────────────


class TestEngineManager:
    def test_null_driver_registered_by_default(self, settings: Settings) -> None:
        manager = EngineManager(settings)
        assert manager.registered_drivers == ["null"]
        assert isinstance(manager.engine("null"), NullEngine)

    def test_extend_and_resolve_default_driver(self, settings: Settings) -> None:
        client = MagicMock()
        manager = EngineManager(settings)
        manager.extend("elasticsearch", lambda s: ElasticsearchEngine(client, s.elasticsearch.index))

        engine = manager.engine()

        assert isinstance(engine, ElasticsearchEngine)
        assert engine.index == "test-index"
        assert engine.client is client

    def test_engine_is_built_per_call(self, settings: Settings) -> None:
        manager = EngineManager(settings)
        manager.extend("elasticsearch", lambda s: ElasticsearchEngine(MagicMock(), s.elasticsearch.index))

        assert manager.engine() is not manager.engine()

    def test_factory_receives_settings(self, settings: Settings) -> None:
        factory = MagicMock(return_value=NullEngine())
        manager = EngineManager(settings)
        manager.extend("custom", factory)

        manager.engine("custom")

        factory.assert_called_once_with(settings)

    def test_unknown_driver_raises(self, settings: Settings) -> None:
        manager = EngineManager(settings)
        with pytest.raises(DriverNotFoundError, match="Available drivers: \\['null'\\]"):
            manager.engine("algolia")

    def test_default_driver_unregistered_raises(self, settings: Settings) -> None:
        with pytest.raises(DriverNotFoundError, match="'elasticsearch'"):
            EngineManager(settings).engine()

    def test_overwrite_warns(self, settings: Settings, caplog: pytest.LogCaptureFixture) -> None:
        manager = EngineManager(settings)
        with caplog.at_level(logging.WARNING):
            manager.extend("null", lambda s: NullEngine())
        assert "Overwriting existing search driver: null" in caplog.text

    def test_settings_property(self, settings: Settings) -> None:
        assert EngineManager(settings).settings is settings


# ── Null engine ──────────────────────────────────────────────────────────────


class TestNullEngine:
    def test_writes_are_noops(self) -> None:
        engine = NullEngine()
        engine.update([Post(1, {"title": "a"})])
        engine.delete([Post(1)])

    def test_search_finds_nothing(self) -> None:
        engine = NullEngine()
        builder = SearchBuilder(PostTable([Post(1)]), "anything", engine=engine)

        assert builder.raw() == {"hits": {"total": 0, "hits": []}}
        assert builder.keys() == []
        assert builder.get() == []
        assert engine.get_total_count(engine.paginate(builder, 10, 1)) == 0

    def test_paginate_reports_zero_pages(self) -> None:
        engine = NullEngine()
        builder = SearchBuilder(PostTable(), "anything", engine=engine)

        assert builder.paginate(10, 1) == {"hits": {"total": 0, "hits": []}, "nbPages": 0}
