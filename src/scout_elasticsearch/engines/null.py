"""No-op search engine."""

from __future__ import annotations

from typing import Any

from scout_elasticsearch.engines.base import SearchEngine


class NullEngine(SearchEngine):
    """No-op engine. Indexes nothing and never finds anything."""

    def update(self, models: Any) -> None:
        pass

    def delete(self, models: Any) -> None:
        pass

    def search(self, builder: Any) -> dict[str, Any]:
        return {"hits": {"total": 0, "hits": []}}

    def paginate(self, builder: Any, per_page: int, page: int) -> dict[str, Any]:
        return {"hits": {"total": 0, "hits": []}, "nbPages": 0}

    def map(self, results: Any, model: Any) -> list[Any]:
        return []

    def map_ids(self, results: Any) -> list[Any]:
        return []

    def get_total_count(self, results: Any) -> int:
        return 0
