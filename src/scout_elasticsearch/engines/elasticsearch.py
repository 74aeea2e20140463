"""Elasticsearch engine — Bulk indexing and boolean full-text search.

Works with any client exposing the Elasticsearch ``bulk`` and ``search``
call shapes: ``elasticsearch.Elasticsearch`` or ``opensearchpy.OpenSearch``.
The client is built once by ``ElasticsearchProvider`` and shared by every
engine instance.

Query DSL sent for a builder with free text ``"bug"`` and ``where("status", "open")``::

    {"query": {"bool": {
        "must": {"query_string": {"query": "bug", "default_operator": "AND", "fuzziness": 1}},
        "filter": [{"bool": {"must": {"match": {"status": {"query": "open", "operator": "AND"}}}}}],
    }}}
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from scout_elasticsearch.engines.base import SearchEngine

if TYPE_CHECKING:
    from scout_elasticsearch.models.builder import SearchBuilder
    from scout_elasticsearch.models.searchable import ModelDescriptor, Searchable

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 10000
"""Hit cap for unpaginated searches without an explicit limit."""


class ElasticsearchEngine(SearchEngine):
    """Search engine backed by a single Elasticsearch index.

    Every write uses ``refresh=True`` so records are searchable as soon as
    the call returns. Errors raised by the client propagate unchanged.

    Args:
        client: An ``Elasticsearch``-compatible client instance.
        index: Name of the index all models are written to.
        include_type: Whether bulk metadata carries the model's search
            category as ``_type``. Only clusters that still have mapping
            types (6.x and earlier) accept it.
    """

    def __init__(self, client: Any, index: str, *, include_type: bool = False) -> None:
        self._client = client
        self._index = index
        self._include_type = include_type

    @property
    def client(self) -> Any:
        return self._client

    @property
    def index(self) -> str:
        return self._index

    # ── Indexing ─────────────────────────────────────────────────────────

    def update(self, models: Sequence[Searchable]) -> None:
        """Index the given records, skipping any with an empty document."""
        body: list[dict[str, Any]] = []
        for model in models:
            document = model.to_searchable_array()
            if not document:
                continue
            body.append({"index": self._metadata(model)})
            body.append(document)

        logger.debug("Bulk indexing %d documents into '%s'", len(body) // 2, self._index)
        self._client.bulk(body=body, refresh=True)

    def delete(self, models: Sequence[Searchable]) -> None:
        """Remove the given records from the index."""
        body = [{"delete": self._metadata(model)} for model in models]

        logger.debug("Bulk deleting %d documents from '%s'", len(body), self._index)
        self._client.bulk(body=body, refresh=True)

    # ── Search ───────────────────────────────────────────────────────────

    def search(self, builder: SearchBuilder) -> Any:
        """Run the builder's query, capped at ``builder.limit`` or 10000 hits."""
        return self._perform_search(
            builder,
            filters=builder.wheres,
            size=builder.limit or DEFAULT_SIZE,
        )

    def paginate(self, builder: SearchBuilder, per_page: int, page: int) -> Any:
        """Run the builder's query for one page and attach ``nbPages``.

        ``page`` is 1-based. Page 0 produces a negative offset, which is sent
        to the engine as is.
        """
        result = self._perform_search(
            builder,
            filters=builder.wheres,
            size=per_page,
            from_=page * per_page - per_page,
        )
        result["nbPages"] = math.ceil(self.get_total_count(result) / per_page)
        return result

    def _perform_search(
        self,
        builder: SearchBuilder,
        filters: dict[str, Any] | None = None,
        size: int | None = None,
        from_: int | None = None,
    ) -> Any:
        params: dict[str, Any] = {
            "index": self._index,
            "type": builder.model.searchable_as(),
            "body": self._build_query(builder.query, filters or {}),
        }
        if size is not None:
            params["size"] = size
        if from_ is not None:
            params["from"] = from_

        if builder.callback is not None:
            return _response_body(builder.callback(self._client, params))

        logger.debug(
            "Searching '%s' (type=%s, size=%s, from=%s)",
            self._index,
            params["type"],
            size,
            from_,
        )
        search_kwargs: dict[str, Any] = {"index": params["index"], "body": params["body"]}
        if size is not None:
            search_kwargs["size"] = size
        if from_ is not None:
            search_kwargs["from_"] = from_

        return _response_body(self._client.search(**search_kwargs))

    @staticmethod
    def _build_query(query: str, filters: dict[str, Any]) -> dict[str, Any]:
        """Build the boolean query: fuzzy conjunctive text plus exact-match filters."""
        filter_clauses = [
            {
                "bool": {
                    "must": {
                        "match": {
                            field: {
                                "query": value,
                                "operator": "AND",
                            }
                        }
                    }
                }
            }
            for field, value in filters.items()
        ]

        return {
            "query": {
                "bool": {
                    "must": {
                        "query_string": {
                            "query": query,
                            "default_operator": "AND",
                            "fuzziness": 1,
                        }
                    },
                    "filter": filter_clauses,
                }
            }
        }

    # ── Result mapping ───────────────────────────────────────────────────

    def map(self, results: Any, model: ModelDescriptor) -> list[Searchable]:
        """Map hits to persisted records in hit order.

        Records are fetched with one ``find_by_keys`` call. Hits whose record
        no longer exists in the primary store are dropped.
        """
        hits = results["hits"]["hits"]
        if not hits:
            return []

        keys = [hit["_id"] for hit in hits]
        records = {str(record.get_key()): record for record in model.find_by_keys(keys)}

        return [records[str(key)] for key in keys if str(key) in records]

    def map_ids(self, results: Any) -> list[Any]:
        return [hit["_id"] for hit in results["hits"]["hits"]]

    def get_total_count(self, results: Any) -> int:
        total = results["hits"]["total"]
        # 7.x+ reports {"value": n, "relation": "eq" | "gte"}
        if isinstance(total, dict):
            return total["value"]
        return total

    # ── Helpers ──────────────────────────────────────────────────────────

    def _metadata(self, model: Searchable) -> dict[str, Any]:
        metadata: dict[str, Any] = {"_index": self._index}
        if self._include_type:
            metadata["_type"] = model.searchable_as()
        metadata["_id"] = model.get_key()
        return metadata


def _response_body(response: Any) -> Any:
    # elasticsearch-py 8 wraps the body in a read-only ObjectApiResponse
    return getattr(response, "body", response)
