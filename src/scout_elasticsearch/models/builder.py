"""Search builder — the query object handed to search engines."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from scout_elasticsearch.engines.exceptions import EngineError
from scout_elasticsearch.models.searchable import ModelDescriptor, Searchable

if TYPE_CHECKING:
    from scout_elasticsearch.engines.base import SearchEngine

SearchCallback = Callable[[Any, dict[str, Any]], Any]
"""Custom search hook: receives ``(client, params)`` and returns the raw response."""


class SearchBuilder:
    """Collects free text, exact-match filters and a result cap for one search.

    Example:
        >>> builder = SearchBuilder(Post, "bug", engine=manager.engine())
        >>> posts = builder.where("status", "open").take(20).get()

    Args:
        model: Descriptor of the model being searched.
        query: Free-text query string.
        callback: Optional hook that issues the search itself.
        engine: Engine used by the terminal operations.
    """

    def __init__(
        self,
        model: ModelDescriptor,
        query: str = "",
        callback: SearchCallback | None = None,
        engine: SearchEngine | None = None,
    ) -> None:
        self.model = model
        self.query = query
        self.callback = callback
        self.wheres: dict[str, Any] = {}
        self.limit: int | None = None
        self._engine = engine

    def where(self, field: str, value: Any) -> SearchBuilder:
        """Add an exact-match filter on ``field``."""
        self.wheres[field] = value
        return self

    def take(self, limit: int) -> SearchBuilder:
        """Cap the number of hits returned by ``raw()``, ``keys()`` and ``get()``."""
        self.limit = limit
        return self

    # ── Terminal operations ──────────────────────────────────────────────

    def raw(self) -> Any:
        """Return the engine's raw search response."""
        return self.engine.search(self)

    def keys(self) -> list[Any]:
        """Return the identifiers of the matching documents, in hit order."""
        return self.engine.keys(self)

    def get(self) -> list[Searchable]:
        """Return the matching persisted records, in hit order."""
        return self.engine.get(self)

    def paginate(self, per_page: int = 15, page: int = 1) -> Any:
        """Return the raw response for one page of results."""
        return self.engine.paginate(self, per_page, page)

    @property
    def engine(self) -> SearchEngine:
        if self._engine is None:
            raise EngineError("SearchBuilder has no engine bound. Pass engine= when constructing it.")
        return self._engine
