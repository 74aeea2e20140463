"""Base search engine — Abstract interface for all search drivers.

Every driver must implement this interface to back searchable models.
The engine is responsible for:
  1. Writing records to, and removing them from, the index
  2. Executing builder queries (whole result sets and single pages)
  3. Mapping raw responses back to identifiers, counts and records
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from scout_elasticsearch.models.builder import SearchBuilder
    from scout_elasticsearch.models.searchable import ModelDescriptor, Searchable


class SearchEngine(ABC):
    """Abstract base class for search drivers.

    All drivers must implement:
      - update() / delete(): Sync records with the index
      - search() / paginate(): Execute a builder and return the raw response
      - map() / map_ids() / get_total_count(): Read a raw response

    Engines hold no per-call state. Each operation builds its request from
    scratch, so one instance may serve many builders.
    """

    @abstractmethod
    def update(self, models: Sequence[Searchable]) -> None:
        """Add or replace the given records in the index."""

    @abstractmethod
    def delete(self, models: Sequence[Searchable]) -> None:
        """Remove the given records from the index."""

    @abstractmethod
    def search(self, builder: SearchBuilder) -> Any:
        """Execute the builder's query.

        Args:
            builder: The query to run.

        Returns:
            The raw engine response.
        """

    @abstractmethod
    def paginate(self, builder: SearchBuilder, per_page: int, page: int) -> Any:
        """Execute the builder's query for a single page.

        Args:
            builder: The query to run.
            per_page: Page size, at least 1.
            page: 1-based page number.

        Returns:
            The raw engine response.
        """

    @abstractmethod
    def map(self, results: Any, model: ModelDescriptor) -> list[Searchable]:
        """Map a raw response to persisted records, in hit order."""

    @abstractmethod
    def map_ids(self, results: Any) -> list[Any]:
        """Pluck the hit identifiers from a raw response, in hit order."""

    @abstractmethod
    def get_total_count(self, results: Any) -> int:
        """Return the total hit count reported in a raw response."""

    def keys(self, builder: SearchBuilder) -> list[Any]:
        """Search and pluck the identifiers in one step."""
        return self.map_ids(self.search(builder))

    def get(self, builder: SearchBuilder) -> list[Searchable]:
        """Search and map the response to records in one step.

        Convenience method that calls search() and then maps the response
        with the builder's model.
        """
        return self.map(self.search(builder), builder.model)
