"""Searchable model protocols.

Engines are generic over any record type that can describe itself to the
index.  Models implement ``Searchable``; the class-level lookup used to turn
hits back into records implements ``ModelDescriptor``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Searchable(Protocol):
    """A record that can be written to the search index."""

    def to_searchable_array(self) -> dict[str, Any]:
        """Return the document to index. An empty mapping means "do not index"."""
        ...

    def searchable_as(self) -> str:
        """Return the search category (mapping type) the record is indexed under."""
        ...

    def get_key(self) -> Any:
        """Return the primary key, used as the document ``_id``."""
        ...


@runtime_checkable
class ModelDescriptor(Protocol):
    """Class-level access to a searchable model's primary store."""

    def searchable_as(self) -> str:
        """Return the search category shared by every record of this model."""
        ...

    def find_by_keys(self, keys: list[Any]) -> Iterable[Searchable]:
        """Fetch every persisted record whose primary key is in ``keys``.

        Called at most once per mapped result set. Records that no longer
        exist are simply absent from the returned iterable.
        """
        ...
