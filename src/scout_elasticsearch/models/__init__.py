"""Searchable model contracts and the search builder."""

from scout_elasticsearch.models.builder import SearchBuilder
from scout_elasticsearch.models.searchable import ModelDescriptor, Searchable

__all__ = ["ModelDescriptor", "SearchBuilder", "Searchable"]
