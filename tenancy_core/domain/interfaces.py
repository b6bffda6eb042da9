"""
Service interfaces (Protocols) for dashboard-tenancy.

This module defines the contract of the search collaborator the core
consumes. Any backend that can list the documents of one kind stored in a
dashboard index can satisfy it.
"""

from typing import Protocol, runtime_checkable

from tenancy_core.domain.documents import SearchResponse


@runtime_checkable
class SearchClient(Protocol):
    """Interface for fetching documents from a dashboard index."""

    def search(self, index_name: str, document_type: str) -> SearchResponse:
        """
        Fetch every document of one kind from a dashboard index.

        Args:
            index_name: Name of the dashboard index (collection).
            document_type: Document kind, e.g. "index-pattern" or "config".

        Returns:
            SearchResponse: Ordered hits and their total count. An existing
            index with no matching documents yields zero hits.

        Raises:
            IndexNotFoundError: If the index does not exist.
        """
        ...
