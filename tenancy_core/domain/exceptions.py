"""
Standard exceptions for dashboard-tenancy.

This module defines the hierarchy of exceptions used across the package.
"""


class TenancyError(Exception):
    """Base exception for all dashboard-tenancy errors."""
    pass


class SearchError(TenancyError):
    """Error reported by the search collaborator."""
    pass


class IndexNotFoundError(SearchError):
    """The dashboard index being searched does not exist."""

    def __init__(self, index_name: str):
        super().__init__(f"Index '{index_name}' not found")
        self.index_name = index_name


class InvalidConfigVersionError(TenancyError):
    """A config document id is not a semantic version."""

    def __init__(self, document_id: str):
        super().__init__(f"Config document id '{document_id}' is not a valid version")
        self.document_id = document_id
