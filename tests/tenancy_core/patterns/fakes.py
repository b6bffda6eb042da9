"""
Fake search collaborator for testing.
"""

from __future__ import annotations

import json

from tenancy_core.domain.documents import SearchHit, SearchResponse
from tenancy_core.domain.exceptions import IndexNotFoundError
from tenancy_core.domain.interfaces import SearchClient


class FakeSearchClient(SearchClient):
    def __init__(self, indices: dict[str, dict[str, list[SearchHit]]] | None = None):
        self.indices = indices or {}
        self.calls = []

    def add(self, index_name: str, document_type: str, doc_id: str, body: dict | None = None):
        docs = self.indices.setdefault(index_name, {}).setdefault(document_type, [])
        docs.append(SearchHit(id=doc_id, source=json.dumps(body) if body is not None else None))
        return self

    def search(self, index_name: str, document_type: str) -> SearchResponse:
        self.calls.append((index_name, document_type))
        if index_name not in self.indices:
            raise IndexNotFoundError(index_name)
        return SearchResponse.of(self.indices[index_name].get(document_type, []))


def index_patterns(*ids: str) -> list[SearchHit]:
    return [SearchHit(id=i) for i in ids]


def config_doc(version: str, default_index: str | None = None) -> SearchHit:
    body = {"buildNum": 15000}
    if default_index is not None:
        body["defaultIndex"] = default_index
    return SearchHit(id=version, source=json.dumps(body))
