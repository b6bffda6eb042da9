"""
Qdrant-backed search collaborator.

Each dashboard index is stored as one Qdrant collection. Dashboard
documents are points whose payload carries the document kind, the
document id and the raw JSON body:

    {"type": "index-pattern", "doc_id": "cdm.foo.abc123.*", "source": "{...}"}

Usage:
    client = QdrantSearchClient()
    response = client.search(".kibana.tenant", INDEX_PATTERN_TYPE)
"""

from __future__ import annotations

import json

from loguru import logger
from qdrant_client import QdrantClient, models
from qdrant_client.http.exceptions import UnexpectedResponse

from tenancy_core.config import Settings, settings as default_settings
from tenancy_core.domain.documents import SearchHit, SearchResponse
from tenancy_core.domain.exceptions import IndexNotFoundError

TYPE_FIELD = "type"
ID_FIELD = "doc_id"
SOURCE_FIELD = "source"


def create_qdrant_client(config: Settings | None = None) -> QdrantClient:
    """
    Create a Qdrant client for a local or cloud deployment.

    Args:
        config: Settings to connect with. Defaults to the global settings.

    Returns:
        QdrantClient: A connected client.
    """
    config = config or default_settings
    if config.USE_QDRANT_CLOUD:
        client = QdrantClient(url=config.QDRANT_CLOUD_URL, api_key=config.QDRANT_APIKEY)
        uri = config.QDRANT_CLOUD_URL
    else:
        client = QdrantClient(host=config.QDRANT_DATABASE_HOST, port=config.QDRANT_DATABASE_PORT)
        uri = f"{config.QDRANT_DATABASE_HOST}:{config.QDRANT_DATABASE_PORT}"

    logger.info(f"Connected to Qdrant at {uri}")
    return client


class QdrantSearchClient:
    """
    SearchClient implementation over Qdrant collections.

    The underlying client is created lazily on first use unless one is
    injected.
    """

    def __init__(self, client: QdrantClient | None = None, config: Settings | None = None):
        self._client = client
        self._config = config or default_settings

    def _get_client(self) -> QdrantClient:
        """Get Qdrant client (lazy initialization)."""
        if self._client is None:
            self._client = create_qdrant_client(self._config)
        return self._client

    def search(self, index_name: str, document_type: str) -> SearchResponse:
        """
        Fetch every document of one kind from a dashboard index.

        Args:
            index_name: Collection holding the tenant's dashboard documents.
            document_type: Value of the payload "type" field to match.

        Returns:
            SearchResponse: Hits in scroll order.

        Raises:
            IndexNotFoundError: If the collection does not exist.
            UnexpectedResponse: For any other backend failure.
        """
        client = self._get_client()
        if not client.collection_exists(collection_name=index_name):
            raise IndexNotFoundError(index_name)

        scroll_filter = models.Filter(
            must=[
                models.FieldCondition(
                    key=TYPE_FIELD,
                    match=models.MatchValue(value=document_type),
                )
            ]
        )

        hits: list[SearchHit] = []
        offset = None
        try:
            while True:
                records, offset = client.scroll(
                    collection_name=index_name,
                    scroll_filter=scroll_filter,
                    limit=self._config.QDRANT_SCROLL_LIMIT,
                    offset=offset,
                    with_payload=True,
                    with_vectors=False,
                )
                hits.extend(self._to_hit(record) for record in records)
                if offset is None:
                    break
        except UnexpectedResponse as e:
            if e.status_code == 404:
                raise IndexNotFoundError(index_name) from e
            logger.exception(f"Search for '{document_type}' in '{index_name}' failed")
            raise

        logger.debug(f"Found {len(hits)} '{document_type}' documents in '{index_name}'")
        return SearchResponse.of(hits)

    @staticmethod
    def _to_hit(record: models.Record) -> SearchHit:
        payload = record.payload or {}
        doc_id = payload.get(ID_FIELD)
        if doc_id is None:
            # Points written without a doc_id fall back to the point id
            doc_id = str(record.id)
        source = payload.get(SOURCE_FIELD)
        if isinstance(source, dict):
            source = json.dumps(source)
        return SearchHit(id=str(doc_id), source=source)
