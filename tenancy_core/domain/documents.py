"""
Documents fetched from a tenant's dashboard index.

The search collaborator returns these models; nothing in the core ever
writes them back.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, Field

# Document kinds stored in a dashboard index
INDEX_PATTERN_TYPE = "index-pattern"
CONFIG_TYPE = "config"

DEFAULT_INDEX_FIELD = "defaultIndex"


class SearchHit(BaseModel):
    """A single document returned by a search.

    Attributes:
        id: Document identifier. The raw index-pattern name for
            index-pattern documents, a semantic version for config documents.
        source: Raw JSON body, if the backend returned one.
    """

    id: str
    source: str | None = None

    model_config = {"frozen": True}

    def read_default_index(self) -> str | None:
        """
        Read the `defaultIndex` field from the document body.

        Returns:
            The field value, "" when the field is present but null, or None
            when the body is missing, is not a JSON object, or the field is
            absent or not a string.
        """
        if not self.source:
            return None
        try:
            body = json.loads(self.source)
        except json.JSONDecodeError:
            return None
        if not isinstance(body, dict):
            return None
        if DEFAULT_INDEX_FIELD not in body:
            return None
        value = body[DEFAULT_INDEX_FIELD]
        if value is None:
            return ""
        return value if isinstance(value, str) else None


class SearchResponse(BaseModel):
    """Ordered result of a search against one dashboard index."""

    total_hits: int = 0
    hits: list[SearchHit] = Field(default_factory=list)

    model_config = {"frozen": True}

    @classmethod
    def of(cls, hits: list[SearchHit]) -> "SearchResponse":
        """Build a response whose total equals the number of hits."""
        return cls(total_hits=len(hits), hits=list(hits))
