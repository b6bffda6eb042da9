"""
Index pattern service.

Wires the search collaborator to the codec, the project extraction and the
default resolver for use by request-handling code.

Usage:
    setup_logging()
    service = IndexPatternService(QdrantSearchClient())
    projects = service.get_projects_from_index_patterns(".kibana.tenant")
    default = service.get_default_index_pattern(".kibana.tenant", "project.*")
"""

from __future__ import annotations

from loguru import logger

from tenancy_core.config import Settings, settings as default_settings
from tenancy_core.domain.documents import CONFIG_TYPE, INDEX_PATTERN_TYPE
from tenancy_core.domain.exceptions import IndexNotFoundError
from tenancy_core.domain.interfaces import SearchClient
from tenancy_core.domain.project import Project
from tenancy_core.patterns.codec import IndexPatternCodec
from tenancy_core.patterns.defaults import DefaultIndexPatternResolver
from tenancy_core.patterns.extraction import extract_projects


class IndexPatternService:
    """
    Resolves tenant projects and default index patterns from a dashboard index.

    All state is fixed at construction; instances are safe to share.
    """

    def __init__(self, client: SearchClient, config: Settings | None = None):
        config = config or default_settings
        self._client = client
        self._codec = IndexPatternCodec(config.PROJECT_PREFIX)
        self._resolver = DefaultIndexPatternResolver(config.DASHBOARD_VERSION)

    @property
    def codec(self) -> IndexPatternCodec:
        return self._codec

    def get_projects_from_index_patterns(self, dashboard_index: str) -> set[Project]:
        """
        Determine the projects behind the generated index patterns of a tenant.

        Args:
            dashboard_index: The tenant's dashboard index.

        Returns:
            The distinct projects found.

        Raises:
            IndexNotFoundError: If the dashboard index does not exist.
        """
        response = self._client.search(dashboard_index, INDEX_PATTERN_TYPE)
        hits = response.hits if response.total_hits > 0 else []
        return extract_projects(hits, self._codec, index_name=dashboard_index)

    def get_project_from_index_pattern(self, index_pattern_id: str | None) -> Project:
        return self._codec.decode(index_pattern_id)

    def format_index_pattern(self, project: Project) -> str:
        return self._codec.encode(project)

    def get_default_index_pattern(self, dashboard_index: str, fallback: str) -> str:
        """
        Get the default index pattern configured for a tenant.

        Args:
            dashboard_index: The tenant's dashboard index.
            fallback: Value to use when no default is configured.

        Returns:
            The default index pattern, or the fallback when the dashboard
            index does not exist yet.
        """
        try:
            response = self._client.search(dashboard_index, CONFIG_TYPE)
        except IndexNotFoundError:
            logger.debug(f"Dashboard index '{dashboard_index}' not found, using '{fallback}'")
            return fallback
        hits = response.hits if response.total_hits > 0 else []
        return self._resolver.resolve(hits, fallback)
