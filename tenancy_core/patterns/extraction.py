"""
Project set extraction from index-pattern documents.
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from tenancy_core.domain.documents import SearchHit
from tenancy_core.domain.project import ALL_ALIAS, Project
from tenancy_core.patterns.codec import IndexPatternCodec


def extract_projects(
    hits: Iterable[SearchHit],
    codec: IndexPatternCodec,
    index_name: str | None = None,
) -> set[Project]:
    """
    Determine the projects behind the index patterns generated for a tenant.

    Index patterns a user created by hand do not follow the generated
    naming convention and are ignored. The all-tenants alias is kept.

    Args:
        hits: Index-pattern documents from the tenant's dashboard index.
        codec: Codec for the configured prefix.
        index_name: Dashboard index the hits came from, for diagnostics.

    Returns:
        The distinct projects found.
    """
    projects: set[Project] = set()
    seen = 0
    for hit in hits:
        seen += 1
        project = codec.decode(hit.id)
        if project.name != hit.id or project == ALL_ALIAS:
            projects.add(project)
        # else a user created index-pattern

    if seen == 0:
        logger.debug(f"No index-patterns found in the dashboard index '{index_name}'")

    return projects
