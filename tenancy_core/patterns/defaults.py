"""
Default index-pattern resolution.

A dashboard keeps one config document per dashboard version, keyed by the
version string. When several exist, the document for the running version
wins; otherwise the most recent version does.
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger
from semver import Version

from tenancy_core.domain.documents import SearchHit
from tenancy_core.domain.exceptions import InvalidConfigVersionError


def parse_version(document_id: str) -> Version:
    """
    Parse a config document id as a semantic version.

    Raises:
        InvalidConfigVersionError: If the id is not a semantic version.
    """
    try:
        return Version.parse(document_id)
    except (ValueError, TypeError) as e:
        raise InvalidConfigVersionError(document_id) from e


class DefaultIndexPatternResolver:
    """
    Selects the default index pattern from versioned config documents.

    Usage:
        resolver = DefaultIndexPatternResolver("5.6.16")
        resolver.resolve(config_hits, fallback="project.*")
    """

    def __init__(self, current_version: str):
        self._current_version = parse_version(current_version)

    @property
    def current_version(self) -> Version:
        return self._current_version

    def resolve(self, hits: Sequence[SearchHit], fallback: str) -> str:
        """
        Resolve the default index pattern.

        Args:
            hits: Config documents, one per dashboard version.
            fallback: Value used when nothing is configured.

        Returns:
            The default index pattern. An exact match on the running version
            with an empty value yields "" rather than the fallback.

        Raises:
            InvalidConfigVersionError: If several documents are present and
                one of their ids is not a semantic version.
        """
        if not hits:
            return fallback

        if len(hits) == 1:
            value = hits[0].read_default_index()
            return value if value else fallback

        patterns: dict[Version, str] = {}
        for hit in hits:
            value = hit.read_default_index()
            patterns[parse_version(hit.id)] = fallback if value is None else value

        versions = sorted(patterns)
        if self._current_version in patterns:
            value = patterns[self._current_version]
            logger.debug(f"Using default index pattern of running version {self._current_version}")
            return value if value and value.strip() else ""

        latest = versions[-1]
        logger.debug(f"No config for version {self._current_version}, using {latest}")
        return patterns[latest]
