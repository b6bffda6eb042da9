"""
Index pattern codec.

Converts between a Project and the index-pattern name generated for it:

    <prefix>.<name>.<uid>.*

An empty prefix drops the leading "<prefix>." segment. Names the codec
cannot decode are treated as user-authored patterns and returned verbatim
as the project name.

Usage:
    codec = IndexPatternCodec("cdm")
    codec.decode("cdm.foo.abc123.*")      # Project("foo", "abc123")
    codec.encode(Project("foo", "abc123"))  # "cdm.foo.abc123.*"
"""

from __future__ import annotations

import re

from tenancy_core.domain.project import ALL_ALIAS, EMPTY, EMPTY_PROJECT, Project

WILDCARD_SUFFIX = ".*"


class IndexPatternCodec:
    """
    Encodes and decodes index-pattern names for a fixed prefix.

    The compiled pattern and the prefix are set once in the constructor and
    only read afterwards, so one instance can be shared across threads.
    """

    def __init__(self, prefix: str | None = None):
        self._prefix = prefix if prefix and prefix.strip() else ""
        self._name_prefix = f"{self._prefix}." if self._prefix else ""
        # Matched with fullmatch; the uid may span any character, newlines included
        self._pattern = re.compile(
            (re.escape(self._prefix) + r"\." if self._prefix else "")
            + r"(?P<name>[a-zA-Z0-9-]*)\.(?P<uid>.+)\.\*",
            re.DOTALL,
        )

    @property
    def prefix(self) -> str:
        return self._prefix

    def decode(self, index_pattern_id: str | None) -> Project:
        """
        Decode an index-pattern name into a Project.

        Args:
            index_pattern_id: Raw index-pattern name.

        Returns:
            EMPTY for an empty or missing name, Project(name, uid) for a
            generated name, and Project(index_pattern_id) otherwise.
        """
        if not index_pattern_id:
            return EMPTY

        match = self._pattern.fullmatch(index_pattern_id)
        if match:
            return Project(match.group("name"), match.group("uid"))
        return Project(index_pattern_id)

    def encode(self, project: Project) -> str:
        """
        Format the index-pattern name for a Project.

        Args:
            project: Project to format.

        Returns:
            The index-pattern name.
        """
        if project == ALL_ALIAS:
            return ALL_ALIAS.name
        if project == EMPTY_PROJECT:
            # The marker name carries a leading "." that is replaced by the prefix
            return f"{self._name_prefix}{project.name[1:]}{WILDCARD_SUFFIX}"
        if project.uid is None:
            if project.name.endswith(WILDCARD_SUFFIX):
                return project.name
            return project.name + WILDCARD_SUFFIX
        return f"{self._name_prefix}{project.name}.{project.uid}{WILDCARD_SUFFIX}"

    def is_generated(self, index_pattern_id: str | None) -> bool:
        """Check whether a name follows the generated naming convention."""
        return bool(index_pattern_id) and self._pattern.fullmatch(index_pattern_id) is not None
