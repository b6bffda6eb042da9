"""
Project identity model.

A Project is the tenant workspace an index pattern belongs to. Three
reserved values are shared process-wide:
- EMPTY: no project could be determined
- ALL_ALIAS: the "all tenants" alias
- EMPTY_PROJECT: marker for a tenant that has no index patterns yet
"""

from __future__ import annotations

from dataclasses import dataclass

ALL_ALIAS_NAME = ".all"
EMPTY_PROJECT_NAME = ".empty-project"


@dataclass(frozen=True)
class Project:
    """A tenant project identified by name and an optional instance uid."""

    name: str
    uid: str | None = None

    @property
    def has_uid(self) -> bool:
        return self.uid is not None

    def __str__(self) -> str:
        return self.name if self.uid is None else f"{self.name}.{self.uid}"


EMPTY = Project("")
ALL_ALIAS = Project(ALL_ALIAS_NAME)
EMPTY_PROJECT = Project(EMPTY_PROJECT_NAME)
