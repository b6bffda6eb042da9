"""
Index-pattern naming and default resolution for dashboard tenants.

This package provides:
- IndexPatternCodec: Project <-> index-pattern name conversion
- extract_projects: projects behind a tenant's generated index patterns
- DefaultIndexPatternResolver: version-aware default index pattern
- IndexPatternService: the above wired to a search client
"""

from .codec import IndexPatternCodec
from .defaults import DefaultIndexPatternResolver
from .extraction import extract_projects
from .service import IndexPatternService

__all__ = [
    "IndexPatternCodec",
    "DefaultIndexPatternResolver",
    "extract_projects",
    "IndexPatternService",
]
