# ============================================================================
# CODEGEN MODULE
# ============================================================================
# STATUS: Core - Data-access query and module generation
# PURPOSE: Render named queries and operations bound to a Table
# CREATED: 19 OCT 2026
# ============================================================================

from model_maker.core.codegen.queries import QueryBuilder, QuerySet
from model_maker.core.codegen.source_generator import (
    DataAccessGenerator,
    RenderedArtifacts,
    snake_case,
)

__all__ = [
    "QueryBuilder",
    "QuerySet",
    "DataAccessGenerator",
    "RenderedArtifacts",
    "snake_case",
]
