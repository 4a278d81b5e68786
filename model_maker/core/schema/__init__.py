# ============================================================================
# SCHEMA MODULE
# ============================================================================
# STATUS: Core - Annotation grammar, table model building, DDL generation
# PURPOSE: Turn declared field annotations into a Table and its DDL
# CREATED: 19 OCT 2026
# ============================================================================

from model_maker.core.schema.annotation import AnnotationParser, parse_annotation
from model_maker.core.schema.builder import TableBuilder
from model_maker.core.schema.ddl_utils import ColumnMarkers, ConstraintBuilder
from model_maker.core.schema.sql_generator import TableToSQL

__all__ = [
    # Parsing
    "AnnotationParser",
    "parse_annotation",
    # Model building
    "TableBuilder",
    # Generator
    "TableToSQL",
    # Utilities
    "ColumnMarkers",
    "ConstraintBuilder",
]
