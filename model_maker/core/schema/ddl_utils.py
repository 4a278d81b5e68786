# ============================================================================
# DDL UTILITIES
# ============================================================================
# STATUS: Core - Shared clause builders for SQL DDL generation
# PURPOSE: Column markers and table-level constraint clauses
# CREATED: 19 OCT 2026
# EXPORTS: ColumnMarkers, ConstraintBuilder
# ============================================================================
"""
DDL Utilities - Shared SQL Generation Patterns.

Every optional clause of a CREATE TABLE statement is produced here, so
the generator itself is a single pass of flag checks.

Identifiers are emitted exactly as declared; they are validated by the
annotation grammar ([A-Za-z0-9_]+) before they get here.

Usage:
    from model_maker.core.schema.ddl_utils import ConstraintBuilder

    ConstraintBuilder.primary_key("id")          # PRIMARY KEY (id)
    ConstraintBuilder.foreign_key("id_user", "user")
"""


class ColumnMarkers:
    """Inline markers appended to a column definition."""
    AUTO_INCREMENT = "AUTO_INCREMENT"
    NOT_NULL = "NOT NULL"
    DEFAULT = "DEFAULT"
    UNIQUE = "UNIQUE"


class ConstraintBuilder:
    """
    Builder for table-level constraint clauses.

    All methods are static and return clause text without indentation
    or separators.
    """

    # Column referenced by inferred foreign keys
    REFERENCED_COLUMN = "id"

    @staticmethod
    def primary_key(column: str) -> str:
        return f"PRIMARY KEY ({column})"

    @staticmethod
    def foreign_key(column: str, table: str, referenced: str = REFERENCED_COLUMN) -> str:
        return f"FOREIGN KEY ({column}) REFERENCES {table}({referenced})"

    @staticmethod
    def index(column: str) -> str:
        return f"INDEX ({column})"


__all__ = ["ColumnMarkers", "ConstraintBuilder"]
