# ============================================================================
# QUERY BUILDER
# ============================================================================
# STATUS: Core - Named-parameter query strings for one table
# PURPOSE: Count, select, insert and update statements bound to a Table
# CREATED: 19 OCT 2026
# EXPORTS: QueryBuilder, QuerySet
# ============================================================================
"""
Query Builder.

Column order in every statement is the table's field order. Placeholders
are named after their column (:name), so insert columns and values pair
up by position and by name.

    count   SELECT COUNT(*) FROM user
    select  SELECT id, name FROM user /*condition*/
    insert  INSERT INTO user (id, name) VALUES (:id, :name)
    update  UPDATE user SET name=:name WHERE id=:id

The select ends with the condition marker; the runtime's condition()
replaces it with LIMIT, WHERE or ORDER BY text.
"""

from dataclasses import dataclass

from model_maker.core.contracts import CONDITION_MARKER
from model_maker.core.errors import InvalidTableError
from model_maker.core.models.table import Table


@dataclass(frozen=True)
class QuerySet:
    """The four statements generated for a table."""
    count: str
    select: str
    update: str
    insert: str


class QueryBuilder:
    """Builds the data-access statements of a table."""

    def __init__(self, condition_marker: str = CONDITION_MARKER):
        self.condition_marker = condition_marker

    def count(self, table: Table) -> str:
        return f"SELECT COUNT(*) FROM {table.name}"

    def select(self, table: Table) -> str:
        columns = ", ".join(table.column_names)
        return f"SELECT {columns} FROM {table.name} {self.condition_marker}"

    def insert(self, table: Table) -> str:
        columns = ", ".join(table.column_names)
        placeholders = ", ".join(f.placeholder for f in table.fields)
        return f"INSERT INTO {table.name} ({columns}) VALUES ({placeholders})"

    def update(self, table: Table) -> str:
        """
        Update keyed by the primary field.

        Raises:
            InvalidTableError: unless exactly one field is primary and
                at least one other field exists
        """
        primary = table.require_primary_field()
        assignments = ", ".join(
            f"{f.name}={f.placeholder}" for f in table.fields if f is not primary
        )
        if not assignments:
            raise InvalidTableError(table.name, "no columns besides the primary field to update")
        return (
            f"UPDATE {table.name} SET {assignments} "
            f"WHERE {primary.name}={primary.placeholder}"
        )

    def build(self, table: Table) -> QuerySet:
        return QuerySet(
            count=self.count(table),
            select=self.select(table),
            update=self.update(table),
            insert=self.insert(table),
        )


__all__ = ["QueryBuilder", "QuerySet"]
