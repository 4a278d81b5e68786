# ============================================================================
# TABLE TO SQL GENERATOR
# ============================================================================
# STATUS: Core - DDL generation from the table model
# PURPOSE: Render a Table as one CREATE TABLE statement
# CREATED: 19 OCT 2026
# EXPORTS: TableToSQL
# ============================================================================
"""
Table to SQL Schema Generator.

Renders a Table as:

    CREATE TABLE user (
    	id bigint AUTO_INCREMENT NOT NULL,
    	PRIMARY KEY (id),
    	name varchar(512) NOT NULL
    );

Per field, in table order, the column definition is followed by its
sibling constraints:
    <name> <type> [AUTO_INCREMENT] [NOT NULL] [DEFAULT <expr>] [UNIQUE]
    PRIMARY KEY (<name>)                       if primary
    FOREIGN KEY (<name>) REFERENCES <t>(id)     if foreign
    INDEX (<name>)                             if index

Usage:
    generator = TableToSQL()
    ddl = generator.render(table)
"""

from typing import List

from model_maker.core.logging import get_logger, ComponentType
from model_maker.core.models.field import Field
from model_maker.core.models.table import Table
from model_maker.core.schema.ddl_utils import ColumnMarkers, ConstraintBuilder

logger = get_logger(__name__, ComponentType.GENERATOR)


class TableToSQL:
    """
    Convert a Table to DDL.

    Pure: the same table always renders to the same text.
    """

    INDENT = "\t"
    SEPARATOR = ",\n"

    # =========================================================================
    # COLUMN GENERATION
    # =========================================================================

    def column_definition(self, field: Field) -> str:
        """Column definition with its inline markers."""
        parts = [field.name]
        if field.type:
            parts.append(field.type)
        if field.auto_increment:
            parts.append(ColumnMarkers.AUTO_INCREMENT)
        if field.not_null:
            parts.append(ColumnMarkers.NOT_NULL)
        if field.default is not None:
            parts.append(f"{ColumnMarkers.DEFAULT} {field.default}")
        if field.unique:
            parts.append(ColumnMarkers.UNIQUE)
        return " ".join(parts)

    def field_clauses(self, field: Field) -> List[str]:
        """Column definition followed by the constraints it owns."""
        clauses = [self.column_definition(field)]
        if field.primary:
            clauses.append(ConstraintBuilder.primary_key(field.name))
        if field.foreign:
            clauses.append(ConstraintBuilder.foreign_key(field.name, field.foreign_table))
        if field.index:
            clauses.append(ConstraintBuilder.index(field.name))
        return clauses

    # =========================================================================
    # TABLE GENERATION
    # =========================================================================

    def render(self, table: Table) -> str:
        """
        Generate the CREATE TABLE statement.

        Args:
            table: Validated table

        Returns:
            Statement text, terminated by ";" and a newline
        """
        clauses: List[str] = []
        for field in table.fields:
            clauses.extend(self.field_clauses(field))

        body = self.SEPARATOR.join(f"{self.INDENT}{clause}" for clause in clauses)

        logger.debug(f"Generated DDL for {table.name} ({len(clauses)} clauses)")
        return f"CREATE TABLE {table.name} (\n{body}\n);\n"


__all__ = ["TableToSQL"]
