# ============================================================================
# TABLE MODEL BUILDER
# ============================================================================
# STATUS: Core - Fold declared fields into a Table
# PURPOSE: Parse, filter and validate the columns of one table
# CREATED: 19 OCT 2026
# EXPORTS: TableBuilder
# ============================================================================
"""
Table Model Builder.

For each declared field, in source order:
    - no annotation      -> skipped, never part of the table
    - annotation parsed  -> sentinel "-" skipped, anything else appended

A malformed annotation fails the whole build. Once folded, the table
must have exactly one primary field; the update statement is keyed on
it, so the invariant is checked here rather than in the generators.

Duplicate column names are not detected.
"""

from typing import Optional, Sequence

from model_maker.core.errors import MalformedAnnotationError
from model_maker.core.logging import get_logger, log_context, ComponentType
from model_maker.core.models.declaration import DeclaredField
from model_maker.core.models.table import Table
from model_maker.core.schema.annotation import AnnotationParser

logger = get_logger(__name__, ComponentType.BUILDER)


class TableBuilder:
    """Builds a validated Table from declared fields."""

    def __init__(self, parser: Optional[AnnotationParser] = None):
        self.parser = parser or AnnotationParser()

    def build(self, name: str, sources: Sequence[DeclaredField]) -> Table:
        """
        Build a table.

        Args:
            name: SQL table name
            sources: Declared fields in source order

        Returns:
            Table with surviving fields in source order

        Raises:
            MalformedAnnotationError: for the first bad annotation
            InvalidTableError: unless exactly one field is primary
        """
        table = Table(name=name)

        for source in sources:
            if not source.is_annotated:
                logger.debug(f"Skipping unannotated field {source.attribute}")
                continue

            with log_context(attribute=source.attribute):
                try:
                    field = self.parser.parse(source.annotation)
                except MalformedAnnotationError as e:
                    raise e.for_attribute(source.attribute) from e

                if field.is_excluded:
                    logger.debug(f"Excluding field {source.attribute} (sentinel column)")
                    continue

                field.attribute = source.attribute
                if not field.type:
                    logger.warning(
                        f"Field {source.attribute} has no gen annotation; "
                        f"column {field.name} is emitted without a type"
                    )
                table.fields.append(field)

        table.require_primary_field()

        logger.debug(
            f"Built table {table.name} with {len(table.fields)} columns",
            extra={"columns": table.column_names},
        )
        return table


__all__ = ["TableBuilder"]
