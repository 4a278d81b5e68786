# ============================================================================
# DATA-ACCESS CODE GENERATOR
# ============================================================================
# STATUS: Core - Generated module rendering with Jinja2
# PURPOSE: Render the DDL and the data-access module for one Table
# CREATED: 19 OCT 2026
# EXPORTS: DataAccessGenerator, RenderedArtifacts, snake_case
# DEPENDENCIES: jinja2
# ============================================================================
"""
Data-Access Code Generator.

Produces both artifacts of a run from a validated Table:
- ddl_text: the CREATE TABLE statement (TableToSQL)
- source_text: a Python module with four query constants and the
  select-limit, count, insert and update operations

Names derive from the type name: User gives USER_COUNT, user_count();
UserProfile gives USER_PROFILE_COUNT, user_profile_count().

Usage:
    generator = DataAccessGenerator(runtime_module="easydb")
    artifacts = generator.render(table, "User", import_from=".user")
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from jinja2 import Environment, BaseLoader, StrictUndefined

from model_maker.__version__ import __version__
from model_maker.core.codegen.queries import QueryBuilder, QuerySet
from model_maker.core.codegen.templates import MODULE_TEMPLATE
from model_maker.core.contracts import CONDITION_MARKER
from model_maker.core.logging import get_logger, ComponentType
from model_maker.core.models.field import Field
from model_maker.core.models.table import Table
from model_maker.core.schema.sql_generator import TableToSQL

logger = get_logger(__name__, ComponentType.GENERATOR)


_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def snake_case(name: str) -> str:
    """UserProfile -> user_profile, HTTPLog -> http_log"""
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    return _WORD_BOUNDARY.sub(r"\1_\2", name).lower()


def _python_string(value: str) -> str:
    """Double-quoted Python string literal."""
    return json.dumps(value, ensure_ascii=False)


@dataclass(frozen=True)
class RenderedArtifacts:
    """Rendered output of one generation run."""
    ddl_text: str
    source_text: str
    queries: QuerySet


class DataAccessGenerator:
    """
    Jinja2-based renderer for generated data-access modules.

    Can be reused across multiple renders.
    """

    def __init__(
        self,
        runtime_module: str = "easydb",
        condition_marker: str = CONDITION_MARKER,
        ddl_generator: Optional[TableToSQL] = None,
    ):
        self.runtime_module = runtime_module
        self.queries = QueryBuilder(condition_marker)
        self.ddl_generator = ddl_generator or TableToSQL()

        self._env = Environment(
            loader=BaseLoader(),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._env.filters["pystr"] = _python_string
        self._template = self._env.from_string(MODULE_TEMPLATE)

    # =========================================================================
    # RENDERING
    # =========================================================================

    def render(
        self,
        table: Table,
        type_name: str,
        import_from: Optional[str] = None,
        source_name: Optional[str] = None,
    ) -> RenderedArtifacts:
        """
        Render DDL and data-access source for a table.

        Args:
            table: Validated table
            type_name: Declared type the generated code binds to
            import_from: Module to import the type from; defaults to the
                snake-cased type name
            source_name: Declaration file name for the generated header

        Returns:
            RenderedArtifacts

        Raises:
            InvalidTableError: if the table has no single primary field
        """
        queries = self.queries.build(table)
        source_text = self.render_source(
            table, type_name, queries, import_from=import_from, source_name=source_name
        )
        ddl_text = self.ddl_generator.render(table)
        return RenderedArtifacts(ddl_text=ddl_text, source_text=source_text, queries=queries)

    def render_source(
        self,
        table: Table,
        type_name: str,
        queries: Optional[QuerySet] = None,
        import_from: Optional[str] = None,
        source_name: Optional[str] = None,
    ) -> str:
        """Render the generated module only."""
        if queries is None:
            queries = self.queries.build(table)

        context = self._template_context(table, type_name, queries, import_from, source_name)
        text = self._template.render(context)

        logger.debug(f"Rendered data access for {type_name} ({len(text)} chars)")
        return text

    # =========================================================================
    # CONTEXT
    # =========================================================================

    @staticmethod
    def constant_prefix(type_name: str) -> str:
        return snake_case(type_name).upper()

    @staticmethod
    def function_prefix(type_name: str) -> str:
        return snake_case(type_name)

    @staticmethod
    def _column(field: Field) -> Dict[str, Any]:
        return {
            "name": field.name,
            "attribute": field.attribute or field.name,
            "auto_increment": field.auto_increment,
        }

    def _template_context(
        self,
        table: Table,
        type_name: str,
        queries: QuerySet,
        import_from: Optional[str],
        source_name: Optional[str],
    ) -> Dict[str, Any]:
        primary = table.require_primary_field()
        return {
            "version": __version__,
            "source_name": source_name,
            "type_name": type_name,
            "table_name": table.name,
            "runtime": self.runtime_module,
            "import_from": import_from or snake_case(type_name),
            "const": self.constant_prefix(type_name),
            "func": self.function_prefix(type_name),
            "queries": queries,
            "columns": [self._column(f) for f in table.fields],
            "primary": self._column(primary),
        }


__all__ = ["DataAccessGenerator", "RenderedArtifacts", "snake_case"]
