# ============================================================================
# NAME RULES
# ============================================================================
# STATUS: Foundation - Which names may reach generated SQL and Python
# PURPOSE: One definition of a valid SQL name, Python identifier and module path
# CREATED: 19 OCT 2026
# ============================================================================
"""
Name rules.

Table and column names are emitted verbatim into DDL, queries and the
generated module's docstring; type names, attribute names and module
paths are emitted verbatim into Python source. Each must be checked
before rendering.
"""

import keyword
import re

SQL_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


def is_sql_name(name: str) -> bool:
    """Table or column name: letters, digits and underscores."""
    return bool(SQL_NAME_PATTERN.match(name))


def is_identifier(name: str) -> bool:
    """Python identifier that is not a keyword."""
    return name.isidentifier() and not keyword.iskeyword(name)


def is_module_path(name: str) -> bool:
    """
    Importable module path: dotted identifiers, optionally led by dots
    for a relative import (".user", "app.models").
    """
    return all(is_identifier(part) for part in name.lstrip(".").split("."))


__all__ = ["SQL_NAME_PATTERN", "is_sql_name", "is_identifier", "is_module_path"]
