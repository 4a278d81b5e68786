# ============================================================================
# INFRASTRUCTURE MODULE
# ============================================================================
# STATUS: Infrastructure - Source reading and artifact writing
# PURPOSE: File-system edges of the generation pipeline
# CREATED: 19 OCT 2026
# ============================================================================
"""
Infrastructure module for model_maker.

Provides:
- DeclarationReader / PythonDeclarationReader / YamlDeclarationReader:
  locate a declared type and its field annotations in Python source or
  a YAML schema file
- OutputWriter / atomic_write: write artifacts without ever leaving a
  half-written file

Usage:
    from model_maker.infrastructure import get_declaration_reader, OutputWriter

    declaration = get_declaration_reader("models/user.py").read("models/user.py", "User")
    OutputWriter().write("models/user.sql", ddl_text)
"""

from model_maker.infrastructure.declarations import (
    DeclarationReader,
    PythonDeclarationReader,
    YamlDeclarationReader,
    get_declaration_reader,
)
from model_maker.infrastructure.output import OutputWriter, atomic_write

__all__ = [
    "DeclarationReader",
    "PythonDeclarationReader",
    "YamlDeclarationReader",
    "get_declaration_reader",
    "OutputWriter",
    "atomic_write",
]
