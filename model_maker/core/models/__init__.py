# ============================================================================
# MODELS MODULE
# ============================================================================
# STATUS: Model exports
# PURPOSE: Central export point for all Pydantic models
# CREATED: 19 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

Declaration -> (parser) -> Field -> (builder) -> Table -> generators.
"""

from model_maker.core.models.field import Field, GenOption
from model_maker.core.models.table import Table
from model_maker.core.models.declaration import DeclaredField, Declaration

__all__ = [
    "Field",
    "GenOption",
    "Table",
    "DeclaredField",
    "Declaration",
]
