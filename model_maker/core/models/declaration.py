# ============================================================================
# DECLARATION MODEL
# ============================================================================
# STATUS: Core model - Declaration reader output
# PURPOSE: Source-format independent view of one declared record type
# CREATED: 19 OCT 2026
# EXPORTS: DeclaredField, Declaration
# DEPENDENCIES: pydantic
# ============================================================================
"""
Declaration Model

What a DeclarationReader hands to the pipeline: the declared type's
fields in source order, each with its raw annotation string (or None
when the field carries no annotation), plus enough about the source
module to import the type from generated code.
"""

from pathlib import Path
from typing import List, Optional

import pydantic
from pydantic import BaseModel


class DeclaredField(BaseModel):
    """One field of a declared type as found in source."""

    attribute: str = pydantic.Field(..., description="Field name in source")
    annotation: Optional[str] = pydantic.Field(
        default=None,
        description="Raw annotation string, None if the field has none",
    )

    model_config = {"frozen": True}

    @property
    def is_annotated(self) -> bool:
        return self.annotation is not None


class Declaration(BaseModel):
    """A declared record type and where it lives."""

    type_name: str
    module_name: str = pydantic.Field(..., description="Source module name (file stem)")
    source_path: Path
    is_package: bool = pydantic.Field(
        default=False,
        description="True when the source directory is a Python package",
    )
    fields: List[DeclaredField] = pydantic.Field(default_factory=list)

    @property
    def import_from(self) -> str:
        """Module reference generated code imports the type from."""
        if self.is_package:
            return f".{self.module_name}"
        return self.module_name


__all__ = ["DeclaredField", "Declaration"]
