# ============================================================================
# TABLE MODEL
# ============================================================================
# STATUS: Core model - One table descriptor
# PURPOSE: Ordered column set fed to the DDL and data-access generators
# CREATED: 19 OCT 2026
# EXPORTS: Table
# DEPENDENCIES: pydantic
# ============================================================================
"""
Table Model

The table name comes from the caller (--table), never from the type
name. Field order is declaration order of the surviving fields and is
the column order of every rendered statement.
"""

from typing import List, Optional

import pydantic
from pydantic import BaseModel

from model_maker.core.errors import InvalidTableError
from model_maker.core.models.field import Field


class Table(BaseModel):
    """Table descriptor built by TableBuilder."""

    name: str = pydantic.Field(..., min_length=1, description="SQL table name")
    fields: List[Field] = pydantic.Field(default_factory=list)

    model_config = {"frozen": False}

    @property
    def column_names(self) -> List[str]:
        """Column names in field order."""
        return [f.name for f in self.fields]

    @property
    def primary_fields(self) -> List[Field]:
        return [f for f in self.fields if f.primary]

    @property
    def primary_field(self) -> Optional[Field]:
        """The primary field if exactly one exists, else None."""
        primaries = self.primary_fields
        if len(primaries) == 1:
            return primaries[0]
        return None

    def require_primary_field(self) -> Field:
        """
        Return the single primary field.

        Raises:
            InvalidTableError: if zero or several fields are flagged primary
        """
        primaries = self.primary_fields
        if not primaries:
            raise InvalidTableError(
                self.name,
                "no field is flagged primary; exactly one primary field is required",
            )
        if len(primaries) > 1:
            names = ", ".join(f.name for f in primaries)
            raise InvalidTableError(
                self.name,
                f"several fields are flagged primary ({names}); composite keys are not supported",
            )
        return primaries[0]


__all__ = ["Table"]
