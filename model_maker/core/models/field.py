# ============================================================================
# FIELD MODEL
# ============================================================================
# STATUS: Core model - One column descriptor
# PURPOSE: Normalized result of parsing one field annotation
# CREATED: 19 OCT 2026
# EXPORTS: Field, GenOption
# DEPENDENCIES: pydantic
# ============================================================================
"""
Field Model

A Field is one column of the table being generated. It is produced by
the AnnotationParser from a raw annotation such as:

    db:"login" gen:"varchar(512),notnull,unique,index"

and consumed by both the DDL generator and the data-access generator.
"""

from typing import Optional

import pydantic
from pydantic import BaseModel

from model_maker.core.contracts import SENTINEL_COLUMN, OptionKind


class GenOption(BaseModel):
    """
    One token of a `gen` sub-annotation.

    kind=TYPE carries the SQL type literal, kind=FLAG a ColumnFlag
    keyword, kind=DEFAULT the default expression without its wrapper.
    """
    kind: OptionKind
    value: str

    model_config = {"frozen": True}


class Field(BaseModel):
    """
    Column descriptor.

    Maps to: one clause of CREATE TABLE and one column of every query.
    """

    # Identity
    name: str = pydantic.Field(..., min_length=1, description="Emitted column name")
    attribute: Optional[str] = pydantic.Field(
        default=None,
        description="Attribute name in the source declaration",
    )

    # Column definition
    type: str = pydantic.Field(default="", description="SQL type literal, verbatim")
    default: Optional[str] = pydantic.Field(default=None, description="SQL default expression")

    # Flags
    not_null: bool = False
    unique: bool = False
    auto_increment: bool = False
    primary: bool = False
    index: bool = False

    # Foreign key, inferred from id_<table> names
    foreign: bool = False
    foreign_table: Optional[str] = None

    model_config = {"frozen": False}

    @property
    def is_excluded(self) -> bool:
        """True for the sentinel column: the field never reaches the table."""
        return self.name == SENTINEL_COLUMN

    @property
    def placeholder(self) -> str:
        """Named query placeholder for this column."""
        return f":{self.name}"


__all__ = ["Field", "GenOption"]
