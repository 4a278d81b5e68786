# ============================================================================
# CORE MODULE
# ============================================================================
# STATUS: Core module initialization
# PURPOSE: Export contracts, errors, models, schema and codegen
# CREATED: 19 OCT 2026
# ============================================================================

from model_maker.core.contracts import ColumnFlag, ExitCode, OptionKind
from model_maker.core.errors import (
    ModelMakerError,
    MissingArgumentError,
    InvalidArgumentError,
    SourceFileNotFoundError,
    SourceParseError,
    TypeNotFoundError,
    MalformedAnnotationError,
    InvalidTableError,
    OutputWriteError,
)
from model_maker.core.models import Field, GenOption, Table, DeclaredField, Declaration
from model_maker.core.schema import AnnotationParser, TableBuilder, TableToSQL
from model_maker.core.codegen import DataAccessGenerator, RenderedArtifacts

__all__ = [
    # Enums
    "ColumnFlag",
    "ExitCode",
    "OptionKind",
    # Errors
    "ModelMakerError",
    "MissingArgumentError",
    "InvalidArgumentError",
    "SourceFileNotFoundError",
    "SourceParseError",
    "TypeNotFoundError",
    "MalformedAnnotationError",
    "InvalidTableError",
    "OutputWriteError",
    # Models
    "Field",
    "GenOption",
    "Table",
    "DeclaredField",
    "Declaration",
    # Generation
    "AnnotationParser",
    "TableBuilder",
    "TableToSQL",
    "DataAccessGenerator",
    "RenderedArtifacts",
]
