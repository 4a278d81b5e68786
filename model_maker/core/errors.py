# ============================================================================
# ERROR TAXONOMY
# ============================================================================
# STATUS: Foundation - Exceptions raised by the generation pipeline
# PURPOSE: Distinct, programmatically detectable failure kinds with exit codes
# CREATED: 19 OCT 2026
# ============================================================================
"""
Exceptions for model_maker.

Every failure the pipeline can report derives from ModelMakerError and
carries the exit code the CLI returns for it. Callers that embed the
pipeline catch the specific subclass; the CLI catches the base class.
"""

from typing import Optional

from model_maker.core.contracts import ExitCode


class ModelMakerError(Exception):
    """Base exception for generation failures."""

    exit_code: ExitCode = ExitCode.FAILURE

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingArgumentError(ModelMakerError):
    """Raised when a required flag is empty."""

    exit_code = ExitCode.MISSING_ARGUMENT

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"missing required argument: --{argument}")


class InvalidArgumentError(ModelMakerError):
    """Raised when a flag or its environment default has an unusable value."""

    exit_code = ExitCode.INVALID_ARGUMENT

    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        super().__init__(f"invalid argument --{argument}: {reason}")


class SourceFileNotFoundError(ModelMakerError):
    """Raised when the declaration file does not exist or cannot be read."""

    exit_code = ExitCode.FILE_NOT_FOUND

    def __init__(self, path: str, reason: str = "does not exist"):
        self.path = path
        super().__init__(f"{path} {reason}")


class SourceParseError(ModelMakerError):
    """Raised when the declaration file cannot be parsed."""

    exit_code = ExitCode.SOURCE_PARSE_ERROR

    def __init__(self, path: str, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"cannot parse {path}: {detail}")


class TypeNotFoundError(ModelMakerError):
    """Raised when the named type is not declared in the file."""

    exit_code = ExitCode.TYPE_NOT_FOUND

    def __init__(self, type_name: str, path: str):
        self.type_name = type_name
        self.path = path
        super().__init__(f"type {type_name} not found in {path}")


class MalformedAnnotationError(ModelMakerError):
    """Raised when a field annotation violates the annotation grammar."""

    exit_code = ExitCode.MALFORMED_ANNOTATION

    def __init__(
        self,
        message: str,
        annotation: Optional[str] = None,
        attribute: Optional[str] = None,
    ):
        self.reason = message
        self.annotation = annotation
        self.attribute = attribute
        super().__init__(self._describe())

    def _describe(self) -> str:
        text = self.reason
        if self.annotation is not None:
            text = f"{text} in annotation {self.annotation!r}"
        if self.attribute:
            text = f"field {self.attribute}: {text}"
        return text

    def for_attribute(self, attribute: str) -> "MalformedAnnotationError":
        """Copy of this error with the source attribute name attached."""
        return MalformedAnnotationError(self.reason, self.annotation, attribute)


class InvalidTableError(ModelMakerError):
    """Raised when the built table violates the primary-key invariant."""

    exit_code = ExitCode.INVALID_TABLE

    def __init__(self, table_name: str, reason: str):
        self.table_name = table_name
        self.reason = reason
        super().__init__(f"table {table_name}: {reason}")


class OutputWriteError(ModelMakerError):
    """Raised when a generated artifact cannot be written."""

    exit_code = ExitCode.OUTPUT_WRITE_ERROR

    def __init__(self, path: str, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"cannot write {path}: {detail}")


__all__ = [
    "ModelMakerError",
    "MissingArgumentError",
    "InvalidArgumentError",
    "SourceFileNotFoundError",
    "SourceParseError",
    "TypeNotFoundError",
    "MalformedAnnotationError",
    "InvalidTableError",
    "OutputWriteError",
]
