# ============================================================================
# DECLARATION READERS
# ============================================================================
# STATUS: Infrastructure - Locate a declared type and its field annotations
# PURPOSE: Produce a Declaration from a source file
# CREATED: 19 OCT 2026
# EXPORTS: DeclarationReader, PythonDeclarationReader, YamlDeclarationReader,
#          get_declaration_reader
# DEPENDENCIES: PyYAML
# ============================================================================
"""
Declaration Readers

A DeclarationReader turns a source file plus a type name into a
Declaration: the type's fields in source order, each with its raw
annotation string or None.

PythonDeclarationReader reads a top-level class whose fields are
annotated assignments using typing.Annotated with an annotation string
as metadata:

    class User(BaseModel):
        id: Annotated[int, 'db:"id" gen:"bigint,autoincrement,notnull,primary"'] = 0
        name: Annotated[str, 'db:"name" gen:"varchar(512),notnull"']
        cache: dict = {}                          # no annotation: invisible

The first string metadata element shaped like key:"value" is the
annotation. The file is parsed with ast, never imported.

YamlDeclarationReader reads the same information from a schema file,
for record types whose source cannot carry annotations.
"""

import ast
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Type, Union

import yaml

from model_maker.core.errors import (
    SourceFileNotFoundError,
    SourceParseError,
    TypeNotFoundError,
)
from model_maker.core.logging import get_logger, ComponentType
from model_maker.core.models.declaration import Declaration, DeclaredField
from model_maker.core.names import is_identifier, is_module_path

logger = get_logger(__name__, ComponentType.READER)


_TAG_SHAPE = re.compile(r'[A-Za-z_][A-Za-z0-9_]*:"')


class DeclarationReader(ABC):
    """
    Base declaration reader.

    Subclasses parse one source format. The shared read() handles the
    existence check so every format reports a missing file the same way.
    """

    def read(self, path: Union[str, Path], type_name: str) -> Declaration:
        """
        Read a declared type.

        Raises:
            SourceFileNotFoundError: path missing, not a file or unreadable
            SourceParseError: the source cannot be parsed, or declares a
                type, attribute or module name unusable in generated code
            TypeNotFoundError: the type is not declared in the file
        """
        path = Path(path)
        if not path.exists():
            raise SourceFileNotFoundError(str(path))
        if not path.is_file():
            raise SourceFileNotFoundError(str(path), "is not a file")

        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise SourceParseError(str(path), f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise SourceFileNotFoundError(str(path), f"cannot be read ({e.strerror})") from e

        declaration = self.parse(text, path, type_name)
        self._check_names(declaration)
        logger.info(
            f"Read {type_name} from {path}",
            extra={
                "fields": len(declaration.fields),
                "annotated": sum(1 for f in declaration.fields if f.is_annotated),
            },
        )
        return declaration

    @staticmethod
    def _check_names(declaration: Declaration) -> None:
        """Names the generated module emits as Python must be valid there."""
        path = str(declaration.source_path)
        if not is_identifier(declaration.type_name):
            raise SourceParseError(
                path, f"type name {declaration.type_name!r} is not a Python identifier"
            )
        for declared in declaration.fields:
            if not is_identifier(declared.attribute):
                raise SourceParseError(
                    path,
                    f"{declaration.type_name}.{declared.attribute} is not a Python identifier",
                )
        if not is_module_path(declaration.module_name):
            raise SourceParseError(
                path, f"module {declaration.module_name!r} is not an importable module path"
            )

    @abstractmethod
    def parse(self, text: str, path: Path, type_name: str) -> Declaration:
        """Parse source text already read from path."""


class PythonDeclarationReader(DeclarationReader):
    """Reads Annotated-field classes from Python source."""

    ANNOTATED_NAMES = ("Annotated",)

    def parse(self, text: str, path: Path, type_name: str) -> Declaration:
        try:
            tree = ast.parse(text, filename=str(path))
        except SyntaxError as e:
            raise SourceParseError(str(path), f"line {e.lineno}: {e.msg}") from e
        except ValueError as e:
            raise SourceParseError(str(path), str(e)) from e

        class_def = self._find_class(tree, type_name)
        if class_def is None:
            raise TypeNotFoundError(type_name, str(path))

        fields: List[DeclaredField] = []
        for statement in class_def.body:
            if not isinstance(statement, ast.AnnAssign):
                continue
            if not isinstance(statement.target, ast.Name):
                continue
            fields.append(
                DeclaredField(
                    attribute=statement.target.id,
                    annotation=self._annotation_string(statement.annotation),
                )
            )

        return Declaration(
            type_name=type_name,
            module_name=path.stem,
            source_path=path,
            is_package=(path.parent / "__init__.py").exists(),
            fields=fields,
        )

    # =========================================================================
    # AST HELPERS
    # =========================================================================

    @staticmethod
    def _find_class(tree: ast.Module, type_name: str) -> Optional[ast.ClassDef]:
        """Top-level class with the given name; the last definition wins."""
        found = None
        for node in tree.body:
            if isinstance(node, ast.ClassDef) and node.name == type_name:
                found = node
        return found

    def _is_annotated(self, node: ast.expr) -> bool:
        if isinstance(node, ast.Name):
            return node.id in self.ANNOTATED_NAMES
        if isinstance(node, ast.Attribute):
            return node.attr in self.ANNOTATED_NAMES
        return False

    def _annotation_string(self, annotation: ast.expr) -> Optional[str]:
        """Annotation string of Annotated[T, ...], or None."""
        if not isinstance(annotation, ast.Subscript):
            return None
        if not self._is_annotated(annotation.value):
            return None

        metadata = annotation.slice
        if not isinstance(metadata, ast.Tuple):
            return None

        for element in metadata.elts[1:]:
            if isinstance(element, ast.Constant) and isinstance(element.value, str):
                if _TAG_SHAPE.search(element.value):
                    return element.value
        return None


class YamlDeclarationReader(DeclarationReader):
    """
    Reads declarations from a YAML schema file.

    Top-level keys are type names. Each type lists its fields as an
    ordered mapping of attribute name to annotation string; a null
    annotation makes the field invisible, as in Python source:

        User:
          module: user          # where generated code imports User from
          fields:
            id: 'db:"id" gen:"bigint,autoincrement,notnull,primary"'
            name: 'db:"name" gen:"varchar(512),notnull"'
            cache: null

    module defaults to the schema file's stem.
    """

    def parse(self, text: str, path: Path, type_name: str) -> Declaration:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise SourceParseError(str(path), str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SourceParseError(str(path), "top level must be a mapping of type names")

        entry = data.get(type_name)
        if entry is None:
            raise TypeNotFoundError(type_name, str(path))
        if not isinstance(entry, dict):
            raise SourceParseError(str(path), f"{type_name} must be a mapping")

        raw_fields = entry.get("fields") or {}
        if not isinstance(raw_fields, dict):
            raise SourceParseError(str(path), f"{type_name}.fields must be a mapping")

        fields: List[DeclaredField] = []
        for attribute, annotation in raw_fields.items():
            if annotation is not None and not isinstance(annotation, str):
                raise SourceParseError(
                    str(path),
                    f"{type_name}.fields.{attribute} must be an annotation string or null",
                )
            fields.append(DeclaredField(attribute=str(attribute), annotation=annotation))

        module_name = entry.get("module") or path.stem
        return Declaration(
            type_name=type_name,
            module_name=str(module_name),
            source_path=path,
            is_package=(path.parent / "__init__.py").exists(),
            fields=fields,
        )


# ============================================================================
# READER SELECTION
# ============================================================================

_READERS: Dict[str, Type[DeclarationReader]] = {
    ".py": PythonDeclarationReader,
    ".yaml": YamlDeclarationReader,
    ".yml": YamlDeclarationReader,
}


def get_declaration_reader(path: Union[str, Path, None] = None) -> DeclarationReader:
    """
    Reader for a declaration file, chosen by its extension.

    YAML schema files (.yaml, .yml) get YamlDeclarationReader; anything
    else is read as Python source.
    """
    suffix = Path(path).suffix.lower() if path else ".py"
    return _READERS.get(suffix, PythonDeclarationReader)()


__all__ = [
    "DeclarationReader",
    "PythonDeclarationReader",
    "YamlDeclarationReader",
    "get_declaration_reader",
]
