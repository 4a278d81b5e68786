# ============================================================================
# GENERATION CONFIG
# ============================================================================
# STATUS: Core - Per-run generation parameters
# PURPOSE: One explicit value carrying every parameter of a generation run
# CREATED: 19 OCT 2026
# ============================================================================
"""
Generation Config

GenerationConfig is built once (from CLI flags or by an embedding caller)
and handed to the service, which passes the pieces each stage needs.
Nothing downstream reads process-wide state.

Every value that is emitted verbatim into generated SQL or Python, or
that decides where files are written, is checked by validate() before
anything is read.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from model_maker.core.config.defaults import get_defaults
from model_maker.core.errors import InvalidArgumentError, MissingArgumentError
from model_maker.core.names import is_identifier, is_module_path, is_sql_name

_SEPARATORS = {"/", "\\", os.sep} | ({os.altsep} if os.altsep else set())


@dataclass(frozen=True)
class GenerationConfig:
    """
    Parameters of a single generation run.

    Attributes:
        source_file: Path of the declaration file to scan (--file)
        type_name: Name of the declared type to extract (--struct)
        table_name: SQL table to generate against (--table)
        sql_file: Where to write the DDL; empty skips DDL output (--sql)
        suffix: Inserted before ".py" in the generated module name (--suffix)
        runtime_module: Data-access module imported by generated code
        dry_run: Render only, never write
        file_mode: Permissions of written files, as an int or octal text
    """
    source_file: str
    type_name: str
    table_name: str
    sql_file: str = ""
    suffix: Optional[str] = None
    runtime_module: Optional[str] = None
    dry_run: bool = False
    file_mode: Optional[Union[int, str]] = None

    def __post_init__(self):
        defaults = get_defaults().generator
        # Frozen dataclass: fill unset values through object.__setattr__
        if self.suffix is None:
            object.__setattr__(self, "suffix", defaults.suffix)
        if self.runtime_module is None:
            object.__setattr__(self, "runtime_module", defaults.runtime_module)
        if self.file_mode is None:
            object.__setattr__(self, "file_mode", defaults.file_mode)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> "GenerationConfig":
        """
        Check that every required parameter is present and usable.

        Raises:
            MissingArgumentError: naming the first empty required flag
            InvalidArgumentError: naming the first flag whose value would
                produce broken output or an unwritable path
        """
        for argument, value in (
            ("file", self.source_file),
            ("struct", self.type_name),
            ("table", self.table_name),
            ("runtime", self.runtime_module),
        ):
            if not value or not str(value).strip():
                raise MissingArgumentError(argument)

        if not is_identifier(self.type_name):
            raise InvalidArgumentError("struct", f"{self.type_name!r} is not a Python identifier")
        if not is_sql_name(self.table_name):
            raise InvalidArgumentError(
                "table", f"{self.table_name!r} may only contain letters, digits and '_'"
            )
        if not is_module_path(self.runtime_module):
            raise InvalidArgumentError(
                "runtime", f"{self.runtime_module!r} is not an importable module path"
            )
        if any(sep in self.suffix for sep in _SEPARATORS):
            raise InvalidArgumentError("suffix", f"{self.suffix!r} contains a path separator")

        # An empty suffix would point the generated module at the source
        if self.output_path == self.source_path:
            raise MissingArgumentError("suffix")

        self.mode  # parses file_mode
        return self

    def check_module_clash(self, module_name: str) -> None:
        """
        Refuse to generate over the module the record type is imported from.

        Raises:
            InvalidArgumentError: if the generated module would replace it
        """
        if module_name.lstrip(".") == self.output_path.stem:
            raise InvalidArgumentError(
                "suffix",
                f"generated module {self.output_path.name} would replace "
                f"the record module {module_name!r}",
            )

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def source_path(self) -> Path:
        return Path(self.source_file)

    @property
    def output_path(self) -> Path:
        """Generated module path: <dir>/<stem><suffix>.py"""
        source = self.source_path
        return source.with_name(f"{source.stem}{self.suffix}.py")

    @property
    def sql_path(self) -> Optional[Path]:
        """DDL path, or None when DDL output is disabled."""
        if not self.sql_file:
            return None
        return Path(self.sql_file)

    @property
    def mode(self) -> int:
        """
        Permission bits of written files.

        Raises:
            InvalidArgumentError: if file_mode is not an octal mode
        """
        if isinstance(self.file_mode, int):
            value = self.file_mode
        else:
            try:
                value = int(str(self.file_mode).strip(), 8)
            except ValueError:
                raise InvalidArgumentError(
                    "file-mode", f"{self.file_mode!r} is not an octal permission mode"
                ) from None
        if not 0 <= value <= 0o777:
            raise InvalidArgumentError("file-mode", f"{oct(value)} is outside 0..0o777")
        return value

    @classmethod
    def from_args(cls, args: Any) -> "GenerationConfig":
        """Create from an argparse namespace."""
        return cls(
            source_file=args.file or "",
            type_name=args.struct or "",
            table_name=args.table or "",
            sql_file=args.sql or "",
            suffix=args.suffix,
            runtime_module=args.runtime,
            dry_run=bool(getattr(args, "dry_run", False)),
            file_mode=getattr(args, "file_mode", None),
        )


__all__ = ["GenerationConfig"]
