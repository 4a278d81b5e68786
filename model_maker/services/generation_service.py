# ============================================================================
# GENERATION SERVICE
# ============================================================================
# STATUS: Service - End-to-end generation pipeline
# PURPOSE: Reader -> Builder -> Generators -> Writer for one declaration
# CREATED: 19 OCT 2026
# ============================================================================
"""
Generation Service

Runs the pipeline once for a GenerationConfig:
1. Read the declaration (file, type)
2. Build and validate the table
3. Render DDL and data-access source
4. Write the DDL (only when --sql is set) and the generated module

Everything is rendered before anything is written, so a malformed field
or an invalid table never leaves one artifact behind without the other.
The artifacts are then written as a set: if either write fails, neither
is left on disk.
Errors are ModelMakerError subclasses and propagate to the caller.

Usage:
    config = GenerationConfig(source_file="models/user.py", type_name="User", table_name="user")
    result = GenerationService(config).run()
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from model_maker.core.codegen.source_generator import DataAccessGenerator, RenderedArtifacts
from model_maker.core.config.generation import GenerationConfig
from model_maker.core.logging import get_logger, log_context, log_checkpoint, ComponentType
from model_maker.core.models.declaration import Declaration
from model_maker.core.models.table import Table
from model_maker.core.schema.builder import TableBuilder
from model_maker.infrastructure.declarations import DeclarationReader, get_declaration_reader
from model_maker.infrastructure.output import OutputWriter

logger = get_logger(__name__, ComponentType.SERVICE)


# ============================================================================
# DATA CLASSES
# ============================================================================

@dataclass
class StepResult:
    """Result of a single pipeline step."""
    name: str
    status: str  # 'success', 'skipped'
    message: str = ""
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass
class GenerationResult:
    """Complete result of a generation run."""
    type_name: str
    table_name: str
    ddl_text: str
    source_text: str
    source_path: Path
    sql_path: Optional[Path] = None
    dry_run: bool = False
    written: List[Path] = field(default_factory=list)
    steps: List[StepResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "type_name": self.type_name,
            "table_name": self.table_name,
            "source_path": str(self.source_path),
            "sql_path": str(self.sql_path) if self.sql_path else None,
            "dry_run": self.dry_run,
            "written": [str(p) for p in self.written],
            "steps": [
                {
                    "name": s.name,
                    "status": s.status,
                    "message": s.message,
                    "details": s.details,
                }
                for s in self.steps
            ],
        }


# ============================================================================
# GENERATION SERVICE
# ============================================================================

class GenerationService:
    """
    Generation pipeline for one declared type.

    Collaborators are injectable for testing; defaults pick the reader
    by source extension and write atomically to disk.
    """

    def __init__(
        self,
        config: GenerationConfig,
        reader: Optional[DeclarationReader] = None,
        builder: Optional[TableBuilder] = None,
        generator: Optional[DataAccessGenerator] = None,
        writer: Optional[OutputWriter] = None,
    ):
        self.config = config
        self.reader = reader or get_declaration_reader(config.source_file)
        self.builder = builder or TableBuilder()
        self.generator = generator or DataAccessGenerator(runtime_module=config.runtime_module)
        self._writer = writer

    @property
    def writer(self) -> OutputWriter:
        """Injected writer, or one using the validated file mode."""
        if self._writer is None:
            self._writer = OutputWriter(file_mode=self.config.mode)
        return self._writer

    def run(self) -> GenerationResult:
        """
        Run the pipeline.

        Returns:
            GenerationResult with rendered text, written paths and steps

        Raises:
            ModelMakerError: the first failure, as its specific subclass
        """
        config = self.config.validate()

        with log_context(
            source_file=config.source_file,
            type_name=config.type_name,
            table_name=config.table_name,
        ):
            steps: List[StepResult] = []

            declaration = self._read_declaration()
            steps.append(StepResult(
                name="read_declaration",
                status="success",
                message=f"Found {declaration.type_name} in {declaration.source_path}",
                details={"fields": len(declaration.fields)},
            ))

            table = self._build_table(declaration)
            steps.append(StepResult(
                name="build_table",
                status="success",
                message=f"Built {table.name} with {len(table.fields)} columns",
                details={"columns": table.column_names},
            ))

            artifacts = self._render(table, declaration)
            steps.append(StepResult(
                name="render",
                status="success",
                message="Rendered DDL and data-access source",
            ))

            result = GenerationResult(
                type_name=config.type_name,
                table_name=config.table_name,
                ddl_text=artifacts.ddl_text,
                source_text=artifacts.source_text,
                source_path=config.output_path,
                sql_path=config.sql_path,
                dry_run=config.dry_run,
                steps=steps,
            )

            self._write(result)

        return result

    # =========================================================================
    # STEPS
    # =========================================================================

    def _read_declaration(self) -> Declaration:
        declaration = self.reader.read(self.config.source_path, self.config.type_name)
        self.config.check_module_clash(declaration.module_name)
        log_checkpoint("declaration_read", {"fields": len(declaration.fields)})
        return declaration

    def _build_table(self, declaration: Declaration) -> Table:
        table = self.builder.build(self.config.table_name, declaration.fields)
        log_checkpoint("table_built", {"columns": len(table.fields)})
        return table

    def _render(self, table: Table, declaration: Declaration) -> RenderedArtifacts:
        artifacts = self.generator.render(
            table,
            declaration.type_name,
            import_from=declaration.import_from,
            source_name=declaration.source_path.name,
        )
        log_checkpoint("artifacts_rendered")
        return artifacts

    def _write(self, result: GenerationResult) -> None:
        if result.dry_run:
            result.steps.append(StepResult(
                name="write",
                status="skipped",
                message="[DRY RUN] Nothing written",
            ))
            return

        items = [(result.source_path, result.source_text)]
        if result.sql_path is not None:
            items.insert(0, (result.sql_path, result.ddl_text))

        result.written.extend(self.writer.write_all(items))

        if result.sql_path is not None:
            log_checkpoint("ddl_written", {"path": str(result.sql_path)})
            result.steps.append(StepResult(
                name="write_ddl", status="success", message=f"Wrote {result.sql_path}",
            ))
        else:
            result.steps.append(StepResult(
                name="write_ddl", status="skipped", message="No --sql path given",
            ))

        log_checkpoint("source_written", {"path": str(result.source_path)})
        result.steps.append(StepResult(
            name="write_source", status="success", message=f"Wrote {result.source_path}",
        ))


def generate(config: GenerationConfig) -> GenerationResult:
    """
    Convenience function for one-shot generation.

    Example:
        from model_maker.services import generate
        result = generate(GenerationConfig("user.py", "User", "user", sql_file="user.sql"))
    """
    return GenerationService(config).run()


__all__ = [
    "GenerationService",
    "GenerationResult",
    "StepResult",
    "generate",
]
