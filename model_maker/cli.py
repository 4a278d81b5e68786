#!/usr/bin/env python
# ============================================================================
# MODEL MAKER CLI
# ============================================================================
# STATUS: Entry point - Command-line interface
# PURPOSE: Parse flags, run one generation, map failures to exit codes
# USAGE:
#   python -m model_maker --file models/user.py --struct User --table user --sql models/user.sql
#   python -m model_maker --file models/user.py --struct User --table user --dry-run
# ============================================================================
"""
Command-line interface.

Exit status is 0 on success and the error's exit code otherwise (see
model_maker.core.contracts.ExitCode), so build tooling can tell a
missing type from a malformed annotation.
"""

import argparse
import sys
from typing import List, Optional

from model_maker.__version__ import __version__
from model_maker.core.config.defaults import get_defaults
from model_maker.core.config.generation import GenerationConfig
from model_maker.core.contracts import ExitCode
from model_maker.core.errors import ModelMakerError
from model_maker.core.logging import configure_logging, get_logger, ComponentType
from model_maker.services.generation_service import GenerationService

logger = get_logger(__name__, ComponentType.CLI)

PROG = "model_maker"


def build_parser() -> argparse.ArgumentParser:
    defaults = get_defaults().generator

    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Generate SQL DDL and data-access code from an annotated type",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m model_maker --file ./user.py --struct User --table user --sql ./user.sql
  python -m model_maker --file ./user.py --struct User --table user --dry-run

Environment Variables:
  MODEL_MAKER_SUFFIX    Default for --suffix (default: _generated)
  MODEL_MAKER_RUNTIME   Default for --runtime (default: easydb)
  MODEL_MAKER_FILE_MODE Default for --file-mode (default: 644)
  LOG_LEVEL             Log level when not verbose (default: WARNING)
  LOG_FORMAT            Set to "json" for JSON log lines
        """,
    )
    parser.add_argument("--file", default="", help="path to the file declaring the type")
    parser.add_argument("--struct", default="", help="name of the declared type")
    parser.add_argument("--table", default="", help="SQL table name")
    parser.add_argument(
        "--sql",
        default="",
        help="path of the generated DDL file; DDL is skipped when empty",
    )
    parser.add_argument(
        "--suffix",
        default=defaults.suffix,
        help=f"suffix of the generated module name (default: {defaults.suffix})",
    )
    parser.add_argument(
        "--runtime",
        default=defaults.runtime_module,
        help=f"data-access module imported by generated code (default: {defaults.runtime_module})",
    )
    parser.add_argument(
        "--file-mode",
        default=None,
        help=f"octal permissions of written files (default: {defaults.file_mode})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="print generated artifacts instead of writing them",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="enable verbose logging",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="emit log lines as JSON",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _print_dry_run(result) -> None:
    if result.sql_path is not None:
        print(f"-- {result.sql_path}")
        print(result.ddl_text, end="")
    print(f"# {result.source_path}")
    print(result.source_text, end="")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name; sys.argv[1:] if None

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    log_defaults = get_defaults().logging
    configure_logging(
        level=log_defaults.verbose_level if args.verbose else log_defaults.level,
        json_output=args.json_logs or log_defaults.json_output,
    )

    try:
        config = GenerationConfig.from_args(args)
        result = GenerationService(config).run()
    except ModelMakerError as e:
        logger.debug(f"Generation failed: {type(e).__name__}", exc_info=True)
        print(f"{PROG}: error: {e}", file=sys.stderr)
        return int(e.exit_code)

    if result.dry_run:
        _print_dry_run(result)
    else:
        for path in result.written:
            logger.info(f"Generated {path}")

    return int(ExitCode.OK)


if __name__ == "__main__":
    sys.exit(main())
