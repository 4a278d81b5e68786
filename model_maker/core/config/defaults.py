# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for generation and logging
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides defaults for generation and logging. These can be overridden
via environment variables or command-line flags.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from model_maker.core.contracts import CONDITION_MARKER


@dataclass(frozen=True)
class GeneratorDefaults:
    """
    Defaults for artifact generation.

    Controls the generated module name, the runtime data-access
    module imported by generated code and written file permissions.
    """
    # Inserted between the source stem and ".py"
    suffix: str = "_generated"

    # Data-access library the generated module calls
    runtime_module: str = "easydb"

    # Splice point at the end of the generated select
    condition_marker: str = CONDITION_MARKER

    # Permissions of written artifacts, octal text as in chmod
    file_mode: str = "644"

    @classmethod
    def from_env(cls) -> "GeneratorDefaults":
        """Create from environment variables."""
        return cls(
            suffix=os.getenv("MODEL_MAKER_SUFFIX", "_generated"),
            runtime_module=os.getenv("MODEL_MAKER_RUNTIME", "easydb"),
            file_mode=os.getenv("MODEL_MAKER_FILE_MODE", "644"),
        )


@dataclass(frozen=True)
class LoggingDefaults:
    """Defaults for log output."""
    level: str = "WARNING"
    verbose_level: str = "DEBUG"
    json_output: bool = False

    @classmethod
    def from_env(cls) -> "LoggingDefaults":
        """Create from environment variables."""
        return cls(
            level=os.getenv("LOG_LEVEL", "WARNING").upper(),
            json_output=os.getenv("LOG_FORMAT", "").lower() == "json",
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    generator: GeneratorDefaults = field(default_factory=GeneratorDefaults)
    logging: LoggingDefaults = field(default_factory=LoggingDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            generator=GeneratorDefaults.from_env(),
            logging=LoggingDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


__all__ = [
    "GeneratorDefaults",
    "LoggingDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
