# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized defaults and the per-run GenerationConfig.
"""

from model_maker.core.config.defaults import (
    GeneratorDefaults,
    LoggingDefaults,
    Defaults,
    get_defaults,
    reset_defaults,
)
from model_maker.core.config.generation import GenerationConfig

__all__ = [
    "GeneratorDefaults",
    "LoggingDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
    "GenerationConfig",
]
