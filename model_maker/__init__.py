# ============================================================================
# MODEL MAKER
# ============================================================================
# STATUS: Package initialization
# PURPOSE: Export the version and the one-shot generation API
# CREATED: 19 OCT 2026
# ============================================================================
"""
model_maker - SQL DDL and data-access code from annotated types.

Usage:
    from model_maker import GenerationConfig, generate

    result = generate(GenerationConfig(
        source_file="models/user.py",
        type_name="User",
        table_name="user",
        sql_file="models/user.sql",
    ))
"""

from model_maker.__version__ import __version__
from model_maker.core.config.generation import GenerationConfig
from model_maker.services.generation_service import (
    GenerationService,
    GenerationResult,
    generate,
)

__all__ = [
    "__version__",
    "GenerationConfig",
    "GenerationService",
    "GenerationResult",
    "generate",
]
