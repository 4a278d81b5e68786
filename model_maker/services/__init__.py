# ============================================================================
# SERVICES MODULE
# ============================================================================
# STATUS: Core - Pipeline orchestration layer
# PURPOSE: Run one generation end to end
# CREATED: 19 OCT 2026
# ============================================================================
"""
Services Module

Usage:
    from model_maker.services import GenerationService

    result = GenerationService(config).run()
"""

from .generation_service import (
    GenerationService,
    GenerationResult,
    StepResult,
    generate,
)

__all__ = [
    "GenerationService",
    "GenerationResult",
    "StepResult",
    "generate",
]
