"""
PairForge Synthesis Module
==========================
Prompt templates and the two-phase pair generator.
"""

# Prompt building (no model needed)
from .prompts import (
    EXAMPLE_TYPES,
    build_instruction_prompt,
    build_answer_prompt,
)

# Generation (drives a chat model)
from .generator import (
    GENERIC_FAILURE,
    GenerationError,
    GenerationRequest,
    GenerationState,
    Pair,
    PairGenerator,
    generate_pairs,
)

__all__ = [
    "EXAMPLE_TYPES",
    "build_instruction_prompt",
    "build_answer_prompt",
    "GENERIC_FAILURE",
    "GenerationError",
    "GenerationRequest",
    "GenerationState",
    "Pair",
    "PairGenerator",
    "generate_pairs",
]
