"""
PairForge
=========
Generate synthetic instruction/answer pairs with hosted LLMs.

Usage:
    from pairforge import GroqModel, PairGenerator, GenerationRequest

    generator = PairGenerator(GroqModel(api_key="gsk_..."))
    pairs = generator.generate(
        GenerationRequest(domain="pharmacology", example_type="qa", num_examples=5)
    )
"""

__version__ = "0.1.0"

# Model backends
from .model import BaseModel, Completion, ModelError, GroqModel

# Prompt building and generation
from .synthesis import (
    EXAMPLE_TYPES,
    build_instruction_prompt,
    build_answer_prompt,
    GenerationError,
    GenerationRequest,
    GenerationState,
    Pair,
    PairGenerator,
    generate_pairs,
)

# Export
from .export import (
    export_filename,
    eval_export_filename,
    to_json,
    write_export,
)

__all__ = [
    "__version__",
    "BaseModel",
    "Completion",
    "ModelError",
    "GroqModel",
    "EXAMPLE_TYPES",
    "build_instruction_prompt",
    "build_answer_prompt",
    "GenerationError",
    "GenerationRequest",
    "GenerationState",
    "Pair",
    "PairGenerator",
    "generate_pairs",
    "export_filename",
    "eval_export_filename",
    "to_json",
    "write_export",
]
