"""Pair generation service - wires the Groq client to the generator."""

from typing import Callable, List, Optional

from pairforge.model import BaseModel, GroqModel
from pairforge.synthesis import GenerationRequest, GenerationState, Pair, PairGenerator

from ..config import settings

ModelFactory = Callable[[], BaseModel]


def build_model() -> GroqModel:
    """Create the chat-completion client from settings."""
    return GroqModel(
        api_key=settings.GROQ_API_KEY,
        model=settings.DEFAULT_MODEL,
        base_url=settings.GROQ_BASE_URL,
        timeout=settings.REQUEST_TIMEOUT,
    )


def get_model_factory() -> ModelFactory:
    """FastAPI dependency; tests override it with a fake model."""
    return build_model


def run_generation(
    model: BaseModel,
    request: GenerationRequest,
    on_state_change: Optional[Callable[[GenerationState], None]] = None,
) -> List[Pair]:
    """Run one generation synchronously (called from a worker thread)."""
    return PairGenerator(model, on_state_change=on_state_change).generate(request)
