# Chat-completion backends
from .base import BaseModel, Completion, ModelError
from .groq import GroqModel

__all__ = ["BaseModel", "Completion", "ModelError", "GroqModel"]
