"""Services."""

from .session_store import SessionStore, Session, session_store
from .generator_service import build_model, get_model_factory, run_generation

__all__ = [
    "SessionStore",
    "Session",
    "session_store",
    "build_model",
    "get_model_factory",
    "run_generation",
]
