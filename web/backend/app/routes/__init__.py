"""API Routes."""

from .generate import router as generate_router
from .pairs import router as pairs_router
from .session import router as session_router
from .export import router as export_router

__all__ = ["generate_router", "pairs_router", "session_router", "export_router"]
