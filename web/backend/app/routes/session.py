"""Session management endpoints."""

from fastapi import APIRouter, Request, Response
from typing import List

from ..models.schemas import SessionInfo, ModelInfo, ExampleTypeInfo, ConfigInfo
from ..services.session_store import Session, session_store
from ..config import settings

router = APIRouter(prefix="/api", tags=["session"])

SESSION_COOKIE = "session_id"


def ensure_session(request: Request) -> Session:
    """Get the caller's session, creating one if the cookie is missing or stale."""
    return session_store.get_or_create(request.cookies.get(SESSION_COOKIE))


def set_session_cookie(request: Request, response: Response, session: Session):
    """Set the session cookie if the caller does not have it yet."""
    if request.cookies.get(SESSION_COOKIE) != session.id:
        response.set_cookie(
            key=SESSION_COOKIE,
            value=session.id,
            httponly=True,
            samesite="lax",
            max_age=settings.SESSION_EXPIRY_HOURS * 3600,
        )


@router.get("/session", response_model=SessionInfo)
async def get_session(request: Request, response: Response):
    """Get or create session information."""
    session = ensure_session(request)
    set_session_cookie(request, response, session)

    return SessionInfo(
        session_id=session.id,
        created_at=session.created_at,
        state=session.state.value,
        generations=session.generations,
        pair_count=len(session.pairs),
    )


@router.get("/models", response_model=List[ModelInfo])
async def list_models():
    """List available hosted models."""
    return [
        ModelInfo(
            id=model_id,
            display_name=config["display_name"],
            description=config["description"],
            default=model_id == settings.DEFAULT_MODEL,
        )
        for model_id, config in settings.MODELS.items()
    ]


@router.get("/example-types", response_model=List[ExampleTypeInfo])
async def list_example_types():
    """List supported example types."""
    return [
        ExampleTypeInfo(id=type_id, label=label)
        for type_id, label in settings.EXAMPLE_TYPES.items()
    ]


@router.get("/config", response_model=ConfigInfo)
async def get_config():
    """Form defaults and the example-count limit."""
    return ConfigInfo(
        max_examples=settings.MAX_EXAMPLES,
        default_domain=settings.DEFAULT_DOMAIN,
        default_example_type=settings.DEFAULT_EXAMPLE_TYPE,
        default_model=settings.DEFAULT_MODEL,
    )
