"""Pair collection endpoints (view and edit)."""

from fastapi import APIRouter, HTTPException, Request, Response

from ..models.schemas import PairCollection, PairOut, UpdateAnswerRequest
from ..services.session_store import session_store
from .session import SESSION_COOKIE, ensure_session, set_session_cookie

router = APIRouter(prefix="/api", tags=["pairs"])


@router.get("/pairs", response_model=PairCollection)
async def get_pairs(request: Request, response: Response):
    """Return the session's current collection (empty before the first run)."""
    session = ensure_session(request)
    set_session_cookie(request, response, session)

    current = session_store.snapshot(session.id)
    return PairCollection(
        domain=current.domain,
        example_type=current.example_type,
        model=current.model,
        pairs=[PairOut(**pair.to_dict()) for pair in current.pairs],
    )


@router.put("/pairs/{index}", response_model=PairOut)
async def update_answer(index: int, body: UpdateAnswerRequest, request: Request):
    """Edit the answer of one pair. The instruction cannot be changed."""
    session_id = request.cookies.get(SESSION_COOKIE)
    session = session_store.get(session_id) if session_id else None
    if not session:
        raise HTTPException(404, "No pairs generated in this session")

    pair = session_store.update_answer(session.id, index, body.answer)
    if pair is None:
        raise HTTPException(404, f"No pair at index {index}")

    return PairOut(**pair.to_dict())
