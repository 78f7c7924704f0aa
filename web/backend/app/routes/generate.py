"""Generate endpoint."""

import asyncio
import concurrent.futures
import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from pairforge.synthesis import GENERIC_FAILURE, GenerationRequest

from ..config import settings
from ..models.schemas import ErrorResponse, GenerateRequest, PairOut
from ..services.generator_service import ModelFactory, get_model_factory, run_generation
from ..services.session_store import session_store
from .session import ensure_session, set_session_cookie

logger = logging.getLogger(__name__)

# Generation is blocking HTTP work; keep it off the event loop
_generation_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=4, thread_name_prefix="generate"
)

router = APIRouter(prefix="/api", tags=["generate"])


@router.post(
    "/generate",
    response_model=List[PairOut],
    responses={409: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate(
    request: Request,
    response: Response,
    model_factory: ModelFactory = Depends(get_model_factory),
):
    """
    Generate `numExamples` instruction/answer pairs.

    On success the session's collection is replaced. On any failure the
    previous collection is kept and a generic error is returned.
    """
    session = ensure_session(request)

    if not session_store.begin_generation(session.id):
        conflict = JSONResponse(
            status_code=409,
            content={"error": "A generation is already running for this session"},
        )
        set_session_cookie(request, conflict, session)
        return conflict

    def on_state_change(state):
        session_store.update_phase(session.id, state)

    pairs = None
    try:
        # Body is parsed here so malformed input fails like any other run
        body = GenerateRequest.model_validate(await request.json())
        gen_request = GenerationRequest(
            domain=body.domain,
            example_type=body.example_type,
            num_examples=body.num_examples,
            model_id=body.model or settings.DEFAULT_MODEL,
        )
        model = model_factory()

        loop = asyncio.get_event_loop()
        pairs = await loop.run_in_executor(
            _generation_executor, run_generation, model, gen_request, on_state_change
        )
    except Exception as e:
        cause = e.__cause__ if e.__cause__ is not None else e
        logger.error(f"Error generating pairs: {type(cause).__name__}: {cause}")
        failure = JSONResponse(status_code=500, content={"error": GENERIC_FAILURE})
        set_session_cookie(request, failure, session)
        return failure
    finally:
        # Also reached on cancellation, which is not an Exception
        if pairs is None:
            session_store.fail_generation(session.id)

    session_store.complete_generation(session.id, gen_request, pairs)
    set_session_cookie(request, response, session)
    return [pair.to_dict() for pair in pairs]
