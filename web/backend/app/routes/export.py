"""Export endpoint."""

import io
from typing import Literal
from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import StreamingResponse

from pairforge.export import filename_for, safe_filename, to_json

from ..services.session_store import session_store
from .session import SESSION_COOKIE

router = APIRouter(prefix="/api", tags=["export"])


@router.get("/export")
async def export_pairs(request: Request, variant: Literal["train", "eval"] = "train"):
    """
    Export the session's pairs as pretty-printed JSON.

    Returns downloadable file named <domain>-<type>-pairs.json, or
    <domain>-eval-pairs.json for the evaluation variant.
    """
    session_id = request.cookies.get(SESSION_COOKIE)
    session = session_store.snapshot(session_id) if session_id else None

    if not session or not session.pairs:
        raise HTTPException(404, "No pairs to export")

    content = to_json(session.pairs, variant)
    filename = filename_for(session.domain, session.example_type, variant)

    # Plain form is a sanitised ASCII copy; filename* carries the exact name
    fallback = "".join(c if c.isascii() else "_" for c in safe_filename(filename))
    disposition = f'attachment; filename="{fallback}"; filename*=UTF-8\'\'{quote(filename, safe="")}'

    return StreamingResponse(
        io.BytesIO(content.encode("utf-8")),
        media_type="application/json",
        headers={"Content-Disposition": disposition},
    )
