"""
PairForge - Backend API

FastAPI server that wraps the PairForge generator for the browser tool.
"""

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from pairforge import __version__

from .config import settings
from .routes import generate_router, pairs_router, session_router, export_router
from .services.session_store import session_store

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Built frontend, if any
STATIC_DIR = Path(__file__).parent.parent / "static"

# Create app
app = FastAPI(
    title="PairForge",
    description="Generate synthetic instruction/answer pairs with hosted LLMs",
    version=__version__,
    docs_url="/api/docs",
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)

# Include API routers
app.include_router(generate_router)
app.include_router(pairs_router)
app.include_router(session_router)
app.include_router(export_router)

if (STATIC_DIR / "assets").exists():
    app.mount("/assets", StaticFiles(directory=STATIC_DIR / "assets"), name="assets")


@app.get("/api/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "api_key_configured": bool(settings.GROQ_API_KEY),
        "sessions": session_store.stats(),
    }


@app.get("/")
async def index():
    """Serve the frontend if built, otherwise describe the API."""
    page = STATIC_DIR / "index.html"
    if page.exists():
        return FileResponse(page)
    return {"name": "PairForge API", "version": __version__, "docs": "/api/docs"}
