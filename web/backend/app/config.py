"""Configuration settings."""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from pairforge.config import EXAMPLE_TYPE_LABELS, MODELS
from pairforge.model.groq import DEFAULT_BASE_URL, DEFAULT_MODEL

# Load .env file if exists
load_dotenv(Path(__file__).parent.parent / ".env")


class Settings:
    """Application settings from environment variables."""

    # Groq (OpenAI-compatible) chat completions
    GROQ_API_KEY: str = os.getenv("GROQ_API_KEY", "")
    GROQ_BASE_URL: str = os.getenv("GROQ_BASE_URL", DEFAULT_BASE_URL)
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "90"))

    # CORS
    CORS_ORIGINS: List[str] = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:5173,http://localhost:3000"
    ).split(",")

    # Sessions hold the current pair collection in memory only
    SESSION_EXPIRY_HOURS: int = int(os.getenv("SESSION_EXPIRY_HOURS", "24"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Bound offered to the UI's number input; not clamped server-side
    MAX_EXAMPLES: int = int(os.getenv("MAX_EXAMPLES", "10"))

    MODELS = MODELS
    DEFAULT_MODEL: str = os.getenv("DEFAULT_MODEL", DEFAULT_MODEL)

    EXAMPLE_TYPES = EXAMPLE_TYPE_LABELS
    DEFAULT_EXAMPLE_TYPE = "instruction"
    DEFAULT_DOMAIN = "pharmacology"


settings = Settings()
