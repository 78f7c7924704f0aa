"""Configuration shared by the CLI and the web backend."""

import os
from typing import Optional

from dotenv import load_dotenv

from .model.groq import DEFAULT_BASE_URL, DEFAULT_MODEL, GroqModel

# Load .env from the working directory if present
load_dotenv()


# Hosted models offered in the UI (Groq ids)
MODELS = {
    "llama-3.2-90b-vision-preview": {
        "display_name": "Llama 3.2 90B",
        "description": "Most capable, slower generation",
    },
    "llama-3.2-11b-vision-preview": {
        "display_name": "Llama 3.2 11B",
        "description": "Balanced performance",
    },
    "llama-3.2-3b-preview": {
        "display_name": "Llama 3.2 3B",
        "description": "Fast, good for simple tasks",
    },
    "llama-3.2-1b-preview": {
        "display_name": "Llama 3.2 1B",
        "description": "Fastest, basic capabilities",
    },
}

EXAMPLE_TYPE_LABELS = {
    "qa": "Q&A",
    "dialogue": "Dialogue",
    "instruction": "Instruction",
    "completion": "Completion",
    "few_shot": "Few Shot",
}

# Upper bound the UI offers for the number of examples
MAX_EXAMPLES = int(os.getenv("MAX_EXAMPLES", "10"))


def get_model(
    model: Optional[str] = None,
    api_key: Optional[str] = None,
) -> GroqModel:
    """Build a GroqModel from environment settings."""
    return GroqModel(
        api_key=api_key or os.getenv("GROQ_API_KEY", ""),
        model=model or os.getenv("DEFAULT_MODEL", DEFAULT_MODEL),
        base_url=os.getenv("GROQ_BASE_URL", DEFAULT_BASE_URL),
        timeout=float(os.getenv("REQUEST_TIMEOUT", "90")),
    )
