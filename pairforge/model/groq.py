"""Groq model backend (OpenAI-compatible chat completions)."""

import logging
from typing import Dict, List, Optional

import requests

from .base import BaseModel, Completion, ModelError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_MODEL = "llama-3.2-90b-vision-preview"


class GroqModel(BaseModel):
    """
    Chat-completion client for Groq.

    Works with any OpenAI-compatible endpoint by passing `base_url`.
    Each call is stateless: the message list is the whole conversation.
    """

    PROVIDER = "Groq"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 90,
    ):
        if not api_key:
            raise ValueError(
                "GROQ_API_KEY not set. Get a key at https://console.groq.com"
            )
        self.api_key = api_key
        self._model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def model_name(self) -> str:
        return self._model

    def chat(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
    ) -> Completion:
        """Chat completion via the /chat/completions endpoint."""
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": model or self._model,
            "messages": messages,
        }

        try:
            response = requests.post(
                f"{self.base_url}/chat/completions",
                headers=headers,
                json=payload,
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.warning(f"{self.PROVIDER} returned HTTP {status}: {e}")
            raise ModelError(self.PROVIDER, message=f"API error: {e}", status_code=status)
        except requests.exceptions.RequestException as e:
            logger.warning(f"{self.PROVIDER} request failed: {e}")
            raise ModelError(self.PROVIDER, message=f"Request failed: {e}")
        except ValueError as e:
            # Body was not JSON
            raise ModelError(self.PROVIDER, message=f"Invalid JSON response: {e}")

        return Completion.from_response(data, provider=self.PROVIDER)
