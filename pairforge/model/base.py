"""Base class for chat-completion backends."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


class ModelError(RuntimeError):
    """Raised when a chat-completion call fails."""

    def __init__(
        self,
        provider: str,
        message: str = "Model call failed",
        status_code: Optional[int] = None,
    ):
        self.provider = provider
        self.status_code = status_code
        super().__init__(f"{provider}: {message}")


@dataclass
class Completion:
    """Result of one chat-completion call."""
    content: Optional[str]
    model: str = ""
    finish_reason: Optional[str] = None

    @property
    def text(self) -> str:
        """Generated text, with absent content normalised to ''."""
        return self.content or ""

    @classmethod
    def from_response(cls, data: Any, provider: str = "model") -> "Completion":
        """
        Build a Completion from an OpenAI-style response payload.

        Only the first choice is read. A missing or null `content` is not an
        error; a payload without `choices[0].message` is.
        """
        try:
            choice = data["choices"][0]
            message = choice["message"]
        except (KeyError, IndexError, TypeError):
            raise ModelError(provider, message="Malformed completion payload")

        content = message.get("content") if isinstance(message, dict) else None
        if content is not None and not isinstance(content, str):
            content = str(content)

        return cls(
            content=content,
            model=data.get("model", "") or "",
            finish_reason=choice.get("finish_reason") if isinstance(choice, dict) else None,
        )


class BaseModel(ABC):
    """Base class for hosted chat-completion backends."""

    def generate(self, prompt: str, model: Optional[str] = None) -> Completion:
        """
        Send a single user-role message.

        Args:
            prompt: The user prompt.
            model: Model id to use; defaults to `model_name`.

        Returns:
            The completion for the prompt.
        """
        return self.chat([{"role": "user", "content": prompt}], model=model)

    @abstractmethod
    def chat(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
    ) -> Completion:
        """
        Chat completion with an explicit message list.

        Args:
            messages: List of {"role": "user", "content": "..."}.
            model: Model id to use; defaults to `model_name`.

        Returns:
            The completion for the first choice.
        """
        pass

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Return the default model id."""
        pass
