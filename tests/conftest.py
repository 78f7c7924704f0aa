"""Shared fixtures for PairForge tests."""

from typing import Dict, List, Optional

import pytest

from pairforge.model import BaseModel, Completion, ModelError


class ScriptedModel(BaseModel):
    """
    Fake chat model that replays scripted responses in call order.

    Records every call so tests can assert prompt order and model ids.
    `fail_on` is the 1-based call number that raises ModelError.
    """

    def __init__(
        self,
        responses: Optional[List[Optional[str]]] = None,
        fail_on: Optional[int] = None,
        model: str = "fake-model",
    ):
        self.responses = list(responses or [])
        self.fail_on = fail_on
        self._model = model
        self.calls: List[Dict] = []

    @property
    def model_name(self) -> str:
        return self._model

    def chat(self, messages, model=None) -> Completion:
        self.calls.append({
            "messages": messages,
            "prompt": messages[-1]["content"],
            "model": model,
        })
        n = len(self.calls)
        if self.fail_on is not None and n == self.fail_on:
            raise ModelError("Fake", message=f"call {n} failed", status_code=500)
        if n <= len(self.responses):
            content = self.responses[n - 1]
        else:
            content = f"response {n}"
        return Completion(content=content, model=model or self._model)

    @property
    def prompts(self) -> List[str]:
        return [call["prompt"] for call in self.calls]


@pytest.fixture
def scripted_model():
    """Factory fixture: scripted_model(responses, fail_on=None)."""
    def _make(responses=None, fail_on=None, model="fake-model"):
        return ScriptedModel(responses, fail_on=fail_on, model=model)
    return _make


@pytest.fixture
def api():
    """
    TestClient for the web backend with the model factory overridden.

    Yields a small holder; set `holder.model` before calling the API.
    """
    from fastapi.testclient import TestClient
    from app.main import app
    from app.services.generator_service import get_model_factory

    class Holder:
        model: BaseModel = ScriptedModel()

    holder = Holder()
    app.dependency_overrides[get_model_factory] = lambda: (lambda: holder.model)

    with TestClient(app) as client:
        holder.client = client
        yield holder

    app.dependency_overrides.clear()
