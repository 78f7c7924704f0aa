"""Pydantic models."""

from .schemas import (
    GenerateRequest,
    PairOut,
    PairCollection,
    UpdateAnswerRequest,
    ErrorResponse,
    SessionInfo,
    ModelInfo,
    ExampleTypeInfo,
    ConfigInfo,
)

__all__ = [
    "GenerateRequest",
    "PairOut",
    "PairCollection",
    "UpdateAnswerRequest",
    "ErrorResponse",
    "SessionInfo",
    "ModelInfo",
    "ExampleTypeInfo",
    "ConfigInfo",
]
