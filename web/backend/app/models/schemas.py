"""Pydantic schemas for API requests/responses."""

from typing import List, Optional, Literal
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class GenerateRequest(BaseModel):
    """Request body for the generate endpoint."""
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    domain: str
    example_type: Literal["qa", "dialogue", "instruction", "completion", "few_shot"] = Field(
        ..., alias="exampleType"
    )
    num_examples: int = Field(..., alias="numExamples", ge=1)
    model: Optional[str] = Field(None, description="Model id; defaults to DEFAULT_MODEL")


class PairOut(BaseModel):
    """One generated instruction/answer pair."""
    instruction: str
    answer: str


class PairCollection(BaseModel):
    """The session's current pair collection."""
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    domain: Optional[str] = None
    example_type: Optional[str] = Field(None, serialization_alias="exampleType")
    model: Optional[str] = None
    pairs: List[PairOut] = Field(default_factory=list)


class UpdateAnswerRequest(BaseModel):
    """Request body for editing one answer."""
    answer: str


class ErrorResponse(BaseModel):
    """Generic failure body."""
    error: str


class SessionInfo(BaseModel):
    """Session information."""
    session_id: str
    created_at: datetime
    state: str
    generations: int
    pair_count: int


class ModelInfo(BaseModel):
    """Model information for UI."""
    id: str
    display_name: str
    description: str
    default: bool = False


class ExampleTypeInfo(BaseModel):
    """Example type for UI."""
    id: str
    label: str


class ConfigInfo(BaseModel):
    """Form defaults and limits for UI."""
    max_examples: int
    default_domain: str
    default_example_type: str
    default_model: str
