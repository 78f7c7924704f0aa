"""
Pair Generator
==============
Two-phase synthesis of instruction/answer pairs.

Phase 1 asks the model for N instructions with the same prompt.
Phase 2 asks for one answer per instruction, in the same order.
All instructions are generated before any answer. Every model call is
sequential, and any failure aborts the whole run.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

from ..model.base import BaseModel
from .prompts import EXAMPLE_TYPES, build_answer_prompt, build_instruction_prompt

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to generate pairs"


class GenerationError(RuntimeError):
    """Single generic failure for a generation run."""

    def __init__(self, message: str = GENERIC_FAILURE):
        super().__init__(message)


class GenerationState(Enum):
    """Lifecycle of one generation run."""
    IDLE = "idle"
    GENERATING_INSTRUCTIONS = "generating_instructions"
    GENERATING_ANSWERS = "generating_answers"
    COMPLETE = "complete"
    FAILED = "failed"


@dataclass(frozen=True)
class GenerationRequest:
    """Parameters of one generation run."""
    domain: str
    example_type: str
    num_examples: int
    model_id: Optional[str] = None

    def __post_init__(self):
        if self.example_type not in EXAMPLE_TYPES:
            raise ValueError(
                f"Unknown example type {self.example_type!r}; "
                f"expected one of {', '.join(EXAMPLE_TYPES)}"
            )
        if (
            not isinstance(self.num_examples, int)
            or isinstance(self.num_examples, bool)
            or self.num_examples < 1
        ):
            raise ValueError(
                f"num_examples must be a positive integer, got {self.num_examples!r}"
            )


@dataclass
class Pair:
    """One instruction paired with its generated answer."""
    instruction: str
    answer: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        return {"instruction": self.instruction, "answer": self.answer or ""}

    def to_eval_dict(self) -> Dict[str, str]:
        """Question/answer form used for evaluation sets."""
        return {"question": self.instruction, "answer": self.answer or ""}


class PairGenerator:
    """
    Drives the instruction phase and the answer phase over a chat model.

    The model is a held collaborator, so tests can pass any `BaseModel`.

    Usage:
        generator = PairGenerator(GroqModel(api_key="..."))
        pairs = generator.generate(GenerationRequest("math", "qa", 2))
    """

    def __init__(
        self,
        model: BaseModel,
        on_state_change: Optional[Callable[[GenerationState], None]] = None,
    ):
        self.model = model
        self.on_state_change = on_state_change
        self.state = GenerationState.IDLE
        self.calls = 0

    def generate(self, request: GenerationRequest) -> List[Pair]:
        """
        Run both phases and return the full collection.

        Raises:
            GenerationError: if any model call fails. No partial list is
                returned; the original exception is chained as the cause.
        """
        self.calls = 0
        model_id = request.model_id or self.model.model_name

        try:
            self._set_state(GenerationState.GENERATING_INSTRUCTIONS)
            prompt = build_instruction_prompt(request.domain, request.example_type)
            instructions = self._complete_all(
                [prompt] * request.num_examples, model_id
            )

            self._set_state(GenerationState.GENERATING_ANSWERS)
            answers = self._complete_all(
                [
                    build_answer_prompt(request.domain, request.example_type, instruction)
                    for instruction in instructions
                ],
                model_id,
            )
        except Exception as e:
            self._set_state(GenerationState.FAILED)
            logger.error(
                f"Generation failed after {self.calls} model calls "
                f"(domain={request.domain!r}, type={request.example_type}): {e}"
            )
            raise GenerationError() from e

        pairs = [
            Pair(instruction=instruction, answer=answer)
            for instruction, answer in zip(instructions, answers)
        ]
        self._set_state(GenerationState.COMPLETE)
        logger.info(f"Generated {len(pairs)} pairs with {model_id} in {self.calls} calls")
        return pairs

    def _complete_all(self, prompts: List[str], model_id: str) -> List[str]:
        """Complete each prompt in order, one call at a time."""
        results = []
        for prompt in prompts:
            completion = self.model.generate(prompt, model=model_id)
            self.calls += 1
            results.append(completion.text)
        return results

    def _set_state(self, state: GenerationState):
        logger.info(f"Generation state: {self.state.value} -> {state.value}")
        self.state = state
        if self.on_state_change is not None:
            self.on_state_change(state)


def generate_pairs(
    model: BaseModel,
    domain: str,
    example_type: str,
    num_examples: int,
    model_id: Optional[str] = None,
) -> List[Pair]:
    """Convenience wrapper: build the request and run one generation."""
    request = GenerationRequest(
        domain=domain,
        example_type=example_type,
        num_examples=num_examples,
        model_id=model_id,
    )
    return PairGenerator(model).generate(request)
