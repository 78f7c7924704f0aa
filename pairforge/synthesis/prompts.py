"""
Prompt Templates for Pair Synthesis
===================================

Two fixed templates drive the model:
- Instruction prompt: asks for one training example of a type and domain
- Answer prompt: embeds a generated instruction and asks only for its answer

Values are interpolated verbatim (no escaping, no validation).
"""

# Supported training data types, in display order
EXAMPLE_TYPES = ("qa", "dialogue", "instruction", "completion", "few_shot")

_TYPES_LINE = ", ".join(f'"{t}"' for t in EXAMPLE_TYPES)

_PREAMBLE = """You are part of a system built to generate synthetic training data given some downstream task and training data type.
The training data types are : {types}
You are tasked with generating a training example of type: {example_type}
The domain we are training for is: {domain}
--------
Your response should not include anything but the single training data instance.
Do not include any explanatory text as your response will be included directly as a training example as is.
"""

INSTRUCTION_PROMPT = _PREAMBLE + """--------
An example response is something like: define the chemical composition of Azithromycin, a type of antibiotic medication commonly used to treat bacterial infections, and describe its classification and typical dosage forms.
"""

ANSWER_PROMPT = _PREAMBLE + """We have already created the instruction and your job is to generate the answer to complete the pair.
--------
Please provide an answer for instruction question: {instruction}
"""


def build_instruction_prompt(domain: str, example_type: str) -> str:
    """
    Build the prompt that asks for one instruction/question.

    The prompt does not depend on earlier model output, so a generation run
    builds it once and reuses it for every instruction call.
    """
    return INSTRUCTION_PROMPT.format(
        types=_TYPES_LINE,
        example_type=example_type,
        domain=domain,
    )


def build_answer_prompt(domain: str, example_type: str, instruction: str) -> str:
    """Build the prompt that asks for the answer to `instruction`."""
    return ANSWER_PROMPT.format(
        types=_TYPES_LINE,
        example_type=example_type,
        domain=domain,
        instruction=instruction,
    )
