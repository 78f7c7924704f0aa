"""Test the prompt templates."""

from pairforge.synthesis import (
    EXAMPLE_TYPES,
    build_answer_prompt,
    build_instruction_prompt,
)


class TestInstructionPrompt:
    def test_deterministic(self):
        assert build_instruction_prompt("math", "qa") == build_instruction_prompt("math", "qa")

    def test_contains_domain_and_type(self):
        prompt = build_instruction_prompt("pharmacology", "few_shot")
        assert "The domain we are training for is: pharmacology" in prompt
        assert "generating a training example of type: few_shot" in prompt

    def test_lists_all_types(self):
        prompt = build_instruction_prompt("math", "qa")
        for example_type in EXAMPLE_TYPES:
            assert f'"{example_type}"' in prompt

    def test_asks_for_bare_example(self):
        prompt = build_instruction_prompt("math", "qa")
        assert "should not include anything but the single training data instance" in prompt
        assert "Do not include any explanatory text" in prompt

    def test_values_interpolated_verbatim(self):
        domain = "C++ {templates} & <generics>"
        prompt = build_instruction_prompt(domain, "completion")
        assert domain in prompt

    def test_does_not_ask_for_answer(self):
        prompt = build_instruction_prompt("math", "qa")
        assert "provide an answer" not in prompt


class TestAnswerPrompt:
    def test_embeds_instruction_verbatim(self):
        instruction = "What is 2+2?\nShow {your} work."
        prompt = build_answer_prompt("math", "qa", instruction)
        assert instruction in prompt
        assert prompt.rstrip().endswith(instruction.splitlines()[-1])

    def test_contains_domain_and_type(self):
        prompt = build_answer_prompt("law", "dialogue", "Define tort.")
        assert "law" in prompt
        assert "dialogue" in prompt

    def test_says_instruction_exists(self):
        prompt = build_answer_prompt("law", "qa", "Define tort.")
        assert "already created the instruction" in prompt

    def test_deterministic(self):
        a = build_answer_prompt("law", "qa", "Define tort.")
        b = build_answer_prompt("law", "qa", "Define tort.")
        assert a == b

    def test_differs_from_instruction_prompt(self):
        assert build_answer_prompt("law", "qa", "x") != build_instruction_prompt("law", "qa")

    def test_empty_instruction_allowed(self):
        prompt = build_answer_prompt("law", "qa", "")
        assert "Please provide an answer for instruction question:" in prompt
