"""
Tests for the prompt templates.
"""

import pytest

from analysis.prompts import (
    PROMPT_BUILDERS,
    build_prompt,
    build_review_prompt,
    build_explain_prompt,
    build_improve_prompt
)


class TestPromptBuilders:
    """Tests for the individual template functions."""

    def test_review_prompt_with_language(self, sample_python_code):
        prompt = build_review_prompt(sample_python_code, "python")

        assert "analyze the following python and provide" in prompt
        assert f"```python\n{sample_python_code}\n```" in prompt
        for item in ("Code quality assessment", "Potential bugs or issues", "Security concerns",
                     "Performance suggestions", "Best practices recommendations"):
            assert item in prompt
        assert prompt.endswith("Provide your review in a structured format.")

    def test_review_prompt_without_language(self):
        prompt = build_review_prompt("x = 1")

        assert "analyze the following code and provide" in prompt
        assert "```\nx = 1\n```" in prompt

    def test_explain_prompt(self, sample_javascript_code):
        prompt = build_explain_prompt(sample_javascript_code, "javascript")

        assert prompt.startswith("Please explain the following javascript in detail.")
        assert "Break down what each part does and how it works" in prompt
        assert prompt.endswith(f"```javascript\n{sample_javascript_code}\n```")

    def test_improve_prompt(self):
        prompt = build_improve_prompt("var a = 1;", "javascript")

        assert prompt.startswith("Please suggest improvements for the following javascript.")
        assert "1. Refactored version of the code" in prompt
        assert "2. Explanation of improvements made" in prompt
        assert "3. Benefits of the changes" in prompt
        assert "Original code:\n```javascript\nvar a = 1;\n```" in prompt

    def test_code_is_inserted_verbatim(self):
        """Braces and format markers in code are not interpreted."""
        code = 'const o = {a: 1}; console.log(`${o.a}`); "{code}" {0}'
        for builder in PROMPT_BUILDERS.values():
            assert code in builder(code, "javascript")

    def test_empty_language_treated_as_missing(self):
        assert build_explain_prompt("x", "") == build_explain_prompt("x")


class TestBuildPrompt:
    """Tests for the endpoint -> template registry."""

    def test_registry_kinds(self):
        assert set(PROMPT_BUILDERS) == {"review", "explain", "improve"}

    @pytest.mark.parametrize("kind,builder", [
        ("review", build_review_prompt),
        ("explain", build_explain_prompt),
        ("improve", build_improve_prompt),
    ])
    def test_dispatch(self, kind, builder):
        assert build_prompt(kind, "x", "go") == builder("x", "go")

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown analysis kind"):
            build_prompt("translate", "x")
