"""
Prompt templates for the code analysis endpoints.

Each builder interpolates the submitted code and language tag verbatim.
When no language is given the sentence refers to plain "code" and the
fenced block is left untagged.
"""

from typing import Callable, Optional

REVIEW_PROMPT = """You are an expert code reviewer. Please analyze the following {subject} and provide:
1. Code quality assessment
2. Potential bugs or issues
3. Security concerns
4. Performance suggestions
5. Best practices recommendations

Code to review:
```{fence}
{code}
```

Provide your review in a structured format."""

EXPLAIN_PROMPT = """Please explain the following {subject} in detail. Break down what each part does and how it works:

```{fence}
{code}
```"""

IMPROVE_PROMPT = """Please suggest improvements for the following {subject}. Provide:
1. Refactored version of the code
2. Explanation of improvements made
3. Benefits of the changes

Original code:
```{fence}
{code}
```"""


def _render(template: str, code: str, language: Optional[str]) -> str:
    # str.format only scans the template, so braces inside code are safe
    return template.format(
        subject=language or "code",
        fence=language or "",
        code=code
    )


def build_review_prompt(code: str, language: Optional[str] = None) -> str:
    """Prompt asking for quality, bugs, security, performance and best practices."""
    return _render(REVIEW_PROMPT, code, language)


def build_explain_prompt(code: str, language: Optional[str] = None) -> str:
    """Prompt asking for a structural walkthrough of the code."""
    return _render(EXPLAIN_PROMPT, code, language)


def build_improve_prompt(code: str, language: Optional[str] = None) -> str:
    """Prompt asking for a refactor with rationale."""
    return _render(IMPROVE_PROMPT, code, language)


PROMPT_BUILDERS: dict[str, Callable[[str, Optional[str]], str]] = {
    "review": build_review_prompt,
    "explain": build_explain_prompt,
    "improve": build_improve_prompt
}


def build_prompt(kind: str, code: str, language: Optional[str] = None) -> str:
    """
    Build the prompt for an analysis kind.

    Args:
        kind: One of "review", "explain", "improve"
        code: Source code to analyze
        language: Optional language tag

    Returns:
        The assembled prompt text

    Raises:
        ValueError if the kind is unknown
    """
    builder = PROMPT_BUILDERS.get(kind)
    if builder is None:
        raise ValueError(
            f"Unknown analysis kind '{kind}'. Must be one of: {', '.join(PROMPT_BUILDERS)}"
        )
    return builder(code, language)
