"""Test helpers and utilities."""

from __future__ import annotations

from installer.errors import PromptError


class FakePrompt:
    """Prompt double that returns a canned answer or raises an error.

    Args:
        answer: Value returned from ask()
        error: Exception raised from ask() instead of answering
    """

    def __init__(self, answer: bool = False, error: PromptError | None = None) -> None:
        self.answer = answer
        self.error = error
        self.questions: list[str] = []

    def ask(self, question: str) -> bool:
        self.questions.append(question)
        if self.error is not None:
            raise self.error
        return self.answer
