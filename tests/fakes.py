# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable


class ScriptedAsk:
    """
    Deterministic stand-in for input() in shell tests.

    - Returns the scripted answers in order
    - Captures prompts for assertions
    - Raises EOFError once the script is exhausted (like a closed stdin)
    """

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)


class Emitted:
    """Collects emit() messages."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def __call__(self, text: str) -> None:
        self.lines.append(text)

    def joined(self) -> str:
        return "\n".join(self.lines)
