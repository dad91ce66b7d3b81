"""Operator questions and answer normalization.

The collector asks two questions through a pluggable prompt engine and turns
the raw replies into the application slug and the full repository path that
every template is rendered with.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Protocol

from pydantic import BaseModel
from rich.prompt import Prompt

from gogen.config import GeneratorConfig, Question
from gogen.utils import console

from .errors import InputError


class Answers(BaseModel):
    """Normalized operator answers."""

    app_name: str
    repo_url: str


# ---------------------------------------------------------------------------
# Prompt engines
# ---------------------------------------------------------------------------


class PromptEngine(Protocol):
    """Anything that can answer a list of questions."""

    def ask(self, questions: Sequence[Question]) -> dict[str, str]: ...


class RichPromptEngine:
    """Asks each question on the terminal with ``rich.prompt.Prompt``.

    An empty reply selects the question's default.  Prompts block on the
    calling thread, which must be the main thread and outside a running event
    loop so that Ctrl-C interrupts the read.
    """

    def ask(self, questions: Sequence[Question]) -> dict[str, str]:
        answers: dict[str, str] = {}
        for question in questions:
            try:
                answers[question.name] = Prompt.ask(
                    question.message,
                    default=question.default,
                    console=console,
                )
            except (EOFError, KeyboardInterrupt) as exc:
                raise InputError(f"No answer for {question.name!r}") from exc
        return answers


class StaticPromptEngine:
    """Answers from a fixed mapping, falling back to each question's default.

    Used for non-interactive runs (``gogen --yes``).
    """

    def __init__(self, answers: Mapping[str, str] | None = None) -> None:
        self.answers = dict(answers or {})

    def ask(self, questions: Sequence[Question]) -> dict[str, str]:
        return {q.name: self.answers.get(q.name, q.default) for q in questions}


# ---------------------------------------------------------------------------
# Collection
# ---------------------------------------------------------------------------


def collect_answers(
    engine: PromptEngine,
    config: GeneratorConfig | None = None,
) -> Answers:
    """Ask the operator for the application name and repository prefix.

    Raises:
        InputError: The engine returned without one of the answers.
    """
    config = config or GeneratorConfig()
    raw = engine.ask(config.questions())

    missing = [q.name for q in config.questions() if q.name not in raw]
    if missing:
        raise InputError(f"Missing answers: {', '.join(missing)}")

    app_name = slugify_app_name(raw["appName"])
    return Answers(app_name=app_name, repo_url=build_repo_url(raw["repoUrl"], app_name))


def slugify_app_name(raw: str) -> str:
    """Replace each whitespace run with ``-`` and lowercase.

    ``'Hello World'`` -> ``'hello-world'``.  No other characters are touched.
    """
    return re.sub(r"\s+", "-", raw).lower()


def build_repo_url(prefix: str, app_name: str) -> str:
    """Join the repository prefix and the app slug with exactly one ``/``."""
    if not prefix.endswith("/"):
        prefix += "/"
    return prefix + app_name
