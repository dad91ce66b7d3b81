"""gogen scaffolder -- generates a Go HTTP service skeleton.

Asks the operator for an application name and repository prefix, then
renders a fixed set of templates (Makefile, dep manifests, Docker files,
cobra entry point, routes and tests) under ``<root>/src/<repoUrl>/``.

Quick usage::

    from gogen.scaffolder import RunContext, StaticPromptEngine, TemplateEmitter, collect_answers

    answers = collect_answers(StaticPromptEngine({"appName": "demo service"}))
    run = RunContext.from_answers(Path("/tmp/go"), answers)
    written = await TemplateEmitter().emit(run)
"""

from gogen.scaffolder.answers import (
    Answers,
    PromptEngine,
    RichPromptEngine,
    StaticPromptEngine,
    collect_answers,
)
from gogen.scaffolder.errors import EmissionError, InputError, ScaffoldError
from gogen.scaffolder.generator import RunContext, TemplateEmitter
from gogen.scaffolder.manifest import DIRECTORIES, TEMPLATE_MANIFEST, TemplateEntry
from gogen.scaffolder.templates import TemplateRenderer

__all__ = [
    "Answers",
    "DIRECTORIES",
    "EmissionError",
    "InputError",
    "PromptEngine",
    "RichPromptEngine",
    "RunContext",
    "ScaffoldError",
    "StaticPromptEngine",
    "TEMPLATE_MANIFEST",
    "TemplateEmitter",
    "TemplateEntry",
    "TemplateRenderer",
    "collect_answers",
]
