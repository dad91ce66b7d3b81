"""Shared pytest fixtures for the gogen test suite.

Provides reusable fixtures for:
- Temporary destination roots
- Pre-normalized answers and run contexts
- Prompt engines with canned replies
- A renderer backed by a throwaway template directory
"""

from __future__ import annotations

from pathlib import Path

import pytest

from gogen.scaffolder import (
    Answers,
    RunContext,
    StaticPromptEngine,
    TemplateEmitter,
    TemplateRenderer,
)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def destination_root(tmp_path: Path) -> Path:
    """Empty directory standing in for ``$GOPATH``."""
    root = tmp_path / "gopath"
    root.mkdir()
    yield root


# ---------------------------------------------------------------------------
# Answers & run contexts
# ---------------------------------------------------------------------------

@pytest.fixture
def default_answers() -> Answers:
    """Answers produced when the operator accepts every default."""
    return Answers(app_name="helloworld", repo_url="github.com/spothero/helloworld")


@pytest.fixture
def default_run(destination_root: Path, default_answers: Answers) -> RunContext:
    return RunContext.from_answers(destination_root, default_answers)


@pytest.fixture
def demo_run(destination_root: Path) -> RunContext:
    """Run context for ``'demo service'`` under ``github.com/acme/``."""
    return RunContext(
        destination_root=destination_root,
        app_name="demo-service",
        repo_url="github.com/acme/demo-service",
    )


@pytest.fixture
def demo_engine() -> StaticPromptEngine:
    return StaticPromptEngine({"appName": "demo service", "repoUrl": "github.com/acme/"})


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def emitter() -> TemplateEmitter:
    """Emitter using the bundled templates."""
    return TemplateEmitter()


@pytest.fixture
def scratch_templates(tmp_path: Path) -> Path:
    """A template directory with two small templates."""
    template_dir = tmp_path / "templates"
    template_dir.mkdir()
    (template_dir / "hello.txt.j2").write_text(
        "app={{ appName }} repo={{ repoUrl }}\n", encoding="utf-8"
    )
    (template_dir / "static.txt.j2").write_text("no variables\n", encoding="utf-8")
    return template_dir


@pytest.fixture
def scratch_renderer(scratch_templates: Path) -> TemplateRenderer:
    return TemplateRenderer(scratch_templates)
