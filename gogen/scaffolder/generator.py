"""Template emission for a single generator run.

Takes a ``RunContext`` and writes the fixed directory layout and template
manifest under its destination root.  Emission is fail-fast: the first
filesystem or template error aborts the run and nothing already written is
rolled back.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from jinja2 import TemplateError
from pydantic import BaseModel, ConfigDict

from gogen.utils import console, ensure_dir

from .answers import Answers
from .errors import EmissionError
from .manifest import DIRECTORIES, TEMPLATE_MANIFEST, TemplateEntry
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Run context
# ---------------------------------------------------------------------------


class RunContext(BaseModel):
    """Everything a run needs once the operator has answered.

    Built once after answer collection and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    destination_root: Path
    app_name: str
    repo_url: str

    @classmethod
    def from_answers(cls, destination_root: Path, answers: Answers) -> "RunContext":
        return cls(
            destination_root=destination_root,
            app_name=answers.app_name,
            repo_url=answers.repo_url,
        )

    @property
    def source_dir(self) -> Path:
        """The nested source directory mirroring the repository path."""
        return self.destination_root / f"src/{self.repo_url}"

    def template_context(self) -> dict[str, Any]:
        """Substitution variables shared by every template render."""
        return {"appName": self.app_name, "repoUrl": self.repo_url}


# ---------------------------------------------------------------------------
# Emitter
# ---------------------------------------------------------------------------


class TemplateEmitter:
    """Writes the project skeleton for a ``RunContext``.

    Generates, relative to the destination root:
    - ``cmd/``, ``pkg/`` and ``bin/`` workspace directories
    - ``src/<repoUrl>/`` with build, container and dependency metadata
    - a cobra entry point and an HTTP routing package with tests
    """

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    async def emit(
        self,
        run: RunContext,
        manifest: Sequence[TemplateEntry] = TEMPLATE_MANIFEST,
    ) -> list[Path]:
        """Create the directory tree and render every manifest entry, in order.

        Returns:
            The written file paths, in manifest order.

        Raises:
            EmissionError: A directory or file could not be created, or a
                template is missing or invalid.
        """
        context = run.template_context()

        console.print("Generating tree folders")
        await self._create_directories(run.destination_root, context)

        written: list[Path] = []
        for entry in manifest:
            out = entry.resolve(run.destination_root, context)
            try:
                await self.renderer.render_to_file(entry.source, out, context)
            except (OSError, TemplateError) as exc:
                raise EmissionError(out, f"cannot render {entry.source}: {exc}") from exc
            written.append(out)

        return written

    async def _create_directories(self, root: Path, context: dict[str, Any]) -> None:
        """Create the fixed top-level directories; existing ones are kept."""
        for d in DIRECTORIES:
            path = root / d.format(**context)
            try:
                await asyncio.to_thread(ensure_dir, path)
            except OSError as exc:
                raise EmissionError(path, f"cannot create directory: {exc}") from exc
