"""The fixed list of directories and files a run produces.

Destination paths are relative to the destination root and are expanded
with ``str.format`` against the substitution context, so ``{appName}`` and
``{repoUrl}`` may appear in them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, NamedTuple


class TemplateEntry(NamedTuple):
    """One template and where its rendered output goes."""

    source: str
    destination: str

    def resolve(self, root: Path, context: dict[str, Any]) -> Path:
        return root / self.destination.format(**context)


# Created before any file is rendered, in this order.
DIRECTORIES: tuple[str, ...] = (
    "cmd",
    "pkg",
    "src/{repoUrl}",
    "bin",
)

TEMPLATE_MANIFEST: tuple[TemplateEntry, ...] = (
    TemplateEntry("gitignore.j2", "src/{repoUrl}/.gitignore"),
    TemplateEntry("Makefile.j2", "src/{repoUrl}/Makefile"),
    TemplateEntry("Gopkg.toml.j2", "src/{repoUrl}/Gopkg.toml"),
    TemplateEntry("Gopkg.lock.j2", "src/{repoUrl}/Gopkg.lock"),
    TemplateEntry("Dockerfile.j2", "src/{repoUrl}/Dockerfile"),
    TemplateEntry("docker-compose.yaml.j2", "src/{repoUrl}/docker-compose.yaml"),
    TemplateEntry("README.md.j2", "src/{repoUrl}/README.md"),
    TemplateEntry("cmd.go.j2", "src/{repoUrl}/cmd/cmd.go"),
    TemplateEntry("routes.go.j2", "src/{repoUrl}/pkg/{appName}/routes.go"),
    TemplateEntry("routes_test.go.j2", "src/{repoUrl}/pkg/{appName}/routes_test.go"),
)
