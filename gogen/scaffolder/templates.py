"""Renders the Go service templates shipped in ``gogen/scaffolder/templates``.

Every template sees the same two variables, ``appName`` and ``repoUrl``.
Output is plain text: Go, Makefile, TOML and YAML are never HTML-escaped.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape


_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Loads ``*.j2`` files from one directory and writes them out rendered.

    ``GeneratorConfig.template_dir`` overrides the bundled directory.
    Unknown template names raise ``jinja2.TemplateNotFound``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Return *template_path* rendered with *context* (``appName``, ``repoUrl``)."""
        template = self.env.get_template(template_path)
        return template.render(**context)

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically; an existing file is
        overwritten.  Returns the output path.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        await asyncio.to_thread(_write_file, out, content)
        return out

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` template names."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            str(p.relative_to(self.template_dir))
            for p in self.template_dir.rglob("*.j2")
        )


def _write_file(path: Path, content: str) -> None:
    # Blocking; called through asyncio.to_thread.
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
