"""gogen command-line entry point.

Usage::

    gogen                 # ask for the application name and repository
    gogen --yes           # accept the defaults
    GOPATH=~/go gogen     # write under ~/go instead of ./
"""

from __future__ import annotations

import asyncio
import os
import sys
import time
from collections.abc import Mapping
from pathlib import Path

from gogen.config import GeneratorConfig
from gogen.scaffolder import (
    PromptEngine,
    RichPromptEngine,
    RunContext,
    ScaffoldError,
    StaticPromptEngine,
    TemplateEmitter,
    TemplateRenderer,
    collect_answers,
)
from gogen.utils import format_duration, print_error, print_success, print_summary_table


async def emit_project(config: GeneratorConfig, run_context: RunContext) -> list[Path]:
    """Emit the project for *run_context*.  Returns the written files."""
    emitter = TemplateEmitter(TemplateRenderer(config.template_dir))
    written = await emitter.emit(run_context)

    print_summary_table(
        {
            "Application": run_context.app_name,
            "Repository": run_context.repo_url,
            "Source directory": str(run_context.source_dir),
            "Files written": str(len(written)),
        },
        title="gogen",
    )
    return written


def main(argv: list[str] | None = None, env: Mapping[str, str] | None = None) -> None:
    """CLI entry point for ``gogen`` / ``python -m gogen.cli``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Scaffold a Go HTTP service built on SpotHero core",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Output is written under $GOPATH when set, otherwise ./\n"
            "Examples:\n"
            "  gogen\n"
            "  GOPATH=$HOME/go gogen --yes\n"
        ),
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Accept every default answer without prompting",
    )
    args = parser.parse_args(argv)

    config = GeneratorConfig.from_env(os.environ if env is None else env)
    engine: PromptEngine = StaticPromptEngine() if args.yes else RichPromptEngine()

    started = time.monotonic()
    try:
        answers = collect_answers(engine, config)
        run_context = RunContext.from_answers(config.destination_root, answers)
        asyncio.run(emit_project(config, run_context))
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)

    print_success(f"Project generated in {format_duration(time.monotonic() - started)}")


if __name__ == "__main__":
    main()
