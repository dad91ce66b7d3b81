"""gogen configuration.

Typed settings for a single generator run.  The destination root comes from
the ``GOPATH`` environment override; callers hand in an explicit environment
snapshot so resolution never reads process-wide state on its own.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field


DESTINATION_ENV_VAR = "GOPATH"
DEFAULT_DESTINATION = Path("./")

DEFAULT_APP_NAME = "helloworld"
DEFAULT_REPO_PREFIX = "github.com/spothero"


def resolve_destination_root(env: Mapping[str, str]) -> Path:
    """Return the directory all generated output is anchored under.

    ``GOPATH`` is used verbatim when present and non-empty; otherwise the
    current working directory (``./``).  No existence or permission checks
    are made here -- those surface later as emission failures.
    """
    value = env.get(DESTINATION_ENV_VAR)
    if value:
        return Path(value)
    return DEFAULT_DESTINATION


class Question(BaseModel):
    """A single free-text question put to the operator."""

    name: str
    message: str
    default: str = ""


class GeneratorConfig(BaseModel):
    """Settings for one generator run.

    Instances are created once by the CLI entry point and passed through the
    rest of the system.
    """

    destination_root: Path = Field(default=DEFAULT_DESTINATION)
    default_app_name: str = Field(default=DEFAULT_APP_NAME)
    default_repo_prefix: str = Field(default=DEFAULT_REPO_PREFIX)
    template_dir: Path | None = Field(
        default=None,
        description="Override for the bundled template directory",
    )

    def questions(self) -> list[Question]:
        """Return the operator questions, in the order they are asked."""
        return [
            Question(
                name="appName",
                message="What is the name of your application?",
                default=self.default_app_name,
            ),
            Question(
                name="repoUrl",
                message="Where will the repository be located under GOPATH?",
                default=self.default_repo_prefix,
            ),
        ]

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from an environment snapshot.

        Recognised variables (all optional):
            GOPATH -- destination root override.
        """
        return cls(destination_root=resolve_destination_root(env))
