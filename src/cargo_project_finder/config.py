"""Runtime settings for a scan invocation.

The search root resolves, in order, from an explicit path, the ``HOME``
environment variable, ``USERPROFILE``, and finally the current directory.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path


HOME_ENV_VARS = ("HOME", "USERPROFILE")
DEFAULT_OUTPUT_NAME = "cargo_projects"
OUTPUT_SUFFIX = ".json"


class ConfigError(RuntimeError):
    """Raised when command-line settings are invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Resolved settings for one run."""

    search_path: Path
    skip_hidden: bool = True
    output_path: Path | None = None


def resolve_search_path(path: Path | str | None = None, environ: Mapping[str, str] | None = None) -> Path:
    """Resolve the directory to scan.

    Priority:
    1. Explicit path argument
    2. First of HOME / USERPROFILE that is set
    3. Current directory
    """
    if path is not None:
        return Path(path)

    env = os.environ if environ is None else environ
    for name in HOME_ENV_VARS:
        value = env.get(name)
        if value:
            return Path(value)

    return Path(".")


def resolve_output_path(name: str | None) -> Path | None:
    """Map the ``--output`` value to ``<name>.json``; None disables output."""
    if name is None:
        return None
    if not name:
        raise ConfigError("Output file name must not be empty")
    return Path(f"{name}{OUTPUT_SUFFIX}")


def load_settings(
    path: Path | str | None = None,
    noskip: bool = False,
    output: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    return Settings(
        search_path=resolve_search_path(path, environ),
        skip_hidden=not noskip,
        output_path=resolve_output_path(output),
    )
