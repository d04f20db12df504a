"""Core scanning entrypoints.

This module holds no command-line concerns so it can be driven from the CLI,
from scripts, or from tests.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .discovery import walk_manifests
from .models import Project, ScanResult
from .parsers.cargo_toml import declares_package, extract_package_name, read_manifest


logger = logging.getLogger(__name__)


def find_cargo_projects(root: Path, skip_hidden: bool = True) -> list[Project]:
    """Return every package-declaring manifest directory under root.

    Results keep walk order and are not deduplicated. A missing root yields an
    empty list; unreadable manifests are skipped.
    """
    root = Path(root)
    if not root.is_dir():
        logger.debug("Search root is not a directory: %s", root)
        return []

    logger.debug("Scanning %s (skip_hidden=%s)", root, skip_hidden)
    projects: list[Project] = []
    for manifest in walk_manifests(root, skip_hidden=skip_hidden):
        contents = read_manifest(manifest)
        if contents is None:
            logger.debug("Skipping unreadable manifest %s", manifest)
            continue
        if not declares_package(contents):
            logger.debug("Skipping manifest without [package] %s", manifest)
            continue

        projects.append(
            Project(
                path=str(manifest.parent),
                package_name=extract_package_name(contents),
            )
        )

    logger.debug("Found %d projects in %s", len(projects), root)
    return projects


def scan_projects(root: Path, skip_hidden: bool = True) -> ScanResult:
    """Scan root and fingerprint the result."""
    return ScanResult.from_projects(find_cargo_projects(root, skip_hidden=skip_hidden))
