"""Lightweight Cargo.toml reading and package-name extraction."""

from __future__ import annotations

from pathlib import Path


PACKAGE_MARKER = "[package]"


def read_manifest(path: Path) -> str | None:
    """Return the manifest text, or None when it cannot be read as UTF-8."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def declares_package(contents: str) -> bool:
    """Workspace-only manifests have no ``[package]`` table."""
    return PACKAGE_MARKER in contents


def extract_package_name(contents: str) -> str | None:
    """Return the value of the first line starting with ``name``.

    Matching is line based and does not track TOML tables, so the first
    ``name`` line in the file wins wherever it appears.
    """
    for line in contents.splitlines():
        line = line.strip()
        if line.startswith("name"):
            _, sep, value = line.partition("=")
            if not sep:
                return None
            return value.strip().strip('"')
    return None
