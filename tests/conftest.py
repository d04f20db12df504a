from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture()
def make_manifest(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing ``Cargo.toml`` into a directory below tmp_path."""

    def _make(relative: str, contents: str | bytes) -> Path:
        directory = tmp_path / relative
        directory.mkdir(parents=True, exist_ok=True)
        manifest = directory / "Cargo.toml"
        if isinstance(contents, bytes):
            manifest.write_bytes(contents)
        else:
            manifest.write_text(contents, encoding="utf-8")
        return manifest

    return _make
