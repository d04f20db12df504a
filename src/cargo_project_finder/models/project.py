"""Discovered project model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Project:
    """A directory holding a Cargo manifest that declares a package."""

    path: str
    package_name: str | None = None

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("path must be provided")

    @property
    def display_name(self) -> str:
        return self.package_name if self.package_name is not None else "Unknown"

    def to_dict(self) -> dict[str, str | None]:
        return {
            "path": self.path,
            "package_name": self.package_name,
        }
