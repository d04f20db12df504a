"""Fingerprinted scan result."""

from __future__ import annotations

import json
from dataclasses import dataclass
from collections.abc import Iterable
from hashlib import sha256

from .project import Project


def calculate_hash(projects: Iterable[Project]) -> str:
    """Return the SHA-256 hex digest of the compact JSON form of ``projects``.

    The digest depends on project order.
    """
    payload = json.dumps(
        [project.to_dict() for project in projects],
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return sha256(payload.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class ScanResult:
    """Projects found by one scan together with their content hash."""

    hash: str
    projects: tuple[Project, ...]

    def __post_init__(self) -> None:
        if len(self.hash) != 64:
            raise ValueError("hash must be a SHA-256 hex digest")
        if self.hash != calculate_hash(self.projects):
            raise ValueError("hash does not match projects")

    def __len__(self) -> int:
        return len(self.projects)

    def to_dict(self) -> dict[str, object]:
        return {
            "hash": self.hash,
            "projects": [project.to_dict() for project in self.projects],
        }

    @classmethod
    def from_projects(cls, projects: Iterable[Project]) -> ScanResult:
        ordered = tuple(projects)
        return cls(hash=calculate_hash(ordered), projects=ordered)
