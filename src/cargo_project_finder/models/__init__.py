"""Data models for discovered Cargo projects."""

from __future__ import annotations

from .project import Project
from .scan_result import ScanResult, calculate_hash

__all__ = [
    "Project",
    "ScanResult",
    "calculate_hash",
]
