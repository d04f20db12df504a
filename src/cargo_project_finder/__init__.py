"""cargo-project-finder core package.

This package provides the scanning logic behind the ``cargo-project-finder``
command and is importable on its own for scripted use.
"""

__all__ = [
    "core",
]
