"""Directory traversal and hidden-entry filtering."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from pathlib import Path


logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "Cargo.toml"


def _has_hidden_attribute(path: Path) -> bool:
    """Return True when the platform marks ``path`` with a native hidden bit.

    Only Windows exposes ``st_file_attributes``; elsewhere this is always False.
    Unreadable metadata counts as "no attribute".
    """
    try:
        st = path.lstat()
    except OSError:
        return False
    attributes = getattr(st, "st_file_attributes", None)
    if attributes is None:
        return False
    return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)


def should_skip(path: Path, root: Path | None = None, *, skip_hidden: bool = True) -> bool:
    """Decide whether a visited entry is excluded from the walk.

    Name check looks at every component of ``path`` relative to ``root`` (the
    full path when no root is given), so the scan root itself is never hidden.
    Scanning from inside a dot-directory such as ``~/.cargo`` therefore
    reports paths under it instead of skipping the whole tree.
    """
    if not skip_hidden:
        return False

    parts = path.relative_to(root).parts if root is not None else path.parts
    if any(part.startswith(".") for part in parts):
        return True

    return _has_hidden_attribute(path)


def walk_manifests(root: Path, skip_hidden: bool = True) -> Iterator[Path]:
    """Yield manifest files under root in depth-first, pre-order walk order.

    Symbolic links are not followed and siblings are visited in sorted order.
    Directories rejected by :func:`should_skip` are pruned before descent.
    """

    def on_error(exc: OSError) -> None:
        logger.debug("Skipping unreadable entry %s: %s", exc.filename, exc)

    for dirpath, dirnames, filenames in os.walk(root, topdown=True, onerror=on_error, followlinks=False):
        current = Path(dirpath)
        # prune in place so os.walk never descends into skipped directories
        dirnames[:] = sorted(
            name for name in dirnames if not should_skip(current / name, root, skip_hidden=skip_hidden)
        )

        for filename in sorted(filenames):
            if filename != MANIFEST_FILENAME:
                continue
            path = current / filename
            try:
                st = path.lstat()
            except OSError as exc:
                logger.debug("Skipping unreadable entry %s: %s", path, exc)
                continue
            if not stat.S_ISREG(st.st_mode):
                continue
            if should_skip(path, root, skip_hidden=skip_hidden):
                logger.debug("Skipping hidden manifest %s", path)
                continue
            yield path
