#!/usr/bin/env python3
"""Local entrypoint to run the finder from a source checkout.

Usage:
  python scripts/scan.py --path ~/code [--noskip] [--output [FILE]]

This calls the same main() used by the installed ``cargo-project-finder``
console script.
"""

from __future__ import annotations

from cargo_project_finder.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
