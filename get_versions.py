#!/usr/bin/env python3
"""bedrock-versions — thin shim.

Lets ``python get_versions.py [--preview] [--json]`` and
``from get_versions import …`` keep working without installing the
package. The real implementation lives in ``bedrock_versions/``.
"""

from typing import Optional, Sequence

# ── Re-exports from bedrock_versions package ────────────────────────────────
from bedrock_versions.cli import main as _main
from bedrock_versions.parsers import parse_links_to_versions
from bedrock_versions.versions import (
    get_all_preview_versions,
    get_all_stable_versions,
    get_latest_preview_version,
    get_latest_stable_version,
)

__all__ = [
    "get_all_preview_versions",
    "get_all_stable_versions",
    "get_latest_preview_version",
    "get_latest_stable_version",
    "main",
    "parse_links_to_versions",
]


def main(argv: Optional[Sequence[str]] = None) -> int:
    return _main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
