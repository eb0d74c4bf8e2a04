"""Command line entry point.

Prints the latest stable (or preview) Bedrock Dedicated Server version,
optionally as JSON with the full sorted list.

Examples::

    bedrock-versions                   # 1.21.50
    bedrock-versions --preview         # latest preview a.b.c
    bedrock-versions --json --preview  # {"latest": ..., "list": [...], "preview": true}
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from .config import FetchConfig, find_config, load_config
from .parsers import filter_versions
from .versions import fetch_versions, select_latest


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bedrock-versions",
        description="Look up the latest Minecraft Bedrock Dedicated Server version.",
    )
    p.add_argument("--preview", action="store_true", help="Report the latest preview build instead of stable")
    p.add_argument("--json", action="store_true", help="Print JSON with the latest version and the full list")
    p.add_argument("--config", type=Path, default=None, help="YAML or JSON file with retries/cooldownMs/timeoutMs")
    p.add_argument("--retries", type=int, default=None, help="Retries after the first attempt (default: 1)")
    p.add_argument("--cooldown-ms", type=int, default=None, help="Pause between attempts (default: 15000)")
    p.add_argument("--timeout-ms", type=int, default=None, help="Per-attempt timeout (default: 30000)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log retry attempts to stderr")
    return p


def _resolve_config(args: argparse.Namespace) -> FetchConfig:
    path = args.config or find_config()
    base = load_config(path) if path else FetchConfig()
    return base.merged(
        retries=args.retries,
        cooldown_ms=args.cooldown_ms,
        timeout_ms=args.timeout_ms,
    )


async def _run(config: FetchConfig, preview: bool, as_json: bool) -> str:
    records = await fetch_versions(config)
    latest = select_latest(records, preview=preview)
    if not as_json:
        return latest

    out: dict[str, Any] = {
        "latest": latest,
        "list": [r.to_dict() for r in filter_versions(records, preview=preview)],
        "preview": preview,
    }
    return json.dumps(out, indent=2)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.INFO,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        config = _resolve_config(args)
        print(asyncio.run(_run(config, preview=args.preview, as_json=args.json)))
    except Exception as e:
        print(str(e) or type(e).__name__, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
