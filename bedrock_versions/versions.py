"""Public async operations for looking up Bedrock server versions.

Each call performs its own fetch of the links endpoint. Nothing is cached
or shared between calls.

Usage::

    import asyncio
    from bedrock_versions import FetchConfig, get_latest_stable_version

    latest = asyncio.run(get_latest_stable_version(FetchConfig(retries=2)))
"""

from __future__ import annotations

from collections.abc import Iterable

import aiohttp

from .config import FetchConfig
from .errors import NotFoundError
from .fetcher import LINKS_ENDPOINT, fetch_json
from .parsers import VersionRecord, filter_versions, latest_version, parse_links_to_versions


async def fetch_versions(
    config: FetchConfig | None = None,
    session: aiohttp.ClientSession | None = None,
) -> list[VersionRecord]:
    """Fetch the links endpoint and extract every stable and preview version.

    Args:
        config: Retry/timeout policy.
        session: Optional session to reuse.

    Returns:
        Unique records in payload order.

    Raises:
        NetworkError: If the endpoint could not be fetched.
    """
    payload = await fetch_json(LINKS_ENDPOINT, config, session=session)
    return parse_links_to_versions(payload)


def select_latest(records: Iterable[VersionRecord], preview: bool) -> str:
    """Return the newest ``major.minor.patch`` of the stable or preview subset.

    Raises:
        NotFoundError: If the subset is empty.
    """
    latest = latest_version(r for r in records if r.preview == preview)
    if latest is None:
        kind = "preview" if preview else "stable"
        raise NotFoundError(f"No {kind} versions found")
    return latest.short_version


async def get_all_stable_versions(
    config: FetchConfig | None = None,
    session: aiohttp.ClientSession | None = None,
) -> list[VersionRecord]:
    """Return all stable (non-preview) versions, sorted ascending."""
    return filter_versions(await fetch_versions(config, session), preview=False)


async def get_all_preview_versions(
    config: FetchConfig | None = None,
    session: aiohttp.ClientSession | None = None,
) -> list[VersionRecord]:
    """Return all preview versions, sorted ascending."""
    return filter_versions(await fetch_versions(config, session), preview=True)


async def get_latest_stable_version(
    config: FetchConfig | None = None,
    session: aiohttp.ClientSession | None = None,
) -> str:
    """Get the latest stable version as ``a.b.c`` (build number dropped)."""
    return select_latest(await get_all_stable_versions(config, session), preview=False)


async def get_latest_preview_version(
    config: FetchConfig | None = None,
    session: aiohttp.ClientSession | None = None,
) -> str:
    """Get the latest preview version as ``a.b.c`` (build number dropped)."""
    return select_latest(await get_all_preview_versions(config, session), preview=True)
