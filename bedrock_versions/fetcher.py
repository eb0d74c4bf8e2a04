"""HTTP fetch of the Bedrock Dedicated Server download links.

All network I/O is isolated here. The rest of the package works with the
parsed JSON payload.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import aiohttp
from tenacity import AsyncRetrying, RetryCallState, stop_after_attempt, wait_fixed

from .config import FetchConfig
from .errors import NetworkError

LINKS_ENDPOINT = "https://net-secondary.web.minecraft-services.net/api/v1.0/download/links"

DEFAULT_HEADERS = {
    "User-Agent": "bedrock-versions/0.1",
    "Accept": "application/json",
}

logger = logging.getLogger(__name__)


async def _fetch_once(session: aiohttp.ClientSession, url: str, timeout: aiohttp.ClientTimeout) -> Any:
    """Perform a single GET and parse the JSON body."""
    async with session.get(url, timeout=timeout) as resp:
        resp.raise_for_status()
        return await resp.json(content_type=None)


def _log_retry(url: str) -> Callable[[RetryCallState], None]:
    """Build a ``before_sleep`` hook that logs the failed attempt number."""

    def log_it(retry_state: RetryCallState) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
        logger.warning(
            "Attempt %d for %s failed (%r), retrying in %.1fs",
            retry_state.attempt_number,
            url,
            exc,
            delay,
        )

    return log_it


async def _fetch_with_retry(
    session: aiohttp.ClientSession,
    url: str,
    config: FetchConfig,
    sleep: Callable[[float], Awaitable[None]],
) -> Any:
    timeout = aiohttp.ClientTimeout(total=config.timeout_seconds)
    attempts = config.retries + 1
    retrying = AsyncRetrying(
        stop=stop_after_attempt(attempts),
        wait=wait_fixed(config.cooldown_seconds),
        before_sleep=_log_retry(url),
        sleep=sleep,
        reraise=True,
    )
    try:
        async for attempt in retrying:
            with attempt:
                return await _fetch_once(session, url, timeout)
    except Exception as e:
        logger.debug("Giving up on %s after %d attempt(s): %r", url, attempts, e)
        raise NetworkError(_describe(e), cause=e) from e


def _describe(exc: BaseException) -> str:
    if isinstance(exc, aiohttp.ClientResponseError):
        return f"HTTP {exc.status}"
    if isinstance(exc, asyncio.TimeoutError):
        return "Request timed out"
    return str(exc) or type(exc).__name__


async def fetch_json(
    url: str = LINKS_ENDPOINT,
    config: FetchConfig | None = None,
    *,
    session: aiohttp.ClientSession | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> Any:
    """Fetch a JSON document, retrying failed attempts after a cooldown.

    Every attempt gets its own ``timeout_ms`` deadline. A timeout, a
    transport error, a non-success status or an unparseable body all count
    as a failed attempt. Failed attempts are followed by a ``cooldown_ms``
    pause while attempts remain.

    Args:
        url: URL to fetch. Defaults to the download links endpoint.
        config: Retry/timeout policy. Defaults to ``FetchConfig()``.
        session: Optional session to reuse. It is left open.
        sleep: Coroutine used for the cooldown pause.

    Returns:
        Parsed JSON body of the first successful response.

    Raises:
        NetworkError: If every attempt failed.
    """
    config = config or FetchConfig()
    if config.retries < 0:
        raise NetworkError("Unknown fetch error")

    if session is not None:
        return await _fetch_with_retry(session, url, config, sleep)

    async with aiohttp.ClientSession(headers=DEFAULT_HEADERS) as own_session:
        return await _fetch_with_retry(own_session, url, config, sleep)
