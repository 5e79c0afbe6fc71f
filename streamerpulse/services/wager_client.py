"""
Retrying HTTP access to the affiliate wagering API.
"""
import asyncio
import logging
import random
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx

from streamerpulse.core.exceptions import FetchFailed

logger = logging.getLogger(__name__)

Sleeper = Callable[[float], Awaitable[None]]


async def fetch_with_retry(
    client: httpx.AsyncClient,
    url: str,
    options: Optional[Dict[str, Any]] = None,
    max_attempts: int = 3,
    backoff: float = 1.0,
    backoff_multiplier: float = 2.0,
    jitter: float = 0.0,
    timeout: Optional[float] = None,
    sleep: Sleeper = asyncio.sleep,
) -> httpx.Response:
    """
    POST to the wagering API, retrying on network errors and non-2xx status.

    Args:
        client: Shared async client for the current aggregation cycle
        url: Endpoint to call
        options: Request keyword arguments (json, headers)
        max_attempts: Total attempts before giving up
        backoff: Delay before the second attempt, in seconds
        backoff_multiplier: Factor applied to the delay after each attempt
        jitter: Upper bound of random seconds added to each delay
        timeout: Per-call deadline in seconds

    Raises:
        FetchFailed: every attempt failed; carries the last error and status
    """
    options = dict(options or {})
    if timeout is not None:
        options["timeout"] = timeout
    delay = backoff
    last_error: Optional[Exception] = None
    last_status: Optional[int] = None

    for attempt in range(1, max_attempts + 1):
        try:
            response = await client.post(url, **options)
            if response.is_success:
                return response
            last_error = None
            last_status = response.status_code
            logger.warning(f"Wager API returned {response.status_code} for {url} (attempt {attempt}/{max_attempts})")
        except httpx.HTTPError as e:
            last_error = e
            last_status = None
            logger.warning(f"Wager API request to {url} failed (attempt {attempt}/{max_attempts}): {e}")

        if attempt < max_attempts:
            await sleep(delay + (random.uniform(0, jitter) if jitter > 0 else 0))
            delay *= backoff_multiplier

    raise FetchFailed(url, max_attempts, last_error=last_error, last_status=last_status)
