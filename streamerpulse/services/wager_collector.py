"""
Paginated collection of wager records for one affiliate account.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from streamerpulse.core.config import AccountCredential
from streamerpulse.core.exceptions import FetchFailed, MalformedResponse
from streamerpulse.core.leaderboard_config import HIDDEN_USERNAMES, mask_username
from streamerpulse.services.leaderboard_types import WagerRecord
from streamerpulse.services.wager_client import fetch_with_retry

logger = logging.getLogger(__name__)


def _parse_wager(raw: Dict[str, Any]) -> float:
    value = raw.get("wager")
    if value is None:
        value = raw.get("totalWager", 0)
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def normalize_records(raw_entries: List[Any]) -> List[WagerRecord]:
    """
    Filter a raw page and normalize usernames.
    Drops zero or non-numeric wagers, empty names and hidden users.
    """
    records = []
    for raw in raw_entries:
        if not isinstance(raw, dict):
            continue
        name = str(raw.get("name") or "").strip()
        if not name or name.lower() in HIDDEN_USERNAMES:
            continue
        wager = _parse_wager(raw)
        if wager <= 0:
            continue
        records.append(WagerRecord(username=mask_username(name), wager=wager))
    return records


class WagerCollector:
    """Walks the pages of one account until the API runs out of data."""

    def __init__(
        self,
        api_url: str,
        origin: str,
        page_size: int = 500,
        max_pages: int = 100,
        max_attempts: int = 3,
        backoff: float = 1.0,
        backoff_multiplier: float = 2.0,
        jitter: float = 0.0,
        timeout: Optional[float] = None,
        sleep=None,
    ):
        self.api_url = api_url
        self.origin = origin
        self.page_size = page_size
        self.max_pages = max_pages
        self.retry_options = {
            "max_attempts": max_attempts,
            "backoff": backoff,
            "backoff_multiplier": backoff_multiplier,
            "jitter": jitter,
            "timeout": timeout,
        }
        if sleep is not None:
            self.retry_options["sleep"] = sleep

    async def collect_account(
        self,
        client: httpx.AsyncClient,
        credential: AccountCredential,
        period_start: int,
        period_end: int,
    ) -> List[WagerRecord]:
        """
        Collect every page for an account within the period.
        On an unrecoverable fetch error the records gathered so far are returned.
        """
        records: List[WagerRecord] = []
        page_no = 1

        while page_no <= self.max_pages:
            try:
                raw_entries = await self._fetch_page(client, credential, period_start, period_end, page_no)
            except FetchFailed as e:
                logger.error(f"Giving up on account {credential.invitationCode} at page {page_no}: {e}")
                break
            except MalformedResponse as e:
                logger.error(f"Malformed page {page_no} for account {credential.invitationCode}: {e}")
                break

            records.extend(normalize_records(raw_entries))

            if len(raw_entries) < self.page_size:
                break
            page_no += 1
        else:
            logger.warning(f"Account {credential.invitationCode} hit the page cap of {self.max_pages}")

        logger.info(f"Collected {len(records)} records for account {credential.invitationCode}")
        return records

    async def _fetch_page(
        self,
        client: httpx.AsyncClient,
        credential: AccountCredential,
        period_start: int,
        period_end: int,
        page_no: int,
    ) -> List[Any]:
        """Fetch one page. Application-level errors read as an empty page."""
        payload = {
            "invitationCode": credential.invitationCode,
            "accessKey": credential.accessKey,
            "beginTimestamp": period_start,
            "endTimestamp": period_end,
            "pageNo": page_no,
            "pageSize": self.page_size,
        }
        response = await fetch_with_retry(
            client,
            self.api_url,
            options={
                "json": payload,
                "headers": {"Content-Type": "application/json", "Origin": self.origin},
            },
            **self.retry_options,
        )

        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponse(f"Non-JSON body from {self.api_url}: {e}") from e

        if not isinstance(body, dict):
            logger.error(f"Unexpected payload type from wager API: {type(body).__name__}")
            return []
        if body.get("code", 0) != 0:
            logger.warning(f"Wager API error code {body.get('code')} for {credential.invitationCode}: {body.get('msg')}")
            return []
        data = body.get("data")
        if not isinstance(data, list):
            logger.warning(f"Wager API returned no data list for {credential.invitationCode}")
            return []
        return data
