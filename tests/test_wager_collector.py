import asyncio
import json

import httpx

from streamerpulse.core.config import AccountCredential
from streamerpulse.services.leaderboard_types import WagerRecord
from streamerpulse.services.wager_collector import WagerCollector, normalize_records

URL = "https://wager.test/api/invitees/"
ACCOUNT = AccountCredential(invitationCode="code1", accessKey="key1")


async def no_sleep(delay):
    return None


def make_collector(page_size=3, max_pages=10, max_attempts=2):
    return WagerCollector(
        api_url=URL,
        origin="https://wager.test",
        page_size=page_size,
        max_pages=max_pages,
        max_attempts=max_attempts,
        backoff=0,
        sleep=no_sleep,
    )


def collect(handler, collector=None):
    collector = collector or make_collector()

    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await collector.collect_account(client, ACCOUNT, 1000, 2000)
    return asyncio.run(go())


def page(*rows, code=0):
    return httpx.Response(200, json={"code": code, "data": [{"name": n, "wager": w} for n, w in rows], "msg": "ok"})


class TestNormalizeRecords:

    def test_filters_and_masks(self):
        raw = [
            {"name": "username", "wager": 12.5},
            {"name": "bob", "totalWager": "7"},
            {"name": "Hidden", "wager": 100},
            {"name": "zero", "wager": 0},
            {"name": "  ", "wager": 5},
            {"name": "weird", "wager": "abc"},
            "not-a-dict",
        ]
        assert normalize_records(raw) == [
            WagerRecord("us*****me", 12.5),
            WagerRecord("bob", 7.0),
        ]

    def test_wager_preferred_over_total_wager(self):
        assert normalize_records([{"name": "amy", "wager": 3, "totalWager": 9}]) == [WagerRecord("amy", 3.0)]


class TestCollectAccount:

    def test_paginates_until_short_page(self):
        requests_seen = []

        def handler(request):
            body = json.loads(request.content)
            requests_seen.append(body)
            if body["pageNo"] == 1:
                return page(("ann", 1), ("ben", 2), ("cat", 3))
            return page(("dan", 4))

        records = collect(handler)
        assert [r.username for r in records] == ["ann", "ben", "cat", "dan"]
        assert [b["pageNo"] for b in requests_seen] == [1, 2]
        assert requests_seen[0] == {
            "invitationCode": "code1",
            "accessKey": "key1",
            "beginTimestamp": 1000,
            "endTimestamp": 2000,
            "pageNo": 1,
            "pageSize": 3,
        }

    def test_page_size_counts_raw_rows(self):
        # a full page of filtered rows still asks for the next page
        def handler(request):
            body = json.loads(request.content)
            if body["pageNo"] == 1:
                return page(("hidden", 5), ("zed", 0), ("amy", 1))
            return page()

        records = collect(handler)
        assert records == [WagerRecord("amy", 1.0)]

    def test_stops_on_error_code(self):
        calls = []

        def handler(request):
            calls.append(request)
            return page(("ann", 1), ("ben", 2), ("cat", 3), code=1001)

        assert collect(handler) == []
        assert len(calls) == 1

    def test_missing_data_is_empty_page(self):
        def handler(request):
            return httpx.Response(200, json={"code": 0, "msg": "no data"})

        assert collect(handler) == []

    def test_malformed_body_is_empty_page(self):
        def handler(request):
            return httpx.Response(200, text="<html>gateway</html>")

        assert collect(handler) == []

    def test_returns_partial_results_on_failure(self):
        def handler(request):
            body = json.loads(request.content)
            if body["pageNo"] == 1:
                return page(("ann", 1), ("ben", 2), ("cat", 3))
            return httpx.Response(500)

        records = collect(handler)
        assert [r.username for r in records] == ["ann", "ben", "cat"]

    def test_network_failure_yields_nothing(self):
        def handler(request):
            raise httpx.ConnectError("down", request=request)

        assert collect(handler) == []

    def test_page_cap(self):
        calls = []

        def handler(request):
            calls.append(request)
            return page(("ann", 1), ("ben", 2), ("cat", 3))

        collect(handler, make_collector(max_pages=4))
        assert len(calls) == 4
