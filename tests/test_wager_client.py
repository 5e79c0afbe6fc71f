import asyncio

import httpx
import pytest

from streamerpulse.core.exceptions import FetchFailed
from streamerpulse.services.wager_client import fetch_with_retry

URL = "https://wager.test/api/invitees/"


class RecordingSleep:
    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


def run_fetch(handler, **kwargs):
    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await fetch_with_retry(client, URL, options={"json": {"pageNo": 1}}, **kwargs)
    return asyncio.run(go())


class TestFetchWithRetry:

    def test_success_first_try(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"code": 0, "data": []})

        sleep = RecordingSleep()
        response = run_fetch(handler, sleep=sleep)
        assert response.json() == {"code": 0, "data": []}
        assert len(calls) == 1
        assert calls[0].method == "POST"
        assert sleep.delays == []

    def test_retries_on_error_status(self):
        statuses = iter([500, 502, 200])

        def handler(request):
            return httpx.Response(next(statuses), json={"code": 0, "data": []})

        sleep = RecordingSleep()
        response = run_fetch(handler, max_attempts=3, backoff=1.0, backoff_multiplier=2.0, sleep=sleep)
        assert response.status_code == 200
        assert sleep.delays == [1.0, 2.0]

    def test_retries_on_network_error(self):
        attempts = []

        def handler(request):
            attempts.append(request)
            if len(attempts) < 2:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(200, json={"code": 0, "data": []})

        response = run_fetch(handler, max_attempts=3, sleep=RecordingSleep())
        assert response.status_code == 200
        assert len(attempts) == 2

    def test_raises_after_exhausting_attempts(self):
        attempts = []

        def handler(request):
            attempts.append(request)
            return httpx.Response(503)

        sleep = RecordingSleep()
        with pytest.raises(FetchFailed) as exc_info:
            run_fetch(handler, max_attempts=5, backoff=0.5, backoff_multiplier=1.0, sleep=sleep)

        assert len(attempts) == 5
        assert sleep.delays == [0.5] * 4
        assert exc_info.value.last_status == 503
        assert exc_info.value.attempts == 5

    def test_failure_carries_last_error(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(FetchFailed) as exc_info:
            run_fetch(handler, max_attempts=2, sleep=RecordingSleep())

        assert isinstance(exc_info.value.last_error, httpx.ReadTimeout)
        assert exc_info.value.last_status is None

    def test_jitter_bounded(self):
        statuses = iter([500, 200])

        def handler(request):
            return httpx.Response(next(statuses))

        sleep = RecordingSleep()
        run_fetch(handler, max_attempts=2, backoff=1.0, jitter=0.5, sleep=sleep)
        assert 1.0 <= sleep.delays[0] <= 1.5
