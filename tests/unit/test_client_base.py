"""Tests for the shared HTTP client: failure classification and pagination."""

import httpx
import pytest

from stats_client.base import PAGE_SIZE, BaseClient, classify_status
from stats_client.errors import (
    FailureKind,
    MalformedUpstreamResponse,
    UpstreamRejected,
    UpstreamUnavailable,
)
from stats_client.lanyard import LanyardClient
from stats_client.result import as_result


class DemoClient(BaseClient):
    base_url = "https://api.test"


def response(status: int, headers: dict | None = None) -> httpx.Response:
    return httpx.Response(status, headers=headers, request=httpx.Request("GET", "https://api.test/x"))


def client_for(handler) -> DemoClient:
    return DemoClient(transport=httpx.MockTransport(handler))


class TestClassifyStatus:
    def test_success_passes(self):
        classify_status(response(200))

    @pytest.mark.parametrize(
        "status,headers,kind",
        [
            (429, None, FailureKind.RATE_LIMITED),
            (403, {"x-ratelimit-remaining": "0"}, FailureKind.RATE_LIMITED),
            (403, None, FailureKind.UNAUTHORIZED),
            (401, None, FailureKind.UNAUTHORIZED),
            (404, None, FailureKind.NOT_FOUND),
        ],
    )
    def test_rejected(self, status, headers, kind):
        with pytest.raises(UpstreamRejected) as exc:
            classify_status(response(status, headers))
        assert exc.value.kind == kind

    def test_server_error(self):
        with pytest.raises(UpstreamUnavailable) as exc:
            classify_status(response(502))
        assert exc.value.kind == FailureKind.SERVER_ERROR
        assert exc.value.kind.is_transient

    def test_other_client_error(self):
        with pytest.raises(MalformedUpstreamResponse):
            classify_status(response(418))


class TestRequest:
    async def test_timeout(self):
        def handler(request):
            raise httpx.ConnectTimeout("slow", request=request)

        async with client_for(handler) as client:
            with pytest.raises(UpstreamUnavailable) as exc:
                await client._get("/x")
        assert exc.value.kind == FailureKind.NETWORK_TIMEOUT

    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        async with client_for(handler) as client:
            result = await as_result(client._get("/x"))
        assert result.failure == FailureKind.NETWORK_TIMEOUT
        assert result.is_transient

    async def test_invalid_json(self):
        async with client_for(lambda r: httpx.Response(200, text="<html>")) as client:
            result = await as_result(client._get("/x"))
        assert result.failure == FailureKind.MALFORMED_RESPONSE
        assert not result.is_transient

    async def test_missing_credential(self):
        async with LanyardClient(transport=httpx.MockTransport(lambda r: httpx.Response(500))) as client:
            result = await as_result(client.presence(None))
        assert result.failure == FailureKind.NOT_CONFIGURED
        assert not result.is_transient

    async def test_user_agent(self):
        seen = {}

        def handler(request):
            seen.update(request.headers)
            return httpx.Response(200, json={})

        async with client_for(handler) as client:
            await client._get("/x")
        assert seen["user-agent"] == "Personal-Stats-API/1.0"


class TestPagination:
    def pages(self, sizes: list[int], key: str | None = None):
        calls = []

        def handler(request):
            page = int(request.url.params["page"])
            calls.append(page)
            items = list(range(sizes[page - 1])) if page <= len(sizes) else []
            return httpx.Response(200, json={key: items} if key else items)

        return handler, calls

    async def test_stops_on_short_page(self):
        handler, calls = self.pages([PAGE_SIZE, 30])
        async with client_for(handler) as client:
            items = await client._get_pages("/list")
        assert len(items) == PAGE_SIZE + 30
        assert calls == [1, 2]

    async def test_stops_on_empty_page(self):
        handler, calls = self.pages([PAGE_SIZE, 0])
        async with client_for(handler) as client:
            items = await client._get_pages("/list")
        assert len(items) == PAGE_SIZE
        assert calls == [1, 2]

    async def test_page_ceiling(self):
        handler, calls = self.pages([PAGE_SIZE] * 5)
        async with client_for(handler) as client:
            items = await client._get_pages("/list", max_pages=3)
        assert len(items) == 3 * PAGE_SIZE
        assert calls == [1, 2, 3]

    async def test_items_key(self):
        handler, _ = self.pages([5], key="items")
        async with client_for(handler) as client:
            items = await client._get_pages("/search", items_key="items")
        assert items == [0, 1, 2, 3, 4]

    async def test_passes_params(self):
        seen = []

        def handler(request):
            seen.append(dict(request.url.params))
            return httpx.Response(200, json=[])

        async with client_for(handler) as client:
            await client._get_pages("/list", {"type": "all"})
        assert seen == [{"type": "all", "per_page": str(PAGE_SIZE), "page": "1"}]
