"""Base HTTP client with failure classification and pagination."""

import httpx
from loguru import logger

from settings import API_TIMEOUT, USER_AGENT
from stats_client.errors import (
    FailureKind,
    MalformedUpstreamResponse,
    NotConfigured,
    UpstreamRejected,
    UpstreamUnavailable,
)

PAGE_SIZE = 100
MAX_PAGES = 10


def classify_status(resp: httpx.Response) -> None:
    """Raise the matching upstream error for a non-2xx response."""
    status = resp.status_code
    if status < 400:
        return

    where = f"{resp.request.method} {resp.request.url}"
    if status == 429 or (status == 403 and resp.headers.get("x-ratelimit-remaining") == "0"):
        raise UpstreamRejected(f"{where}: rate limited", FailureKind.RATE_LIMITED)
    if status in (401, 403):
        raise UpstreamRejected(f"{where}: HTTP {status}", FailureKind.UNAUTHORIZED)
    if status == 404:
        raise UpstreamRejected(f"{where}: not found", FailureKind.NOT_FOUND)
    if status >= 500:
        raise UpstreamUnavailable(f"{where}: HTTP {status}", FailureKind.SERVER_ERROR)
    raise MalformedUpstreamResponse(f"{where}: unexpected HTTP {status}")


class BaseClient:
    """Async HTTP client bound to one upstream.

    Calls are never retried here: the first failure is raised as an
    ``UpstreamError`` and the collector decides what to do with it.
    """

    base_url = ""
    timeout: float = API_TIMEOUT

    def __init__(self, timeout: float | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self._client: httpx.AsyncClient | None = None
        self._timeout = timeout or self.timeout
        self._transport = transport
        self._request_count = 0

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": USER_AGENT}

    @staticmethod
    def _require(value: str | None, name: str) -> str:
        """Fail with ``NotConfigured`` before any request goes out."""
        if not value:
            raise NotConfigured(f"{name} is not set")
        return value

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self._timeout,
            headers=self._headers(),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        logger.debug("{}: {} requests", self.__class__.__name__, self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        self._request_count += 1
        try:
            resp = await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise UpstreamUnavailable(f"{method} {url}: timed out ({e.__class__.__name__})") from e
        except httpx.TransportError as e:
            raise UpstreamUnavailable(f"{method} {url}: {e.__class__.__name__}") from e
        classify_status(resp)
        return resp

    @staticmethod
    def _json(resp: httpx.Response) -> dict | list:
        try:
            return resp.json()
        except ValueError as e:
            raise MalformedUpstreamResponse(f"{resp.request.url}: invalid JSON") from e

    async def _get(self, url: str, params: dict | None = None) -> dict | list:
        """GET and decode JSON."""
        return self._json(await self._request("GET", url, params=params))

    async def _post(self, url: str, **kwargs) -> dict | list:
        """POST and decode JSON."""
        return self._json(await self._request("POST", url, **kwargs))

    async def _get_pages(
        self,
        url: str,
        params: dict | None = None,
        max_pages: int = MAX_PAGES,
        items_key: str | None = None,
    ) -> list:
        """Collect a paginated list endpoint.

        Stops on a short page, an empty page or after ``max_pages`` pages;
        anything past the ceiling is not fetched.
        """
        results: list = []
        for page in range(1, max_pages + 1):
            data = await self._get(url, params={**(params or {}), "per_page": PAGE_SIZE, "page": page})
            if items_key and isinstance(data, dict):
                data = data.get(items_key)
            if not isinstance(data, list) or not data:
                break
            results.extend(data)
            if len(data) < PAGE_SIZE:
                break
        return results
