"""
GoTrue Client HTTP Transports

The client talks to the service only through the ``GoTrueHttpClient``
(or ``AsyncGoTrueHttpClient``) interface. The httpx implementations below
are the defaults; custom transports must raise ``GoTrueHttpError`` for a
bad status themselves.
"""

import logging
from typing import Any, Dict, Literal, Optional, Protocol, runtime_checkable

import httpx

from .errors import GoTrueHttpError


logger = logging.getLogger("gotrue")

# Anything above this status is reported as GoTrueHttpError
MAX_SUCCESS_STATUS = 301

HttpMethod = Literal["GET", "POST", "PUT"]


@runtime_checkable
class GoTrueHttpClient(Protocol):
    """Synchronous transport interface."""

    def get(self, path: str, headers: Optional[Dict[str, str]] = None) -> Optional[str]:
        ...

    def post(
        self,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        ...

    def put(
        self,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        ...


@runtime_checkable
class AsyncGoTrueHttpClient(Protocol):
    """Asynchronous transport interface."""

    async def get(self, path: str, headers: Optional[Dict[str, str]] = None) -> Optional[str]:
        ...

    async def post(
        self,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        ...

    async def put(
        self,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        ...


def _handle_response(response: httpx.Response) -> Optional[str]:
    """Return the body of a successful response or raise GoTrueHttpError."""
    body = response.text or None
    if response.status_code > MAX_SUCCESS_STATUS:
        raise GoTrueHttpError(response.status_code, body)
    return body


class _HttpxTransportBase:
    """Shared URL and header handling for the httpx transports."""

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        debug: bool = False,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._default_headers = headers or {}
        self._debug = debug

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _headers(self, headers: Optional[Dict[str, str]]) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            **self._default_headers,
            **(headers or {}),
        }

    def _log(self, method: str, path: str, status: int) -> None:
        if self._debug:
            logger.debug("[GoTrue] %s %s -> %d", method, path, status)


class HttpxGoTrueHttpClient(_HttpxTransportBase):
    """Default synchronous transport on top of ``httpx.Client``."""

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 30.0,
        debug: bool = False,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        super().__init__(base_url, headers, debug)
        # Caller-supplied clients stay open on close()
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.Client(timeout=timeout)

    def get(self, path: str, headers: Optional[Dict[str, str]] = None) -> Optional[str]:
        return self._request("GET", path, headers)

    def post(
        self,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        return self._request("POST", path, headers, data)

    def put(
        self,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        return self._request("PUT", path, headers, data)

    def _request(
        self,
        method: HttpMethod,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        response = self._http_client.request(
            method=method,
            url=self._url(path),
            headers=self._headers(headers),
            json=data,
        )
        self._log(method, path, response.status_code)
        return _handle_response(response)

    def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            self._http_client.close()


class AsyncHttpxGoTrueHttpClient(_HttpxTransportBase):
    """Default asynchronous transport on top of ``httpx.AsyncClient``."""

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 30.0,
        debug: bool = False,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(base_url, headers, debug)
        self._timeout = timeout
        self._owns_client = http_client is None
        self._http_client = http_client

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout)
        return self._http_client

    async def get(self, path: str, headers: Optional[Dict[str, str]] = None) -> Optional[str]:
        return await self._request("GET", path, headers)

    async def post(
        self,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        return await self._request("POST", path, headers, data)

    async def put(
        self,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        return await self._request("PUT", path, headers, data)

    async def _request(
        self,
        method: HttpMethod,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        response = await self._get_client().request(
            method=method,
            url=self._url(path),
            headers=self._headers(headers),
            json=data,
        )
        self._log(method, path, response.status_code)
        return _handle_response(response)

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
