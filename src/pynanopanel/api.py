"""Low-level HTTP transport for the Nanoleaf local API.

This module provides direct HTTP communication with a single device.
All methods return (status_code, raw_body) tuples; status checking and
decoding happen in the client layer.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from aiohttp import ClientError, ClientSession
from yarl import URL

from pynanopanel.const import API_BASE_PATH, DEFAULT_PORT
from pynanopanel.exceptions import NanoleafConnectionError, NanoleafTimeoutError


if TYPE_CHECKING:
    from types import TracebackType

_LOGGER = logging.getLogger(__name__)

MAX_PORT = 65535
DOT_SEGMENTS = frozenset({".", ".."})


class NanoleafAPI:
    """Low-level transport for one Nanoleaf device.

    Wraps an aiohttp ClientSession with a fixed base URL
    (``http://{host}:{port}/api/v1/``) and exposes exactly four primitives:
    GET, POST, PUT and DELETE. Each performs one request, never follows
    redirects, and returns the raw status and body.

    The instance holds no per-call state, so a single NanoleafAPI (and its
    session) can be shared by concurrent tasks.

    Example:
        ```python
        from pynanopanel.api import NanoleafAPI

        async with NanoleafAPI("192.168.1.50") as api:
            status, body = await api.get("my-token/state/on")
        ```

    Attributes:
        base_url: Resolved base URL of the device API.
    """

    def __init__(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        *,
        session: ClientSession | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            host: Device hostname or IP address.
            port: Device API port. Defaults to 16021.
            session: Optional aiohttp ClientSession. If not provided, one will be
                created when entering the context manager.

        Raises:
            NanoleafConnectionError: If host and port do not form a valid URL.
        """
        self._session = session
        self._owns_session = session is None
        self._base_url = self._build_base_url(host, port)

    @staticmethod
    def _build_base_url(host: str, port: int) -> URL:
        if not host:
            msg = "Device host must not be empty"
            raise NanoleafConnectionError(msg)
        if not 0 < port <= MAX_PORT:
            msg = f"Device port out of range: {port}"
            raise NanoleafConnectionError(msg)
        try:
            return URL.build(scheme="http", host=host, port=port, path=API_BASE_PATH)
        except (TypeError, ValueError) as err:
            msg = f"Invalid device address {host}:{port}"
            raise NanoleafConnectionError(msg) from err

    @property
    def base_url(self) -> URL:
        """Get the device API base URL."""
        return self._base_url

    async def __aenter__(self) -> NanoleafAPI:
        """Enter the context manager.

        Creates a session if none was injected.

        Returns:
            Self for use in async with statements.
        """
        if self._session is None:
            self._session = ClientSession()
            self._owns_session = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager.

        Closes the session only if it was created by this instance.

        Args:
            exc_type: Exception type if an exception occurred.
            exc_val: Exception value if an exception occurred.
            exc_tb: Exception traceback if an exception occurred.
        """
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def resolve(self, path: str) -> URL:
        """Join a relative path onto the base URL.

        Args:
            path: Path relative to ``/api/v1/`` (e.g. "my-token/state").

        Returns:
            Absolute request URL.

        Raises:
            NanoleafConnectionError: If the path cannot be joined, carries a
                query, fragment or dot segment, or would resolve anywhere but
                a resource below the base URL.
        """
        if "?" in path or "#" in path or any(segment in DOT_SEGMENTS for segment in path.split("/")):
            msg = f"Invalid request path: {path!r}"
            raise NanoleafConnectionError(msg)

        try:
            url = self._base_url.join(URL(path))
        except (TypeError, ValueError) as err:
            msg = f"Invalid request path: {path!r}"
            raise NanoleafConnectionError(msg) from err

        base_path = self._base_url.path
        if url.origin() != self._base_url.origin() or not url.path.startswith(base_path) or url.path == base_path:
            msg = f"Request path {path!r} resolves outside the device API"
            raise NanoleafConnectionError(msg)
        return url

    async def request(
        self,
        method: str,
        path: str,
        *,
        json_data: Any = None,
        headers: dict[str, str] | None = None,
    ) -> tuple[int, bytes]:
        """Perform one HTTP request against the device.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE).
            path: Path relative to the API base URL.
            json_data: Optional JSON-serializable request body.
            headers: Optional extra request headers.

        Returns:
            Tuple of (status_code, raw_body). The body is empty for 204 responses.

        Raises:
            RuntimeError: If session is not initialized or is closed.
            NanoleafTimeoutError: If the session's timeout expires.
            NanoleafConnectionError: If the URL is invalid or the connection fails.
        """
        if self._session is None:
            msg = "Session not initialized. Use 'async with' or provide a session."
            raise RuntimeError(msg)

        if self._session.closed:
            msg = "Session is closed. Cannot make request."
            raise RuntimeError(msg)

        url = self.resolve(path)
        _LOGGER.debug("%s %s", method, url)

        try:
            async with self._session.request(
                method,
                url,
                json=json_data,
                headers=headers,
                allow_redirects=False,
            ) as response:
                body = await response.read()
                return response.status, body

        except TimeoutError as err:
            _LOGGER.exception("Request to %s timed out", url)
            msg = f"Request to {url} timed out"
            raise NanoleafTimeoutError(msg) from err

        except ClientError as err:
            _LOGGER.exception("Connection error for %s", url)
            msg = f"Connection error for {url}: {err}"
            raise NanoleafConnectionError(msg) from err

    # -------------------------------------------------------------------------
    # Verbs
    # -------------------------------------------------------------------------

    async def get(self, path: str) -> tuple[int, bytes]:
        """Send a GET request asking for JSON."""
        return await self.request("GET", path, headers={"Accept": "application/json"})

    async def post(self, path: str, json_data: Any = None) -> tuple[int, bytes]:
        """Send a POST request with an optional JSON body."""
        return await self.request("POST", path, json_data=json_data)

    async def put(self, path: str, json_data: Any) -> tuple[int, bytes]:
        """Send a PUT request with a JSON body."""
        return await self.request("PUT", path, json_data=json_data)

    async def delete(self, path: str) -> tuple[int, bytes]:
        """Send a DELETE request."""
        return await self.request("DELETE", path)
