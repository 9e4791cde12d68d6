"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import asyncio
import copy
import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
from unittest.mock import AsyncMock

import pytest
from aiohttp import ClientSession, web

from pynanopanel import NanoleafClient


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable

    from aiohttp.test_utils import TestServer


SAMPLE_PANEL_INFO: dict[str, Any] = {
    "name": "Nanoleaf Light Panels 54:B1:3C",
    "serialNo": "S16361A0123",
    "manufacturer": "Nanoleaf",
    "firmwareVersion": "3.3.3",
    "model": "NL22",
    "state": {
        "brightness": {"value": 100, "max": 100, "min": 0},
        "colorMode": "effect",
        "ct": {"value": 4000, "max": 6500, "min": 1200},
        "hue": {"value": 0, "max": 360, "min": 0},
        "on": {"value": True},
        "sat": {"value": 0, "max": 100, "min": 0},
    },
    "effects": {
        "effectsList": ["Color Burst", "Flames", "Forest", "Nebula", "Northern Lights"],
        "select": "Nebula",
    },
    "panelLayout": {
        "globalOrientation": {"value": 120, "max": 360, "min": 0},
        "layout": {
            "numPanels": 3,
            "sideLength": 150,
            "positionData": [
                {"panelId": 107, "x": 0, "y": 0, "o": 180, "shapeType": 0},
                {"panelId": 114, "x": 74, "y": 43, "o": 240, "shapeType": 0},
                {"panelId": 0, "x": -74, "y": 43, "o": 0, "shapeType": 5},
            ],
        },
    },
    "rhythm": {
        "auxAvailable": None,
        "firmwareVersion": None,
        "hardwareVersion": None,
        "rhythmActive": None,
        "rhythmConnected": False,
        "rhythmId": None,
        "rhythmMode": None,
        "rhythmPos": None,
    },
}


@pytest.fixture
def panel_info_data() -> dict[str, Any]:
    """Return a fresh copy of a full device snapshot.

    Returns:
        Wire-format panel info dictionary.
    """
    return copy.deepcopy(SAMPLE_PANEL_INFO)


@pytest.fixture
async def mock_session() -> AsyncGenerator[ClientSession]:
    """Create a mock aiohttp ClientSession.

    Yields:
        Mock ClientSession for testing.
    """
    session = AsyncMock(spec=ClientSession)
    session.closed = False

    async def mock_close() -> None:
        session.closed = True

    session.close = mock_close

    yield session

    if not session.closed:
        await session.close()


@dataclass
class RecordedRequest:
    """A request received by the mock device."""

    method: str
    path: str
    body: Any
    headers: dict[str, str]


@dataclass
class MockDevice:
    """In-process stand-in for a panel controller.

    Replies are registered per (method, path) where path is relative to
    /api/v1/. Unregistered routes answer 404, like the real firmware.
    """

    requests: list[RecordedRequest] = field(default_factory=list)
    routes: dict[tuple[str, str], Callable[[], web.Response]] = field(default_factory=dict)
    delay: float = 0.0

    def reply(
        self,
        method: str,
        path: str,
        status: int = 200,
        *,
        json_body: Any = None,
        text: str | None = None,
        raw: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Register the response for a route."""

        def factory() -> web.Response:
            if json_body is not None:
                return web.json_response(json_body, status=status, headers=headers)
            if raw is not None:
                return web.Response(status=status, body=raw, headers=headers)
            return web.Response(status=status, text=text, headers=headers)

        self.routes[(method, path)] = factory

    def build_app(self) -> web.Application:
        """Create the aiohttp application serving the registered routes."""
        app = web.Application()
        app.router.add_route("*", "/api/v1/{tail:.*}", self._handle)
        return app

    async def _handle(self, request: web.Request) -> web.Response:
        raw = await request.text()
        path = request.match_info["tail"]
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=path,
                body=json.loads(raw) if raw else None,
                headers=dict(request.headers),
            )
        )

        if self.delay:
            await asyncio.sleep(self.delay)

        factory = self.routes.get((request.method, path))
        if factory is None:
            return web.Response(status=404, text="Not Found")
        return factory()


@pytest.fixture
def device() -> MockDevice:
    """Create an empty mock device."""
    return MockDevice()


@pytest.fixture
async def device_server(aiohttp_server: Callable[..., Any], device: MockDevice) -> TestServer:
    """Serve the mock device on 127.0.0.1 and an ephemeral port."""
    return await aiohttp_server(device.build_app())


@pytest.fixture
async def client(device_server: TestServer) -> AsyncGenerator[NanoleafClient]:
    """Create a client bound to the mock device with its own session."""
    async with NanoleafClient(device_server.host, device_server.port) as nanoleaf:
        yield nanoleaf
