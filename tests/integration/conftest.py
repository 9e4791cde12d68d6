"""Pytest configuration and fixtures for integration tests."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from dotenv import load_dotenv

from pynanopanel import NanoleafClient
from pynanopanel.const import DEFAULT_PORT


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


# Load .env file from project root
env_path = Path(__file__).parents[2] / ".env"
load_dotenv(env_path)


@pytest.fixture(scope="session")
def integration_config() -> dict[str, str | int]:
    """Load integration test configuration from environment.

    Returns:
        Dictionary with device address and token.
    """
    host = os.getenv("NANOLEAF_HOST")
    token = os.getenv("NANOLEAF_TOKEN")
    port = int(os.getenv("NANOLEAF_PORT", str(DEFAULT_PORT)))

    if not host or not token:
        pytest.skip("Create a .env file with NANOLEAF_HOST and NANOLEAF_TOKEN to run integration tests")

    return {"host": host, "port": port, "token": token}


@pytest.fixture
def token(integration_config: dict[str, str | int]) -> str:
    """Get the device token."""
    return str(integration_config["token"])


@pytest.fixture
async def live_client(integration_config: dict[str, str | int]) -> AsyncGenerator[NanoleafClient]:
    """Create a client bound to the real device."""
    client = NanoleafClient(str(integration_config["host"]), int(integration_config["port"]))
    async with client:
        yield client


@pytest.fixture(autouse=True)
async def command_delay(request: pytest.FixtureRequest) -> AsyncGenerator[None]:
    """Add a short pause after each integration test so the firmware keeps up."""
    yield
    if "integration" in request.keywords:
        await asyncio.sleep(0.5)
