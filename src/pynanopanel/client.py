"""High-level client for Nanoleaf light panels.

This module maps each device capability onto one HTTP exchange: it builds the
path and JSON body, hands them to the low-level NanoleafAPI transport, checks
the status and decodes the response into pynanopanel.models types.
"""

from __future__ import annotations

import json
import logging
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, TypeVar

from aiohttp import ClientSession  # noqa: TC002 - Used at runtime for injection

from pynanopanel.api import NanoleafAPI
from pynanopanel.const import (
    AUTH_FAILURE_STATUSES,
    DEFAULT_PORT,
    ENDPOINT_EFFECTS,
    ENDPOINT_EFFECTS_LIST,
    ENDPOINT_EFFECTS_SELECT,
    ENDPOINT_NEW_USER,
    ENDPOINT_STATE,
    ENDPOINT_STATE_BRIGHTNESS,
    ENDPOINT_STATE_CT,
    ENDPOINT_STATE_HUE,
    ENDPOINT_STATE_ON,
    ENDPOINT_STATE_SATURATION,
    EXT_CONTROL_COMMAND,
    KEY_BRIGHTNESS,
    KEY_CT,
    KEY_HUE,
    KEY_ON,
    KEY_SATURATION,
    KEY_SELECT,
)
from pynanopanel.exceptions import (
    NanoleafAuthenticationError,
    NanoleafDecodeError,
    NanoleafHTTPStatusError,
)
from pynanopanel.serializers import (
    deserialize_authorization,
    deserialize_on,
    deserialize_panel_info,
    deserialize_range,
    deserialize_state,
    deserialize_string,
    deserialize_string_list,
    serialize_brightness,
    serialize_on,
    serialize_set_range,
)


if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from pynanopanel.models import Authorization, Brightness, On, PanelInfo, Range, SetRange, State

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class NanoleafClient:
    """Client for the local HTTP/JSON API of one Nanoleaf device.

    Every capability method issues exactly one request and either returns the
    decoded value or raises a NanoleafError subclass. The client keeps no
    device state and no session token: the API token is passed explicitly on
    every call, and nothing is retried.

    Example:
        Pairing and basic control:

        ```python
        from pynanopanel import NanoleafClient
        from pynanopanel.models import BrightnessSetWithDuration, On

        async with NanoleafClient("192.168.1.50") as client:
            # Hold the power button on the controller first
            auth = await client.add_user()

            await client.set_on(auth.token, On(value=True))
            await client.set_brightness(auth.token, BrightnessSetWithDuration(value=80, duration=5))
            await client.set_effect(auth.token, "Nebula")
        ```

        With an application-managed session:

        ```python
        from aiohttp import ClientSession, ClientTimeout
        from pynanopanel import NanoleafClient

        async with ClientSession(timeout=ClientTimeout(total=5)) as session:
            client = NanoleafClient("192.168.1.50", session=session)
            effects = await client.get_all_effects(token)
        ```

    Attributes:
        api: Low-level NanoleafAPI transport.
    """

    def __init__(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        *,
        session: ClientSession | None = None,
    ) -> None:
        """Initialize the Nanoleaf client.

        Args:
            host: Device hostname or IP address.
            port: Device API port. Defaults to 16021.
            session: Optional aiohttp ClientSession. If not provided, one will be
                created when entering the context manager.

        Raises:
            NanoleafConnectionError: If host and port do not form a valid URL.
        """
        self._api = NanoleafAPI(host, port, session=session)

    @property
    def api(self) -> NanoleafAPI:
        """Get the underlying transport.

        Returns:
            NanoleafAPI instance.
        """
        return self._api

    async def __aenter__(self) -> NanoleafClient:
        """Enter the context manager.

        Returns:
            Self for use in async with statements.
        """
        await self._api.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager, closing the session if the client owns it."""
        await self._api.__aexit__(exc_type, exc_val, exc_tb)

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    async def add_user(self) -> Authorization:
        """Request a new API token.

        The device only issues a token while it is in pairing mode (power
        button held for several seconds); otherwise it answers 403.

        Returns:
            Authorization carrying the new token.

        Raises:
            NanoleafAuthenticationError: If the device is not in pairing mode.
        """
        return await self.post_value(ENDPOINT_NEW_USER, deserialize_authorization)

    async def delete_user(self, token: str) -> None:
        """Revoke an API token."""
        await self.delete_value(token)

    # -------------------------------------------------------------------------
    # Panel Info
    # -------------------------------------------------------------------------

    async def get_all_info(self, token: str) -> PanelInfo:
        """Get the full device snapshot (identity, state, effects, layout)."""
        return await self.get_value(token, deserialize_panel_info)

    async def get_state(self, token: str) -> State:
        """Get the current light state block."""
        return await self.get_value(ENDPOINT_STATE.format(token=token), deserialize_state)

    # -------------------------------------------------------------------------
    # On
    # -------------------------------------------------------------------------

    async def get_on(self, token: str) -> On:
        """Get the power flag."""
        return await self.get_value(ENDPOINT_STATE_ON.format(token=token), deserialize_on)

    async def set_on(self, token: str, on: On) -> None:
        """Switch the panels on or off."""
        await self._put_state(token, KEY_ON, serialize_on(on))

    # -------------------------------------------------------------------------
    # Brightness
    # -------------------------------------------------------------------------

    async def get_brightness(self, token: str) -> Range:
        """Get the brightness range."""
        return await self.get_value(ENDPOINT_STATE_BRIGHTNESS.format(token=token), deserialize_range)

    async def set_brightness(self, token: str, brightness: Brightness) -> None:
        """Set or adjust brightness.

        Args:
            token: API token.
            brightness: BrightnessIncrement, BrightnessSet or BrightnessSetWithDuration.
        """
        await self._put_state(token, KEY_BRIGHTNESS, serialize_brightness(brightness))

    # -------------------------------------------------------------------------
    # Hue
    # -------------------------------------------------------------------------

    async def get_hue(self, token: str) -> Range:
        """Get the hue range."""
        return await self.get_value(ENDPOINT_STATE_HUE.format(token=token), deserialize_range)

    async def set_hue(self, token: str, hue: SetRange) -> None:
        """Set or adjust hue."""
        await self._put_state(token, KEY_HUE, serialize_set_range(hue))

    # -------------------------------------------------------------------------
    # Saturation
    # -------------------------------------------------------------------------

    async def get_saturation(self, token: str) -> Range:
        """Get the saturation range."""
        return await self.get_value(ENDPOINT_STATE_SATURATION.format(token=token), deserialize_range)

    async def set_saturation(self, token: str, sat: SetRange) -> None:
        """Set or adjust saturation."""
        await self._put_state(token, KEY_SATURATION, serialize_set_range(sat))

    # -------------------------------------------------------------------------
    # Color Temperature
    # -------------------------------------------------------------------------

    async def get_ct(self, token: str) -> Range:
        """Get the color temperature range."""
        return await self.get_value(ENDPOINT_STATE_CT.format(token=token), deserialize_range)

    async def set_ct(self, token: str, ct: SetRange) -> None:
        """Set or adjust color temperature."""
        await self._put_state(token, KEY_CT, serialize_set_range(ct))

    # -------------------------------------------------------------------------
    # Color Mode
    # -------------------------------------------------------------------------

    async def get_color_mode(self, token: str) -> str:
        """Get the color mode.

        Reads the same resource as get_effect.
        """
        return await self.get_value(ENDPOINT_EFFECTS_SELECT.format(token=token), deserialize_string)

    # -------------------------------------------------------------------------
    # Effects
    # -------------------------------------------------------------------------

    async def get_effect(self, token: str) -> str:
        """Get the name of the selected effect."""
        return await self.get_value(ENDPOINT_EFFECTS_SELECT.format(token=token), deserialize_string)

    async def set_effect(self, token: str, effect: str) -> None:
        """Select an effect by name.

        Unknown names are rejected by the device, which surfaces here as
        NanoleafHTTPStatusError.
        """
        await self.put_value(ENDPOINT_EFFECTS_SELECT.format(token=token), {KEY_SELECT: effect})

    async def get_all_effects(self, token: str) -> list[str]:
        """Get the names of all effects stored on the device."""
        return await self.get_value(ENDPOINT_EFFECTS_LIST.format(token=token), deserialize_string_list)

    async def start_external_streaming(self, token: str) -> None:
        """Switch the device into external (streaming) control mode.

        After this call the device listens for frames from an external
        source; what it does with later writes is up to the firmware.
        """
        await self.put_value(ENDPOINT_EFFECTS.format(token=token), EXT_CONTROL_COMMAND)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def get_value(self, path: str, decoder: Callable[[Any], T]) -> T:
        """GET a resource and decode it.

        Args:
            path: Path relative to the API base URL.
            decoder: Converts the parsed JSON into the expected type.

        Returns:
            Decoded value.

        Raises:
            NanoleafHTTPStatusError: If the status is not 2xx.
            NanoleafDecodeError: If the body is not valid JSON or has the wrong shape.
            NanoleafConnectionError: If the request could not be sent.
        """
        status, body = await self._api.get(path)
        self._check_status(path, status, body)
        return decoder(self._parse_json(body))

    async def delete_value(self, path: str) -> None:
        """DELETE a resource.

        Success carries no meaningful body; an empty body or any well-formed
        JSON is accepted.
        """
        status, body = await self._api.delete(path)
        self._check_status(path, status, body)
        if body.strip():
            self._parse_json(body)

    async def post_value(
        self,
        path: str,
        decoder: Callable[[Any], T],
        json_data: Any = None,
    ) -> T:
        """POST an optional body and decode the response."""
        status, body = await self._api.post(path, json_data)
        self._check_status(path, status, body)
        return decoder(self._parse_json(body))

    async def put_value(self, path: str, json_data: Any) -> None:
        """PUT a body; success is any 2xx status, usually 204 No Content."""
        status, body = await self._api.put(path, json_data)
        self._check_status(path, status, body)

    async def _put_state(self, token: str, key: str, value: Any) -> None:
        await self.put_value(ENDPOINT_STATE.format(token=token), {key: value})

    def _check_status(self, path: str, status: int, body: bytes) -> None:
        """Raise for any status outside 2xx without touching the body's shape."""
        if HTTPStatus.OK <= status < HTTPStatus.MULTIPLE_CHOICES:
            return

        text = body.decode("utf-8", errors="replace")
        url = self._api.resolve(path)
        _LOGGER.debug("Request to %s failed: HTTP %d", url, status)

        msg = f"HTTP {status} for {url}"
        if status in AUTH_FAILURE_STATUSES:
            raise NanoleafAuthenticationError(msg, status=status, body=text)
        raise NanoleafHTTPStatusError(msg, status=status, body=text)

    @staticmethod
    def _parse_json(body: bytes) -> Any:
        try:
            return json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as err:
            msg = f"Response is not valid JSON: {err}"
            raise NanoleafDecodeError(msg, body=body.decode("utf-8", errors="replace")) from err
