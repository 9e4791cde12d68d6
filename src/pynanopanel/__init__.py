"""Python client library for Nanoleaf light panels.

This package provides an async client for the local HTTP/JSON API that
Nanoleaf-style panel controllers expose on port 16021.

The library is organized into two layers:
1. **API Layer** (pynanopanel.api): Raw HTTP transport bound to one device
2. **Client Layer** (pynanopanel.client): One method per device capability,
   with status checking and decoding into pynanopanel.models types

Example:
    ```python
    from pynanopanel import NanoleafClient
    from pynanopanel.models import BrightnessIncrement, RangeSet

    async with NanoleafClient("192.168.1.50") as client:
        info = await client.get_all_info(token)
        print(f"{info.name}: {info.panel_layout.layout.num_panels} panels")

        await client.set_brightness(token, BrightnessIncrement(-10))
        await client.set_hue(token, RangeSet(value=240))
    ```
"""

from __future__ import annotations

from pynanopanel.api import NanoleafAPI
from pynanopanel.client import NanoleafClient
from pynanopanel.exceptions import (
    NanoleafAuthenticationError,
    NanoleafConnectionError,
    NanoleafDecodeError,
    NanoleafError,
    NanoleafHTTPStatusError,
    NanoleafTimeoutError,
)
from pynanopanel.models import (
    Authorization,
    Brightness,
    BrightnessIncrement,
    BrightnessSet,
    BrightnessSetWithDuration,
    Effects,
    Layout,
    On,
    PanelInfo,
    PanelLayout,
    Position,
    Range,
    RangeIncrement,
    RangeSet,
    Rhythm,
    SetRange,
    ShapeType,
    State,
)


__version__ = "0.1.0"

__all__ = [
    "Authorization",
    "Brightness",
    "BrightnessIncrement",
    "BrightnessSet",
    "BrightnessSetWithDuration",
    "Effects",
    "Layout",
    "NanoleafAPI",
    "NanoleafAuthenticationError",
    "NanoleafClient",
    "NanoleafConnectionError",
    "NanoleafDecodeError",
    "NanoleafError",
    "NanoleafHTTPStatusError",
    "NanoleafTimeoutError",
    "On",
    "PanelInfo",
    "PanelLayout",
    "Position",
    "Range",
    "RangeIncrement",
    "RangeSet",
    "Rhythm",
    "SetRange",
    "ShapeType",
    "State",
    "__version__",
]
