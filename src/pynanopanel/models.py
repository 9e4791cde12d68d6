"""Data models for Nanoleaf API requests and responses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


__all__ = [
    "Authorization",
    "Brightness",
    "BrightnessIncrement",
    "BrightnessSet",
    "BrightnessSetWithDuration",
    "Effects",
    "Layout",
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
]


@dataclass
class Authorization:
    """Response from the add-user endpoint.

    Attributes:
        token: API token to pass on every subsequent call.
    """

    token: str


@dataclass
class Range:
    """A bounded numeric property (brightness, hue, saturation, ct).

    Bounds are enforced by the device, not by this library.

    Attributes:
        min: Lowest accepted value.
        max: Highest accepted value.
        value: Current value.
    """

    min: int
    max: int
    value: int


@dataclass
class On:
    """Power flag.

    Attributes:
        value: True when the panels are lit.
    """

    value: bool


@dataclass
class State:
    """Current light state.

    Attributes:
        color_mode: Active color mode (e.g. "effect", "hs", "ct").
        brightness: Brightness range.
        ct: Color temperature range.
        hue: Hue range.
        sat: Saturation range.
        on: Power flag.
    """

    color_mode: str
    brightness: Range
    ct: Range
    hue: Range
    sat: Range
    on: On


@dataclass
class Effects:
    """Effect catalog and current selection.

    Attributes:
        effects_list: Names of the effects stored on the device, in device order.
        select: Name of the currently selected effect.
    """

    effects_list: list[str]
    select: str


class ShapeType(IntEnum):
    """Panel hardware variant, encoded on the wire as a small integer."""

    TRIANGLE = 0
    RHYTHM = 1
    SQUARE = 2
    CONTROL_SQUARE_PRIMARY = 3
    CONTROL_SQUARE_PASSIVE = 4
    POWER_SUPPLY = 5


@dataclass
class Position:
    """One physical panel.

    Attributes:
        panel_id: Device-assigned panel identifier.
        o: Orientation angle in degrees.
        x: Horizontal position.
        y: Vertical position.
        shape_type: Panel hardware variant.
    """

    panel_id: int
    o: int
    x: int
    y: int
    shape_type: ShapeType


@dataclass
class Layout:
    """Panel arrangement.

    Attributes:
        num_panels: Number of panels reported by the device.
        side_length: Length of a panel side.
        position_data: One entry per panel.
    """

    num_panels: int
    side_length: int
    position_data: list[Position]


@dataclass
class PanelLayout:
    """Physical panel geometry.

    Attributes:
        global_orientation: Orientation of the whole layout.
        layout: Panel arrangement.
    """

    global_orientation: Range
    layout: Layout


@dataclass
class Rhythm:
    """Rhythm (sound sensor) module status.

    Every field is nullable; devices without a connected module report nulls.
    """

    rhythm_connected: bool | None = None
    rhythm_active: bool | None = None
    rhythm_id: int | None = None
    hardware_version: str | None = None
    firmware_version: str | None = None
    aux_available: bool | None = None
    rhythm_mode: int | None = None
    rhythm_pos: dict[str, Any] | None = None


@dataclass
class PanelInfo:
    """Full device snapshot returned by the info endpoint.

    Attributes:
        name: Device name.
        manufacturer: Manufacturer name.
        model: Hardware model identifier.
        firmware_version: Firmware version string.
        serial_number: Device serial number.
        state: Current light state.
        effects: Effect catalog and selection.
        panel_layout: Physical panel geometry.
        rhythm: Rhythm module status, when reported.
    """

    name: str
    manufacturer: str
    model: str
    firmware_version: str
    serial_number: str
    state: State
    effects: Effects
    panel_layout: PanelLayout
    rhythm: Rhythm | None = None


# Write payloads. These have no tag on the wire; see
# pynanopanel.serializers for the encoding of each variant.


@dataclass
class BrightnessIncrement:
    """Relative brightness change; encoded as a bare integer."""

    increment: int


@dataclass
class BrightnessSet:
    """Absolute brightness; encoded as {"value": n}."""

    value: int


@dataclass
class BrightnessSetWithDuration:
    """Absolute brightness with a transition; encoded as {"value": n, "duration": s}."""

    value: int
    duration: int


@dataclass
class RangeIncrement:
    """Relative hue/saturation/ct change; encoded as a bare integer."""

    increment: int


@dataclass
class RangeSet:
    """Absolute hue/saturation/ct; encoded as {"value": n}."""

    value: int


Brightness = BrightnessIncrement | BrightnessSet | BrightnessSetWithDuration
SetRange = RangeIncrement | RangeSet
