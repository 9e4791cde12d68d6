"""Serialization and deserialization of API payloads.

This module provides stateless functions for converting between decoded JSON
values and typed domain models. The client passes the ``deserialize_*``
functions to its transcoding helpers as decoders, and uses the
``serialize_*`` functions to build request bodies.

Design Philosophy:
    - Stateless functions (no classes, no state)
    - Structural checks only: wrong types, missing keys and unknown enum codes
      raise NanoleafDecodeError, but value bounds are left to the device
    - Untagged unions are resolved by an explicit, ordered list of shape checks
"""

from __future__ import annotations

from typing import Any

from pynanopanel.exceptions import NanoleafDecodeError
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


# -------------------------------------------------------------------------
# Primitive checks
# -------------------------------------------------------------------------


def _expect_object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        msg = f"Expected JSON object for {what}, got {type(data).__name__}"
        raise NanoleafDecodeError(msg)
    return data


def _field(data: dict[str, Any], key: str, what: str) -> Any:
    if key not in data:
        msg = f"Missing field '{key}' in {what}"
        raise NanoleafDecodeError(msg)
    return data[key]


def _is_int(value: Any) -> bool:
    # bool is a subclass of int, but true/false are not integers on the wire
    return isinstance(value, int) and not isinstance(value, bool)


def _is_uint(value: Any) -> bool:
    return _is_int(value) and value >= 0


def _int(data: dict[str, Any], key: str, what: str) -> int:
    value = _field(data, key, what)
    if not _is_int(value):
        msg = f"Field '{key}' in {what} must be an integer, got {value!r}"
        raise NanoleafDecodeError(msg)
    return int(value)


def _uint(data: dict[str, Any], key: str, what: str) -> int:
    value = _int(data, key, what)
    if value < 0:
        msg = f"Field '{key}' in {what} must be non-negative, got {value}"
        raise NanoleafDecodeError(msg)
    return value


def _str(data: dict[str, Any], key: str, what: str) -> str:
    value = _field(data, key, what)
    if not isinstance(value, str):
        msg = f"Field '{key}' in {what} must be a string, got {value!r}"
        raise NanoleafDecodeError(msg)
    return value


def _bool(data: dict[str, Any], key: str, what: str) -> bool:
    value = _field(data, key, what)
    if not isinstance(value, bool):
        msg = f"Field '{key}' in {what} must be a boolean, got {value!r}"
        raise NanoleafDecodeError(msg)
    return value


def _optional(data: dict[str, Any], key: str, kind: type, what: str) -> Any:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, kind) or (isinstance(value, bool) and kind is not bool):
        msg = f"Field '{key}' in {what} has unexpected type {type(value).__name__}"
        raise NanoleafDecodeError(msg)
    return value


# -------------------------------------------------------------------------
# Read models
# -------------------------------------------------------------------------


def deserialize_authorization(data: Any) -> Authorization:
    """Deserialize the add-user response.

    Args:
        data: Decoded JSON in format {"auth_token": str}.

    Returns:
        Authorization instance.

    Raises:
        NanoleafDecodeError: If the token is missing, not a string, or empty.
    """
    obj = _expect_object(data, "authorization")
    token = _str(obj, "auth_token", "authorization")
    if not token:
        msg = "Device issued an empty auth_token"
        raise NanoleafDecodeError(msg)
    return Authorization(token=token)


def deserialize_range(data: Any, what: str = "range") -> Range:
    """Deserialize a {"min", "max", "value"} object.

    Example:
        >>> deserialize_range({"min": 0, "max": 100, "value": 50})
        Range(min=0, max=100, value=50)
    """
    obj = _expect_object(data, what)
    return Range(
        min=_uint(obj, "min", what),
        max=_uint(obj, "max", what),
        value=_uint(obj, "value", what),
    )


def serialize_range(value: Range) -> dict[str, int]:
    """Serialize a Range to its wire object."""
    return {"min": value.min, "max": value.max, "value": value.value}


def deserialize_on(data: Any) -> On:
    """Deserialize a {"value": bool} power flag."""
    obj = _expect_object(data, "on")
    return On(value=_bool(obj, "value", "on"))


def serialize_on(value: On) -> dict[str, bool]:
    """Serialize an On flag to its wire object."""
    return {"value": value.value}


def deserialize_state(data: Any) -> State:
    """Deserialize the state block of the device.

    Args:
        data: Decoded JSON in format:
              {"colorMode": str, "brightness": {...}, "ct": {...},
               "hue": {...}, "sat": {...}, "on": {"value": bool}}

    Returns:
        State instance.
    """
    obj = _expect_object(data, "state")
    return State(
        color_mode=_str(obj, "colorMode", "state"),
        brightness=deserialize_range(_field(obj, "brightness", "state"), "brightness"),
        ct=deserialize_range(_field(obj, "ct", "state"), "ct"),
        hue=deserialize_range(_field(obj, "hue", "state"), "hue"),
        sat=deserialize_range(_field(obj, "sat", "state"), "sat"),
        on=deserialize_on(_field(obj, "on", "state")),
    )


def serialize_state(value: State) -> dict[str, Any]:
    """Serialize a State to its wire object."""
    return {
        "colorMode": value.color_mode,
        "brightness": serialize_range(value.brightness),
        "ct": serialize_range(value.ct),
        "hue": serialize_range(value.hue),
        "sat": serialize_range(value.sat),
        "on": serialize_on(value.on),
    }


def deserialize_string(data: Any) -> str:
    """Deserialize a bare JSON string (effect or color mode name)."""
    if not isinstance(data, str):
        msg = f"Expected JSON string, got {type(data).__name__}"
        raise NanoleafDecodeError(msg)
    return data


def deserialize_string_list(data: Any) -> list[str]:
    """Deserialize a JSON array of strings (effect catalog)."""
    if not isinstance(data, list):
        msg = f"Expected JSON array, got {type(data).__name__}"
        raise NanoleafDecodeError(msg)
    return [deserialize_string(item) for item in data]


def deserialize_effects(data: Any) -> Effects:
    """Deserialize the effects block.

    The device is trusted to report a selection that belongs to the list;
    membership is not checked here.
    """
    obj = _expect_object(data, "effects")
    return Effects(
        effects_list=deserialize_string_list(_field(obj, "effectsList", "effects")),
        select=_str(obj, "select", "effects"),
    )


def serialize_effects(value: Effects) -> dict[str, Any]:
    """Serialize Effects to its wire object."""
    return {"effectsList": list(value.effects_list), "select": value.select}


def deserialize_shape_type(code: Any) -> ShapeType:
    """Deserialize a panel shape code.

    Raises:
        NanoleafDecodeError: If the code is not an integer or is not a known
            ShapeType. Unknown codes never fall back to a default variant.
    """
    if not _is_int(code):
        msg = f"Shape type must be an integer, got {code!r}"
        raise NanoleafDecodeError(msg)
    try:
        return ShapeType(code)
    except ValueError as err:
        msg = f"Unknown shape type code {code}"
        raise NanoleafDecodeError(msg) from err


def deserialize_position(data: Any) -> Position:
    """Deserialize one entry of positionData."""
    obj = _expect_object(data, "position")
    return Position(
        panel_id=_uint(obj, "panelId", "position"),
        o=_int(obj, "o", "position"),
        x=_int(obj, "x", "position"),
        y=_int(obj, "y", "position"),
        shape_type=deserialize_shape_type(_field(obj, "shapeType", "position")),
    )


def serialize_position(value: Position) -> dict[str, int]:
    """Serialize a Position to its wire object."""
    return {
        "panelId": value.panel_id,
        "o": value.o,
        "x": value.x,
        "y": value.y,
        "shapeType": int(value.shape_type),
    }


def deserialize_panel_layout(data: Any) -> PanelLayout:
    """Deserialize the panelLayout block.

    The number of entries in positionData is not checked against numPanels.

    Args:
        data: Decoded JSON in format:
              {"globalOrientation": {"min", "max", "value"},
               "layout": {"numPanels": int, "sideLength": int,
                          "positionData": [{"panelId", "o", "x", "y", "shapeType"}, ...]}}

    Returns:
        PanelLayout instance.
    """
    obj = _expect_object(data, "panelLayout")
    layout = _expect_object(_field(obj, "layout", "panelLayout"), "layout")
    positions = _field(layout, "positionData", "layout")
    if not isinstance(positions, list):
        msg = f"Field 'positionData' in layout must be an array, got {type(positions).__name__}"
        raise NanoleafDecodeError(msg)

    return PanelLayout(
        global_orientation=deserialize_range(
            _field(obj, "globalOrientation", "panelLayout"),
            "globalOrientation",
        ),
        layout=Layout(
            num_panels=_uint(layout, "numPanels", "layout"),
            side_length=_uint(layout, "sideLength", "layout"),
            position_data=[deserialize_position(item) for item in positions],
        ),
    )


def serialize_panel_layout(value: PanelLayout) -> dict[str, Any]:
    """Serialize a PanelLayout to its wire object."""
    return {
        "globalOrientation": serialize_range(value.global_orientation),
        "layout": {
            "numPanels": value.layout.num_panels,
            "sideLength": value.layout.side_length,
            "positionData": [serialize_position(p) for p in value.layout.position_data],
        },
    }


def deserialize_rhythm(data: Any) -> Rhythm | None:
    """Deserialize the optional rhythm block.

    Returns:
        Rhythm instance, or None when the block is null.
    """
    if data is None:
        return None
    obj = _expect_object(data, "rhythm")
    return Rhythm(
        rhythm_connected=_optional(obj, "rhythmConnected", bool, "rhythm"),
        rhythm_active=_optional(obj, "rhythmActive", bool, "rhythm"),
        rhythm_id=_optional(obj, "rhythmId", int, "rhythm"),
        hardware_version=_optional(obj, "hardwareVersion", str, "rhythm"),
        firmware_version=_optional(obj, "firmwareVersion", str, "rhythm"),
        aux_available=_optional(obj, "auxAvailable", bool, "rhythm"),
        rhythm_mode=_optional(obj, "rhythmMode", int, "rhythm"),
        rhythm_pos=_optional(obj, "rhythmPos", dict, "rhythm"),
    )


def serialize_rhythm(value: Rhythm) -> dict[str, Any]:
    """Serialize a Rhythm block to its wire object."""
    return {
        "rhythmConnected": value.rhythm_connected,
        "rhythmActive": value.rhythm_active,
        "rhythmId": value.rhythm_id,
        "hardwareVersion": value.hardware_version,
        "firmwareVersion": value.firmware_version,
        "auxAvailable": value.aux_available,
        "rhythmMode": value.rhythm_mode,
        "rhythmPos": value.rhythm_pos,
    }


def deserialize_panel_info(data: Any) -> PanelInfo:
    """Deserialize the full device snapshot.

    Example:
        >>> info = deserialize_panel_info(response)
        >>> info.state.brightness.value
        100
        >>> info.panel_layout.layout.position_data[0].shape_type
        <ShapeType.TRIANGLE: 0>
    """
    obj = _expect_object(data, "panel info")
    return PanelInfo(
        name=_str(obj, "name", "panel info"),
        manufacturer=_str(obj, "manufacturer", "panel info"),
        model=_str(obj, "model", "panel info"),
        firmware_version=_str(obj, "firmwareVersion", "panel info"),
        serial_number=_str(obj, "serialNo", "panel info"),
        state=deserialize_state(_field(obj, "state", "panel info")),
        effects=deserialize_effects(_field(obj, "effects", "panel info")),
        panel_layout=deserialize_panel_layout(_field(obj, "panelLayout", "panel info")),
        rhythm=deserialize_rhythm(obj.get("rhythm")),
    )


def serialize_panel_info(value: PanelInfo) -> dict[str, Any]:
    """Serialize a PanelInfo to its wire object."""
    data: dict[str, Any] = {
        "name": value.name,
        "manufacturer": value.manufacturer,
        "model": value.model,
        "firmwareVersion": value.firmware_version,
        "serialNo": value.serial_number,
        "state": serialize_state(value.state),
        "effects": serialize_effects(value.effects),
        "panelLayout": serialize_panel_layout(value.panel_layout),
    }
    if value.rhythm is not None:
        data["rhythm"] = serialize_rhythm(value.rhythm)
    return data


# -------------------------------------------------------------------------
# Write payloads (untagged unions)
# -------------------------------------------------------------------------


def serialize_brightness(value: Brightness) -> int | dict[str, int]:
    """Serialize a brightness write to exactly one variant shape.

    Example:
        >>> serialize_brightness(BrightnessIncrement(-10))
        -10
        >>> serialize_brightness(BrightnessSet(80))
        {'value': 80}
        >>> serialize_brightness(BrightnessSetWithDuration(80, 5))
        {'value': 80, 'duration': 5}
    """
    if isinstance(value, BrightnessIncrement):
        return value.increment
    if isinstance(value, BrightnessSetWithDuration):
        return {"value": value.value, "duration": value.duration}
    if isinstance(value, BrightnessSet):
        return {"value": value.value}
    msg = f"Unsupported brightness payload: {value!r}"
    raise TypeError(msg)


def deserialize_brightness(data: Any) -> Brightness:
    """Resolve an untagged brightness payload.

    There is no discriminator on the wire, so shapes are tried in this fixed
    order and the first match wins:

    1. JSON integer -> BrightnessIncrement
    2. object whose "value" and "duration" are both non-negative integers
       -> BrightnessSetWithDuration
    3. object with "value" -> BrightnessSet

    A shape that does not match falls through to the next one, so an object
    with a null or malformed "duration" is read as a plain set, the same way
    deserialize_set_range ignores extra keys.

    Raises:
        NanoleafDecodeError: If no shape matches.
    """
    if _is_int(data):
        return BrightnessIncrement(increment=data)
    if isinstance(data, dict):
        if _is_uint(data.get("value")) and _is_uint(data.get("duration")):
            return BrightnessSetWithDuration(value=data["value"], duration=data["duration"])
        if "value" in data:
            return BrightnessSet(value=_uint(data, "value", "brightness"))
    msg = f"Brightness payload matches no known shape: {data!r}"
    raise NanoleafDecodeError(msg)


def serialize_set_range(value: SetRange) -> int | dict[str, int]:
    """Serialize a hue/saturation/ct write to exactly one variant shape."""
    if isinstance(value, RangeIncrement):
        return value.increment
    if isinstance(value, RangeSet):
        return {"value": value.value}
    msg = f"Unsupported range payload: {value!r}"
    raise TypeError(msg)


def deserialize_set_range(data: Any) -> SetRange:
    """Resolve an untagged hue/saturation/ct payload.

    Shapes are tried in order: JSON integer -> RangeIncrement, then object
    with "value" -> RangeSet.

    Raises:
        NanoleafDecodeError: If no shape matches.
    """
    if _is_int(data):
        return RangeIncrement(increment=data)
    if isinstance(data, dict) and "value" in data:
        return RangeSet(value=_uint(data, "value", "range"))
    msg = f"Range payload matches no known shape: {data!r}"
    raise NanoleafDecodeError(msg)
