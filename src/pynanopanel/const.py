"""Constants for pynanopanel library."""

from __future__ import annotations

from http import HTTPStatus


# API Configuration
DEFAULT_PORT = 16021
API_BASE_PATH = "/api/v1/"

# Endpoint paths (relative to the base path)
ENDPOINT_NEW_USER = "new"
ENDPOINT_STATE = "{token}/state"
ENDPOINT_STATE_ON = "{token}/state/on"
ENDPOINT_STATE_BRIGHTNESS = "{token}/state/brightness"
ENDPOINT_STATE_HUE = "{token}/state/hue"
ENDPOINT_STATE_SATURATION = "{token}/state/sat"
ENDPOINT_STATE_CT = "{token}/state/ct"
ENDPOINT_EFFECTS = "{token}/effects"
ENDPOINT_EFFECTS_SELECT = "{token}/effects/select"
ENDPOINT_EFFECTS_LIST = "{token}/effects/effectsList"

# Body keys for state writes
KEY_ON = "on"
KEY_BRIGHTNESS = "brightness"
KEY_HUE = "hue"
KEY_SATURATION = "sat"
KEY_CT = "ct"
KEY_SELECT = "select"

# HTTP status codes that indicate a rejected token
AUTH_FAILURE_STATUSES = (HTTPStatus.UNAUTHORIZED, HTTPStatus.FORBIDDEN)

# External control (streaming) trigger
EXT_CONTROL_VERSION = "v2"
EXT_CONTROL_COMMAND = {
    "write": {
        "command": "display",
        "animType": "extControl",
        "extControlVersion": EXT_CONTROL_VERSION,
    }
}
