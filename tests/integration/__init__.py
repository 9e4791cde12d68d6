"""Integration tests for pynanopanel library.

These tests talk to a real device using settings from a .env file.
They are marked with @pytest.mark.integration and skipped by default.

To run integration tests:
    pytest tests/integration -v -m integration

Environment variables required in .env:
    NANOLEAF_HOST: Device IP address or hostname
    NANOLEAF_TOKEN: API token previously issued by the device
    NANOLEAF_PORT: API port (optional, defaults to 16021)
"""
