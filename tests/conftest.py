"""Shared pytest fixtures."""

import pytest
import structlog

from eum.config import BeaconSettings, reset_settings
from eum.models import AbstractBeacon, DomListenerExecution


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from EUM_ environment variables and cached settings."""
    for name in (
        "EUM_SERVICE_NAME",
        "EUM_LOG_LEVEL",
        "EUM_JSON_LOGS",
        "EUM_JSON_INDENT",
        "EUM_MAX_PAYLOAD_BYTES",
        "EUM_SKIP_UNKNOWN_RECORDS",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture
def settings():
    """Settings built without reading a .env file"""
    return BeaconSettings(_env_file=None)


@pytest.fixture
def beacon():
    """Empty beacon"""
    return AbstractBeacon()


@pytest.fixture
def click_record():
    """Listener record for a button click"""
    return DomListenerExecution(
        id="rec-1",
        time_stamp=1700000000000,
        function_name="onSubmit",
        event_type="click",
        element_type="BUTTON",
        element_id="submit",
        duration=2.5,
    )


@pytest.fixture
def keyup_record():
    """Listener record for a key release on an element without id"""
    return DomListenerExecution(
        id="rec-2",
        time_stamp=1700000000100,
        function_name="validate",
        event_type="keyup",
        element_type="INPUT",
    )
