"""Common fixtures for MH-AC-WIFI-1 tests."""
import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from custom_components.mhacwifi1.acwm_api import AcwmAPI
from custom_components.mhacwifi1.models import CommandResult


@pytest.fixture
def mock_hass():
    """Create a mock Home Assistant instance."""
    hass = MagicMock(spec=HomeAssistant)
    hass.data = {}
    hass.loop = None
    hass.async_create_task = MagicMock()
    hass.add_job = MagicMock()
    return hass


@pytest.fixture
def mock_config_entry():
    """Create a mock config entry."""
    entry = MagicMock(spec=ConfigEntry)
    entry.entry_id = "test_entry_id"
    entry.title = "MH-AC-WIFI-1 @ 192.168.1.50"
    entry.data = {"host": "192.168.1.50", "username": "admin", "password": "admin"}
    entry.options = {}
    return entry


@pytest.fixture
def device_info():
    """getinfo block of a unit."""
    return {
        "sn": "2213A1B2C3",
        "deviceModel": "MH-AC-WIFI-1",
        "fwVersion": "1.2.3",
        "wlanSTAMAC": "CC:3F:1D:00:11:22",
    }


@pytest.fixture
def datapoints():
    """Polled data point values of a running unit (raw device units)."""
    return {
        1: 1,  # power on
        2: 4,  # cool
        4: 2,  # fan medium
        9: 220,  # setpoint 22.0
        10: 245,  # return temperature 24.5
        12: 0,  # remote lock off
        35: 180,
        36: 300,
        37: 153,  # outdoor 15.3
    }


@pytest.fixture
def mock_api(device_info):
    """Create a mock AcwmAPI instance."""
    api = MagicMock()
    api.base_url = "http://192.168.1.50"
    api.session_id = "session-1"
    api.info = device_info
    api.async_init = AsyncMock()
    api.async_login = AsyncMock()
    api.async_logout = AsyncMock()
    api.async_get_info = AsyncMock(return_value=device_info)
    api.async_get_data_point_value = AsyncMock()
    api.async_get_data_point_values = AsyncMock(return_value={})
    api.async_set_data_point_value = AsyncMock()
    api.async_identify = AsyncMock()
    api.async_reboot = AsyncMock()
    api.close = AsyncMock()
    return api


@pytest.fixture
def mock_coordinator(datapoints):
    """Create a mock data point coordinator."""
    coordinator = MagicMock()
    coordinator.data = dict(datapoints)
    coordinator.async_request_refresh = AsyncMock()
    coordinator.async_add_listener = MagicMock(return_value=lambda: None)
    coordinator.last_update_success = True
    return coordinator


@pytest.fixture
def api():
    """Create a real client for a unit at 192.168.1.50."""
    return AcwmAPI("http://192.168.1.50", "admin", "secret")


@pytest.fixture
def make_response():
    """Factory for mock aiohttp responses.

    ``body`` may be a dict (sent as JSON) or raw bytes.
    """

    def _make(body, status=200):
        response = MagicMock()
        response.status = status
        raw = body if isinstance(body, bytes) else json.dumps(body).encode()
        response.read = AsyncMock(return_value=raw)
        return response

    return _make


@pytest.fixture
def make_session():
    """Factory for a mock aiohttp session.

    Every item is either a response (returned by one request) or an
    exception (raised when the request is entered).
    """

    def _make(*items, method="post"):
        contexts = []
        for item in items:
            context = MagicMock()
            if isinstance(item, BaseException):
                context.__aenter__ = AsyncMock(side_effect=item)
            else:
                context.__aenter__ = AsyncMock(return_value=item)
            context.__aexit__ = AsyncMock(return_value=None)
            contexts.append(context)

        session = MagicMock()
        setattr(session, method, MagicMock(side_effect=contexts))
        return session

    return _make


@pytest.fixture
def make_result():
    """Factory for CommandResult objects."""

    def _make(success=True, data=None, code=None, message="", status=200):
        error = None if success else {"code": code, "message": message}
        return CommandResult(success=success, data=data, error=error, status=status)

    return _make


@pytest.fixture
def sent_command():
    """Decode the JSON body of the n-th POST made on a mock session."""

    def _decode(session, call_index=0):
        kwargs = session.post.call_args_list[call_index].kwargs
        return json.loads(kwargs["data"])

    return _decode
