# acwm_api.py
"""Async client for the MH-AC-WIFI-1 (Intesis airconwithme) local web API.

Every command is a JSON ``POST /api.cgi``. Most commands carry the session id
handed out by ``login``; the device drops that session without notice and
reports it with error code 1, in which case the client logs in again and
replays the command once. Intermittent connection resets are absorbed by a
bounded, fixed-delay retry around the data point reads and writes.
"""

import asyncio
import json
import logging
import zlib
from typing import Any

import aiohttp
from pydantic import ValidationError

from .constants import (
    ALL_DATAPOINTS,
    API_DEFAULTS,
    API_PATH,
    CMD_GET_AVAILABLE_DATAPOINTS,
    CMD_GET_CURRENT_CONFIG,
    CMD_GET_DATAPOINT_VALUE,
    CMD_GET_INFO,
    CMD_IDENTIFY,
    CMD_LOGIN,
    CMD_LOGOUT,
    CMD_REBOOT,
    CMD_SET_DATAPOINT_VALUE,
    REFERENCE_PATH,
    SESSION_FIELD,
)
from .infrastructure.api import api_command, extract_response
from .infrastructure.errors import (
    AcwmAuthError,
    AcwmConnectionError,
    AcwmDecodeError,
    AcwmDeviceError,
)
from .models import CommandResult, DeviceReference, parse_datapoint_values

_LOGGER = logging.getLogger(__name__)

# Failures the retry wrapper absorbs; decode and login failures are final
RETRYABLE_ERRORS = (AcwmConnectionError, AcwmDeviceError)


class AcwmAPI:
    """Client for a single MH-AC-WIFI-1 device.

    The instance owns the device session id. All commands go through one
    ``asyncio.Lock`` so that a re-login triggered by an expired session can
    never race with another command.
    """

    def __init__(
        self,
        base_url: str,
        username: str = API_DEFAULTS.DEFAULT_USERNAME,
        password: str = API_DEFAULTS.DEFAULT_PASSWORD,
        *,
        auto_login: bool = True,
        request_timeout: int = API_DEFAULTS.REQUEST_TIMEOUT,
        retry_attempts: int = API_DEFAULTS.RETRY_ATTEMPTS,
        retry_delay: float = API_DEFAULTS.RETRY_DELAY,
    ):
        self.base_url = base_url.rstrip("/")
        self.username = username
        self.password = password
        self.auto_login = auto_login
        self.request_timeout = request_timeout
        self.retry_attempts = retry_attempts
        self.retry_delay = retry_delay

        self.session_id: str | None = None
        self.info: dict[str, Any] | None = None
        self.reference: DeviceReference | None = None
        self.init_done = False

        self._command_lock = asyncio.Lock()
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session.

        Timeouts are set per request, not on the session.
        """
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self):
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    # -------------------------------------------------------------------------
    # Reference data
    # -------------------------------------------------------------------------

    async def async_init(self) -> DeviceReference:
        """Load the static device descriptor.

        ``data.json`` is served without authentication and with a compressed
        body. Calling this again simply reloads and replaces the reference.

        Raises:
            AcwmConnectionError: Request failed or status was not 200.
            AcwmDecodeError: Body could not be decompressed or parsed.
        """
        url = self.base_url + REFERENCE_PATH
        timeout = aiohttp.ClientTimeout(total=self.request_timeout)
        try:
            session = await self._get_session()
            async with session.get(url, timeout=timeout) as response:
                status = response.status
                body = await response.read()
        except (TimeoutError, aiohttp.ClientError) as e:
            raise AcwmConnectionError(f"Cannot load {REFERENCE_PATH}: {type(e).__name__}: {e}") from e

        if status != 200:
            raise AcwmConnectionError(f"Cannot load {REFERENCE_PATH} (HTTP {status})")

        try:
            # wbits | 32 accepts both zlib and gzip containers
            raw = zlib.decompress(body, zlib.MAX_WBITS | 32)
            reference = DeviceReference(data=json.loads(raw))
        except (zlib.error, ValueError) as e:
            raise AcwmDecodeError(f"Invalid {REFERENCE_PATH}: {e}") from e

        self.reference = reference
        self.init_done = True
        _LOGGER.debug("Loaded device reference from %s", url)
        return reference

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    async def _async_send(self, command: str, data: dict | None) -> CommandResult:
        """POST one command and parse the answer, without any retry."""
        body = json.dumps({"command": command, "data": data}).encode()
        headers = {
            "Content-Type": "application/json",
            "Content-Length": str(len(body)),
        }
        url = self.base_url + API_PATH
        timeout = aiohttp.ClientTimeout(total=self.request_timeout)

        _LOGGER.debug("Sending command %s", command)
        try:
            session = await self._get_session()
            async with session.post(url, data=body, headers=headers, timeout=timeout) as response:
                status = response.status
                raw = await response.read()
        except (TimeoutError, aiohttp.ClientError) as e:
            raise AcwmConnectionError(f"{command} failed: {type(e).__name__}: {e}") from e

        try:
            result = CommandResult.from_response(json.loads(raw), status)
        except (ValueError, ValidationError) as e:
            raise AcwmDecodeError(f"Invalid response to {command} (HTTP {status}): {e}") from e

        _LOGGER.debug(
            "Command %s returned success=%s code=%s (HTTP %d)",
            command,
            result.success,
            result.error_code,
            status,
        )
        return result

    def _build_payload(self, data: dict | None, with_session: bool) -> dict | None:
        """Return the payload with the session id current at send time."""
        if not with_session:
            return data
        return {**(data or {}), SESSION_FIELD: self.session_id}

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    def get_session(self) -> str | None:
        """Return the current session id without any I/O."""
        return self.session_id

    async def async_login(self, username: str | None = None, password: str | None = None) -> CommandResult:
        """Log in and store the new session id.

        Missing credentials fall back to the ones used last time. On success
        the given credentials replace the stored ones.

        Raises:
            AcwmAuthError: The device rejected the login.
        """
        async with self._command_lock:
            return await self._async_login_locked(username, password)

    async def _async_login_locked(self, username: str | None = None, password: str | None = None) -> CommandResult:
        username = username or self.username
        password = password or self.password

        result = await self._async_send(CMD_LOGIN, {"username": username, "password": password})
        if not result.success:
            raise AcwmAuthError(result, CMD_LOGIN)

        session_id = extract_response(result, ("id", SESSION_FIELD), CMD_LOGIN)
        self.username = username
        self.password = password
        self.session_id = session_id
        _LOGGER.debug("Logged in as %s", username)
        return result

    async def async_logout(self) -> CommandResult:
        """End the session.

        The stored session id is dropped before the command is sent, so it is
        gone even when the device rejects the logout or cannot be reached.
        Such failures are still raised.
        """
        async with self._command_lock:
            session_id = self.session_id
            self.session_id = None
            result = await self._async_send(CMD_LOGOUT, {SESSION_FIELD: session_id})

        if not result.success:
            raise AcwmDeviceError(result, CMD_LOGOUT)
        return result

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    async def async_dispatch(
        self,
        command: str,
        data: dict | None = None,
        *,
        requires_session: bool = False,
    ) -> CommandResult:
        """Send a command, re-authenticating once if the session expired.

        Args:
            command: Command name.
            data: Command payload.
            requires_session: Write the current session id into the payload.

        Returns:
            The successful CommandResult.

        Raises:
            AcwmDeviceError: The device rejected the command (or its replay).
            AcwmAuthError: The automatic re-login was rejected.
            AcwmConnectionError: The device could not be reached.
            AcwmDecodeError: The response could not be parsed.
        """
        async with self._command_lock:
            return await self._async_dispatch_locked(command, data, requires_session)

    async def _async_dispatch_locked(
        self, command: str, data: dict | None, requires_session: bool
    ) -> CommandResult:
        result = await self._async_send(command, self._build_payload(data, requires_session))
        if result.success:
            return result

        if self.auto_login and command != CMD_LOGIN and result.is_session_expired:
            _LOGGER.info("Session expired while sending %s, logging in again", command)
            await self._async_login_locked()

            # Exactly one replay; whatever it returns is final
            with_session = requires_session or (isinstance(data, dict) and SESSION_FIELD in data)
            result = await self._async_send(command, self._build_payload(data, with_session))
            if result.success:
                return result

        raise AcwmDeviceError(result, command)

    async def async_dispatch_with_retry(
        self,
        command: str,
        data: dict | None = None,
        *,
        requires_session: bool = False,
        delay: float | None = None,
        attempts: int | None = None,
    ) -> CommandResult:
        """Dispatch a command, retrying transient failures.

        Any connection failure or device-reported error is retried with a
        fixed delay until ``attempts`` sends have been made; the last failure
        is then raised unchanged. Decode errors and rejected logins are raised
        immediately.

        Args:
            command: Command name.
            data: Command payload, reused unchanged for every attempt.
            requires_session: Write the current session id into the payload.
            delay: Seconds between attempts (default: ``retry_delay``).
            attempts: Total number of attempts (default: ``retry_attempts``).
        """
        delay = self.retry_delay if delay is None else delay
        attempts = self.retry_attempts if attempts is None else attempts

        attempt = 1
        while True:
            try:
                return await self.async_dispatch(command, data, requires_session=requires_session)
            except RETRYABLE_ERRORS as e:
                if attempt >= attempts:
                    _LOGGER.warning("%s failed after %d attempt(s): %s", command, attempt, e)
                    raise
                _LOGGER.debug(
                    "%s failed (attempt %d/%d), retrying in %.2fs: %s",
                    command,
                    attempt,
                    attempts,
                    delay,
                    e,
                )
            await asyncio.sleep(delay)
            attempt += 1

    # -------------------------------------------------------------------------
    # Device operations
    # -------------------------------------------------------------------------

    @api_command(CMD_GET_INFO, requires_session=False, response_path=("info",))
    async def _async_fetch_info(self):
        return None

    async def async_get_info(self) -> dict[str, Any]:
        """Return the unit info block. Works without a session."""
        self.info = await self._async_fetch_info()
        return self.info

    @api_command(CMD_GET_CURRENT_CONFIG, response_path=("config",))
    async def async_get_current_config(self):
        """Return the network configuration of the unit."""
        return None

    @api_command(CMD_GET_AVAILABLE_DATAPOINTS, response_path=("dp", "datapoints"))
    async def async_get_available_data_points(self):
        """Return the data points supported by this unit."""
        return None

    @api_command(CMD_GET_DATAPOINT_VALUE, retry=True, response_path=("dpval",))
    async def async_get_data_point_value(self, uid: int | None = None):
        """Read one data point, or all of them when ``uid`` is None."""
        return {"uid": uid if uid is not None else ALL_DATAPOINTS}

    @api_command(CMD_SET_DATAPOINT_VALUE, retry=True)
    async def async_set_data_point_value(self, uid: int, value: Any):
        """Write a raw value to a data point and return the raw result."""
        return {"uid": uid, "value": value}

    @api_command(CMD_IDENTIFY)
    async def async_identify(self):
        """Flash the LED on the unit."""
        return None

    @api_command(CMD_REBOOT)
    async def async_reboot(self):
        return None

    async def async_get_data_point_values(self) -> dict[int, Any]:
        """Read every data point and return ``{uid: value}``."""
        dpval = await self.async_get_data_point_value()
        try:
            return parse_datapoint_values(dpval)
        except ValidationError as e:
            raise AcwmDecodeError(f"Invalid data point values: {e}") from e
