"""API infrastructure for the MH-AC-WIFI-1 integration.

This module provides the ``api_command`` decorator used to declare the
device operations on ``AcwmAPI``. The decorator handles:
- Choosing between a single dispatch and the retry-wrapped dispatch
- Session injection (via the dispatcher's ``requires_session`` flag)
- Extraction of the command specific sub-payload from the result

Usage:
    @api_command("getcurrentconfig", response_path=("config",))
    async def async_get_current_config(self):
        return None

    @api_command("getdatapointvalue", retry=True, response_path=("dpval",))
    async def async_get_data_point_value(self, uid=None):
        return {"uid": uid if uid is not None else "all"}
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from ..models import CommandResult
from .errors import AcwmDecodeError


def extract_response(result: CommandResult, path: tuple[str, ...], command: str) -> Any:
    """Walk ``path`` into ``result.data``.

    Raises:
        AcwmDecodeError: If any key along the path is missing.
    """
    value: Any = result.data
    for key in path:
        if not isinstance(value, dict) or key not in value:
            raise AcwmDecodeError(
                f"{command} response is missing '{'.'.join(path)}'"
            )
        value = value[key]
    return value


def api_command(
    command: str,
    *,
    requires_session: bool = True,
    retry: bool = False,
    response_path: tuple[str, ...] | None = None,
):
    """Decorator for ``/api.cgi`` commands.

    The decorated coroutine builds and returns the command payload (a dict,
    or None when the command only needs the session id). The wrapper sends
    it and returns either the sub-payload at ``response_path`` or, when
    ``response_path`` is None, the raw ``CommandResult``.

    Args:
        command: Command name sent in the request body.
        requires_session: Whether the current session id is written into the
            payload at send time.
        retry: Route the command through ``async_dispatch_with_retry``.
        response_path: Keys to follow inside ``result.data``.

    Example:
        @api_command("setdatapointvalue", retry=True)
        async def async_set_data_point_value(self, uid, value):
            return {"uid": uid, "value": value}
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            payload = await func(self, *args, **kwargs)

            if retry:
                result = await self.async_dispatch_with_retry(
                    command, payload, requires_session=requires_session
                )
            else:
                result = await self.async_dispatch(
                    command, payload, requires_session=requires_session
                )

            if response_path is None:
                return result
            return extract_response(result, response_path, command)

        return wrapper

    return decorator
