# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

__all__ = ("CommandExecutor", "DriverCommand", "ExecuteMethod")


@runtime_checkable
class CommandExecutor(Protocol):
    """A remote handle able to send a named command to the backend."""

    def execute(self, command: str, params: dict[str, Any] | None = None) -> Any: ...


class DriverCommand:
    GET_LOCAL_STORAGE_ITEM = "getLocalStorageItem"
    GET_LOCAL_STORAGE_KEYS = "getLocalStorageKeys"
    SET_LOCAL_STORAGE_ITEM = "setLocalStorageItem"
    REMOVE_LOCAL_STORAGE_ITEM = "removeLocalStorageItem"
    CLEAR_LOCAL_STORAGE = "clearLocalStorage"
    GET_LOCAL_STORAGE_SIZE = "getLocalStorageSize"

    GET_SESSION_STORAGE_ITEM = "getSessionStorageItem"
    GET_SESSION_STORAGE_KEYS = "getSessionStorageKeys"
    SET_SESSION_STORAGE_ITEM = "setSessionStorageItem"
    REMOVE_SESSION_STORAGE_ITEM = "removeSessionStorageItem"
    CLEAR_SESSION_STORAGE = "clearSessionStorage"
    GET_SESSION_STORAGE_SIZE = "getSessionStorageSize"

    GET_LOCATION = "getLocation"
    SET_LOCATION = "setLocation"

    GET_APP_CACHE_STATUS = "getStatus"

    GET_NETWORK_CONNECTION = "getNetworkConnection"
    SET_NETWORK_CONNECTION = "setNetworkConnection"

    GET_SCREEN_ORIENTATION = "getScreenOrientation"
    SET_SCREEN_ORIENTATION = "setScreenOrientation"
    GET_SCREEN_ROTATION = "getScreenRotation"
    SET_SCREEN_ROTATION = "setScreenRotation"


class ExecuteMethod:
    """Sends commands through ``remote.execute`` and unwraps the response.

    Responses shaped like ``{"value": ...}`` yield the inner value; anything
    else is returned unchanged.
    """

    __slots__ = ("remote",)

    def __init__(self, remote: CommandExecutor) -> None:
        self.remote = remote

    def __call__(self, command: str, params: dict[str, Any] | None = None) -> Any:
        response = self.remote.execute(command, params or {})
        if isinstance(response, Mapping) and "value" in response:
            return response["value"]
        return response
