# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import IntFlag
from typing import Any, Protocol, runtime_checkable

from ..provider import BaseProvider
from ..types import CapabilityType
from ._base import DriverCommand, ExecuteMethod

__all__ = (
    "AddNetworkConnection",
    "ConnectionType",
    "NetworkConnection",
    "RemoteNetworkConnection",
)


class ConnectionType(IntFlag):
    """Bit mask of enabled connections, as exchanged with the backend."""

    NONE = 0
    AIRPLANE = 1
    WIFI = 2
    DATA = 4
    ALL = WIFI | DATA

    @property
    def is_airplane_mode(self) -> bool:
        return bool(self & ConnectionType.AIRPLANE)

    @property
    def is_wifi_enabled(self) -> bool:
        return bool(self & ConnectionType.WIFI)

    @property
    def is_data_enabled(self) -> bool:
        return bool(self & ConnectionType.DATA)


@runtime_checkable
class NetworkConnection(Protocol):
    def network_connection(self) -> ConnectionType: ...

    def set_network_connection(self, type: ConnectionType) -> ConnectionType: ...


class RemoteNetworkConnection:
    def __init__(self, execute: ExecuteMethod) -> None:
        self._execute = execute

    def network_connection(self) -> ConnectionType:
        return ConnectionType(int(self._execute(DriverCommand.GET_NETWORK_CONNECTION)))

    def set_network_connection(self, type: ConnectionType) -> ConnectionType:
        raw = self._execute(
            DriverCommand.SET_NETWORK_CONNECTION,
            {"parameters": {"type": int(type)}},
        )
        return ConnectionType(int(raw))


class AddNetworkConnection(BaseProvider):
    capability = CapabilityType.SUPPORTS_BROWSER_CONNECTION
    interface = NetworkConnection

    def create_implementation(self, remote: Any) -> RemoteNetworkConnection:
        return RemoteNetworkConnection(ExecuteMethod(remote))
