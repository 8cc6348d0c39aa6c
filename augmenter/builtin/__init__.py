# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Built-in driver providers, each forwarding to remote commands."""

from ..provider import BaseProvider
from ._base import CommandExecutor, DriverCommand, ExecuteMethod
from .application_cache import (
    AddApplicationCache,
    AppCacheStatus,
    ApplicationCache,
)
from .location import AddLocationContext, Location, LocationContext
from .network import AddNetworkConnection, ConnectionType, NetworkConnection
from .rotation import AddRotatable, Rotatable, ScreenOrientation
from .storage import AddWebStorage, RemoteStorage, WebStorage

__all__ = (
    "AddApplicationCache",
    "AddLocationContext",
    "AddNetworkConnection",
    "AddRotatable",
    "AddWebStorage",
    "AppCacheStatus",
    "ApplicationCache",
    "CommandExecutor",
    "ConnectionType",
    "DriverCommand",
    "ExecuteMethod",
    "Location",
    "LocationContext",
    "NetworkConnection",
    "RemoteStorage",
    "Rotatable",
    "ScreenOrientation",
    "WebStorage",
    "default_providers",
)


def default_providers() -> tuple[BaseProvider, ...]:
    """Fresh instances of the providers seeded into every driver registry."""
    return (
        AddLocationContext(),
        AddApplicationCache(),
        AddNetworkConnection(),
        AddWebStorage(),
        AddRotatable(),
    )
