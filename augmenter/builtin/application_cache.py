# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import IntEnum
from typing import Any, Protocol, runtime_checkable

from ..provider import BaseProvider
from ..types import CapabilityType
from ._base import DriverCommand, ExecuteMethod

__all__ = (
    "AddApplicationCache",
    "AppCacheStatus",
    "ApplicationCache",
    "RemoteApplicationCache",
)


class AppCacheStatus(IntEnum):
    UNCACHED = 0
    IDLE = 1
    CHECKING = 2
    DOWNLOADING = 3
    UPDATE_READY = 4
    OBSOLETE = 5


@runtime_checkable
class ApplicationCache(Protocol):
    def status(self) -> AppCacheStatus: ...


class RemoteApplicationCache:
    def __init__(self, execute: ExecuteMethod) -> None:
        self._execute = execute

    def status(self) -> AppCacheStatus:
        raw = self._execute(DriverCommand.GET_APP_CACHE_STATUS)
        if isinstance(raw, str):
            return AppCacheStatus[raw.upper()]
        return AppCacheStatus(int(raw))


class AddApplicationCache(BaseProvider):
    capability = CapabilityType.SUPPORTS_APPLICATION_CACHE
    interface = ApplicationCache

    def create_implementation(self, remote: Any) -> RemoteApplicationCache:
        return RemoteApplicationCache(ExecuteMethod(remote))
