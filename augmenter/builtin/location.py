# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

import msgspec

from ..provider import BaseProvider
from ..types import CapabilityType
from ._base import DriverCommand, ExecuteMethod

__all__ = (
    "AddLocationContext",
    "Location",
    "LocationContext",
    "RemoteLocationContext",
)


class Location(msgspec.Struct, frozen=True, kw_only=True):
    latitude: float
    longitude: float
    altitude: float = 0.0

    @classmethod
    def from_response(cls, raw: Mapping[str, Any] | None) -> Location | None:
        if not raw:
            return None
        return msgspec.convert(dict(raw), type=cls)

    def to_dict(self) -> dict[str, float]:
        return msgspec.structs.asdict(self)


@runtime_checkable
class LocationContext(Protocol):
    def location(self) -> Location | None: ...

    def set_location(self, location: Location) -> None: ...


class RemoteLocationContext:
    def __init__(self, execute: ExecuteMethod) -> None:
        self._execute = execute

    def location(self) -> Location | None:
        return Location.from_response(self._execute(DriverCommand.GET_LOCATION))

    def set_location(self, location: Location) -> None:
        self._execute(DriverCommand.SET_LOCATION, {"location": location.to_dict()})


class AddLocationContext(BaseProvider):
    capability = CapabilityType.SUPPORTS_LOCATION_CONTEXT
    interface = LocationContext

    def create_implementation(self, remote: Any) -> RemoteLocationContext:
        return RemoteLocationContext(ExecuteMethod(remote))
