# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable

from ..provider import BaseProvider
from ..types import CapabilityType
from ._base import DriverCommand, ExecuteMethod

__all__ = ("AddRotatable", "RemoteRotatable", "Rotatable", "ScreenOrientation")


class ScreenOrientation(str, Enum):
    LANDSCAPE = "LANDSCAPE"
    PORTRAIT = "PORTRAIT"


@runtime_checkable
class Rotatable(Protocol):
    @property
    def orientation(self) -> ScreenOrientation: ...

    def rotate(self, orientation: ScreenOrientation | str) -> None: ...

    def rotation(self) -> dict[str, int]: ...


class RemoteRotatable:
    def __init__(self, execute: ExecuteMethod) -> None:
        self._execute = execute

    @property
    def orientation(self) -> ScreenOrientation:
        raw = self._execute(DriverCommand.GET_SCREEN_ORIENTATION)
        return ScreenOrientation(str(raw).upper())

    @orientation.setter
    def orientation(self, value: ScreenOrientation | str) -> None:
        self.rotate(value)

    def rotate(self, orientation: ScreenOrientation | str) -> None:
        value = ScreenOrientation(str(getattr(orientation, "value", orientation)).upper())
        self._execute(
            DriverCommand.SET_SCREEN_ORIENTATION, {"orientation": value.value}
        )

    def rotation(self) -> dict[str, int]:
        """Current ``{"z": degrees}`` style rotation reported by the device."""
        return dict(self._execute(DriverCommand.GET_SCREEN_ROTATION) or {})


class AddRotatable(BaseProvider):
    capability = CapabilityType.ROTATABLE
    interface = Rotatable

    def create_implementation(self, remote: Any) -> RemoteRotatable:
        return RemoteRotatable(ExecuteMethod(remote))
