# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Literal, Protocol, runtime_checkable

from ..provider import BaseProvider
from ..types import CapabilityType
from ._base import DriverCommand as C
from ._base import ExecuteMethod

__all__ = ("AddWebStorage", "RemoteStorage", "RemoteWebStorage", "WebStorage")

_COMMANDS = {
    "local": (
        C.GET_LOCAL_STORAGE_ITEM,
        C.GET_LOCAL_STORAGE_KEYS,
        C.SET_LOCAL_STORAGE_ITEM,
        C.REMOVE_LOCAL_STORAGE_ITEM,
        C.CLEAR_LOCAL_STORAGE,
        C.GET_LOCAL_STORAGE_SIZE,
    ),
    "session": (
        C.GET_SESSION_STORAGE_ITEM,
        C.GET_SESSION_STORAGE_KEYS,
        C.SET_SESSION_STORAGE_ITEM,
        C.REMOVE_SESSION_STORAGE_ITEM,
        C.CLEAR_SESSION_STORAGE,
        C.GET_SESSION_STORAGE_SIZE,
    ),
}


@runtime_checkable
class WebStorage(Protocol):
    @property
    def local_storage(self) -> RemoteStorage: ...

    @property
    def session_storage(self) -> RemoteStorage: ...


class RemoteStorage:
    """One browser storage area, addressed through remote commands."""

    def __init__(
        self, execute: ExecuteMethod, kind: Literal["local", "session"]
    ) -> None:
        self.kind = kind
        self._execute = execute
        (
            self._get,
            self._keys,
            self._set,
            self._remove,
            self._clear,
            self._size,
        ) = _COMMANDS[kind]

    def get_item(self, key: str) -> Any:
        return self._execute(self._get, {"key": key})

    def keys(self) -> set[str]:
        return set(self._execute(self._keys) or ())

    def set_item(self, key: str, value: str) -> None:
        self._execute(self._set, {"key": key, "value": value})

    def remove_item(self, key: str) -> Any:
        return self._execute(self._remove, {"key": key})

    def clear(self) -> None:
        self._execute(self._clear)

    def size(self) -> int:
        return int(self._execute(self._size) or 0)

    def __repr__(self) -> str:
        return f"RemoteStorage({self.kind!r})"


class RemoteWebStorage:
    def __init__(self, execute: ExecuteMethod) -> None:
        self._local = RemoteStorage(execute, "local")
        self._session = RemoteStorage(execute, "session")

    @property
    def local_storage(self) -> RemoteStorage:
        return self._local

    @property
    def session_storage(self) -> RemoteStorage:
        return self._session


class AddWebStorage(BaseProvider):
    capability = CapabilityType.SUPPORTS_WEB_STORAGE
    interface = WebStorage

    def create_implementation(self, remote: Any) -> RemoteWebStorage:
        return RemoteWebStorage(ExecuteMethod(remote))
