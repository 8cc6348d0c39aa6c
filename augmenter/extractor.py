# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Locating the remote-controlled instance behind an arbitrary object."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from .composer import Augmented

__all__ = (
    "DefaultRemoteExtractor",
    "RemoteExtractor",
    "RemoteHandle",
    "WrapsDriver",
)


@runtime_checkable
class RemoteHandle(Protocol):
    """A session object that talks to the automation backend."""

    def get_declared_capabilities(self) -> Mapping[str, Any]: ...


@runtime_checkable
class WrapsDriver(Protocol):
    """Anything holding a reference to the driver it belongs to or decorates."""

    @property
    def wrapped_driver(self) -> Any: ...


@runtime_checkable
class RemoteExtractor(Protocol):
    def extract(self, obj: Any) -> RemoteHandle | None: ...


class DefaultRemoteExtractor:
    """Unwraps augmented views and ``wrapped_driver`` chains to a handle.

    Elements expose their parent driver through ``wrapped_driver``, so the
    same walk serves both roles. Returns ``None`` when the chain ends without
    reaching a :class:`RemoteHandle` or exceeds ``max_depth`` hops.
    """

    def __init__(self, max_depth: int = 16) -> None:
        self.max_depth = max_depth

    def extract(self, obj: Any) -> RemoteHandle | None:
        current = obj
        for _ in range(self.max_depth + 1):
            if current is None:
                return None
            if isinstance(current, Augmented):
                current = current.unwrap()
                continue
            if isinstance(current, RemoteHandle):
                return current
            if isinstance(current, WrapsDriver):
                current = current.wrapped_driver
                continue
            return None
        return None
