# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Value types shared by the registry, matcher and composer."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from enum import Enum
from typing import Any, TypeAlias

import msgspec

__all__ = (
    "Capabilities",
    "CapabilityImplementation",
    "CapabilityType",
    "Predicate",
    "Role",
)


class Role(str, Enum):
    """Which registry governs an augmentation call."""

    DRIVER = "driver"
    ELEMENT = "element"

    @classmethod
    def allowed(cls) -> tuple[str, ...]:
        return tuple(m.value for m in cls)


class CapabilityType:
    """Names of the capabilities the built-in providers are keyed on."""

    SUPPORTS_WEB_STORAGE = "webStorageEnabled"
    SUPPORTS_LOCATION_CONTEXT = "locationContextEnabled"
    SUPPORTS_APPLICATION_CACHE = "applicationCacheEnabled"
    SUPPORTS_BROWSER_CONNECTION = "browserConnectionEnabled"
    SUPPORTS_NETWORK_CONNECTION = "networkConnectionEnabled"
    ROTATABLE = "rotatable"


class Capabilities(Mapping[str, Any]):
    """Read-only snapshot of the capabilities a remote session declared.

    The snapshot copies its input, so later changes to the source mapping
    are not observed.
    """

    __slots__ = ("_caps",)

    def __init__(self, caps: Mapping[str, Any] | None = None, /, **kwargs: Any):
        data = dict(caps or {})
        data.update(kwargs)
        self._caps = data

    @classmethod
    def of(cls, caps: Mapping[str, Any] | None) -> Capabilities:
        """Return ``caps`` as a snapshot, wrapping plain mappings."""
        if isinstance(caps, cls):
            return caps
        return cls(caps)

    def get_capability(self, name: str) -> Any:
        """Value declared for ``name``, or ``None`` when absent."""
        return self._caps.get(name)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._caps)

    def __getitem__(self, name: str) -> Any:
        return self._caps[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._caps)

    def __len__(self) -> int:
        return len(self._caps)

    def __repr__(self) -> str:
        return f"Capabilities({self._caps!r})"


Predicate: TypeAlias = Callable[[Capabilities], bool]


class CapabilityImplementation(msgspec.Struct, frozen=True):
    """An interface tag paired with the object its calls are forwarded to."""

    interface: type
    implementation: Any
    name: str | None = None

    @property
    def members(self) -> tuple[str, ...]:
        """Public names the interface declares."""
        return interface_members(self.interface)


def interface_members(interface: type) -> tuple[str, ...]:
    names: set[str] = set()
    for klass in interface.__mro__:
        if klass is object or klass.__module__ in ("typing", "abc"):
            continue
        names.update(n for n in vars(klass) if not n.startswith("_"))
        names.update(
            n
            for n in getattr(klass, "__annotations__", {})
            if not n.startswith("_")
        )
    return tuple(sorted(names))
