# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Provider contract: a predicate paired with an implementation factory.

A *provider* answers two questions about one optional interface:

* :py:meth:`is_applicable` - which capability snapshots switch it on;
* :py:meth:`build` - given the remote handle, what object serves the calls.

Third-party providers only need to satisfy :class:`AugmenterProvider`
structurally. :class:`BaseProvider` covers the common case of an interface
keyed on a single capability name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

from .predicates import has_capability
from .types import CapabilityImplementation, Predicate

if TYPE_CHECKING:
    from .extractor import RemoteHandle

__all__ = ("AugmenterProvider", "BaseProvider")


@runtime_checkable
class AugmenterProvider(Protocol):
    """Structural contract every registered provider satisfies."""

    def is_applicable(self) -> Predicate: ...

    def build(self, remote: RemoteHandle) -> CapabilityImplementation: ...


class BaseProvider(ABC):
    """Provider for an ``interface`` switched on by one named ``capability``.

    Each call to :py:meth:`is_applicable` returns a new predicate object, so
    registering the same provider twice through it yields two entries.
    """

    capability: ClassVar[str]
    interface: ClassVar[type]

    def is_applicable(self) -> Predicate:
        return has_capability(self.capability)

    def build(self, remote: RemoteHandle) -> CapabilityImplementation:
        return CapabilityImplementation(
            interface=self.interface,
            implementation=self.create_implementation(remote),
            name=self.capability,
        )

    @abstractmethod
    def create_implementation(self, remote: RemoteHandle) -> Any:
        """Return the object the interface's calls are forwarded to."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capability={self.capability!r})"
