# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Composing matched capability implementations onto an object.

The :class:`Composer` protocol is what :class:`~augmenter.Augmenter` calls
once the matched providers are known. :class:`DelegatingComposer` is the
default: it returns an :class:`Augmented` view that serves each matched
interface's members from the built implementation and forwards everything
else to the original object.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

from ._errors import CompositionError
from .types import CapabilityImplementation

if TYPE_CHECKING:
    from .extractor import RemoteHandle
    from .provider import AugmenterProvider

__all__ = ("Augmented", "Composer", "DelegatingComposer")

logger = logging.getLogger(__name__)

T = TypeVar("T")
_MISSING = object()


@runtime_checkable
class Composer(Protocol):
    """Builds the augmented result; must not mutate ``obj``."""

    def compose(
        self,
        remote: RemoteHandle,
        providers: Iterable[AugmenterProvider],
        obj: Any,
    ) -> Any: ...


class Augmented:
    """Delegating view over an object plus a set of capability interfaces.

    Attribute reads for a member declared by one of the interfaces go to
    that interface's implementation; anything else is read from the wrapped
    object. Writes follow the same split.

    Container, callable and context manager protocols are forwarded to the
    wrapped object. Entering the view returns the view when the wrapped
    object returns itself.

    The view reserves ``interfaces``, ``implements``, ``as_interface`` and
    ``unwrap``; a wrapped attribute with one of these names is only
    reachable through ``unwrap()``.
    """

    __slots__ = ("_wrapped", "_remote", "_implementations", "_dispatch")

    def __init__(
        self,
        wrapped: Any,
        remote: Any,
        implementations: Iterable[CapabilityImplementation],
    ) -> None:
        impls = {impl.interface: impl for impl in implementations}
        dispatch: dict[str, Any] = {}
        for impl in impls.values():
            for name in impl.members:
                dispatch[name] = impl.implementation
        object.__setattr__(self, "_wrapped", wrapped)
        object.__setattr__(self, "_remote", remote)
        object.__setattr__(self, "_implementations", impls)
        object.__setattr__(self, "_dispatch", dispatch)

    # --------------------------------------------------------------------- #
    # capability introspection                                              #
    # --------------------------------------------------------------------- #
    @property
    def interfaces(self) -> frozenset[type]:
        return frozenset(self._implementations)

    def implements(self, interface: type) -> bool:
        return interface in self._implementations

    def as_interface(self, interface: type[T]) -> T:
        """Return the implementation serving ``interface``."""
        try:
            return self._implementations[interface].implementation
        except KeyError as exc:
            raise TypeError(
                f"{self._wrapped!r} was not augmented with {interface.__name__}"
            ) from exc

    def unwrap(self) -> Any:
        return self._wrapped

    # --------------------------------------------------------------------- #
    # delegation                                                            #
    # --------------------------------------------------------------------- #
    def __getattr__(self, name: str) -> Any:
        dispatch = object.__getattribute__(self, "_dispatch")
        if name in dispatch:
            return getattr(dispatch[name], name)
        return getattr(object.__getattribute__(self, "_wrapped"), name)

    def __setattr__(self, name: str, value: Any) -> None:
        target = self._dispatch.get(name, self._wrapped)
        setattr(target, name, value)

    def __delattr__(self, name: str) -> None:
        target = self._dispatch.get(name, self._wrapped)
        delattr(target, name)

    def __dir__(self) -> list[str]:
        return sorted(set(dir(self._wrapped)) | set(self._dispatch))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Augmented):
            other = other.unwrap()
        return self._wrapped == other

    def __hash__(self) -> int:
        return hash(self._wrapped)

    def __bool__(self) -> bool:
        return bool(self._wrapped)

    def __len__(self) -> int:
        return len(self._wrapped)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._wrapped)

    def __contains__(self, item: object) -> bool:
        return item in self._wrapped

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._wrapped(*args, **kwargs)

    def __enter__(self) -> Any:
        entered = self._wrapped.__enter__()
        return self if entered is self._wrapped else entered

    def __exit__(self, exc_type, exc, tb) -> Any:
        return self._wrapped.__exit__(exc_type, exc, tb)

    def __repr__(self) -> str:
        names = ", ".join(sorted(i.__name__ for i in self._implementations))
        return f"Augmented({self._wrapped!r}, interfaces=[{names}])"


class DelegatingComposer:
    """Default :class:`Composer` producing :class:`Augmented` views.

    Re-augmenting an :class:`Augmented` view composes over the original
    object again, so views never nest. When no provider matched the original
    object is returned as is.
    """

    def compose(
        self,
        remote: RemoteHandle,
        providers: Iterable[AugmenterProvider],
        obj: Any,
    ) -> Any:
        base = obj.unwrap() if isinstance(obj, Augmented) else obj
        implementations = [self._build(p, remote) for p in providers]
        if not implementations:
            return base

        _check_conflicts(implementations)
        view = Augmented(base, remote, implementations)
        logger.debug("Composed %r", view)
        return view

    @staticmethod
    def _build(
        provider: AugmenterProvider, remote: RemoteHandle
    ) -> CapabilityImplementation:
        impl = provider.build(remote)
        if not isinstance(impl, CapabilityImplementation):
            raise CompositionError(
                f"{provider!r} built {type(impl).__name__}, "
                "expected CapabilityImplementation",
                details={"provider": repr(provider)},
            )
        for name in impl.members:
            if inspect.getattr_static(impl.implementation, name, _MISSING) is _MISSING:
                raise CompositionError(
                    f"{type(impl.implementation).__name__} does not provide "
                    f"'{name}' declared by {impl.interface.__name__}",
                    details={"interface": impl.interface.__name__, "member": name},
                )
        return impl


def _check_conflicts(implementations: list[CapabilityImplementation]) -> None:
    owners: dict[str, list[str]] = {}
    for impl in implementations:
        for name in impl.members:
            owners.setdefault(name, []).append(impl.interface.__name__)
    clashes = {n: sorted(o) for n, o in owners.items() if len(o) > 1}
    if clashes:
        raise CompositionError(
            "Matched capabilities declare the same members",
            details={"conflicts": clashes},
        )
