# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Registry of ``(predicate, provider)`` entries for one augmentation role."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from ._errors import InvalidArgumentError
from .matcher import match
from .predicates import has_capability
from .provider import AugmenterProvider
from .types import Predicate, Role

__all__ = ("AugmentationRegistry",)

logger = logging.getLogger(__name__)


class AugmentationRegistry:
    """Keeps a mapping ``predicate identity -> (predicate, provider)``.

    Entries are keyed by the predicate *object*, never by what it tests:
    re-registering the same predicate object replaces its provider, while two
    separately built predicates for one capability name coexist. Entries are
    never removed.
    """

    def __init__(self, role: Role | str = Role.DRIVER) -> None:
        self.role = Role(role)
        self._entries: dict[int, tuple[Predicate, AugmenterProvider]] = {}

    # --------------------------------------------------------------------- #
    # registration                                                          #
    # --------------------------------------------------------------------- #
    def register_by_name(
        self, name: str, provider: AugmenterProvider
    ) -> Predicate:
        """Register ``provider`` under a new presence predicate for ``name``."""
        _require(provider, "provider", "Handler class to use must be set.")
        predicate = has_capability(name)
        self._put(predicate, provider)
        return predicate

    def register_by_predicate(
        self, predicate: Predicate, provider: AugmenterProvider
    ) -> Predicate:
        """Register ``provider`` under ``predicate`` as given."""
        _check_predicate(predicate)
        _require(provider, "provider", "Handler class to use must be set.")
        self._put(predicate, provider)
        return predicate

    def register_many(self, providers: Iterable[AugmenterProvider]) -> int:
        """Register each provider under its own declared predicate.

        The whole sequence is validated before anything is registered.
        """
        pairs = []
        for provider in providers:
            _require(provider, "provider", "Handler class to use must be set.")
            predicate = provider.is_applicable()
            _check_predicate(predicate)
            pairs.append((predicate, provider))
        for predicate, provider in pairs:
            self._put(predicate, provider)
        return len(pairs)

    def _put(self, predicate: Predicate, provider: AugmenterProvider) -> None:
        key = id(predicate)
        if key in self._entries:
            logger.warning(
                "Provider for %r replaced in %s registry: %r -> %r",
                predicate,
                self.role.value,
                self._entries[key][1],
                provider,
            )
        else:
            logger.debug(
                "Registered %r under %r in %s registry",
                provider,
                predicate,
                self.role.value,
            )
        self._entries[key] = (predicate, provider)

    # --------------------------------------------------------------------- #
    # lookup                                                                #
    # --------------------------------------------------------------------- #
    def match(self, caps: Mapping[str, Any]) -> tuple[AugmenterProvider, ...]:
        return match(self, caps)

    def entries(self) -> tuple[tuple[Predicate, AugmenterProvider], ...]:
        return tuple(self._entries.values())

    def providers(self) -> tuple[AugmenterProvider, ...]:
        return tuple(p for _, p in self._entries.values())

    def get(self, predicate: Predicate) -> AugmenterProvider | None:
        entry = self._entries.get(id(predicate))
        return entry[1] if entry else None

    def __iter__(self) -> Iterator[tuple[Predicate, AugmenterProvider]]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: object) -> bool:
        """True for a registered predicate object or provider."""
        if id(item) in self._entries:
            return True
        return any(p is item for _, p in self._entries.values())

    def __repr__(self) -> str:
        return f"AugmentationRegistry(role={self.role.value!r}, entries={len(self)})"


def _check_predicate(predicate: Any) -> None:
    _require(predicate, "predicate", "Check to use must be set.")
    if not callable(predicate):
        raise InvalidArgumentError.from_value(
            predicate,
            argument="predicate",
            expected="callable",
            message="Check to use must be callable.",
        )


def _require(value: Any, argument: str, message: str) -> None:
    if value is None:
        raise InvalidArgumentError.from_value(
            value, argument=argument, message=message
        )
