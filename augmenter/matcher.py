# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .provider import AugmenterProvider
from .types import Capabilities, Predicate

__all__ = ("match",)


def match(
    entries: Iterable[tuple[Predicate, AugmenterProvider]],
    caps: Mapping[str, Any],
) -> tuple[AugmenterProvider, ...]:
    """Return the providers whose predicate accepts ``caps``.

    Every predicate is evaluated; exceptions raised by a predicate propagate
    to the caller. ``entries`` is a registry or any iterable of pairs.
    Providers are de-duplicated by identity, so they need not be hashable
    and value-equal providers are all kept.
    """
    snapshot = Capabilities.of(caps)
    matched = {
        id(provider): provider
        for predicate, provider in entries
        if predicate(snapshot)
    }
    return tuple(matched.values())
