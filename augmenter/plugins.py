# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Opt-in provider discovery through package entry points.

Third-party packages expose providers via entry points::

    [project.entry-points."augmenter.providers"]
    my_provider = pkg.module:ProviderClass

Classes are instantiated with no arguments; any other object is used as is.
"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points

from .config import DEFAULT_PLUGIN_GROUP
from .provider import AugmenterProvider

__all__ = ("discover_providers",)

logger = logging.getLogger(__name__)


def discover_providers(
    group: str = DEFAULT_PLUGIN_GROUP,
) -> tuple[AugmenterProvider, ...]:
    """Load every provider advertised under ``group``.

    Loading errors propagate; a broken plugin fails startup rather than
    silently dropping a capability.
    """
    found: list[AugmenterProvider] = []
    for ep in entry_points(group=group):
        obj = ep.load()
        provider = obj() if isinstance(obj, type) else obj
        if not isinstance(provider, AugmenterProvider):
            raise TypeError(
                f"Entry point '{ep.name}' in '{group}' does not provide "
                "is_applicable() and build()"
            )
        found.append(provider)
    logger.debug("Discovered %d provider(s) in '%s'", len(found), group)
    return tuple(found)
