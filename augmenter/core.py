# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""The :class:`Augmenter`: capability matching driven composition."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ._errors import InvalidArgumentError
from .composer import Composer, DelegatingComposer
from .config import AugmenterSettings
from .config import settings as default_settings
from .extractor import DefaultRemoteExtractor, RemoteExtractor
from .provider import AugmenterProvider
from .registry import AugmentationRegistry
from .types import Capabilities, Predicate, Role

__all__ = ("Augmenter",)

logger = logging.getLogger(__name__)


class Augmenter:
    """Layer optional interfaces onto remote drivers and elements.

    Two independent registries exist, one per :class:`Role`. The driver
    registry is seeded with the built-in providers and then with ``plugins``
    (or, when ``plugins`` is omitted and ``load_entry_points`` is set, with
    the providers discovered from entry points). The element registry starts
    empty.

    Registration is meant to finish before the first :py:meth:`augment`;
    afterwards the registries are only read, so ``augment`` may be called
    from several threads at once.

    Args:
        composer: Builds the augmented view. Defaults to
            :class:`~augmenter.composer.DelegatingComposer`.
        extractor: Finds the remote handle behind an object. Defaults to
            :class:`~augmenter.extractor.DefaultRemoteExtractor`.
        plugins: Already materialized providers for the driver registry,
            each registered under its own ``is_applicable()`` predicate.
        settings: Overrides the module level settings.
    """

    def __init__(
        self,
        composer: Composer | None = None,
        extractor: RemoteExtractor | None = None,
        *,
        plugins: Iterable[AugmenterProvider] | None = None,
        settings: AugmenterSettings | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.composer = _check_strategy(
            composer if composer is not None else DelegatingComposer(),
            Composer,
            "composer",
        )
        self.extractor = _check_strategy(
            extractor if extractor is not None else DefaultRemoteExtractor(),
            RemoteExtractor,
            "extractor",
        )
        self._registries = {
            Role.DRIVER: AugmentationRegistry(Role.DRIVER),
            Role.ELEMENT: AugmentationRegistry(Role.ELEMENT),
        }

        if self.settings.seed_defaults:
            self._seed_defaults()

        if plugins is None and self.settings.load_entry_points:
            from .plugins import discover_providers

            plugins = discover_providers(self.settings.plugin_group)
        if plugins is not None:
            self._register_plugins(plugins)

    # --------------------------------------------------------------------- #
    # setup                                                                 #
    # --------------------------------------------------------------------- #
    def _seed_defaults(self) -> None:
        from .builtin import default_providers

        for provider in default_providers():
            self.driver_registry.register_by_name(provider.capability, provider)

    def _register_plugins(self, providers: Iterable[AugmenterProvider]) -> None:
        count = self.driver_registry.register_many(providers)
        logger.debug("Registered %d plugin provider(s)", count)

    @property
    def driver_registry(self) -> AugmentationRegistry:
        return self._registries[Role.DRIVER]

    @property
    def element_registry(self) -> AugmentationRegistry:
        return self._registries[Role.ELEMENT]

    def registry(self, role: Role | str) -> AugmentationRegistry:
        return self._registries[_coerce_role(role)]

    def add_driver_augmentation(
        self, capability: str | Predicate, provider: AugmenterProvider
    ) -> Predicate:
        """Map a capability name or predicate to a driver provider."""
        return _register(self.driver_registry, capability, provider)

    def add_element_augmentation(
        self, capability: str | Predicate, provider: AugmenterProvider
    ) -> Predicate:
        """Map a capability name or predicate to an element provider."""
        return _register(self.element_registry, capability, provider)

    # --------------------------------------------------------------------- #
    # augmentation                                                          #
    # --------------------------------------------------------------------- #
    def augment(self, obj: Any, role: Role | str = Role.DRIVER) -> Any:
        """Return ``obj`` extended with every interface its session supports.

        ``obj`` itself is returned when no remote handle can be extracted
        from it. The concrete type of any other result is not part of the
        contract; only the matched interfaces and the behaviour of ``obj``
        are. Errors from predicates, providers and the composer propagate.
        """
        registry = self.registry(role)
        remote = self.extractor.extract(obj)
        if remote is None:
            logger.debug("No remote handle behind %r; returned unchanged", obj)
            return obj

        caps = Capabilities.of(remote.get_declared_capabilities())
        providers = registry.match(caps)
        logger.debug(
            "Matched %d of %d %s provider(s) for %r",
            len(providers),
            len(registry),
            registry.role.value,
            obj,
        )
        return self.composer.compose(remote, providers, obj)

    def augment_element(self, element: Any) -> Any:
        """Augment ``element`` against the element registry."""
        return self.augment(element, Role.ELEMENT)


def _register(
    registry: AugmentationRegistry,
    capability: str | Predicate,
    provider: AugmenterProvider,
) -> Predicate:
    if isinstance(capability, str):
        return registry.register_by_name(capability, provider)
    return registry.register_by_predicate(capability, provider)


def _coerce_role(role: Role | str) -> Role:
    try:
        return Role(role)
    except ValueError as exc:
        raise InvalidArgumentError.from_value(
            role,
            argument="role",
            expected=" | ".join(Role.allowed()),
            message=f"Unknown augmentation role: {role!r}",
        ) from exc


def _check_strategy(obj: Any, protocol: type, argument: str) -> Any:
    if not isinstance(obj, protocol):
        raise InvalidArgumentError.from_value(
            obj,
            argument=argument,
            expected=protocol.__name__,
            message=f"{argument} does not implement {protocol.__name__}",
        )
    return obj
