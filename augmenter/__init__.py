# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import AugmenterError, CompositionError, InvalidArgumentError
from .composer import Augmented, Composer, DelegatingComposer
from .config import AugmenterSettings, settings
from .core import Augmenter
from .extractor import (
    DefaultRemoteExtractor,
    RemoteExtractor,
    RemoteHandle,
    WrapsDriver,
)
from .matcher import match
from .plugins import discover_providers
from .predicates import PresencePredicate, has_capability
from .provider import AugmenterProvider, BaseProvider
from .registry import AugmentationRegistry
from .types import (
    Capabilities,
    CapabilityImplementation,
    CapabilityType,
    Predicate,
    Role,
)
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(settings.log_level)

__all__ = (
    "__version__",
    "AugmentationRegistry",
    "Augmented",
    "Augmenter",
    "AugmenterError",
    "AugmenterProvider",
    "AugmenterSettings",
    "BaseProvider",
    "Capabilities",
    "CapabilityImplementation",
    "CapabilityType",
    "Composer",
    "CompositionError",
    "DefaultRemoteExtractor",
    "DelegatingComposer",
    "InvalidArgumentError",
    "Predicate",
    "PresencePredicate",
    "RemoteExtractor",
    "RemoteHandle",
    "Role",
    "WrapsDriver",
    "discover_providers",
    "has_capability",
    "logger",
    "match",
    "settings",
)
