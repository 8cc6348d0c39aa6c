# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Predicates over a capability snapshot."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ._errors import InvalidArgumentError

__all__ = (
    "PresencePredicate",
    "has_capability",
    "is_present",
    "validate_capability_name",
)


def validate_capability_name(name: Any) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidArgumentError.from_value(
            name,
            argument="capability_name",
            expected="non-empty str",
            message="Capability name to check must be set.",
        )
    return name


def is_present(value: Any) -> bool:
    """True for any non-null value except an explicit boolean ``False``."""
    if isinstance(value, bool):
        return value
    return value is not None


class PresencePredicate:
    """Satisfied when the snapshot declares ``name`` and it is not ``False``.

    Instances compare and hash by identity: two predicates built for the
    same name are distinct registry keys.
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __call__(self, caps: Mapping[str, Any]) -> bool:
        validate_capability_name(self.name)
        return is_present(caps.get(self.name))

    def __repr__(self) -> str:
        return f"PresencePredicate({self.name!r})"


def has_capability(name: str) -> PresencePredicate:
    """Build a fresh presence predicate, rejecting invalid names up front."""
    return PresencePredicate(validate_capability_name(name))
