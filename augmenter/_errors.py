# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "AugmenterError",
    "InvalidArgumentError",
    "CompositionError",
)


class AugmenterError(Exception):
    default_message: ClassVar[str] = "Augmenter error"
    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__ if hasattr(self, "__cause__") else None


class InvalidArgumentError(AugmenterError):
    """Raised when a registration call receives an absent or invalid argument."""

    default_message = "Invalid argument"
    __slots__ = ()

    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        argument: str,
        expected: str | None = None,
        message: str | None = None,
    ):
        """Create an InvalidArgumentError describing the rejected value."""
        details = {
            "argument": argument,
            "value": value,
            "type": type(value).__name__,
            **({"expected": expected} if expected else {}),
        }
        return cls(message=message, details=details)


class CompositionError(AugmenterError):
    """Raised when matched capabilities cannot be combined into one view."""

    default_message = "Capabilities could not be composed"
    __slots__ = ()
