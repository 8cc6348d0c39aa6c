# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ("AugmenterSettings", "settings")

DEFAULT_PLUGIN_GROUP = "augmenter.providers"


class AugmenterSettings(BaseSettings, frozen=True):
    """Augmenter settings with environment variable support.

    Every field can be overridden with an ``AUGMENTER_`` prefixed variable,
    e.g. ``AUGMENTER_LOAD_ENTRY_POINTS=1``.
    """

    model_config = SettingsConfigDict(
        env_prefix="AUGMENTER_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    plugin_group: str = Field(
        default=DEFAULT_PLUGIN_GROUP,
        description="Entry point group scanned for third-party providers",
    )
    load_entry_points: bool = Field(
        default=False,
        description="Discover providers from entry points when none are given",
    )
    seed_defaults: bool = Field(
        default=True,
        description="Register the built-in driver providers at construction",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level applied to the package logger",
    )

    @field_validator("log_level", mode="before")
    def _validate_log_level(cls, v: Any) -> str:
        import logging

        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @field_validator("plugin_group")
    def _validate_plugin_group(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("plugin_group must not be empty")
        return v.strip()


settings = AugmenterSettings()
