# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing import Any

import pytest

from augmenter import AugmenterSettings, BaseProvider


class FakeRemote:
    """Remote handle double recording every command it is sent."""

    def __init__(self, caps=None, responses=None):
        self.caps = dict(caps or {})
        self.responses = dict(responses or {})
        self.commands: list[tuple[str, dict]] = []

    def get_declared_capabilities(self):
        return self.caps

    def execute(self, command: str, params: dict | None = None) -> Any:
        self.commands.append((command, params))
        return {"value": self.responses.get(command)}

    def __repr__(self):
        return f"FakeRemote({self.caps!r})"


class FakeWrapper:
    """Decorating driver, or an element pointing at its parent driver."""

    def __init__(self, wrapped_driver, name="wrapper"):
        self._driver = wrapped_driver
        self.name = name

    @property
    def wrapped_driver(self):
        return self._driver

    def click(self):
        return f"{self.name} clicked"


class PlainObject:
    title = "plain"


class Greeter:
    """Interface used by the test providers."""

    def greet(self) -> str: ...


class Farewell:
    def farewell(self) -> str: ...


class _GreeterImpl:
    def __init__(self, remote):
        self.remote = remote

    def greet(self):
        return "hello"


class _FarewellImpl:
    def __init__(self, remote):
        self.remote = remote

    def farewell(self):
        return "bye"


class GreeterProvider(BaseProvider):
    capability = "greetingEnabled"
    interface = Greeter

    def create_implementation(self, remote):
        return _GreeterImpl(remote)


class FarewellProvider(BaseProvider):
    capability = "farewellEnabled"
    interface = Farewell

    def create_implementation(self, remote):
        return _FarewellImpl(remote)


@pytest.fixture
def isolated_settings():
    """Settings with no built-ins and no entry point discovery."""
    return AugmenterSettings(seed_defaults=False, load_entry_points=False)


@pytest.fixture
def default_settings():
    return AugmenterSettings(seed_defaults=True, load_entry_points=False)


@pytest.fixture
def make_remote():
    return FakeRemote


@pytest.fixture
def make_wrapper():
    return FakeWrapper


@pytest.fixture
def plain_object():
    return PlainObject()


@pytest.fixture
def greeter_provider():
    return GreeterProvider()


@pytest.fixture
def farewell_provider():
    return FarewellProvider()


@pytest.fixture
def interfaces():
    return {"greeter": Greeter, "farewell": Farewell}
