# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for matching a registry against a capability snapshot."""

import itertools
from dataclasses import dataclass

import pytest

from augmenter import AugmentationRegistry, Capabilities, match


class _Provider:
    def __init__(self, name):
        self.name = name

    def is_applicable(self):
        return lambda caps: True

    def build(self, remote):
        raise NotImplementedError

    def __repr__(self):
        return f"_Provider({self.name!r})"


def _always(result):
    return lambda caps: result


def _identities(providers):
    return sorted(id(p) for p in providers)


class TestMatch:
    def test_returns_exactly_satisfied_providers(self):
        p1, p2, p3 = _Provider("p1"), _Provider("p2"), _Provider("p3")
        entries = [(_always(True), p1), (_always(False), p2), (_always(True), p3)]

        for ordering in itertools.permutations(entries):
            registry = AugmentationRegistry()
            for predicate, provider in ordering:
                registry.register_by_predicate(predicate, provider)
            assert _identities(match(registry, Capabilities())) == _identities([p1, p3])

    def test_every_predicate_is_evaluated(self):
        calls = []

        def recording(result):
            def predicate(caps):
                calls.append(result)
                return result

            return predicate

        registry = AugmentationRegistry()
        for i, result in enumerate([True, False, False, True]):
            registry.register_by_predicate(recording(result), _Provider(str(i)))

        match(registry, {})
        assert sorted(calls) == [False, False, True, True]

    def test_predicates_receive_read_only_snapshot(self):
        seen = []
        registry = AugmentationRegistry()
        registry.register_by_predicate(lambda caps: seen.append(caps), _Provider("x"))

        match(registry, {"rotatable": True})
        assert isinstance(seen[0], Capabilities)
        assert seen[0] == {"rotatable": True}
        with pytest.raises(TypeError):
            seen[0]["rotatable"] = False

    def test_predicate_errors_propagate(self):
        def broken(caps):
            raise RuntimeError("boom")

        registry = AugmentationRegistry()
        registry.register_by_predicate(broken, _Provider("x"))
        with pytest.raises(RuntimeError, match="boom"):
            registry.match({})

    def test_provider_under_two_true_predicates_matched_once(self):
        provider = _Provider("shared")
        registry = AugmentationRegistry()
        registry.register_by_predicate(_always(True), provider)
        registry.register_by_predicate(_always(True), provider)

        assert registry.match({}) == (provider,)

    def test_empty_registry(self):
        assert match(AugmentationRegistry(), {"anything": True}) == ()

    def test_accepts_plain_entry_pairs(self):
        p1 = _Provider("p1")
        assert match([(_always(True), p1)], {}) == (p1,)

    def test_presence_predicates_against_snapshot(self):
        storage, rotation = _Provider("storage"), _Provider("rotation")
        registry = AugmentationRegistry()
        registry.register_by_name("webStorageEnabled", storage)
        registry.register_by_name("rotatable", rotation)

        caps = {"webStorageEnabled": "yes", "rotatable": False}
        assert registry.match(caps) == (storage,)

    def test_value_equal_providers_all_kept(self):
        """Distinct providers comparing equal are still matched separately."""

        class Equal(_Provider):
            def __eq__(self, other):
                return isinstance(other, Equal)

            def __hash__(self):
                return 0

        first, second = Equal("first"), Equal("second")
        registry = AugmentationRegistry()
        registry.register_by_name("x", first)
        registry.register_by_name("x", second)

        matched = registry.match({"x": True})
        assert len(matched) == 2
        assert _identities(matched) == _identities([first, second])

    def test_unhashable_providers_matched(self):
        @dataclass
        class DataProvider:
            name: str

            def is_applicable(self):
                return lambda caps: True

            def build(self, remote):
                raise NotImplementedError

        assert DataProvider.__hash__ is None
        provider = DataProvider("data")
        registry = AugmentationRegistry()
        registry.register_by_name("x", provider)

        assert registry.match({"x": True}) == (provider,)
