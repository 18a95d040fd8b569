"""Tests for provider registration and data-source aggregation."""

from __future__ import annotations

import itertools

from journey.models.sources import DataSourceGroup
from journey.sources import DataSourceProvider, DataSourceRegistry


def group(group_id: str) -> DataSourceGroup:
    return DataSourceGroup(id=group_id, name=group_id.upper(), type="global")


class StubProvider(DataSourceProvider):
    def __init__(self, provider_id, priority, applicable=True, groups=()):
        self.id = provider_id
        self.name = provider_id.title()
        self.priority = priority
        self.applicable = applicable
        self.groups = list(groups)
        self.calls = 0

    def is_applicable(self, node, graph):
        return self.applicable

    def get_data_sources(self, node, graph):
        self.calls += 1
        return list(self.groups)


def test_inapplicable_provider_contributes_nothing(linear_graph):
    registry = DataSourceRegistry()
    p10 = StubProvider("p10", 10, groups=[group("g1")])
    p20 = StubProvider("p20", 20, applicable=False, groups=[group("g2")])
    registry.register(p20)
    registry.register(p10)

    assert registry.get_all_data_sources(linear_graph.nodes[0], linear_graph) == [group("g1")]
    assert p20.calls == 0


def test_groups_follow_priority_then_provider_order(linear_graph):
    registry = DataSourceRegistry()
    registry.register(StubProvider("late", 50, groups=[group("l1"), group("l2")]))
    registry.register(StubProvider("early", 5, groups=[group("e1"), group("e2")]))
    registry.register(StubProvider("empty", 1))

    groups = registry.get_all_data_sources(linear_graph.nodes[0], linear_graph)
    assert [g.id for g in groups] == ["e1", "e2", "l1", "l2"]


def test_providers_sorted_for_any_registration_order():
    providers = [
        StubProvider("a", 30),
        StubProvider("b", 10),
        StubProvider("c", 20),
        StubProvider("d", 10),
    ]
    for ordering in itertools.permutations(providers):
        registry = DataSourceRegistry()
        for provider in ordering:
            registry.register(provider)
        priorities = [p.priority for p in registry.get_providers()]
        assert priorities == sorted(priorities)


def test_register_same_id_replaces(linear_graph):
    registry = DataSourceRegistry()
    registry.register(StubProvider("dup", 10, groups=[group("old")]))
    replacement = StubProvider("dup", 40, groups=[group("new")])
    registry.register(replacement)

    assert len(registry) == 1
    assert registry.get("dup") is replacement
    assert [g.id for g in registry.get_all_data_sources(linear_graph.nodes[0], linear_graph)] == ["new"]


def test_unregister():
    registry = DataSourceRegistry()
    registry.register(StubProvider("p", 10))
    registry.unregister("p")
    assert "p" not in registry
    assert registry.get_providers() == []


def test_unregister_unknown_id_is_noop():
    registry = DataSourceRegistry()
    registry.register(StubProvider("p", 10))
    registry.unregister("missing")
    assert [p.id for p in registry.get_providers()] == ["p"]


def test_empty_registry(linear_graph):
    registry = DataSourceRegistry()
    assert len(registry) == 0
    assert registry.get("anything") is None
    assert registry.get_all_data_sources(linear_graph.nodes[0], linear_graph) == []


def test_aggregation_reflects_each_call(linear_graph):
    registry = DataSourceRegistry()
    provider = StubProvider("p", 10, groups=[group("g1")])
    registry.register(provider)
    node = linear_graph.nodes[0]

    assert [g.id for g in registry.get_all_data_sources(node, linear_graph)] == ["g1"]
    provider.applicable = False
    assert registry.get_all_data_sources(node, linear_graph) == []
