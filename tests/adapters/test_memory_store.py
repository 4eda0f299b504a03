from __future__ import annotations

import pytest

from mapmerge.adapters.memory import InMemoryEntityStore, InMemoryGraphStore
from mapmerge.domain.model import Node
from mapmerge.domain.ports import GraphStore
from tests.helpers.maps import make_edge, make_node


def test_entity_store_keeps_insertion_order() -> None:
    store = InMemoryEntityStore[Node]([make_node("b"), make_node("a")])
    store.add(make_node("c"))

    assert [node.id for node in store.get_all()] == ["b", "a", "c"]
    assert "a" in store
    assert len(store) == 3


def test_entity_store_filters_with_predicate() -> None:
    store = InMemoryEntityStore[Node]([make_node("n1", "Cost"), make_node("n2", "Demand")])

    assert store.get_all(lambda node: node.label == "Demand") == (make_node("n2", "Demand"),)


def test_entity_store_rejects_duplicate_add() -> None:
    store = InMemoryEntityStore[Node]([make_node("n1")])

    with pytest.raises(ValueError, match="n1"):
        store.add(make_node("n1", "Other"))


def test_entity_store_update_requires_existing_entity() -> None:
    store = InMemoryEntityStore[Node]([make_node("n1", "Cost")])

    store.update(make_node("n1", "Price"))
    assert store.get("n1") == make_node("n1", "Price")

    with pytest.raises(KeyError):
        store.update(make_node("n2"))


def test_graph_store_satisfies_port() -> None:
    graph = InMemoryGraphStore([make_node("n1"), make_node("n2")], [make_edge("e1", "n1", "n2")])

    assert isinstance(graph, GraphStore)
    assert graph.edges.get("e1") == make_edge("e1", "n1", "n2")
    assert graph.nodes.get("missing") is None
