from __future__ import annotations

import pytest

from mapmerge.domain.model import Node
from mapmerge.domain.reconciliation import Classification, classify_edge, classify_node
from tests.helpers.maps import make_edge, make_node


@pytest.mark.parametrize(
    ("local", "expected"),
    [
        (None, Classification.ABSENT),
        (make_node("n1", "Cost", "g1"), Classification.IDENTICAL),
        (make_node("n1", "cost", "g1"), Classification.LABEL_CONFLICT),
        (make_node("n1", "Price", "g2"), Classification.LABEL_CONFLICT),
        (make_node("n1", "Cost", "g2"), Classification.STYLE_CONFLICT),
    ],
)
def test_classify_node(local: Node | None, expected: Classification) -> None:
    remote = make_node("n1", "Cost", "g1")

    assert classify_node(local, remote) is expected


def test_classify_node_ignores_position_and_styling() -> None:
    local = make_node("n1", "Cost", "g1", x=0.0, y=0.0)
    remote = make_node("n1", "Cost", "g1", x=500.0, y=-20.0)

    assert classify_node(local, remote) is Classification.IDENTICAL


def test_classify_edge_ignores_endpoints() -> None:
    local = make_edge("e1", "n1", "n2", label="raises")
    remote = make_edge("e1", "n3", "n4", label="raises")

    assert classify_edge(local, remote) is Classification.IDENTICAL


def test_classify_edge_reports_blank_versus_set_label_as_conflict() -> None:
    local = make_edge("e1", "n1", "n2")
    remote = make_edge("e1", "n1", "n2", label="raises", group="strong")

    assert classify_edge(local, remote) is Classification.LABEL_CONFLICT
    assert classify_edge(None, remote) is Classification.ABSENT
