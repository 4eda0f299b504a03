from __future__ import annotations

from mapmerge.domain.ports import DIFF_CATEGORY
from mapmerge.domain.reconciliation import (
    Classification,
    DiffDirection,
    Subject,
    diff,
    merge,
)
from tests.helpers.maps import (
    RecordingEventLog,
    SequentialIds,
    make_edge,
    make_graph,
    make_node,
)


def test_diff_reports_each_kind_of_factor_discrepancy() -> None:
    graph = make_graph(
        [
            make_node("n1", "Cost", "g1"),
            make_node("n2", "Demand", "g1"),
            make_node("n3", "Supply", "g1"),
            make_node("n4", "Gone", "g1"),
        ]
    )
    remote = [
        make_node("n1", "Price", "g1"),
        make_node("n2", "Demand", "g2"),
        make_node("n3", "Supply", "g1"),
        make_node("n5", "Quality", "g1"),
    ]
    events = RecordingEventLog()

    report = diff(graph, remote, [], event_log=events)

    assert report.messages == (
        "Existing Factor label: 'Cost' does not match new label: 'Price'.",
        "Existing style: 'g1' does not match new style: 'g2' for Factor: 'Demand'.",
        "New Factor: 'Quality' not in existing map",
        "Existing factor: 'Gone' not in other map",
    )
    assert [(f.entity_id, f.classification, f.direction) for f in report.findings] == [
        ("n1", Classification.LABEL_CONFLICT, DiffDirection.REMOTE),
        ("n2", Classification.STYLE_CONFLICT, DiffDirection.REMOTE),
        ("n5", Classification.ABSENT, DiffDirection.REMOTE),
        ("n4", Classification.ABSENT, DiffDirection.LOCAL_ONLY),
    ]
    assert {category for _message, category in events.entries} == {DIFF_CATEGORY}
    assert events.messages == list(report.messages)


def test_diff_reports_link_discrepancies_remote_to_local_only() -> None:
    nodes = [make_node("n1", "Cost"), make_node("n2", "Effect")]
    graph = make_graph(
        nodes,
        [
            make_edge("e1", "n1", "n2", label="raises"),
            make_edge("e2", "n1", "n2", group="weak"),
            make_edge("e-local", "n2", "n1"),
        ],
    )
    remote_edges = [
        make_edge("e1", "n1", "n2", label="lowers"),
        make_edge("e2", "n1", "n2", group="strong"),
        make_edge("e3", "n2", "n1"),
    ]

    report = diff(graph, nodes, remote_edges)

    links = report.for_subject(Subject.LINK)
    assert [finding.message for finding in links] == [
        "Existing Link label: 'raises' does not match new label: 'lowers'.",
        "Existing Link style: 'weak' does not match new style: 'strong' for link "
        "'from Cost to Effect'.",
        "Existing map does not include Link: 'from Effect to Cost'",
    ]
    assert all(finding.entity_id != "e-local" for finding in report.findings)


def test_diff_of_identical_maps_is_empty() -> None:
    nodes = [make_node("n1", "Cost"), make_node("n2", "Effect")]
    edges = [make_edge("e1", "n1", "n2")]

    report = diff(make_graph(nodes, edges), nodes, edges)

    assert not report
    assert len(report) == 0


def test_diff_leaves_local_map_untouched() -> None:
    local_nodes = [make_node("n1", "Cost"), make_node("n2", "Effect")]
    local_edges = [make_edge("e1", "n1", "n2")]
    graph = make_graph(local_nodes, local_edges)

    diff(
        graph,
        [make_node("n1", "Price"), make_node("n3", "Demand")],
        [make_edge("e7", "n1", "n3")],
    )

    assert list(graph.nodes.get_all()) == local_nodes
    assert list(graph.edges.get_all()) == local_edges


def test_every_factor_finding_has_a_matching_merge_action() -> None:
    local = [
        make_node("n1", "Cost", "g1"),
        make_node("n2", "Demand", "g1"),
        make_node("n3", "Supply", "g1"),
    ]
    remote = [
        make_node("n1", "Price", "g1"),
        make_node("n2", "Demand", "g2"),
        make_node("n3", "Supply", "g1"),
        make_node("n4", "Quality", "g1"),
    ]

    report = diff(make_graph(local), remote, [])
    result = merge(make_graph(local), remote, [], new_id=SequentialIds())

    remote_findings = {
        (finding.entity_id, finding.classification)
        for finding in report.for_subject(Subject.FACTOR)
        if finding.direction is DiffDirection.REMOTE
    }
    factor_actions = {
        (action.source_id, action.classification)
        for action in result.actions
        if action.subject is Subject.FACTOR
    }
    assert remote_findings == factor_actions
    assert len(remote_findings) == 3
