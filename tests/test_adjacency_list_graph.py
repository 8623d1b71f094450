"""
Unit tests for AdjacencyListGraph.
"""

from adjacency_list_graph import AdjacencyListGraph
from records import TopologyRecord


def test_upsert_creates_nodes_and_both_directions():
    g = AdjacencyListGraph()

    g.upsert_edge(3, 1, 4)
    g.upsert_edge(1, 2, 1)

    assert g.nodes() == [1, 2, 3]
    assert g.outgoing(1) == {2: 1, 3: 4}
    assert g.outgoing(3) == {1: 4}
    assert g.edge_cost(1, 3) == g.edge_cost(3, 1) == 4


def test_upsert_updates_cost_symmetrically():
    g = AdjacencyListGraph()
    g.upsert_edge(1, 2, 5)
    g.upsert_edge(2, 1, 7)

    assert g.edge_cost(1, 2) == 7
    assert g.edge_cost(2, 1) == 7


def test_remove_edge_deletes_both_directions_and_keeps_nodes():
    g = AdjacencyListGraph()
    g.upsert_edge(1, 2, 1)
    g.upsert_edge(2, 3, 1)

    g.remove_edge(2, 1)

    assert not g.has_edge(1, 2)
    assert not g.has_edge(2, 1)
    assert g.outgoing(1) == {}
    assert g.nodes() == [1, 2, 3]


def test_remove_missing_edge_is_noop():
    g = AdjacencyListGraph()
    g.upsert_edge(1, 2, 1)

    g.remove_edge(1, 3)
    g.remove_edge(8, 9)

    assert g.outgoing(1) == {2: 1}
    assert g.nodes() == [1, 2]


def test_neighbors_sorted_and_empty_for_unknown_node():
    g = AdjacencyListGraph()
    for v in (9, 4, 6, 2):
        g.upsert_edge(5, v, v)

    assert list(g.neighbors(5)) == [2, 4, 6, 9]
    assert g.neighbors(42) == {}


def test_outgoing_returns_copy():
    g = AdjacencyListGraph()
    g.upsert_edge(1, 2, 1)

    out = g.outgoing(1)
    out.clear()

    # internal structure must remain intact
    assert g.outgoing(1) == {2: 1}


def test_from_records_and_copy_are_independent():
    g = AdjacencyListGraph.from_records([TopologyRecord(1, 2, 3), TopologyRecord(2, 3, 4)])
    clone = g.copy()
    clone.remove_edge(1, 2)

    assert g.has_edge(1, 2)
    assert not clone.has_edge(2, 1)
    assert len(g) == 3
    assert 3 in g
