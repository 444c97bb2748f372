"""
Unit tests for the exhaustive minimum-weight path search.
"""

import logging

import pytest

from adjacency_list_graph import AdjacencyListGraph
from algorithms import Path
from errors import SearchLimitExceeded, UnknownVertexError
from graph import Edge
from path_search_engine import (
    ExhaustivePathSearchEngine,
    all_simple_paths,
    exhaustive_min_weight_path,
)


def _triangle() -> AdjacencyListGraph:
    g = AdjacencyListGraph()
    # a -> b (0), b -> c (0), a -> c (6)
    g.add_edge("a", "b", 0)
    g.add_edge("b", "c", 0)
    g.add_edge("a", "c", 6)
    return g


def test_prefers_cheaper_indirect_route():
    path = exhaustive_min_weight_path(_triangle(), "a", "c")

    assert path is not None
    assert path.vertices == ("a", "b", "c")
    assert path.edges == (Edge("b", 0), Edge("c", 0))
    assert path.total_weight == 0
    assert path.end == "c"
    assert len(path) == 2


def test_same_start_and_end_is_trivial_path():
    g = _triangle()
    g.add_edge("c", "a", 1)

    path = exhaustive_min_weight_path(g, "a", "a")

    assert path == Path.trivial("a")
    assert path.edges == ()
    assert path.total_weight == 0


def test_unreachable_end_returns_none():
    g = _triangle()
    g.add_vertex("z")

    assert exhaustive_min_weight_path(g, "a", "z") is None
    # edges point one way only
    assert exhaustive_min_weight_path(g, "c", "a") is None


def test_unknown_endpoints_raise():
    g = _triangle()
    with pytest.raises(UnknownVertexError):
        exhaustive_min_weight_path(g, "missing", "a")
    with pytest.raises(UnknownVertexError):
        exhaustive_min_weight_path(g, "a", "missing")
    with pytest.raises(UnknownVertexError):
        exhaustive_min_weight_path(g, "missing", "missing")


def test_terminates_with_cycle_off_the_direct_route():
    g = AdjacencyListGraph()
    g.add_edge("s", "x", 1)
    g.add_edge("x", "y", 1)
    g.add_edge("y", "x", -5)  # weight-reducing cycle
    g.add_edge("x", "t", 1)

    path = exhaustive_min_weight_path(g, "s", "t")

    assert path is not None
    assert path.vertices == ("s", "x", "t")
    assert path.total_weight == 2


def test_negative_weights_are_honoured():
    g = AdjacencyListGraph()
    g.add_edge("a", "c", 1)
    g.add_edge("a", "b", 5)
    g.add_edge("b", "c", -10)

    path = exhaustive_min_weight_path(g, "a", "c")

    assert path is not None
    assert path.vertices == ("a", "b", "c")
    assert path.total_weight == -5


def test_ties_go_to_first_found_path():
    g = AdjacencyListGraph()
    g.add_edge("a", "b", 1)
    g.add_edge("a", "c", 1)
    g.add_edge("b", "d", 1)
    g.add_edge("c", "d", 1)

    path = exhaustive_min_weight_path(g, "a", "d")

    assert path is not None
    assert path.vertices == ("a", "b", "d")


def test_all_simple_paths_in_discovery_order():
    g = _triangle()
    g.add_edge("c", "a", 2)

    paths = list(all_simple_paths(g, "a", "c"))

    assert [p.vertices for p in paths] == [("a", "b", "c"), ("a", "c")]
    assert [p.total_weight for p in paths] == [0, 6]


def test_parallel_edges_yield_separate_candidates():
    g = AdjacencyListGraph()
    g.add_edge("a", "b", 3)
    g.add_edge("a", "b", 2)

    paths = list(all_simple_paths(g, "a", "b"))

    assert [p.total_weight for p in paths] == [3, 2]
    assert exhaustive_min_weight_path(g, "a", "b").total_weight == 2


def test_result_does_not_alias_graph():
    g = _triangle()
    path = exhaustive_min_weight_path(g, "a", "c")

    g.remove_vertex_cascade("b")

    assert path is not None
    assert path.vertices == ("a", "b", "c")


def test_candidate_limit():
    g = _triangle()

    with pytest.raises(SearchLimitExceeded) as excinfo:
        exhaustive_min_weight_path(g, "a", "c", max_candidates=1)
    assert excinfo.value.limit == 1

    assert exhaustive_min_weight_path(g, "a", "c", max_candidates=2) is not None


def test_deep_chain_does_not_recurse():
    g = AdjacencyListGraph()
    for i in range(5000):
        g.add_edge(i, i + 1, 1)

    path = exhaustive_min_weight_path(g, 0, 5000)

    assert path is not None
    assert path.total_weight == 5000


def test_engine_wraps_search(caplog):
    engine = ExhaustivePathSearchEngine()
    with caplog.at_level(logging.DEBUG, logger="path_search_engine"):
        path = engine.search(_triangle(), "a", "c")

    assert path is not None
    assert str(path) == "a -> b -> c (weight 0)"
    assert any("candidate" in record.getMessage() for record in caplog.records)
