import networkx as nx
import pandas as pd
import pytest

from cyclecut.core.graph import SequenceGraph, build_graph
from cyclecut.core.exceptions import UnknownNodeError, InvalidGraphError, GraphAccessError


def test_build_graph_from_tables():
    nodes = pd.DataFrame({"node_id": [0, 1, 2], "sequence": ["ACG", "T", "GG"]})
    edges = pd.DataFrame({"from_id": [0, 1, 2], "to_id": [1, 2, 0]})
    graph = build_graph(nodes, edges)

    assert len(graph) == 3
    assert graph.span_length(0) == 3
    assert graph.span_length(1) == 1
    assert graph.in_neighbors(0) == [2]
    assert graph.in_neighbors(1) == [0]


def test_in_neighbors_sorted():
    nodes = pd.DataFrame({"node_id": [0, 1, 2, 3], "sequence": ["A", "C", "G", "T"]})
    edges = pd.DataFrame({"from_id": [3, 1, 2], "to_id": [0, 0, 0]})
    graph = build_graph(nodes, edges)
    assert graph.in_neighbors(0) == [1, 2, 3]


def test_build_graph_missing_columns():
    nodes = pd.DataFrame({"node_id": [0]})
    edges = pd.DataFrame({"from_id": [], "to_id": []})
    with pytest.raises(ValueError, match="missing required columns"):
        build_graph(nodes, edges)


def test_build_graph_edge_to_undeclared_node():
    nodes = pd.DataFrame({"node_id": [0], "sequence": ["A"]})
    edges = pd.DataFrame({"from_id": [0], "to_id": [7]})
    with pytest.raises(UnknownNodeError):
        build_graph(nodes, edges)


def test_span_from_start_end():
    G = nx.DiGraph()
    G.add_node(0, start=10, end=14)
    assert SequenceGraph(G).span_length(0) == 4


def test_unknown_node():
    graph = SequenceGraph(nx.DiGraph())
    with pytest.raises(UnknownNodeError):
        graph.span_length(5)
    with pytest.raises(GraphAccessError):
        graph.in_neighbors(5)


def test_empty_span_rejected():
    G = nx.DiGraph()
    G.add_node(0, sequence="")
    G.add_node(1)
    graph = SequenceGraph(G)
    with pytest.raises(InvalidGraphError):
        graph.span_length(0)
    with pytest.raises(InvalidGraphError):
        graph.span_length(1)
