import networkx as nx
import pytest

from cyclecut.core.graph import SequenceGraph


@pytest.fixture
def make_graph():
    """
    Build a SequenceGraph from (from_id, to_id) edges.
    Every node spans one character unless listed in `spans`.
    """
    def _make(edges, spans=None, nodes=()):
        spans = spans or {}
        G = nx.DiGraph()
        for node in set(nodes) | {n for e in edges for n in e} | set(spans):
            G.add_node(node, sequence="A" * spans.get(node, 1))
        G.add_edges_from(edges)
        return SequenceGraph(G)
    return _make
