"""
Graph topology accessor: read-only view of a sequence graph held in a
networkx DiGraph.

Node identifiers are integers following the graph's topological
numbering. An edge u -> v means the sequence of u is followed by the
sequence of v, so u is an incoming neighbor of v.
"""
import networkx as nx
import pandas as pd
from typing import List

from .exceptions import UnknownNodeError, InvalidGraphError


NODE_COLUMNS = {"node_id", "sequence"}
EDGE_COLUMNS = {"from_id", "to_id"}


class SequenceGraph:
    """Answers span-length and incoming-neighbor queries for the cycle cut core."""

    def __init__(self, G: nx.DiGraph):
        self.G = G

    def __contains__(self, node) -> bool:
        return node in self.G

    def __len__(self) -> int:
        return self.G.number_of_nodes()

    def span_length(self, node) -> int:
        """Number of characters the node spans (end - start, or len(sequence))."""
        if node not in self.G:
            raise UnknownNodeError(node)
        data = self.G.nodes[node]
        if "start" in data and "end" in data:
            span = int(data["end"]) - int(data["start"])
        elif "sequence" in data:
            span = len(data["sequence"])
        else:
            raise InvalidGraphError(f"Node {node!r} has neither a sequence nor start/end attributes")
        if span < 1:
            raise InvalidGraphError(f"Node {node!r} spans {span} characters, expected at least 1")
        return span

    def in_neighbors(self, node) -> List[int]:
        """Incoming neighbors in ascending identifier order."""
        if node not in self.G:
            raise UnknownNodeError(node)
        return sorted(self.G.predecessors(node))


def build_graph(nodes_df: pd.DataFrame, edges_df: pd.DataFrame) -> SequenceGraph:
    """
    Build a SequenceGraph from a node table and an edge table.

    nodes_df columns: node_id, sequence
    edges_df columns: from_id, to_id
    """
    missing = NODE_COLUMNS - set(nodes_df.columns)
    if missing:
        raise ValueError(f"Node table missing required columns: {missing}")
    missing = EDGE_COLUMNS - set(edges_df.columns)
    if missing:
        raise ValueError(f"Edge table missing required columns: {missing}")

    G = nx.DiGraph()
    for _, row in nodes_df.iterrows():
        G.add_node(int(row["node_id"]), sequence=str(row["sequence"]))

    for _, row in edges_df.iterrows():
        src = int(row["from_id"])
        dst = int(row["to_id"])
        # Edges may only join nodes declared in the node table
        if src not in G:
            raise UnknownNodeError(src)
        if dst not in G:
            raise UnknownNodeError(dst)
        G.add_edge(src, dst)

    return SequenceGraph(G)
