"""
Flow over a skeleton: a feasible flow that puts at least one unit on
every edge, an optional minimum-flow reduction, and the decomposition of
a flow into source-to-sink paths.

Position 0 is the only source; positions without successors are sinks.
Flows are plain dicts keyed by (from_position, to_position).
"""
import logging
import networkx as nx
from typing import Dict, List, Tuple

from ..core.exceptions import InfeasibleFlowError
from ..models import Skeleton

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]

SUPER_SOURCE = "source"
SUPER_SINK = "sink"


def flow_value(skeleton: Skeleton, flow: Dict[Edge, int]) -> int:
    """Total flow leaving position 0."""
    return sum(flow.get((0, j), 0) for j in skeleton.successors[0]) if len(skeleton) else 0


def find_feasible_flow(skeleton: Skeleton) -> Dict[Edge, int]:
    """
    Route one unit through every edge that has none yet.

    One path from position 0 to each position and one path from each
    position to a sink are remembered; an uncovered edge i -> j gets a
    unit along prefix(i) + (i, j) + suffix(j). Shared prefixes and
    suffixes make this over-provision, which is fine for feasibility.
    """
    n = len(skeleton)
    sources_of: List[List[int]] = [[] for _ in range(n)]
    for i, succ in enumerate(skeleton.successors):
        for j in succ:
            sources_of[j].append(i)

    path_back: Dict[int, List[Edge]] = {0: []}
    for i in range(n):
        for j in skeleton.successors[i]:
            path_back[j] = path_back.get(i, []) + [(i, j)]

    path_forward: Dict[int, List[Edge]] = {}
    for i in range(n - 1, -1, -1):
        for src in sources_of[i]:
            path_forward[src] = [(src, i)] + path_forward.get(i, [])

    flow: Dict[Edge, int] = {edge: 0 for edge in skeleton.edges()}
    for i, j in skeleton.edges():
        if flow[(i, j)] > 0:
            continue
        flow[(i, j)] += 1
        for edge in path_back.get(i, []):
            flow[edge] += 1
        for edge in path_forward.get(j, []):
            flow[edge] += 1

    for edge, units in flow.items():
        if units < 1:
            raise InfeasibleFlowError(
                f"Edge {edge} carries no flow",
                cycle_start=skeleton.cycle_start, horizon=skeleton.horizon,
            )
    return flow


def reduce_flow(skeleton: Skeleton, flow: Dict[Edge, int]) -> Dict[Edge, int]:
    """
    Cancel as much redundant flow as possible while keeping every edge >= 1.

    Any flow g with g <= flow - 1 on each edge, from position 0 to the
    sinks, can be subtracted without breaking feasibility. The largest
    such g is a max flow on the auxiliary network built here.
    """
    if not flow:
        return dict(flow)

    n = len(skeleton)
    big = n * n
    H = nx.DiGraph()
    H.add_edge(SUPER_SOURCE, 0, capacity=big)
    for (i, j), units in flow.items():
        H.add_edge(i, j, capacity=units - 1)
    for i in range(n):
        if skeleton.is_sink(i):
            H.add_edge(i, SUPER_SINK, capacity=big)

    cancelled, flow_dict = nx.maximum_flow(H, SUPER_SOURCE, SUPER_SINK)

    reduced = {(i, j): units - flow_dict[i][j] for (i, j), units in flow.items()}
    logger.debug(
        "Flow for node %s reduced from %d to %d (%d cancelled)",
        skeleton.cycle_start, flow_value(skeleton, flow), flow_value(skeleton, reduced), cancelled,
    )
    for edge, units in reduced.items():
        if units < 1:
            raise InfeasibleFlowError(
                f"Reduction left edge {edge} without flow",
                cycle_start=skeleton.cycle_start, horizon=skeleton.horizon,
            )
    return reduced


def decompose_flow(skeleton: Skeleton, flow: Dict[Edge, int]) -> List[List[int]]:
    """
    Split a flow into paths of position indices starting at position 0.

    Each pass greedily follows the lowest-index successor that still has
    flow and consumes one unit per edge. Works on a private copy of
    `flow`; every unit must be consumed at the end.
    """
    if len(skeleton) == 1:
        return [[0]]

    remaining = dict(flow)
    paths: List[List[int]] = []
    while True:
        path = [0]
        current = 0
        while True:
            nxt = next((j for j in skeleton.successors[current] if remaining.get((current, j), 0) > 0), None)
            if nxt is None:
                break
            remaining[(current, nxt)] -= 1
            path.append(nxt)
            current = nxt
        if len(path) == 1:
            break
        paths.append(path)

    leftover = {edge: units for edge, units in remaining.items() if units != 0}
    if leftover or not paths:
        raise InfeasibleFlowError(
            f"Flow not fully decomposed, left over: {leftover}",
            cycle_start=skeleton.cycle_start, horizon=skeleton.horizon,
        )
    return paths
