"""
Bounded unroller: walks backward from a cycle start along incoming edges
for at most `horizon` characters and lays the walk out as a layered DAG.

Layers are character offsets from the cycle start. Each (layer, node)
pair becomes one position; positions are numbered in layer order, so
position 0 is always the cycle start and every successor edge points to a
larger position index.
"""
import logging
from typing import Dict, List, Set, Tuple

from ..core.exceptions import MalformedSkeletonError
from ..models import Skeleton

logger = logging.getLogger(__name__)


def unroll(graph, cycle_start: int, horizon: int) -> Skeleton:
    """
    Build the skeleton for `cycle_start`.

    `graph` only needs span_length(node) and in_neighbors(node).
    A node whose span reaches the horizon keeps its position but
    contributes no further layer.
    """
    if horizon <= 0:
        raise ValueError(f"Horizon must be positive, got {horizon}")

    layers: List[Set[int]] = [set() for _ in range(horizon)]
    layers[0].add(cycle_start)

    nodes: List[int] = []
    layer_of: List[int] = []
    position: Dict[Tuple[int, int], int] = {}
    # Targets are only indexed once their own layer is processed
    pending: List[Tuple[Tuple[int, int], Tuple[int, int]]] = []

    for layer in range(horizon):
        for node in sorted(layers[layer]):
            position[(layer, node)] = len(nodes)
            nodes.append(node)
            layer_of.append(layer)

            span = graph.span_length(node)
            if layer + span >= horizon:
                continue
            for neighbor in graph.in_neighbors(node):
                layers[layer + span].add(neighbor)
                pending.append(((layer, node), (layer + span, neighbor)))

    successors: List[Set[int]] = [set() for _ in nodes]
    for src, dst in pending:
        if src not in position or dst not in position:
            raise MalformedSkeletonError(
                f"Edge {src} -> {dst} references an unindexed position",
                cycle_start=cycle_start, horizon=horizon,
            )
        i, j = position[src], position[dst]
        if j <= i:
            raise MalformedSkeletonError(
                f"Edge {i} -> {j} does not increase the position index",
                cycle_start=cycle_start, horizon=horizon,
            )
        successors[i].add(j)

    logger.debug(
        "Unrolled node %s over horizon %d: %d positions, %d edges",
        cycle_start, horizon, len(nodes), len(pending),
    )

    return Skeleton(
        cycle_start=cycle_start,
        horizon=horizon,
        nodes=nodes,
        layers=layer_of,
        successors=[sorted(s) for s in successors],
    )
