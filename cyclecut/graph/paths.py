"""
Edge-covering walks: every skeleton edge is used by at least one walk.
"""
import logging
from typing import List

from ..models import Skeleton
from .flow import find_feasible_flow, reduce_flow, decompose_flow, flow_value

logger = logging.getLogger(__name__)


def edge_covering_paths(skeleton: Skeleton, reduce: bool = False) -> List[List[int]]:
    """Covering walks as lists of position indices."""
    flow = find_feasible_flow(skeleton)
    logger.debug("Feasible flow for node %s: %d", skeleton.cycle_start, flow_value(skeleton, flow))
    if reduce:
        flow = reduce_flow(skeleton, flow)
    paths = decompose_flow(skeleton, flow)
    logger.debug("Node %s covered by %d walks", skeleton.cycle_start, len(paths))
    return paths


def edge_covering_walks(skeleton: Skeleton, reduce: bool = False) -> List[List[int]]:
    """Covering walks as lists of node identifiers, each starting at the cycle start."""
    return [
        [skeleton.nodes[p] for p in path]
        for path in edge_covering_paths(skeleton, reduce=reduce)
    ]
