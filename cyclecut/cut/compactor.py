"""
Compactor: drops supersequence positions that no walk continues to and
renumbers the survivors.
"""
from typing import Iterable, List, Sequence, Tuple

from ..core.exceptions import OrphanPositionError


def continuation_targets(relation: Sequence[Iterable[int]]) -> List[bool]:
    """Per position, whether any position continues to it."""
    targeted = [False] * len(relation)
    for targets in relation:
        for t in targets:
            targeted[t] = True
    return targeted


def compact(nodes: Sequence[int], relation: Sequence[Iterable[int]]) -> Tuple[List[int], List[List[int]]]:
    """
    Remove untargeted positions other than 0.

    Returns new node and relation lists; the inputs are not modified.
    Relation targets are returned sorted.
    """
    targeted = continuation_targets(relation)
    removed = {i for i in range(1, len(nodes)) if not targeted[i]}

    # new_index[i] = i - (number of removed positions before i)
    new_index = []
    dropped = 0
    for i in range(len(nodes)):
        if i in removed:
            dropped += 1
        new_index.append(i - dropped)

    new_nodes = [node for i, node in enumerate(nodes) if i not in removed]
    new_relation = [
        sorted(new_index[t] for t in targets)
        for i, targets in enumerate(relation) if i not in removed
    ]
    return new_nodes, new_relation


def check_no_orphans(relation: Sequence[Iterable[int]], cycle_start=None, horizon=None) -> None:
    """Every position except 0 must be continued to from a smaller position."""
    reached = [False] * len(relation)
    for i, targets in enumerate(relation):
        for t in targets:
            if t <= i:
                raise OrphanPositionError(
                    f"Relation edge {i} -> {t} does not increase the position index",
                    cycle_start=cycle_start, horizon=horizon,
                )
            reached[t] = True
    for i in range(1, len(reached)):
        if not reached[i]:
            raise OrphanPositionError(
                f"Position {i} has no incoming relation edge",
                cycle_start=cycle_start, horizon=horizon,
            )
