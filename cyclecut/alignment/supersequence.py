"""
Supersequence builder: merges covering walks into one common
supersequence by repeated pairwise alignment, then re-derives how every
walk continues along the merged order.

Pairwise merge scoring (rows follow the running supersequence, columns
follow the new walk):
  LEFT  - keep an element of the running supersequence, cost 0
  UP    - insert an element of the walk, cost 1
  DIAG  - element present in both, emitted once, cost 0
Ties prefer LEFT, then UP, then DIAG, so the running supersequence is
disturbed as little as possible.
"""
import logging
import numpy as np
from typing import List, Sequence, Set

from ..core.exceptions import BacktraceError, SubsequenceError

logger = logging.getLogger(__name__)

NONE, LEFT, UP, DIAG = 0, 1, 2, 3
UNSET = np.iinfo(np.int64).max


def pairwise_supersequence(supersequence: Sequence[int], walk: Sequence[int]) -> List[int]:
    """Shortest common supersequence of two sequences that share their first element."""
    if len(supersequence) == 0 or len(walk) == 0:
        raise ValueError("Both sequences must be non-empty")

    n, m = len(supersequence), len(walk)
    scores = np.full((n, m), UNSET, dtype=np.int64)
    backtrace = np.full((n, m), NONE, dtype=np.int8)

    scores[:, 0] = 0
    backtrace[:, 0] = LEFT
    scores[0, :] = np.arange(m)
    backtrace[0, :] = UP

    for i in range(1, n):
        for j in range(1, m):
            value = scores[i - 1, j]
            source = LEFT
            if scores[i, j - 1] + 1 < value:
                value = scores[i, j - 1] + 1
                source = UP
            if supersequence[i] == walk[j] and scores[i - 1, j - 1] < value:
                value = scores[i - 1, j - 1]
                source = DIAG
            scores[i, j] = value
            backtrace[i, j] = source

    merged = []
    i, j = n - 1, m - 1
    while i != 0 or j != 0:
        direction = backtrace[i, j]
        if direction == LEFT:
            merged.append(supersequence[i])
            i -= 1
        elif direction == UP:
            merged.append(walk[j])
            j -= 1
        elif direction == DIAG and supersequence[i] == walk[j]:
            merged.append(supersequence[i])
            i -= 1
            j -= 1
        else:
            raise BacktraceError(f"No valid backtrace direction at cell ({i}, {j})")

    if supersequence[0] != walk[0]:
        raise BacktraceError(
            f"Sequences start with different elements: {supersequence[0]!r} and {walk[0]!r}"
        )
    merged.append(supersequence[0])
    merged.reverse()
    return merged


def merge_walks(walks: Sequence[Sequence[int]]) -> List[int]:
    """Fold all walks into one common supersequence, left to right."""
    if not walks:
        raise ValueError("Cannot merge an empty list of walks")

    supersequence = list(walks[0])
    for walk in walks[1:]:
        supersequence = pairwise_supersequence(supersequence, walk)
    logger.debug("Merged %d walks into a supersequence of length %d", len(walks), len(supersequence))
    return supersequence


def derive_relation(supersequence: Sequence[int], walks: Sequence[Sequence[int]]) -> List[Set[int]]:
    """
    Embed every walk into the supersequence (leftmost match) and record,
    per supersequence position, the positions it continues to.
    """
    relation: List[Set[int]] = [set() for _ in supersequence]
    for walk in walks:
        if not walk or walk[0] != supersequence[0]:
            raise SubsequenceError(f"Walk {list(walk)} does not start at supersequence position 0")
        if len(walk) > len(supersequence):
            raise SubsequenceError(f"Walk {list(walk)} is longer than the supersequence")

        offset = 0
        last = 0
        for i in range(1, len(walk)):
            while i + offset < len(supersequence) and supersequence[i + offset] != walk[i]:
                offset += 1
            if i + offset >= len(supersequence):
                raise SubsequenceError(f"Walk {list(walk)} is not a subsequence of the supersequence")
            relation[last].add(i + offset)
            last = i + offset
    return relation
