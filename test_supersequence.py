import pytest

from cyclecut.alignment.supersequence import pairwise_supersequence, merge_walks, derive_relation
from cyclecut.core.exceptions import BacktraceError, SubsequenceError
from cyclecut.graph.paths import edge_covering_walks
from cyclecut.graph.unroller import unroll


def _is_subsequence(walk, sequence):
    it = iter(sequence)
    return all(any(x == y for y in it) for x in walk)


def test_pairwise_identical():
    assert pairwise_supersequence([0, 2, 1, 0], [0, 2, 1, 0]) == [0, 2, 1, 0]


def test_pairwise_branch_merge():
    merged = pairwise_supersequence([0, 1, 3, 0], [0, 2, 3, 0])
    assert merged == [0, 2, 1, 3, 0]


def test_pairwise_prefix_walk_adds_nothing():
    assert pairwise_supersequence([0, 5, 6, 7], [0, 5]) == [0, 5, 6, 7]


def test_pairwise_longer_walk():
    merged = pairwise_supersequence([0, 5], [0, 5, 6, 7])
    assert merged == [0, 5, 6, 7]


def test_pairwise_different_start():
    with pytest.raises(BacktraceError):
        pairwise_supersequence([0, 1], [2, 1])


def test_pairwise_rejects_empty():
    with pytest.raises(ValueError):
        pairwise_supersequence([], [0])


def test_merge_single_walk():
    assert merge_walks([[4, 3, 2, 4]]) == [4, 3, 2, 4]


def test_merge_contains_every_walk():
    walks = [[0, 1, 3, 0], [0, 2, 3, 0], [0, 2, 4, 1], [0, 3, 3, 3]]
    merged = merge_walks(walks)

    assert merged[0] == 0
    assert len(merged) >= max(len(w) for w in walks)
    for walk in walks:
        assert _is_subsequence(walk, merged)


def test_merge_length_non_decreasing():
    walks = [[0, 1, 2], [0, 2, 1], [0, 1, 1, 2]]
    lengths = []
    current = list(walks[0])
    lengths.append(len(current))
    for walk in walks[1:]:
        current = pairwise_supersequence(current, walk)
        lengths.append(len(current))
    assert lengths == sorted(lengths)
    assert current == merge_walks(walks)


def test_merge_empty():
    with pytest.raises(ValueError):
        merge_walks([])


def test_derive_relation_leftmost_embedding():
    supersequence = [0, 2, 1, 3, 0]
    relation = derive_relation(supersequence, [[0, 1, 3, 0], [0, 2, 3, 0]])
    assert relation == [{1, 2}, {3}, {3}, {4}, set()]


def test_derive_relation_chains_increase():
    supersequence = [0, 1, 0, 1, 0]
    relation = derive_relation(supersequence, [[0, 0, 0], [0, 1, 1]])
    for i, targets in enumerate(relation):
        assert all(t > i for t in targets)
    assert relation[0] == {1, 2}


def test_derive_relation_rejects_non_subsequence():
    with pytest.raises(SubsequenceError):
        derive_relation([0, 1, 2], [[0, 2, 1]])
    with pytest.raises(SubsequenceError):
        derive_relation([0, 1], [[1, 0]])


@pytest.mark.parametrize("reduce", [False, True])
def test_merge_contains_pipeline_walks(make_graph, reduce):
    graph = make_graph(
        [(1, 0), (2, 0), (3, 1), (3, 2), (0, 3), (2, 1), (3, 0)],
        spans={2: 2},
    )
    walks = edge_covering_walks(unroll(graph, 0, 8), reduce=reduce)
    merged = merge_walks(walks)

    assert len(walks) > 1
    assert merged[0] == 0
    for walk in walks:
        assert _is_subsequence(walk, merged)

    relation = derive_relation(merged, walks)
    for i, targets in enumerate(relation):
        assert all(t > i for t in targets)
