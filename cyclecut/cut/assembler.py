from typing import Sequence

from ..models import CycleCut


def assemble_cut(cycle_start: int, word_size: int, nodes: Sequence[int], relation: Sequence[Sequence[int]]) -> CycleCut:
    """Tag each position as already resolved when its node precedes the cycle start."""
    return CycleCut(
        cycle_start=cycle_start,
        word_size=word_size,
        nodes=list(nodes),
        relation=[sorted(targets) for targets in relation],
        previous_cut=[node < cycle_start for node in nodes],
    )
