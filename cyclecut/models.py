from pydantic import BaseModel, ConfigDict
from typing import List, Tuple


class Skeleton(BaseModel):
    """Bounded backward unrolling of the neighborhood of a cycle start."""
    model_config = ConfigDict(frozen=True)

    cycle_start: int
    horizon: int
    nodes: List[int]
    layers: List[int]
    successors: List[List[int]]

    def __len__(self) -> int:
        return len(self.nodes)

    def edges(self) -> List[Tuple[int, int]]:
        """All successor edges in ascending (from, to) order."""
        return [(i, j) for i, succ in enumerate(self.successors) for j in succ]

    def is_sink(self, position: int) -> bool:
        return not self.successors[position]


class CycleCut(BaseModel):
    """Acyclic stand-in for a cycle, consumed position by position by the aligner."""
    model_config = ConfigDict(frozen=True)

    cycle_start: int
    word_size: int
    nodes: List[int]
    relation: List[List[int]]
    previous_cut: List[bool]

    def __len__(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self.relation)
