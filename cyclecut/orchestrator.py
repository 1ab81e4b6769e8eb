"""
Cycle cut pipeline: unroll -> covering walks -> merged supersequence ->
relation -> compaction -> tagged cut.
"""
import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Iterable, Optional

from .core.config import CycleCutSettings
from .core.exceptions import CycleCutError
from .core.logging import setup_logging
from .graph.unroller import unroll
from .graph.paths import edge_covering_walks
from .alignment.supersequence import merge_walks, derive_relation
from .cut.compactor import compact, check_no_orphans
from .cut.assembler import assemble_cut
from .models import CycleCut

logger = logging.getLogger(__name__)


def compute_cycle_cut(graph, cycle_start: int, word_size: int, reduce_flow: bool = False) -> CycleCut:
    """
    Compute the cut that replaces the cycle through `cycle_start`.

    `graph` needs span_length(node) and in_neighbors(node). The horizon
    is twice the word size.
    """
    if word_size <= 0:
        raise ValueError(f"Word size must be positive, got {word_size}")
    horizon = 2 * word_size
    start_time = time.time()

    try:
        # 1. Unroll backward from the cycle start
        skeleton = unroll(graph, cycle_start, horizon)

        # 2. Walks covering every skeleton edge
        walks = edge_covering_walks(skeleton, reduce=reduce_flow)

        # 3. Merge walks, then map each walk back onto the merged order
        supersequence = merge_walks(walks)
        relation = derive_relation(supersequence, walks)

        # 4. Drop positions nothing continues to
        nodes, relation = compact(supersequence, relation)
        check_no_orphans(relation, cycle_start=cycle_start, horizon=horizon)
    except CycleCutError as e:
        e.with_context(cycle_start=cycle_start, horizon=horizon)
        logger.error("Cycle cut failed for node %s (horizon %d): %s", cycle_start, horizon, e)
        raise

    # 5. Tag positions resolved by earlier cuts
    cut = assemble_cut(cycle_start, word_size, nodes, relation)

    logger.info(
        "Cycle cut for node %s: %d skeleton positions, %d walks, %d cut positions (%.3fs)",
        cycle_start, len(skeleton), len(walks), len(cut), time.time() - start_time,
    )
    return cut


class CycleCutCalculator:
    """Computes cycle cuts over one graph with shared settings."""

    def __init__(self, graph, settings: Optional[CycleCutSettings] = None):
        self.graph = graph
        self.settings = settings or CycleCutSettings()
        setup_logging(self.settings)

    def get_cycle_cut(self, start_node: int, word_size: Optional[int] = None) -> CycleCut:
        return compute_cycle_cut(
            self.graph,
            start_node,
            word_size if word_size is not None else self.settings.word_size,
            reduce_flow=self.settings.reduce_flow,
        )

    def get_cycle_cuts(self, start_nodes: Iterable[int], word_size: Optional[int] = None) -> Dict[int, CycleCut]:
        return compute_cycle_cuts(
            self.graph,
            start_nodes,
            word_size if word_size is not None else self.settings.word_size,
            reduce_flow=self.settings.reduce_flow,
            max_workers=self.settings.max_workers,
        )


def compute_cycle_cuts(
    graph,
    cycle_starts: Iterable[int],
    word_size: int,
    reduce_flow: bool = False,
    max_workers: int = 4,
) -> Dict[int, CycleCut]:
    """
    Compute independent cuts for several cycle starts on a thread pool.

    The graph is only read. Results are keyed by cycle start and returned
    in the order the starts were given.
    """
    starts = list(dict.fromkeys(cycle_starts))
    results: Dict[int, CycleCut] = {}

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(compute_cycle_cut, graph, start, word_size, reduce_flow): start
            for start in starts
        }
        for future in as_completed(futures):
            start = futures[future]
            try:
                results[start] = future.result()
            except CycleCutError:
                raise
            except Exception as e:
                raise CycleCutError(f"Failed to compute cut: {e}", cycle_start=start) from e

    return {start: results[start] for start in starts}
