"""Tabular summary of computed cycle cuts."""
import pandas as pd
from typing import Dict

from .models import CycleCut

SUMMARY_COLUMNS = [
    "cycle_start", "word_size", "positions", "relation_edges",
    "resolved_positions", "new_positions",
]


def cuts_to_frame(cuts: Dict[int, CycleCut]) -> pd.DataFrame:
    """One row per cut, sorted by cycle start."""
    rows = []
    for cut in cuts.values():
        resolved = sum(cut.previous_cut)
        rows.append({
            "cycle_start": cut.cycle_start,
            "word_size": cut.word_size,
            "positions": len(cut.nodes),
            "relation_edges": cut.edge_count(),
            "resolved_positions": resolved,
            "new_positions": len(cut.nodes) - resolved,
        })
    if not rows:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    return df.sort_values("cycle_start").reset_index(drop=True)
