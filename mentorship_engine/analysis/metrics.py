"""
Roster metrics.

Summary statistics over a collection of practitioners.  All functions take an
iterable of Practitioner and return scalars or dicts.  No side effects.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

import numpy as np

from ..core.practitioner import Practitioner
from ..core.ranks import Rank


def rank_counts(practitioners: Iterable[Practitioner]) -> Dict[str, int]:
    """Number of practitioners at each rank, in ladder order."""
    counts: Dict[str, int] = {r.label: 0 for r in Rank}
    for p in practitioners:
        counts[p.rank.label] += 1
    return counts


def qualified_fraction(practitioners: List[Practitioner]) -> float:
    """Fraction of practitioners that have passed qualification."""
    if not practitioners:
        return 0.0
    return float(np.mean([p.has_qualified for p in practitioners]))


def mean_former_apprentices(practitioners: List[Practitioner]) -> float:
    if not practitioners:
        return 0.0
    return float(np.mean([p.former_count for p in practitioners]))


def lineage_depth(practitioner: Practitioner) -> int:
    """Length of the longest chain of graduations starting at `practitioner`.

    A practitioner with no former apprentices has depth 0.
    """
    best = 0
    stack = [(practitioner, 0)]
    seen = set()
    while stack:
        node, depth = stack.pop()
        best = max(best, depth)
        if id(node) in seen:
            continue
        seen.add(id(node))
        for child in node.former_apprentices:
            stack.append((child, depth + 1))
    return best


def summary_statistics(practitioners: Iterable[Practitioner]) -> Dict[str, object]:
    """Compute the standard summary for a roster.

    Returns:
        Dictionary with keys n_practitioners, rank_counts, qualified_fraction,
        total_graduations, mean_former_apprentices, max_lineage_depth,
        current_apprenticeships.
    """
    members = list(practitioners)
    return {
        "n_practitioners": len(members),
        "rank_counts": rank_counts(members),
        "qualified_fraction": qualified_fraction(members),
        "total_graduations": int(sum(p.former_count for p in members)),
        "mean_former_apprentices": mean_former_apprentices(members),
        "max_lineage_depth": max((lineage_depth(p) for p in members), default=0),
        "current_apprenticeships": int(
            sum(len(p.current_apprentices) for p in members)
        ),
    }
