"""Analysis: report formatting and roster metrics."""
from .metrics import summary_statistics, rank_counts, lineage_depth
from .reporting import practitioner_summary

__all__ = [
    "summary_statistics",
    "rank_counts",
    "lineage_depth",
    "practitioner_summary",
]
