"""
Report line formatting.

Pure functions that turn entity state into the ordered text lines written to
an OutputSink.  No side effects; the simulation layer decides where the lines
go.
"""

from __future__ import annotations

from typing import List, Optional

from ..core.practitioner import Practitioner
from ..core.representative import AttributeListing, Representative

NOT_AVAILABLE = "N/A"


def practitioner_summary(practitioner: Practitioner) -> List[str]:
    """Display summary, in order: identity, category, mentor, rank, qualifiers,
    then current and former apprentices when present.
    """
    p = practitioner
    lines = [
        f"Practitioner: {p.identity}",
        f"Category: {p.category}",
        f"Mentor: {p.mentor_name or NOT_AVAILABLE}",
        f"Rank: {p.rank.label}",
        f"Qualifiers: {', '.join(p.qualifiers)} ({p.qualifier_count} total)",
    ]
    if p.current_apprentices:
        names = ", ".join(a.identity for a in p.current_apprentices)
        lines.append(f"Current apprentices: {names}")
    if p.former_apprentices:
        names = ", ".join(a.identity for a in p.former_apprentices)
        lines.append(f"Former apprentices: {names}")
    return lines


def attribute_lines(
    listing: AttributeListing,
    lister: Optional[Representative] = None,
) -> List[str]:
    """One "- <attribute>" line per attribute, optionally prefixed by the
    identity of the representative doing the listing.
    """
    prefix = f"{lister.identity} " if lister is not None else ""
    return [f"{prefix}- {attribute}" for attribute in listing]


def exchange_marker(counterpart: Representative) -> str:
    return f"Private agreement with {counterpart.identity}"


def exchange_lines(
    initiator: Representative,
    counterpart: Representative,
    detail: str,
) -> List[str]:
    """Opening two lines of an attribute exchange report."""
    return [
        f"{initiator.identity} has made a private exchange with {counterpart.identity}.",
        f"Exchange details: {detail}",
    ]


EXCHANGE_CLOSING = "The assembly remains unaware of this transaction..."
