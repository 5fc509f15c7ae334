"""
Rank ladder.

Ranks form a fixed, strictly ordered ladder.  The integer value of each Rank
is its ladder index, so comparisons and "next rank" lookups are plain integer
arithmetic.

Advancement policy (per current rank):

  APPRENTICE   — the practitioner has passed qualification
  ADEPT        — at least `adept_graduations_required` former apprentices
  SENIOR       — at least `senior_graduations_required` former apprentices
  COUNSELOR    — never
  GRANDMASTER  — never (terminal rank)

The ladder is a pure function of its parameters and the caller-supplied
counters; it holds no per-practitioner state.
"""

from __future__ import annotations

from enum import IntEnum, unique
from typing import Any, Dict, List, Optional

from .parameters import LadderParameters


@unique
class Rank(IntEnum):
    """Ordered practitioner ranks (higher integer = higher rank)."""

    APPRENTICE = 0
    ADEPT = 1
    SENIOR = 2
    COUNSELOR = 3
    GRANDMASTER = 4

    @property
    def label(self) -> str:
        """Display name, e.g. "Apprentice"."""
        return self.name.capitalize()

    @classmethod
    def parse(cls, value: Any) -> "Rank":
        """Resolve a Rank from a Rank, ladder index or case-insensitive name.

        Raises:
            ValueError: If the value names no rank.
        """
        if isinstance(value, Rank):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        key = str(value).strip().upper().replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(
                f"Unknown rank {value!r}. Available: {[r.label for r in cls]}"
            ) from None


class RankLadder:
    """Eligibility and succession rules over the Rank enumeration.

    Attributes:
        params: Ladder parameters supplying the graduation thresholds.
    """

    def __init__(self, params: Optional[LadderParameters] = None) -> None:
        self.params: LadderParameters = (
            params if params is not None else LadderParameters()
        )

    @property
    def lowest(self) -> Rank:
        return Rank(min(Rank))

    @property
    def terminal(self) -> Rank:
        return Rank(max(Rank))

    def is_lowest(self, rank: Any) -> bool:
        return rank == self.lowest

    def is_terminal(self, rank: Any) -> bool:
        return rank == self.terminal

    def next_rank(self, rank: Any) -> Optional[Rank]:
        """Return the rank above `rank`, or None at the terminus.

        Values outside the ladder also yield None.
        """
        try:
            current = Rank(rank)
        except ValueError:
            return None
        if current == self.terminal:
            return None
        return Rank(current + 1)

    def can_advance(
        self,
        rank: Any,
        has_qualified: bool,
        former_count: int,
    ) -> bool:
        """Return whether a practitioner at `rank` may currently advance.

        Args:
            rank:          Current rank of the practitioner.
            has_qualified: Whether the practitioner has passed qualification.
            former_count:  Number of apprentices the practitioner has graduated.

        Returns:
            True if advancement is permitted.  Unknown ranks are never eligible.
        """
        if rank == Rank.APPRENTICE:
            return bool(has_qualified)
        if rank == Rank.ADEPT:
            return former_count >= self.params.adept_graduations_required
        if rank == Rank.SENIOR:
            return former_count >= self.params.senior_graduations_required
        return False

    def requirement(self, rank: Rank) -> str:
        """Human-readable advancement rule for one rank."""
        if rank == Rank.APPRENTICE:
            return "must pass qualification"
        if rank == Rank.ADEPT:
            n = self.params.adept_graduations_required
            return f"must graduate {n} apprentice{'s' if n != 1 else ''}"
        if rank == Rank.SENIOR:
            n = self.params.senior_graduations_required
            return f"must graduate {n} apprentice{'s' if n != 1 else ''}"
        if rank == self.terminal:
            return "highest rank"
        return "no further advancement"

    def describe(self) -> List[Dict[str, Any]]:
        """Return the ladder as a list of {index, rank, rule} rows."""
        return [
            {"index": int(r), "rank": r.label, "rule": self.requirement(r)}
            for r in Rank
        ]
