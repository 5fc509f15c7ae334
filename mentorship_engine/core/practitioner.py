"""
Practitioner entity.

A Practitioner carries identity, rank, qualification status and two
relationship collections:

  current apprentices : practitioners this one is mentoring right now
  former apprentices  : practitioners this one has graduated (append-only)

The mentor of a practitioner is stored as an identity string only.  It is a
lookup key (see Roster), never an owning reference, so mentor and apprentice
graphs can never form ownership cycles.

Rank only moves forward and the former-apprentice list only grows.  Both
collections are exposed read-only; MentorshipEngine is the sole mutator.
"""

from __future__ import annotations

from functools import cached_property
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from .ranks import Rank


class Practitioner:
    """One member of the mentorship hierarchy.

    Attributes:
        identity:      Immutable display name.
        category:      Classification label (not used by promotion logic).
        mentor_name:   Identity of the practitioner's mentor, or None.
        has_qualified: Whether qualification has been passed.
    """

    def __init__(
        self,
        identity: str,
        category: str,
        rank: Union[Rank, int, str] = Rank.APPRENTICE,
        qualifiers: Iterable[str] = (),
        mentor: Union["Practitioner", str, None] = None,
        has_qualified: bool = False,
    ) -> None:
        if not identity:
            raise ValueError("Practitioner identity must be a non-empty string")
        self._identity: str = str(identity)
        self.category: str = str(category)
        self._rank: Rank = Rank.parse(rank)
        self._qualifiers: Tuple[str, ...] = tuple(str(q) for q in qualifiers)
        if isinstance(mentor, Practitioner):
            mentor = mentor.identity
        self.mentor_name: Optional[str] = mentor
        self.has_qualified: bool = bool(has_qualified)
        self._current: List["Practitioner"] = []
        self._former: List["Practitioner"] = []

    # ------------------------------------------------------------------ #
    # Identity and rank                                                    #
    # ------------------------------------------------------------------ #

    @property
    def identity(self) -> str:
        return self._identity

    @property
    def rank(self) -> Rank:
        return self._rank

    @rank.setter
    def rank(self, value: Union[Rank, int, str]) -> None:
        new_rank = Rank.parse(value)
        if new_rank < self._rank:
            raise ValueError(
                f"{self._identity}: rank cannot regress from "
                f"{self._rank.label} to {new_rank.label}"
            )
        self._rank = new_rank

    @property
    def full_title(self) -> str:
        """Rank label followed by identity, e.g. "Adept Mira"."""
        return f"{self._rank.label} {self._identity}"

    @property
    def qualifiers(self) -> Tuple[str, ...]:
        return self._qualifiers

    @cached_property
    def qualifier_count(self) -> int:
        """Number of qualifiers, computed on first read and cached."""
        return len(self._qualifiers)

    # ------------------------------------------------------------------ #
    # Relationships                                                        #
    # ------------------------------------------------------------------ #

    @property
    def current_apprentices(self) -> Tuple["Practitioner", ...]:
        return tuple(self._current)

    @property
    def former_apprentices(self) -> Tuple["Practitioner", ...]:
        return tuple(self._former)

    @property
    def former_count(self) -> int:
        return len(self._former)

    def find_current_apprentice(self, identity: str) -> Optional[int]:
        """Return the index of the current apprentice named `identity`."""
        for idx, apprentice in enumerate(self._current):
            if apprentice.identity == identity:
                return idx
        return None

    def has_current_apprentice(self, identity: str) -> bool:
        return self.find_current_apprentice(identity) is not None

    # Engine-side mutators.  Callers outside the simulation layer should go
    # through MentorshipEngine so that reporting and invariants stay intact.

    def _enroll(self, apprentice: "Practitioner") -> None:
        self._current.append(apprentice)

    def _release(self, index: int) -> "Practitioner":
        return self._current.pop(index)

    def _record_graduate(self, apprentice: "Practitioner") -> None:
        if any(p is apprentice for p in self._former):
            raise ValueError(
                f"{apprentice.identity} is already a former apprentice of "
                f"{self._identity}"
            )
        self._former.append(apprentice)

    # ------------------------------------------------------------------ #
    # Serialisation                                                        #
    # ------------------------------------------------------------------ #

    def to_dict(self) -> Dict[str, Any]:
        """Serialise to plain dictionary (relationships by identity)."""
        return {
            "identity": self._identity,
            "category": self.category,
            "mentor": self.mentor_name,
            "rank": self._rank.label,
            "qualifiers": list(self._qualifiers),
            "has_qualified": self.has_qualified,
            "current_apprentices": [p.identity for p in self._current],
            "former_apprentices": [p.identity for p in self._former],
        }

    def __repr__(self) -> str:
        return (
            f"Practitioner({self._identity!r}, rank={self._rank.label}, "
            f"qualified={self.has_qualified})"
        )
