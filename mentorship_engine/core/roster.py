"""
Roster — identity lookup over practitioners.

Apprentices carry no back-link to their current mentor; the only way to
answer "who is mentoring X right now?" is to scan every known mentor's
current-apprentice list.  The roster is the registry that makes that scan
possible and resolves stored mentor identities to Practitioner objects.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from .practitioner import Practitioner


class Roster:
    """Ordered registry of practitioners keyed by identity."""

    def __init__(self, practitioners: Iterable[Practitioner] = ()) -> None:
        self._members: Dict[str, Practitioner] = {}
        for p in practitioners:
            self.register(p)

    def register(self, practitioner: Practitioner) -> Practitioner:
        """Add a practitioner (idempotent for the same object).

        Raises:
            ValueError: If a different practitioner already holds the identity.
        """
        if self.conflicts_with(practitioner):
            raise ValueError(
                f"Identity {practitioner.identity!r} is already registered"
            )
        self._members[practitioner.identity] = practitioner
        return practitioner

    def conflicts_with(self, practitioner: Practitioner) -> bool:
        """True if a different practitioner already holds this identity."""
        existing = self._members.get(practitioner.identity)
        return existing is not None and existing is not practitioner

    def get(self, identity: Optional[str]) -> Optional[Practitioner]:
        if identity is None:
            return None
        return self._members.get(identity)

    def mentor_of(self, practitioner: Practitioner) -> Optional[Practitioner]:
        """Resolve the practitioner's recorded mentor identity."""
        return self.get(practitioner.mentor_name)

    def current_mentor_of(
        self, practitioner: Practitioner
    ) -> Optional[Practitioner]:
        """Return the practitioner currently mentoring `practitioner`, if any."""
        for member in self._members.values():
            if member.has_current_apprentice(practitioner.identity):
                return member
        return None

    def practitioners(self) -> List[Practitioner]:
        return list(self._members.values())

    def __contains__(self, identity: object) -> bool:
        return identity in self._members

    def __iter__(self) -> Iterator[Practitioner]:
        return iter(list(self._members.values()))

    def __len__(self) -> int:
        return len(self._members)
