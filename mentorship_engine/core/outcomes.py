"""
Operation outcomes.

Every mentorship operation returns an Outcome instead of raising.  Rule
violations are soft failures: the operation leaves state untouched, writes
one report line, and hands control back to the caller.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class Outcome(Enum):
    """Result of a MentorshipEngine operation."""

    OK = "ok"
    FAILED_ATTEMPT = "failed_attempt"
    ALREADY_SATISFIED = "already_satisfied"
    NOT_ELIGIBLE = "not_eligible"
    AT_TERMINAL_RANK = "at_terminal_rank"
    INVALID_CANDIDATE_RANK = "invalid_candidate_rank"
    INSUFFICIENT_MENTOR_RANK = "insufficient_mentor_rank"
    UNKNOWN_APPRENTICE = "unknown_apprentice"
    ALREADY_ASSIGNED = "already_assigned"
    IDENTITY_CONFLICT = "identity_conflict"

    @property
    def ok(self) -> bool:
        """True only when the operation changed state as requested."""
        return self is Outcome.OK

    @property
    def is_rule_violation(self) -> bool:
        """True for soft failures (everything except OK and FAILED_ATTEMPT)."""
        return self not in (Outcome.OK, Outcome.FAILED_ATTEMPT)
