"""
Mentorship engine.

MentorshipEngine owns every state transition of the practitioner hierarchy:

  attempt_qualification — one random draw for a lowest-rank practitioner
  promote               — advance one rank when the ladder allows it
  assign                — enrol a lowest-rank candidate under a mentor
  graduate              — promote a current apprentice and move it to the
                          mentor's former-apprentice list

Rule violations never raise.  The operation leaves state untouched, writes a
single report line to the output sink and returns the matching Outcome.
Graduation is all-or-nothing: the apprentice's rank change and the move from
current to former apprentices happen together or not at all.

State changes are additionally logged on the "mentorship_engine.engine"
logger; the output sink carries the user-facing transcript.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..analysis.reporting import practitioner_summary
from ..core.outcomes import Outcome
from ..core.parameters import LadderParameters
from ..core.practitioner import Practitioner
from ..core.ranks import RankLadder
from ..core.roster import Roster
from ..systems.output import OutputSink, StreamSink
from ..systems.randomness import NumpyRandomSource, RandomSource
from ..systems.speech import rank_title_speech

logger = logging.getLogger("mentorship_engine.engine")


class MentorshipEngine:
    """Applies mentorship operations to practitioners.

    Attributes:
        params: Ladder parameters.
        ladder: Rank ladder built from params.
        sink:   Output sink receiving report lines.
        rng:    Source of qualification draws.
        roster: Registry of every practitioner the engine has seen.

    The one-current-mentor rule is checked against this engine's roster
    only.  A practitioner graph must stay within a single engine; passing
    the same apprentice through two engines can give it two current mentors.
    Identities must be unique within a roster; assign() reports
    IDENTITY_CONFLICT rather than registering a second practitioner under a
    name already in use.
    """

    def __init__(
        self,
        sink: Optional[OutputSink] = None,
        rng: Optional[RandomSource] = None,
        params: Optional[LadderParameters] = None,
        roster: Optional[Roster] = None,
    ) -> None:
        self.params: LadderParameters = (
            params if params is not None else LadderParameters()
        )
        self.ladder: RankLadder = RankLadder(self.params)
        self.sink: OutputSink = sink if sink is not None else StreamSink()
        self.rng: RandomSource = (
            rng if rng is not None else NumpyRandomSource(self.params.seed)
        )
        self.roster: Roster = roster if roster is not None else Roster()

    # ------------------------------------------------------------------ #
    # Queries                                                              #
    # ------------------------------------------------------------------ #

    def can_advance(self, practitioner: Practitioner) -> bool:
        return self.ladder.can_advance(
            practitioner.rank,
            practitioner.has_qualified,
            practitioner.former_count,
        )

    def current_mentor_of(
        self, practitioner: Practitioner
    ) -> Optional[Practitioner]:
        return self.roster.current_mentor_of(practitioner)

    # ------------------------------------------------------------------ #
    # Qualification                                                        #
    # ------------------------------------------------------------------ #

    def attempt_qualification(self, practitioner: Practitioner) -> Outcome:
        """Make one qualification attempt.

        Returns:
            OK on a pass, FAILED_ATTEMPT on a miss, ALREADY_SATISFIED if the
            practitioner had already qualified, INVALID_CANDIDATE_RANK above
            the lowest rank.
        """
        p = practitioner
        if not self.ladder.is_lowest(p.rank):
            self._report(
                f"{p.identity} is not an apprentice and has no qualification to attempt."
            )
            return Outcome.INVALID_CANDIDATE_RANK
        if p.has_qualified:
            self._report(f"{p.identity} has already passed qualification.")
            return Outcome.ALREADY_SATISFIED

        roll = self.rng.draw(self.params.die_sides)
        logger.debug(f"{p.identity} qualification draw: {roll}")
        if roll == self.params.success_face:
            p.has_qualified = True
            logger.info(f"{p.identity} qualified")
            self._report(f"{p.identity} passed their qualification!")
            return Outcome.OK
        self._report(f"{p.identity} failed their qualification.")
        return Outcome.FAILED_ATTEMPT

    # ------------------------------------------------------------------ #
    # Promotion                                                            #
    # ------------------------------------------------------------------ #

    def promote(self, practitioner: Practitioner) -> Outcome:
        """Advance the practitioner one rank if the ladder allows it."""
        outcome = self._advance(practitioner)
        if outcome.ok:
            self._report(
                f"{practitioner.identity} has advanced to the rank of "
                f"{practitioner.rank.label}."
            )
        return outcome

    def _advance(self, practitioner: Practitioner) -> Outcome:
        p = practitioner
        if self.ladder.is_terminal(p.rank):
            self._report(f"{p.identity} has reached the highest rank.")
            return Outcome.AT_TERMINAL_RANK
        if not self.can_advance(p):
            self._report(f"{p.identity} is not eligible to advance.")
            return Outcome.NOT_ELIGIBLE
        # not terminal, so a next rank exists
        new_rank = self.ladder.next_rank(p.rank)
        old_rank = p.rank
        p.rank = new_rank
        logger.info(f"{p.identity} promoted {old_rank.label} -> {new_rank.label}")
        return Outcome.OK

    # ------------------------------------------------------------------ #
    # Apprenticeship                                                       #
    # ------------------------------------------------------------------ #

    def assign(self, mentor: Practitioner, candidate: Practitioner) -> Outcome:
        """Take `candidate` on as a current apprentice of `mentor`."""
        if not self.ladder.is_lowest(candidate.rank):
            self._report(
                f"{candidate.identity} is not an apprentice, and thus cannot "
                f"be taken on as one."
            )
            return Outcome.INVALID_CANDIDATE_RANK
        if self.ladder.is_lowest(mentor.rank):
            self._report(
                f"{mentor.identity} is not high enough in rank to take an apprentice."
            )
            return Outcome.INSUFFICIENT_MENTOR_RANK

        for p in (mentor, candidate):
            if self.roster.conflicts_with(p) or (
                mentor.identity == candidate.identity and mentor is not candidate
            ):
                self._report(
                    f"{p.identity} shares an identity with another practitioner "
                    f"and cannot be assigned."
                )
                return Outcome.IDENTITY_CONFLICT

        self.roster.register(mentor)
        self.roster.register(candidate)
        holder = self.roster.current_mentor_of(candidate)
        if holder is not None:
            self._report(
                f"{candidate.identity} is already an apprentice of {holder.identity}."
            )
            return Outcome.ALREADY_ASSIGNED

        mentor._enroll(candidate)
        logger.info(f"{mentor.identity} took {candidate.identity} as apprentice")
        self._report(f"{mentor.identity} has taken {candidate.identity} as an apprentice.")
        return Outcome.OK

    def graduate(self, mentor: Practitioner, candidate: Practitioner) -> Outcome:
        """Graduate a current apprentice of `mentor`.

        The apprentice is looked up by identity among the mentor's current
        apprentices and judged on its own state.  On success it is promoted,
        removed from the current list and appended to the former list.
        """
        index = mentor.find_current_apprentice(candidate.identity)
        if index is None:
            self._report(
                f"{candidate.identity} is not a current apprentice of {mentor.identity}."
            )
            return Outcome.UNKNOWN_APPRENTICE

        apprentice = mentor.current_apprentices[index]
        if not self.can_advance(apprentice):
            self._report(
                f"{apprentice.identity} has not completed their qualification "
                f"and thus cannot advance."
            )
            return Outcome.NOT_ELIGIBLE

        outcome = self._advance(apprentice)
        if not outcome.ok:
            return outcome
        mentor._release(index)
        mentor._record_graduate(apprentice)
        logger.info(
            f"{mentor.identity} graduated {apprentice.identity} "
            f"({mentor.former_count} total)"
        )
        self._report(
            f"{apprentice.identity} has graduated to the rank of {apprentice.rank.label}."
        )
        return Outcome.OK

    # ------------------------------------------------------------------ #
    # Presentation                                                         #
    # ------------------------------------------------------------------ #

    def speak(self, practitioner: Practitioner, text: str) -> None:
        self._report(rank_title_speech(practitioner, text))

    def display_info(self, practitioner: Practitioner) -> None:
        for line in practitioner_summary(practitioner):
            self._report(line)

    def _report(self, line: str) -> None:
        self.sink.write(line)
