"""
Simulation runners.

  run_training_cycle — repeat qualification attempts and graduation until an
                       apprentice leaves the lowest rank (bounded)
  ScenarioRunner     — executes the ordered step list of a loaded Scenario
                       against a MentorshipEngine and an Assembly

Usage:
    from mentorship_engine.scenario_loader import load_scenario
    from mentorship_engine.simulation.runner import ScenarioRunner

    scenario = load_scenario("my_scenario.yaml")
    runner = ScenarioRunner(scenario)
    runner.run()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from ..core.outcomes import Outcome
from ..core.practitioner import Practitioner
from ..core.representative import Representative
from ..systems.output import OutputSink, StreamSink
from ..systems.randomness import RandomSource
from .assembly import Assembly
from .engine import MentorshipEngine

if TYPE_CHECKING:
    from ..scenario_loader import Scenario

logger = logging.getLogger("mentorship_engine.runner")


@dataclass(frozen=True)
class TrainingResult:
    """Summary of one training cycle.

    Attributes:
        attempts:  Number of qualification attempts made.
        outcome:   Outcome of the last graduation call (None if none was made).
        graduated: Whether the apprentice left the lowest rank.
    """

    attempts: int
    outcome: Optional[Outcome]
    graduated: bool


def run_training_cycle(
    engine: MentorshipEngine,
    mentor: Practitioner,
    apprentice: Practitioner,
    max_attempts: int = 100,
) -> TrainingResult:
    """Alternate qualification attempts and graduation until the apprentice
    advances or `max_attempts` attempts have been made.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

    attempts = 0
    outcome: Optional[Outcome] = None
    while engine.ladder.is_lowest(apprentice.rank) and attempts < max_attempts:
        attempt = engine.attempt_qualification(apprentice)
        if attempt is not Outcome.ALREADY_SATISFIED:
            attempts += 1
        outcome = engine.graduate(mentor, apprentice)
        if outcome in (Outcome.UNKNOWN_APPRENTICE, Outcome.AT_TERMINAL_RANK):
            break

    graduated = not engine.ladder.is_lowest(apprentice.rank)
    logger.info(
        f"training {mentor.identity}/{apprentice.identity}: "
        f"{attempts} attempts, graduated={graduated}"
    )
    return TrainingResult(attempts=attempts, outcome=outcome, graduated=graduated)


StepHandler = Callable[[Dict[str, Any]], Any]


class ScenarioRunner:
    """Runs a Scenario's steps in order.

    Attributes:
        scenario: The loaded scenario (roster + steps).
        engine:   Mentorship engine the practitioner steps go through.
        assembly: Assembly the representative steps go through.
        results:  (op, result) pairs, one per executed step.
    """

    def __init__(
        self,
        scenario: "Scenario",
        sink: Optional[OutputSink] = None,
        rng: Optional[RandomSource] = None,
        max_attempts: int = 100,
    ) -> None:
        self.scenario = scenario
        out = sink if sink is not None else StreamSink()
        self.engine = MentorshipEngine(
            sink=out, rng=rng, params=scenario.params, roster=scenario.roster
        )
        self.assembly = Assembly(sink=out)
        self.max_attempts = max_attempts
        self.results: List[tuple] = []
        self._handlers: Dict[str, StepHandler] = {
            "section": self._section,
            "display": self._display,
            "assign": self._assign,
            "attempt": self._attempt,
            "promote": self._promote,
            "graduate": self._graduate,
            "train": self._train,
            "speak": self._speak,
            "add_attribute": self._add_attribute,
            "list_attributes": self._list_attributes,
            "exchange": self._exchange,
        }

    @property
    def sink(self) -> OutputSink:
        return self.engine.sink

    def run(self) -> List[tuple]:
        for step in self.scenario.steps:
            op = step["op"]
            result = self._handlers[op](step)
            self.results.append((op, result))
        return self.results

    # ------------------------------------------------------------------ #
    # Lookups                                                              #
    # ------------------------------------------------------------------ #

    def _practitioner(self, identity: str) -> Practitioner:
        p = self.scenario.roster.get(identity)
        if p is None:
            raise KeyError(f"Unknown practitioner {identity!r}")
        return p

    def _representative(self, identity: str) -> Representative:
        try:
            return self.scenario.representatives[identity]
        except KeyError:
            raise KeyError(f"Unknown representative {identity!r}") from None

    def _speaker(self, identity: str):
        if identity in self.scenario.representatives:
            return self.scenario.representatives[identity]
        return self._practitioner(identity)

    # ------------------------------------------------------------------ #
    # Step handlers                                                        #
    # ------------------------------------------------------------------ #

    def _section(self, step: Dict[str, Any]) -> None:
        self.sink.write("")
        self.sink.write(f"--- {step['title']} ---")

    def _display(self, step: Dict[str, Any]) -> None:
        self.engine.display_info(self._practitioner(step["who"]))

    def _assign(self, step: Dict[str, Any]) -> Outcome:
        return self.engine.assign(
            self._practitioner(step["mentor"]), self._practitioner(step["apprentice"])
        )

    def _attempt(self, step: Dict[str, Any]) -> Outcome:
        return self.engine.attempt_qualification(self._practitioner(step["who"]))

    def _promote(self, step: Dict[str, Any]) -> Outcome:
        return self.engine.promote(self._practitioner(step["who"]))

    def _graduate(self, step: Dict[str, Any]) -> Outcome:
        return self.engine.graduate(
            self._practitioner(step["mentor"]), self._practitioner(step["apprentice"])
        )

    def _train(self, step: Dict[str, Any]) -> TrainingResult:
        return run_training_cycle(
            self.engine,
            self._practitioner(step["mentor"]),
            self._practitioner(step["apprentice"]),
            max_attempts=int(step.get("max_attempts", self.max_attempts)),
        )

    def _speak(self, step: Dict[str, Any]) -> None:
        speaker = self._speaker(step["who"])
        if isinstance(speaker, Representative):
            self.assembly.speak(speaker, step["text"])
        else:
            self.engine.speak(speaker, step["text"])

    def _add_attribute(self, step: Dict[str, Any]) -> None:
        self.assembly.add_attribute(self._representative(step["who"]), step["value"])

    def _list_attributes(self, step: Dict[str, Any]):
        lister = step.get("lister")
        return self.assembly.list_attributes(
            self._representative(step["who"]),
            lister=self._representative(lister) if lister else None,
        )

    def _exchange(self, step: Dict[str, Any]) -> None:
        self.assembly.exchange_attributes(
            self._representative(step["initiator"]),
            self._representative(step["counterpart"]),
            step.get("detail", ""),
        )
