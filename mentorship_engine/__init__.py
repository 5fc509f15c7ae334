"""
mentorship_engine — hierarchical mentorship and rank-progression simulation.

Practitioners climb an ordered rank ladder, take on apprentices, and must meet
rank-specific rules before they advance.  Representatives hold policy lists
and can trade private agreements.

Quick start
-----------
    from mentorship_engine import MentorshipEngine, Practitioner, Rank

    engine = MentorshipEngine()
    mentor = Practitioner("Mira", "Human", rank=Rank.SENIOR)
    pupil = Practitioner("Theron", "Human", mentor=mentor)
    engine.assign(mentor, pupil)
    engine.attempt_qualification(pupil)
    engine.graduate(mentor, pupil)

Public API
----------
    Rank / RankLadder      — ordered ranks and advancement rules
    LadderParameters       — immutable, validated tunables
    Practitioner           — mentorship entity
    MentorshipEngine       — qualification, promotion, assignment, graduation
    Outcome                — soft-failure result taxonomy
    Representative         — attribute-holding speaker
    Assembly               — listing, speech and attribute exchange
    ScenarioRunner         — executes YAML scenarios
"""

from __future__ import annotations

from .core.parameters import LadderParameters
from .core.ranks import Rank, RankLadder
from .core.outcomes import Outcome
from .core.practitioner import Practitioner
from .core.roster import Roster
from .core.representative import AttributeListing, Representative, make_presiding
from .systems.randomness import NumpyRandomSource, RandomSource, ScriptedRandomSource
from .systems.output import ListSink, OutputSink, StreamSink, TeeSink
from .systems.speech import AffiliationSpeech, TitledSpeech
from .simulation.engine import MentorshipEngine
from .simulation.assembly import Assembly
from .simulation.runner import ScenarioRunner, TrainingResult, run_training_cycle
from .scenario_loader import Scenario, build_scenario, load_scenario
from .analysis.metrics import summary_statistics

__version__ = "1.0.0"

__all__ = [
    "LadderParameters",
    "Rank",
    "RankLadder",
    "Outcome",
    "Practitioner",
    "Roster",
    "AttributeListing",
    "Representative",
    "make_presiding",
    "RandomSource",
    "NumpyRandomSource",
    "ScriptedRandomSource",
    "OutputSink",
    "StreamSink",
    "ListSink",
    "TeeSink",
    "AffiliationSpeech",
    "TitledSpeech",
    "MentorshipEngine",
    "Assembly",
    "ScenarioRunner",
    "TrainingResult",
    "run_training_cycle",
    "Scenario",
    "build_scenario",
    "load_scenario",
    "summary_statistics",
    "__version__",
]
