"""
Tests for roster summary statistics.
"""

import pytest

from mentorship_engine.analysis.metrics import (
    lineage_depth,
    qualified_fraction,
    rank_counts,
    summary_statistics,
)
from mentorship_engine.core.practitioner import Practitioner
from mentorship_engine.core.ranks import Rank
from mentorship_engine.simulation.engine import MentorshipEngine
from mentorship_engine.systems.output import ListSink
from mentorship_engine.systems.randomness import ScriptedRandomSource


def _lineage():
    engine = MentorshipEngine(sink=ListSink(), rng=ScriptedRandomSource(fallback=1))
    top = Practitioner("Oren", "Human", rank=Rank.SENIOR, has_qualified=True)
    mid = Practitioner("Kael", "Human")
    low = Practitioner("Tessa", "Togruta")
    engine.assign(top, mid)
    engine.attempt_qualification(mid)
    engine.graduate(top, mid)
    engine.assign(mid, low)
    return engine, [top, mid, low]


def test_empty_roster():
    stats = summary_statistics([])
    assert stats["n_practitioners"] == 0
    assert stats["qualified_fraction"] == 0.0
    assert stats["max_lineage_depth"] == 0
    assert sum(stats["rank_counts"].values()) == 0


def test_rank_counts_in_ladder_order():
    counts = rank_counts([
        Practitioner("A", "x"),
        Practitioner("B", "x", rank=Rank.SENIOR),
        Practitioner("C", "x", rank=Rank.SENIOR),
    ])
    assert list(counts) == ["Apprentice", "Adept", "Senior", "Counselor", "Grandmaster"]
    assert counts["Senior"] == 2
    assert counts["Apprentice"] == 1


def test_summary_over_lineage():
    engine, members = _lineage()
    top, mid, low = members
    engine.attempt_qualification(low)
    engine.graduate(mid, low)

    assert lineage_depth(top) == 2
    assert lineage_depth(low) == 0
    stats = summary_statistics(members)
    assert stats["n_practitioners"] == 3
    assert stats["total_graduations"] == 2
    assert stats["mean_former_apprentices"] == pytest.approx(2 / 3)
    assert stats["qualified_fraction"] == pytest.approx(1.0)
    assert stats["max_lineage_depth"] == 2
    assert stats["current_apprenticeships"] == 0


def test_current_apprenticeships_counted():
    _, members = _lineage()
    stats = summary_statistics(members)
    assert stats["current_apprenticeships"] == 1
    assert qualified_fraction(members) == pytest.approx(2 / 3)
