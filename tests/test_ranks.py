"""
Tests for the rank ladder and ladder parameters.
"""

import pytest

from mentorship_engine.core.parameters import LadderParameters
from mentorship_engine.core.ranks import Rank, RankLadder


def test_ladder_order():
    """Ranks are strictly ordered from Apprentice to Grandmaster."""
    ladder = RankLadder()
    assert list(Rank) == sorted(Rank)
    assert ladder.lowest is Rank.APPRENTICE
    assert ladder.terminal is Rank.GRANDMASTER
    assert [r.label for r in Rank] == [
        "Apprentice", "Adept", "Senior", "Counselor", "Grandmaster"
    ]


def test_next_rank():
    """next_rank walks the ladder and stops at the terminus."""
    ladder = RankLadder()
    assert ladder.next_rank(Rank.APPRENTICE) is Rank.ADEPT
    assert ladder.next_rank(Rank.ADEPT) is Rank.SENIOR
    assert ladder.next_rank(Rank.SENIOR) is Rank.COUNSELOR
    assert ladder.next_rank(Rank.COUNSELOR) is Rank.GRANDMASTER
    assert ladder.next_rank(Rank.GRANDMASTER) is None
    assert ladder.next_rank(42) is None


def test_eligibility_table():
    """Advancement rules match the policy for every rank."""
    ladder = RankLadder()
    assert ladder.can_advance(Rank.APPRENTICE, True, 0)
    assert not ladder.can_advance(Rank.APPRENTICE, False, 5)

    assert not ladder.can_advance(Rank.ADEPT, True, 0)
    assert ladder.can_advance(Rank.ADEPT, False, 1)

    assert not ladder.can_advance(Rank.SENIOR, True, 1)
    assert ladder.can_advance(Rank.SENIOR, False, 2)

    assert not ladder.can_advance(Rank.COUNSELOR, True, 99)
    assert not ladder.can_advance(Rank.GRANDMASTER, True, 99)


def test_unknown_rank_is_never_eligible():
    """Values outside the ladder are not eligible (no exception)."""
    ladder = RankLadder()
    assert not ladder.can_advance(-1, True, 10)
    assert not ladder.can_advance(17, True, 10)
    assert not ladder.can_advance("Padawan", True, 10)


def test_custom_thresholds():
    """Graduation thresholds come from LadderParameters."""
    ladder = RankLadder(LadderParameters(
        adept_graduations_required=2, senior_graduations_required=3
    ))
    assert not ladder.can_advance(Rank.ADEPT, True, 1)
    assert ladder.can_advance(Rank.ADEPT, True, 2)
    assert not ladder.can_advance(Rank.SENIOR, True, 2)
    assert ladder.can_advance(Rank.SENIOR, True, 3)
    assert ladder.requirement(Rank.ADEPT) == "must graduate 2 apprentices"


def test_rank_parse():
    """Ranks resolve from names, indices and Rank members."""
    assert Rank.parse("senior") is Rank.SENIOR
    assert Rank.parse(" Grandmaster ") is Rank.GRANDMASTER
    assert Rank.parse(1) is Rank.ADEPT
    assert Rank.parse(Rank.COUNSELOR) is Rank.COUNSELOR
    with pytest.raises(ValueError):
        Rank.parse("Padawan")


def test_describe_rows():
    rows = RankLadder().describe()
    assert len(rows) == len(Rank)
    assert rows[0] == {"index": 0, "rank": "Apprentice", "rule": "must pass qualification"}
    assert rows[-1]["rule"] == "highest rank"


def test_parameter_defaults():
    """Defaults give a 1-in-10 qualification chance and 1/2 graduation thresholds."""
    params = LadderParameters()
    assert params.die_sides == 10
    assert params.success_face == 1
    assert params.success_probability == pytest.approx(0.1)
    assert params.adept_graduations_required == 1
    assert params.senior_graduations_required == 2
    assert params.default_has_qualified is False


@pytest.mark.parametrize(
    "kwargs",
    [
        {"die_sides": 0},
        {"success_face": 11},
        {"success_face": 0},
        {"adept_graduations_required": -1},
        {"adept_graduations_required": 3, "senior_graduations_required": 2},
        {"seed": -5},
    ],
)
def test_parameter_validation(kwargs):
    with pytest.raises(ValueError):
        LadderParameters(**kwargs)


def test_parameter_dict_round_trip():
    params = LadderParameters(seed=9, die_sides=6)
    assert LadderParameters.from_dict(params.to_dict()) == params
    with pytest.raises(ValueError):
        LadderParameters.from_dict({"bogus": 1})
