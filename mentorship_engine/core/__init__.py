"""Core entities, rank ladder, parameters and outcomes."""
from .parameters import LadderParameters
from .ranks import Rank, RankLadder
from .outcomes import Outcome
from .practitioner import Practitioner
from .roster import Roster
from .representative import AttributeListing, Representative, make_presiding

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
]
