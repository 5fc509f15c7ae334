"""
Tests for the Practitioner entity and Roster lookup.
"""

import pytest

from mentorship_engine.core.practitioner import Practitioner
from mentorship_engine.core.ranks import Rank
from mentorship_engine.core.roster import Roster


def test_defaults():
    """A new practitioner starts as an unqualified apprentice with no relations."""
    p = Practitioner("Theron", "Human")
    assert p.rank is Rank.APPRENTICE
    assert p.has_qualified is False
    assert p.mentor_name is None
    assert p.current_apprentices == ()
    assert p.former_apprentices == ()
    assert p.full_title == "Apprentice Theron"


def test_mentor_stored_by_identity():
    """Passing a Practitioner as mentor keeps only its identity."""
    mentor = Practitioner("Mira", "Human", rank=Rank.SENIOR)
    p = Practitioner("Theron", "Human", mentor=mentor)
    assert p.mentor_name == "Mira"
    assert p.to_dict()["mentor"] == "Mira"


def test_qualifier_count_is_cached():
    p = Practitioner("Kira", "Human", qualifiers=["Green", "Blue"])
    assert p.qualifiers == ("Green", "Blue")
    assert p.qualifier_count == 2
    assert "qualifier_count" in p.__dict__


def test_rank_cannot_regress():
    p = Practitioner("Kira", "Human", rank=Rank.SENIOR)
    p.rank = Rank.COUNSELOR
    assert p.rank is Rank.COUNSELOR
    with pytest.raises(ValueError):
        p.rank = Rank.ADEPT
    assert p.rank is Rank.COUNSELOR


def test_relationship_views_are_read_only():
    mentor = Practitioner("Mira", "Human", rank=Rank.SENIOR)
    pupil = Practitioner("Theron", "Human")
    mentor._enroll(pupil)
    view = mentor.current_apprentices
    assert isinstance(view, tuple)
    assert mentor.find_current_apprentice("Theron") == 0
    assert mentor.find_current_apprentice("Nobody") is None


def test_former_apprentice_recorded_once():
    mentor = Practitioner("Mira", "Human", rank=Rank.SENIOR)
    pupil = Practitioner("Theron", "Human")
    mentor._record_graduate(pupil)
    with pytest.raises(ValueError):
        mentor._record_graduate(pupil)
    assert mentor.former_count == 1


def test_empty_identity_rejected():
    with pytest.raises(ValueError):
        Practitioner("", "Human")


def test_to_dict():
    mentor = Practitioner("Mira", "Human", rank="Senior", qualifiers=["Blue"])
    pupil = Practitioner("Theron", "Human", mentor=mentor)
    mentor._enroll(pupil)
    data = mentor.to_dict()
    assert data["rank"] == "Senior"
    assert data["current_apprentices"] == ["Theron"]
    assert data["former_apprentices"] == []
    assert pupil.to_dict()["mentor"] == "Mira"


def test_roster_lookup():
    """The roster resolves mentor identities and scans for current mentors."""
    mentor = Practitioner("Mira", "Human", rank=Rank.SENIOR)
    pupil = Practitioner("Theron", "Human", mentor="Mira")
    roster = Roster([mentor, pupil])

    assert len(roster) == 2
    assert "Mira" in roster
    assert roster.mentor_of(pupil) is mentor
    assert roster.mentor_of(mentor) is None
    assert roster.current_mentor_of(pupil) is None

    mentor._enroll(pupil)
    assert roster.current_mentor_of(pupil) is mentor


def test_roster_rejects_duplicate_identity():
    roster = Roster([Practitioner("Mira", "Human")])
    roster.register(roster.get("Mira"))
    with pytest.raises(ValueError):
        roster.register(Practitioner("Mira", "Zabrak"))
