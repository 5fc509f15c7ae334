"""
Speech formatting strategies.

A speaker's line is formatted by a strategy chosen at construction time
instead of by subclass overrides:

  AffiliationSpeech — '<identity> of <home>: "<text>"'
  TitledSpeech      — '<title> <identity>: "<text>"'  (presiding variant)
  rank_title_speech — '<Rank> <identity>: "<text>"'  (practitioners)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..core.practitioner import Practitioner
    from ..core.representative import Representative


class SpeechStyle(Protocol):
    def format(self, speaker: "Representative", text: str) -> str:
        ...


@dataclass(frozen=True)
class AffiliationSpeech:
    """Prefix speech with the speaker's identity and home affiliation."""

    def format(self, speaker: "Representative", text: str) -> str:
        return f'{speaker.identity} of {speaker.home_affiliation}: "{text}"'


@dataclass(frozen=True)
class TitledSpeech:
    """Prefix speech with a fixed title and the speaker's identity."""

    title: str = "Chancellor"

    def format(self, speaker: "Representative", text: str) -> str:
        return f'{self.title} {speaker.identity}: "{text}"'


def rank_title_speech(practitioner: "Practitioner", text: str) -> str:
    return f'{practitioner.full_title}: "{text}"'
