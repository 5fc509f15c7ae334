"""
Representative entity.

A Representative is a named speaker with a home affiliation and an ordered
list of attributes (policies).  Attributes may repeat and are only ever
appended.  The presiding variant differs solely in how it formats speech,
which is supplied as a strategy at construction (see systems.speech).
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from ..systems.speech import AffiliationSpeech, SpeechStyle, TitledSpeech


class AttributeListing:
    """Finite, restartable, read-only view over a snapshot of attributes.

    The snapshot is taken when the listing is created; later additions to the
    representative do not show up in an existing listing.  Every call to
    iter() starts again from the first attribute.
    """

    def __init__(self, owner: str, attributes: Iterable[str]) -> None:
        self.owner: str = owner
        self._snapshot: Tuple[str, ...] = tuple(attributes)

    def __iter__(self) -> Iterator[str]:
        for attribute in self._snapshot:
            yield attribute

    def __len__(self) -> int:
        return len(self._snapshot)

    def __repr__(self) -> str:
        return f"AttributeListing({self.owner!r}, n={len(self._snapshot)})"


class Representative:
    """A member of the assembly.

    Attributes:
        identity:         Display name.
        category:         Classification label.
        home_affiliation: Home the representative speaks for.
        speech:           Speech-formatting strategy.
    """

    def __init__(
        self,
        identity: str,
        category: str,
        home_affiliation: str,
        attributes: Iterable[str] = (),
        speech: Optional[SpeechStyle] = None,
    ) -> None:
        if not identity:
            raise ValueError("Representative identity must be a non-empty string")
        self.identity: str = str(identity)
        self.category: str = str(category)
        self.home_affiliation: str = str(home_affiliation)
        self._attributes: List[str] = [str(a) for a in attributes]
        self.speech: SpeechStyle = speech if speech is not None else AffiliationSpeech()

    @property
    def attributes(self) -> Tuple[str, ...]:
        return tuple(self._attributes)

    def add_attribute(self, value: str) -> None:
        self._attributes.append(str(value))

    def listing(self) -> AttributeListing:
        return AttributeListing(self.identity, self._attributes)

    def format_speech(self, text: str) -> str:
        return self.speech.format(self, text)

    @property
    def is_presiding(self) -> bool:
        return isinstance(self.speech, TitledSpeech)

    def to_dict(self):
        return {
            "identity": self.identity,
            "category": self.category,
            "home_affiliation": self.home_affiliation,
            "attributes": list(self._attributes),
            "presiding": self.is_presiding,
        }

    def __repr__(self) -> str:
        return f"Representative({self.identity!r}, home={self.home_affiliation!r})"


def make_presiding(
    identity: str,
    category: str,
    home_affiliation: str,
    attributes: Iterable[str] = (),
    title: str = "Chancellor",
) -> Representative:
    """Build a presiding representative: same state, titled speech."""
    return Representative(
        identity,
        category,
        home_affiliation,
        attributes,
        speech=TitledSpeech(title),
    )
