"""
Assembly — operations over Representatives.

Independent of the mentorship engine.  Everything here is list mutation or
presentation written to an output sink.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..analysis.reporting import (
    EXCHANGE_CLOSING,
    attribute_lines,
    exchange_lines,
    exchange_marker,
)
from ..core.representative import AttributeListing, Representative
from ..systems.output import OutputSink, StreamSink

logger = logging.getLogger("mentorship_engine.assembly")


class Assembly:
    """Reports representative speech, listings and exchanges."""

    def __init__(self, sink: Optional[OutputSink] = None) -> None:
        self.sink: OutputSink = sink if sink is not None else StreamSink()

    def speak(self, representative: Representative, text: str) -> None:
        self.sink.write(representative.format_speech(text))

    def add_attribute(self, representative: Representative, value: str) -> None:
        representative.add_attribute(value)
        logger.debug(f"{representative.identity} added attribute {value!r}")

    def list_attributes(
        self,
        of: Representative,
        lister: Optional[Representative] = None,
    ) -> AttributeListing:
        """Write one line per attribute of `of` and return the listing.

        Args:
            of:     Representative whose attributes are listed.
            lister: If given, each line is prefixed with this identity.
        """
        listing = of.listing()
        for line in attribute_lines(listing, lister):
            self.sink.write(line)
        return listing

    def exchange_attributes(
        self,
        initiator: Representative,
        counterpart: Representative,
        detail: str,
    ) -> None:
        """Record an off-the-books exchange on both representatives.

        Each side gains a marker attribute naming the other.  No approval or
        visibility check is made.
        """
        for line in exchange_lines(initiator, counterpart, detail):
            self.sink.write(line)
        initiator.add_attribute(exchange_marker(counterpart))
        counterpart.add_attribute(exchange_marker(initiator))
        logger.info(
            f"exchange recorded between {initiator.identity} and {counterpart.identity}"
        )
        self.sink.write(EXCHANGE_CLOSING)
