"""
Channel allocation.

Programmed melodic tracks take channels from a counter shared by all
tracks in a build. The counter is passed in and handed back rather than
held anywhere, so allocation order is explicit at the call site.
Channel 9 belongs to percussion alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from style_builder.constants import DRUM_CHANNEL, MAX_CHANNEL
from style_builder.errors import ChannelExhaustedError
from style_builder.models.instrument import Instrument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChannelAssignment:
    """Channel and 0-based program for one track."""

    channel: int
    program: int | None = None


def allocate_channel(
    instrument: Instrument,
    counter: int,
) -> tuple[ChannelAssignment | None, int]:
    """
    Assign a channel/program to the next track.

    Args:
        instrument: The track's instrument
        counter: Next free channel before this track

    Returns:
        (assignment, counter after this track). The assignment is None for
        melodic instruments without a program; such tracks use the default
        channel and send no program change.

    Raises:
        ChannelExhaustedError: if the counter runs past channel 15
    """
    if instrument.is_percussion:
        # Drums never send a program change and never use up a channel
        return ChannelAssignment(channel=DRUM_CHANNEL), counter

    if instrument.program is None:
        return None, counter

    channel = counter
    counter += 1
    if channel == DRUM_CHANNEL:
        channel = counter
        counter += 1

    if channel > MAX_CHANNEL:
        raise ChannelExhaustedError(channel)

    logger.debug("Instrument %s -> channel %d", instrument.name, channel)
    return ChannelAssignment(channel=channel, program=instrument.program - 1), counter
