"""
Timeline building - lays a track's notes out in time.

The whole note list is played loop_count times back to back. Each entry
takes one slot: a chord puts all its pitches at the same start time and
moves the cursor forward once.
"""

from __future__ import annotations

from collections.abc import Sequence
from fractions import Fraction

from style_builder.compiler.document import NoteEvent
from style_builder.constants import NUMBER_OF_LOOPS
from style_builder.core.duration import lookup_duration
from style_builder.models.instrument import Instrument
from style_builder.models.track import NoteEntry


def build_timeline(
    notes: Sequence[NoteEntry],
    instrument: Instrument,
    loop_count: int = NUMBER_OF_LOOPS,
) -> list[NoteEvent]:
    """
    Build the timed events for one track.

    Args:
        notes: Note entries in playback order
        instrument: Instrument resolving the pitches
        loop_count: How many times to repeat the note list

    Returns:
        Events ordered by start time; chord pitches keep their order

    Raises:
        UnknownDurationError: for a duration code missing from the table
        UnknownPitchError: for a pitch the instrument can't resolve
    """
    events: list[NoteEvent] = []
    t = Fraction(0)

    for _ in range(loop_count):
        for entry in notes:
            duration = lookup_duration(entry.duration)
            for token in entry.tokens:
                events.append(
                    NoteEvent(pitch=instrument.resolve_pitch(token), time=t, duration=duration)
                )
            t += duration

    return events


def pattern_length(notes: Sequence[NoteEntry]) -> Fraction:
    """Length of one pass through the note list, in seconds."""
    return sum((lookup_duration(entry.duration) for entry in notes), Fraction(0))
