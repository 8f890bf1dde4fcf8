"""
Event Document - the in-memory MIDI document before serialization.

Times and durations are in seconds at the 60 BPM reference tempo
(a quarter note lasts 1). The header tempo is stored separately and only
matters when the document is written out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction

from style_builder.constants import DEFAULT_CHANNEL, HEADER_TEMPO_BPM, MAX_CHANNEL


@dataclass(frozen=True)
class NoteEvent:
    """A single timed note."""

    pitch: int  # MIDI note number (0-127)
    time: Fraction  # Start, seconds from the top of the track
    duration: Fraction  # Length in seconds

    def __post_init__(self) -> None:
        """Validate ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if self.time < 0:
            raise ValueError(f"Time must be >= 0, got {self.time}")
        if self.duration <= 0:
            raise ValueError(f"Duration must be > 0, got {self.duration}")

    @property
    def end(self) -> Fraction:
        return self.time + self.duration


@dataclass
class OutputTrack:
    """One output track: a channel, an optional program and its notes."""

    name: str = ""
    channel: int = DEFAULT_CHANNEL
    program: int | None = None  # 0-based, None means no program change
    notes: list[NoteEvent] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not 0 <= self.channel <= MAX_CHANNEL:
            raise ValueError(f"Channel must be 0-{MAX_CHANNEL}, got {self.channel}")
        if self.program is not None and not 0 <= self.program <= 127:
            raise ValueError(f"Program must be 0-127, got {self.program}")

    def add_note(self, pitch: int, time: Fraction, duration: Fraction) -> NoteEvent:
        note = NoteEvent(pitch=pitch, time=time, duration=duration)
        self.notes.append(note)
        return note


@dataclass
class EventDocument:
    """
    Tempo plus an ordered list of tracks.

    Built up one track at a time by a single owner, then serialized once.
    """

    tempo_bpm: int = HEADER_TEMPO_BPM
    tracks: list[OutputTrack] = field(default_factory=list)

    def add_track(
        self,
        name: str = "",
        channel: int = DEFAULT_CHANNEL,
        program: int | None = None,
    ) -> OutputTrack:
        """Append a new empty track and return it."""
        track = OutputTrack(name=name, channel=channel, program=program)
        self.tracks.append(track)
        return track

    @property
    def total_events(self) -> int:
        return sum(len(track.notes) for track in self.tracks)

    @property
    def duration(self) -> Fraction:
        """End of the last sounding note, in seconds."""
        return max(
            (note.end for track in self.tracks for note in track.notes),
            default=Fraction(0),
        )
