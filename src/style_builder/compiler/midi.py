"""
MIDI export - the end of the pipeline.

This module converts an EventDocument to a Standard MIDI File using mido.
All operations are deterministic: same document → same MIDI file.
"""

from __future__ import annotations

from fractions import Fraction
from pathlib import Path
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

from style_builder.constants import DEFAULT_VELOCITY

if TYPE_CHECKING:
    from style_builder.compiler.document import EventDocument, OutputTrack


# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480


def seconds_to_ticks(
    seconds: Fraction | float,
    tempo_bpm: int,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> int:
    """Convert a time in seconds to ticks at a fixed tempo."""
    return round(Fraction(seconds) * tempo_bpm / 60 * ticks_per_beat)


def meta_text(text: str) -> str:
    """Make text safe for a meta message; mido writes those as latin-1."""
    return text.encode("latin-1", "replace").decode("latin-1")


def track_to_midi(
    track: OutputTrack,
    tempo_bpm: int,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiTrack:
    """
    Convert one output track to a MidiTrack.

    The program change (if any) sits at tick 0, ahead of the notes.
    """
    midi_track = MidiTrack()
    if track.name:
        midi_track.append(MetaMessage("track_name", name=meta_text(track.name), time=0))
    if track.program is not None:
        midi_track.append(
            Message("program_change", channel=track.channel, program=track.program, time=0)
        )

    messages: list[tuple[int, Message]] = []

    for note in track.notes:
        start = seconds_to_ticks(note.time, tempo_bpm, ticks_per_beat)
        end = seconds_to_ticks(note.end, tempo_bpm, ticks_per_beat)
        messages.append(
            (
                start,
                Message(
                    "note_on",
                    channel=track.channel,
                    note=note.pitch,
                    velocity=DEFAULT_VELOCITY,
                    time=0,  # Will be converted to delta
                ),
            )
        )
        messages.append(
            (
                end,
                Message(
                    "note_off",
                    channel=track.channel,
                    note=note.pitch,
                    velocity=0,
                    time=0,  # Will be converted to delta
                ),
            )
        )

    # Sort by absolute time, note_off before note_on at the same tick so
    # repeated notes retrigger cleanly. sort() is stable, chord order holds.
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        midi_track.append(msg)
        current_time = abs_time

    midi_track.append(MetaMessage("end_of_track", time=0))
    return midi_track


def document_to_midi(
    document: EventDocument,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert an EventDocument to a type 1 MidiFile.

    Track 0 only carries the tempo; each output track follows in order.

    Args:
        document: The assembled document
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(type=1, ticks_per_beat=ticks_per_beat)

    conductor = MidiTrack()
    tempo_us = int(60_000_000 / document.tempo_bpm)
    conductor.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))
    conductor.append(MetaMessage("end_of_track", time=0))
    mid.tracks.append(conductor)

    for track in document.tracks:
        mid.tracks.append(track_to_midi(track, document.tempo_bpm, ticks_per_beat))

    return mid


def write_midi(midi_file: MidiFile, path: Path) -> Path:
    """Write a MidiFile, replacing whatever is at ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    midi_file.save(str(path))
    return path
