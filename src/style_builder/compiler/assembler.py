"""
Style Builder - compiles a directory of tracks to a MIDI file.

This is the central pipeline:
    instrument files → InstrumentRegistry
    track files → TrackDefinition → channel + timeline → EventDocument
    EventDocument → MIDI File

Tracks are compiled one at a time in file-name order. The channel
counter flows from one track to the next, so that order fixes which
track gets which channel.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from mido import MidiFile

from style_builder.compiler.channels import allocate_channel
from style_builder.compiler.document import EventDocument, OutputTrack
from style_builder.compiler.midi import TICKS_PER_BEAT, document_to_midi, write_midi
from style_builder.compiler.timeline import build_timeline, pattern_length
from style_builder.config import BuildConfig
from style_builder.constants import HEADER_TEMPO_BPM, NUMBER_OF_LOOPS
from style_builder.errors import UnresolvedInstrumentError
from style_builder.instruments.registry import InstrumentRegistry
from style_builder.models.track import TrackDefinition
from style_builder.tracks.loader import list_track_files, load_track

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Result of building a style."""

    document: EventDocument
    midi_file: MidiFile
    tracks_compiled: list[str]
    total_events: int
    output_path: Path | None = None


class DocumentAssembler:
    """
    Assembles an EventDocument from track definitions.

    Owns nothing between builds: every assemble() call starts a fresh
    document and a fresh channel counter.
    """

    def __init__(
        self,
        registry: InstrumentRegistry,
        loop_count: int = NUMBER_OF_LOOPS,
        tempo_bpm: int = HEADER_TEMPO_BPM,
    ):
        """
        Initialize the assembler.

        Args:
            registry: Instruments the tracks can refer to
            loop_count: Times each track's notes are repeated
            tempo_bpm: Tempo written to the MIDI header
        """
        self.registry = registry
        self.loop_count = loop_count
        self.tempo_bpm = tempo_bpm

    def add_track(
        self,
        document: EventDocument,
        track: TrackDefinition,
        counter: int,
        source: str = "",
    ) -> tuple[OutputTrack, int]:
        """
        Compile one track into the document.

        Args:
            document: Document to append to
            track: The track definition
            counter: Channel counter before this track
            source: Where the track came from, for error messages

        Returns:
            (the new output track, channel counter after this track)

        Raises:
            UnresolvedInstrumentError: if no instrument has the track's type
        """
        instrument = self.registry.find_by_type(track.instrument)
        if instrument is None:
            raise UnresolvedInstrumentError(track.instrument, source)

        assignment, counter = allocate_channel(instrument, counter)
        if assignment is None:
            output = document.add_track(name=instrument.name)
        else:
            output = document.add_track(
                name=instrument.name,
                channel=assignment.channel,
                program=assignment.program,
            )

        output.notes.extend(build_timeline(track.notes, instrument, self.loop_count))
        return output, counter

    def assemble(self, tracks: Sequence[tuple[str, TrackDefinition]]) -> EventDocument:
        """
        Assemble a document from already-loaded tracks.

        Args:
            tracks: (source name, track) pairs in compile order
        """
        document = EventDocument(tempo_bpm=self.tempo_bpm)
        counter = 0
        for source, track in tracks:
            _, counter = self.add_track(document, track, counter, source)
        return document

    async def assemble_directory(self, tracks_dir: Path) -> tuple[EventDocument, list[str]]:
        """
        Load and compile every track file in a directory.

        Returns:
            The document and the names of the compiled files, in order
        """
        document = EventDocument(tempo_bpm=self.tempo_bpm)
        counter = 0
        compiled: list[str] = []

        for path in await list_track_files(tracks_dir):
            track = await load_track(path)
            output, counter = self.add_track(document, track, counter, path.name)
            compiled.append(path.name)
            logger.info(
                "Compiled %s: %s on channel %d, %d notes, pattern %ss",
                path.name,
                track.instrument,
                output.channel,
                len(output.notes),
                pattern_length(track.notes),
            )

        return document, compiled


async def build_style(
    config: BuildConfig,
    write: bool = True,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> BuildResult:
    """
    Run a full build: load instruments, compile tracks, write MIDI.

    Args:
        config: Input directories and output path
        write: Save the MIDI file to config.output_path
        ticks_per_beat: MIDI resolution

    Returns:
        BuildResult with the document, MIDI file and summary
    """
    registry = await InstrumentRegistry.load(config.instruments_dir)
    assembler = DocumentAssembler(
        registry,
        loop_count=config.loop_count,
        tempo_bpm=config.tempo_bpm,
    )
    document, compiled = await assembler.assemble_directory(config.tracks_dir)
    midi_file = document_to_midi(document, ticks_per_beat=ticks_per_beat)

    output_path = None
    if write:
        output_path = write_midi(midi_file, config.output_path)
        logger.info("Wrote %d tracks to %s", len(document.tracks), output_path)

    return BuildResult(
        document=document,
        midi_file=midi_file,
        tracks_compiled=compiled,
        total_events=document.total_events,
        output_path=output_path,
    )
