#!/usr/bin/env python3
"""
Example: Build a small style from scratch.

Writes two instruments and a three-track style to examples/output/data,
then compiles it to a playable MIDI file.

Usage:
    python examples/build_style.py
    # Creates: examples/output/sa3idi.mid
"""

import asyncio
from pathlib import Path

import yaml

from style_builder.compiler import build_style
from style_builder.config import BuildConfig
from style_builder.constants import GMDrumNote
from style_builder.models import InstrumentDefinition, NoteEntry, TrackDefinition


def write_descriptor(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)


def create_data(root: Path) -> None:
    """
    Lay out a data root.

    This demonstrates:
    - A melodic instrument with a GM program
    - A percussion instrument with a pitch map
    - Chords, dotted durations and drum tokens in tracks
    """
    instruments = {
        "oud": InstrumentDefinition(instrument_type="oud", program=106),
        "strings": InstrumentDefinition(instrument_type="strings", program=49),
        "tabla": InstrumentDefinition(
            instrument_type="tabla",
            pitch_map={
                "dum": int(GMDrumNote.KICK),
                "tak": int(GMDrumNote.SNARE),
                "ka": int(GMDrumNote.CLOSED_HIHAT),
            },
        ),
    }
    for name, definition in instruments.items():
        write_descriptor(root / "instruments" / f"{name}.yaml", definition.to_yaml_dict())

    tracks = {
        "1-melody": TrackDefinition(
            instrument="oud",
            notes=[
                NoteEntry(pitch="c4", duration="8."),
                NoteEntry(pitch="e4", duration="16"),
                NoteEntry(pitch="g4", duration="4"),
                NoteEntry(pitch="e4", duration="8"),
                NoteEntry(pitch="c4", duration="8"),
                NoteEntry(pitch="c4", duration="4"),
            ],
        ),
        "2-pad": TrackDefinition(
            instrument="strings",
            notes=[NoteEntry(pitches=["c3", "e3", "g3"], duration="2")] * 2,
        ),
        "3-rhythm": TrackDefinition(
            instrument="tabla",
            notes=[
                NoteEntry(pitch="dum", duration="8"),
                NoteEntry(pitch="tak", duration="8"),
                NoteEntry(pitch="ka", duration="8"),
                NoteEntry(pitch="dum", duration="8"),
                NoteEntry(pitch="dum", duration="8"),
                NoteEntry(pitch="ka", duration="8"),
                NoteEntry(pitch="tak", duration="4"),
            ],
        ),
    }
    for name, track in tracks.items():
        write_descriptor(root / "styles" / "sa3idi" / f"{name}.yaml", track.to_yaml_dict())


async def main() -> None:
    output_dir = Path(__file__).parent / "output"
    data_root = output_dir / "data"

    print(f"Writing descriptors to {data_root}...")
    create_data(data_root)

    config = BuildConfig.from_data_root(data_root, "sa3idi", output_dir / "sa3idi.mid")
    result = await build_style(config)

    print(f"  Tracks: {', '.join(result.tracks_compiled)}")
    print(f"  Events: {result.total_events}")
    for track in result.document.tracks:
        print(f"    {track.name}: channel {track.channel}, program {track.program}")
    print(f"\nDone! Open {result.output_path} in your DAW to hear it.")


if __name__ == "__main__":
    asyncio.run(main())
