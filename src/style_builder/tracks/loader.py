"""
Track loader - reads the track files of a style.
"""

from __future__ import annotations

from pathlib import Path

from style_builder.descriptors import list_descriptor_files, read_descriptor
from style_builder.models.track import TrackDefinition


async def list_track_files(directory: Path) -> list[Path]:
    """List track files in compile order."""
    return list_descriptor_files(directory)


async def load_track(path: Path) -> TrackDefinition:
    """
    Load a track file.

    Raises:
        MalformedDescriptorError: if the file is not a valid track
    """
    return read_descriptor(path, "track", TrackDefinition)
