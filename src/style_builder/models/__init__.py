"""
Pydantic models for instrument and track descriptors.

This module provides:
- InstrumentDefinition: an instrument descriptor file
- Instrument: a loaded instrument with its pitch strategy
- TrackDefinition: a track file
- NoteEntry: one timeline slot in a track
"""

from style_builder.models.instrument import Instrument, InstrumentDefinition
from style_builder.models.track import NoteEntry, TrackDefinition

__all__ = [
    "Instrument",
    "InstrumentDefinition",
    "NoteEntry",
    "TrackDefinition",
]
