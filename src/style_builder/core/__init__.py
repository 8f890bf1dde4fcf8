"""
Core notation primitives.

- DURATION_TABLE / lookup_duration: symbolic duration codes to lengths
- FormulaicPitchResolver / LookupPitchResolver: symbolic pitches to MIDI
"""

from style_builder.core.duration import DURATION_TABLE, duration_code, lookup_duration
from style_builder.core.pitch import (
    ACCIDENTAL_TO_SEMITONE,
    LETTER_TO_SEMITONE,
    FormulaicPitchResolver,
    LookupPitchResolver,
    PitchMode,
    PitchResolver,
    pitch_resolver_for,
)

__all__ = [
    # Duration
    "DURATION_TABLE",
    "duration_code",
    "lookup_duration",
    # Pitch
    "ACCIDENTAL_TO_SEMITONE",
    "LETTER_TO_SEMITONE",
    "FormulaicPitchResolver",
    "LookupPitchResolver",
    "PitchMode",
    "PitchResolver",
    "pitch_resolver_for",
]
