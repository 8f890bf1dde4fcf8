"""
Constants for the style builder.

No magic numbers - channel, tempo and loop defaults live here.
"""

from enum import IntEnum

# GM Drum channel (0-indexed, so 9 = channel 10)
DRUM_CHANNEL = 9

# Channel used by tracks that never receive an allocation
DEFAULT_CHANNEL = 0

# MIDI has 16 channels (0-15)
MAX_CHANNEL = 15

# Tempo written into the MIDI header. Note times are authored in seconds
# with a quarter note lasting 1 (60 BPM) and are not rescaled to it.
HEADER_TEMPO_BPM = 120

# How many times each track's note list is played back to back
NUMBER_OF_LOOPS = 4

# Every note is written with the same velocity (no dynamics)
DEFAULT_VELOCITY = 127

# Descriptor files considered when listing a directory
DESCRIPTOR_SUFFIXES = (".yaml", ".yml")


class GMDrumNote(IntEnum):
    """General MIDI drum note numbers."""

    KICK = 36
    SNARE = 38
    CLAP = 39
    CLOSED_HIHAT = 42
    OPEN_HIHAT = 46
    TOM_LOW = 41
    TOM_HIGH = 50


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_DURATION = "Unknown note duration: {duration!r}"
    UNKNOWN_PITCH = "Unknown pitch {pitch!r} in instrument {instrument!r}"
    UNRESOLVED_INSTRUMENT = "Couldn't find an instrument of type {instrument!r} (track {track!r})"
    MALFORMED_DESCRIPTOR = "Malformed descriptor {path}: {reason}"
    CHANNELS_EXHAUSTED = "Ran out of MIDI channels (next channel would be {channel})"
