"""
Build errors.

Every error is fatal: the builder never skips a note or substitutes a
default. All of them are ValueErrors so callers can catch one type.
"""

from __future__ import annotations

from pathlib import Path

from style_builder.constants import ErrorMessages


class BuildError(ValueError):
    """Base class for everything that aborts a build."""


class UnknownDurationError(BuildError):
    """A note entry uses a duration code missing from the duration table."""

    def __init__(self, duration: object):
        self.duration = duration
        super().__init__(ErrorMessages.UNKNOWN_DURATION.format(duration=duration))


class UnknownPitchError(BuildError):
    """A pitch token cannot be resolved for an instrument."""

    def __init__(self, pitch: str, instrument: str | None = None):
        self.pitch = pitch
        self.instrument = instrument
        super().__init__(
            ErrorMessages.UNKNOWN_PITCH.format(pitch=pitch, instrument=instrument or "")
        )

    def with_instrument(self, instrument: str) -> UnknownPitchError:
        """Return a copy naming the instrument that failed to resolve the pitch."""
        return UnknownPitchError(self.pitch, instrument)


class UnresolvedInstrumentError(BuildError):
    """A track names an instrument type the registry does not know."""

    def __init__(self, instrument: str, track: str):
        self.instrument = instrument
        self.track = track
        super().__init__(
            ErrorMessages.UNRESOLVED_INSTRUMENT.format(instrument=instrument, track=track)
        )


class MalformedDescriptorError(BuildError):
    """An instrument or track file is not valid YAML of the expected shape."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(ErrorMessages.MALFORMED_DESCRIPTOR.format(path=path, reason=reason))


class ChannelExhaustedError(BuildError):
    """More programmed tracks than MIDI has channels."""

    def __init__(self, channel: int):
        self.channel = channel
        super().__init__(ErrorMessages.CHANNELS_EXHAUSTED.format(channel=channel))
