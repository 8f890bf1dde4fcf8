"""
Track models - the shape of a track file.

A track names an instrument type and lists the notes to play, in order.
Each note entry is one slot on the timeline: either a single pitch or a
chord of pitches that start together.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from style_builder.core.duration import duration_code


class NoteEntry(BaseModel):
    """One timeline slot."""

    duration: str = Field(..., description="Duration code, e.g. '4' or '8.'")
    pitch: str | None = Field(None, description="Single symbolic pitch")
    pitches: list[str] | None = Field(None, description="Pitches sounding together")

    model_config = {"frozen": True}

    @field_validator("duration", mode="before")
    @classmethod
    def _duration_as_code(cls, value: Any) -> str:
        # YAML reads `4` as an int and an unquoted `4.` as a float
        return value if isinstance(value, str) else duration_code(value)

    @model_validator(mode="after")
    def _one_of_pitch_or_pitches(self) -> NoteEntry:
        if (self.pitch is None) == (self.pitches is None):
            raise ValueError("a note needs exactly one of 'pitch' or 'pitches'")
        return self

    @property
    def tokens(self) -> list[str]:
        """The pitches this entry sounds, in order."""
        if self.pitch is not None:
            return [self.pitch]
        return list(self.pitches or [])


class TrackDefinition(BaseModel):
    """One musical part, rendered to exactly one output track."""

    instrument: str = Field(..., description="Type tag of the instrument to play")
    notes: list[NoteEntry] = Field(default_factory=list, description="Notes in playback order")

    model_config = {"frozen": True}

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to the track file layout."""
        return {
            "track": {
                "instrument": self.instrument,
                "notes": [note.model_dump(exclude_none=True) for note in self.notes],
            }
        }
