"""
Instrument models.

InstrumentDefinition is the shape of an instrument descriptor file.
Instrument is what the registry hands out: the definition plus the pitch
strategy picked at load time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Any

from pydantic import BaseModel, Field

from style_builder.core.pitch import PitchMode, PitchResolver, pitch_resolver_for
from style_builder.errors import UnknownPitchError


MidiNote = Annotated[int, Field(ge=0, le=127)]


class InstrumentDefinition(BaseModel):
    """
    One playable voice, as written in an instrument descriptor.

    The presence of a pitch map is the only thing that marks an instrument
    as percussion.
    """

    instrument_type: str = Field(
        ...,
        alias="type",
        description="Tag tracks use to pick this instrument",
    )
    program: int | None = Field(
        None,
        ge=1,
        le=128,
        description="1-based GM program number; absent means no program change",
    )
    pitch_map: dict[str, MidiNote] | None = Field(
        None,
        alias="pitchMap",
        description="Token -> MIDI note table for percussion voices",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def is_percussion(self) -> bool:
        """True when the descriptor has a pitch map."""
        return self.pitch_map is not None

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to the descriptor file layout."""
        data: dict[str, Any] = {"type": self.instrument_type}
        if self.program is not None:
            data["program"] = self.program
        if self.pitch_map is not None:
            data["pitchMap"] = dict(self.pitch_map)
        return {"instrument": data}


@dataclass(frozen=True)
class Instrument:
    """A loaded instrument."""

    name: str  # descriptor file stem, for diagnostics only
    definition: InstrumentDefinition
    pitch: PitchResolver = field(compare=False)

    @classmethod
    def from_definition(cls, name: str, definition: InstrumentDefinition) -> Instrument:
        """Build an instrument, picking its pitch strategy from the definition."""
        return cls(
            name=name,
            definition=definition,
            pitch=pitch_resolver_for(definition.pitch_map),
        )

    @property
    def instrument_type(self) -> str:
        """Type tag tracks use to pick this instrument."""
        return self.definition.instrument_type

    @property
    def program(self) -> int | None:
        """1-based GM program, or None."""
        return self.definition.program

    @property
    def is_percussion(self) -> bool:
        """True when pitches resolve through a pitch map."""
        return self.pitch.mode == PitchMode.LOOKUP

    def resolve_pitch(self, token: str) -> int:
        """
        Resolve a symbolic pitch with this instrument's strategy.

        Raises:
            UnknownPitchError: naming this instrument's type
        """
        try:
            return self.pitch.resolve(token)
        except UnknownPitchError as e:
            raise e.with_instrument(self.instrument_type) from None
