"""
Pitch resolution - symbolic pitch tokens to MIDI note numbers.

Two strategies, chosen once per instrument when it is loaded:

- FormulaicPitchResolver: melodic instruments. Tokens look like ``c4``
  (letter, accidental, octave digit) and resolve arithmetically, C4 = 60.
- LookupPitchResolver: percussion instruments. Each token names a drum
  sound and is looked up verbatim in the instrument's pitch map.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from style_builder.errors import UnknownPitchError

# Only these letters and accidentals are supported.
LETTER_TO_SEMITONE: Mapping[str, int] = MappingProxyType({"c": 0, "e": 4, "g": 7})
ACCIDENTAL_TO_SEMITONE: Mapping[str, int] = MappingProxyType({"": 0})

_OCTAVE_DIGITS = "0123456789"


class PitchMode(str, Enum):
    """How an instrument turns tokens into pitches."""

    FORMULAIC = "formulaic"
    LOOKUP = "lookup"


@dataclass(frozen=True)
class FormulaicPitchResolver:
    """Resolves ``<letter><accidental><octave>`` tokens arithmetically."""

    mode: PitchMode = field(default=PitchMode.FORMULAIC, init=False)

    def resolve(self, token: str) -> int:
        """
        Resolve a token like ``e4`` to a MIDI note number.

        The last character is the octave digit, the first is the letter and
        whatever sits between them is the accidental.

        Raises:
            UnknownPitchError: for any letter, accidental or octave outside
                the supported set
        """
        if len(token) < 2 or token[-1] not in _OCTAVE_DIGITS:
            raise UnknownPitchError(token)

        octave = int(token[-1]) + 1
        letter, accidental = token[0], token[1:-1]

        if letter not in LETTER_TO_SEMITONE or accidental not in ACCIDENTAL_TO_SEMITONE:
            raise UnknownPitchError(token)

        return octave * 12 + LETTER_TO_SEMITONE[letter] + ACCIDENTAL_TO_SEMITONE[accidental]


@dataclass(frozen=True)
class LookupPitchResolver:
    """Resolves tokens through an explicit token -> MIDI note table."""

    pitch_map: Mapping[str, int]
    mode: PitchMode = field(default=PitchMode.LOOKUP, init=False)

    def resolve(self, token: str) -> int:
        """
        Look a token up verbatim.

        Raises:
            UnknownPitchError: if the token is not in the pitch map
        """
        try:
            return self.pitch_map[token]
        except KeyError:
            raise UnknownPitchError(token) from None


PitchResolver = FormulaicPitchResolver | LookupPitchResolver


def pitch_resolver_for(pitch_map: Mapping[str, int] | None) -> PitchResolver:
    """Pick the strategy for an instrument: a pitch map always wins."""
    if pitch_map is not None:
        return LookupPitchResolver(MappingProxyType(dict(pitch_map)))
    return FormulaicPitchResolver()
