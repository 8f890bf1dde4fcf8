"""
Build configuration - where to read instruments and tracks, where to write.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from style_builder.constants import HEADER_TEMPO_BPM, NUMBER_OF_LOOPS

DEFAULT_OUTPUT = Path("output.mid")


class BuildConfig(BaseModel):
    """Inputs and output of one build."""

    instruments_dir: Path = Field(..., description="Directory of instrument descriptors")
    tracks_dir: Path = Field(..., description="Directory of track files for one style")
    output_path: Path = Field(DEFAULT_OUTPUT, description="MIDI file to write (overwritten)")
    loop_count: int = Field(NUMBER_OF_LOOPS, ge=1, description="Times each track repeats")
    tempo_bpm: int = Field(HEADER_TEMPO_BPM, ge=20, le=300, description="Header tempo")

    model_config = {"frozen": True}

    @classmethod
    def from_data_root(
        cls,
        data_root: Path,
        style: str,
        output_path: Path = DEFAULT_OUTPUT,
    ) -> BuildConfig:
        """
        Use the standard data layout.

        ``<data_root>/instruments`` holds the instruments and
        ``<data_root>/styles/<style>`` the tracks.
        """
        return cls(
            instruments_dir=data_root / "instruments",
            tracks_dir=data_root / "styles" / style,
            output_path=output_path,
        )
