"""
Compilation pipeline - transforms track files to MIDI.

The pipeline:
    Track YAML → TrackDefinition
    → channel assignment + timeline (deterministic note events)
    → EventDocument
    → MIDI File
"""

# Import MIDI first (no circular dependencies)
from style_builder.compiler.midi import (
    TICKS_PER_BEAT,
    document_to_midi,
    seconds_to_ticks,
    write_midi,
)


def __getattr__(name: str):
    """Lazy imports for the assembler to avoid circular dependencies."""
    if name in ("BuildResult", "DocumentAssembler", "build_style"):
        from style_builder.compiler.assembler import (
            BuildResult,
            DocumentAssembler,
            build_style,
        )

        return {
            "BuildResult": BuildResult,
            "DocumentAssembler": DocumentAssembler,
            "build_style": build_style,
        }[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Assembler (lazy loaded)
    "BuildResult",
    "DocumentAssembler",
    "build_style",
    # MIDI
    "TICKS_PER_BEAT",
    "document_to_midi",
    "seconds_to_ticks",
    "write_midi",
]
