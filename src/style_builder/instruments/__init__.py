"""
Instrument registry - the voices tracks can be played on.
"""

from style_builder.instruments.registry import InstrumentRegistry

__all__ = ["InstrumentRegistry"]
