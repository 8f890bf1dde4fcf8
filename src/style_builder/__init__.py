"""
Style builder - compiles YAML instrument and track files to MIDI.

A style is a directory of track files. Each track names an instrument
type and a list of notes; the builder loops every track four times and
writes all of them to one MIDI file.
"""

__version__ = "0.1.0"
