"""
Track files - one musical part per file.
"""

from style_builder.tracks.loader import list_track_files, load_track

__all__ = ["list_track_files", "load_track"]
