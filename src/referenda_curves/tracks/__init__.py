"""Таблицы треков governance."""

from .loader import BUNDLED_TRACKS_PATH, load_track_table, parse_track_table

__all__ = [
    "BUNDLED_TRACKS_PATH",
    "load_track_table",
    "parse_track_table",
]
