"""fretmap: fretboard geometry, note mapping and diagram rendering."""

__version__ = "0.1.0"
