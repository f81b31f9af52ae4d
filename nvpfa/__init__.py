"""MIDI note timing, settings, file lists and theme for a falling-notes piano visualiser."""

__version__ = "0.1.0"