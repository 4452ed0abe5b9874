"""Wavetable harp synthesis with ADSR envelopes, note players and debounced sensor watching."""

__version__ = "0.1.0"
__all__ = ["voice", "mixer", "player", "sensors"]