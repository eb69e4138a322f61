"""Clock and musical time, tempo/time-signature timelines, pitches, modes and decibel mapping."""

__version__ = "0.1.0"

__all__ = ["decibel", "longtime", "musicmode", "musicpitch", "musictime", "musictimeline"]