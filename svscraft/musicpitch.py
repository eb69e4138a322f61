"""MIDI pitches, including octave-less wildcard pitches."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import ClassVar

_KEY_NAMES_FLAT = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")
_KEY_NAMES_SHARP = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
_NATURAL_KEY_PITCH = {"A": 9, "B": 11, "C": 0, "D": 2, "E": 4, "F": 5, "G": 7}

_PITCH_PATTERN = re.compile(r"\s*([A-G])([b#]*)\s*(\?|[0-9]+)\s*")


class Accidental(enum.Enum):
    FLAT = "flat"
    SHARP = "sharp"


@dataclass(frozen=True, order=True)
class MusicPitch:
    """A pitch 0..127, or a wildcard key (pitch -12..-1) that matches every octave."""

    pitch: int = 0

    WILDCARD: ClassVar[int] = -1

    def __post_init__(self) -> None:
        if not -12 <= self.pitch < 128:
            raise ValueError(f"pitch out of range: {self.pitch}")

    @classmethod
    def from_key_octave(cls, key: int, octave: int) -> MusicPitch:
        """Build a pitch from a key 0..11 and an octave; octave -1 gives a wildcard."""
        if not 0 <= key < 12:
            raise ValueError(f"key out of range: {key}")
        if octave != cls.WILDCARD and not (octave >= 0 and 0 <= key + octave * 12 < 128):
            raise ValueError(f"octave out of range: {octave}")
        return cls(key + octave * 12)

    @classmethod
    def from_string(cls, s: str) -> MusicPitch:
        """Parse names such as ``C5``, ``Eb8`` or ``F#?``; raise ValueError if invalid."""
        match = _PITCH_PATTERN.fullmatch(s)
        if match is None:
            raise ValueError(f"invalid pitch string: {s!r}")
        name, accidentals, octave = match.groups()
        key = _NATURAL_KEY_PITCH[name] - accidentals.count("b") + accidentals.count("#")
        if octave == "?":
            return cls.from_key_octave(key % 12, cls.WILDCARD)
        pitch = key + 12 * int(octave)
        if not 0 <= pitch < 128:
            raise ValueError(f"pitch out of range: {s!r}")
        return cls(pitch)

    def to_string(self, accidental: Accidental) -> str:
        suffix = str(self.octave()) if self.pitch >= 0 else "?"
        return self.key_name(accidental) + suffix

    def key(self) -> int:
        return (self.pitch + 12) % 12

    def key_name(self, accidental: Accidental) -> str:
        names = _KEY_NAMES_FLAT if accidental is Accidental.FLAT else _KEY_NAMES_SHARP
        return names[self.key()]

    def octave(self) -> int:
        return (self.pitch + 12) // 12 - 1

    def is_wildcard(self) -> bool:
        return self.pitch < 0

    def matched_notes(self) -> list[MusicPitch]:
        """All concrete pitches a wildcard stands for; empty for a concrete pitch."""
        if self.pitch >= 0:
            return []
        return [MusicPitch(p) for p in range(self.key(), 128, 12)]

    def is_matched(self, note: MusicPitch) -> bool:
        return self.pitch < 0 and self.key() == note.key()

    @classmethod
    def range(cls, a: MusicPitch, b: MusicPitch) -> list[MusicPitch]:
        """Sorted concrete pitches spanning from ``a`` to ``b``, wildcards included."""
        pitches: set[MusicPitch] = set()

        def walk_up(start: int, end: MusicPitch) -> None:
            for p in range(start, 128):
                pitch = cls(p)
                pitches.add(pitch)
                if end.is_matched(pitch):
                    break

        def walk_down(start: int, end: MusicPitch) -> None:
            for p in range(start, -1, -1):
                pitch = cls(p)
                pitches.add(pitch)
                if end.is_matched(pitch):
                    break

        if a.is_wildcard() and b.is_wildcard():
            if a.key() <= b.key():
                for start in a.matched_notes():
                    walk_up(start.pitch, b)
            else:
                for start in b.matched_notes():
                    walk_down(start.pitch, a)
        elif b.is_wildcard():
            walk_up(a.pitch, b)
        elif a.is_wildcard():
            walk_down(b.pitch, a)
        else:
            low, high = sorted((a.pitch, b.pitch))
            pitches.update(cls(p) for p in range(low, high + 1))
        return sorted(pitches)