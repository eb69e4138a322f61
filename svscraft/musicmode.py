"""Scale modes expressed as sets of semitone offsets from a tonic."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from svscraft.musicpitch import MusicPitch


def _bits(*offsets: int) -> int:
    value = 0
    for offset in offsets:
        value |= 1 << offset
    return value


class Mode(enum.IntEnum):
    IONIAN = _bits(0, 2, 4, 5, 7, 9, 11)
    DORIAN = _bits(0, 2, 3, 5, 7, 9, 10)
    PHRYGIAN = _bits(0, 1, 3, 5, 7, 8, 10)
    LYDIAN = _bits(0, 2, 4, 6, 7, 9, 11)
    MIXOLYDIAN = _bits(0, 2, 4, 5, 7, 9, 10)
    AEOLIAN = _bits(0, 2, 3, 5, 7, 8, 10)
    LOCRIAN = _bits(0, 1, 3, 5, 6, 8, 10)

    GONG = _bits(0, 2, 4, 7, 9)
    SHANG = _bits(0, 2, 5, 7, 10)
    JUE = _bits(0, 3, 5, 8, 10)
    ZHI = _bits(0, 2, 5, 7, 9)
    YU = _bits(0, 3, 5, 7, 10)


@dataclass(frozen=True)
class MusicMode:
    """A twelve-bit mask of scale degrees; bit 0 (the tonic) must be set."""

    flags: int = 1

    def __post_init__(self) -> None:
        flags = int(self.flags)
        if not flags & 1:
            raise ValueError(f"mode flags must include the tonic: {flags:#x}")
        object.__setattr__(self, "flags", flags)

    def key_count(self) -> int:
        return bin(self.flags & 0xFFF).count("1")

    def scale(self, tonic: MusicPitch) -> list[MusicPitch]:
        """Pitches of the mode built on ``tonic``, wildcard in and wildcard out."""
        pitches = []
        for offset in range(12):
            if not self.flags & (1 << offset):
                continue
            if tonic.is_wildcard():
                pitches.append(
                    MusicPitch.from_key_octave((tonic.key() + offset) % 12, MusicPitch.WILDCARD)
                )
            elif tonic.pitch + offset < 128:
                pitches.append(MusicPitch(tonic.pitch + offset))
        return pitches