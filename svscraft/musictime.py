"""Musical positions as measure, beat and tick, optionally bound to a timeline."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any


def _pad(value: int, width: int) -> str:
    return str(value).rjust(width, "0")


@dataclass(frozen=True)
class MusicTime:
    """A zero-based measure, beat and tick triple."""

    measure: int = 0
    beat: int = 0
    tick: int = 0

    def is_valid(self) -> bool:
        return self.measure >= 0 and self.beat >= 0 and self.tick >= 0

    def to_string(self, measure_width: int = 1, beat_width: int = 1, tick_width: int = 3) -> str:
        """Format as one-based ``measure:beat:tick``, each part zero-padded to its width."""
        return (
            f"{_pad(self.measure + 1, measure_width)}:"
            f"{_pad(self.beat + 1, beat_width)}:"
            f"{_pad(self.tick, tick_width)}"
        )

    def __str__(self) -> str:
        return self.to_string()


@functools.total_ordering
class PersistentMusicTime:
    """A tick position on a timeline whose measure/beat/tick and msec follow the timeline.

    A time without a timeline is the null time: every position query gives zero.
    """

    __slots__ = ("_timeline", "_total_tick")

    def __init__(self, timeline: Any = None, total_tick: int = 0) -> None:
        self._timeline = timeline
        self._total_tick = int(total_tick) if timeline is not None else 0

    def timeline(self) -> Any:
        return self._timeline

    def total_tick(self) -> int:
        return self._total_tick

    def to_time(self) -> MusicTime:
        """The position split into measure, beat and tick under the current time signatures."""
        if self._timeline is None:
            return MusicTime()
        return self._timeline.tick_to_time(self._total_tick)

    def measure(self) -> int:
        return self.to_time().measure

    def beat(self) -> int:
        return self.to_time().beat

    def tick(self) -> int:
        return self.to_time().tick

    def msec(self) -> float:
        """The position in milliseconds under the current tempos."""
        if self._timeline is None:
            return 0.0
        return float(self._timeline.tick_to_msec(self._total_tick))

    def to_string(self, measure_width: int = 1, beat_width: int = 1, tick_width: int = 3) -> str:
        return self.to_time().to_string(measure_width, beat_width, tick_width)

    def __add__(self, ticks: int) -> PersistentMusicTime:
        if self._timeline is None:
            return PersistentMusicTime()
        return self._timeline.create(0, 0, self._total_tick + ticks)

    def __sub__(self, ticks: int) -> PersistentMusicTime:
        if self._timeline is None:
            return PersistentMusicTime()
        return self._timeline.create(0, 0, self._total_tick - ticks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PersistentMusicTime):
            return NotImplemented
        return self._total_tick == other._total_tick

    def __lt__(self, other: PersistentMusicTime) -> bool:
        if not isinstance(other, PersistentMusicTime):
            return NotImplemented
        return self._total_tick < other._total_tick

    def __hash__(self) -> int:
        return hash(self._total_tick)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        time = self.to_time()
        return (
            f"MusicTime(tick={self._total_tick}, "
            f"mbt=({time.measure}, {time.beat}, {time.tick}, {time.to_string()}), "
            f"msec={self.msec()})"
        )