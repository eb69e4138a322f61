"""Time signatures and tempos that map ticks to measures and milliseconds."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Callable, Iterable

from sortedcontainers import SortedDict

from svscraft.musictime import MusicTime, PersistentMusicTime

logger = logging.getLogger(__name__)

RESOLUTION = 480
_MS_PER_MINUTE = 60.0 * 1000.0

_EVENTS = ("time_signature_changed", "tempo_changed", "changed")

_MBT_PATTERN = re.compile(r"\s*(\d*)\s*[:\uff1a]?\s*(\d*)\s*[:\uff1a]?\s*(\d*)\s*")


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def _floor_key(mapping: SortedDict, key: float) -> float:
    """The greatest key not above ``key``; the last key if all are smaller."""
    index = mapping.bisect_right(key)
    return mapping.keys()[max(index - 1, 0)]


@dataclass(frozen=True)
class MusicTimeSignature:
    """A time signature such as 4/4 or 6/8."""

    numerator: int = 4
    denominator: int = 4

    def is_valid(self) -> bool:
        if self.numerator <= 0:
            return False
        if not 1 <= self.denominator <= 32:
            return False
        return not self.denominator & (self.denominator - 1)

    def ticks_per_bar(self, resolution: int = RESOLUTION) -> int:
        return _trunc_div(resolution * self.numerator * 4, self.denominator)

    def ticks_per_beat(self, resolution: int = RESOLUTION) -> int:
        return _trunc_div(resolution * 4, self.denominator)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


def _as_signature(value: MusicTimeSignature | tuple[int, int]) -> MusicTimeSignature:
    if isinstance(value, MusicTimeSignature):
        return value
    numerator, denominator = value
    return MusicTimeSignature(numerator, denominator)


class MusicTimeline:
    """Time signatures by bar and tempos by tick, at 480 ticks per quarter note.

    Listeners subscribe with :meth:`connect` to ``time_signature_changed``,
    ``tempo_changed`` and ``changed``.
    """

    resolution = RESOLUTION

    def __init__(self) -> None:
        self._time_signatures: SortedDict = SortedDict({0: MusicTimeSignature(4, 4)})
        self._tempos: SortedDict = SortedDict({0: 120.0})
        self._measure_map: SortedDict = SortedDict({0: 0})  # tick -> bar
        self._rev_measure_map: SortedDict = SortedDict({0: 0})  # bar -> tick
        self._msec_sum_map: SortedDict = SortedDict({0: 0.0})  # tick -> msec
        self._rev_msec_sum_map: SortedDict = SortedDict({0.0: 0})  # msec -> tick
        self._listeners: dict[str, list[Callable[[], None]]] = {name: [] for name in _EVENTS}

    # Notification

    def connect(self, event: str, callback: Callable[[], None]) -> None:
        """Call ``callback`` with no arguments whenever ``event`` happens."""
        self._listeners_for(event).append(callback)

    def disconnect(self, event: str, callback: Callable[[], None]) -> None:
        """Stop calling ``callback`` for ``event``; ValueError if it was not connected."""
        self._listeners_for(event).remove(callback)

    def _listeners_for(self, event: str) -> list[Callable[[], None]]:
        try:
            return self._listeners[event]
        except KeyError:
            raise ValueError(f"unknown event: {event!r}") from None

    def _emit(self, event: str) -> None:
        for callback in list(self._listeners[event]):
            callback()

    # Map maintenance

    def _update_measure_map(self, bar_from: int) -> None:
        bars = self._time_signatures.keys()
        index = max(self._time_signatures.bisect_left(bar_from), 1)
        anchor_tick = self._rev_measure_map[bars[index - 1]]
        for tick in list(self._measure_map.irange(minimum=anchor_tick, inclusive=(False, True))):
            self._rev_measure_map.pop(self._measure_map.pop(tick), None)
        for position in range(index, len(bars)):
            prev_bar = bars[position - 1]
            prev_sig = self._time_signatures[prev_bar]
            bar = bars[position]
            tick = self._rev_measure_map[prev_bar] + (bar - prev_bar) * prev_sig.ticks_per_bar(
                self.resolution
            )
            self._measure_map[tick] = bar
            self._rev_measure_map[bar] = tick

    def _update_msec_sum_map(self, tick_from: int) -> None:
        ticks = self._tempos.keys()
        index = max(self._tempos.bisect_left(tick_from), 1)
        anchor = ticks[index - 1]
        for tick in list(self._msec_sum_map.irange(minimum=anchor, inclusive=(False, True))):
            self._rev_msec_sum_map.pop(self._msec_sum_map.pop(tick), None)
        for position in range(index, len(ticks)):
            prev_tick = ticks[position - 1]
            prev_tempo = self._tempos[prev_tick]
            tick = ticks[position]
            msec = self._msec_sum_map[prev_tick] + (tick - prev_tick) * _MS_PER_MINUTE / (
                self.resolution * prev_tempo
            )
            self._msec_sum_map[tick] = msec
            self._rev_msec_sum_map[msec] = tick

    # Time signatures

    def set_time_signature(self, bar: int, time_signature: MusicTimeSignature) -> None:
        self.set_multiple_time_signatures([(bar, time_signature)])

    def remove_time_signature(self, bar: int) -> None:
        self.remove_multiple_time_signatures([bar])

    def set_multiple_time_signatures(
        self, time_signatures: Iterable[tuple[int, MusicTimeSignature]]
    ) -> None:
        """Set signatures at bars; negative bars and invalid signatures are skipped."""
        min_pos: int | None = None
        for bar, value in time_signatures:
            signature = _as_signature(value)
            if bar < 0:
                logger.warning("Position of a time signature must be positive or zero, but read %d.", bar)
                continue
            if not signature.is_valid():
                logger.warning("Invalid time signature '%s'.", signature)
                continue
            if self._time_signatures.get(bar) == signature:
                continue
            self._time_signatures[bar] = signature
            min_pos = bar if min_pos is None else min(min_pos, bar)
        if min_pos is not None:
            self._update_measure_map(min_pos)
            self._emit("time_signature_changed")
            self._emit("changed")

    def remove_multiple_time_signatures(self, bars: Iterable[int]) -> None:
        """Remove signatures at bars; bar 0 and bars without one are skipped."""
        min_pos: int | None = None
        for bar in bars:
            if bar <= 0:
                logger.warning("Position of a time signature must be positive, but read %d.", bar)
                continue
            if self._time_signatures.pop(bar, None) is None:
                logger.warning("Bar %d does not have time signature.", bar)
                continue
            min_pos = bar if min_pos is None else min(min_pos, bar)
        if min_pos is not None:
            self._update_measure_map(min_pos)
            self._emit("time_signature_changed")
            self._emit("changed")

    def time_signatures(self) -> list[tuple[int, MusicTimeSignature]]:
        return list(self._time_signatures.items())

    def bars_with_time_signature(self) -> list[int]:
        return list(self._time_signatures.keys())

    def time_signature_at(self, bar: int) -> MusicTimeSignature:
        return self._time_signatures[self.nearest_time_signature_to(bar)]

    def nearest_time_signature_to(self, bar: int) -> int:
        """The bar of the signature in force at ``bar``."""
        if bar < 0:
            logger.warning("Position of a time signature must be positive or zero.")
            return 0
        return _floor_key(self._time_signatures, bar)

    # Tempos

    def set_tempo(self, tick: int, tempo: float) -> None:
        self.set_multiple_tempos([(tick, tempo)])

    def remove_tempo(self, tick: int) -> None:
        self.remove_multiple_tempos([tick])

    def set_multiple_tempos(self, tempos: Iterable[tuple[int, float]]) -> None:
        """Set tempos at ticks; negative ticks and non-positive tempos are skipped."""
        min_pos: int | None = None
        for tick, tempo in tempos:
            if tick < 0:
                logger.warning("Position of a tempo must be positive or zero, but read %d.", tick)
                continue
            if tempo <= 0:
                logger.warning("Invalid tempo '%s'.", tempo)
                continue
            if self._tempos.get(tick) == tempo:
                continue
            self._tempos[tick] = float(tempo)
            min_pos = tick if min_pos is None else min(min_pos, tick)
        if min_pos is not None:
            self._update_msec_sum_map(min_pos)
            self._emit("tempo_changed")
            self._emit("changed")

    def remove_multiple_tempos(self, ticks: Iterable[int]) -> None:
        """Remove tempos at ticks; tick 0 and ticks without one are skipped."""
        min_pos: int | None = None
        for tick in ticks:
            if tick <= 0:
                logger.warning("Position of a tempo must be positive, but read %d.", tick)
                continue
            if self._tempos.pop(tick, None) is None:
                logger.warning("Tick %d does not have tempo.", tick)
                continue
            min_pos = tick if min_pos is None else min(min_pos, tick)
        if min_pos is not None:
            self._update_msec_sum_map(min_pos)
            self._emit("tempo_changed")
            self._emit("changed")

    def tempos(self) -> list[tuple[int, float]]:
        return list(self._tempos.items())

    def ticks_with_tempo(self) -> list[int]:
        return list(self._tempos.keys())

    def tempo_at(self, tick: int) -> float:
        return self._tempos[self.nearest_tempo_to(tick)]

    def nearest_tempo_to(self, tick: int) -> int:
        """The tick of the tempo in force at ``tick``."""
        if tick < 0:
            logger.warning("Position of a tempo must be positive or zero.")
            return 0
        return _floor_key(self._tempos, tick)

    # Conversions

    def tick_to_time(self, total_tick: int) -> MusicTime:
        """Split an absolute tick into zero-based measure, beat and tick."""
        ref_tick = 0 if total_tick < 0 else _floor_key(self._measure_map, total_tick)
        ref_measure = self._measure_map[ref_tick]
        signature = self._time_signatures[ref_measure]
        per_bar = signature.ticks_per_bar(self.resolution)
        per_beat = signature.ticks_per_beat(self.resolution)
        offset = total_tick - ref_tick
        within_bar = _trunc_mod(offset, per_bar)
        return MusicTime(
            ref_measure + _trunc_div(offset, per_bar),
            _trunc_div(within_bar, per_beat),
            _trunc_mod(within_bar, per_beat),
        )

    def tick_to_msec(self, total_tick: int) -> float:
        ref_tick = self.nearest_tempo_to(total_tick)
        tempo = self._tempos[ref_tick]
        ref_msec = self._msec_sum_map[ref_tick]
        return ref_msec + (total_tick - ref_tick) * _MS_PER_MINUTE / (self.resolution * tempo)

    def time_to_tick(self, measure: int, beat: int, tick: int) -> int:
        """Absolute tick of a zero-based position; 0 if any part is negative."""
        if measure < 0 or beat < 0 or tick < 0:
            return 0
        if measure == 0 and beat == 0:
            return tick
        signature = self.time_signature_at(measure)
        ref_measure = self.nearest_time_signature_to(measure)
        ref_tick = self._rev_measure_map[ref_measure]
        tick += ref_tick + (measure - ref_measure) * signature.ticks_per_bar(self.resolution)
        tick += beat * signature.ticks_per_beat(self.resolution)
        return tick

    def string_to_tick(self, s: str) -> int:
        """Parse one-based ``measure:beat:tick`` text; raise ValueError if it does not fit."""
        match = _MBT_PATTERN.fullmatch(s)
        if match is None:
            raise ValueError(f"invalid music time string: {s!r}")
        measure_text, beat_text, tick_text = match.groups()
        measure = int(measure_text) - 1 if measure_text else 0
        beat = int(beat_text) - 1 if beat_text else 0
        tick = int(tick_text) if tick_text else 0
        return self.time_to_tick(measure, beat, tick)

    def msec_to_tick(self, msec: float) -> int:
        if msec < 0:
            return 0
        ref_msec = _floor_key(self._rev_msec_sum_map, msec)
        ref_tick = self._rev_msec_sum_map[ref_msec]
        tempo = self._tempos[ref_tick]
        delta = math.floor((msec - ref_msec) / _MS_PER_MINUTE * (self.resolution * tempo) + 0.5)
        return ref_tick + delta

    # Persistent times

    def create(self, measure: int = 0, beat: int = 0, tick: int = 0) -> PersistentMusicTime:
        return PersistentMusicTime(self, self.time_to_tick(measure, beat, tick))

    def create_from_time(self, time: MusicTime) -> PersistentMusicTime:
        return self.create(time.measure, time.beat, time.tick)

    def create_from_string(self, s: str) -> PersistentMusicTime:
        return PersistentMusicTime(self, self.string_to_tick(s))

    def create_from_msec(self, msec: float) -> PersistentMusicTime:
        return PersistentMusicTime(self, self.msec_to_tick(msec))