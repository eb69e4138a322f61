"""Wall-clock positions measured in whole milliseconds."""

from __future__ import annotations

import functools
import re

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60_000
_MS_PER_HOUR = 3_600_000

_TIME_PATTERN = re.compile(
    r"\s*(\d*)\s*([:\uff1a]?)\s*(\d*)\s*([:\uff1a]?)\s*(\d*)\s*[.\u3002\uff0e]?\s*(\d*)\s*"
)


def _to_int(text: str) -> int:
    return int(text) if text else 0


@functools.total_ordering
class LongTime:
    """A non-negative duration in milliseconds, shown as ``m:ss.zzz``."""

    __slots__ = ("_t",)

    def __init__(self, msec: int = 0) -> None:
        self._t = max(int(msec), 0)

    @classmethod
    def from_parts(cls, minute: int, second: int, msec: int) -> LongTime:
        """Build a time from minutes, seconds and milliseconds."""
        return cls(_MS_PER_MINUTE * minute + _MS_PER_SECOND * second + msec)

    def minute(self) -> int:
        return self._t // _MS_PER_MINUTE

    def second(self) -> int:
        return self._t % _MS_PER_MINUTE // _MS_PER_SECOND

    def msec(self) -> int:
        return self._t % _MS_PER_SECOND

    def total_msec(self) -> int:
        return self._t

    def to_string(self, minute_width: int = 1, second_width: int = 2, msec_width: int = 3) -> str:
        """Format as ``minute:second.msec``, each part zero-padded to its width."""
        return (
            f"{str(self.minute()).rjust(minute_width, '0')}:"
            f"{str(self.second()).rjust(second_width, '0')}."
            f"{str(self.msec()).rjust(msec_width, '0')}"
        )

    @classmethod
    def from_string(cls, s: str) -> LongTime:
        """Parse ``[h:]m:s[.frac]`` style text; raise ValueError if it does not fit."""
        match = _TIME_PATTERN.fullmatch(s)
        if match is None:
            raise ValueError(f"invalid time string: {s!r}")
        cap1, colon1, cap2, colon2, cap3, cap4 = match.groups()

        if not cap4:
            if not cap2 and not cap3:
                total = _to_int(cap1) * _MS_PER_SECOND
            elif not cap3:
                total = _to_int(cap1) * _MS_PER_MINUTE + _to_int(cap2) * _MS_PER_SECOND
            else:
                total = (
                    _to_int(cap1) * _MS_PER_HOUR
                    + _to_int(cap2) * _MS_PER_MINUTE
                    + _to_int(cap3) * _MS_PER_SECOND
                )
        else:
            fraction = int(float("." + cap4) * _MS_PER_SECOND)
            if not colon1 and not colon2:
                total = _to_int(cap1) * _MS_PER_SECOND + fraction
            elif not colon2:
                total = _to_int(cap1) * _MS_PER_MINUTE + _to_int(cap2) * _MS_PER_SECOND + fraction
            else:
                total = (
                    _to_int(cap1) * _MS_PER_HOUR
                    + _to_int(cap2) * _MS_PER_MINUTE
                    + _to_int(cap3) * _MS_PER_SECOND
                    + fraction
                )
        return cls(total)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LongTime):
            return NotImplemented
        return self._t == other._t

    def __lt__(self, other: LongTime) -> bool:
        if not isinstance(other, LongTime):
            return NotImplemented
        return self._t < other._t

    def __hash__(self) -> int:
        return hash(self._t)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"LongTime({self.to_string()})"