"""
time_source.py

Ordered, immutable index of playable units keyed by time.

Key points
----------
* One ``TimeSource`` class, two ways in: ``from_units()`` for units that
  already carry a time, ``from_mapping()`` for ``{time: unit}`` (or
  ``(time, unit)`` pairs) where the key is written onto each unit.
* Duplicate times are rejected at construction, and so is any unit whose
  own ``time`` disagrees with the key it is stored under.
* ``timestamps``, ``units`` and ``by_time`` are computed once, up front,
  and never change afterwards.
* Lookup of an arbitrary time is O(log n) via ``bisect``.
"""

from __future__ import annotations

import bisect
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Sequence, Tuple, Union

from frames import Time, Unit


class SourceError(ValueError):
    """Units cannot be arranged into a valid TimeSource."""


class DuplicateTimeError(SourceError):
    pass


class MissingTimeError(SourceError):
    pass


# ── Timing resolver ─────────────────────────────────────────────────────────
def resolve_timestamp(timestamps: Sequence[Time], when: Time) -> Time:
    """
    Return the timestamp that governs *when*.

    * an exact match wins
    * before the first timestamp → the first one
    * between two timestamps → the lower one
    * past the last timestamp → the last one (clamped, never an error)

    *timestamps* must be sorted ascending and non-empty.
    """
    if not timestamps:
        raise LookupError("No timestamps to resolve against.")
    idx = bisect.bisect_right(timestamps, when) - 1
    return timestamps[max(0, idx)]


# ── Source ──────────────────────────────────────────────────────────────────
def _sorted_unique(entries: Iterable[Tuple[Time, Unit]]) -> List[Tuple[Time, Unit]]:
    pairs = sorted(entries, key=lambda p: p[0])
    for (a, ua), (b, ub) in zip(pairs, pairs[1:]):
        if a == b:
            raise DuplicateTimeError(f"Time {a} is used by both {ua!r} and {ub!r}.")
    return pairs


class TimeSource:
    """Units in time order.  Build through ``from_units``/``from_mapping``."""

    def __init__(self, entries: Iterable[Tuple[Time, Unit]]) -> None:
        pairs = _sorted_unique(entries)
        for t, unit in pairs:
            if unit.time != t:
                raise SourceError(f"{unit!r} is keyed at {t} but carries time {unit.time}.")

        self._timestamps: Tuple[Time, ...] = tuple(t for t, _ in pairs)
        self._units: Tuple[Unit, ...]      = tuple(u for _, u in pairs)
        self._by_time = MappingProxyType(dict(pairs))

    # ---------------------------------------------------------- factories
    @classmethod
    def from_units(cls, units: Iterable[Unit]) -> "TimeSource":
        units = list(units)
        for u in units:
            if u.time is None:
                raise MissingTimeError(f"{u!r} has no time; use from_mapping() to assign one.")
        return cls((u.time, u) for u in units)

    @classmethod
    def from_mapping(cls, mapping: Union[Mapping[Time, Unit], Iterable[Tuple[Time, Unit]]]) -> "TimeSource":
        pairs = _sorted_unique(mapping.items() if isinstance(mapping, Mapping) else mapping)
        for t, unit in pairs:
            unit.time = t
        return cls(pairs)

    # ---------------------------------------------------------------- views
    @property
    def timestamps(self) -> Tuple[Time, ...]:
        return self._timestamps

    @property
    def units(self) -> Tuple[Unit, ...]:
        return self._units

    @property
    def by_time(self) -> Mapping[Time, Unit]:
        return self._by_time

    def to_dict(self) -> Dict[Time, Unit]:
        return dict(self._by_time)

    # --------------------------------------------------------------- lookup
    def timestamp_at(self, when: Time) -> Time:
        return resolve_timestamp(self._timestamps, when)

    def unit_at(self, when: Time) -> Unit:
        return self._by_time[self.timestamp_at(when)]

    __getitem__ = unit_at

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"TimeSource(timestamps={list(self._timestamps)})"
