"""Split a millisecond duration into labelled, zero-padded parts.

Usage::

    get_time_parts(3_661_000)
    # {'ms': '000', 's': '01', 'm': '01', 'h': '01', 'd': '00'}
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeUnit:
    """One display unit.

    ``next_unit_factor`` is how many of this unit make the next one; the
    last unit uses ``1`` and is not wrapped.
    """

    type: str
    milliseconds: int
    next_unit_factor: int
    width: int = 2

    def value_of(self, duration_ms: int) -> int:
        value = int(duration_ms // self.milliseconds)
        if self.next_unit_factor > 1:
            value %= self.next_unit_factor
        return value

    def format(self, value: int) -> str:
        return str(value).zfill(self.width)


# ordered smallest → largest
DEFAULT_UNITS: tuple[TimeUnit, ...] = (
    TimeUnit("ms", 1, 1000, width=3),
    TimeUnit("s", 1000, 60),
    TimeUnit("m", 60_000, 60),
    TimeUnit("h", 3_600_000, 24),
    TimeUnit("d", 86_400_000, 1),
)


def get_time_parts(
    duration_ms: int | float,
    units: tuple[TimeUnit, ...] | list[TimeUnit] = DEFAULT_UNITS,
) -> dict[str, str]:
    """Break *duration_ms* into *units*.  Negative input uses its magnitude."""
    duration_ms = abs(duration_ms)
    return {unit.type: unit.format(unit.value_of(duration_ms)) for unit in units}


def format_clock(duration_ms: int | float) -> str:
    """``HH:MM:SS:mmm``.  Hours wrap at 24; days are not shown."""
    p = get_time_parts(duration_ms)
    return f"{p['h']}:{p['m']}:{p['s']}:{p['ms']}"
