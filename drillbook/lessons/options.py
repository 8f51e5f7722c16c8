"""Options: how much ice cream is left at a given hour."""

from __future__ import annotations

_U16_MAX = 2**16 - 1


def maybe_icecream(time_of_day: int) -> int | None:
    """5 pieces before 22:00, none left until midnight, None for hours past 23."""
    if not 0 <= time_of_day <= _U16_MAX:
        raise ValueError(f"time of day out of range: {time_of_day}")
    if time_of_day < 22:
        return 5
    if time_of_day <= 23:
        return 0
    return None