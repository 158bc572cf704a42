"""
Time-interval utilities.
Wall-clock "HH:MM" strings are converted to minutes since midnight at the edges;
everything in between works on plain integers.
"""

import re


MINUTES_PER_DAY = 24 * 60

# seconds are tolerated because database `time` columns serialise as HH:MM:SS
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


class InvalidTimeError(ValueError):
    pass


class InvalidWindowError(ValueError):
    pass


def time_to_minutes(time_str: str) -> int:
    """Parse "HH:MM" into minutes after midnight."""
    match = _TIME_RE.match(str(time_str).strip())
    if not match:
        raise InvalidTimeError(f"Malformed time {time_str!r}, expected HH:MM")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidTimeError(f"Time out of range: {time_str!r}")
    return hours * 60 + minutes


def minutes_to_time(minutes: int) -> str:
    """Format minutes after midnight as zero-padded "HH:MM"."""
    if minutes < 0 or minutes >= MINUTES_PER_DAY:
        raise InvalidTimeError(f"{minutes} minutes is outside a single day")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def overlaps(start_a: int, end_a: int, start_b: int, end_b: int) -> bool:
    """Half-open overlap check. Touching endpoints do not overlap."""
    return start_a < end_b and end_a > start_b


def merge_intervals(slots: list[tuple[int, int]]) -> list[tuple[int, int]]:
    """Merge overlapping or adjacent (start, end) intervals."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted(slots):
        if merged and start <= merged[-1][1]:
            prev_start, prev_end = merged[-1]
            merged[-1] = (prev_start, max(prev_end, end))
        else:
            merged.append((start, end))
    return merged


def window_bounds(start_time: str, end_time: str) -> tuple[int, int]:
    """
    Parse a same-day interval (event window or schedule) into minute bounds.

    Raises:
        InvalidTimeError: if either time is malformed
        InvalidWindowError: if the interval is empty, inverted or crosses midnight
    """
    start = time_to_minutes(start_time)
    end = time_to_minutes(end_time)
    if end <= start:
        raise InvalidWindowError(
            f"Interval must end after it starts ({start_time}-{end_time}); "
            "windows crossing midnight are not supported"
        )
    return start, end


def clip(start: int, end: int, window_start: int, window_end: int) -> tuple[int, int]:
    """Clip an interval to the window. Result may be empty (start >= end)."""
    return max(start, window_start), min(end, window_end)
