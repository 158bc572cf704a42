"""
Availability checking utilities.
Determines when each staff member is free during an event window.
"""

import logging
from datetime import date, datetime
from typing import Union

from .conflicts import find_conflicts
from .timeslots import InvalidWindowError, clip, overlaps
from .types import (
    AvailabilityStatus,
    ConflictSlot,
    EventWindow,
    StaffAvailability,
    StaffMember,
    TimeSlot,
)


logger = logging.getLogger(__name__)


def subtract_conflicts(window: EventWindow, conflicts: list[ConflictSlot]) -> list[TimeSlot]:
    """Return the ordered free sub-intervals of the window once conflicts are removed."""
    window_start, window_end = window.start_minutes, window.end_minutes

    relevant = [
        (c.start_minutes, c.end_minutes)
        for c in conflicts
        if overlaps(c.start_minutes, c.end_minutes, window_start, window_end)
    ]
    relevant.sort()

    free: list[TimeSlot] = []
    current = window_start
    for start, end in relevant:
        clipped_start, clipped_end = clip(start, end, window_start, window_end)
        if current < clipped_start:
            free.append(TimeSlot.from_minutes(current, clipped_start))
        current = max(current, clipped_end)

    if current < window_end:
        free.append(TimeSlot.from_minutes(current, window_end))

    return free


def resolve_availability(staff: StaffMember, window: EventWindow) -> StaffAvailability:
    """Classify one staff member for the window."""
    if window.ignore_schedule_conflicts:
        return StaffAvailability(
            staff=staff,
            is_fully_available=True,
            available_time_slots=[window.as_time_slot()],
            conflicting_time_slots=[],
        )

    window_start, window_end = window.start_minutes, window.end_minutes
    conflicts = [
        c for c in find_conflicts(staff, window)
        if overlaps(c.start_minutes, c.end_minutes, window_start, window_end)
    ]
    conflicts.sort(key=lambda c: c.start_minutes)

    if not conflicts:
        return StaffAvailability(
            staff=staff,
            is_fully_available=True,
            available_time_slots=[window.as_time_slot()],
            conflicting_time_slots=[],
        )

    return StaffAvailability(
        staff=staff,
        is_fully_available=False,
        available_time_slots=subtract_conflicts(window, conflicts),
        conflicting_time_slots=conflicts,
    )


def _parse_event_date(event_date: Union[str, date]) -> date:
    if isinstance(event_date, datetime):
        return event_date.date()
    if isinstance(event_date, date):
        return event_date
    try:
        return date.fromisoformat(str(event_date))
    except ValueError as e:
        raise InvalidWindowError(f"Malformed event date {event_date!r}, expected YYYY-MM-DD") from e


def compute_availability(
    staff_list: list[StaffMember],
    event_date: Union[str, date],
    start_time: str,
    end_time: str,
    ignore_schedule_conflicts: bool = False,
    class_suspended_event: bool = False,
) -> list[StaffAvailability]:
    """
    Compute availability for every staff member for one event.

    Args:
        staff_list: Roster snapshot; never mutated
        event_date: "YYYY-MM-DD" or a date
        start_time: "HH:MM"
        end_time: "HH:MM", must be after start_time on the same day
        ignore_schedule_conflicts: Report everyone as fully available
        class_suspended_event: Skip class (subject) schedule conflicts

    Returns:
        One StaffAvailability per staff member, in roster order.

    Raises:
        InvalidTimeError: malformed start/end time
        InvalidWindowError: malformed date or end <= start
    """
    window = EventWindow(
        event_date=_parse_event_date(event_date),
        start_time=start_time,
        end_time=end_time,
        ignore_schedule_conflicts=ignore_schedule_conflicts,
        class_suspended_event=class_suspended_event,
    )

    if ignore_schedule_conflicts:
        logger.debug("Schedule conflicts ignored for %s %s-%s", window.event_date, start_time, end_time)

    return [resolve_availability(member, window) for member in staff_list]


def sort_by_availability(items: list[StaffAvailability]) -> list[StaffAvailability]:
    """
    Sort by availability: fully available first, then partial, then unavailable.
    Stable within each group.
    """
    order = {
        AvailabilityStatus.FULLY_AVAILABLE: 0,
        AvailabilityStatus.PARTIALLY_AVAILABLE: 1,
        AvailabilityStatus.UNAVAILABLE: 2,
    }
    return sorted(items, key=lambda a: order[a.status])
