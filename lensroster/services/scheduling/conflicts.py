"""
Conflict detection.
Finds the parts of a staff member's week that clash with an event window.
"""

import logging
from datetime import date
from typing import Iterator, Optional

from .timeslots import overlaps
from .types import (
    ConflictSlot,
    EventWindow,
    LeaveDate,
    Schedule,
    StaffMember,
)


logger = logging.getLogger(__name__)

LEAVE_REASON = "On leave"
REGULAR_SCHEDULE_REASON = "Regular schedule"
DEFAULT_SUBJECT_LABEL = "Class"


def is_on_leave(staff: StaffMember, event_date: date) -> bool:
    """Check if any leave period contains the date (both ends inclusive)."""
    return any(leave.contains(event_date) for leave in staff.leave_dates)


def active_leave_dates(leave_dates: list[LeaveDate], today: date) -> list[LeaveDate]:
    """Drop leave periods that ended before today."""
    return [leave for leave in leave_dates if leave.end_date >= today]


def _regular_schedules(staff: StaffMember) -> list[Schedule]:
    return [s for s in staff.schedules if not s.is_subject_schedule]


def _subject_schedules(staff: StaffMember) -> Iterator[tuple[Schedule, Optional[str]]]:
    """
    Yield (schedule, subject name) for every class schedule.

    Class schedules may be listed on the staff member (with a back-reference),
    under their SubjectSchedule, or both. Each entry is yielded once.
    """
    names = {ss.id: ss.subject for ss in staff.subject_schedules}
    seen: set[tuple] = set()

    candidates: list[tuple[Schedule, Optional[str]]] = []
    for schedule in staff.schedules:
        if schedule.is_subject_schedule:
            candidates.append((schedule, names.get(schedule.subject_schedule_id) or schedule.subject))
    for subject_schedule in staff.subject_schedules:
        for schedule in subject_schedule.schedules:
            candidates.append((schedule, subject_schedule.subject or schedule.subject))

    for schedule, subject in candidates:
        key = (schedule.day_of_week, schedule.start_time, schedule.end_time, subject)
        if key in seen:
            continue
        seen.add(key)
        yield schedule, subject


def _schedule_clashes(schedule: Schedule, window: EventWindow) -> bool:
    if schedule.day_of_week != window.day_of_week:
        return False
    return overlaps(
        schedule.start_minutes,
        schedule.end_minutes,
        window.start_minutes,
        window.end_minutes,
    )


def find_conflicts(staff: StaffMember, window: EventWindow) -> list[ConflictSlot]:
    """
    List everything blocking a staff member during the event window.

    Leave short-circuits to a single conflict covering the whole window.
    Schedule conflicts keep the schedule's own times (not clipped).
    Class schedules are skipped for class-suspended events.
    """
    if is_on_leave(staff, window.event_date):
        logger.debug("Staff %s on leave for %s", staff.id, window.event_date)
        return [ConflictSlot(window.start_time, window.end_time, LEAVE_REASON)]

    conflicts: list[ConflictSlot] = []

    for schedule in _regular_schedules(staff):
        if _schedule_clashes(schedule, window):
            conflicts.append(ConflictSlot(
                schedule.start_time, schedule.end_time, REGULAR_SCHEDULE_REASON
            ))

    if window.class_suspended_event:
        return conflicts

    for schedule, subject in _subject_schedules(staff):
        if _schedule_clashes(schedule, window):
            label = subject or DEFAULT_SUBJECT_LABEL
            conflicts.append(ConflictSlot(
                schedule.start_time, schedule.end_time, f"{label} schedule"
            ))

    return conflicts
