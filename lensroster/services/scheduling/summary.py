"""
Human-readable summaries of availability and coverage for selection and report views.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Iterable, Union

from lensroster.core.config import settings

from .availability import compute_availability, sort_by_availability
from .types import StaffAvailability, StaffMember, TimeSlot


class CoverageLevel(str, Enum):
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"


@dataclass
class AssignmentTimeline:
    """Availability of staff already assigned to an event, grouped by role."""
    videographers: list[StaffAvailability] = field(default_factory=list)
    photographers: list[StaffAvailability] = field(default_factory=list)


def format_time_slots(slots: Iterable[TimeSlot]) -> str:
    return ", ".join(f"{slot.start_time}-{slot.end_time}" for slot in slots)


def get_conflict_reason(availability: StaffAvailability) -> str:
    if availability.conflicting_time_slots:
        return availability.conflicting_time_slots[0].reason
    return "Schedule conflict"


def get_detailed_conflict_reasons(availability: StaffAvailability) -> str:
    if not availability.conflicting_time_slots:
        return "No conflicts"
    reasons = {c.reason for c in availability.conflicting_time_slots}
    return ", ".join(sorted(reasons))


def get_coverage_level(coverage_percentage: int) -> CoverageLevel:
    if coverage_percentage >= settings.COVERAGE_GOOD_THRESHOLD:
        return CoverageLevel.GOOD
    if coverage_percentage >= settings.COVERAGE_FAIR_THRESHOLD:
        return CoverageLevel.FAIR
    return CoverageLevel.POOR


def build_assignment_timeline(
    staff_list: list[StaffMember],
    event_date: Union[str, date],
    start_time: str,
    end_time: str,
    assigned_videographers: list[str],
    assigned_photographers: list[str],
) -> AssignmentTimeline:
    """
    Real availability of the staff assigned to an event.
    Overrides are not applied so the report shows actual clashes.
    """
    assigned_ids = set(assigned_videographers) | set(assigned_photographers)
    assigned_staff = [member for member in staff_list if member.id in assigned_ids]

    availability = compute_availability(assigned_staff, event_date, start_time, end_time)

    videographer_ids = set(assigned_videographers)
    photographer_ids = set(assigned_photographers)
    return AssignmentTimeline(
        videographers=sort_by_availability(
            [a for a in availability if a.staff.id in videographer_ids]
        ),
        photographers=sort_by_availability(
            [a for a in availability if a.staff.id in photographer_ids]
        ),
    )
