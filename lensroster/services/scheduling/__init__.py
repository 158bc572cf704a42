"""
Staff availability and allocation engine.

Usage:
    from lensroster.services.scheduling import (
        compute_availability,
        compute_coverage,
        partition_by_role,
        recommend_allocation,
    )

    availability = compute_availability(staff, "2024-05-06", "09:00", "11:00")
    candidates = partition_by_role(availability, selected_videographers=["v1"])

    coverage = compute_coverage(["p1", "p2"], candidates.photographers, "09:00", "11:00")
    suggestion = recommend_allocation(candidates.photographers, "09:00", "11:00")
"""

from .types import (
    StaffRole,
    AvailabilityStatus,
    Schedule,
    SubjectSchedule,
    LeaveDate,
    StaffMember,
    EventWindow,
    TimeSlot,
    ConflictSlot,
    StaffAvailability,
    SmartAllocationResult,
    AllocationRecommendation,
)
from .timeslots import (
    InvalidTimeError,
    InvalidWindowError,
    time_to_minutes,
    minutes_to_time,
    overlaps,
    merge_intervals,
)
from .conflicts import find_conflicts, is_on_leave, active_leave_dates
from .availability import (
    compute_availability,
    resolve_availability,
    subtract_conflicts,
    sort_by_availability,
)
from .allocation import compute_coverage, recommend_allocation
from .roles import (
    RoleCandidates,
    SelectionError,
    filter_role_candidates,
    partition_by_role,
    split_by_status,
    toggle_staff_selection,
)
from .summary import (
    AssignmentTimeline,
    CoverageLevel,
    build_assignment_timeline,
    format_time_slots,
    get_conflict_reason,
    get_coverage_level,
    get_detailed_conflict_reasons,
)

__all__ = [
    # Types
    "StaffRole",
    "AvailabilityStatus",
    "Schedule",
    "SubjectSchedule",
    "LeaveDate",
    "StaffMember",
    "EventWindow",
    "TimeSlot",
    "ConflictSlot",
    "StaffAvailability",
    "SmartAllocationResult",
    "AllocationRecommendation",
    "RoleCandidates",
    "AssignmentTimeline",
    "CoverageLevel",
    # Errors
    "InvalidTimeError",
    "InvalidWindowError",
    "SelectionError",
    # Main entry points
    "compute_availability",
    "compute_coverage",
    "recommend_allocation",
    "partition_by_role",
    # Lower-level functions
    "time_to_minutes",
    "minutes_to_time",
    "overlaps",
    "merge_intervals",
    "find_conflicts",
    "is_on_leave",
    "active_leave_dates",
    "resolve_availability",
    "subtract_conflicts",
    "sort_by_availability",
    "filter_role_candidates",
    "split_by_status",
    "toggle_staff_selection",
    "build_assignment_timeline",
    "format_time_slots",
    "get_conflict_reason",
    "get_coverage_level",
    "get_detailed_conflict_reasons",
]
