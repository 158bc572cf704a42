"""
Internal data types for availability and allocation logic.
decoupled from the API schemas so the engine can run in any host.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from .timeslots import (
    InvalidTimeError,
    InvalidWindowError,
    minutes_to_time,
    time_to_minutes,
    window_bounds,
)


class StaffRole(str, Enum):
    VIDEOGRAPHER = "Videographer"
    PHOTOGRAPHER = "Photographer"

    @property
    def complement(self) -> "StaffRole":
        if self is StaffRole.VIDEOGRAPHER:
            return StaffRole.PHOTOGRAPHER
        return StaffRole.VIDEOGRAPHER


class AvailabilityStatus(str, Enum):
    FULLY_AVAILABLE = "FULLY_AVAILABLE"
    PARTIALLY_AVAILABLE = "PARTIALLY_AVAILABLE"
    UNAVAILABLE = "UNAVAILABLE"


@dataclass
class Schedule:
    """
    A recurring weekly commitment. Never spans midnight.

    Raises InvalidTimeError for a malformed time or a weekday outside 0..6,
    InvalidWindowError when end <= start.
    """
    day_of_week: int  # 0 = Sunday .. 6 = Saturday
    start_time: str
    end_time: str
    subject: Optional[str] = None
    subject_schedule_id: Optional[str] = None  # set for class schedules
    id: Optional[str] = None
    start_minutes: int = field(init=False, repr=False, compare=False)
    end_minutes: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not 0 <= self.day_of_week <= 6:
            raise InvalidTimeError(
                f"Invalid day_of_week {self.day_of_week!r}, expected 0 (Sunday) to 6 (Saturday)"
            )
        self.start_minutes, self.end_minutes = window_bounds(self.start_time, self.end_time)

    @property
    def is_subject_schedule(self) -> bool:
        return self.subject_schedule_id is not None


@dataclass
class SubjectSchedule:
    id: str
    subject: str
    schedules: list[Schedule] = field(default_factory=list)


@dataclass
class LeaveDate:
    start_date: date
    end_date: date  # inclusive

    def __post_init__(self):
        if self.start_date > self.end_date:
            raise InvalidWindowError(
                f"Leave must not end before it starts ({self.start_date} to {self.end_date})"
            )

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass
class StaffMember:
    id: str
    name: str
    roles: frozenset[StaffRole]
    email: Optional[str] = None
    schedules: list[Schedule] = field(default_factory=list)
    subject_schedules: list[SubjectSchedule] = field(default_factory=list)
    leave_dates: list[LeaveDate] = field(default_factory=list)

    def has_role(self, role: StaffRole) -> bool:
        return role in self.roles


@dataclass(frozen=True)
class TimeSlot:
    """Half-open wall-clock interval [start_time, end_time)."""
    start_time: str
    end_time: str
    start_minutes: int = field(init=False, repr=False, compare=False)
    end_minutes: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "start_minutes", time_to_minutes(self.start_time))
        object.__setattr__(self, "end_minutes", time_to_minutes(self.end_time))

    @classmethod
    def from_minutes(cls, start: int, end: int) -> "TimeSlot":
        return cls(minutes_to_time(start), minutes_to_time(end))

    @property
    def duration_minutes(self) -> int:
        return max(0, self.end_minutes - self.start_minutes)


@dataclass(frozen=True)
class ConflictSlot:
    start_time: str
    end_time: str
    reason: str
    start_minutes: int = field(init=False, repr=False, compare=False)
    end_minutes: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "start_minutes", time_to_minutes(self.start_time))
        object.__setattr__(self, "end_minutes", time_to_minutes(self.end_time))


@dataclass(frozen=True)
class EventWindow:
    """
    The date and time span being staffed, plus the event's override policies.

    Raises InvalidWindowError on construction when end <= start.
    """
    event_date: date
    start_time: str
    end_time: str
    ignore_schedule_conflicts: bool = False
    class_suspended_event: bool = False
    start_minutes: int = field(init=False, repr=False, compare=False)
    end_minutes: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        start, end = window_bounds(self.start_time, self.end_time)
        object.__setattr__(self, "start_minutes", start)
        object.__setattr__(self, "end_minutes", end)

    @property
    def duration_minutes(self) -> int:
        return self.end_minutes - self.start_minutes

    @property
    def day_of_week(self) -> int:
        """0 = Sunday, matching Schedule.day_of_week."""
        return (self.event_date.weekday() + 1) % 7

    def as_time_slot(self) -> TimeSlot:
        return TimeSlot(self.start_time, self.end_time)


@dataclass
class StaffAvailability:
    """Availability of one staff member for one event window."""
    staff: StaffMember
    is_fully_available: bool
    available_time_slots: list[TimeSlot] = field(default_factory=list)
    conflicting_time_slots: list[ConflictSlot] = field(default_factory=list)

    @property
    def has_free_time(self) -> bool:
        return self.is_fully_available or len(self.available_time_slots) > 0

    @property
    def is_selectable(self) -> bool:
        return self.has_free_time

    @property
    def status(self) -> AvailabilityStatus:
        if self.is_fully_available:
            return AvailabilityStatus.FULLY_AVAILABLE
        if self.available_time_slots:
            return AvailabilityStatus.PARTIALLY_AVAILABLE
        return AvailabilityStatus.UNAVAILABLE

    @property
    def free_minutes(self) -> int:
        return sum(slot.duration_minutes for slot in self.available_time_slots)


@dataclass
class SmartAllocationResult:
    """Coverage of one event window by one set of selected staff."""
    coverage_percentage: int  # 0-100
    gaps: list[TimeSlot] = field(default_factory=list)

    @property
    def is_fully_covered(self) -> bool:
        return self.coverage_percentage == 100


@dataclass
class AllocationRecommendation:
    """Output of the greedy recommender."""
    recommended_staff: list[str]
    coverage_gaps: list[TimeSlot]
    total_coverage: int
    covered_slots: list[TimeSlot] = field(default_factory=list)
