from pydantic import BaseModel
from datetime import date
from typing import List, Optional

from lensroster.services.scheduling.types import (
    AvailabilityStatus,
    LeaveDate,
    Schedule,
    StaffAvailability,
    StaffMember,
    StaffRole,
    SubjectSchedule,
)
from lensroster.services.scheduling.summary import CoverageLevel


class ScheduleIn(BaseModel):
    id: Optional[str] = None
    day_of_week: int  # 0 = Sunday .. 6 = Saturday
    start_time: str  # HH:MM
    end_time: str
    subject: Optional[str] = None
    subject_schedule_id: Optional[str] = None

    def to_domain(self) -> Schedule:
        return Schedule(**self.model_dump())


class SubjectScheduleIn(BaseModel):
    id: str
    subject: str
    schedules: List[ScheduleIn] = []

    def to_domain(self) -> SubjectSchedule:
        return SubjectSchedule(
            id=self.id,
            subject=self.subject,
            schedules=[s.to_domain() for s in self.schedules],
        )


class LeaveDateIn(BaseModel):
    start_date: date
    end_date: date

    def to_domain(self) -> LeaveDate:
        return LeaveDate(start_date=self.start_date, end_date=self.end_date)


class StaffMemberIn(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    roles: List[StaffRole]
    schedules: List[ScheduleIn] = []
    subject_schedules: List[SubjectScheduleIn] = []
    leave_dates: List[LeaveDateIn] = []

    def to_domain(self) -> StaffMember:
        return StaffMember(
            id=self.id,
            name=self.name,
            email=self.email,
            roles=frozenset(self.roles),
            schedules=[s.to_domain() for s in self.schedules],
            subject_schedules=[s.to_domain() for s in self.subject_schedules],
            leave_dates=[leave.to_domain() for leave in self.leave_dates],
        )


class AvailabilityRequest(BaseModel):
    staff: List[StaffMemberIn] = []
    event_date: date
    start_time: str
    end_time: str
    ignore_schedule_conflicts: bool = False
    class_suspended_event: bool = False


class CandidatesRequest(AvailabilityRequest):
    selected_videographers: List[str] = []
    selected_photographers: List[str] = []


class CoverageRequest(AvailabilityRequest):
    role: StaffRole
    selected_staff_ids: List[str] = []


class RecommendationRequest(AvailabilityRequest):
    role: StaffRole
    exclude_staff_ids: List[str] = []
    prefer_max_gain: Optional[bool] = None


class SelectionToggleRequest(BaseModel):
    selected_staff_ids: List[str] = []
    staff_id: str
    exclude_staff_ids: List[str] = []
    max_selection: Optional[int] = None


class TimeSlotResponse(BaseModel):
    start_time: str
    end_time: str

    class Config:
        from_attributes = True


class ConflictSlotResponse(TimeSlotResponse):
    reason: str


class StaffAvailabilityResponse(BaseModel):
    staff_id: str
    staff_name: str
    roles: List[StaffRole]
    status: AvailabilityStatus
    is_fully_available: bool
    available_time_slots: List[TimeSlotResponse]
    conflicting_time_slots: List[ConflictSlotResponse]

    @classmethod
    def from_domain(cls, availability: StaffAvailability) -> "StaffAvailabilityResponse":
        return cls(
            staff_id=availability.staff.id,
            staff_name=availability.staff.name,
            roles=sorted(availability.staff.roles, key=lambda r: r.value),
            status=availability.status,
            is_fully_available=availability.is_fully_available,
            available_time_slots=[
                TimeSlotResponse.model_validate(s) for s in availability.available_time_slots
            ],
            conflicting_time_slots=[
                ConflictSlotResponse.model_validate(c) for c in availability.conflicting_time_slots
            ],
        )


class CandidatesResponse(BaseModel):
    videographers: List[StaffAvailabilityResponse]
    photographers: List[StaffAvailabilityResponse]


class CoverageResponse(BaseModel):
    coverage_percentage: int
    coverage_level: CoverageLevel
    gaps: List[TimeSlotResponse]


class RecommendationResponse(BaseModel):
    recommended_staff: List[str]
    coverage_gaps: List[TimeSlotResponse]
    total_coverage: int
    covered_slots: List[TimeSlotResponse]

    class Config:
        from_attributes = True


class SelectionToggleResponse(BaseModel):
    selected_staff_ids: List[str]
