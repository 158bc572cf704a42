import pytest
from datetime import date, timedelta
from typing import Optional

from lensroster.services.scheduling.types import (
    LeaveDate,
    Schedule,
    StaffAvailability,
    StaffMember,
    StaffRole,
    SubjectSchedule,
    TimeSlot,
)


def get_test_monday() -> date:
    # returns a fixed Monday for deterministic tests (day_of_week 1)
    return date(2024, 5, 6)


def get_test_tuesday() -> date:
    return get_test_monday() + timedelta(days=1)


def make_staff(
    staff_id: str,
    roles: tuple[StaffRole, ...] = (StaffRole.VIDEOGRAPHER,),
    schedules: Optional[list[Schedule]] = None,
    subject_schedules: Optional[list[SubjectSchedule]] = None,
    leave_dates: Optional[list[LeaveDate]] = None,
) -> StaffMember:
    return StaffMember(
        id=staff_id,
        name=f"Staff {staff_id}",
        roles=frozenset(roles),
        schedules=schedules or [],
        subject_schedules=subject_schedules or [],
        leave_dates=leave_dates or [],
    )


def make_availability(
    staff_id: str,
    slots: Optional[list[tuple[str, str]]] = None,
    fully: bool = False,
    roles: tuple[StaffRole, ...] = (StaffRole.VIDEOGRAPHER,),
) -> StaffAvailability:
    # builds an availability result directly, bypassing conflict detection
    return StaffAvailability(
        staff=make_staff(staff_id, roles=roles),
        is_fully_available=fully,
        available_time_slots=[TimeSlot(s, e) for s, e in (slots or [])],
    )


@pytest.fixture
def monday_class_staff() -> StaffMember:
    # regular commitment Monday 09:00-10:00
    return make_staff("s1", schedules=[
        Schedule(day_of_week=1, start_time="09:00", end_time="10:00"),
    ])


@pytest.fixture
def staff_on_leave() -> StaffMember:
    return make_staff("s2", leave_dates=[
        LeaveDate(start_date=date(2024, 5, 1), end_date=date(2024, 5, 3)),
    ])


@pytest.fixture
def cs101_staff() -> StaffMember:
    # class schedule Tuesday 13:00-14:00, listed under its subject
    return make_staff("s3", subject_schedules=[
        SubjectSchedule(id="sub-1", subject="CS101", schedules=[
            Schedule(day_of_week=2, start_time="13:00", end_time="14:00",
                     subject="CS101", subject_schedule_id="sub-1"),
        ]),
    ])


@pytest.fixture
def mixed_roster() -> list[StaffMember]:
    # v1 free, v2 busy 10:00-11:00 Monday, p1 photographer free, both1 holds both roles
    return [
        make_staff("v1"),
        make_staff("v2", schedules=[
            Schedule(day_of_week=1, start_time="10:00", end_time="11:00"),
        ]),
        make_staff("p1", roles=(StaffRole.PHOTOGRAPHER,)),
        make_staff("both1", roles=(StaffRole.VIDEOGRAPHER, StaffRole.PHOTOGRAPHER)),
        make_staff("gone", roles=(StaffRole.PHOTOGRAPHER,), leave_dates=[
            LeaveDate(start_date=get_test_monday(), end_date=get_test_monday()),
        ]),
    ]
