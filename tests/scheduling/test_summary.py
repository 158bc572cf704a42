import pytest

from lensroster.services.scheduling.types import ConflictSlot, TimeSlot
from lensroster.services.scheduling.summary import (
    CoverageLevel,
    build_assignment_timeline,
    format_time_slots,
    get_conflict_reason,
    get_coverage_level,
    get_detailed_conflict_reasons,
)

from conftest import make_availability


class TestFormatTimeSlots:
    def test_joins_slots(self):
        slots = [TimeSlot("09:00", "10:00"), TimeSlot("11:00", "12:00")]
        assert format_time_slots(slots) == "09:00-10:00, 11:00-12:00"

    def test_empty(self):
        assert format_time_slots([]) == ""


class TestConflictReasons:
    def test_first_reason(self):
        availability = make_availability("a")
        availability.conflicting_time_slots = [
            ConflictSlot("09:00", "10:00", "MAT051 schedule"),
            ConflictSlot("10:00", "11:00", "Regular schedule"),
        ]
        assert get_conflict_reason(availability) == "MAT051 schedule"

    def test_default_reason(self):
        assert get_conflict_reason(make_availability("a")) == "Schedule conflict"

    def test_detailed_reasons_unique_and_sorted(self):
        availability = make_availability("a")
        availability.conflicting_time_slots = [
            ConflictSlot("11:00", "12:00", "Regular schedule"),
            ConflictSlot("09:00", "10:00", "CS101 schedule"),
            ConflictSlot("13:00", "14:00", "CS101 schedule"),
        ]
        assert get_detailed_conflict_reasons(availability) == "CS101 schedule, Regular schedule"

    def test_no_conflicts(self):
        assert get_detailed_conflict_reasons(make_availability("a")) == "No conflicts"


class TestGetCoverageLevel:
    @pytest.mark.parametrize("coverage, expected", [
        (100, CoverageLevel.GOOD),
        (90, CoverageLevel.GOOD),
        (89, CoverageLevel.FAIR),
        (70, CoverageLevel.FAIR),
        (69, CoverageLevel.POOR),
        (0, CoverageLevel.POOR),
    ])
    def test_thresholds(self, coverage, expected):
        assert get_coverage_level(coverage) == expected


class TestBuildAssignmentTimeline:
    def test_groups_and_sorts_assigned_staff(self, mixed_roster):
        timeline = build_assignment_timeline(
            mixed_roster, "2024-05-06", "09:00", "12:00",
            assigned_videographers=["v2", "v1"],
            assigned_photographers=["gone", "p1"],
        )
        # fully available first, then partial, then unavailable
        assert [a.staff.id for a in timeline.videographers] == ["v1", "v2"]
        assert [a.staff.id for a in timeline.photographers] == ["p1", "gone"]

    def test_unassigned_staff_left_out(self, mixed_roster):
        timeline = build_assignment_timeline(
            mixed_roster, "2024-05-06", "09:00", "12:00",
            assigned_videographers=["v1"],
            assigned_photographers=[],
        )
        assert [a.staff.id for a in timeline.videographers] == ["v1"]
        assert timeline.photographers == []
