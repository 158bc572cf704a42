"""
Smart allocation.

Two tiers:
1. Coverage check: exact minute-resolution bitmap for a chosen set of staff
2. Recommendation: greedy pick of staff when nothing is selected yet

Staff-subset coverage optimisation is a covering problem; with a handful of
candidates per event the greedy pass is good enough.
"""

import logging
from typing import Optional

from lensroster.core.config import settings

from .timeslots import clip, merge_intervals, window_bounds
from .types import (
    AllocationRecommendation,
    SmartAllocationResult,
    StaffAvailability,
    TimeSlot,
)


logger = logging.getLogger(__name__)


def coverage_percentage(covered_minutes: int, total_minutes: int) -> int:
    """
    Integer percentage, rounded half up.
    Never reports 100 while any minute is uncovered.
    """
    if total_minutes <= 0:
        return 0
    covered_minutes = max(0, min(covered_minutes, total_minutes))
    percentage = (covered_minutes * 200 + total_minutes) // (total_minutes * 2)
    if covered_minutes < total_minutes:
        percentage = min(percentage, 99)
    return percentage


def build_coverage_map(
    selected: list[StaffAvailability],
    window_start: int,
    window_end: int,
) -> list[bool]:
    """One flag per minute of the window, True where someone selected is free."""
    duration = window_end - window_start
    coverage_map = [False] * duration

    for availability in selected:
        if availability.is_fully_available:
            return [True] * duration
        for slot in availability.available_time_slots:
            start, end = clip(slot.start_minutes, slot.end_minutes, window_start, window_end)
            for i in range(start - window_start, end - window_start):
                coverage_map[i] = True

    return coverage_map


def find_gaps(coverage_map: list[bool], window_start: int, window_end: int) -> list[TimeSlot]:
    """Maximal uncovered runs of the coverage map as wall-clock slots."""
    gaps: list[TimeSlot] = []
    gap_start = -1

    for i, is_covered in enumerate(coverage_map):
        if not is_covered and gap_start == -1:
            gap_start = i
        elif is_covered and gap_start != -1:
            gaps.append(TimeSlot.from_minutes(window_start + gap_start, window_start + i))
            gap_start = -1

    # trailing gap closes on the window end itself
    if gap_start != -1:
        gaps.append(TimeSlot.from_minutes(window_start + gap_start, window_end))

    return gaps


def compute_coverage(
    selected_staff_ids: list[str],
    staff_availability: list[StaffAvailability],
    start_time: Optional[str],
    end_time: Optional[str],
) -> Optional[SmartAllocationResult]:
    """
    Coverage of the event window by the selected staff.

    staff_availability should already be filtered to one role.

    Returns:
        None when either time is missing or nothing is selected.

    Raises:
        InvalidTimeError / InvalidWindowError for malformed or inverted windows
    """
    if not start_time or not end_time or not selected_staff_ids:
        return None

    window_start, window_end = window_bounds(start_time, end_time)
    selected_ids = set(selected_staff_ids)
    selected = [a for a in staff_availability if a.staff.id in selected_ids]

    coverage_map = build_coverage_map(selected, window_start, window_end)
    covered = sum(coverage_map)

    return SmartAllocationResult(
        coverage_percentage=coverage_percentage(covered, len(coverage_map)),
        gaps=find_gaps(coverage_map, window_start, window_end),
    )


def _pick_slot(
    availability: StaffAvailability,
    covered: list[bool],
    window_start: int,
    window_end: int,
    prefer_max_gain: bool,
) -> Optional[tuple[int, int]]:
    """
    Choose the slot this candidate would contribute, or None if it adds nothing.
    First-fit by default; with prefer_max_gain the slot adding the most new minutes.
    """
    best: Optional[tuple[int, int]] = None
    best_gain = 0

    for slot in availability.available_time_slots:
        start, end = clip(slot.start_minutes, slot.end_minutes, window_start, window_end)
        gain = sum(1 for i in range(start - window_start, end - window_start) if not covered[i])
        if gain == 0:
            continue
        if not prefer_max_gain:
            return start, end
        if gain > best_gain:
            best, best_gain = (start, end), gain

    return best


def recommend_allocation(
    staff_availability: list[StaffAvailability],
    start_time: str,
    end_time: str,
    prefer_max_gain: Optional[bool] = None,
) -> AllocationRecommendation:
    """
    Suggest staff to cover the event window.

    Strategy:
    1. Any fully available candidate wins on its own
    2. Otherwise rank partial candidates by total free minutes
    3. Accept each candidate whose slot adds uncovered minutes, until covered
    4. Merge accepted slots to get coverage and gaps
    """
    if prefer_max_gain is None:
        prefer_max_gain = settings.RECOMMEND_MAX_GAIN

    window_start, window_end = window_bounds(start_time, end_time)
    duration = window_end - window_start

    for availability in staff_availability:
        if availability.is_fully_available:
            logger.debug("Recommending fully available staff %s", availability.staff.id)
            return AllocationRecommendation(
                recommended_staff=[availability.staff.id],
                coverage_gaps=[],
                total_coverage=100,
                covered_slots=[TimeSlot.from_minutes(window_start, window_end)],
            )

    ranked = sorted(
        (a for a in staff_availability if a.available_time_slots),
        key=lambda a: a.free_minutes,
        reverse=True,
    )

    covered = [False] * duration
    recommended: list[str] = []
    chosen: list[tuple[int, int]] = []

    for availability in ranked:
        if all(covered):
            break
        picked = _pick_slot(availability, covered, window_start, window_end, prefer_max_gain)
        if picked is None:
            continue
        start, end = picked
        for i in range(start - window_start, end - window_start):
            covered[i] = True
        recommended.append(availability.staff.id)
        chosen.append(picked)

    merged = merge_intervals(chosen)
    covered_minutes = sum(end - start for start, end in merged)

    gaps: list[TimeSlot] = []
    cursor = window_start
    for start, end in merged:
        if start > cursor:
            gaps.append(TimeSlot.from_minutes(cursor, start))
        cursor = max(cursor, end)
    if cursor < window_end:
        gaps.append(TimeSlot.from_minutes(cursor, window_end))

    logger.debug("Recommended %s covering %d/%d minutes", recommended, covered_minutes, duration)

    return AllocationRecommendation(
        recommended_staff=recommended,
        coverage_gaps=gaps,
        total_coverage=coverage_percentage(covered_minutes, duration),
        covered_slots=[TimeSlot.from_minutes(start, end) for start, end in chosen],
    )
