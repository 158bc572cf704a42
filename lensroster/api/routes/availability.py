import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException, status

from lensroster.schemas.availability import (
    AvailabilityRequest,
    CandidatesRequest,
    CandidatesResponse,
    CoverageRequest,
    CoverageResponse,
    RecommendationRequest,
    RecommendationResponse,
    SelectionToggleRequest,
    SelectionToggleResponse,
    StaffAvailabilityResponse,
    TimeSlotResponse,
)
from lensroster.services.scheduling import (
    InvalidTimeError,
    InvalidWindowError,
    SelectionError,
    StaffAvailability,
    compute_availability,
    compute_coverage,
    filter_role_candidates,
    get_coverage_level,
    partition_by_role,
    recommend_allocation,
    toggle_staff_selection,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/availability", tags=["availability"])


def _compute(payload: AvailabilityRequest) -> List[StaffAvailability]:
    try:
        return compute_availability(
            [member.to_domain() for member in payload.staff],
            payload.event_date,
            payload.start_time,
            payload.end_time,
            ignore_schedule_conflicts=payload.ignore_schedule_conflicts,
            class_suspended_event=payload.class_suspended_event,
        )
    except (InvalidTimeError, InvalidWindowError) as e:
        logger.warning(f"Rejected availability request: {e}")
        raise HTTPException(status_code=422, detail=str(e))


@router.post("", response_model=List[StaffAvailabilityResponse])
def get_staff_availability(payload: AvailabilityRequest):
    """Availability of every staff member in the posted roster"""
    return [StaffAvailabilityResponse.from_domain(a) for a in _compute(payload)]


@router.post("/candidates", response_model=CandidatesResponse)
def get_role_candidates(payload: CandidatesRequest):
    """Selectable staff per role, excluding whoever the other role already claimed"""
    candidates = partition_by_role(
        _compute(payload),
        selected_videographers=payload.selected_videographers,
        selected_photographers=payload.selected_photographers,
    )
    return CandidatesResponse(
        videographers=[StaffAvailabilityResponse.from_domain(a) for a in candidates.videographers],
        photographers=[StaffAvailabilityResponse.from_domain(a) for a in candidates.photographers],
    )


@router.post("/coverage", response_model=Optional[CoverageResponse])
def get_coverage(payload: CoverageRequest):
    """Coverage of the event by the selected staff for one role. null when nothing is selected"""
    role_staff = filter_role_candidates(_compute(payload), payload.role)
    result = compute_coverage(
        payload.selected_staff_ids, role_staff, payload.start_time, payload.end_time
    )
    if result is None:
        return None

    return CoverageResponse(
        coverage_percentage=result.coverage_percentage,
        coverage_level=get_coverage_level(result.coverage_percentage),
        gaps=[TimeSlotResponse.model_validate(g) for g in result.gaps],
    )


@router.post("/recommendation", response_model=RecommendationResponse)
def get_recommendation(payload: RecommendationRequest):
    """Greedy staff suggestion for one role"""
    role_staff = filter_role_candidates(
        _compute(payload), payload.role, exclude_staff_ids=payload.exclude_staff_ids
    )
    recommendation = recommend_allocation(
        role_staff,
        payload.start_time,
        payload.end_time,
        prefer_max_gain=payload.prefer_max_gain,
    )
    return RecommendationResponse.model_validate(recommendation)


@router.post("/selection", response_model=SelectionToggleResponse)
def toggle_selection(payload: SelectionToggleRequest):
    """Add or remove one staff member from a role's selection"""
    try:
        selected = toggle_staff_selection(
            payload.selected_staff_ids,
            payload.staff_id,
            max_selection=payload.max_selection,
            exclude_staff_ids=payload.exclude_staff_ids,
        )
    except SelectionError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return SelectionToggleResponse(selected_staff_ids=selected)
