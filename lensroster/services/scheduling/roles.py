"""
Role partitioning.
One person cannot cover two roles at the same event, so each role's
candidate list excludes whoever the other role already claimed.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from lensroster.core.config import settings

from .types import StaffAvailability, StaffRole


class SelectionError(ValueError):
    pass


@dataclass
class RoleCandidates:
    videographers: list[StaffAvailability] = field(default_factory=list)
    photographers: list[StaffAvailability] = field(default_factory=list)

    def for_role(self, role: StaffRole) -> list[StaffAvailability]:
        if role is StaffRole.VIDEOGRAPHER:
            return self.videographers
        return self.photographers


def filter_role_candidates(
    staff_availability: list[StaffAvailability],
    role: StaffRole,
    exclude_staff_ids: Iterable[str] = (),
) -> list[StaffAvailability]:
    """
    Selectable staff for a role.
    Staff with no free time at all are left out rather than shown disabled.
    """
    excluded = set(exclude_staff_ids)
    return [
        a for a in staff_availability
        if a.staff.has_role(role)
        and a.staff.id not in excluded
        and a.is_selectable
    ]


def partition_by_role(
    staff_availability: list[StaffAvailability],
    selected_videographers: Iterable[str] = (),
    selected_photographers: Iterable[str] = (),
) -> RoleCandidates:
    """Candidate lists for both roles, each excluding the other role's selection."""
    return RoleCandidates(
        videographers=filter_role_candidates(
            staff_availability, StaffRole.VIDEOGRAPHER, exclude_staff_ids=selected_photographers
        ),
        photographers=filter_role_candidates(
            staff_availability, StaffRole.PHOTOGRAPHER, exclude_staff_ids=selected_videographers
        ),
    )


def split_by_status(
    candidates: list[StaffAvailability],
) -> tuple[list[StaffAvailability], list[StaffAvailability]]:
    """Split candidates into (fully available, partially available)."""
    fully = [a for a in candidates if a.is_fully_available]
    partially = [a for a in candidates if not a.is_fully_available and a.available_time_slots]
    return fully, partially


def toggle_staff_selection(
    selected_ids: list[str],
    staff_id: str,
    max_selection: Optional[int] = None,
    exclude_staff_ids: Iterable[str] = (),
) -> list[str]:
    """
    Add or remove a staff id from a role's selection. Returns a new list.

    Raises:
        SelectionError: adding an id claimed by the other role, or past max_selection
    """
    if max_selection is None:
        max_selection = settings.MAX_STAFF_PER_ROLE

    if staff_id in selected_ids:
        return [s for s in selected_ids if s != staff_id]

    if staff_id in set(exclude_staff_ids):
        raise SelectionError(f"Staff {staff_id} is already assigned to the other role")
    if len(selected_ids) >= max_selection:
        raise SelectionError(f"Cannot select more than {max_selection} staff for this role")

    return [*selected_ids, staff_id]
