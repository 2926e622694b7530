"""
Read-only views over a generated queue: alternate orderings, grouping,
the counselor's "my queue" split, level metadata and debug explanations.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from .domain.models import (
    BIRTHDAY,
    CONTACT_SLIP,
    FIRST_TOUCH,
    MANUAL_FOLLOWUP,
    PRIORITY_LEVELS,
    TRACK_SLIP,
    ContactQueueError,
    PriorityLevel,
    QueueItem,
)


class UnknownSortModeError(ContactQueueError):
    """Raised for a sort mode the dashboard does not offer."""


@dataclass(slots=True, frozen=True)
class PriorityLevelInfo:
    level: PriorityLevel
    label: str
    description: str


_LEVEL_INFO = {
    BIRTHDAY: PriorityLevelInfo(BIRTHDAY, "Birthday", "Birthday contact due"),
    MANUAL_FOLLOWUP: PriorityLevelInfo(MANUAL_FOLLOWUP, "Manual", "Scheduled follow-up due"),
    CONTACT_SLIP: PriorityLevelInfo(CONTACT_SLIP, "Contact", "Contact status slipped to lower tier"),
    TRACK_SLIP: PriorityLevelInfo(TRACK_SLIP, "Track", "Track status slipped to lower tier"),
    FIRST_TOUCH: PriorityLevelInfo(FIRST_TOUCH, "1st Touch", "Make initial contact"),
}

_TRACK_STATUS_ORDER = {"off-track": 0, "near-track": 1, "on-track": 2}

DEFAULT_SORT_MODE = "smart-priority"


def _first_last(item: QueueItem) -> str:
    return item.record.display_name.casefold()


def _by_priority(item: QueueItem) -> Any:
    return item.priority


def _by_cohort_then_name(item: QueueItem) -> Any:
    # newest cohort first, missing cohort last
    return (-(item.record.cohort_year or 0), _first_last(item))


def _by_last_contact(item: QueueItem) -> Any:
    return (-item.days_since_last_contact, _first_last(item))


def _by_support_needs(item: QueueItem) -> Any:
    category = item.record.support_category
    return (category is None, (category or "").casefold(), _first_last(item))


def _by_track_status(item: QueueItem) -> Any:
    return (_TRACK_STATUS_ORDER.get(item.record.tracking_status or "", 3), _first_last(item))


SORT_MODES: dict[str, Callable[[QueueItem], Any]] = {
    "smart-priority": _by_priority,
    "cohort-name": _by_cohort_then_name,
    "name": _first_last,
    "last-contact": _by_last_contact,
    "support-needs": _by_support_needs,
    "track-status": _by_track_status,
}


def reorder_queue(items: Sequence[QueueItem], sort_by: str = DEFAULT_SORT_MODE) -> list[QueueItem]:
    """
    Re-sort an already generated queue for display.

    Sorting is stable, so ties keep their queue order.

    Raises:
        UnknownSortModeError: If sort_by is not one of SORT_MODES
    """
    key = SORT_MODES.get(sort_by)
    if key is None:
        raise UnknownSortModeError(f"Unknown sort mode: {sort_by}")
    return sorted(items, key=key)


def group_by_level(items: Sequence[QueueItem]) -> dict[PriorityLevel, list[QueueItem]]:
    groups: dict[PriorityLevel, list[QueueItem]] = {level: [] for level in PRIORITY_LEVELS}
    for item in items:
        groups[item.priority_level].append(item)
    return groups


def split_queue(items: Sequence[QueueItem], size: int) -> tuple[list[QueueItem], list[QueueItem]]:
    """Split into the counselor's "my queue" (first `size` items) and the rest."""
    if size < 0:
        raise ValueError("Queue size must be zero or greater")
    return list(items[:size]), list(items[size:])


def priority_level_info(level: PriorityLevel) -> PriorityLevelInfo:
    return _LEVEL_INFO[level]


def explain_queue_position(item: QueueItem) -> str:
    record = item.record
    lines = [
        f"Alumni: {record.display_name}",
        f"Priority Level: {item.priority_level} ({item.priority})",
        f"Reason: {item.priority_reason}",
        f"Days Since Contact: {item.days_since_last_contact}",
        f"Overdue: {item.is_overdue}",
        f"Risk Score: {item.risk_score}",
        f"Tracking Status: {record.tracking_status or 'unknown'}",
    ]
    if item.priority_level == BIRTHDAY:
        lines.append("BIRTHDAY TODAY!")
    if record.pinned:
        lines.append("PINNED")
    return "\n".join(lines)
