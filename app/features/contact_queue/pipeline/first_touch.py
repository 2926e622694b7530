"""
First-touch scoring for records with no slip or follow-up signal.
"""

from typing import Literal

from app.features.contact_queue.domain.models import ContactRecord, FirstTouchScore

SupportNeed = Literal["high", "medium", "low"]

_SUPPORT_PRIORITY: dict[SupportNeed, tuple[int, str]] = {
    "high": (1, "High support"),
    "medium": (2, "Medium support"),
    "low": (3, "Low support"),
}

VOCATIONAL_PATH_TYPES = {"vocational", "vocation"}


def classify_support_need(support_category: str | None) -> SupportNeed:
    """
    Map the free-text support category onto a need level.

    Substring match, case-insensitive: "high" wins over "low", anything else
    (including a missing category) is medium.
    """
    category = (support_category or "").lower()
    if "high" in category:
        return "high"
    if "low" in category:
        return "low"
    return "medium"


def school_status(record: ContactRecord) -> tuple[int, str]:
    if record.currently_enrolled:
        return 1, "In school"
    if (record.path_type or "").strip().lower() in VOCATIONAL_PATH_TYPES:
        return 2, "Vocational training"
    return 3, "No school"


def score_first_touch(record: ContactRecord) -> FirstTouchScore:
    """Combine support need and school status into one sortable score (11-33)."""
    support_priority, support_label = _SUPPORT_PRIORITY[classify_support_need(record.support_category)]
    school_priority, school_label = school_status(record)
    return FirstTouchScore(
        priority=support_priority * 10 + school_priority,
        reason=f"{support_label}, {school_label}",
    )
