"""
Contact recency helpers shared by every queue stage.
"""

from datetime import date
from typing import Literal

from app.features.contact_queue.domain.models import ContactRecord

RecencyTier = Literal["RECENT", "MODERATE", "DISTANT", "STALE"]

RECENT: RecencyTier = "RECENT"
MODERATE: RecencyTier = "MODERATE"
DISTANT: RecencyTier = "DISTANT"
STALE: RecencyTier = "STALE"

# Upper bound (inclusive) in days for each tier; anything beyond is STALE
_TIER_UPPER_BOUNDS: tuple[tuple[RecencyTier, int], ...] = (
    (RECENT, 7),
    (MODERATE, 21),
    (DISTANT, 45),
)

NEVER_CONTACTED_DAYS = 999


def classify_recency(days_since_contact: int) -> RecencyTier:
    """Bucket days since last contact: 0-7 RECENT, 8-21 MODERATE, 22-45 DISTANT, 46+ STALE."""
    for tier, upper_bound in _TIER_UPPER_BOUNDS:
        if days_since_contact <= upper_bound:
            return tier
    return STALE


def days_since_contact(record: ContactRecord, today: date) -> int | None:
    """Whole days between the last contact and today, None when never contacted."""
    if record.last_contact_date is None:
        return None
    return (today - record.last_contact_date).days
