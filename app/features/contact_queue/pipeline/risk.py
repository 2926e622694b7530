"""
Risk score: secondary ranking signal, independent of the priority cascade.
"""

from datetime import date

from app.features.contact_queue.domain.models import ContactRecord

from .first_touch import classify_support_need
from .recency import days_since_contact

_TRACKING_RISK = {
    "off-track": 30,
    "near-track": 15,
}
CONTACT_GAP_CAP_DAYS = 100
NEVER_CONTACTED_RISK = 50
HIGH_SUPPORT_RISK = 10


def calculate_risk_score(record: ContactRecord, today: date) -> int:
    risk = _TRACKING_RISK.get(record.tracking_status or "", 0)

    days_since = days_since_contact(record, today)
    if days_since is None:
        risk += NEVER_CONTACTED_RISK
    else:
        risk += min(days_since, CONTACT_GAP_CAP_DAYS)

    if classify_support_need(record.support_category) == "high":
        risk += HIGH_SUPPORT_RISK

    return risk
