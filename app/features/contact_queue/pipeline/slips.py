"""
Slip detectors: flag records whose contact recency or tracking status is degrading.
"""

from datetime import date

from app.features.contact_queue.domain.models import ContactRecord, SlipResult

from .recency import DISTANT, MODERATE, STALE, classify_recency, days_since_contact

NO_SLIP = SlipResult(has_slipped=False, description=None, urgency=0)

FAILED_CONTACT_RETRY_DAYS = 5
FAILED_CONTACT_URGENCY = 4

_CONTACT_SLIPS = {
    MODERATE: (3, "Contact frequency declining - reach out soon"),
    DISTANT: (2, "Haven't connected in a while - needs outreach"),
    STALE: (1, "Long gap in communication - urgent reconnection needed"),
}

# near-track carries urgency 2, off-track urgency 1
_TRACK_SLIPS = {
    "near-track": (2, "Academic progress declining - intervention needed"),
    "off-track": (1, "Academic progress at risk - immediate support required"),
}


def detect_contact_slip(record: ContactRecord, today: date) -> SlipResult:
    """
    Detect a contact-recency slip.

    Never-contacted records do not slip; they are first-touch candidates. A
    failed attempt within the retry window beats any time bucket.
    """
    days_since = days_since_contact(record, today)
    if days_since is None:
        return NO_SLIP

    if record.last_contact_connected is False and days_since <= FAILED_CONTACT_RETRY_DAYS:
        return SlipResult(
            has_slipped=True,
            description="Recent contact attempt failed - retry needed",
            urgency=FAILED_CONTACT_URGENCY,
        )

    slip = _CONTACT_SLIPS.get(classify_recency(days_since))
    if slip is None:
        return NO_SLIP
    urgency, description = slip
    return SlipResult(has_slipped=True, description=description, urgency=urgency)


def detect_track_slip(record: ContactRecord) -> SlipResult:
    slip = _TRACK_SLIPS.get(record.tracking_status or "")
    if slip is None:
        return NO_SLIP
    urgency, description = slip
    return SlipResult(has_slipped=True, description=description, urgency=urgency)
