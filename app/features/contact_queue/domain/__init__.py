"""
Domain subpackage for the contact queue feature.
"""

from .models import (
    BIRTHDAY,
    CONTACT_SLIP,
    FIRST_TOUCH,
    MANUAL_FOLLOWUP,
    PRIORITY_LEVELS,
    TRACK_SLIP,
    ContactQueueError,
    ContactRecord,
    FirstTouchScore,
    InvalidContactRecordError,
    PriorityLevel,
    QueueItem,
    SlipResult,
)

__all__ = [
    "BIRTHDAY",
    "CONTACT_SLIP",
    "FIRST_TOUCH",
    "MANUAL_FOLLOWUP",
    "PRIORITY_LEVELS",
    "TRACK_SLIP",
    "ContactQueueError",
    "ContactRecord",
    "FirstTouchScore",
    "InvalidContactRecordError",
    "PriorityLevel",
    "QueueItem",
    "SlipResult",
]
