"""
Hard gates deciding whether a record is considered for the queue at all.
"""

from datetime import date

from app.features.contact_queue.domain.models import ContactRecord

from .recency import days_since_contact

CONNECTED_COOLDOWN_DAYS = 7
FAILED_FIRST_RETRY_COOLDOWN_DAYS = 5
FAILED_RETRY_WINDOW_DAYS = 5
DEFAULT_COOLDOWN_DAYS = 3


def is_birthday(record: ContactRecord, today: date) -> bool:
    """True when today's month and day match the date of birth (year ignored)."""
    dob = record.date_of_birth
    if dob is None:
        return False
    return dob.month == today.month and dob.day == today.day


def cooldown_days(record: ContactRecord, days_since: int) -> int:
    """
    Minimum days after the last contact before the record is eligible again.

    A successful contact rests for a week. A failed attempt waits 5 days at
    first, then the window tightens to the default 3 days.
    """
    if record.last_contact_connected is True:
        return CONNECTED_COOLDOWN_DAYS
    if record.last_contact_connected is False:
        if days_since < FAILED_RETRY_WINDOW_DAYS:
            return FAILED_FIRST_RETRY_COOLDOWN_DAYS
        return DEFAULT_COOLDOWN_DAYS
    return DEFAULT_COOLDOWN_DAYS


def should_exclude(record: ContactRecord, today: date) -> bool:
    """
    Decide whether a record is kept out of this queue run.

    Order matters: do-not-contact is absolute, a birthday then overrides
    snooze, skip and cooldown.
    """
    if record.do_not_contact:
        return True

    if is_birthday(record, today):
        return False

    if record.snoozed_until is not None and record.snoozed_until > today:
        return True

    if record.queue_skipped_until is not None and record.queue_skipped_until > today:
        return True

    days_since = days_since_contact(record, today)
    if days_since is not None and days_since < cooldown_days(record, days_since):
        return True

    return False
