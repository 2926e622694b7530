"""
Queue ordering: a strict total order over QueueItems.
"""

from collections.abc import Iterable
from functools import cmp_to_key

from app.features.contact_queue.domain.models import BIRTHDAY, QueueItem


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _name_key(item: QueueItem) -> tuple[str, str, int]:
    # record id last so identical names still resolve
    name = item.record.sort_name
    return (name.casefold(), name, item.record.id)


def compare_items(a: QueueItem, b: QueueItem) -> int:
    """
    Comparator for queue order. Negative when a comes first.

    priority asc; birthdays by oldest date of birth then name; overdue first;
    longest since contact first; highest risk first; then name.
    """
    if a.priority != b.priority:
        return _cmp(a.priority, b.priority)

    if a.priority_level == BIRTHDAY and b.priority_level == BIRTHDAY:
        dob_a, dob_b = a.record.date_of_birth, b.record.date_of_birth
        if dob_a is not None and dob_b is not None and dob_a != dob_b:
            return _cmp(dob_a, dob_b)
        return _cmp(_name_key(a), _name_key(b))

    if a.is_overdue != b.is_overdue:
        return -1 if a.is_overdue else 1

    if a.days_since_last_contact != b.days_since_last_contact:
        return _cmp(b.days_since_last_contact, a.days_since_last_contact)

    if a.risk_score != b.risk_score:
        return _cmp(b.risk_score, a.risk_score)

    return _cmp(_name_key(a), _name_key(b))


def sort_queue(items: Iterable[QueueItem]) -> list[QueueItem]:
    return sorted(items, key=cmp_to_key(compare_items))
