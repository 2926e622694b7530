import pytest

from app.features.contact_queue.domain.models import PRIORITY_LEVELS, ContactRecord, QueueItem
from app.features.contact_queue.views import (
    UnknownSortModeError,
    explain_queue_position,
    group_by_level,
    priority_level_info,
    reorder_queue,
    split_queue,
)


def _item(record_id, first, last, priority, level="first-touch", days=999, **record_fields):
    record = ContactRecord(id=record_id, first_name=first, last_name=last, **record_fields)
    return QueueItem(
        record=record,
        priority=priority,
        priority_level=level,
        priority_reason="reason",
        days_since_last_contact=days,
        is_overdue=False,
        risk_score=0,
    )


@pytest.fixture
def queue():
    return [
        _item(1, "Cara", "Zane", 10, level="contact-slip", days=30, cohort_year=2019, tracking_status="on-track"),
        _item(2, "Abe", "Young", 2700, level="contact-slip", days=12, cohort_year=2022, support_category="Low"),
        _item(3, "Bea", "Xu", 3800, level="track-slip", days=4, tracking_status="near-track"),
        _item(4, "Dan", "Wu", 4023, support_category="High", tracking_status="off-track", cohort_year=2022),
    ]


def test_smart_priority_keeps_queue_order(queue):
    assert reorder_queue(queue) == queue


def test_name_and_cohort_orderings(queue):
    assert [item.record.id for item in reorder_queue(queue, "name")] == [2, 3, 1, 4]
    assert [item.record.id for item in reorder_queue(queue, "cohort-name")] == [2, 4, 1, 3]


def test_last_contact_support_and_track_orderings(queue):
    assert [item.record.id for item in reorder_queue(queue, "last-contact")] == [4, 1, 2, 3]
    assert [item.record.id for item in reorder_queue(queue, "support-needs")] == [4, 2, 3, 1]
    assert [item.record.id for item in reorder_queue(queue, "track-status")] == [4, 3, 1, 2]


def test_unknown_sort_mode_is_rejected(queue):
    with pytest.raises(UnknownSortModeError):
        reorder_queue(queue, "shoe-size")


def test_group_by_level_covers_every_level_in_order(queue):
    groups = group_by_level(queue)

    assert list(groups) == list(PRIORITY_LEVELS)
    assert [item.record.id for item in groups["contact-slip"]] == [1, 2]
    assert groups["birthday"] == []


def test_split_queue(queue):
    mine, rest = split_queue(queue, 3)

    assert [item.record.id for item in mine] == [1, 2, 3]
    assert [item.record.id for item in rest] == [4]
    assert split_queue(queue, 10) == (queue, [])
    with pytest.raises(ValueError):
        split_queue(queue, -1)


def test_level_info_and_explanation(queue):
    assert priority_level_info("first-touch").label == "1st Touch"

    text = explain_queue_position(queue[2])

    assert "Alumni: Bea Xu" in text
    assert "Priority Level: track-slip (3800)" in text
    assert "Tracking Status: near-track" in text
    assert "PINNED" not in text
