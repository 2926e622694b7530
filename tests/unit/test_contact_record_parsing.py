from datetime import date, datetime

import pytest

from app.features.contact_queue.domain.models import ContactRecord, InvalidContactRecordError


def test_from_mapping_reads_camel_case_rows():
    record = ContactRecord.from_mapping(
        {
            "id": 42,
            "firstName": "Grace",
            "lastName": "Hopper",
            "lastContactDate": "2024-01-01",
            "lastContactConnected": True,
            "dateOfBirth": "2001-12-09",
            "pinned": False,
            "doNotContact": False,
            "snoozedUntil": None,
            "queueSkippedUntil": "2024-01-21T00:00:00.000Z",
            "latestFollowUpPriority": "High",
            "latestFollowUpDate": "2024-01-19",
            "trackingStatus": "Off-track",
            "supportCategory": "Persistence-College",
            "currentlyEnrolled": True,
            "pathType": "college",
            "cohortYear": 2020,
        }
    )

    assert record.id == 42
    assert record.sort_name == "Hopper, Grace"
    assert record.last_contact_date == date(2024, 1, 1)
    assert record.last_contact_connected is True
    assert record.date_of_birth == date(2001, 12, 9)
    assert record.queue_skipped_until == date(2024, 1, 21)
    assert record.latest_follow_up_priority == "high"
    assert record.tracking_status == "off-track"
    assert record.currently_enrolled is True
    assert record.cohort_year == 2020


def test_from_mapping_reads_snake_case_and_native_types():
    record = ContactRecord.from_mapping(
        {
            "id": 7,
            "first_name": "Alan",
            "last_name": "Turing",
            "last_contact_date": datetime(2024, 1, 5, 15, 30),
            "snoozed_until": date(2024, 2, 1),
            "do_not_contact": "yes",
        }
    )

    assert record.last_contact_date == date(2024, 1, 5)
    assert record.snoozed_until == date(2024, 2, 1)
    assert record.do_not_contact is True


def test_malformed_optional_fields_degrade_to_absent():
    record = ContactRecord.from_mapping(
        {
            "id": "9",
            "lastContactDate": "not a date",
            "lastContactConnected": "maybe",
            "dateOfBirth": 19990101,
            "trackingStatus": "sideways",
            "latestFollowUpPriority": "whenever",
            "pinned": "sometimes",
            "cohortYear": "class of 2020",
        }
    )

    assert record.id == 9
    assert record.last_contact_date is None
    assert record.last_contact_connected is None
    assert record.date_of_birth is None
    assert record.tracking_status is None
    assert record.latest_follow_up_priority is None
    assert record.pinned is False
    assert record.cohort_year is None


@pytest.mark.parametrize("row", [{}, {"id": None}, {"id": "abc"}, {"id": True}, {"id": 1.5}])
def test_from_mapping_requires_an_integer_id(row):
    with pytest.raises(InvalidContactRecordError):
        ContactRecord.from_mapping(row)


@pytest.mark.parametrize(
    ("field", "attribute"),
    [
        ("doNotContact", "do_not_contact"),
        ("pinned", "pinned"),
        ("currentlyEnrolled", "currently_enrolled"),
    ],
)
def test_integer_flags_from_database_rows(field, attribute):
    on = ContactRecord.from_mapping({"id": 1, field: 1})
    off = ContactRecord.from_mapping({"id": 1, field: 0})
    odd = ContactRecord.from_mapping({"id": 1, field: 7})

    assert getattr(on, attribute) is True
    assert getattr(off, attribute) is False
    assert getattr(odd, attribute) is False


def test_integer_connected_flag_keeps_unknown_for_other_values():
    assert ContactRecord.from_mapping({"id": 1, "lastContactConnected": 1}).last_contact_connected is True
    assert ContactRecord.from_mapping({"id": 1, "lastContactConnected": 0}).last_contact_connected is False
    assert ContactRecord.from_mapping({"id": 1, "lastContactConnected": 2}).last_contact_connected is None


def test_whole_number_floats_are_accepted_for_id_and_cohort():
    record = ContactRecord.from_mapping({"id": 12.0, "cohortYear": 2021.0})

    assert record.id == 12
    assert record.cohort_year == 2021
    assert ContactRecord.from_mapping({"id": 3, "cohortYear": 2021.5}).cohort_year is None
