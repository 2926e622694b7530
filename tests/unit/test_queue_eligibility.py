from datetime import date, timedelta

from app.features.contact_queue.pipeline.eligibility import cooldown_days, is_birthday, should_exclude


def test_record_without_flags_or_history_is_eligible(record_factory, today):
    assert should_exclude(record_factory(), today) is False


def test_do_not_contact_is_absolute_even_on_birthday(record_factory, today):
    record = record_factory(do_not_contact=True, date_of_birth=date(2000, today.month, today.day))

    assert is_birthday(record, today) is True
    assert should_exclude(record, today) is True


def test_birthday_overrides_snooze_skip_and_cooldown(record_factory, today, days_ago):
    record = record_factory(
        date_of_birth=date(1999, today.month, today.day),
        snoozed_until=today + timedelta(days=365),
        queue_skipped_until=today + timedelta(days=1),
        last_contact_date=days_ago(1),
        last_contact_connected=True,
    )

    assert should_exclude(record, today) is False


def test_birthday_ignores_year_but_not_day(record_factory, today):
    assert is_birthday(record_factory(date_of_birth=date(1980, 1, 20)), today) is True
    assert is_birthday(record_factory(date_of_birth=date(1980, 1, 21)), today) is False
    assert is_birthday(record_factory(date_of_birth=None), today) is False


def test_snooze_excludes_only_while_in_the_future(record_factory, today):
    assert should_exclude(record_factory(snoozed_until=today + timedelta(days=1)), today) is True
    assert should_exclude(record_factory(snoozed_until=today), today) is False
    assert should_exclude(record_factory(snoozed_until=today - timedelta(days=3)), today) is False


def test_daily_skip_excludes_until_tomorrow(record_factory, today):
    assert should_exclude(record_factory(queue_skipped_until=today + timedelta(days=1)), today) is True
    assert should_exclude(record_factory(queue_skipped_until=today), today) is False


def test_successful_contact_rests_for_a_week(record_factory, today, days_ago):
    recent = record_factory(last_contact_date=days_ago(6), last_contact_connected=True)
    rested = record_factory(last_contact_date=days_ago(7), last_contact_connected=True)

    assert should_exclude(recent, today) is True
    assert should_exclude(rested, today) is False


def test_failed_contact_cooldown_tightens_after_five_days(record_factory, today, days_ago):
    four_days = record_factory(last_contact_date=days_ago(4), last_contact_connected=False)
    six_days = record_factory(last_contact_date=days_ago(6), last_contact_connected=False)

    assert cooldown_days(four_days, 4) == 5
    assert cooldown_days(six_days, 6) == 3
    assert should_exclude(four_days, today) is True
    assert should_exclude(six_days, today) is False


def test_unknown_outcome_uses_default_cooldown(record_factory, today, days_ago):
    assert should_exclude(record_factory(last_contact_date=days_ago(2)), today) is True
    assert should_exclude(record_factory(last_contact_date=days_ago(3)), today) is False
