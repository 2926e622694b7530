from zoneinfo import ZoneInfo

from app.config import Settings


def test_defaults_need_no_environment():
    config = Settings(_env_file=None)

    assert config.CONTACT_QUEUE_TIMEZONE == "UTC"
    assert config.CONTACT_QUEUE_MY_QUEUE_SIZE == 5
    assert config.CONTACT_QUEUE_MAX_RESULTS == 500


def test_unknown_timezone_falls_back_to_utc():
    config = Settings(_env_file=None, CONTACT_QUEUE_TIMEZONE="Nowhere/Land")

    assert config.queue_timezone() == ZoneInfo("UTC")


def test_queue_today_uses_configured_timezone():
    config = Settings(_env_file=None, CONTACT_QUEUE_TIMEZONE="Pacific/Kiritimati")

    assert config.queue_timezone() == ZoneInfo("Pacific/Kiritimati")
    assert config.queue_today() is not None
