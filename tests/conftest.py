from datetime import date, timedelta

import pytest

from app.features.contact_queue.domain.models import ContactRecord

TODAY = date(2024, 1, 20)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def days_ago():
    def _days_ago(days: int) -> date:
        return TODAY - timedelta(days=days)

    return _days_ago


@pytest.fixture
def record_factory():
    def _build(**overrides) -> ContactRecord:
        fields = {
            "id": 1,
            "first_name": "Ada",
            "last_name": "Lovelace",
        }
        fields.update(overrides)
        return ContactRecord(**fields)

    return _build
