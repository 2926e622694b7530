"""
Domain models for the contact queue feature.

ContactRecord is the read-only snapshot of an alumni row that the queue
pipeline consumes. QueueItem is the derived value the pipeline produces;
items are rebuilt on every run and never persisted.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Literal

PriorityLevel = Literal["birthday", "manual-followup", "contact-slip", "track-slip", "first-touch"]
FollowUpPriority = Literal["none", "low", "normal", "high", "urgent"]
TrackingStatus = Literal["on-track", "near-track", "off-track", "unknown"]

BIRTHDAY: PriorityLevel = "birthday"
MANUAL_FOLLOWUP: PriorityLevel = "manual-followup"
CONTACT_SLIP: PriorityLevel = "contact-slip"
TRACK_SLIP: PriorityLevel = "track-slip"
FIRST_TOUCH: PriorityLevel = "first-touch"

# Cascade order, most urgent first
PRIORITY_LEVELS: tuple[PriorityLevel, ...] = (
    BIRTHDAY,
    MANUAL_FOLLOWUP,
    CONTACT_SLIP,
    TRACK_SLIP,
    FIRST_TOUCH,
)

FOLLOW_UP_PRIORITIES = frozenset({"none", "low", "normal", "high", "urgent"})
TRACKING_STATUSES = frozenset({"on-track", "near-track", "off-track", "unknown"})

_TRUE_STRINGS = {"true", "yes", "y", "1"}
_FALSE_STRINGS = {"false", "no", "n", "0"}


class ContactQueueError(Exception):
    """Base error for the contact queue feature."""


class InvalidContactRecordError(ContactQueueError):
    """Raised when a raw row cannot be turned into a ContactRecord at all."""


@dataclass(slots=True, frozen=True)
class ContactRecord:
    """Alumni contact snapshot as seen by the queue. Owned by the record store."""

    id: int
    first_name: str = ""
    last_name: str = ""
    last_contact_date: date | None = None
    last_contact_connected: bool | None = None  # True connected, False failed, None unknown
    date_of_birth: date | None = None
    pinned: bool = False
    do_not_contact: bool = False
    snoozed_until: date | None = None
    queue_skipped_until: date | None = None
    latest_follow_up_priority: FollowUpPriority | None = None
    latest_follow_up_date: date | None = None
    tracking_status: TrackingStatus | None = None
    support_category: str | None = None
    currently_enrolled: bool = False
    path_type: str | None = None
    cohort_year: int | None = None

    @property
    def sort_name(self) -> str:
        """Name as "Last, First", used for alphabetical tie-breaks."""
        return f"{self.last_name}, {self.first_name}"

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "ContactRecord":
        """
        Build a record from a loosely typed row (API JSON or a database row).

        Accepts camelCase or snake_case keys. Malformed optional fields are
        treated as absent; only a missing or non-integer id is rejected.

        Raises:
            InvalidContactRecordError: If the row has no usable integer id
        """
        record_id = _parse_int(_pick(row, "id", "alumniId", "alumni_id"))
        if record_id is None:
            raise InvalidContactRecordError(f"Contact record has no valid id: {row.get('id')!r}")

        return cls(
            id=record_id,
            first_name=_parse_text(_pick(row, "firstName", "first_name")) or "",
            last_name=_parse_text(_pick(row, "lastName", "last_name")) or "",
            last_contact_date=_parse_date(_pick(row, "lastContactDate", "last_contact_date")),
            last_contact_connected=_parse_bool(
                _pick(row, "lastContactConnected", "last_contact_connected"), default=None
            ),
            date_of_birth=_parse_date(_pick(row, "dateOfBirth", "date_of_birth")),
            pinned=_parse_bool(_pick(row, "pinned"), default=False),
            do_not_contact=_parse_bool(_pick(row, "doNotContact", "do_not_contact"), default=False),
            snoozed_until=_parse_date(_pick(row, "snoozedUntil", "snoozed_until")),
            queue_skipped_until=_parse_date(_pick(row, "queueSkippedUntil", "queue_skipped_until")),
            latest_follow_up_priority=_parse_choice(
                _pick(row, "latestFollowUpPriority", "latest_follow_up_priority"),
                FOLLOW_UP_PRIORITIES,
            ),
            latest_follow_up_date=_parse_date(_pick(row, "latestFollowUpDate", "latest_follow_up_date")),
            tracking_status=_parse_choice(_pick(row, "trackingStatus", "tracking_status"), TRACKING_STATUSES),
            support_category=_parse_text(_pick(row, "supportCategory", "support_category")),
            currently_enrolled=_parse_bool(
                _pick(row, "currentlyEnrolled", "currently_enrolled"), default=False
            ),
            path_type=_parse_text(_pick(row, "pathType", "path_type")),
            cohort_year=_parse_int(_pick(row, "cohortYear", "cohort_year")),
        )


@dataclass(slots=True, frozen=True)
class QueueItem:
    """One ranked entry of the contact queue."""

    record: ContactRecord
    priority: int  # lower = more urgent
    priority_level: PriorityLevel
    priority_reason: str
    days_since_last_contact: int  # NEVER_CONTACTED_DAYS when never contacted
    is_overdue: bool
    risk_score: int


@dataclass(slots=True, frozen=True)
class SlipResult:
    has_slipped: bool
    description: str | None
    urgency: int


@dataclass(slots=True, frozen=True)
class FirstTouchScore:
    priority: int
    reason: str


def _pick(row: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in row:
            return row[key]
    return None


def _parse_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _parse_bool(value: Any, default: bool | None) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        # 0/1 flags from database rows
        if value in (0, 1):
            return value == 1
        return default
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return default


def _parse_date(value: Any) -> date | None:
    """Parse ISO dates; a datetime (or datetime string) contributes its date part."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def _parse_choice(value: Any, choices: frozenset[str]) -> Any:
    text = _parse_text(value)
    if text is None:
        return None
    lowered = text.lower()
    return lowered if lowered in choices else None
