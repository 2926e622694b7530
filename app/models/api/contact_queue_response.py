# app/models/api/contact_queue_response.py
"""
Contact queue API response models.
Used by routes for consistent output formatting.
"""

from datetime import date

from pydantic import BaseModel, Field

from app.features.contact_queue.domain.models import QueueItem


class QueueItemResponse(BaseModel):
    """One ranked queue entry."""

    id: int
    first_name: str
    last_name: str
    priority: int = Field(..., description="Lower is more urgent")
    priority_level: str
    priority_reason: str
    days_since_last_contact: int = Field(..., description="999 when never contacted")
    is_overdue: bool
    risk_score: int
    pinned: bool

    @classmethod
    def from_item(cls, item: QueueItem) -> "QueueItemResponse":
        return cls(
            id=item.record.id,
            first_name=item.record.first_name,
            last_name=item.record.last_name,
            priority=item.priority,
            priority_level=item.priority_level,
            priority_reason=item.priority_reason,
            days_since_last_contact=item.days_since_last_contact,
            is_overdue=item.is_overdue,
            risk_score=item.risk_score,
            pinned=item.record.pinned,
        )


class ContactQueueResponse(BaseModel):
    """Ordered contact queue."""

    today: date
    sort_by: str
    total: int = Field(..., description="Eligible records before limit")
    returned: int
    items: list[QueueItemResponse]
    my_queue_ids: list[int] = Field(default_factory=list)
    counts_by_level: dict[str, int]


class ExplainQueuePositionResponse(BaseModel):
    record_id: int
    position: int = Field(..., description="1-based position in priority order")
    explanation: str


class PriorityLevelInfoResponse(BaseModel):
    level: str
    label: str
    description: str


class PriorityLevelsResponse(BaseModel):
    levels: list[PriorityLevelInfoResponse]
