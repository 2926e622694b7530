# app/models/api/contact_queue_request.py
"""
Contact queue API request models.
Used by routes for input validation.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field


class ContactQueueRequest(BaseModel):
    """Request for generating the contact queue from a record snapshot."""

    # Rows stay loosely typed; malformed optional fields degrade to "absent"
    records: list[dict[str, Any]] = Field(
        default_factory=list, description="Alumni contact records (camelCase or snake_case keys)"
    )
    today: date | None = Field(
        default=None, description="Evaluation date (default: today in the queue timezone)"
    )
    sort_by: str = Field(default="smart-priority", description="Display ordering of the queue")
    limit: int | None = Field(default=None, ge=1, description="Maximum items to return")
    my_queue_size: int | None = Field(
        default=None, ge=0, le=100, description="Items in the counselor's personal queue"
    )


class ExplainQueuePositionRequest(ContactQueueRequest):
    """Request for explaining one record's queue position."""

    record_id: int = Field(..., description="ID of the record to explain")
