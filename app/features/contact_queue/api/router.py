"""
Contact queue routes.

The router is stateless: callers post the current record snapshot and get
the ordered queue back. Pin, snooze and skip writes go to the record store
directly and show up on the next call.
"""

from datetime import date

from fastapi import APIRouter, HTTPException, status

from app.config import settings
from app.features.contact_queue.domain.models import (
    PRIORITY_LEVELS,
    InvalidContactRecordError,
    QueueItem,
)
from app.features.contact_queue.service import contact_queue_service
from app.features.contact_queue.views import (
    UnknownSortModeError,
    explain_queue_position,
    group_by_level,
    priority_level_info,
    reorder_queue,
    split_queue,
)
from app.infrastructure.observability.logging import get_logger
from app.models.api.contact_queue_request import ContactQueueRequest, ExplainQueuePositionRequest
from app.models.api.contact_queue_response import (
    ContactQueueResponse,
    ExplainQueuePositionResponse,
    PriorityLevelInfoResponse,
    PriorityLevelsResponse,
    QueueItemResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/contact-queue", tags=["contact-queue"])


def _build_queue(records: list[dict], today: date) -> list[QueueItem]:
    try:
        return contact_queue_service.generate_queue_from_rows(records, today)
    except InvalidContactRecordError as e:
        logger.warning("Rejected contact queue snapshot", error=str(e))
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except Exception as e:
        logger.error("Error generating contact queue", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate contact queue",
        )


@router.post("", response_model=ContactQueueResponse)
async def generate_contact_queue(request: ContactQueueRequest):
    """Rank the posted records into the outreach queue."""
    today = request.today or settings.queue_today()
    queue = _build_queue(request.records, today)

    try:
        ordered = reorder_queue(queue, request.sort_by)
    except UnknownSortModeError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    limit = min(request.limit or settings.CONTACT_QUEUE_MAX_RESULTS, settings.CONTACT_QUEUE_MAX_RESULTS)
    my_queue_size = (
        request.my_queue_size
        if request.my_queue_size is not None
        else settings.CONTACT_QUEUE_MY_QUEUE_SIZE
    )
    my_queue, _ = split_queue(ordered, my_queue_size)
    groups = group_by_level(queue)
    returned = ordered[:limit]

    return ContactQueueResponse(
        today=today,
        sort_by=request.sort_by,
        total=len(queue),
        returned=len(returned),
        items=[QueueItemResponse.from_item(item) for item in returned],
        my_queue_ids=[item.record.id for item in my_queue],
        counts_by_level={level: len(items) for level, items in groups.items()},
    )


@router.post("/explain", response_model=ExplainQueuePositionResponse)
async def explain_contact_queue_position(request: ExplainQueuePositionRequest):
    """Explain why a record sits where it does in the priority order."""
    queue = _build_queue(request.records, request.today or settings.queue_today())

    for position, item in enumerate(queue, start=1):
        if item.record.id == request.record_id:
            return ExplainQueuePositionResponse(
                record_id=request.record_id,
                position=position,
                explanation=explain_queue_position(item),
            )

    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Record {request.record_id} is not in the contact queue",
    )


@router.get("/levels", response_model=PriorityLevelsResponse)
async def list_priority_levels():
    """Priority levels in cascade order, most urgent first."""
    levels = []
    for level in PRIORITY_LEVELS:
        info = priority_level_info(level)
        levels.append(
            PriorityLevelInfoResponse(level=info.level, label=info.label, description=info.description)
        )
    return PriorityLevelsResponse(levels=levels)
