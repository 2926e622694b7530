"""
Contact queue service - runs the ranking pipeline over a record snapshot.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from app.infrastructure.observability.logging import get_logger

from .domain.models import PRIORITY_LEVELS, ContactRecord, InvalidContactRecordError, QueueItem
from .pipeline.assembler import assemble
from .pipeline.eligibility import should_exclude
from .pipeline.sorter import sort_queue

logger = get_logger(__name__)


class ContactQueueService:
    """
    Builds the ordered outreach queue.

    Stateless: every call works on the snapshot it is given and the single
    `today` it is given, so repeated or parallel calls cannot interfere.
    """

    def normalize_records(self, rows: Iterable[ContactRecord | Mapping[str, Any]]) -> list[ContactRecord]:
        """
        Accept ContactRecords or raw rows and return ContactRecords.

        Raises:
            InvalidContactRecordError: If a raw row has no usable id
        """
        records = []
        for index, row in enumerate(rows):
            if isinstance(row, ContactRecord):
                records.append(row)
                continue
            try:
                records.append(ContactRecord.from_mapping(row))
            except InvalidContactRecordError:
                logger.warning(
                    "Contact record rejected during normalization",
                    row_index=index,
                    record_id=row.get("id"),
                )
                raise
        return records

    def generate_queue(self, records: Iterable[ContactRecord], today: date) -> list[QueueItem]:
        """
        Rank eligible records into the contact queue.

        Args:
            records: Snapshot of contact records (not modified)
            today: The single date the whole run is evaluated against

        Returns:
            Queue items in strict queue order, most urgent first
        """
        snapshot = list(records)
        items = [assemble(record, today) for record in snapshot if not should_exclude(record, today)]
        ordered = sort_queue(items)

        counts = Counter(item.priority_level for item in ordered)
        logger.info(
            "Contact queue generated",
            today=today.isoformat(),
            input_records=len(snapshot),
            excluded=len(snapshot) - len(ordered),
            queued=len(ordered),
            counts_by_level={level: counts.get(level, 0) for level in PRIORITY_LEVELS},
        )
        return ordered

    def generate_queue_from_rows(
        self, rows: Iterable[ContactRecord | Mapping[str, Any]], today: date
    ) -> list[QueueItem]:
        return self.generate_queue(self.normalize_records(rows), today)


contact_queue_service = ContactQueueService()
