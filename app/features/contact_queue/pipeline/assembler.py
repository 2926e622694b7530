"""
Priority assembler - turns one eligible record into a QueueItem.

The cascade is an ordered chain of rules. Each rule either returns a
decision or passes; the first decision wins. Pinning is applied afterwards
and only relabels non-birthday items.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from app.features.contact_queue.domain.models import (
    BIRTHDAY,
    CONTACT_SLIP,
    FIRST_TOUCH,
    MANUAL_FOLLOWUP,
    TRACK_SLIP,
    ContactRecord,
    PriorityLevel,
    QueueItem,
)

from .eligibility import is_birthday
from .first_touch import score_first_touch
from .recency import NEVER_CONTACTED_DAYS, days_since_contact
from .risk import calculate_risk_score
from .slips import detect_contact_slip, detect_track_slip

BIRTHDAY_PRIORITY = 0
PINNED_PRIORITY = 10
SAFETY_NET_PRIORITY = 1050
SAFETY_NET_DAYS = 100
OVERDUE_FOLLOW_UP_BOOST = 50
CONTACT_SLIP_BASE = 2000
TRACK_SLIP_BASE = 3000
FIRST_TOUCH_BASE = 4000
SLIP_URGENCY_CEILING = 10
SLIP_URGENCY_STEP = 100

_FOLLOW_UP_LEVELS = {
    "urgent": (1000, "Urgent follow-up"),
    "high": (1100, "High priority follow-up due"),
    "normal": (1200, "Normal follow-up due"),
    "low": (1300, "Low priority follow-up due"),
}


@dataclass(slots=True, frozen=True)
class PriorityDecision:
    priority: int
    level: PriorityLevel
    reason: str
    is_overdue: bool = False


@dataclass(slots=True, frozen=True)
class RuleContext:
    record: ContactRecord
    today: date
    days_since: int | None  # None when never contacted


@dataclass(slots=True, frozen=True)
class PriorityRule:
    name: str
    evaluate: Callable[[RuleContext], PriorityDecision | None]


def _birthday_rule(ctx: RuleContext) -> PriorityDecision | None:
    if not is_birthday(ctx.record, ctx.today):
        return None
    return PriorityDecision(BIRTHDAY_PRIORITY, BIRTHDAY, "Birthday contact needed")


def _safety_net_rule(ctx: RuleContext) -> PriorityDecision | None:
    # Never-contacted records are exempt; they go through first touch
    if ctx.days_since is None or ctx.days_since < SAFETY_NET_DAYS:
        return None
    return PriorityDecision(
        SAFETY_NET_PRIORITY,
        CONTACT_SLIP,
        "100+ day safety net - needs immediate review",
        is_overdue=True,
    )


def is_follow_up_due(priority: str | None, follow_up_date: date | None, today: date) -> bool:
    """Urgent follow-ups are always due; the rest once their date arrives."""
    if priority is None or priority == "none":
        return False
    if priority == "urgent":
        return True
    if follow_up_date is None:
        return False
    return follow_up_date <= today


def _manual_follow_up_rule(ctx: RuleContext) -> PriorityDecision | None:
    record = ctx.record
    level = _FOLLOW_UP_LEVELS.get(record.latest_follow_up_priority or "")
    if level is None:
        return None
    if not is_follow_up_due(record.latest_follow_up_priority, record.latest_follow_up_date, ctx.today):
        return None

    priority, reason = level
    overdue = record.latest_follow_up_date is not None and record.latest_follow_up_date < ctx.today
    if overdue:
        priority -= OVERDUE_FOLLOW_UP_BOOST
    return PriorityDecision(priority, MANUAL_FOLLOWUP, reason, is_overdue=overdue)


def _slip_priority(base: int, urgency: int) -> int:
    return base + (SLIP_URGENCY_CEILING - urgency) * SLIP_URGENCY_STEP


def _contact_slip_rule(ctx: RuleContext) -> PriorityDecision | None:
    slip = detect_contact_slip(ctx.record, ctx.today)
    if not slip.has_slipped:
        return None
    return PriorityDecision(
        _slip_priority(CONTACT_SLIP_BASE, slip.urgency),
        CONTACT_SLIP,
        slip.description or "Contact slip detected",
    )


def _track_slip_rule(ctx: RuleContext) -> PriorityDecision | None:
    slip = detect_track_slip(ctx.record)
    if not slip.has_slipped:
        return None
    return PriorityDecision(
        _slip_priority(TRACK_SLIP_BASE, slip.urgency),
        TRACK_SLIP,
        slip.description or "Tracking status declining",
    )


def _first_touch_rule(ctx: RuleContext) -> PriorityDecision:
    score = score_first_touch(ctx.record)
    return PriorityDecision(
        FIRST_TOUCH_BASE + score.priority,
        FIRST_TOUCH,
        f"First contact: {score.reason}",
    )


# Evaluated in order, first decision wins. The last rule always decides.
PRIORITY_RULES: tuple[PriorityRule, ...] = (
    PriorityRule("birthday", _birthday_rule),
    PriorityRule("safety_net", _safety_net_rule),
    PriorityRule("manual_follow_up", _manual_follow_up_rule),
    PriorityRule("contact_slip", _contact_slip_rule),
    PriorityRule("track_slip", _track_slip_rule),
    PriorityRule("first_touch", _first_touch_rule),
)


def decide_priority(
    ctx: RuleContext, rules: tuple[PriorityRule, ...] = PRIORITY_RULES
) -> PriorityDecision:
    for rule in rules:
        decision = rule.evaluate(ctx)
        if decision is not None:
            return decision
    raise LookupError("No priority rule matched; the rule chain must end with a catch-all")


def apply_pin(record: ContactRecord, decision: PriorityDecision) -> PriorityDecision:
    """Pinned records jump to just below birthdays without changing their level."""
    if not record.pinned or decision.level == BIRTHDAY:
        return decision
    return PriorityDecision(
        PINNED_PRIORITY,
        decision.level,
        f"Pinned - {decision.reason}",
        is_overdue=decision.is_overdue,
    )


def assemble(record: ContactRecord, today: date) -> QueueItem:
    days_since = days_since_contact(record, today)
    ctx = RuleContext(record=record, today=today, days_since=days_since)
    decision = apply_pin(record, decide_priority(ctx))

    return QueueItem(
        record=record,
        priority=decision.priority,
        priority_level=decision.level,
        priority_reason=decision.reason,
        days_since_last_contact=NEVER_CONTACTED_DAYS if days_since is None else days_since,
        is_overdue=decision.is_overdue,
        risk_score=calculate_risk_score(record, today),
    )
