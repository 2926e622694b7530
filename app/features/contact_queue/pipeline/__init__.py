"""
Pipeline stages for the contact queue.

Each stage is a pure function of a ContactRecord and an explicit `today`:
eligibility gates, recency and slip detection, first-touch and risk
scoring, the priority rule chain, and the final sort.
"""

from .assembler import PRIORITY_RULES, assemble
from .eligibility import is_birthday, should_exclude
from .first_touch import classify_support_need, score_first_touch
from .recency import NEVER_CONTACTED_DAYS, classify_recency
from .risk import calculate_risk_score
from .slips import detect_contact_slip, detect_track_slip
from .sorter import compare_items, sort_queue

__all__ = [
    "NEVER_CONTACTED_DAYS",
    "PRIORITY_RULES",
    "assemble",
    "calculate_risk_score",
    "classify_recency",
    "classify_support_need",
    "compare_items",
    "detect_contact_slip",
    "detect_track_slip",
    "is_birthday",
    "score_first_touch",
    "should_exclude",
    "sort_queue",
]
