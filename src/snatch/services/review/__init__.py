"""Review services - Leitner scheduling and review sessions."""

from snatch.services.review.leitner_scheduler import (
    BOX_INTERVALS,
    ReviewOutcome,
    apply_correct,
    apply_review,
    apply_wrong,
    interval_for_box,
    is_due,
    select_due,
)
from snatch.services.review.review_session import ReviewSession

__all__ = [
    "BOX_INTERVALS",
    "ReviewOutcome",
    "ReviewSession",
    "apply_correct",
    "apply_review",
    "apply_wrong",
    "interval_for_box",
    "is_due",
    "select_due",
]
