"""Domain value objects - immutable objects without identity."""

from .rating import EASE_LABELS, Rating, ease_label, ease_options
from .review_phase import ReviewPhase

__all__ = [
    "EASE_LABELS",
    "Rating",
    "ReviewPhase",
    "ease_label",
    "ease_options",
]
