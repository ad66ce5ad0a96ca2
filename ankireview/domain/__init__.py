# Domain layer - Review logic (NO external dependencies)

from .entities import Card, ReviewSession
from .errors import (
    AnswerFailure,
    ConnectionFailure,
    InputFailure,
    ProtocolFailure,
    RemoteError,
    ReviewError,
)
from .value_objects import EASE_LABELS, Rating, ReviewPhase, ease_label

__all__ = [
    "AnswerFailure",
    "Card",
    "ConnectionFailure",
    "EASE_LABELS",
    "InputFailure",
    "ProtocolFailure",
    "Rating",
    "RemoteError",
    "ReviewError",
    "ReviewPhase",
    "ReviewSession",
    "ease_label",
]
