"""Domain services - review state machine and orchestration."""

from .card_sanitizer import sanitize_back, sanitize_front
from .effect_runner import run_effect
from .review_machine import (
    AnswerCard,
    AnswerFailed,
    AnswerSucceeded,
    CardsLoaded,
    Effect,
    Event,
    FetchDueCards,
    KeyPressed,
    LoadFailed,
    Quit,
    initial,
    update,
)

__all__ = [
    "AnswerCard",
    "AnswerFailed",
    "AnswerSucceeded",
    "CardsLoaded",
    "Effect",
    "Event",
    "FetchDueCards",
    "KeyPressed",
    "LoadFailed",
    "Quit",
    "initial",
    "run_effect",
    "sanitize_back",
    "sanitize_front",
    "update",
]
