"""Review state machine.

`update` is a pure transition function: it takes the current session and
one event and returns the next session plus at most one effect to run.
Effects are descriptions only; `effect_runner` executes them and turns
the outcome back into an event.
"""

import logging
from dataclasses import dataclass, replace

from ankireview.domain.entities.card import Card
from ankireview.domain.entities.session import ReviewSession
from ankireview.domain.errors import InputFailure, ReviewError
from ankireview.domain.value_objects.review_phase import ReviewPhase

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"q", "ctrl+c"})
REVEAL_KEYS = frozenset({"enter"})
EASE_KEYS = frozenset({"1", "2", "3", "4"})
SKIP_KEYS = frozenset({"right", "n"})


# =============================================================================
# Events
# =============================================================================


@dataclass(frozen=True)
class KeyPressed:
    """User pressed a key (Textual key name)."""

    key: str


@dataclass(frozen=True)
class CardsLoaded:
    """Due cards arrived from the flashcard service."""

    cards: tuple[Card, ...]


@dataclass(frozen=True)
class LoadFailed:
    """Fetching due cards failed."""

    error: ReviewError


@dataclass(frozen=True)
class AnswerSucceeded:
    """Answer for a card was accepted by the flashcard service."""

    card_id: int
    ease: int


@dataclass(frozen=True)
class AnswerFailed:
    """Answer for a card was rejected or could not be sent."""

    card_id: int
    ease: int
    error: ReviewError


Event = KeyPressed | CardsLoaded | LoadFailed | AnswerSucceeded | AnswerFailed


# =============================================================================
# Effects
# =============================================================================


@dataclass(frozen=True)
class FetchDueCards:
    """Load due cards."""


@dataclass(frozen=True)
class AnswerCard:
    """Submit an ease value for a card."""

    card_id: int
    ease: int


@dataclass(frozen=True)
class Quit:
    """Stop the application."""


Effect = FetchDueCards | AnswerCard | Quit

Transition = tuple[ReviewSession, Effect | None]


def initial() -> Transition:
    """Start a session: LOADING, with a fetch to run."""
    return ReviewSession.loading(), FetchDueCards()


def update(session: ReviewSession, event: Event) -> Transition:
    """Apply one event to the session.

    Combinations not covered by the transition table leave the session
    unchanged and produce no effect.
    """
    if session.quitting:
        return session, None

    match event:
        case KeyPressed(key=key):
            return _on_key(session, key)
        case CardsLoaded(cards=cards):
            if session.phase is not ReviewPhase.LOADING:
                return session, None
            return ReviewSession.with_cards(list(cards)), None
        case LoadFailed(error=error):
            if session.phase is not ReviewPhase.LOADING:
                return session, None
            return session.fail(error), None
        case AnswerSucceeded(card_id=card_id):
            return _on_answer_succeeded(session, card_id)
        case AnswerFailed(error=error):
            if session.phase is not ReviewPhase.REVIEWING:
                return replace(session, pending_card_id=None), None
            return replace(session, pending_card_id=None).fail(error), None

    return session, None


def _on_key(session: ReviewSession, key: str) -> Transition:
    if key in QUIT_KEYS:
        return replace(session, quitting=True), Quit()

    if session.phase is not ReviewPhase.REVIEWING:
        return session, None

    if key in REVEAL_KEYS:
        if session.revealed:
            return session, None
        return replace(session, revealed=True), None

    if key in SKIP_KEYS:
        return session.advance(), None

    if key in EASE_KEYS:
        return _on_ease_key(session, key)

    return session, None


def _on_ease_key(session: ReviewSession, key: str) -> Transition:
    if not session.revealed or session.answer_pending:
        return session, None

    try:
        ease = int(key)
    except ValueError:
        return session.fail(InputFailure(f"invalid ease input: {key!r}")), None

    card = session.current_card
    if card is None or not card.accepts_ease(ease):
        return session, None

    logger.info(f"Answering card {card.id} with ease {ease}")
    return replace(session, pending_card_id=card.id), AnswerCard(card_id=card.id, ease=ease)


def _on_answer_succeeded(session: ReviewSession, card_id: int) -> Transition:
    cleared = replace(session, pending_card_id=None)
    if session.phase is not ReviewPhase.REVIEWING:
        return cleared, None

    card = session.current_card
    if card is None or card.id != card_id:
        # Completion for a card the user already skipped past
        logger.info(f"Ignoring answer completion for card {card_id} (no longer current)")
        return cleared, None

    return cleared.advance(), None
