"""Effect runner for the review state machine.

Executes one effect against the flashcard service and reports the outcome
as exactly one event. `ReviewError`s become failure events; anything else
propagates to the caller.
"""

import logging

from ankireview.domain.errors import AnswerFailure, ReviewError
from ankireview.domain.services.review_machine import (
    AnswerCard,
    AnswerFailed,
    AnswerSucceeded,
    CardsLoaded,
    Effect,
    Event,
    FetchDueCards,
    LoadFailed,
)
from ankireview.ports.flashcard_service import FlashcardService

logger = logging.getLogger(__name__)


async def run_effect(effect: Effect, service: FlashcardService) -> Event | None:
    """Run an effect and return the event describing its outcome.

    Args:
        effect: Effect produced by `update`
        service: Flashcard backend to run it against

    Returns:
        Completion event, or None for effects handled by the UI (Quit)
    """
    match effect:
        case FetchDueCards():
            return await _fetch_due_cards(service)
        case AnswerCard(card_id=card_id, ease=ease):
            return await _answer_card(service, card_id, ease)
    return None


async def _fetch_due_cards(service: FlashcardService) -> Event:
    try:
        cards = await service.fetch_due_cards()
    except ReviewError as e:
        logger.error(f"Loading due cards failed: {e}")
        return LoadFailed(error=e)

    logger.info(f"Loaded {len(cards)} due cards")
    return CardsLoaded(cards=tuple(cards))


async def _answer_card(service: FlashcardService, card_id: int, ease: int) -> Event:
    try:
        await service.answer_card(card_id, ease)
    except AnswerFailure as e:
        logger.error(str(e))
        return AnswerFailed(card_id=card_id, ease=ease, error=e)
    except ReviewError as e:
        failure = AnswerFailure(card_id, ease, e)
        logger.error(str(failure))
        return AnswerFailed(card_id=card_id, ease=ease, error=failure)

    return AnswerSucceeded(card_id=card_id, ease=ease)
