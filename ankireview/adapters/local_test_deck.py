"""Local test deck adapter for development and testing.

This adapter bypasses AnkiConnect by loading cards from an embedded JSON file.
Use FLASHCARD_ADAPTER=local to enable.
"""

import json
import logging
from importlib import resources
from pathlib import Path

from ankireview.domain.entities.card import Card
from ankireview.domain.errors import AnswerFailure, RemoteError
from ankireview.domain.services.card_sanitizer import sanitize_back, sanitize_front
from ankireview.domain.value_objects.rating import ease_options

logger = logging.getLogger(__name__)


class LocalTestDeckAdapter:
    """FlashcardService implementation with embedded test cards.

    All cards are always "due" - no SRS simulation.
    Answers are accepted but not persisted between restarts.
    """

    def __init__(self, cards: list[Card] | None = None) -> None:
        self._cards: list[Card] = cards if cards is not None else self._load_cards()
        self._answers: dict[int, int] = {}  # In-memory only

    def _load_cards(self) -> list[Card]:
        """Load cards from embedded JSON data.

        Uses importlib.resources for reliable package data access.
        Falls back to file path if running outside package context.
        """
        try:
            data_path = resources.files("ankireview.adapters.data").joinpath("test_deck.json")
            with data_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (ModuleNotFoundError, FileNotFoundError, TypeError):
            file_path = Path(__file__).parent / "data" / "test_deck.json"
            with open(file_path, encoding="utf-8") as f:
                data = json.load(f)

        return [
            Card(
                id=card_data["id"],
                front=sanitize_front(card_data["front"]),
                back=sanitize_back(card_data["back"]),
                ease_options=ease_options(card_data["buttons"]),
            )
            for card_data in data["cards"]
        ]

    @property
    def answers(self) -> dict[int, int]:
        """Answers recorded so far (card id -> ease)."""
        return dict(self._answers)

    async def fetch_due_cards(self) -> list[Card]:
        """Get all cards (every test card is due)."""
        return self._cards.copy()

    async def answer_card(self, card_id: int, ease: int) -> None:
        """Record an answer in memory."""
        card = next((c for c in self._cards if c.id == card_id), None)
        if card is None or not card.accepts_ease(ease):
            raise AnswerFailure(
                card_id, ease, RemoteError(f"API-reported error: cannot answer card {card_id}")
            )
        logger.info(f"Test deck: card {card_id} answered with ease {ease}")
        self._answers[card_id] = ease

    async def close(self) -> None:
        """No-op cleanup."""
        pass
