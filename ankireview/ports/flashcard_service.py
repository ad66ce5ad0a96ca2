"""Port interface for flashcard service (Anki integration)."""

from typing import Protocol, runtime_checkable

from ankireview.domain.entities.card import Card


@runtime_checkable
class FlashcardService(Protocol):
    """Port for flashcard operations.

    Abstracts the flashcard backend (AnkiConnect in production).
    Implementations raise `ReviewError` subclasses on failure.
    """

    async def fetch_due_cards(self) -> list[Card]:
        """Get all due cards in server order.

        Returns:
            Due cards, empty when nothing is due

        Raises:
            ReviewError: If the due list or card details cannot be fetched
        """
        ...

    async def answer_card(self, card_id: int, ease: int) -> None:
        """Submit an ease value for a card.

        Args:
            card_id: ID of the card being answered
            ease: Chosen ease button (1-4)

        Raises:
            AnswerFailure: If the answer was not accepted
        """
        ...

    async def close(self) -> None:
        """Release any held connections."""
        ...
