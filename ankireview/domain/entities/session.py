"""Review session entity.

The session is immutable; the review state machine returns a new
instance for every transition.
"""

from dataclasses import dataclass, replace
from typing import Self

from ankireview.domain.entities.card import Card
from ankireview.domain.errors import ReviewError
from ankireview.domain.value_objects.review_phase import ReviewPhase


@dataclass(frozen=True)
class ReviewSession:
    """Review session state.

    Attributes:
        cards: Due cards in server order (stable for the session)
        cursor: Index of the current card; equals len(cards) when exhausted
        revealed: Whether the back of the current card is shown
        phase: Current review phase
        error: Error that moved the session to FAILED
        pending_card_id: Card whose answer is being submitted, if any
        quitting: Set once the user asked to quit
    """

    cards: tuple[Card, ...] = ()
    cursor: int = 0
    revealed: bool = False
    phase: ReviewPhase = ReviewPhase.LOADING
    error: ReviewError | None = None
    pending_card_id: int | None = None
    quitting: bool = False

    @classmethod
    def loading(cls) -> Self:
        """Create a fresh session waiting for cards."""
        return cls()

    @classmethod
    def with_cards(cls, cards: list[Card]) -> Self:
        """Create a session for freshly loaded cards.

        An empty card list yields an EXHAUSTED session.
        """
        if not cards:
            return cls(phase=ReviewPhase.EXHAUSTED)
        return cls(cards=tuple(cards), phase=ReviewPhase.REVIEWING)

    @property
    def current_card(self) -> Card | None:
        """Card at the cursor, or None past the end."""
        if self.cursor >= len(self.cards):
            return None
        return self.cards[self.cursor]

    @property
    def total(self) -> int:
        return len(self.cards)

    @property
    def answer_pending(self) -> bool:
        return self.pending_card_id is not None

    def advance(self) -> Self:
        """Move past the current card, hiding the back.

        Switches to EXHAUSTED when the cursor reaches the end.
        """
        cursor = min(self.cursor + 1, len(self.cards))
        phase = ReviewPhase.EXHAUSTED if cursor >= len(self.cards) else ReviewPhase.REVIEWING
        return replace(self, cursor=cursor, revealed=False, phase=phase)

    def fail(self, error: ReviewError) -> Self:
        """Move to FAILED, keeping the triggering error."""
        return replace(self, phase=ReviewPhase.FAILED, error=error)
