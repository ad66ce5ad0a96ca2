"""Review phase value object for the review state machine."""

from enum import StrEnum


class ReviewPhase(StrEnum):
    """Review session phases.

    State machine:
        LOADING -> REVIEWING -> EXHAUSTED
           |           |
           v           v
         FAILED  <-  FAILED

    States:
        LOADING: Fetching due cards from Anki
        REVIEWING: Showing the card at the cursor
        EXHAUSTED: No cards left (or none were due)
        FAILED: A remote or input error ended the session
    """

    LOADING = "loading"
    REVIEWING = "reviewing"
    EXHAUSTED = "exhausted"
    FAILED = "failed"

    def is_terminal(self) -> bool:
        """Check if only the quit key can leave this phase."""
        return self in (ReviewPhase.EXHAUSTED, ReviewPhase.FAILED)
