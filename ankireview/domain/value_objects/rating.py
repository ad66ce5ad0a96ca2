"""Rating value object for Anki card reviews."""

from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType


class Rating(IntEnum):
    """Anki rating values (ease buttons).

    Maps to Anki's 4-button rating system:
    - AGAIN (1): Failed recall, card goes to relearning
    - HARD (2): Recalled with difficulty, interval reduced
    - GOOD (3): Normal recall, standard interval increase
    - EASY (4): Perfect recall, interval bonus applied
    """

    AGAIN = 1
    HARD = 2
    GOOD = 3
    EASY = 4


# Button labels shown for each ease value
EASE_LABELS: Mapping[int, str] = MappingProxyType(
    {
        Rating.AGAIN: "Again",
        Rating.HARD: "Hard",
        Rating.GOOD: "Good",
        Rating.EASY: "Easy",
    }
)


def ease_label(ease: int) -> str:
    """Get the display label for an ease value.

    Unknown values get a generated "Ease N" label.
    """
    return EASE_LABELS.get(ease, f"Ease {ease}")


def ease_options(buttons: list[int]) -> dict[int, str]:
    """Build the ease → label mapping for a card's legal buttons."""
    return {ease: ease_label(ease) for ease in buttons}
