"""Card entity representing an Anki flashcard."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class Card:
    """Anki card entity.

    Represents a single due flashcard as returned by AnkiConnect.

    Attributes:
        id: Unique card identifier from Anki
        front: Question side of the card (terminal text)
        back: Answer side of the card (terminal text)
        ease_options: Legal ease values mapped to their button labels
    """

    id: int
    front: str
    back: str
    ease_options: Mapping[int, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the mapping so the card stays immutable
        object.__setattr__(self, "ease_options", MappingProxyType(dict(self.ease_options)))

    def accepts_ease(self, ease: int) -> bool:
        """Check if the ease value is one of the card's buttons."""
        return ease in self.ease_options

    def sorted_ease_options(self) -> list[tuple[int, str]]:
        """Get (ease, label) pairs in ascending ease order."""
        return sorted(self.ease_options.items())
