# Ports layer - Interfaces the domain depends on

from .flashcard_service import FlashcardService

__all__ = ["FlashcardService"]
