"""Domain entities - objects with identity."""

from .card import Card
from .session import ReviewSession

__all__ = ["Card", "ReviewSession"]
