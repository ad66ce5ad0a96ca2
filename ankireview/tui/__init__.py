"""Terminal UI for reviewing due cards."""

from .app import EffectCompleted, ReviewApp

__all__ = ["EffectCompleted", "ReviewApp"]
