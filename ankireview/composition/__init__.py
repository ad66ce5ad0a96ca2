"""
Composition Root.

Centralized dependency wiring for the application.
Factory functions that instantiate adapters belong here so the domain
never imports from adapters.
"""

import logging

from ankireview.adapters.anki_connect import AnkiConnectAdapter
from ankireview.adapters.local_test_deck import LocalTestDeckAdapter
from ankireview.config import (
    get_anki_connect_timeout,
    get_anki_connect_url,
    get_flashcard_adapter,
)
from ankireview.ports.flashcard_service import FlashcardService

logger = logging.getLogger(__name__)


def create_flashcard_service() -> FlashcardService:
    """Create the flashcard backend selected by FLASHCARD_ADAPTER.

    Returns:
        LocalTestDeckAdapter for "local", AnkiConnectAdapter otherwise

    Raises:
        ValueError: If FLASHCARD_ADAPTER names an unknown backend
    """
    adapter = get_flashcard_adapter()
    if adapter == "local":
        logger.info("Using local test deck")
        return LocalTestDeckAdapter()
    if adapter == "anki":
        url = get_anki_connect_url()
        logger.info(f"Using AnkiConnect at {url}")
        return AnkiConnectAdapter(url=url, timeout=get_anki_connect_timeout())
    raise ValueError(f"Unknown FLASHCARD_ADAPTER: {adapter!r} (expected 'anki' or 'local')")
