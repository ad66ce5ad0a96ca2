# Adapters layer - Concrete implementations (AnkiConnect, local test deck)

from .anki_connect import AnkiConnectAdapter
from .local_test_deck import LocalTestDeckAdapter

__all__ = [
    "AnkiConnectAdapter",
    "LocalTestDeckAdapter",
]
