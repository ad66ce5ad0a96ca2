"""Application configuration loaded from environment variables.

Only the AnkiConnect endpoint and logging destination are configurable.
Everything else is a module constant.
"""

import os

DEFAULT_ANKI_CONNECT_URL = "http://localhost:8765"

# AnkiConnect protocol version sent with every request
ANKI_CONNECT_VERSION = 6

# Search query for the due card list
DUE_CARDS_QUERY = "is:due"


def get_anki_connect_url() -> str:
    """Get AnkiConnect API URL.

    Environment variable: ANKI_CONNECT_URL
    Default: http://localhost:8765
    """
    return os.getenv("ANKI_CONNECT_URL", DEFAULT_ANKI_CONNECT_URL)


def get_anki_connect_timeout() -> float:
    """Get AnkiConnect request timeout in seconds.

    Environment variable: ANKI_CONNECT_TIMEOUT
    Default: 5.0
    """
    return float(os.getenv("ANKI_CONNECT_TIMEOUT", "5.0"))


def get_flashcard_adapter() -> str:
    """Get flashcard backend name ('anki' or 'local').

    Environment variable: FLASHCARD_ADAPTER
    Default: anki
    """
    return os.getenv("FLASHCARD_ADAPTER", "anki").strip().lower()


def get_log_level() -> str:
    """Get log level name.

    Environment variable: LOG_LEVEL
    Default: INFO
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str:
    """Get log file path.

    The terminal belongs to the review UI, so logs go to a file.

    Environment variable: ANKI_REVIEW_LOG_FILE
    Default: ankireview.log
    """
    return os.getenv("ANKI_REVIEW_LOG_FILE", "ankireview.log")
