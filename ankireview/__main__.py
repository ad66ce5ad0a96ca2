"""
ankireview - Terminal entry point

Review due Anki cards from the keyboard.
"""

import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from ankireview.composition import create_flashcard_service
from ankireview.config import get_log_file, get_log_level
from ankireview.tui.app import ReviewApp

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        filename=get_log_file(),
        level=get_log_level(),
        format="%(asctime)s:%(levelname)s:%(name)s:%(message)s",
    )


def main() -> int:
    """Run the review app.

    Returns:
        0 after a user-initiated quit, 1 if the UI fails to start or run
    """
    load_dotenv(Path.cwd() / ".env")
    _configure_logging()

    try:
        service = create_flashcard_service()
    except ValueError as e:
        print(f"ankireview: {e}", file=sys.stderr)
        return 2

    app = ReviewApp(service)
    try:
        app.run()
    except Exception as e:
        logger.exception("Review UI crashed")
        print(f"Alas, there's been an error: {e}", file=sys.stderr)
        return 1

    if app.return_code:
        logger.error(f"Review UI exited with code {app.return_code}")
        print("Alas, there's been an error: the review UI stopped unexpectedly", file=sys.stderr)
        return 1

    logger.info("Review finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
