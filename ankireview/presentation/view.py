"""Presentation layer: renders a review session as a Rich text frame.

`render` has no side effects and may be called after every transition.
"""

from rich.text import Text

from ankireview.domain.entities.session import ReviewSession
from ankireview.domain.value_objects.review_phase import ReviewPhase

TITLE = "Anki Review"
LOADING_TEXT = "Loading cards from AnkiConnect..."
EXHAUSTED_TEXT = "No cards due today! Great job!"
QUIT_HINT = "Press 'q' to quit."
QUITTING_TEXT = "Exiting Anki review..."
REVEAL_PROMPT = "Press ENTER to reveal back"
ANSWER_PROMPT = "Press 1-4 to answer:"
SUBMITTING_TEXT = "Submitting answer..."

# Style names, mirrored in the app stylesheet colours
STYLE_TITLE = "bold #7D56F4"
STYLE_STATUS = "#888888"
STYLE_FRONT = "bold"
STYLE_BACK = "#DDDDDD"
STYLE_PROMPT = "#AAAAAA"
STYLE_ERROR = "bold red"
STYLE_BUTTON = "bold white on #5A56E0"


def render(session: ReviewSession) -> Text:
    """Render the session as a frame of styled text."""
    if session.quitting:
        return Text(QUITTING_TEXT)

    frame = Text()
    frame.append(TITLE, style=STYLE_TITLE)
    frame.append("\n\n")

    match session.phase:
        case ReviewPhase.LOADING:
            frame.append(LOADING_TEXT)
        case ReviewPhase.REVIEWING:
            _render_card(frame, session)
        case ReviewPhase.EXHAUSTED:
            frame.append(EXHAUSTED_TEXT)
        case ReviewPhase.FAILED:
            frame.append(f"Error: {session.error}", style=STYLE_ERROR)

    if session.phase.is_terminal():
        frame.append("\n\n")
        frame.append(QUIT_HINT, style=STYLE_PROMPT)

    return frame


def render_plain(session: ReviewSession) -> str:
    """Render the session without styling."""
    return render(session).plain


def _render_card(frame: Text, session: ReviewSession) -> None:
    card = session.current_card
    if card is None:
        return

    frame.append(f"Card {session.cursor + 1}/{session.total}", style=STYLE_STATUS)
    frame.append("\n\n")
    frame.append(card.front, style=STYLE_FRONT)

    if not session.revealed:
        frame.append("\n\n")
        frame.append(REVEAL_PROMPT, style=STYLE_PROMPT)
        return

    frame.append("\n\n")
    frame.append(card.back, style=STYLE_BACK)
    frame.append("\n\n")
    frame.append(ANSWER_PROMPT, style=STYLE_PROMPT)
    for ease, label in card.sorted_ease_options():
        frame.append(" ")
        frame.append(f" {ease}: {label} ", style=STYLE_BUTTON)

    if session.answer_pending:
        frame.append("\n\n")
        frame.append(SUBMITTING_TEXT, style=STYLE_STATUS)
