"""Textual application driving the review state machine.

Key presses and completed effects are both turned into review events and
passed through `update`. Effects returned by `update` run as async
workers on the app's event loop; each posts exactly one message back.
The frame is re-rendered after every transition.
"""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Center, Middle
from textual.message import Message
from textual.widgets import Static

from ankireview.domain.entities.session import ReviewSession
from ankireview.domain.services.effect_runner import run_effect
from ankireview.domain.services.review_machine import (
    Effect,
    Event,
    KeyPressed,
    Quit,
    initial,
    update,
)
from ankireview.ports.flashcard_service import FlashcardService
from ankireview.presentation.view import render

logger = logging.getLogger(__name__)


class EffectCompleted(Message):
    """An effect finished and produced a review event."""

    def __init__(self, event: Event) -> None:
        self.event = event
        super().__init__()


class ReviewApp(App):
    """Keyboard-driven review of due Anki cards."""

    CSS = """
    Screen {
        align: center middle;
    }

    #frame {
        width: 64;
        border: round #6243A6;
        padding: 1 2;
        content-align: center middle;
        text-align: center;
    }
    """

    BINDINGS = [
        Binding("q", "review_key('q')", "Quit", priority=True),
        Binding("ctrl+c", "review_key('ctrl+c')", "Quit", show=False, priority=True),
        Binding("enter", "review_key('enter')", "Reveal", priority=True),
        Binding("1", "review_key('1')", "Again", show=False, priority=True),
        Binding("2", "review_key('2')", "Hard", show=False, priority=True),
        Binding("3", "review_key('3')", "Good", show=False, priority=True),
        Binding("4", "review_key('4')", "Easy", show=False, priority=True),
        Binding("right", "review_key('right')", "Skip", show=False, priority=True),
        Binding("n", "review_key('n')", "Skip", priority=True),
    ]

    def __init__(self, service: FlashcardService) -> None:
        super().__init__()
        self._service = service
        self._session = ReviewSession.loading()

    @property
    def session(self) -> ReviewSession:
        """Current review session (read-only snapshot)."""
        return self._session

    def compose(self) -> ComposeResult:
        with Middle():
            with Center():
                yield Static(render(self._session), id="frame")

    def on_mount(self) -> None:
        session, effect = initial()
        self._transition(session, effect)

    async def on_unmount(self) -> None:
        await self._service.close()

    def action_review_key(self, key: str) -> None:
        self._dispatch(KeyPressed(key=key))

    def on_effect_completed(self, message: EffectCompleted) -> None:
        self._dispatch(message.event)

    def _dispatch(self, event: Event) -> None:
        session, effect = update(self._session, event)
        self._transition(session, effect)

    def _transition(self, session: ReviewSession, effect: Effect | None) -> None:
        if session.phase is not self._session.phase:
            logger.info(f"Review phase: {self._session.phase} -> {session.phase}")
        self._session = session
        self.query_one("#frame", Static).update(render(session))

        if effect is None:
            return
        if isinstance(effect, Quit):
            self.exit()
            return
        self.run_worker(self._run_effect(effect), name=type(effect).__name__)

    async def _run_effect(self, effect: Effect) -> None:
        event = await run_effect(effect, self._service)
        if event is not None:
            self.post_message(EffectCompleted(event))
