"""Shared fixtures for ankireview tests."""

import json
from collections.abc import Callable
from unittest.mock import AsyncMock

import httpx
import pytest

from ankireview.adapters.anki_connect import AnkiConnectAdapter
from ankireview.domain.entities.card import Card
from ankireview.domain.entities.session import ReviewSession
from factories import make_card


@pytest.fixture
def cards() -> list[Card]:
    return [make_card(101), make_card(102)]


@pytest.fixture
def reviewing(cards) -> ReviewSession:
    """Session showing the first of two cards, back hidden."""
    return ReviewSession.with_cards(cards)


@pytest.fixture
def mock_service(cards) -> AsyncMock:
    service = AsyncMock()
    service.fetch_due_cards.return_value = list(cards)
    service.answer_card.return_value = None
    service.close.return_value = None
    return service


class AnkiConnectStub:
    """Records AnkiConnect requests and answers them from a handler table."""

    def __init__(self) -> None:
        self.requests: list[dict] = []
        self.handlers: dict[str, Callable[[dict], httpx.Response]] = {}

    def on(self, action: str, result=None, error=None, status_code: int = 200) -> None:
        self.handlers[action] = lambda params: httpx.Response(
            status_code, json={"result": result, "error": error}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        handler = self.handlers.get(body["action"])
        if handler is None:
            return httpx.Response(200, json={"result": None, "error": "unsupported action"})
        return handler(body.get("params", {}))

    def actions(self) -> list[str]:
        return [r["action"] for r in self.requests]


@pytest.fixture
def anki_stub() -> AnkiConnectStub:
    return AnkiConnectStub()


@pytest.fixture
def adapter(anki_stub) -> AnkiConnectAdapter:
    return AnkiConnectAdapter(url="http://anki.test:8765", transport=httpx.MockTransport(anki_stub))
