"""Tests for adapter selection and the local test deck."""

import pytest

from ankireview.adapters.anki_connect import AnkiConnectAdapter
from ankireview.adapters.local_test_deck import LocalTestDeckAdapter
from ankireview.composition import create_flashcard_service
from ankireview.domain.errors import AnswerFailure
from ankireview.ports.flashcard_service import FlashcardService


class TestCreateFlashcardService:
    def test_defaults_to_anki_connect(self, monkeypatch):
        monkeypatch.delenv("FLASHCARD_ADAPTER", raising=False)
        monkeypatch.delenv("ANKI_CONNECT_URL", raising=False)

        service = create_flashcard_service()

        assert isinstance(service, AnkiConnectAdapter)
        assert service.url == "http://localhost:8765"

    def test_url_override(self, monkeypatch):
        monkeypatch.setenv("FLASHCARD_ADAPTER", "anki")
        monkeypatch.setenv("ANKI_CONNECT_URL", "http://127.0.0.1:9999")

        service = create_flashcard_service()

        assert service.url == "http://127.0.0.1:9999"

    def test_local_test_deck(self, monkeypatch):
        monkeypatch.setenv("FLASHCARD_ADAPTER", "Local")

        assert isinstance(create_flashcard_service(), LocalTestDeckAdapter)

    def test_unknown_adapter(self, monkeypatch):
        monkeypatch.setenv("FLASHCARD_ADAPTER", "mongodb")

        with pytest.raises(ValueError, match="Unknown FLASHCARD_ADAPTER"):
            create_flashcard_service()


@pytest.mark.asyncio
class TestLocalTestDeck:
    async def test_embedded_cards_are_due(self):
        deck = LocalTestDeckAdapter()

        cards = await deck.fetch_due_cards()

        assert isinstance(deck, FlashcardService)
        assert [c.id for c in cards] == [1001, 1002, 1003, 1004]
        assert cards[1].front == "What does HTTP stand for?"
        assert cards[2].front == "The chemical symbol for gold is [symbol]."
        assert sorted(cards[2].ease_options) == [1, 3, 4]

    async def test_answers_are_recorded(self):
        deck = LocalTestDeckAdapter()

        await deck.answer_card(1001, 3)

        assert deck.answers == {1001: 3}

    async def test_illegal_answer_fails(self):
        deck = LocalTestDeckAdapter()

        with pytest.raises(AnswerFailure) as exc_info:
            await deck.answer_card(1003, 2)

        assert exc_info.value.card_id == 1003
        assert exc_info.value.ease == 2
