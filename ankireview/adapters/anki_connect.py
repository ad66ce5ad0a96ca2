"""AnkiConnect adapter for due card review."""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ankireview.config import ANKI_CONNECT_VERSION, DUE_CARDS_QUERY
from ankireview.domain.entities.card import Card
from ankireview.domain.errors import (
    AnswerFailure,
    ConnectionFailure,
    ProtocolFailure,
    RemoteError,
    ReviewError,
)
from ankireview.domain.services.card_sanitizer import sanitize_back, sanitize_front
from ankireview.domain.value_objects.rating import ease_options

logger = logging.getLogger(__name__)


# =============================================================================
# Wire Models
# =============================================================================


class AnkiConnectResponse(BaseModel):
    """Generic AnkiConnect response envelope."""

    result: Any = None
    error: str | None = None


class FieldValue(BaseModel):
    """Single note field as returned by cardsInfo."""

    value: str


class CardFields(BaseModel):
    """Front/Back note fields (other fields are ignored)."""

    front: FieldValue = Field(alias="Front")
    back: FieldValue = Field(alias="Back")


class CardInfoRecord(BaseModel):
    """One record of a cardsInfo result."""

    model_config = ConfigDict(populate_by_name=True)

    card_id: int = Field(alias="cardId")
    fields: CardFields
    buttons: list[int]


_CARD_IDS = TypeAdapter(list[int])
_RECORDS = TypeAdapter(list[Any])


def _decode(adapter: TypeAdapter, result: Any, action: str) -> Any:
    """Decode a raw result payload, mapping shape errors to ProtocolFailure."""
    try:
        return adapter.validate_python(result)
    except ValidationError as e:
        raise ProtocolFailure(f"unexpected {action} result format: {e.error_count()} error(s)") from e


def parse_card(info: Any) -> Card:
    """Parse one cardsInfo record into a Card entity.

    Raises:
        ValidationError: If the record is not an object or is missing fields or buttons
    """
    record = CardInfoRecord.model_validate(info)
    return Card(
        id=record.card_id,
        front=sanitize_front(record.fields.front.value),
        back=sanitize_back(record.fields.back.value),
        ease_options=ease_options(record.buttons),
    )


class AnkiConnectAdapter:
    """AnkiConnect API adapter implementing FlashcardService protocol.

    Communicates with Anki desktop via AnkiConnect addon API.
    Uses lazy client initialization for connection reuse.
    """

    def __init__(
        self,
        url: str = "http://localhost:8765",
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize adapter.

        Args:
            url: AnkiConnect API URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use MockTransport)
        """
        self._url = url
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def url(self) -> str:
        return self._url

    async def _get_client(self) -> httpx.AsyncClient:
        """Lazy client initialization for connection reuse."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self._client

    async def invoke(self, action: str, version: int, params: dict[str, Any]) -> Any:
        """Call AnkiConnect action.

        Args:
            action: AnkiConnect action name
            version: AnkiConnect protocol version
            params: Action parameters

        Returns:
            Raw action result

        Raises:
            ConnectionFailure: If the endpoint cannot be reached
            ProtocolFailure: If the response is not a valid envelope
            RemoteError: If the API reports an error
        """
        client = await self._get_client()
        payload = {"action": action, "version": version, "params": params}
        logger.debug(f"AnkiConnect request: {action}")

        try:
            response = await client.post(self._url, json=payload)
        except httpx.TransportError as e:
            raise ConnectionFailure(
                f"connection refused: failed to connect to AnkiConnect at {self._url}: {e}\n"
                "Ensure Anki is running and AnkiConnect add-on is installed."
            ) from e

        try:
            envelope = AnkiConnectResponse.model_validate_json(response.content)
        except ValidationError as e:
            if response.is_success:
                raise ProtocolFailure(f"malformed response from AnkiConnect: {e.error_count()} error(s)") from e
            envelope = None

        # A reported error wins over the transport status
        if envelope is not None and envelope.error is not None:
            raise RemoteError(f"API-reported error: {envelope.error}")

        if not response.is_success:
            raise ProtocolFailure(
                f"malformed response: AnkiConnect returned HTTP {response.status_code}"
            )

        return envelope.result

    async def fetch_due_cards(self, query: str = DUE_CARDS_QUERY) -> list[Card]:
        """Get due cards with their legal ease buttons.

        Records that fail to parse are skipped with a warning.
        """
        try:
            raw_ids = await self.invoke("findCards", ANKI_CONNECT_VERSION, {"query": query})
            card_ids = _decode(_CARD_IDS, raw_ids, "findCards")
        except ReviewError as e:
            raise type(e)(f"failed to find due cards: {e}") from e

        if not card_ids:
            return []

        try:
            raw_infos = await self.invoke("cardsInfo", ANKI_CONNECT_VERSION, {"cards": card_ids})
            infos = _decode(_RECORDS, raw_infos, "cardsInfo")
        except ReviewError as e:
            raise type(e)(f"failed to get cards info: {e}") from e

        cards = []
        for position, info in enumerate(infos):
            try:
                cards.append(parse_card(info))
            except ValidationError as e:
                logger.warning(f"Skipping malformed card info at position {position}: {e}")
        return cards

    async def answer_card(self, card_id: int, ease: int) -> None:
        """Submit an ease value for one card."""
        try:
            await self.invoke(
                "answerCards", ANKI_CONNECT_VERSION, {"cardId": card_id, "ease": ease}
            )
        except ReviewError as e:
            raise AnswerFailure(card_id, ease, e) from e

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
