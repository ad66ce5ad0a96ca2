"""Review error taxonomy.

Every error here ends the review session: the state machine moves to
FAILED and shows the message verbatim. Nothing is retried.
"""


class ReviewError(Exception):
    """Base class for errors that end a review session."""

    pass


class ConnectionFailure(ReviewError):
    """AnkiConnect endpoint is unreachable."""

    pass


class ProtocolFailure(ReviewError):
    """Response could not be decoded or had an unexpected shape."""

    pass


class RemoteError(ReviewError):
    """AnkiConnect reported a logical error."""

    pass


class InputFailure(ReviewError):
    """Key input could not be parsed as an ease value."""

    pass


class AnswerFailure(ReviewError):
    """Submitting an answer failed.

    Attributes:
        card_id: Card the answer was for
        ease: Ease value that was submitted
        cause: Underlying connection/protocol/remote error
    """

    def __init__(self, card_id: int, ease: int, cause: ReviewError):
        self.card_id = card_id
        self.ease = ease
        self.cause = cause
        super().__init__(f"failed to answer card {card_id} with ease {ease}: {cause}")
