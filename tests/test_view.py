"""Tests for rendering review sessions."""

from dataclasses import replace

from ankireview.domain.entities.session import ReviewSession
from ankireview.domain.errors import ConnectionFailure
from ankireview.presentation.view import render, render_plain
from factories import make_card


def test_loading_frame():
    text = render_plain(ReviewSession.loading())

    assert "Anki Review" in text
    assert "Loading cards from AnkiConnect..." in text


def test_unrevealed_card_hides_back(reviewing):
    text = render_plain(reviewing)

    assert "Card 1/2" in text
    assert "Front 101" in text
    assert "Back 101" not in text
    assert "Press ENTER to reveal back" in text
    assert "Again" not in text


def test_revealed_card_lists_buttons_in_order():
    card = make_card(3, buttons=(4, 1, 3))
    session = replace(ReviewSession.with_cards([card]), revealed=True)

    text = render_plain(session)

    assert "Back 3" in text
    assert "Press 1-4 to answer:" in text
    assert text.index("1: Again") < text.index("3: Good") < text.index("4: Easy")
    assert "2: Hard" not in text


def test_position_counter_follows_cursor(cards):
    session = ReviewSession.with_cards(cards).advance()

    assert "Card 2/2" in render_plain(session)
    assert "Front 102" in render_plain(session)


def test_pending_answer_is_shown(reviewing):
    session = replace(reviewing, revealed=True, pending_card_id=101)

    assert "Submitting answer..." in render_plain(session)


def test_exhausted_frame():
    text = render_plain(ReviewSession.with_cards([]))

    assert "No cards due today! Great job!" in text
    assert "Press 'q' to quit." in text


def test_failed_frame_shows_error_verbatim():
    session = ReviewSession.loading().fail(ConnectionFailure("connection refused"))

    text = render_plain(session)

    assert "Error: connection refused" in text
    assert "Press 'q' to quit." in text


def test_quit_hint_only_in_terminal_phases(reviewing):
    assert "Press 'q' to quit." not in render_plain(ReviewSession.loading())
    assert "Press 'q' to quit." not in render_plain(reviewing)
    assert "Press 'q' to quit." not in render_plain(replace(reviewing, revealed=True))


def test_quitting_frame(reviewing):
    assert render_plain(replace(reviewing, quitting=True)) == "Exiting Anki review..."


def test_render_is_repeatable(reviewing):
    session = replace(reviewing, revealed=True)

    first = render(session)
    second = render(session)

    assert first == second
    assert session == replace(reviewing, revealed=True)
