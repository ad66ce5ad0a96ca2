"""Tests for ease labels, card entities and field sanitizing."""

import dataclasses

import pytest

from ankireview.domain.entities.card import Card
from ankireview.domain.services.card_sanitizer import sanitize_back, sanitize_front
from ankireview.domain.value_objects.rating import EASE_LABELS, ease_label, ease_options
from ankireview.domain.value_objects.review_phase import ReviewPhase


class TestEaseLabels:
    @pytest.mark.parametrize(
        "ease,label", [(1, "Again"), (2, "Hard"), (3, "Good"), (4, "Easy")]
    )
    def test_known_labels(self, ease, label):
        assert ease_label(ease) == label

    @pytest.mark.parametrize("ease", [0, 5, 9, -1])
    def test_unknown_values_get_generated_label(self, ease):
        assert ease_label(ease) == f"Ease {ease}"

    def test_label_table_is_read_only(self):
        with pytest.raises(TypeError):
            EASE_LABELS[5] = "Perfect"  # type: ignore[index]

    def test_options_follow_buttons(self):
        assert ease_options([1, 3, 6]) == {1: "Again", 3: "Good", 6: "Ease 6"}


class TestReviewPhase:
    @pytest.mark.parametrize(
        "phase,terminal",
        [
            (ReviewPhase.LOADING, False),
            (ReviewPhase.REVIEWING, False),
            (ReviewPhase.EXHAUSTED, True),
            (ReviewPhase.FAILED, True),
        ],
    )
    def test_terminal_phases(self, phase, terminal):
        assert phase.is_terminal() is terminal


class TestCard:
    def test_card_is_immutable(self):
        card = Card(id=1, front="f", back="b", ease_options={1: "Again"})

        with pytest.raises(dataclasses.FrozenInstanceError):
            card.front = "other"  # type: ignore[misc]
        with pytest.raises(TypeError):
            card.ease_options[2] = "Hard"  # type: ignore[index]

    def test_accepts_only_listed_ease(self):
        card = Card(id=1, front="f", back="b", ease_options={1: "Again", 3: "Good"})

        assert card.accepts_ease(3)
        assert not card.accepts_ease(2)


class TestSanitizer:
    def test_front_hides_cloze(self):
        assert sanitize_front("Gold is {{c1::Au}}.") == "Gold is [...]."

    def test_front_shows_cloze_hint(self):
        assert sanitize_front("Gold is {{c1::Au::symbol}}.") == "Gold is [symbol]."

    def test_back_reveals_cloze(self):
        assert sanitize_back("Gold is {{c1::Au::symbol}}.") == "Gold is Au."

    def test_block_tags_become_lines(self):
        html = "<div>One</div><div>Two</div><ul><li>a</li><li>b</li></ul>"

        assert sanitize_back(html) == "One\nTwo\n• a\n• b"

    def test_entities_are_decoded(self):
        assert sanitize_front("a &lt; b &amp;&amp; c") == "a < b && c"

    def test_empty_field(self):
        assert sanitize_front("") == ""
        assert sanitize_back("") == ""
