"""ankireview - terminal review of due Anki cards via AnkiConnect."""

__version__ = "0.1.0"
