"""
Card Sanitizer.

Converts Anki field HTML into plain text for terminal display.
Cloze deletions are hidden on the question side and revealed on the
answer side.
"""

import re
from html import unescape

# =============================================================================
# Pre-compiled Regex Patterns
# =============================================================================

# Line-breaking tags
_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_BLOCK_END_RE = re.compile(r"</(?:div|p|li)>", re.IGNORECASE)
_LI_START_RE = re.compile(r"<li[^>]*>", re.IGNORECASE)

# Everything else
_HTML_TAG_RE = re.compile(r"<[^>]+>")

# Cloze patterns
_CLOZE_ANSWER_RE = re.compile(r"\{\{c\d+::(.*?)(?:::.*?)?\}\}")
_CLOZE_BLANK_RE = re.compile(r"\{\{c\d+::.*?(?:::(.*?))?\}\}")

# Whitespace normalization
_SPACES_RE = re.compile(r"[ \t\xa0]+")
_BLANK_LINES_RE = re.compile(r"\n{3,}")


def _strip_html(text: str) -> str:
    """Remove HTML tags, keeping line structure, and decode entities."""
    text = _BR_RE.sub("\n", text)
    text = _LI_START_RE.sub("• ", text)
    text = _BLOCK_END_RE.sub("\n", text)
    text = _HTML_TAG_RE.sub("", text)
    return unescape(text)


def _normalize_whitespace(text: str) -> str:
    lines = [_SPACES_RE.sub(" ", line).strip() for line in text.split("\n")]
    return _BLANK_LINES_RE.sub("\n\n", "\n".join(lines)).strip()


def _blank_cloze(match: re.Match) -> str:
    hint = match.group(1)
    return f"[{hint}]" if hint else "[...]"


# =============================================================================
# Public API
# =============================================================================


def sanitize_front(text: str) -> str:
    """Sanitize question text - hide cloze answers.

    Args:
        text: Raw card front content (may contain HTML, cloze)

    Returns:
        Terminal text with cloze answers replaced by "[...]" or their hint
    """
    if not text:
        return ""

    text = _strip_html(text)
    text = _CLOZE_BLANK_RE.sub(_blank_cloze, text)
    return _normalize_whitespace(text)


def sanitize_back(text: str) -> str:
    """Sanitize answer text - reveal cloze answers.

    Args:
        text: Raw card back content (may contain HTML, cloze)

    Returns:
        Terminal text with cloze answers revealed
    """
    if not text:
        return ""

    text = _strip_html(text)
    text = _CLOZE_ANSWER_RE.sub(r"\1", text)
    return _normalize_whitespace(text)
