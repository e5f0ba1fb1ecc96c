# src/game_domain/domain/services/search_query_service.py
"""Search query normalization: detects the OR keyword and cleans the term string."""

import re

from src.common.dtos.game_dtos import SearchMode

_OR_KEYWORD_RE = re.compile(r"\bOR\b", re.IGNORECASE)
_WHITESPACE_RUN_RE = re.compile(r"\s+")


def contains_or_keyword(text: str) -> bool:
    """True when text contains "or" as a whole word, in any letter case."""
    return _OR_KEYWORD_RE.search(text) is not None


def parse_search_terms(text: str) -> tuple[str, SearchMode]:
    """
    Splits a raw query into the term string sent to the store and the search mode.

    With a whole-word OR present the mode is OR, every OR is removed and
    whitespace is collapsed and trimmed. Otherwise the mode is AND and the
    text is returned untouched.
    """
    if not contains_or_keyword(text):
        return text, SearchMode.AND

    terms = _OR_KEYWORD_RE.sub(" ", text)
    terms = _WHITESPACE_RUN_RE.sub(" ", terms).strip()
    return terms, SearchMode.OR
