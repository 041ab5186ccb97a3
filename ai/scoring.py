import string
from typing import Protocol, Sequence

from constants import MIN_TOKEN_LENGTH


def tokenize_query(query: str) -> list[str]:
    """Split a query into distinct searchable keywords.

    Tokens are split on whitespace, stripped of surrounding punctuation and
    dropped when MIN_TOKEN_LENGTH characters or shorter. Duplicates are
    removed case-insensitively, keeping the first occurrence.

    Args:
        query: The raw query text.

    Returns:
        The keywords in query order.

    """
    tokens: list[str] = []
    seen: set[str] = set()
    for raw in query.split():
        token = raw.strip(string.punctuation)
        if len(token) <= MIN_TOKEN_LENGTH or token.lower() in seen:
            continue
        seen.add(token.lower())
        tokens.append(token)
    return tokens


class Scorer(Protocol):
    def score(self, tokens: Sequence[str], content: str) -> int: ...


class KeywordPresenceScorer:
    """Number of distinct keywords contained in the content."""

    def score(self, tokens: Sequence[str], content: str) -> int:
        lowered = content.lower()
        return sum(1 for token in tokens if token.lower() in lowered)


class TermFrequencyScorer:
    """Total number of keyword occurrences in the content."""

    def score(self, tokens: Sequence[str], content: str) -> int:
        lowered = content.lower()
        return sum(lowered.count(token.lower()) for token in tokens)
