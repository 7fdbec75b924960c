"""Lexical normalization: lowercase, redact, strip punctuation, drop stopwords."""

import re
from collections import Counter

from ranking.pipeline.redact import redact_pii

STOPWORDS = frozenset({
    "a", "an", "the", "and", "or", "but", "if", "then", "else", "for", "to", "of",
    "in", "on", "at", "by", "with", "from", "as", "is", "are", "was", "were", "be",
    "been", "this", "that", "these", "those", "it", "its", "we", "our", "you", "your",
    "they", "their", "i", "me", "my", "he", "she", "him", "her", "them", "us", "can",
    "could", "should", "would", "will", "may", "might", "not", "no", "yes", "do",
    "does", "did",
})

# Keeps + and # so "c++" and "c#" survive as tokens.
NON_WORD_RE = re.compile(r"[^a-z0-9\s+#]")


def tokenize(text: str) -> list[str]:
    return text.split()


def normalize_text(text: str) -> str:
    """Return the space-joined, order-preserving token stream used for matching."""
    lowered = redact_pii(text.lower())
    stripped = NON_WORD_RE.sub(" ", lowered)
    return " ".join(tok for tok in tokenize(stripped) if tok not in STOPWORDS)


def top_terms(normalized: str, max_terms: int = 25) -> list[str]:
    """Most frequent non-stopword tokens; ties broken alphabetically."""
    freq = Counter(tok for tok in tokenize(normalized) if tok not in STOPWORDS)
    ordered = sorted(freq.items(), key=lambda kv: (-kv[1], kv[0]))
    return [term for term, _ in ordered[:max_terms]]
