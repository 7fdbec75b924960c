"""PII redaction: emails, phone-like digit runs, demographic and identity terms."""

import re

REDACT_TERMS = [
    "male", "female", "man", "woman", "men", "women", "boy", "girl", "mr", "mrs", "ms",
    "he", "she", "him", "her", "his", "hers", "mother", "father", "husband", "wife",
    "married", "single", "divorced", "age", "aged", "years old", "birthday",
    "religion", "christian", "muslim", "hindu", "jewish", "buddhist", "sikh",
    "white", "black", "asian", "latino", "hispanic", "native", "indigenous",
    "citizenship", "nationality", "veteran", "disability", "disabled",
]

EMAIL_RE = re.compile(r"[\w.-]+@[\w.-]+")
PHONE_RE = re.compile(r"\+?\d[\d\s-]{7,}")
TERMS_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(term) for term in REDACT_TERMS) + r")\b",
    re.IGNORECASE,
)


def _redact_once(text: str) -> str:
    text = EMAIL_RE.sub(" ", text)
    text = PHONE_RE.sub(" ", text)
    return TERMS_RE.sub(" ", text)


def redact_pii(text: str) -> str:
    """
    Replace PII with single spaces.

    Repeats until nothing changes: removing a term can join two digit runs into
    a new phone-like match. Every substitution shortens the text, so this ends.
    """
    while True:
        redacted = _redact_once(text)
        if redacted == text:
            return redacted
        text = redacted
