"""Regex patterns for the structured PII found in CVs: emails and phones.

Patterns are searched, not anchored, so a fragment like
"Tel: 612 345 678" still counts as a phone.
"""

from __future__ import annotations
import re

from .types import MatchType

# \b and \d are ASCII-only: "maría.garcía@example.com" still yields an email
EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}\b", re.ASCII)

# Spanish numbers: optional +34 / 0034, first digit 6-9, then 8 digits that
# may be separated by a space, dot or hyphen.
SPANISH_PHONE_RE = re.compile(r"(?:(?:\+|00)34[\s.\-]?)?[6789](?:[\s.\-]?\d){8}", re.ASCII)

INTERNATIONAL_PHONE_RE = re.compile(r"\+(?:[0-9] ?){6,14}[0-9]", re.ASCII)

_PHONE_PATTERNS: list[re.Pattern] = [SPANISH_PHONE_RE, INTERNATIONAL_PHONE_RE]


def is_email(text: str) -> bool:
    return EMAIL_RE.search(text) is not None


def is_phone(text: str) -> bool:
    return any(p.search(text) for p in _PHONE_PATTERNS)


def classify_contact(text: str) -> MatchType | None:
    """Return EMAIL or PHONE for a fragment, email taking precedence."""
    if is_email(text):
        return MatchType.EMAIL
    if is_phone(text):
        return MatchType.PHONE
    return None
