"""Redaction matcher — classify every text fragment on a page.

Each fragment is checked against an ordered list of rules:

    custom keyword   →  may fire alongside any of the rules below
    email            ─┐
    phone             ├  first one that fires wins
    name / partial   ─┘

A fired rule copies the whole fragment's box; no sub-span boxes are ever
computed, so "Contacto: Ana García" is covered entirely.
"""

from __future__ import annotations
import logging
from typing import Callable, Iterable, Optional, Sequence

from .patterns import is_email, is_phone
from .types import MatchType, RedactionMatch, TextItem

logger = logging.getLogger(__name__)

# (lower-cased text, original text) -> tag or None
Rule = Callable[[str, str], Optional[MatchType]]


def prepare_keywords(custom_words: Iterable[str]) -> list[str]:
    """Trim and lower-case keywords, dropping empty ones."""
    if isinstance(custom_words, str):
        custom_words = [custom_words]
    return [w for w in (word.strip().lower() for word in custom_words) if w]


def name_parts(candidate_name: str | None) -> list[str]:
    """Lower-cased parts of a name long enough to match on their own."""
    if not candidate_name:
        return []
    return [p.lower() for p in candidate_name.split() if len(p) >= 3]


class RedactionMatcher:
    """Stateless per-fragment classifier, prepared once per document."""

    def __init__(
        self,
        candidate_name: str | None = None,
        custom_words: Iterable[str] = (),
    ) -> None:
        self.candidate_name = candidate_name or None
        self.keywords = prepare_keywords(custom_words)
        self._full_name = self.candidate_name.lower() if self.candidate_name else ""
        self._name_parts = name_parts(self.candidate_name)

        self._rules: list[Rule] = [
            lambda lower, text: MatchType.EMAIL if is_email(text) else None,
            lambda lower, text: MatchType.PHONE if is_phone(text) else None,
        ]
        if self.candidate_name:
            self._rules.append(self._match_name)

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def _match_custom(self, lower: str) -> MatchType | None:
        for word in self.keywords:
            if word in lower:
                return MatchType.CUSTOM
        return None

    def _match_name(self, lower: str, text: str) -> MatchType | None:
        if self._full_name in lower:
            return MatchType.NAME
        for part in self._name_parts:
            if part in lower:
                return MatchType.NAME_PARTIAL
        return None

    # ------------------------------------------------------------------
    # API
    # ------------------------------------------------------------------

    def classify(self, item: TextItem) -> list[MatchType]:
        """Return the tags for one fragment, custom first."""
        text = item.text
        lower = text.lower()
        tags: list[MatchType] = []

        custom = self._match_custom(lower)
        if custom is not None:
            tags.append(custom)

        for rule in self._rules:
            tag = rule(lower, text)
            if tag is not None:
                tags.append(tag)
                break
        return tags

    def match_page(
        self,
        items: Sequence[TextItem],
        page_index: int = 0,
        page_height: float = 0.0,
    ) -> list[RedactionMatch]:
        """Return matches for a page in item order."""
        matches = [
            RedactionMatch.from_item(item, tag)
            for item in items
            for tag in self.classify(item)
        ]
        logger.debug(
            "page %d (height %.1f): %d matches from %d items",
            page_index, page_height, len(matches), len(items),
        )
        return matches


def identify_redactions(
    items: Sequence[TextItem],
    page_index: int,
    page_height: float,
    candidate_name: str | None = None,
    custom_words: Iterable[str] = (),
) -> list[RedactionMatch]:
    """Classify every item on a page into redaction matches."""
    matcher = RedactionMatcher(candidate_name, custom_words)
    return matcher.match_page(items, page_index, page_height)
