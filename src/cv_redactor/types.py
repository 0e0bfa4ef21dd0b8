"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class MatchType(str, Enum):
    """Category that drives how a redaction box is obscured."""
    EMAIL = "email"
    PHONE = "phone"
    NAME = "name"
    NAME_PARTIAL = "name-partial"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class TextItem:
    """One positioned run of text, origin bottom-left, y increasing upward."""
    text: str
    x: float
    y: float
    width: float
    height: float
    font_height: float


@dataclass(frozen=True, slots=True)
class RedactionMatch:
    """A box to obscure, copied verbatim from the item that triggered it."""
    x: float
    y: float
    width: float
    height: float
    text: str
    type: MatchType

    @classmethod
    def from_item(cls, item: TextItem, match_type: MatchType) -> "RedactionMatch":
        return cls(
            x=item.x,
            y=item.y,
            width=item.width,
            height=item.height,
            text=item.text,
            type=match_type,
        )


@dataclass(frozen=True, slots=True)
class Page:
    """Extracted text of one page, as handed over by the parsing engine."""
    items: tuple[TextItem, ...]
    height: float


@dataclass(slots=True)
class PageRedactions:
    """Matches found on a single page."""
    page_index: int
    page_height: float
    matches: list[RedactionMatch] = field(default_factory=list)
