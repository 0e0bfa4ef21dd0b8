"""Overlay plan — what the authoring engine should draw over each match.

Nothing here touches a document.  The authoring side draws an opaque
cover over ``Overlay.box`` and writes ``Overlay.mask`` at the match origin,
in the match's own coordinate space.
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from .types import MatchType, PageRedactions, RedactionMatch

HEADER_TITLE = "CV Anonimizado"


@dataclass(frozen=True, slots=True)
class Overlay:
    """Drawing instruction for one redaction match."""
    box: tuple[float, float, float, float]  # x, y, width, height
    mask: str
    origin: tuple[float, float]
    type: MatchType


def cover_box(match: RedactionMatch, margin: float = 2.0) -> tuple[float, float, float, float]:
    """Match box grown vertically by ``margin`` on both sides."""
    return (match.x, match.y - margin, match.width, match.height + 2 * margin)


def mask_text(match: RedactionMatch, char_width: float = 6.0, glyph: str = "#") -> str:
    """A run of glyphs roughly as wide as the match."""
    if char_width <= 0:
        raise ValueError(f"char_width must be positive, got {char_width}")
    return glyph * max(1, math.floor(match.width / char_width))


def plan_overlays(
    page: PageRedactions,
    *,
    margin: float = 2.0,
    char_width: float = 6.0,
) -> list[Overlay]:
    """One overlay per match, in match order."""
    return [
        Overlay(
            box=cover_box(m, margin),
            mask=mask_text(m, char_width),
            origin=(m.x, m.y),
            type=m.type,
        )
        for m in page.matches
    ]


def get_initials(name: str) -> str:
    """'Ana María García' -> 'AMG'."""
    return "".join(part[0] for part in name.split(" ") if part).upper()


def header_text(candidate_name: str | None) -> str:
    """Title stamped above each anonymized page."""
    if candidate_name:
        return f"{HEADER_TITLE} - {get_initials(candidate_name)}"
    return HEADER_TITLE
