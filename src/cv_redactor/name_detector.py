"""Name detection — guess whose CV this is from the top of page 1.

Usage:
    from cv_redactor import NameDetector, DetectorConfig

    detector = NameDetector()                  # reusable, stateless
    name = detector.detect(upper_page_items)   # "Ana García" or None

Two strategies, first success wins:

1. Labels: a field name such as "Nombre:" followed by its value, either as
   the next fragment on the line, the fragment below it, or inline
   ("Nombre: Ana García").
2. Layout: merge nearby fragments on each line and pick the biggest,
   highest text that doesn't look like a heading, email or address.

The caller decides which region of the page to search; nothing here assumes
a page size.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .types import TextItem

logger = logging.getLogger(__name__)


DEFAULT_LABELS: tuple[str, ...] = (
    "nombre", "name", "candidato", "postulante", "nombres",
    "apellidos", "fullname", "full name",
)

# Section headings and boilerplate that show up in large type on CVs
DEFAULT_STOP_WORDS: tuple[str, ...] = (
    "curriculum", "vitae", "resume", "cv", "hoja", "de", "vida",
    "perfil", "profesional", "autobiografia", "datos", "personales",
    "contacto", "experiencia", "educación", "formación", "información",
    "personal", "laboral", "académica", "sobre", "mí", "mi", "resumen",
)

_LABEL_PUNCT = re.compile(r"[:.]")
_EDGE_NON_LETTERS = re.compile(r"^[^a-zA-Z]+|[^a-zA-Z]+$")
_DIGIT = re.compile(r"\d", re.ASCII)


@dataclass
class DetectorConfig:
    """Heuristic data for the name detector."""
    labels: list[str] = field(default_factory=lambda: list(DEFAULT_LABELS))
    stop_words: list[str] = field(default_factory=lambda: list(DEFAULT_STOP_WORDS))
    line_tolerance: float = 5.0       # max |dy| for two items to share a line
    label_x_tolerance: float = 50.0   # label/value alignment across lines
    merge_gap: float = 25.0           # max horizontal gap inside one candidate
    font_weight: float = 100.0
    y_weight: float = 1.0
    min_length: int = 3
    # Rank heuristic candidates that Presidio tags as PERSON first
    use_presidio: bool = False
    language: str = "es"


@dataclass
class _Line:
    y: float
    items: list[TextItem] = field(default_factory=list)


@dataclass
class _Candidate:
    text: str
    font_height: float
    y: float


class NameDetector:
    """Label-first, layout-second detector for the document owner's name."""

    def __init__(self, config: DetectorConfig | None = None) -> None:
        self.config = config or DetectorConfig()
        self._label_set = {label.lower() for label in self.config.labels}
        self._stop_words = [w.strip().lower() for w in self.config.stop_words if w.strip()]
        self._inline_labels = [
            re.compile(rf"^{re.escape(label)}\s*[:.]?\s+", re.IGNORECASE)
            for label in self.config.labels
        ]

    def detect(self, items: Sequence[TextItem]) -> str | None:
        """Return the best-guess owner name, or None."""
        if not items:
            return None

        lines = self._group_lines(items)

        found, value = self._detect_by_label(lines)
        if found:
            logger.debug("name from label: %r", value)
            return value or None

        return self._detect_by_layout(lines)

    # ------------------------------------------------------------------
    # Lines
    # ------------------------------------------------------------------

    def _group_lines(self, items: Iterable[TextItem]) -> list[_Line]:
        lines: list[_Line] = []
        for item in items:
            line = next(
                (ln for ln in lines if abs(ln.y - item.y) < self.config.line_tolerance),
                None,
            )
            if line is None:
                line = _Line(y=item.y)
                lines.append(line)
            line.items.append(item)

        # PDF y grows upward, so descending y reads top to bottom
        lines.sort(key=lambda ln: ln.y, reverse=True)
        for line in lines:
            line.items.sort(key=lambda it: it.x)
        return lines

    # ------------------------------------------------------------------
    # Strategy 1: labels
    # ------------------------------------------------------------------

    def _detect_by_label(self, lines: list[_Line]) -> tuple[bool, str | None]:
        """Return (found, value). ``found`` stops the search even if value is empty."""
        for i, line in enumerate(lines):
            for j, item in enumerate(line.items):
                text = item.text.strip()
                normalized = _LABEL_PUNCT.sub("", text.lower())

                # "Nombre" on its own, value to the right or on the next line
                if normalized in self._label_set:
                    if j + 1 < len(line.items):
                        return True, line.items[j + 1].text.strip()
                    if i + 1 < len(lines):
                        value = self._aligned_value(item, lines[i + 1])
                        return True, value.text.strip()

                # "Nombre: Ana García" in one fragment
                for pattern in self._inline_labels:
                    if pattern.match(text):
                        value = pattern.sub("", text, count=1).strip()
                        if len(value) > 2:
                            return True, value
        return False, None

    def _aligned_value(self, label: TextItem, next_line: _Line) -> TextItem:
        for candidate in next_line.items:
            if abs(candidate.x - label.x) < self.config.label_x_tolerance:
                return candidate
        return next_line.items[0]

    # ------------------------------------------------------------------
    # Strategy 2: layout heuristics
    # ------------------------------------------------------------------

    def _merge_candidates(self, lines: list[_Line]) -> list[_Candidate]:
        candidates: list[_Candidate] = []
        for line in lines:
            if not line.items:
                continue
            first = line.items[0]
            merged = first.text
            font_height = first.font_height
            x_end = first.x + first.width

            for item in line.items[1:]:
                if item.x - x_end < self.config.merge_gap:
                    merged += " " + item.text
                    font_height = max(font_height, item.font_height)
                else:
                    candidates.append(_Candidate(merged, font_height, line.y))
                    merged = item.text
                    font_height = item.font_height
                x_end = item.x + item.width

            candidates.append(_Candidate(merged, font_height, line.y))
        return candidates

    def _clean(self, candidate: _Candidate) -> str | None:
        """Return the cleaned text if the candidate could be a name."""
        text = candidate.text.strip()
        lower = text.lower()

        if len(text) < self.config.min_length:
            return None
        if "@" in lower:
            return None
        if _DIGIT.search(text):
            return None

        words = lower.split()
        if all(any(sw in w for sw in self._stop_words) for w in words):
            return None

        cleaned = _EDGE_NON_LETTERS.sub("", text)
        if len(cleaned) < self.config.min_length:
            return None
        return cleaned

    def _score(self, candidate: _Candidate) -> float:
        return candidate.font_height * self.config.font_weight + candidate.y * self.config.y_weight

    def _detect_by_layout(self, lines: list[_Line]) -> str | None:
        scored: list[tuple[float, str]] = []
        for candidate in self._merge_candidates(lines):
            cleaned = self._clean(candidate)
            if cleaned is not None:
                scored.append((self._score(candidate), cleaned))

        if self.config.use_presidio and scored:
            from .presidio_layer import is_person
            persons = [s for s in scored if is_person(s[1], language=self.config.language)]
            if persons:
                scored = persons
            else:
                logger.debug("presidio found no PERSON among %d candidates", len(scored))

        best = _best(scored)
        logger.debug("name from layout: %r (%d candidates)", best, len(scored))
        return best


def _best(scored: list[tuple[float, str]]) -> str | None:
    """Highest score wins; the earliest candidate wins ties."""
    best: str | None = None
    max_score = float("-inf")
    for score, text in scored:
        if score > max_score:
            max_score = score
            best = text
    return best


def detect_candidate_name(
    items: Sequence[TextItem],
    config: DetectorConfig | None = None,
) -> str | None:
    """Detect the document owner's name from (usually upper page 1) items."""
    return NameDetector(config).detect(items)
