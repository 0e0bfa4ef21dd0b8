"""Document pipeline — detect the owner's name once, then match every page.

Usage:
    from cv_redactor import DocumentRedactor, Page, TextItem

    redactor = DocumentRedactor()
    result = redactor.redact(pages, custom_words=["Acme"])
    for page in result.pages:
        for match in page.matches:
            ...                       # hand over to the authoring engine

Name detection only reads page 1, restricted to its upper region.  Page
matching depends on nothing else, so pages can be matched in parallel.
"""

from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .matcher import RedactionMatcher
from .name_detector import DetectorConfig, NameDetector
from .overlay import Overlay, header_text, plan_overlays
from .types import Page, PageRedactions, TextItem

logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """Configuration for the DocumentRedactor."""
    custom_words: list[str] = field(default_factory=list)
    # Only page-1 items above this y are searched for the name
    upper_region_cutoff: float = 400.0
    max_workers: int = 1              # >1 matches pages on a thread pool
    detector: DetectorConfig = field(default_factory=DetectorConfig)
    overlay_margin: float = 2.0
    overlay_char_width: float = 6.0


@dataclass(slots=True)
class DocumentRedactions:
    """Result of redacting a whole document."""
    candidate_name: str | None
    pages: list[PageRedactions] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(len(p.matches) for p in self.pages)

    @property
    def header(self) -> str:
        return header_text(self.candidate_name)

    def summary(self) -> list[dict]:
        """Flat list of what was hidden, with 1-based page numbers."""
        return [
            {"text": m.text, "type": m.type.value, "page": p.page_index + 1}
            for p in self.pages
            for m in p.matches
        ]


def parse_custom_words(raw: str) -> list[str]:
    """Split a comma-separated keyword string: 'Acme, Secreto' -> ['Acme', 'Secreto']."""
    return [w.strip() for w in raw.split(",") if w.strip()]


def upper_region(items: Iterable[TextItem], cutoff: float) -> list[TextItem]:
    return [item for item in items if item.y > cutoff]


class DocumentRedactor:
    """Runs name detection and page matching over a whole document."""

    def __init__(self, config: PipelineConfig | None = None) -> None:
        self.config = config or PipelineConfig()
        self.detector = NameDetector(self.config.detector)

    def detect_name(self, pages: Sequence[Page]) -> str | None:
        """Detect the owner's name from the upper region of page 1."""
        if not pages:
            return None
        items = upper_region(pages[0].items, self.config.upper_region_cutoff)
        return self.detector.detect(items)

    def redact(
        self,
        pages: Sequence[Page],
        custom_words: Iterable[str] = (),
    ) -> DocumentRedactions:
        """Identify redactions on every page, returned in page order."""
        candidate_name = self.detect_name(pages)
        if isinstance(custom_words, str):
            custom_words = [custom_words]
        words = [*self.config.custom_words, *custom_words]
        matcher = RedactionMatcher(candidate_name, words)
        logger.debug("candidate name: %r, %d keywords", candidate_name, len(matcher.keywords))

        def match(index: int) -> PageRedactions:
            page = pages[index]
            return PageRedactions(
                page_index=index,
                page_height=page.height,
                matches=matcher.match_page(page.items, index, page.height),
            )

        if self.config.max_workers > 1 and len(pages) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
                results = list(pool.map(match, range(len(pages))))
        else:
            results = [match(i) for i in range(len(pages))]

        result = DocumentRedactions(candidate_name=candidate_name, pages=results)
        logger.info("redacted %d regions across %d pages", result.total, len(results))
        return result

    def overlays(self, page: PageRedactions) -> list[Overlay]:
        return plan_overlays(
            page,
            margin=self.config.overlay_margin,
            char_width=self.config.overlay_char_width,
        )


def redact_document(
    pages: Sequence[Page],
    custom_words: Iterable[str] = (),
    config: PipelineConfig | None = None,
) -> DocumentRedactions:
    """Convenience wrapper around DocumentRedactor.redact."""
    return DocumentRedactor(config).redact(pages, custom_words)
