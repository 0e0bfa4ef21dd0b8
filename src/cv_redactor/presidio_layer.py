"""Optional NER check for heuristic name candidates.

The layout heuristics pick the largest, highest line on the page, which is
sometimes a job title rather than a person.  When enabled, Presidio (spaCy
under the hood) is asked whether a candidate reads as a PERSON.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from presidio_analyzer import AnalyzerEngine

# Lazy singleton, spaCy only loads on first use
_engine: AnalyzerEngine | None = None
_engine_lang: str = ""

# spaCy model per language; CVs handled here are mostly Spanish
_MODELS = {
    "en": "en_core_web_sm",
    "es": "es_core_news_sm",
}


def _get_engine(language: str = "es") -> AnalyzerEngine:
    """Lazy-init the Presidio analyzer engine."""
    global _engine, _engine_lang
    if _engine is None or _engine_lang != language:
        from presidio_analyzer import AnalyzerEngine
        from presidio_analyzer.nlp_engine import NlpEngineProvider

        model_name = _MODELS.get(language, f"{language}_core_news_sm")
        provider = NlpEngineProvider(nlp_configuration={
            "nlp_engine_name": "spacy",
            "models": [{"lang_code": language, "model_name": model_name}],
        })
        nlp_engine = provider.create_engine()
        _engine = AnalyzerEngine(nlp_engine=nlp_engine, supported_languages=[language])
        _engine_lang = language
    return _engine


def is_person(
    text: str,
    *,
    language: str = "es",
    score_threshold: float = 0.35,
) -> bool:
    """True if Presidio finds a PERSON entity covering most of ``text``."""
    engine = _get_engine(language)
    results = engine.analyze(
        text=text,
        language=language,
        entities=["PERSON"],
        score_threshold=score_threshold,
    )
    stripped = len(text.strip())
    # A short PERSON hit inside a long heading does not make it a name
    return any((r.end - r.start) * 2 >= stripped for r in results)
