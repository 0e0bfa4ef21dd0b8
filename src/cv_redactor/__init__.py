"""cv-redactor — find names, emails, phones and keywords to hide in CVs."""

from .types import MatchType, Page, PageRedactions, RedactionMatch, TextItem
from .name_detector import DetectorConfig, NameDetector, detect_candidate_name
from .matcher import RedactionMatcher, identify_redactions
from .pipeline import (
    DocumentRedactions, DocumentRedactor, PipelineConfig,
    parse_custom_words, redact_document,
)
from .overlay import Overlay, get_initials, header_text, plan_overlays
from .config import create_pipeline_config, create_redactor, load_config, load_from_yaml

__all__ = [
    "TextItem", "RedactionMatch", "MatchType", "Page", "PageRedactions",
    "NameDetector", "DetectorConfig", "detect_candidate_name",
    "RedactionMatcher", "identify_redactions",
    "DocumentRedactor", "DocumentRedactions", "PipelineConfig",
    "parse_custom_words", "redact_document",
    "Overlay", "plan_overlays", "get_initials", "header_text",
    "create_pipeline_config", "create_redactor", "load_config", "load_from_yaml",
]
__version__ = "0.1.0"
