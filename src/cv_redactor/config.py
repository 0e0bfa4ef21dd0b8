"""YAML/dict config loader for cv-redactor.

Supports loading from a YAML file or a plain dict (for embedding in a
larger application config).

Example YAML:

    cv_redactor:
      custom_words:
        - Acme Corp
        - Confidencial
      upper_region_cutoff: 400
      max_workers: 4
      detector:
        labels: [nombre, name, candidato]
        stop_words: [curriculum, vitae, experiencia]
        line_tolerance: 5
        label_x_tolerance: 50
        merge_gap: 25
        font_weight: 100
        y_weight: 1
        use_presidio: false
        language: es
      overlay:
        margin: 2
        char_width: 6
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

from .name_detector import DEFAULT_LABELS, DEFAULT_STOP_WORDS, DetectorConfig
from .pipeline import DocumentRedactor, PipelineConfig

_NON_NEGATIVE = ("line_tolerance", "label_x_tolerance", "merge_gap")


def _string_list(data: dict[str, Any], key: str, default: Any) -> list[str]:
    value = data.get(key, default)
    if isinstance(value, str) or not isinstance(value, (list, tuple, set)):
        raise ValueError(f"{key} must be a list of strings, got {type(value).__name__}")
    return [str(v) for v in value]


def load_config(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    # Support nested under "cv_redactor" key or flat
    if "cv_redactor" in data:
        data = data["cv_redactor"] or {}

    detector = data.get("detector") or {}
    overlay = data.get("overlay") or {}

    cfg = {
        "custom_words": _string_list(data, "custom_words", []),
        "upper_region_cutoff": float(data.get("upper_region_cutoff", 400)),
        "max_workers": int(data.get("max_workers", 1)),
        "labels": _string_list(detector, "labels", DEFAULT_LABELS),
        "stop_words": _string_list(detector, "stop_words", DEFAULT_STOP_WORDS),
        "line_tolerance": float(detector.get("line_tolerance", 5)),
        "label_x_tolerance": float(detector.get("label_x_tolerance", 50)),
        "merge_gap": float(detector.get("merge_gap", 25)),
        "font_weight": float(detector.get("font_weight", 100)),
        "y_weight": float(detector.get("y_weight", 1)),
        "use_presidio": bool(detector.get("use_presidio", False)),
        "language": detector.get("language", "es"),
        "overlay_margin": float(overlay.get("margin", 2)),
        "overlay_char_width": float(overlay.get("char_width", 6)),
    }

    for key in _NON_NEGATIVE:
        if cfg[key] < 0:
            raise ValueError(f"{key} must be >= 0, got {cfg[key]}")
    if cfg["overlay_char_width"] <= 0:
        raise ValueError(f"overlay.char_width must be > 0, got {cfg['overlay_char_width']}")
    if cfg["max_workers"] < 1:
        raise ValueError(f"max_workers must be >= 1, got {cfg['max_workers']}")
    return cfg


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml  # optional dependency
    with open(path) as f:
        return load_config(yaml.safe_load(f) or {})


def create_pipeline_config(config: dict[str, Any]) -> PipelineConfig:
    """Build a PipelineConfig from a raw or already-normalized config dict."""
    cfg = config if "labels" in config else load_config(config)

    detector = DetectorConfig(
        labels=cfg["labels"],
        stop_words=cfg["stop_words"],
        line_tolerance=cfg["line_tolerance"],
        label_x_tolerance=cfg["label_x_tolerance"],
        merge_gap=cfg["merge_gap"],
        font_weight=cfg["font_weight"],
        y_weight=cfg["y_weight"],
        use_presidio=cfg["use_presidio"],
        language=cfg["language"],
    )
    return PipelineConfig(
        custom_words=cfg["custom_words"],
        upper_region_cutoff=cfg["upper_region_cutoff"],
        max_workers=cfg["max_workers"],
        detector=detector,
        overlay_margin=cfg["overlay_margin"],
        overlay_char_width=cfg["overlay_char_width"],
    )


def create_redactor(config: dict[str, Any]) -> DocumentRedactor:
    """Create a fully configured DocumentRedactor from a config dict."""
    return DocumentRedactor(create_pipeline_config(config))
