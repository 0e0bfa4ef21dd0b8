"""Tests for owner-name detection, labels first and layout second."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from cv_redactor import DetectorConfig, NameDetector, TextItem, detect_candidate_name
from cv_redactor import presidio_layer


def item(text, x=50.0, y=700.0, width=None, font=12.0):
    width = len(text) * 6.0 if width is None else width
    return TextItem(text=text, x=x, y=y, width=width, height=font, font_height=font)


# ── Empty input ──────────────────────────────────────────────────────

def test_empty_input_returns_none():
    assert detect_candidate_name([]) is None


# ── Labels ───────────────────────────────────────────────────────────

def test_label_beats_bigger_text():
    items = [
        item("DIRECTOR GENERAL", x=50, y=780, font=40),
        item("Nombre:", x=50, y=700, width=40),
        item("Ana García", x=100, y=700),
    ]
    assert detect_candidate_name(items) == "Ana García"


def test_label_value_on_next_line_aligned():
    items = [
        item("Nombre", x=300, y=700),
        item("Madrid", x=50, y=680),
        item("Luis Gómez", x=310, y=680),
    ]
    assert detect_candidate_name(items) == "Luis Gómez"


def test_label_value_on_next_line_falls_back_to_first_item():
    items = [
        item("Nombre", x=300, y=700),
        item("Madrid", x=400, y=680),
        item("Luis Gómez", x=50, y=680),
    ]
    assert detect_candidate_name(items) == "Luis Gómez"


def test_inline_label():
    assert detect_candidate_name([item("Nombre: Carlos Ruiz")]) == "Carlos Ruiz"


def test_inline_label_with_space_in_label():
    assert detect_candidate_name([item("Full Name: Jane Doe")]) == "Jane Doe"


def test_inline_label_value_too_short_uses_layout():
    items = [
        item("Nombre: Al", y=700, font=10),
        item("Sofía Martín", y=750, font=24),
    ]
    assert detect_candidate_name(items) == "Sofía Martín"


# ── Layout heuristics ────────────────────────────────────────────────

def test_font_size_dominates_position():
    items = [
        item("Juan Pérez", y=700, font=20),
        item("Desarrollador Senior", y=750, font=12),
    ]
    assert detect_candidate_name(items) == "Juan Pérez"


def test_adjacent_items_merge_into_one_candidate():
    items = [
        item("María", x=100, y=720, width=40, font=22),
        item("López", x=150, y=720, width=40, font=18),
        item("Madrid", x=400, y=720, width=40, font=10),
    ]
    assert detect_candidate_name(items) == "María López"


def test_items_within_line_tolerance_share_a_line():
    items = [
        item("Ana", x=100, y=700, width=20, font=20),
        item("Ruiz", x=125, y=703, width=25, font=20),
    ]
    assert detect_candidate_name(items) == "Ana Ruiz"


def test_stop_words_never_returned():
    assert detect_candidate_name([item("Experiencia Profesional", font=30)]) is None


def test_stop_word_heading_skipped_for_name():
    items = [
        item("Curriculum Vitae", y=780, font=30),
        item("Pedro Sanz", y=700, font=14),
    ]
    assert detect_candidate_name(items) == "Pedro Sanz"


def test_emails_and_digits_rejected():
    items = [
        item("pedro@example.com", y=780, font=30),
        item("Calle Mayor 123", y=760, font=30),
        item("Pedro Sanz", y=700, font=12),
    ]
    assert detect_candidate_name(items) == "Pedro Sanz"


def test_edge_symbols_are_cleaned():
    assert detect_candidate_name([item("• Laura Vidal •", font=20)]) == "Laura Vidal"


def test_no_page_height_assumption():
    assert detect_candidate_name([item("Laura Vidal", y=100)]) == "Laura Vidal"


def test_custom_stop_words_are_injected():
    config = DetectorConfig(stop_words=["laura"])
    items = [
        item("Laura", y=750, font=30),
        item("Vidal Ortega", y=700, font=12),
    ]
    assert NameDetector(config).detect(items) == "Vidal Ortega"


def test_stop_words_are_case_insensitive():
    config = DetectorConfig(stop_words=["Experiencia"])
    items = [
        item("Experiencia", y=750, font=30),
        item("Ana Ruiz", y=700, font=12),
    ]
    assert NameDetector(config).detect(items) == "Ana Ruiz"


def test_blank_stop_word_rejects_nothing():
    config = DetectorConfig(stop_words=["", "  ", "curriculum"])
    assert NameDetector(config).detect([item("Ana Ruiz")]) == "Ana Ruiz"


def test_equal_scores_keep_first_candidate():
    items = [
        item("Eva Sanz", x=400, y=700, font=12),
        item("Ana Ruiz", x=50, y=700, font=12),
    ]
    assert detect_candidate_name(items) == "Ana Ruiz"


# ── Exact boundaries ─────────────────────────────────────────────────

def test_dy_of_five_starts_a_new_line():
    items = [
        item("Ana", x=100, y=700, width=20, font=20),
        item("Ruiz", x=125, y=705, width=25, font=20),
    ]
    assert detect_candidate_name(items) == "Ruiz"


def test_gap_of_twenty_five_is_not_merged():
    items = [
        item("María", x=100, y=720, width=40, font=22),
        item("López", x=165, y=720, width=40, font=18),
    ]
    assert detect_candidate_name(items) == "María"


def test_dx_of_fifty_is_not_aligned():
    items = [
        item("Nombre", x=300, y=700),
        item("Luis Gómez", x=50, y=680),
        item("Madrid", x=350, y=680),
    ]
    assert detect_candidate_name(items) == "Luis Gómez"


def test_dx_just_under_fifty_is_aligned():
    items = [
        item("Nombre", x=300, y=700),
        item("Luis Gómez", x=50, y=680),
        item("Madrid", x=349, y=680),
    ]
    assert detect_candidate_name(items) == "Madrid"


def test_label_at_end_of_last_line_falls_through_to_layout():
    items = [
        item("Sofía Martín", y=750, font=24),
        item("Nombre", y=700, font=12),
    ]
    assert detect_candidate_name(items) == "Sofía Martín"


# ── Presidio ranking ─────────────────────────────────────────────────

def test_presidio_prefers_person_candidates(monkeypatch):
    monkeypatch.setattr(
        presidio_layer, "is_person",
        lambda text, language="es": text == "Lucía Prieto",
    )
    items = [
        item("Senior Engineer", y=760, font=20),
        item("Lucía Prieto", y=700, font=14),
    ]
    assert detect_candidate_name(items) == "Senior Engineer"
    config = DetectorConfig(use_presidio=True)
    assert detect_candidate_name(items, config) == "Lucía Prieto"


def test_presidio_without_person_keeps_layout_choice(monkeypatch):
    monkeypatch.setattr(presidio_layer, "is_person", lambda text, language="es": False)
    items = [
        item("Senior Engineer", y=760, font=20),
        item("Lucía Prieto", y=700, font=14),
    ]
    config = DetectorConfig(use_presidio=True)
    assert detect_candidate_name(items, config) == "Senior Engineer"


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
