import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.services.formatting import derive_title, format_assistant_text


def test_empty_text_is_returned_unchanged():
    assert format_assistant_text("") == ""
    assert format_assistant_text(None) is None


def test_breaks_before_parenthesis_markers_and_sentences():
    text = "Paso 1) hacer. Paso 2) revisar."
    assert format_assistant_text(text) == "Paso\n1) hacer.\nPaso\n2) revisar."


def test_numbered_markers_without_periods():
    assert format_assistant_text("Opciones: 1) alfa 2) beta") == "Opciones:\n1) alfa\n2) beta"


def test_dot_style_markers_are_not_list_markers():
    # "1." no es marcador; sólo actúa la regla de ". "
    assert format_assistant_text("1. Uno. 2. Dos.") == "1.\nUno.\n2.\nDos."


def test_marker_without_preceding_whitespace_is_kept():
    assert format_assistant_text("Ver nota(1) abajo") == "Ver nota(1) abajo"


def test_trailing_sentence_after_last_period_is_untouched():
    assert format_assistant_text("Hola. Mundo. Fin. ") == "Hola.\nMundo.\nFin. "


def test_idempotent_on_plain_text():
    for text in ["Sin puntos ni listas", "Total: 3 artículos.", "Factura A-4521 registrada."]:
        once = format_assistant_text(text)
        assert once == text
        assert format_assistant_text(once) == once


def test_formatting_is_stable_when_applied_twice():
    once = format_assistant_text("Revisa esto. Luego 1) valida 2) envía.")
    assert format_assistant_text(once) == once


def test_derive_title_truncates_long_messages():
    text = "x" * 55
    title = derive_title(text)
    assert len(title) == 43
    assert title == "x" * 40 + "..."


def test_derive_title_keeps_short_messages():
    assert derive_title("Consulta de factura") == "Consulta de factura"
    assert derive_title("y" * 40) == "y" * 40
