import re

TITLE_MAX_LENGTH = 40

# Marcador de lista numerada "1)", "12)" precedido de espacio en blanco
NUMBERED_MARKER = re.compile(r"\s+(\d+\))")


def format_assistant_text(text: str) -> str:
    """
    Normaliza la respuesta del asistente para mostrarla en el chat:
    1) salto de línea antes de cada marcador "<n>)" precedido de espacio
    2) salto de línea tras cada ". " anterior al último punto; la frase final
       (desde el último punto) se deja intacta
    """
    if not text:
        return text
    text = NUMBERED_MARKER.sub(r"\n\1", text)
    last_period = text.rfind(".")
    if last_period == -1:
        return text
    head, tail = text[:last_period], text[last_period:]
    return head.replace(". ", ".\n") + tail


def derive_title(text: str) -> str:
    if len(text) > TITLE_MAX_LENGTH:
        return text[:TITLE_MAX_LENGTH] + "..."
    return text
