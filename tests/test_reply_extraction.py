import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.services.reply_extraction import (
    REPLY_FIELDS,
    extract_reply,
    field_strategy,
    plain_string,
)


def test_output_field_wins():
    assert extract_reply({"output": "hola"}) == "hola"


def test_fields_are_probed_in_order():
    body = {"answer": "f", "reply": "e", "message": "d", "text": "c", "response": "b"}
    assert extract_reply(body) == "b"
    assert REPLY_FIELDS == ["output", "response", "text", "message", "reply", "answer"]


def test_empty_fields_fall_through():
    assert extract_reply({"output": "", "answer": "respuesta"}) == "respuesta"


def test_plain_string_body():
    assert extract_reply("texto plano") == "texto plano"


def test_unknown_shape_is_serialized():
    assert extract_reply({"foo": 1, "año": 2026}) == '{"foo": 1, "año": 2026}'
    assert extract_reply([{"output": "x"}]) == '[{"output": "x"}]'


def test_non_string_field_values_are_ignored():
    assert extract_reply({"output": {"nested": True}, "text": "ok"}) == "ok"


def test_custom_strategy_list():
    strategies = [field_strategy("data"), plain_string]
    assert extract_reply({"data": "x"}, strategies) == "x"
    assert extract_reply({"output": "y"}, strategies) == ""
