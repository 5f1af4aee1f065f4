"""
Extracción de la respuesta del webhook.

El flujo de automatización puede devolver distintas formas de JSON; se prueban
estrategias en orden y gana la primera que devuelva texto.
"""

import json
from typing import Any, Callable, List, Optional

ReplyStrategy = Callable[[Any], Optional[str]]

REPLY_FIELDS = ["output", "response", "text", "message", "reply", "answer"]


def field_strategy(name: str) -> ReplyStrategy:
    def extract(body: Any) -> Optional[str]:
        if not isinstance(body, dict):
            return None
        value = body.get(name)
        if isinstance(value, str) and value:
            return value
        return None

    extract.__name__ = f"field_{name}"
    return extract


def plain_string(body: Any) -> Optional[str]:
    return body if isinstance(body, str) else None


def serialized_body(body: Any) -> Optional[str]:
    return json.dumps(body, ensure_ascii=False)


REPLY_STRATEGIES: List[ReplyStrategy] = [field_strategy(name) for name in REPLY_FIELDS] + [
    plain_string,
    serialized_body,
]


def extract_reply(body: Any, strategies: Optional[List[ReplyStrategy]] = None) -> str:
    for strategy in strategies or REPLY_STRATEGIES:
        reply = strategy(body)
        if reply is not None:
            return reply
    return ""
